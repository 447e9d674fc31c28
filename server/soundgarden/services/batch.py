# ─────────────────────────────────────────────────────────────────────────────
# Batch Orchestrator — N items as sequential batches of concurrent calls
# ─────────────────────────────────────────────────────────────────────────────
# quantity 7, batch_size 3 → [3, 3, 1]: each batch runs concurrently under
# asyncio.gather, batches run one after another with a cooldown between
# them so the external API never sees a burst larger than batch_size.
# A failed slot becomes an error string; it never aborts its siblings
# or later batches.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import structlog

from soundgarden.exceptions import BatchTotalFailureError, GenerationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class BatchResult(Generic[T]):
    """Accumulated successes and per-item failure messages."""

    items: list[T] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def total_failure(self) -> bool:
        return not self.items and bool(self.errors)

    def raise_for_total_failure(self, kind: str) -> None:
        """Escalate when nothing succeeded. Partial failure is still a result."""
        if self.total_failure:
            raise BatchTotalFailureError(kind, self.errors)


def _describe_failure(exc: BaseException) -> str:
    if isinstance(exc, GenerationError):
        return exc.message
    return f"{type(exc).__name__}: {exc}"


class BatchOrchestrator:
    """Fulfils a "generate N" request while tolerating partial failure."""

    def __init__(
        self,
        batch_size: int = 3,
        cooldown_seconds: float = 1.0,
        max_quantity: int = 10,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if max_quantity < 1:
            raise ValueError("max_quantity must be at least 1")
        self.batch_size = batch_size
        self.cooldown_seconds = cooldown_seconds
        self.max_quantity = max_quantity
        self._sleep = sleep

    def clamp_quantity(self, quantity: int) -> int:
        return max(1, min(quantity, self.max_quantity))

    def partition(self, quantity: int) -> list[int]:
        """Batch sizes for an already-clamped quantity."""
        full, rest = divmod(quantity, self.batch_size)
        return [self.batch_size] * full + ([rest] if rest else [])

    async def run(self, produce: Callable[[], Awaitable[T]], quantity: int) -> BatchResult[T]:
        """Call produce() quantity times (clamped), batch by batch."""
        result: BatchResult[T] = BatchResult()
        batches = self.partition(self.clamp_quantity(quantity))

        for index, size in enumerate(batches):
            if index > 0 and self.cooldown_seconds > 0:
                await self._sleep(self.cooldown_seconds)

            outcomes = await asyncio.gather(
                *(produce() for _ in range(size)),
                return_exceptions=True,
            )
            for outcome in outcomes:
                if isinstance(outcome, Exception):
                    if not isinstance(outcome, GenerationError):
                        logger.error(
                            "batch_slot_unexpected_error",
                            error=str(outcome),
                            error_type=type(outcome).__name__,
                            exc_info=outcome,
                        )
                    result.errors.append(_describe_failure(outcome))
                elif isinstance(outcome, BaseException):
                    # Cancellation and interpreter exits are not item failures.
                    raise outcome
                else:
                    result.items.append(outcome)

            logger.info(
                "batch_completed",
                batch=index + 1,
                batches=len(batches),
                size=size,
                succeeded=result.total,
                failed=len(result.errors),
            )

        return result
