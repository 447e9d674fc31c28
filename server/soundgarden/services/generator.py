# Content generator: prompt pair → completion → JSON → field table → typed spec.
# One external call per generate(). No retries and no memory between calls.


import asyncio
import time

import structlog
from opentelemetry import trace
from pydantic import BaseModel

from soundgarden.clients.completion import CompletionClient
from soundgarden.content import KindDefinition
from soundgarden.exceptions import (
    CompletionTimeoutError,
    CompletionTransportError,
    ResponseDecodeError,
    SpecValidationError,
)
from soundgarden.services.decoding import decode_object
from soundgarden.services.metrics import GenerationMetrics

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)


class ContentGenerator:
    """Produces exactly one validated spec of its kind, or raises a GenerationError."""

    def __init__(
        self,
        definition: KindDefinition,
        client: CompletionClient,
        timeout_seconds: float = 30.0,
        metrics: GenerationMetrics | None = None,
    ) -> None:
        self._definition = definition
        self._client = client
        self._timeout = timeout_seconds
        self._metrics = metrics

    @property
    def kind(self) -> str:
        return str(self._definition.kind)

    async def generate(self) -> BaseModel:
        with tracer.start_as_current_span("generate_content") as span:
            span.set_attribute("kind", self.kind)
            start = time.perf_counter()
            try:
                spec = await self._generate()
            except SpecValidationError:
                self._record("validation_failed", start)
                span.set_attribute("outcome", "validation_failed")
                raise
            except ResponseDecodeError:
                self._record("decode_failed", start)
                span.set_attribute("outcome", "decode_failed")
                raise
            except CompletionTransportError:
                self._record("transport_failed", start)
                span.set_attribute("outcome", "transport_failed")
                raise
            self._record("success", start)
            span.set_attribute("outcome", "success")
            return spec

    async def _generate(self) -> BaseModel:
        definition = self._definition
        kind = self.kind

        try:
            text = await asyncio.wait_for(
                self._client.complete(definition.system_prompt, definition.user_prompt, kind=kind),
                timeout=self._timeout,
            )
        except TimeoutError:
            logger.warning("completion_timeout", kind=kind, timeout_s=self._timeout)
            raise CompletionTimeoutError(kind, self._timeout) from None

        try:
            candidate = decode_object(text, kind=kind)
        except ResponseDecodeError:
            logger.warning("generation_decode_failed", kind=kind, raw=text)
            raise

        result = definition.check(candidate)
        if not result.ok:
            logger.warning(
                "generation_validation_failed",
                kind=kind,
                errors=list(result.errors),
                raw=candidate,
            )
            raise SpecValidationError(kind, list(result.errors))

        spec = definition.build(result.spec)
        logger.info("generation_accepted", kind=kind, name=result.spec.get("name"))
        return spec

    def _record(self, outcome: str, start: float) -> None:
        if self._metrics is not None:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self._metrics.record_outcome(self.kind, outcome, elapsed_ms)
