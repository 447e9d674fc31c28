# Garden service: admission → orchestration → generators. Routes only call this.


import structlog
from pydantic import BaseModel

from soundgarden.clients.completion import CompletionClient
from soundgarden.config import Settings
from soundgarden.content import KINDS, ContentKind
from soundgarden.exceptions import RateLimitExceededError
from soundgarden.rate_limit import RateLimiter
from soundgarden.schemas import PlantBatchResponse, PlantSpec
from soundgarden.services.batch import BatchOrchestrator
from soundgarden.services.generator import ContentGenerator
from soundgarden.services.metrics import GenerationMetrics

logger = structlog.get_logger(__name__)


class GardenService:
    """Entry point for every generation request.

    The rate limiter is consulted exactly once per request, before any
    generator runs, so a multi-item request costs a single admission.
    """

    def __init__(
        self,
        generators: dict[ContentKind, ContentGenerator],
        orchestrator: BatchOrchestrator,
        rate_limiter: RateLimiter,
        metrics: GenerationMetrics | None = None,
    ) -> None:
        missing = set(KINDS) - set(generators)
        if missing:
            raise ValueError(f"No generator for kinds: {sorted(missing)}")
        self._generators = generators
        self._orchestrator = orchestrator
        self._rate_limiter = rate_limiter
        self._metrics = metrics

    def _admit(self, kind: ContentKind) -> None:
        if not self._rate_limiter.check():
            retry_after = self._rate_limiter.retry_after_seconds()
            logger.warning(
                "generation_rate_limited",
                kind=str(kind),
                limit=self._rate_limiter.max_requests,
                retry_after=retry_after,
            )
            if self._metrics:
                self._metrics.record_rate_limited()
            raise RateLimitExceededError(self._rate_limiter.max_requests, retry_after)
        if self._metrics:
            self._metrics.record_request()

    async def generate_plants(self, quantity: int = 1) -> PlantBatchResponse:
        """Generate up to max_quantity plants; partial failure still returns what succeeded."""
        self._admit(ContentKind.plant)
        generator = self._generators[ContentKind.plant]

        result = await self._orchestrator.run(generator.generate, quantity)
        if result.total_failure and self._metrics:
            self._metrics.record_batch_failure()
        result.raise_for_total_failure(str(ContentKind.plant))

        if result.errors:
            logger.warning(
                "plant_batch_partial_failure",
                succeeded=result.total,
                failed=len(result.errors),
                errors=result.errors,
            )
        plants = [plant for plant in result.items if isinstance(plant, PlantSpec)]
        return PlantBatchResponse(plants=plants, total=len(plants), errors=result.errors or None)

    async def generate_one(self, kind: ContentKind) -> BaseModel:
        """Generate a single spec. GenerationError propagates to the HTTP layer."""
        self._admit(kind)
        return await self._generators[kind].generate()


def build_garden_service(
    settings: Settings,
    client: CompletionClient,
    metrics: GenerationMetrics | None = None,
    rate_limiter: RateLimiter | None = None,
) -> GardenService:
    """Wire one generator per registered kind from settings."""
    generators = {
        kind: ContentGenerator(
            definition,
            client,
            timeout_seconds=settings.completion_timeout_seconds,
            metrics=metrics,
        )
        for kind, definition in KINDS.items()
    }
    orchestrator = BatchOrchestrator(
        batch_size=settings.batch_size,
        cooldown_seconds=settings.batch_cooldown_seconds,
        max_quantity=settings.max_plant_quantity,
    )
    if rate_limiter is None:
        rate_limiter = RateLimiter(
            settings.generation_rate_limit,
            settings.generation_rate_window_seconds,
        )
    return GardenService(generators, orchestrator, rate_limiter, metrics=metrics)
