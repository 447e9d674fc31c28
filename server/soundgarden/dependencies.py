# ─────────────────────────────────────────────────────────────────────────────
# Dependency Injection — FastAPI Depends() providers
# ─────────────────────────────────────────────────────────────────────────────
# State flows: lifespan creates → app.state stores → Depends() injects.
# ─────────────────────────────────────────────────────────────────────────────


from fastapi import Request

from soundgarden.config import Settings
from soundgarden.services.garden import GardenService
from soundgarden.services.metrics import GenerationMetrics


def get_settings_dep(request: Request) -> Settings:
    """Inject Settings into endpoints via Depends()."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_metrics(request: Request) -> GenerationMetrics:
    """Inject GenerationMetrics into endpoints via Depends()."""
    return request.app.state.metrics  # type: ignore[no-any-return]


def get_garden_service(request: Request) -> GardenService:
    """Inject GardenService into endpoints via Depends()."""
    return request.app.state.garden_service  # type: ignore[no-any-return]
