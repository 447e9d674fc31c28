# ─────────────────────────────────────────────────────────────────────────────
# Health Check Routes — liveness, readiness, metrics
# ─────────────────────────────────────────────────────────────────────────────
#   /health        → Liveness. "Is the process alive?" Always 200, no deps.
#   /health/ready  → Readiness. 503 until a completion API key is configured,
#                    since every generation call would fail without one.
#   /metrics       → Generation outcome counters and latency (JSON).
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from soundgarden.config import Settings
from soundgarden.content import KINDS
from soundgarden.dependencies import get_metrics, get_settings_dep
from soundgarden.schemas import LivenessResponse, ReadinessResponse
from soundgarden.services.metrics import GenerationMetrics

router = APIRouter()


@router.get("/health", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe. Keep it minimal: no deps, no I/O."""
    return LivenessResponse(status="ok")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness(settings: Settings = Depends(get_settings_dep)) -> JSONResponse:
    """Readiness probe. Does not call the completion API, only checks configuration."""
    ready = settings.completion_configured
    response = ReadinessResponse(
        status="ready" if ready else "not_ready",
        completion_configured=ready,
        kinds=[str(kind) for kind in KINDS],
    )
    return JSONResponse(
        status_code=200 if ready else 503,
        content=response.model_dump(),
    )


@router.get("/metrics")
async def metrics_endpoint(
    metrics: GenerationMetrics = Depends(get_metrics),
) -> dict[str, Any]:
    """Generation metrics: per-kind outcomes, rate limiting, latency."""
    return metrics.to_dict()
