# FastAPI application factory with lifespan management.
# Entrypoint: uvicorn soundgarden.main:create_app --factory --host 0.0.0.0 --port 3000

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.requests import Request
from starlette.responses import JSONResponse

from soundgarden.clients.completion import OpenAICompatibleClient
from soundgarden.config import get_settings
from soundgarden.exceptions import register_exception_handlers
from soundgarden.logging_config import configure_logging
from soundgarden.middleware import RequestContextMiddleware
from soundgarden.rate_limit import limiter
from soundgarden.routes import debug, generate, health
from soundgarden.routes import prometheus as prometheus_routes
from soundgarden.services.garden import build_garden_service
from soundgarden.services.metrics import GenerationMetrics

logger = structlog.get_logger(__name__)


def _parse_retry_after(rate_limit: str) -> int:
    """Extract window duration from slowapi rate limit string."""
    windows = {"second": 1, "minute": 60, "hour": 3600, "day": 86400}
    try:
        _, window = rate_limit.strip().split("/")
        return windows.get(window.strip(), 60)
    except (ValueError, AttributeError):
        return 60


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Per-client flood guard tripped. Same body shape as the generation quota 429."""
    settings = get_settings()
    retry_after = _parse_retry_after(settings.http_rate_limit)
    logger.warning(
        "http_rate_limit_exceeded",
        path=request.url.path,
        method=request.method,
        detail=str(exc.detail),
    )
    return JSONResponse(
        status_code=429,
        content={
            "error": f"Rate limit exceeded: {exc.detail}",
            "type": "RateLimitExceeded",
            "retryAfter": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )


if TYPE_CHECKING:
    from opentelemetry.sdk.trace import TracerProvider


def _configure_otel(exporter_type: str) -> "TracerProvider | None":
    """Install an SDK tracer provider. Only the console exporter is supported."""
    if exporter_type != "console":
        logger.warning("unknown_otel_exporter", exporter=exporter_type)
        return None

    from opentelemetry import trace
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

    provider = TracerProvider()
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
    logger.info("otel_configured", exporter=exporter_type)
    return provider


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the completion client and garden service; close the HTTP pool on shutdown."""
    settings = get_settings()

    otel_provider = None
    if settings.otel_exporter:
        otel_provider = _configure_otel(settings.otel_exporter)

    if not settings.completion_configured:
        logger.warning(
            "completion_api_key_missing",
            hint="Set COMPLETION_API_KEY. Generation requests will fail until it is set.",
        )

    http = httpx.AsyncClient(timeout=settings.completion_timeout_seconds)
    client = OpenAICompatibleClient.from_settings(http, settings)
    metrics = GenerationMetrics()

    app.state.settings = settings
    app.state.metrics = metrics
    app.state.garden_service = build_garden_service(settings, client, metrics=metrics)

    logger.info(
        "garden_ready",
        model=settings.completion_model,
        rate_limit=settings.generation_rate_limit,
        rate_window_s=settings.generation_rate_window_seconds,
    )

    yield

    await http.aclose()
    if otel_provider is not None:
        otel_provider.shutdown()


def _parse_origins(allowed_origins: str) -> list[str]:
    """Parse comma-separated CORS origins. Empty string → deny all."""
    if not allowed_origins.strip():
        logger.warning(
            "cors_no_origins_configured",
            hint="Set ALLOWED_ORIGINS env var. Cross-origin requests will be rejected.",
        )
        return []
    return [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]


def create_app() -> FastAPI:
    """Application factory. Invoked by: uvicorn soundgarden.main:create_app --factory"""
    settings = get_settings()
    configure_logging(log_level=settings.log_level, json_output=settings.log_json)

    app = FastAPI(
        title="Soundgarden",
        description="Generates validated plant, rainbow, weather and aurora specs for a musical garden",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # Middleware order (Starlette applies in reverse): CORS → RequestContext
    app.add_middleware(RequestContextMiddleware)

    origins = _parse_origins(settings.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=["Retry-After", "X-Request-ID"],
    )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(generate.router, prefix="/api", tags=["generate"])
    app.include_router(prometheus_routes.router, tags=["prometheus"])
    if settings.enable_debug_routes:
        app.include_router(debug.router, prefix="/debug", tags=["debug"])

    return app
