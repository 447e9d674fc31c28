# ─────────────────────────────────────────────────────────────────────────────
# Prometheus Metrics Endpoint — text exposition format
# ─────────────────────────────────────────────────────────────────────────────
# GET /metrics/prometheus → text/plain Prometheus format
# Mirrors a GenerationMetrics snapshot into gauges on every scrape.
# ─────────────────────────────────────────────────────────────────────────────

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from prometheus_client import CollectorRegistry, Gauge, generate_latest

from soundgarden.dependencies import get_metrics
from soundgarden.services.metrics import GenerationMetrics

router = APIRouter()

# ── Prometheus metrics (custom registry to avoid default process metrics) ─────

_registry = CollectorRegistry()

_requests_total = Gauge(
    "soundgarden_generation_requests_total",
    "Generation requests admitted by the rate limiter",
    registry=_registry,
)

_rate_limited_total = Gauge(
    "soundgarden_rate_limited_total",
    "Generation requests rejected by the rate limiter",
    registry=_registry,
)

_batch_failures_total = Gauge(
    "soundgarden_batch_total_failures",
    "Plant batches in which every item failed",
    registry=_registry,
)

_generations = Gauge(
    "soundgarden_generations",
    "Generator calls by kind and outcome",
    ["kind", "outcome"],
    registry=_registry,
)

_latency_ms = Gauge(
    "soundgarden_generation_latency_ms",
    "Generator call latency over the recent history",
    ["quantile"],
    registry=_registry,
)

_uptime_seconds = Gauge(
    "soundgarden_uptime_seconds",
    "Seconds since the metrics were created",
    registry=_registry,
)


def _sync_metrics(metrics: GenerationMetrics) -> None:
    """Copy a GenerationMetrics snapshot into the Prometheus gauges."""
    data = metrics.to_dict()

    _requests_total.set(data["requests_total"])
    _rate_limited_total.set(data["rate_limited_total"])
    _batch_failures_total.set(data["batch_total_failures"])
    _uptime_seconds.set(data["uptime_seconds"])

    for kind, outcomes in data["generations"].items():
        for outcome, count in outcomes.items():
            _generations.labels(kind=kind, outcome=outcome).set(count)

    _latency_ms.labels(quantile="0.5").set(data["latency_p50_ms"])
    _latency_ms.labels(quantile="0.95").set(data["latency_p95_ms"])
    _latency_ms.labels(quantile="mean").set(data["latency_mean_ms"])


@router.get("/metrics/prometheus")
async def prometheus_metrics(
    metrics: GenerationMetrics = Depends(get_metrics),
) -> Response:
    """Prometheus text exposition format metrics endpoint."""
    _sync_metrics(metrics)
    return Response(
        content=generate_latest(_registry),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
