# ─────────────────────────────────────────────────────────────────────────────
# Health Endpoint Tests — liveness, readiness, metrics
# ─────────────────────────────────────────────────────────────────────────────
# Demonstrates: dirty-equals (declarative assertions)
# ─────────────────────────────────────────────────────────────────────────────

import samples
from dirty_equals import IsInstance, IsNonNegative

from soundgarden.config import Settings


class TestLivenessProbe:
    """GET /health: near-zero cost, always 200."""

    def test_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200

    def test_minimal_body(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestReadinessProbe:
    """GET /health/ready: ready once a completion API key is configured."""

    def test_ready_with_api_key(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "completion_configured": True,
            "kinds": ["plant", "rainbow", "weather", "aurora"],
        }

    def test_not_ready_without_api_key(self, client):
        client.app.state.settings = Settings(completion_api_key="")
        response = client.get("/health/ready")
        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
        assert response.json()["completion_configured"] is False

    def test_api_key_never_exposed(self, client):
        assert "test-key" not in client.get("/health/ready").text


class TestMetricsEndpoint:
    """GET /metrics: JSON counters."""

    def test_fresh_metrics_shape(self, client):
        data = client.get("/metrics").json()
        assert data == {
            "requests_total": 0,
            "rate_limited_total": 0,
            "batch_total_failures": 0,
            "generations": {},
            "latency_p50_ms": 0,
            "latency_p95_ms": 0,
            "latency_mean_ms": 0,
            "uptime_seconds": IsNonNegative,
        }

    def test_counts_after_generation(self, client, completion):
        completion.push(samples.plant(), "garbage")
        client.post("/api/generate-plant", json={"quantity": 2})

        data = client.get("/metrics").json()

        assert data["requests_total"] == 1
        assert data["generations"]["plant"] == {
            "success": 1,
            "validation_failed": 0,
            "decode_failed": 1,
            "transport_failed": 0,
        }
        assert data["latency_mean_ms"] == IsInstance(float | int)

    def test_batch_total_failure_counted(self, client, completion):
        completion.push("garbage")
        client.post("/api/generate-plant")
        assert client.get("/metrics").json()["batch_total_failures"] == 1


class TestPrometheusEndpoint:
    """GET /metrics/prometheus: text exposition format."""

    def test_text_format(self, client, completion):
        completion.push(samples.rainbow())
        client.post("/api/generate-rainbow")

        response = client.get("/metrics/prometheus")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        body = response.text
        assert "soundgarden_generation_requests_total" in body
        assert 'soundgarden_generations{kind="rainbow",outcome="success"} 1.0' in body
        assert 'soundgarden_generation_latency_ms{quantile="0.95"}' in body
