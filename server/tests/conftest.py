# ─────────────────────────────────────────────────────────────────────────────
# Test Fixtures — shared across all tests
# ─────────────────────────────────────────────────────────────────────────────

import os

import pytest
from fastapi.testclient import TestClient
from samples import ScriptedCompletionClient

from soundgarden.config import Settings
from soundgarden.main import create_app
from soundgarden.rate_limit import limiter
from soundgarden.services.garden import GardenService, build_garden_service
from soundgarden.services.metrics import GenerationMetrics


@pytest.fixture(autouse=True)
def _reset_http_limiter():
    """slowapi keeps per-IP counters in process memory; start every test clean."""
    limiter.reset()
    yield


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing: fake key, no batch cooldown."""
    return Settings(
        completion_api_key="test-key",
        completion_base_url="https://completions.test/v1",
        batch_cooldown_seconds=0,
        enable_debug_routes=True,
        log_json=False,
        log_level="DEBUG",
    )


@pytest.fixture
def completion() -> ScriptedCompletionClient:
    """Scripted completion client. Tests push responses before calling."""
    return ScriptedCompletionClient()


@pytest.fixture
def metrics() -> GenerationMetrics:
    return GenerationMetrics()


@pytest.fixture
def garden_service(
    test_settings: Settings, completion: ScriptedCompletionClient, metrics: GenerationMetrics
) -> GardenService:
    return build_garden_service(test_settings, completion, metrics=metrics)


@pytest.fixture
def client(
    test_settings: Settings, garden_service: GardenService, metrics: GenerationMetrics
) -> TestClient:
    """FastAPI TestClient with app.state wired to the scripted completion client.

    The lifespan does not run (no `with TestClient(...)`), so no real
    HTTP client is opened and nothing reaches the network.
    """
    from soundgarden.config import get_settings

    get_settings.cache_clear()

    env_overrides = {
        "LOG_JSON": "false",
        "LOG_LEVEL": "DEBUG",
        "ENABLE_DEBUG_ROUTES": "true",
        "ALLOWED_ORIGINS": "*",  # Tests need permissive CORS (prod defaults to deny-all)
    }
    for k, v in env_overrides.items():
        os.environ[k] = v

    try:
        app = create_app()
        client = TestClient(app)

        app.state.settings = test_settings
        app.state.metrics = metrics
        app.state.garden_service = garden_service

        return client
    finally:
        for k in env_overrides:
            os.environ.pop(k, None)
        get_settings.cache_clear()
