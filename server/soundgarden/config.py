# ─────────────────────────────────────────────────────────────────────────────
# Settings — Pydantic v2 BaseSettings
# ─────────────────────────────────────────────────────────────────────────────


from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server configuration sourced from environment variables.

    Uses pydantic-settings v2 (separate package from pydantic).
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ── Completion API ───────────────────────────────────────────────────────
    # Any OpenAI-compatible /chat/completions endpoint.
    completion_base_url: str = "https://api.openai.com/v1"
    # Access via settings.completion_api_key.get_secret_value().
    # Empty string = generation unavailable (/health/ready reports 503).
    completion_api_key: SecretStr = SecretStr("")
    completion_model: str = "gpt-4.1"
    completion_temperature: float = 0.8
    completion_json_mode: bool = True
    completion_timeout_seconds: float = 30.0

    # ── Generation limits ────────────────────────────────────────────────────
    # One global trailing-window quota shared by every generation endpoint.
    generation_rate_limit: int = 50
    generation_rate_window_seconds: float = 60.0

    # ── Batching ─────────────────────────────────────────────────────────────
    max_plant_quantity: int = 10
    batch_size: int = 3
    batch_cooldown_seconds: float = 1.0

    # ── HTTP ─────────────────────────────────────────────────────────────────
    # Per-client flood guard (slowapi format). Independent of the generation quota.
    http_rate_limit: str = "300/minute"

    # Comma-separated origins for CORS (e.g. "https://garden.example.com,http://localhost:3000").
    # Empty string = deny all cross-origin requests.
    allowed_origins: str = ""

    enable_debug_routes: bool = False

    # ── Logging ──────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    # "console" enables span export to stdout. Empty = tracing API only (no-op spans).
    otel_exporter: str = ""

    @property
    def completion_configured(self) -> bool:
        return bool(self.completion_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
