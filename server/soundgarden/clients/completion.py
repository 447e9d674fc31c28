# ─────────────────────────────────────────────────────────────────────────────
# Completion Client — OpenAI-compatible /chat/completions over httpx
# ─────────────────────────────────────────────────────────────────────────────
# The only outbound dependency. One shared AsyncClient lives for the app's
# lifetime (opened in lifespan, closed on shutdown). Every failure mode of
# the call itself surfaces as CompletionTransportError; what the text says
# is the generator's problem.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx
import structlog

from soundgarden.config import Settings
from soundgarden.exceptions import CompletionTransportError

logger = structlog.get_logger(__name__)


@runtime_checkable
class CompletionClient(Protocol):
    """Turns a system/user prompt pair into free-form response text."""

    async def complete(self, system_prompt: str, user_prompt: str, *, kind: str) -> str: ...


class OpenAICompatibleClient:
    """Chat-completions client for OpenAI and API-compatible providers."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        base_url: str,
        api_key: str,
        model: str,
        temperature: float = 0.8,
        json_mode: bool = True,
    ) -> None:
        self._http = http
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._json_mode = json_mode

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient, settings: Settings) -> OpenAICompatibleClient:
        return cls(
            http,
            base_url=settings.completion_base_url,
            api_key=settings.completion_api_key.get_secret_value(),
            model=settings.completion_model,
            temperature=settings.completion_temperature,
            json_mode=settings.completion_json_mode,
        )

    def _payload(self, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self._temperature,
        }
        if self._json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def complete(self, system_prompt: str, user_prompt: str, *, kind: str) -> str:
        """POST the prompt pair and return choices[0].message.content."""
        try:
            response = await self._http.post(
                self._url,
                json=self._payload(system_prompt, user_prompt),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        except httpx.HTTPError as e:
            logger.warning("completion_request_failed", kind=kind, error=str(e), error_type=type(e).__name__)
            raise CompletionTransportError(kind, f"completion API request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(
                "completion_http_error",
                kind=kind,
                status=response.status_code,
                body=response.text[:500],
            )
            raise CompletionTransportError(
                kind, f"completion API returned HTTP {response.status_code}"
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning("completion_envelope_malformed", kind=kind, body=response.text[:500])
            raise CompletionTransportError(kind, "completion API returned a malformed envelope") from e

        if not isinstance(content, str) or not content.strip():
            raise CompletionTransportError(kind, "completion API returned an empty response")

        return content
