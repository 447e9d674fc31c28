# ─────────────────────────────────────────────────────────────────────────────
# Custom Exceptions + FastAPI Exception Handlers
# ─────────────────────────────────────────────────────────────────────────────


import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


# ── Exception hierarchy ──────────────────────────────────────────────────────


class GardenError(Exception):
    """Base exception for all sound garden errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitExceededError(GardenError):
    """Raised when the global generation quota for the current window is spent.

    retry_after_seconds comes from the limiter's trailing window, so the
    client knows exactly when the oldest admitted request expires.
    """

    def __init__(self, limit: int, retry_after_seconds: int):
        self.limit = limit
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            f"Generation rate limit exceeded ({limit} per window). "
            f"Try again in {retry_after_seconds}s.",
            status_code=429,
        )


class GenerationError(GardenError):
    """A single generation call failed. Recovered per item by the batch layer."""

    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Failed to generate {kind}: {reason}", status_code=500)


class CompletionTransportError(GenerationError):
    """The completion API call itself failed (network, auth, quota, bad envelope)."""


class CompletionTimeoutError(CompletionTransportError):
    """The completion API did not answer within the per-call deadline."""

    def __init__(self, kind: str, timeout_s: float):
        self.timeout_s = timeout_s
        super().__init__(kind, f"completion API timed out after {timeout_s}s")


class ResponseDecodeError(GenerationError):
    """The completion text held no parseable JSON object."""


class SpecValidationError(GenerationError):
    """The decoded object failed one or more field checks."""

    def __init__(self, kind: str, errors: list[str]):
        self.errors = list(errors)
        super().__init__(kind, f"validation failed: {'; '.join(self.errors)}")


class BatchTotalFailureError(GardenError):
    """Every item of an orchestrated request failed."""

    def __init__(self, kind: str, errors: list[str]):
        self.kind = kind
        self.errors = list(errors)
        super().__init__(f"Failed to generate any {kind}", status_code=500)


# ── Handler registration ────────────────────────────────────────────────────


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app.

    Endpoints raise GardenError subclasses; these handlers catch them
    and return structured JSON. No inline try/except in endpoints.
    """

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_handler(request: Request, exc: RateLimitExceededError) -> JSONResponse:
        logger.warning(
            "generation_rate_limited_response",
            path=request.url.path,
            retry_after=exc.retry_after_seconds,
        )
        return JSONResponse(
            status_code=429,
            content={
                "error": exc.message,
                "type": "RateLimitExceededError",
                "retryAfter": exc.retry_after_seconds,
            },
            headers={"Retry-After": str(exc.retry_after_seconds)},
        )

    @app.exception_handler(BatchTotalFailureError)
    async def batch_failure_handler(request: Request, exc: BatchTotalFailureError) -> JSONResponse:
        logger.error("batch_total_failure", kind=exc.kind, errors=exc.errors)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "type": "BatchTotalFailureError", "details": exc.errors},
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
        logger.error("generation_error", kind=exc.kind, error=exc.message, error_type=type(exc).__name__)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "type": type(exc).__name__, "details": [exc.reason]},
        )

    @app.exception_handler(GardenError)
    async def garden_error_handler(request: Request, exc: GardenError) -> JSONResponse:
        logger.error("garden_error", error=exc.message, error_type=type(exc).__name__, exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "type": type(exc).__name__},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "type": "UnhandledError"},
        )
