# ─────────────────────────────────────────────────────────────────────────────
# POST /api/generate-* — content generation endpoints (THIN)
# ─────────────────────────────────────────────────────────────────────────────
# Every endpoint spends one admission from the shared generation quota,
# however many items it produces. Failures are GardenError subclasses,
# turned into JSON by the handlers in soundgarden.exceptions.
# ─────────────────────────────────────────────────────────────────────────────


from fastapi import APIRouter, Depends, Request

from soundgarden.config import get_settings
from soundgarden.content import ContentKind
from soundgarden.dependencies import get_garden_service
from soundgarden.rate_limit import limiter
from soundgarden.schemas import (
    AuroraSpec,
    PlantBatchResponse,
    PlantRequest,
    RainbowSpec,
    WeatherSpec,
)
from soundgarden.services.garden import GardenService

router = APIRouter()


def _http_rate_limit() -> str:
    return get_settings().http_rate_limit


@router.post(
    "/generate-plant",
    response_model=PlantBatchResponse,
    response_model_exclude_none=True,
)
@limiter.limit(_http_rate_limit)
async def generate_plant(
    request: Request,
    body: PlantRequest | None = None,
    garden: GardenService = Depends(get_garden_service),
) -> PlantBatchResponse:
    """Generate 1..MAX_PLANT_QUANTITY plants.

    Quantity is clamped, never rejected. Partial failure is a 200 with
    an errors list; total failure is a 500 carrying every item error.
    """
    quantity = body.quantity if body is not None else 1
    return await garden.generate_plants(quantity)


@router.post("/generate-rainbow", response_model=RainbowSpec)
@limiter.limit(_http_rate_limit)
async def generate_rainbow(
    request: Request,
    garden: GardenService = Depends(get_garden_service),
) -> RainbowSpec:
    return await garden.generate_one(ContentKind.rainbow)  # type: ignore[return-value]


@router.post("/generate-weather", response_model=WeatherSpec)
@limiter.limit(_http_rate_limit)
async def generate_weather(
    request: Request,
    garden: GardenService = Depends(get_garden_service),
) -> WeatherSpec:
    return await garden.generate_one(ContentKind.weather)  # type: ignore[return-value]


@router.post("/generate-aurora", response_model=AuroraSpec)
@limiter.limit(_http_rate_limit)
async def generate_aurora(
    request: Request,
    garden: GardenService = Depends(get_garden_service),
) -> AuroraSpec:
    return await garden.generate_one(ContentKind.aurora)  # type: ignore[return-value]
