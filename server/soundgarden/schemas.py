# ─────────────────────────────────────────────────────────────────────────────
# Pydantic v2 Request / Response Schemas
# ─────────────────────────────────────────────────────────────────────────────
# Spec models are typed carriers for objects that already passed the field
# tables in soundgarden.content. Ranges live in those tables, not here.
# Wire format is camelCase (layerCount, visualProperties, ...).
# ─────────────────────────────────────────────────────────────────────────────


from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = int | float
Triple = tuple[Number, Number, Number]
RGB = tuple[int, int, int]
Pair = tuple[Number, Number]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ── Content specs ────────────────────────────────────────────────────────────


class PlantSpec(_CamelModel):
    """A generated plant species. Colors are HSB triples."""

    name: str
    description: str
    colors: list[Triple]
    petals: int
    size: Pair
    height: Pair
    scale: list[int]
    oscillator: str
    layer_count: int
    growth_pattern: str
    depth_offset: int

    stem_style: str
    stem_radius: Number
    petal_shape: str
    leaf_pattern: str
    flower_type: str
    seasonal_behavior: str
    pollinator_attractant: bool

    # Lifecycle, in seconds / multipliers
    lifespan: int
    maturity_age: int
    growth_rate: Number
    decay_rate: Number
    resilience: int


class RainbowVisual(_CamelModel):
    colors: list[RGB]
    arc_count: int
    arc_thickness: Number
    animation_style: str
    intensity: Number


class RainbowSound(_CamelModel):
    soundscape_name: str
    base_frequency: Number
    harmonicity_ratio: Number
    oscillator_type: str
    duration_seconds: int
    reverb_mix: Number


class RainbowSpec(_CamelModel):
    name: str
    description: str
    visual_properties: RainbowVisual
    sound_properties: RainbowSound


class AuroraVisual(_CamelModel):
    colors: list[RGB]
    wave_count: int
    wave_height: Number
    flow_pattern: str
    intensity: Number
    shimmer_speed: Number


class AuroraSound(_CamelModel):
    soundscape_name: str
    base_frequency: Number
    harmonic_complexity: Number
    oscillator_type: str
    duration_seconds: int
    spatial_effect: Number
    atmospheric_reverb: Number


class AuroraSpec(_CamelModel):
    name: str
    description: str
    visual_properties: AuroraVisual
    sound_properties: AuroraSound


class WeatherSpec(_CamelModel):
    """A weather event passing over the garden. Colors are RGB triples."""

    name: str
    description: str
    duration: Number
    intensity: Number
    temperature: Number
    humidity: Number
    wind_speed: Number
    type: str
    impact: str
    colors: list[RGB]
    particle_count: Pair
    base_frequency: Number
    volume: Number
    reverb: Number


# ── Requests ─────────────────────────────────────────────────────────────────


class PlantRequest(BaseModel):
    """Body of POST /api/generate-plant. Out-of-range quantities are clamped."""

    quantity: int = Field(1, description="Number of plants to generate")


# ── Responses ────────────────────────────────────────────────────────────────


class PlantBatchResponse(BaseModel):
    plants: list[PlantSpec]
    total: int = Field(..., ge=0)
    errors: list[str] | None = Field(None, description="Per-item failures, omitted when none")


class ValidationReport(BaseModel):
    """Result of POST /debug/validate/{kind}."""

    valid: bool
    errors: list[str]
    spec: dict[str, Any] | None = None


class LivenessResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str  # "ready" or "not_ready"
    completion_configured: bool
    kinds: list[str]
