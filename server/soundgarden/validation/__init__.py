"""Field validation: declarative per-kind tables and the engine that runs them."""

from soundgarden.validation.engine import (
    FieldCheck,
    FieldKind,
    FieldSpec,
    ValidationResult,
    coerce_integer,
    validate,
    validate_field,
)
from soundgarden.validation.shapes import (
    HSB_CHANNELS,
    RGB_CHANNELS,
    Channel,
    ColorList,
    NumberList,
    Span,
)

__all__ = [
    "HSB_CHANNELS",
    "RGB_CHANNELS",
    "Channel",
    "ColorList",
    "FieldCheck",
    "FieldKind",
    "FieldSpec",
    "NumberList",
    "Span",
    "ValidationResult",
    "coerce_integer",
    "validate",
    "validate_field",
]
