# ─────────────────────────────────────────────────────────────────────────────
# Content Kinds — what the garden can ask the model to invent
# ─────────────────────────────────────────────────────────────────────────────


from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from soundgarden.validation import FieldSpec, ValidationResult, validate


class ContentKind(StrEnum):
    """Category of generated content. Each has its own field table."""

    plant = "plant"
    rainbow = "rainbow"
    weather = "weather"
    aurora = "aurora"


@dataclass(frozen=True)
class KindDefinition:
    """Everything needed to generate and admit one kind of content.

    Adding a new kind means writing one of these, not a new code path.
    Defaults cover optional top-level fields only; they are filled in
    before validation so defaulted values are checked like any other.
    """

    kind: ContentKind
    fields: tuple[FieldSpec, ...]
    model: type[BaseModel]
    system_prompt: str
    user_prompt: str
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def apply_defaults(self, candidate: Mapping[str, Any]) -> dict[str, Any]:
        """Return a shallow copy with missing or null optional fields defaulted."""
        filled = dict(candidate)
        for key, value in self.defaults.items():
            if filled.get(key) is None:
                filled[key] = value
        return filled

    def check(self, candidate: Any) -> ValidationResult:
        """Apply defaults (objects only) and run the field table."""
        if isinstance(candidate, Mapping):
            candidate = self.apply_defaults(candidate)
        return validate(self.fields, candidate)

    def build(self, spec: Mapping[str, Any]) -> BaseModel:
        """Turn an accepted object into its typed model, dropping undeclared keys."""
        return self.model.model_validate(spec)
