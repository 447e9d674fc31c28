"""Content kinds: field tables, defaults and prompts for everything the model invents."""

from soundgarden.content.aurora import AURORA
from soundgarden.content.kinds import ContentKind, KindDefinition
from soundgarden.content.plant import PLANT
from soundgarden.content.rainbow import RAINBOW
from soundgarden.content.weather import WEATHER

KINDS: dict[ContentKind, KindDefinition] = {
    definition.kind: definition for definition in (PLANT, RAINBOW, WEATHER, AURORA)
}

__all__ = [
    "AURORA",
    "KINDS",
    "PLANT",
    "RAINBOW",
    "WEATHER",
    "ContentKind",
    "KindDefinition",
]
