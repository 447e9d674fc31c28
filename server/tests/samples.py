# ─────────────────────────────────────────────────────────────────────────────
# Canned model output — one valid object per content kind
# ─────────────────────────────────────────────────────────────────────────────
# Each call returns a fresh dict so tests can mutate freely.
# ─────────────────────────────────────────────────────────────────────────────

import json
from collections import deque
from typing import Any

from soundgarden.exceptions import CompletionTransportError


def plant(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "Moonbell Cascade",
        "description": "Pale bells that chime in descending thirds.",
        "colors": [[210, 60, 90], [280, 45, 80], [45, 70, 95]],
        "petals": 8,
        "size": [40, 120],
        "height": [60, 220],
        "scale": [60, 63, 67, 70, 74],
        "oscillator": "triangle",
        "layerCount": 3,
        "growthPattern": "cascading",
        "depthOffset": 40,
        "stemStyle": "curved",
        "stemRadius": 4.5,
        "petalShape": "bell_shaped",
        "leafPattern": "opposite",
        "flowerType": "bell",
        "seasonalBehavior": "perennial",
        "pollinatorAttractant": True,
        "lifespan": 240,
        "maturityAge": 45,
        "growthRate": 1.2,
        "decayRate": 0.4,
        "resilience": 7,
    }
    data.update(overrides)
    return data


def minimal_plant(**overrides: Any) -> dict[str, Any]:
    """Only the required plant fields; everything optional is left to defaults."""
    data = plant()
    for key in (
        "stemStyle",
        "stemRadius",
        "petalShape",
        "leafPattern",
        "flowerType",
        "seasonalBehavior",
        "pollinatorAttractant",
        "lifespan",
        "maturityAge",
        "growthRate",
        "decayRate",
        "resilience",
    ):
        del data[key]
    data.update(overrides)
    return data


def rainbow() -> dict[str, Any]:
    return {
        "name": "Prism Hymn",
        "description": "Seven arcs breathing in slow unison.",
        "visualProperties": {
            "colors": [[255, 0, 0], [255, 165, 0], [255, 255, 0], [0, 128, 0], [0, 0, 255]],
            "arcCount": 5,
            "arcThickness": 12.5,
            "animationStyle": "breathing",
            "intensity": 0.8,
        },
        "soundProperties": {
            "soundscapeName": "Spectral Choir",
            "baseFrequency": 220,
            "harmonicityRatio": 1.5,
            "oscillatorType": "sine",
            "durationSeconds": 30,
            "reverbMix": 0.5,
        },
    }


def aurora() -> dict[str, Any]:
    return {
        "name": "Polar Veil",
        "description": "Green curtains folding over a violet horizon.",
        "visualProperties": {
            "colors": [[0, 255, 128], [64, 224, 208], [138, 43, 226], [255, 105, 180]],
            "waveCount": 5,
            "waveHeight": 0.6,
            "flowPattern": "dancing_curtains",
            "intensity": 0.7,
            "shimmerSpeed": 1.5,
        },
        "soundProperties": {
            "soundscapeName": "Magnetic Drone",
            "baseFrequency": 110,
            "harmonicComplexity": 2.5,
            "oscillatorType": "custom_aurora",
            "durationSeconds": 45,
            "spatialEffect": 0.6,
            "atmosphericReverb": 0.7,
        },
    }


def weather() -> dict[str, Any]:
    return {
        "name": "Copper Drizzle",
        "description": "A warm rain that hums in the low register.",
        "duration": 25,
        "intensity": 0.6,
        "temperature": 18.5,
        "humidity": 80,
        "windSpeed": 12,
        "type": "rain",
        "impact": "beneficial",
        "colors": [[180, 200, 255], [120, 140, 200]],
        "particleCount": [300, 900],
        "baseFrequency": 330,
        "volume": 0.5,
        "reverb": 0.4,
    }


class ScriptedCompletionClient:
    """CompletionClient that replays canned responses in call order.

    Dicts are sent as JSON text, strings verbatim, exceptions are raised.
    Running out of script is a transport failure.
    """

    def __init__(self, *responses: Any) -> None:
        self._responses: deque[Any] = deque(responses)
        self.calls: list[str] = []

    def push(self, *responses: Any) -> None:
        self._responses.extend(responses)

    async def complete(self, system_prompt: str, user_prompt: str, *, kind: str) -> str:
        self.calls.append(kind)
        if not self._responses:
            raise CompletionTransportError(kind, "no scripted response left")
        item = self._responses.popleft()
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, dict):
            return json.dumps(item)
        return item
