# Aurora — flowing curtains of light over a deep atmospheric drone. Colors are RGB integers.


from soundgarden.content.kinds import ContentKind, KindDefinition
from soundgarden.schemas import AuroraSpec
from soundgarden.validation import RGB_CHANNELS, ColorList
from soundgarden.validation.engine import array, enum, integer, number, string

FLOW_PATTERNS = (
    "flowing_waves",
    "dancing_curtains",
    "rippling_sheets",
    "spiral_vortex",
    "breathing_veils",
)
OSCILLATOR_TYPES = ("sine", "triangle", "custom_aurora")

AURORA_FIELDS = (
    string("name"),
    string("description"),
    array("visualProperties.colors", ColorList(4, 8, RGB_CHANNELS, integer_channels=True)),
    integer("visualProperties.waveCount", 3, 8),
    number("visualProperties.waveHeight", 0.3, 0.8),
    enum("visualProperties.flowPattern", FLOW_PATTERNS),
    number("visualProperties.intensity", 0.4, 1.0),
    number("visualProperties.shimmerSpeed", 0.5, 3.0),
    string("soundProperties.soundscapeName"),
    number("soundProperties.baseFrequency", 80, 300),
    number("soundProperties.harmonicComplexity", 1.2, 4.0),
    enum("soundProperties.oscillatorType", OSCILLATOR_TYPES),
    integer("soundProperties.durationSeconds", 20, 90),
    number("soundProperties.spatialEffect", 0.3, 0.9),
    number("soundProperties.atmosphericReverb", 0.4, 0.9),
)

SYSTEM_PROMPT = """You are a mystical AI that designs aurora borealis displays with ethereal harmonic sound.

Respond with ONLY a JSON object, no prose and no comments, with this exact nesting:
{
  "name": "string",
  "description": "string",
  "visualProperties": {
    "colors": 4-8 colors, each [R, G, B] with integer channels 0-255,
    "waveCount": integer 3-8,
    "waveHeight": number 0.3-0.8,
    "flowPattern": "flowing_waves" | "dancing_curtains" | "rippling_sheets" | "spiral_vortex" | "breathing_veils",
    "intensity": number 0.4-1.0,
    "shimmerSpeed": number 0.5-3.0
  },
  "soundProperties": {
    "soundscapeName": "string",
    "baseFrequency": number 80-300 (Hz),
    "harmonicComplexity": number 1.2-4.0,
    "oscillatorType": "sine" | "triangle" | "custom_aurora",
    "durationSeconds": integer 20-90,
    "spatialEffect": number 0.3-0.9,
    "atmosphericReverb": number 0.4-0.9
  }
}"""

USER_PROMPT = (
    "Generate a mesmerizing aurora. Use 5-7 aurora colors: deep greens, electric blues, "
    "purples and magentas with an occasional warm accent. The flow should feel organic and "
    "the sound deeply atmospheric. RGB channels, waveCount and durationSeconds must be integers."
)

AURORA = KindDefinition(
    kind=ContentKind.aurora,
    fields=AURORA_FIELDS,
    model=AuroraSpec,
    system_prompt=SYSTEM_PROMPT,
    user_prompt=USER_PROMPT,
)
