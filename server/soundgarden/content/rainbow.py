# Rainbow — concentric arcs with a harmonic soundscape. Colors are RGB integers.


from soundgarden.content.kinds import ContentKind, KindDefinition
from soundgarden.schemas import RainbowSpec
from soundgarden.validation import RGB_CHANNELS, ColorList
from soundgarden.validation.engine import array, enum, integer, number, string

ANIMATION_STYLES = ("pulsating", "shimmering", "breathing", "drifting_waves")
OSCILLATOR_TYPES = ("sine", "triangle", "sawtooth", "pulse")

RAINBOW_FIELDS = (
    string("name"),
    string("description"),
    array("visualProperties.colors", ColorList(3, 7, RGB_CHANNELS, integer_channels=True)),
    integer("visualProperties.arcCount", 3, 7),
    number("visualProperties.arcThickness", 5, 20),
    enum("visualProperties.animationStyle", ANIMATION_STYLES),
    number("visualProperties.intensity", 0.5, 1.0),
    string("soundProperties.soundscapeName"),
    number("soundProperties.baseFrequency", 100, 400),
    number("soundProperties.harmonicityRatio", 1.0, 3.0),
    enum("soundProperties.oscillatorType", OSCILLATOR_TYPES),
    integer("soundProperties.durationSeconds", 10, 60),
    number("soundProperties.reverbMix", 0.1, 0.8),
)

SYSTEM_PROMPT = """You are a cosmic AI that designs psychedelic rainbows paired with harmonic soundscapes.

Respond with ONLY a JSON object, no prose and no comments, with this exact nesting:
{
  "name": "string",
  "description": "string",
  "visualProperties": {
    "colors": 3-7 colors, each [R, G, B] with integer channels 0-255,
    "arcCount": integer 3-7,
    "arcThickness": number 5-20,
    "animationStyle": "pulsating" | "shimmering" | "breathing" | "drifting_waves",
    "intensity": number 0.5-1.0
  },
  "soundProperties": {
    "soundscapeName": "string",
    "baseFrequency": number 100-400 (Hz),
    "harmonicityRatio": number 1.0-3.0,
    "oscillatorType": "sine" | "triangle" | "sawtooth" | "pulse",
    "durationSeconds": integer 10-60,
    "reverbMix": number 0.1-0.8
  }
}"""

USER_PROMPT = (
    "Generate an awe-inspiring psychedelic rainbow. Use 5-7 vibrant, contrasting colors, a "
    "captivating animation style and an ethereal, harmonic soundscape with noticeable reverb. "
    "RGB channels, arcCount and durationSeconds must be integers."
)

RAINBOW = KindDefinition(
    kind=ContentKind.rainbow,
    fields=RAINBOW_FIELDS,
    model=RainbowSpec,
    system_prompt=SYSTEM_PROMPT,
    user_prompt=USER_PROMPT,
)
