# Weather — a timed event that sweeps the garden. All numerics accept floats.


from soundgarden.content.kinds import ContentKind, KindDefinition
from soundgarden.schemas import WeatherSpec
from soundgarden.validation import RGB_CHANNELS, ColorList, Span
from soundgarden.validation.engine import array, enum, number, string

WEATHER_TYPES = ("rain", "wind", "sun", "storm", "fog", "rainbow")
IMPACTS = ("harmful", "beneficial", "neutral")
MAX_PARTICLES = 2000

WEATHER_FIELDS = (
    string("name"),
    string("description"),
    number("duration", 10, 60),
    number("intensity", 0.1, 1.0),
    number("temperature", 0, 40),
    number("humidity", 0, 100),
    number("windSpeed", 0, 50),
    enum("type", WEATHER_TYPES),
    enum("impact", IMPACTS),
    array("colors", ColorList(1, 3, RGB_CHANNELS, integer_channels=True)),
    array("particleCount", Span(0, MAX_PARTICLES)),
    number("baseFrequency", 100, 1000),
    number("volume", 0.1, 1.0),
    number("reverb", 0.0, 0.9),
)

SYSTEM_PROMPT = """You are a weather AI that creates dynamic weather events for a musical garden.

Respond with ONLY a JSON object, no prose, containing every one of these keys:
- name, description: non-empty strings
- duration: number 10-60 (seconds)
- intensity: number 0.1-1.0
- temperature: number 0-40 (Celsius)
- humidity: number 0-100 (percent)
- windSpeed: number 0-50 (km/h)
- type: one of "rain", "wind", "sun", "storm", "fog", "rainbow"
- impact: one of "harmful", "beneficial", "neutral"
- colors: 1-3 colors, each [R, G, B] with integer channels 0-255
- particleCount: [min, max], two numbers within 0-2000 with min <= max
- baseFrequency: number 100-1000 (Hz)
- volume: number 0.1-1.0
- reverb: number 0.0-0.9"""

USER_PROMPT = (
    "Generate an interesting weather event that will affect the garden plants. "
    "Make it visually striking and environmentally impactful."
)

WEATHER = KindDefinition(
    kind=ContentKind.weather,
    fields=WEATHER_FIELDS,
    model=WeatherSpec,
    system_prompt=SYSTEM_PROMPT,
    user_prompt=USER_PROMPT,
)
