# ─────────────────────────────────────────────────────────────────────────────
# Plant — generated flower species with a musical scale
# ─────────────────────────────────────────────────────────────────────────────
# Colors are HSB: hue 0-360, saturation and brightness 0-100.
# ─────────────────────────────────────────────────────────────────────────────


from soundgarden.content.kinds import ContentKind, KindDefinition
from soundgarden.schemas import PlantSpec
from soundgarden.validation import HSB_CHANNELS, ColorList, NumberList, Span
from soundgarden.validation.engine import array, boolean, enum, integer, number, string

MAX_SIZE = 150
MAX_HEIGHT = 300

OSCILLATORS = ("sine", "square", "triangle", "sawtooth")
GROWTH_PATTERNS = ("spiral", "symmetrical", "cascading", "random")
STEM_STYLES = ("straight", "curved", "segmented", "straight_bushy")
PETAL_SHAPES = ("elongated", "round", "pointed", "bell_shaped", "daisy_like")
LEAF_PATTERNS = ("basal", "alternate", "opposite", "whorled")
FLOWER_TYPES = ("spike", "single_bloom", "cluster", "composite", "bell")
SEASONAL_BEHAVIORS = ("perennial", "annual", "biennial")

PLANT_FIELDS = (
    string("name"),
    string("description"),
    array("colors", ColorList(1, 5, HSB_CHANNELS)),
    integer("petals", 1, 40),
    array("size", Span(1, MAX_SIZE)),
    array("height", Span(1, MAX_HEIGHT)),
    array("scale", NumberList(2, 12, 0, 127)),
    enum("oscillator", OSCILLATORS),
    integer("layerCount", 1, 4),
    enum("growthPattern", GROWTH_PATTERNS),
    integer("depthOffset", 0, 100),
    # Optional: defaulted below when the model leaves them out.
    enum("stemStyle", STEM_STYLES),
    number("stemRadius", 1, 10),
    enum("petalShape", PETAL_SHAPES),
    enum("leafPattern", LEAF_PATTERNS),
    enum("flowerType", FLOWER_TYPES),
    enum("seasonalBehavior", SEASONAL_BEHAVIORS),
    boolean("pollinatorAttractant"),
    integer("lifespan", 30, 600),
    integer("maturityAge", 5, 300),
    number("growthRate", 0.5, 2.0),
    number("decayRate", 0.1, 2.0),
    integer("resilience", 1, 10),
)

PLANT_DEFAULTS = {
    "stemStyle": "straight",
    "stemRadius": 3,
    "petalShape": "round",
    "leafPattern": "alternate",
    "flowerType": "single_bloom",
    "seasonalBehavior": "perennial",
    "pollinatorAttractant": False,
    "lifespan": 120,
    "maturityAge": 30,
    "growthRate": 1.0,
    "decayRate": 0.5,
    "resilience": 5,
}

SYSTEM_PROMPT = """You are a creative botanical AI that invents garden flower species with musical properties.
Take inspiration from real garden varieties: tall spikes (delphinium, salvia), bells (foxglove,
snapdragon), round blooms (zinnia, marigold), daisies (aster) and low ground flowers (pansy).

Respond with ONLY a JSON object, no prose, using exactly these keys:
{
  "name": "string",
  "description": "string, one evocative sentence",
  "colors": [[hue 0-360, saturation 0-100, brightness 0-100], ...] (1-5 colors),
  "petals": integer 1-40,
  "size": [min, max] numbers within 1-150,
  "height": [min, max] numbers within 1-300,
  "scale": array of 4-7 MIDI note integers between 48 and 84,
  "oscillator": "sine" | "square" | "triangle" | "sawtooth",
  "layerCount": integer 1-4,
  "growthPattern": "spiral" | "symmetrical" | "cascading" | "random",
  "depthOffset": integer 0-100,
  "stemStyle": "straight" | "curved" | "segmented" | "straight_bushy",
  "stemRadius": number 1-10,
  "petalShape": "elongated" | "round" | "pointed" | "bell_shaped" | "daisy_like",
  "leafPattern": "basal" | "alternate" | "opposite" | "whorled",
  "flowerType": "spike" | "single_bloom" | "cluster" | "composite" | "bell",
  "seasonalBehavior": "perennial" | "annual" | "biennial",
  "pollinatorAttractant": true | false,
  "lifespan": integer seconds 30-600,
  "maturityAge": integer seconds 5-300,
  "growthRate": number 0.5-2.0,
  "decayRate": number 0.1-2.0,
  "resilience": integer 1-10
}"""

USER_PROMPT = (
    "Generate a large, spectacular garden flower. Use 3-5 colors, a size range between 30 and 150, "
    "a height range between 50 and 300 and 4-7 MIDI notes between 48 and 84. "
    "Every numeric array must be a JSON array of numbers, never a string."
)

PLANT = KindDefinition(
    kind=ContentKind.plant,
    fields=PLANT_FIELDS,
    model=PlantSpec,
    system_prompt=SYSTEM_PROMPT,
    user_prompt=USER_PROMPT,
    defaults=PLANT_DEFAULTS,
)
