"""English vocabulary for the ingredient parser."""

UNITS = {
    "drop": {
        "names": [
            "drop",
            "drops",
            "dr.",
            "dr",
            "drs.",
            "drs",
            "gt.",
            "gt",
            "gts.",
            "gts",
            "gtt",
            "gtt.",
            "gtts",
            "gtts.",
        ],
        "plural": "drops",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 0.05},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "smidgen": {
        "names": [
            "smidgen",
            "smidgens",
            "smdg.",
            "smdg",
            "smdgs.",
            "smdgs",
            "smi",
            "smi.",
            "smis.",
            "smis",
        ],
        "plural": "smidgens",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 0.18},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "pinch": {
        "names": ["pinch", "pinches", "pinchs", "pn.", "pn", "pns.", "pns"],
        "plural": "pinches",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 0.36},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "dash": {
        "names": [
            "dash",
            "dashs",
            "dashes",
            "splash",
            "splashes",
            "ds.",
            "ds",
            "dss.",
            "dss",
        ],
        "plural": "dashes",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 0.72},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "saltspoon": {
        "names": [
            "saltspoon",
            "salt spoon",
            "saltspoons",
            "salt spoons",
            "scruple",
            "scruples",
            "ssp.",
            "ssp",
            "ssps.",
            "ssps",
        ],
        "plural": "saltspoons",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 1.23},
        "skip_conversion": True,
        "decimal_places": 1,
    },
    "coffeespoon": {
        "names": [
            "coffeespoon",
            "coffee spoon",
            "coffeespoons",
            "coffee spoons",
            "csp.",
            "csp",
            "csps.",
            "csps",
        ],
        "plural": "coffeespoons",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 2.1},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "fluiddram": {
        "names": [
            "fluid dram",
            "fluiddram",
            "fluid drams",
            "fluiddrams",
            "fl.dr.",
            "fldr",
            "fl.dr",
            "fldr.",
            "fl.drs.",
            "fldrs",
            "fl.drs",
        ],
        "plural": "fluid drams",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 3.69},
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "teaspoon": {
        "names": [
            "teaspoon",
            "tea spoon",
            "teaspoons",
            "tea spoons",
            "tsp.",
            "tsp",
            "tspn",
            "tspn.",
            "tsps.",
            "tsps",
            "t.",
            "t",
            "ts.",
            "ts",
            "t/s",
        ],
        "plural": "teaspoons",
        "symbol": "tsp",
        "system": "americanVolumetric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 4.92},
        "skip_conversion": False,
        "decimal_places": 1,
    },
    "dessertspoon": {
        "names": [
            "dessertspoon",
            "dessert spoon",
            "dessertspoons",
            "dessert spoons",
            "dsp.",
            "dsp",
            "dsps.",
            "dsps",
            "dssp.",
            "dssp",
            "dssps.",
            "dssps",
            "dstspn.",
            "dstspn",
            "dstspns.",
            "dstspns",
        ],
        "plural": "dessertspoons",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 9.85},
        "skip_conversion": True,
        "decimal_places": 1,
    },
    "tablespoon": {
        "names": [
            "tablespoon",
            "table spoon",
            "tablespoons",
            "table spoons",
            "tbsp.",
            "tbsp",
            "tbsps.",
            "tbsps",
            "tbs",
            "tbspn",
            "tbs.",
            "tbspn.",
            "T.",
            "T",
            "Ts.",
            "Ts",
        ],
        "plural": "tablespoons",
        "symbol": "tbs",
        "system": "americanVolumetric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 14.78},
        "skip_conversion": False,
        "decimal_places": 1,
    },
    "floz": {
        "names": [
            "fluid ounce",
            "fluidounce",
            "fluid ounces",
            "fluidounces",
            "fl.oz.",
            "floz",
            "fl.oz",
            "floz.",
            "fl oz",
            "fl oz.",
            "fl. ounce",
            "fl. ounces",
            "fl.ozs.",
            "flozs",
            "fl.ozs",
            "flozs.",
        ],
        "plural": "fluid ounces",
        "symbol": "fl oz",
        "system": "imperial",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 29.5735},
        "skip_conversion": False,
        "decimal_places": 1,
    },
    "wineglass": {
        "names": [
            "wineglass",
            "wine glass",
            "wineglasses",
            "wine glasses",
            "wgf.",
            "wgf",
            "wgfs.",
            "wgfs",
        ],
        "plural": "wineglasses",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 59.14},
        "skip_conversion": True,
        "decimal_places": 1,
    },
    "gill": {
        "names": [
            "gill",
            "gills",
            "teacup",
            "tea cup",
            "teacups",
            "tea cups",
            "tcf.",
            "tcf",
            "tcfs.",
            "tcfs",
        ],
        "plural": "gills",
        "symbol": "",
        "system": None,
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 118.29},
        "skip_conversion": True,
        "decimal_places": 2,
    },
    "cup": {
        "names": ["cup", "cups", "C.", "C", "c.", "c", "Cs.", "Cs"],
        "plural": "cups",
        "symbol": "c",
        "system": "americanVolumetric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 236.588},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "pint": {
        "names": ["pint", "pints", "pt.", "pt", "pts.", "pts"],
        "plural": "pints",
        "symbol": "pt",
        "system": "americanVolumetric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 473.176},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "quart": {
        "names": ["quart", "quarts", "qt.", "qt", "qts.", "qts"],
        "plural": "quarts",
        "symbol": "qt",
        "system": "americanVolumetric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 946.353},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "gallon": {
        "names": ["gallon", "gallons", "gal.", "gal", "gals.", "gals"],
        "plural": "gallons",
        "symbol": "gal",
        "system": "imperial",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 3785.41},
        "skip_conversion": False,
        "decimal_places": 3,
    },
    "milliliter": {
        "names": [
            "milliliter",
            "milliliters",
            "millilitre",
            "millilitres",
            "ml.",
            "ml",
            "mls.",
            "mls",
        ],
        "plural": "milliliters",
        "symbol": "ml",
        "system": "metric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 1},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "liter": {
        "names": [
            "liter",
            "liters",
            "litre",
            "litres",
            "l.",
            "l",
            "ls.",
            "ls",
            "lt",
            "lt.",
        ],
        "plural": "liters",
        "symbol": "lt",
        "system": "metric",
        "unit_type": "volume",
        "conversion_factor": {"milliliters": 1000},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "milligram": {
        "names": ["milligram", "milligrams", "mg.", "mg", "mgs.", "mgs"],
        "plural": "milligrams",
        "symbol": "mg",
        "system": "metric",
        "unit_type": "weight",
        "conversion_factor": {"grams": 0.001},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "gram": {
        "names": ["gram", "grams", "g.", "g", "gs.", "gs"],
        "plural": "grams",
        "symbol": "g",
        "system": "metric",
        "unit_type": "weight",
        "conversion_factor": {"grams": 1},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "kilogram": {
        "names": [
            "kilogram",
            "kilo gram",
            "kilograms",
            "kilo grams",
            "kg.",
            "kg",
            "kgs.",
            "kgs",
        ],
        "plural": "kilograms",
        "symbol": "kg",
        "system": "metric",
        "unit_type": "weight",
        "conversion_factor": {"grams": 1000},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "ounce": {
        "names": ["ounce", "ounces", "oz.", "oz", "ozs.", "ozs"],
        "plural": "ounces",
        "symbol": "oz",
        "system": "imperial",
        "unit_type": "weight",
        "conversion_factor": {"grams": 28.3495},
        "skip_conversion": False,
        "decimal_places": 1,
    },
    "pound": {
        "names": [
            "pound",
            "pounds",
            "lb.",
            "lb",
            "lbs.",
            "lbs",
            "Lb",
            "Lbs",
            "Lb.",
            "Lbs.",
        ],
        "plural": "pounds",
        "symbol": "lb",
        "system": "imperial",
        "unit_type": "weight",
        "conversion_factor": {"grams": 453.592},
        "skip_conversion": False,
        "decimal_places": 2,
    },
    "clove": {
        "names": ["clove", "cloves"],
        "plural": "cloves",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "pack": {
        "names": [
            "package",
            "pkg",
            "pkgs",
            "pkg.",
            "pkgs.",
            "pack",
            "packet",
            "packets",
        ],
        "plural": "packs",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "bag": {
        "names": ["bag", "bg", "bg."],
        "plural": "bags",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "box": {
        "names": ["box", "boxes"],
        "plural": "boxes",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "bottle": {
        "names": ["bottle", "bottles", "btl", "btl."],
        "plural": "bottles",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "container": {
        "names": ["container", "containers", "cont", "cont."],
        "plural": "containers",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "can": {
        "names": ["can", "cans"],
        "plural": "cans",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "stick": {
        "names": ["stick", "sticks"],
        "plural": "sticks",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "dozen": {
        "names": ["dozen"],
        "plural": "dozens",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "piece": {
        "names": ["piece", "pcs", "pcs."],
        "plural": "pieces",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "squirt": {
        "names": ["squirt", "squirts"],
        "plural": "squirts",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "bunch": {
        "names": ["bunch", "bunches"],
        "plural": "bunches",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "serving": {
        "names": ["serving", "servings", "portion", "portions"],
        "plural": "servings",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "slice": {
        "names": ["slice", "slices"],
        "plural": "slices",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "handful": {
        "names": ["handful", "handfuls"],
        "plural": "handfuls",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "drizzle": {
        "names": ["drizzle", "drizzles"],
        "plural": "drizzles",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "ear": {
        "names": ["ear", "ears"],
        "plural": "ears",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "few": {
        "names": ["few"],
        "plural": "few",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "knob": {
        "names": ["knob", "knobs"],
        "plural": "knobs",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "thumb": {
        "names": ["thumb", "thumbs"],
        "plural": "thumbs",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "block": {
        "names": ["block", "blocks"],
        "plural": "blocks",
        "symbol": "",
        "system": None,
        "unit_type": "count",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "inch": {
        "names": ["inch", "inches"],
        "plural": "inches",
        "symbol": "",
        "system": None,
        "unit_type": "length",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 0,
    },
    "centimetre": {
        "names": ["centimeter", "centimetre", "centimeters", "centimetres", "cm", "cm."],
        "plural": "centimetres",
        "symbol": "cm",
        "system": "metric",
        "unit_type": "length",
        "conversion_factor": None,
        "skip_conversion": True,
        "decimal_places": 1,
    },
}

PREPOSITIONS = ["of"]

JOINERS = ["to", "or"]

TO_TASTE = ["to taste", "t.t.", "t.t", "tt"]

TO_TASTE_ADDITIONAL = ["more", "adjust", "season", "or", "or more", "plus more"]

ADDITIONAL_STOPWORDS = ["and", "or"]

APPROX = ["about", "approx", "approx.", "approximately", "roughly", "~"]

OPTIONAL = ["optional", "option.", "if desired"]

TO_SERVE = [
    "to serve",
    "for serving",
    "for garnish",
    "to garnish",
    "garnish",
    "garnish with",
    "to decorate",
]

INSTRUCTIONS = [
    "chopped",
    "diced",
    "sliced",
    "minced",
    "mince",
    "crushed",
    "grated",
    "thinly sliced",
    "strained",
    "julienned",
    "halved",
    "quartered",
    "peeled",
    "pitted",
    "seeded",
    "de-seeded",
    "rinsed",
    "rinsed well",
    "drained",
    "drained well",
    "pressed",
    "melted",
    "softened",
    "warmed",
    "warm",
    "hot",
    "lukewarm",
    "cold",
    "chilled",
    "cooled",
    "icy",
    "ripe",
    "whole",
    "boiled",
    "soft-boiled",
    "soft boiled",
    "hard-boiled",
    "hard boiled",
    "poached",
    "ground",
    "leftover",
    "toasted",
    "roasted",
    "grilled",
    "baked",
    "fried",
    "seared",
    "caramelized",
    "browned",
    "thawed",
    "defrosted",
    "marinated",
    "soaked",
    "blanched",
    "shredded",
    "smashed",
    "mashed",
    "whisked",
    "beaten",
    "mixed",
    "stirred",
    "trimmed",
    "stemmed",
    "hulled",
    "deveined",
    "cubed",
    "torn",
    "broken",
    "cracked",
    "zested",
    "juiced",
    "squeezed",
    "tender",
    "small",
    "medium",
    "large",
    "divided",
    "husked",
    "frozen",
    "dry",
    "leveled",
    "levelled",
    "store-bought",
    "at room temperature",
    "for greasing",
    "for greasing the tin",
    "for the pan",
    "stoned",
    "cooked",
    "crumbled",
    "crispy",
    "crisp",
    "snipped",
    "dried",
    "dry-cured",
    "packed",
    "fresh",
    "good-quality",
    "homemade",
    "home-made",
    "heaped",
    "hearty",
    "ice-cold",
    "ice cold",
    "juice of",
    "for frying",
    "reserved",
    "raw",
    "salted",
    "unsalted",
    "thick",
    "thin",
    "thick-cut",
    "unsweetened",
    "unseasoned",
    "unwaxed",
    "firm",
    "soft",
    "uncooked",
]

ADVERBS = ["finely", "thinly", "coarsely", "freshly", "roughly", "firmly", "lightly"]

NUMBERS_SMALL = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

NUMBERS_MAGNITUDE = {
    "hundred": 100,
    "thousand": 1000,
    "million": 1000000,
    "billion": 1000000000,
    "trillion": 1000000000000,
}

PROBLEMATIC_UNITS = {
    "clove": ["garlic"],
}

IS_COMMA_DELIMITED = False

ALTERNATIVE_WORDS = ["or"]

FILLER_WORDS = ["healthy", "scant", "heaping", "generous", "level", "each", "a", "an", "the"]
