"""Hungarian vocabulary for the ingredient parser."""

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
        "singular": "drop",
        "plural": "drops",
        "symbol": "",
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
        "singular": "smidgen",
        "plural": "smidgens",
        "symbol": "",
    },
    "pinch": {
        "names": [
            "pinch",
            "pinches",
            "pinchs",
            "pn.",
            "pn",
            "pns.",
            "pns",
            "csipet",
            "csipetnyi",
        ],
        "singular": "csipet",
        "plural": "csipet",
        "symbol": "",
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
            "csöpp",
            "csopp",
        ],
        "singular": "csöpp",
        "plural": "csöpp",
        "symbol": "",
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
        "singular": "saltspoon",
        "plural": "saltspoons",
        "symbol": "",
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
        "singular": "coffeespoon",
        "plural": "coffeespoons",
        "symbol": "",
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
        "singular": "fluiddram",
        "plural": "fluid drams",
        "symbol": "",
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
            "teáskanál",
            "teaskanal",
            "tk",
            "tk.",
        ],
        "singular": "teáskanál",
        "plural": "teáskanál",
        "symbol": "tk",
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
        "singular": "dessertspoon",
        "plural": "dessertspoons",
        "symbol": "",
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
            "evőkanál",
            "evokanal",
            "ek",
            "ek.",
        ],
        "singular": "evőkanál",
        "plural": "evőkanál",
        "symbol": "ek",
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
        "singular": "floz",
        "plural": "fluid ounces",
        "symbol": "fl oz",
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
        "singular": "wineglass",
        "plural": "wineglasses",
        "symbol": "",
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
        "singular": "gill",
        "plural": "gills",
        "symbol": "",
    },
    "cup": {
        "names": ["cup", "cups", "C.", "C", "c.", "c", "Cs.", "Cs", "csésze", "csesze"],
        "singular": "csésze",
        "plural": "csésze",
        "symbol": "cs",
    },
    "pint": {
        "names": ["pint", "pints", "pt.", "pt", "pts.", "pts"],
        "singular": "pint",
        "plural": "pints",
        "symbol": "pt",
    },
    "quart": {
        "names": ["quart", "quarts", "qt.", "qt", "qts.", "qts"],
        "singular": "quart",
        "plural": "quarts",
        "symbol": "qt",
    },
    "gallon": {
        "names": ["gallon", "gallons", "gal.", "gal", "gals.", "gals"],
        "singular": "gallon",
        "plural": "gallons",
        "symbol": "gal",
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
        "singular": "milliliter",
        "plural": "milliliter",
        "symbol": "ml",
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
        "singular": "liter",
        "plural": "liter",
        "symbol": "l",
    },
    "milligram": {
        "names": ["milligram", "milligrams", "mg.", "mg", "mgs.", "mgs", "milligramm"],
        "singular": "milligramm",
        "plural": "milligramm",
        "symbol": "mg",
    },
    "gram": {
        "names": ["gram", "grams", "g.", "g", "gs.", "gs", "gramm"],
        "singular": "gramm",
        "plural": "gramm",
        "symbol": "g",
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
            "kilogramm",
        ],
        "singular": "kilogramm",
        "plural": "kilogramm",
        "symbol": "kg",
    },
    "ounce": {
        "names": ["ounce", "ounces", "oz.", "oz", "ozs.", "ozs"],
        "singular": "ounce",
        "plural": "ounces",
        "symbol": "oz",
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
        "singular": "pound",
        "plural": "pounds",
        "symbol": "lb",
    },
    "clove": {
        "names": ["clove", "cloves", "gerezd", "gerezdek"],
        "singular": "gerezd",
        "plural": "gerezd",
        "symbol": "",
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
        "singular": "pack",
        "plural": "packs",
        "symbol": "",
    },
    "bag": {
        "names": ["bag", "bg", "bg."],
        "singular": "bag",
        "plural": "bags",
        "symbol": "",
    },
    "box": {
        "names": ["box", "boxes"],
        "singular": "box",
        "plural": "boxes",
        "symbol": "",
    },
    "bottle": {
        "names": ["bottle", "bottles", "btl", "btl."],
        "singular": "bottle",
        "plural": "bottles",
        "symbol": "",
    },
    "container": {
        "names": ["container", "containers", "cont", "cont."],
        "singular": "container",
        "plural": "containers",
        "symbol": "",
    },
    "can": {
        "names": ["can", "cans"],
        "singular": "can",
        "plural": "cans",
        "symbol": "",
    },
    "stick": {
        "names": ["stick", "sticks"],
        "singular": "stick",
        "plural": "sticks",
        "symbol": "",
    },
    "dozen": {
        "names": ["dozen"],
        "singular": "dozen",
        "plural": "dozens",
        "symbol": "",
    },
    "piece": {
        "names": ["piece", "pcs", "pcs."],
        "singular": "piece",
        "plural": "pieces",
        "symbol": "",
    },
    "squirt": {
        "names": ["squirt", "squirts"],
        "singular": "squirt",
        "plural": "squirts",
        "symbol": "",
    },
    "bunch": {
        "names": ["bunch", "bunches"],
        "singular": "bunch",
        "plural": "bunches",
        "symbol": "",
    },
    "serving": {
        "names": ["serving", "servings", "portion", "portions"],
        "singular": "serving",
        "plural": "servings",
        "symbol": "",
    },
    "slice": {
        "names": ["slice", "slices"],
        "singular": "slice",
        "plural": "slices",
        "symbol": "",
    },
    "handful": {
        "names": ["handful", "handfuls"],
        "singular": "handful",
        "plural": "handfuls",
        "symbol": "",
    },
    "drizzle": {
        "names": ["drizzle", "drizzles"],
        "singular": "drizzle",
        "plural": "drizzles",
        "symbol": "",
    },
    "ear": {
        "names": ["ear", "ears"],
        "singular": "ear",
        "plural": "ears",
        "symbol": "",
    },
    "few": {
        "names": ["few"],
        "singular": "few",
        "plural": "few",
        "symbol": "",
    },
    "knob": {
        "names": ["knob", "knobs"],
        "singular": "knob",
        "plural": "knobs",
        "symbol": "",
    },
    "thumb": {
        "names": ["thumb", "thumbs"],
        "singular": "thumb",
        "plural": "thumbs",
        "symbol": "",
    },
    "block": {
        "names": ["block", "blocks"],
        "singular": "block",
        "plural": "blocks",
        "symbol": "",
    },
    "inch": {
        "names": ["inch", "inches"],
        "singular": "inch",
        "plural": "inches",
        "symbol": "",
    },
    "centimetre": {
        "names": ["centimeter", "centimetre", "centimeters", "centimetres", "cm", "cm."],
        "singular": "centimetre",
        "plural": "centimetres",
        "symbol": "cm",
    },
}

PREPOSITIONS = []

JOINERS = ["ig", "vagy"]

TO_TASTE = ["ízlés szerint"]

TO_TASTE_ADDITIONAL = ["több", "kevesebb", "vagy", "még", "ízlés szerint"]

ADDITIONAL_STOPWORDS = []

APPROX = ["kb.", "körülbelül", "hozzávetőlegesen", "~"]

OPTIONAL = ["opcionális", "elhagyható", "ha szeretnéd"]

TO_SERVE = ["tálaláshoz", "tálalásra", "díszítéshez", "díszítésre"]

INSTRUCTIONS = [
    "aprított",
    "felkockázott",
    "szeletelt",
    "reszelt",
    "zúzott",
    "hámozott",
    "mag nélküli",
    "lecsöpögtetett",
    "olvasztott",
    "puhított",
    "meleg",
    "hideg",
    "sült",
    "főtt",
    "pirított",
    "nyers",
]

ADVERBS = ["finomra", "durvára", "frissen"]

NUMBERS_SMALL = {
    "nulla": 0,
    "egy": 1,
    "kettő": 2,
    "ketto": 2,
    "három": 3,
    "harom": 3,
    "négy": 4,
    "negy": 4,
    "öt": 5,
    "ot": 5,
    "hat": 6,
    "hét": 7,
    "het": 7,
    "nyolc": 8,
    "kilenc": 9,
    "tíz": 10,
    "tiz": 10,
    "tizenegy": 11,
    "tizenkettő": 12,
    "tizenketto": 12,
    "tizenhárom": 13,
    "tizenharom": 13,
    "tizennégy": 14,
    "tizennegy": 14,
    "tizenöt": 15,
    "tizenot": 15,
    "tizenhat": 16,
    "tizenhét": 17,
    "tizenhet": 17,
    "tizennyolc": 18,
    "tizenkilenc": 19,
    "húsz": 20,
    "husz": 20,
    "harminc": 30,
    "negyven": 40,
    "ötven": 50,
    "otven": 50,
    "hatvan": 60,
    "hetven": 70,
    "nyolcvan": 80,
    "kilencven": 90,
}

NUMBERS_MAGNITUDE = {
    "száz": 100,
    "szaz": 100,
    "ezer": 1000,
    "millió": 1000000,
    "millio": 1000000,
    "milliárd": 1000000000,
    "milliard": 1000000000,
    "billió": 1000000000000,
    "billio": 1000000000000,
}

PROBLEMATIC_UNITS = {
    "clove": ["fokhagyma"],
}

IS_COMMA_DELIMITED = True

ALTERNATIVE_WORDS = ["vagy"]

FILLER_WORDS = ["egy", "az"]
