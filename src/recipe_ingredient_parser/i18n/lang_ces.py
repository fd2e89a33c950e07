"""Czech vocabulary for the ingredient parser."""

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
            "špetka",
            "spetka",
        ],
        "singular": "špetka",
        "plural": "špetky",
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
            "kapka",
            "kapky",
        ],
        "singular": "kapka",
        "plural": "kapky",
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
            "čajová lžička",
            "cajova lzicka",
            "lžička",
            "lzicka",
            "čl",
            "cl",
            "čl.",
            "cl.",
        ],
        "singular": "čajová lžička",
        "plural": "čajové lžičky",
        "symbol": "čl",
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
            "polévková lžíce",
            "polevkova lzice",
            "lžíce",
            "lzice",
            "pl",
            "pl.",
        ],
        "singular": "polévková lžíce",
        "plural": "polévkové lžíce",
        "symbol": "pl",
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
        "names": [
            "cup",
            "cups",
            "C.",
            "C",
            "c.",
            "c",
            "Cs.",
            "Cs",
            "hrnek",
            "hrnky",
            "šálek",
            "salek",
        ],
        "singular": "hrnek",
        "plural": "hrnky",
        "symbol": "hr",
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
            "mililitr",
        ],
        "singular": "mililitr",
        "plural": "mililitrů",
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
            "litr",
        ],
        "singular": "litr",
        "plural": "litrů",
        "symbol": "l",
    },
    "milligram": {
        "names": ["milligram", "milligrams", "mg.", "mg", "mgs.", "mgs", "miligram"],
        "singular": "miligram",
        "plural": "miligramů",
        "symbol": "mg",
    },
    "gram": {
        "names": ["gram", "grams", "g.", "g", "gs.", "gs"],
        "singular": "gram",
        "plural": "gramů",
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
        ],
        "singular": "kilogram",
        "plural": "kilogramů",
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
        "names": ["clove", "cloves", "stroužek", "strouzek", "stroužky", "strouzky"],
        "singular": "stroužek",
        "plural": "stroužky",
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

JOINERS = ["až", "nebo"]

TO_TASTE = ["dle chuti"]

TO_TASTE_ADDITIONAL = ["více", "méně", "nebo", "ještě"]

ADDITIONAL_STOPWORDS = []

APPROX = ["cca", "přibližně", "priblizne", "~"]

OPTIONAL = ["volitelně", "volitelné", "dle chuti"]

TO_SERVE = ["k podávání", "na podávání", "na ozdobu", "k ozdobě"]

INSTRUCTIONS = [
    "nasekané",
    "nakrájené",
    "na kostičky",
    "na plátky",
    "strouhané",
    "drcené",
    "loupané",
    "bez pecek",
    "okapané",
    "rozpuštěné",
    "měkké",
    "teplé",
    "studené",
    "pečené",
    "vařené",
    "opečené",
    "syrové",
]

ADVERBS = ["jemně", "nahrubo", "čerstvě", "cerstve"]

NUMBERS_SMALL = {
    "nula": 0,
    "jedna": 1,
    "jeden": 1,
    "dva": 2,
    "dvě": 2,
    "dve": 2,
    "tři": 3,
    "tri": 3,
    "čtyři": 4,
    "ctyri": 4,
    "pět": 5,
    "pet": 5,
    "šest": 6,
    "sest": 6,
    "sedm": 7,
    "osm": 8,
    "devět": 9,
    "devet": 9,
    "deset": 10,
    "jedenáct": 11,
    "jedenact": 11,
    "dvanáct": 12,
    "dvanact": 12,
    "třináct": 13,
    "trinact": 13,
    "čtrnáct": 14,
    "ctrnact": 14,
    "patnáct": 15,
    "patnact": 15,
    "šestnáct": 16,
    "sestnact": 16,
    "sedmnáct": 17,
    "sedmnact": 17,
    "osmnáct": 18,
    "osmnact": 18,
    "devatenáct": 19,
    "devatenact": 19,
    "dvacet": 20,
    "třicet": 30,
    "tricet": 30,
    "čtyřicet": 40,
    "ctyricet": 40,
    "padesát": 50,
    "padesat": 50,
    "šedesát": 60,
    "sedesat": 60,
    "sedmdesát": 70,
    "sedmdesat": 70,
    "osmdesát": 80,
    "osmdesat": 80,
    "devadesát": 90,
    "devadesat": 90,
}

NUMBERS_MAGNITUDE = {
    "sto": 100,
    "tisíc": 1000,
    "tisic": 1000,
    "milion": 1000000,
    "miliarda": 1000000000,
    "bilion": 1000000000000,
}

PROBLEMATIC_UNITS = {
    "clove": ["česnek", "cesnek"],
}

IS_COMMA_DELIMITED = True

ALTERNATIVE_WORDS = ["nebo"]

FILLER_WORDS = ["každý", "každá", "každé"]
