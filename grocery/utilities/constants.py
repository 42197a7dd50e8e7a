from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DEFAULT_UNIT: Final[str] = "item"
DEFAULT_CURRENCY: Final[str] = "USD"

# key -> (standard price, preferred/organic price, unit)
INGREDIENT_PRICES: Final[dict[str, tuple]] = {
    # Proteins (per lb or unit)
    "chicken": (3.99, 7.99, "lb"),
    "beef": (6.99, 12.99, "lb"),
    "pork": (4.99, 8.99, "lb"),
    "fish": (8.99, 12.99, "lb"),
    "salmon": (12.99, 18.99, "lb"),
    "tofu": (2.99, 4.99, "pack"),
    "eggs": (3.99, 6.99, "dozen"),
    "turkey": (4.99, 8.99, "lb"),
    # Vegetables
    "broccoli": (2.49, 3.99, "lb"),
    "spinach": (3.99, 5.99, "bunch"),
    "carrots": (1.99, 2.99, "lb"),
    "tomatoes": (2.99, 4.99, "lb"),
    "peppers": (1.99, 2.99, "each"),
    "onions": (1.49, 2.49, "lb"),
    "garlic": (0.79, 1.29, "head"),
    "mushrooms": (3.99, 5.99, "pack"),
    # Fruits
    "apples": (1.99, 3.99, "lb"),
    "bananas": (0.59, 0.89, "lb"),
    "berries": (4.99, 6.99, "pack"),
    "oranges": (1.49, 2.99, "lb"),
    # Grains & staples
    "rice": (2.99, 4.99, "2lb bag"),
    "pasta": (1.99, 3.49, "box"),
    "bread": (2.99, 4.99, "loaf"),
    "quinoa": (5.99, 8.99, "lb"),
    "oats": (3.99, 5.99, "container"),
    # Dairy
    "milk": (3.99, 6.99, "gallon"),
    "cheese": (4.99, 7.99, "pack"),
    "yogurt": (4.99, 6.99, "container"),
    "butter": (3.99, 6.99, "lb"),
    # Pantry
    "olive_oil": (8.99, 12.99, "bottle"),
    "soy_sauce": (3.99, 5.99, "bottle"),
    "canned_tomatoes": (1.99, 2.99, "can"),
    "beans": (1.49, 2.49, "can"),
}

CUISINE_STAPLES: Final[dict[str, list[str]]] = {
    "italian": ["olive_oil", "garlic", "onions", "canned_tomatoes", "pasta", "cheese"],
    "mexican": ["beans", "rice", "onions", "peppers", "tomatoes", "tortillas"],
    "asian": ["soy_sauce", "rice", "garlic", "ginger", "sesame_oil"],
    "indian": ["rice", "onions", "garlic", "ginger", "yogurt", "spices"],
    "mediterranean": ["olive_oil", "garlic", "tomatoes", "onions", "feta_cheese"],
    "middle_eastern": ["olive_oil", "garlic", "chickpeas", "tahini", "lemon"],
    "american": ["butter", "milk", "eggs", "bread", "cheese"],
}

# Evaluated top to bottom, first match wins.
CATEGORY_KEYWORDS: Final[list[tuple[str, tuple[str, ...]]]] = [
    ("proteins", ("chicken", "beef", "pork", "fish", "salmon", "tofu", "turkey", "eggs")),
    ("produce", ("broccoli", "spinach", "carrots", "tomatoes", "peppers", "onions", "garlic",
                 "mushrooms", "lettuce", "cucumber",
                 "apples", "bananas", "berries", "oranges", "grapes", "mango")),
    ("dairy", ("milk", "cheese", "yogurt", "butter")),
    ("grains_bread", ("rice", "pasta", "bread", "quinoa", "oats")),
    ("pantry", ("oil", "sauce", "canned", "beans", "spices")),
]

CATEGORY_ORDER: Final[list[str]] = ["produce", "proteins", "dairy", "grains_bread", "pantry", "other"]
PRIORITY_ORDER: Final[list[str]] = ["essential", "staple", "optional"]
BUDGET_STATUSES: Final[tuple[str, ...]] = ("under", "at", "over")
STRICTNESS_LEVELS: Final[tuple[str, ...]] = ("strict", "flexible")

# Household weights: (max age inclusive, weight). The last band also covers older children.
ADULT_WEIGHT: Final[float] = 1.0
CHILD_AGE_WEIGHTS: Final[list[tuple[int, float]]] = [(4, 0.3), (9, 0.5), (14, 0.75), (18, 0.9)]

# bucket -> (cap, base quantity, unit, fallback category, meals, id prefix)
FAVORITE_BUCKETS: Final[list[tuple]] = [
    ("proteins", 3, 2.0, "lb", "proteins", ["various"], "protein"),
    ("vegetables", 7, 1.0, "lb", "produce", ["various"], "veg"),
    ("fruits", 4, 1.5, "lb", "produce", ["snacks"], "fruit"),
    ("grains", 2, 2, "pack", "grains_bread", ["various"], "grain"),
]
# Buckets bought as a flat pack count, not scaled by household size.
FLAT_QUANTITY_BUCKETS: Final[frozenset] = frozenset({"grains"})

MEAT_FISH_KEYWORDS: Final[tuple[str, ...]] = ("chicken", "beef", "pork", "fish", "salmon", "turkey")
DAIRY_KEYWORDS: Final[tuple[str, ...]] = ("milk", "cheese", "yogurt", "butter")
RESTRICTION_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "vegan": MEAT_FISH_KEYWORDS + ("eggs",) + DAIRY_KEYWORDS,
    "vegetarian": MEAT_FISH_KEYWORDS,
    "dairy_free": DAIRY_KEYWORDS,
    "gluten_free": ("bread", "pasta"),
}

ALLERGEN_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "peanuts": ("peanut",),
    "tree_nuts": ("almond", "cashew", "walnut", "pecan", "pistachio", "hazelnut", "macadamia", "nut"),
    "shellfish": ("shrimp", "crab", "lobster", "shellfish", "prawn", "crayfish"),
    "fish": ("salmon", "tuna", "cod", "fish", "tilapia", "trout", "halibut"),
    "eggs": ("egg",),
    "dairy": ("milk", "cheese", "yogurt", "butter", "cream", "dairy", "whey", "casein"),
    "soy": ("soy", "tofu", "tempeh", "edamame", "miso"),
    "wheat": ("wheat", "flour", "bread", "pasta", "couscous"),
    "sesame": ("sesame", "tahini"),
}
NO_ALLERGY: Final[str] = "none"
CUSTOM_ALLERGY_PREFIX: Final[str] = "other:"

ALTERNATIVE_SUGGESTION_TEXT: Final[str] = "Consider a cheaper alternative to save money"
LIST_DURATION_DAYS: Final[int] = 7
