"""Unit vocabulary, alias tables and mass estimation."""

import re
from dataclasses import dataclass

from recipebook.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Vocabulary
# =============================================================================

# Spellings the ingredient parser recognizes after a leading quantity.
UNIT_VOCABULARY: tuple[str, ...] = (
    # Weight
    "kg",
    "g",
    "oz",
    "lb",
    "lbs",
    # Volume
    "litre",
    "litres",
    "liter",
    "liters",
    "l",
    "ml",
    "millilitre",
    "millilitres",
    "pint",
    "pints",
    "fl oz",
    # Spoons
    "tbsp",
    "tablespoon",
    "tablespoons",
    "tsp",
    "teaspoon",
    "teaspoons",
    "dessertspoon",
    "dessertspoons",
    # Cups
    "cup",
    "cups",
    # Loose
    "bunch",
    "bunches",
    "handful",
    "handfuls",
    "can",
    "cans",
    "tin",
    "tins",
    "jar",
    "jars",
    "pack",
    "packs",
    "packet",
    "packets",
    "sheet",
    "sheets",
    "slice",
    "slices",
    "sprig",
    "sprigs",
    "clove",
    "cloves",
    "pinch",
    "pinches",
    "dash",
    "dashes",
    "drop",
    "drops",
    "stick",
    "sticks",
    "rasher",
    "rashers",
)

# Longest spelling first so "tbsp" is tried before "tsp" and "litres" before "l".
# sorted() is stable, equal lengths keep declaration order.
UNITS_BY_LENGTH: tuple[str, ...] = tuple(sorted(UNIT_VOCABULARY, key=len, reverse=True))

# Plural and synonym spellings collapsed to one canonical short form.
UNIT_ALIASES: dict[str, str] = {
    "gram": "g",
    "grams": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "millilitre": "ml",
    "millilitres": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "litre": "l",
    "litres": "l",
    "liter": "l",
    "liters": "l",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "dessertspoon": "dsp",
    "dessertspoons": "dsp",
    "pints": "pint",
    "cans": "can",
    "tins": "tin",
    "packs": "pack",
    "packets": "pack",
    "packet": "pack",
    "bunches": "bunch",
    "handfuls": "handful",
    "sprigs": "sprig",
    "cloves": "clove",
    "rashers": "rasher",
    "slices": "slice",
    "sheets": "sheet",
    "sticks": "stick",
}


# =============================================================================
# Mass Conversion Tables
# =============================================================================

# Grams per unit. Volume units assume water (1 ml ~ 1 g) before density.
UNIT_GRAMS: dict[str, float] = {
    # Weight
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "oz": 28.35,
    "ounce": 28.35,
    "ounces": 28.35,
    "lb": 453.59,
    "pound": 453.59,
    "pounds": 453.59,
    # Volume
    "ml": 1.0,
    "millilitre": 1.0,
    "millilitres": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "litre": 1000.0,
    "litres": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "tbsp": 15.0,
    "tablespoon": 15.0,
    "tablespoons": 15.0,
    "tsp": 5.0,
    "teaspoon": 5.0,
    "teaspoons": 5.0,
    "cup": 240.0,
    "cups": 240.0,
    "fl oz": 28.41,
    "fluid ounce": 28.41,
    "fluid ounces": 28.41,
}

VOLUME_UNITS: frozenset[str] = frozenset(
    {
        "ml",
        "millilitre",
        "millilitres",
        "milliliter",
        "milliliters",
        "l",
        "litre",
        "litres",
        "liter",
        "liters",
        "tbsp",
        "tablespoon",
        "tablespoons",
        "tsp",
        "teaspoon",
        "teaspoons",
        "cup",
        "cups",
        "fl oz",
        "fluid ounce",
        "fluid ounces",
    }
)

# Units that mean "this many whole items" for the count-weight table.
COUNT_QUALIFIERS: frozenset[str] = frozenset(
    {"whole", "large", "medium", "small", "piece", "pieces", "slice", "slices"}
)

# Rough weight of an unrecognized whole item.
DEFAULT_COUNT_GRAMS = 100.0


@dataclass(frozen=True)
class DensityRule:
    """Grams per millilitre for ingredient names matching a pattern."""

    pattern: re.Pattern[str]
    grams_per_ml: float

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


@dataclass(frozen=True)
class CountWeightRule:
    """Typical grams per whole item for names matching a pattern."""

    pattern: re.Pattern[str]
    grams_per_unit: float

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


# First match wins; keep specific patterns above broader ones.
DENSITY_RULES: tuple[DensityRule, ...] = (
    DensityRule(re.compile(r"\boil\b"), 0.91),
    DensityRule(re.compile(r"\bbutter\b"), 0.91),
    DensityRule(re.compile(r"\bhoney\b"), 1.42),
    DensityRule(re.compile(r"\bsugar\b"), 0.85),
    DensityRule(re.compile(r"\bflour\b"), 0.53),
    DensityRule(re.compile(r"\bsalt\b"), 1.2),
    DensityRule(re.compile(r"\bmilk\b"), 1.03),
    DensityRule(re.compile(r"\bcream\b"), 1.0),
    DensityRule(re.compile(r"\bstock\b|\bbroth\b"), 1.0),
    DensityRule(re.compile(r"\bwine\b"), 0.99),
    DensityRule(re.compile(r"\bvinegar\b"), 1.01),
    DensityRule(re.compile(r"\bcocoa\b"), 0.5),
)

COUNT_WEIGHT_RULES: tuple[CountWeightRule, ...] = (
    CountWeightRule(re.compile(r"\beggs?\b"), 55.0),
    CountWeightRule(re.compile(r"\bonions?\b"), 150.0),
    CountWeightRule(re.compile(r"\bcloves? of garlic\b|\bgarlic cloves?\b"), 5.0),
    CountWeightRule(re.compile(r"\bcarrots?\b"), 80.0),
    CountWeightRule(re.compile(r"\btomato(es)?\b"), 120.0),
    CountWeightRule(re.compile(r"\bpotato(es)?\b"), 170.0),
    CountWeightRule(re.compile(r"\bchicken breasts?\b"), 175.0),
    CountWeightRule(re.compile(r"\bchicken thighs?\b"), 120.0),
    CountWeightRule(re.compile(r"\blemons?\b"), 100.0),
    CountWeightRule(re.compile(r"\blimes?\b"), 70.0),
    CountWeightRule(re.compile(r"\bcourgettes?\b|\bzucchinis?\b"), 200.0),
    CountWeightRule(re.compile(r"\bpeppers?\b|\bcapsicums?\b"), 160.0),
    CountWeightRule(re.compile(r"\bsticks? of celery\b|\bcelery sticks?\b"), 40.0),
    CountWeightRule(re.compile(r"\bshallots?\b"), 30.0),
    CountWeightRule(re.compile(r"\bbayleaf\b|\bbay leaf\b|\bbay leaves\b"), 1.0),
)


# =============================================================================
# Lookup Functions
# =============================================================================


def is_volume_unit(unit: str | None) -> bool:
    """Check if a unit spelling measures volume."""
    return bool(unit) and unit.lower().strip() in VOLUME_UNITS


def find_density(
    ingredient_name: str,
    rules: tuple[DensityRule, ...] = DENSITY_RULES,
) -> float | None:
    """Return grams per ml from the first matching density rule, if any."""
    name = ingredient_name.lower()
    for rule in rules:
        if rule.matches(name):
            return rule.grams_per_ml
    return None


def find_count_weight(
    ingredient_name: str,
    rules: tuple[CountWeightRule, ...] = COUNT_WEIGHT_RULES,
) -> float | None:
    """Return grams per item from the first matching count-weight rule, if any."""
    name = ingredient_name.lower()
    for rule in rules:
        if rule.matches(name):
            return rule.grams_per_unit
    return None


def to_grams(
    quantity: float,
    unit: str | None,
    ingredient_name: str,
) -> float | None:
    """
    Estimate the mass of an ingredient amount in grams.

    Weight units convert directly. Volume units are scaled by the density of
    the first matching density rule (water when none match). A missing unit or
    a bare count qualifier ("large", "pieces") uses the count-weight table,
    falling back to 100 g per item.

    Args:
        quantity: The amount, already scaled.
        unit: The unit spelling, or None for a whole-item count.
        ingredient_name: Free-text ingredient name used for density/weight rules.

    Returns:
        Grams, or None when the unit cannot be converted (pinch, handful, ...).
    """
    u = (unit or "").lower().strip()

    if u and u in UNIT_GRAMS:
        grams_per_unit = UNIT_GRAMS[u]
        density = 1.0
        if u in VOLUME_UNITS:
            density = find_density(ingredient_name) or 1.0
        return quantity * grams_per_unit * density

    if not u or u in COUNT_QUALIFIERS:
        grams_each = find_count_weight(ingredient_name)
        if grams_each is None:
            grams_each = DEFAULT_COUNT_GRAMS
        return quantity * grams_each

    logger.debug(f"No gram estimate for unit '{u}' ({ingredient_name})")
    return None
