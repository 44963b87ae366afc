"""Turn free-text ingredient lines into structured, weighable rows."""

from recipebook.normalize.parsing import (
    ParsedIngredient,
    ScrapedIngredient,
    normalize_fractions,
    parse_ingredient,
    parse_ingredients,
    parse_number,
)
from recipebook.normalize.units import (
    COUNT_WEIGHT_RULES,
    DENSITY_RULES,
    UNIT_ALIASES,
    UNIT_VOCABULARY,
    CountWeightRule,
    DensityRule,
    find_count_weight,
    find_density,
    is_volume_unit,
    to_grams,
)

__all__ = [
    "COUNT_WEIGHT_RULES",
    "DENSITY_RULES",
    "UNIT_ALIASES",
    "UNIT_VOCABULARY",
    "CountWeightRule",
    "DensityRule",
    "ParsedIngredient",
    "ScrapedIngredient",
    "find_count_weight",
    "find_density",
    "is_volume_unit",
    "normalize_fractions",
    "parse_ingredient",
    "parse_ingredients",
    "parse_number",
    "to_grams",
]
