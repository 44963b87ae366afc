"""Nutrition lookups and per-serving macro estimates."""

from recipebook.nutrition.calculator import (
    NutrientLookup,
    NutritionCalculator,
    NutritionEstimate,
)
from recipebook.nutrition.client import (
    FoodDataCentralClient,
    Nutrients,
    NutritionLookupError,
)

__all__ = [
    "FoodDataCentralClient",
    "NutrientLookup",
    "Nutrients",
    "NutritionCalculator",
    "NutritionEstimate",
    "NutritionLookupError",
]
