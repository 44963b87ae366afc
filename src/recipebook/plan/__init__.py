"""Ingredient consolidation and shopping list generation."""

from recipebook.plan.consolidate import (
    ConsolidatedEntry,
    IngredientEntry,
    consolidate_ingredients,
    consolidation_key,
    entry_key,
    format_quantity,
    normalize_name,
    normalize_unit,
)
from recipebook.plan.shopping_list import (
    PlannedRecipe,
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
    scale_factor,
    scale_quantity,
)

__all__ = [
    "ConsolidatedEntry",
    "IngredientEntry",
    "PlannedRecipe",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListGenerator",
    "consolidate_ingredients",
    "consolidation_key",
    "entry_key",
    "format_quantity",
    "normalize_name",
    "normalize_unit",
    "scale_factor",
    "scale_quantity",
]
