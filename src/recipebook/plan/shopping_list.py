"""Shopping list generation from meal plans."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from recipebook.logging_config import get_logger
from recipebook.plan.consolidate import (
    IngredientEntry,
    consolidate_ingredients,
    consolidation_key,
    format_quantity,
)

logger = get_logger(__name__)


def scale_factor(original_servings: float | None, target_servings: float | None) -> float:
    """Ratio of target to original servings; 1 when it cannot be computed."""
    if not original_servings or original_servings <= 0:
        return 1.0
    if target_servings is None:
        return 1.0
    return target_servings / original_servings


def scale_quantity(quantity: float | None, factor: float) -> float | None:
    """Scale a quantity, keeping an unknown quantity unknown."""
    if quantity is None:
        return None
    return quantity * factor


@dataclass
class PlannedRecipe:
    """A recipe placed in a meal-plan slot."""

    recipe_id: str
    servings: int
    ingredients: Sequence[IngredientEntry]
    target_servings: int | None = None

    @property
    def scale(self) -> float:
        return scale_factor(self.servings, self.target_servings)

    def scaled_entries(self) -> list[IngredientEntry]:
        """Ingredients scaled to the slot's serving count."""
        factor = self.scale
        return [
            IngredientEntry(
                name=ing.name,
                quantity=scale_quantity(ing.quantity, factor),
                unit=ing.unit,
            )
            for ing in self.ingredients
        ]


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    ingredient_name: str
    quantity: float | None
    unit: str | None
    checked: bool = False
    is_manual: bool = False

    @property
    def key(self) -> str:
        """Key used to carry state across regenerations."""
        return consolidation_key(self.ingredient_name, self.unit)

    @property
    def display_quantity(self) -> str:
        return format_quantity(self.quantity, self.unit)


@dataclass
class ShoppingList:
    """Shopping list for a planned week."""

    week_id: str | None
    items: list[ShoppingItem] = field(default_factory=list)

    @property
    def auto_items(self) -> list[ShoppingItem]:
        return [item for item in self.items if not item.is_manual]

    @property
    def manual_items(self) -> list[ShoppingItem]:
        return [item for item in self.items if item.is_manual]

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.checked)

    def add_item(self, item: ShoppingItem) -> None:
        self.items.append(item)


class ShoppingListGenerator:
    """
    Generates shopping lists from meal plans with:
    - Quantity scaling to each slot's serving count
    - Consolidation of equivalent ingredients across recipes
    - Checked-off state preserved across regenerations
    """

    def generate(
        self,
        planned: Iterable[PlannedRecipe],
        previous_items: Iterable[ShoppingItem] = (),
        week_id: str | None = None,
    ) -> ShoppingList:
        """
        Generate a shopping list from planned recipes.

        Args:
            planned: Recipes in the plan with their target servings.
            previous_items: Items of the list being regenerated. Checked
                auto-generated items keep their checked state; manual items
                are carried over unchanged.
            week_id: The meal-plan week the list belongs to.

        Returns:
            ShoppingList with auto-generated items first, sorted by name.
        """
        all_entries: list[IngredientEntry] = []
        recipe_count = 0
        for recipe in planned:
            all_entries.extend(recipe.scaled_entries())
            recipe_count += 1

        previous = list(previous_items)
        checked_keys = {item.key for item in previous if item.checked and not item.is_manual}

        shopping_list = ShoppingList(week_id=week_id)
        for entry in consolidate_ingredients(all_entries):
            shopping_list.add_item(
                ShoppingItem(
                    ingredient_name=entry.name,
                    quantity=entry.quantity,
                    unit=entry.unit,
                    checked=entry.key in checked_keys,
                )
            )

        for item in previous:
            if item.is_manual:
                shopping_list.add_item(item)

        logger.info(
            f"Generated shopping list from {recipe_count} recipes: "
            f"{len(shopping_list.auto_items)} items, "
            f"{len(shopping_list.manual_items)} manual, "
            f"{shopping_list.checked_count} checked"
        )

        return shopping_list
