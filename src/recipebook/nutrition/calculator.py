"""Recipe nutrition estimates from structured ingredient rows."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from recipebook.config import get_settings
from recipebook.logging_config import get_logger
from recipebook.normalize.parsing import ParsedIngredient
from recipebook.normalize.units import to_grams
from recipebook.nutrition.client import Nutrients, NutritionLookupError

logger = get_logger(__name__)


class NutrientLookup(Protocol):
    """Anything that returns per-100g nutrients for an ingredient name."""

    async def lookup(self, ingredient_name: str) -> Nutrients | None: ...


@dataclass
class NutritionEstimate:
    """Summed macros for a recipe and how complete the estimate is."""

    servings: int
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    matched: int = 0
    skipped: int = 0
    skipped_names: list[str] = field(default_factory=list)

    def add(self, nutrients: Nutrients) -> None:
        self.calories += nutrients.calories
        self.protein += nutrients.protein
        self.carbs += nutrients.carbs
        self.fat += nutrients.fat
        self.matched += 1

    def skip(self, name: str) -> None:
        self.skipped += 1
        self.skipped_names.append(name)

    @property
    def calories_per_serving(self) -> int:
        return round(self.calories / self.servings)

    @property
    def protein_per_serving(self) -> int:
        return round(self.protein / self.servings)

    @property
    def carbs_per_serving(self) -> int:
        return round(self.carbs / self.servings)

    @property
    def fat_per_serving(self) -> int:
        return round(self.fat / self.servings)

    @property
    def summary(self) -> str:
        return f"{self.matched} ingredients matched, {self.skipped} skipped"


class NutritionCalculator:
    """
    Estimates macros per serving for a recipe.

    Each row is converted to grams and looked up externally. Rows without a
    quantity, with an unconvertible unit, or whose lookup fails or finds
    nothing are left out of the totals and counted as skipped.
    """

    def __init__(self, lookup: NutrientLookup, max_concurrency: int | None = None):
        self.lookup = lookup
        self.max_concurrency = max_concurrency or get_settings().nutrition_max_concurrency

    async def calculate(
        self,
        ingredients: Sequence[ParsedIngredient],
        servings: int,
    ) -> NutritionEstimate:
        """
        Calculate nutrition totals for a recipe.

        Args:
            ingredients: Structured ingredient rows.
            servings: Servings the recipe makes; values below 1 count as 1.

        Returns:
            NutritionEstimate with totals and matched/skipped counts.
        """
        estimate = NutritionEstimate(servings=servings if servings and servings > 0 else 1)
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _estimate_one(ing: ParsedIngredient) -> tuple[str, Nutrients | None]:
            if not ing.quantity:
                return ing.name, None

            grams = to_grams(ing.quantity, ing.unit, ing.name)
            if grams is None:
                return ing.name, None

            async with semaphore:
                try:
                    per_100g = await self.lookup.lookup(ing.name)
                except NutritionLookupError as e:
                    logger.warning(f"Nutrition lookup failed for '{ing.name}': {e}")
                    return ing.name, None

            if per_100g is None:
                return ing.name, None
            return ing.name, per_100g.scaled(grams)

        results = await asyncio.gather(*(_estimate_one(ing) for ing in ingredients))

        for name, nutrients in results:
            if nutrients is None:
                estimate.skip(name)
            else:
                estimate.add(nutrients)

        logger.info(f"Nutrition estimate: {estimate.summary}")
        return estimate
