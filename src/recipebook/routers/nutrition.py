"""API routes for recipe nutrition estimates."""

from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, status

from recipebook.config import get_settings
from recipebook.logging_config import LoggingContext, get_logger
from recipebook.normalize.parsing import ParsedIngredient
from recipebook.nutrition.calculator import NutritionCalculator
from recipebook.nutrition.client import FoodDataCentralClient
from recipebook.schemas import NutritionRequest, NutritionResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/nutrition", tags=["nutrition"])


async def get_nutrition_calculator() -> AsyncIterator[NutritionCalculator]:
    """Yield a calculator backed by FoodData Central."""
    settings = get_settings()
    if not settings.nutrition_enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Nutrition API not configured",
        )

    client = FoodDataCentralClient()
    try:
        yield NutritionCalculator(client, max_concurrency=settings.nutrition_max_concurrency)
    finally:
        await client.close()


@router.post("/estimate", response_model=NutritionResponse)
async def estimate_nutrition(
    request: NutritionRequest,
    calculator: NutritionCalculator = Depends(get_nutrition_calculator),
) -> NutritionResponse:
    """
    Estimate macros per serving for a recipe's ingredient rows.

    Rows that cannot be weighed or matched are excluded from the totals and
    reported through the skipped count.
    """
    ingredients = [
        ParsedIngredient(quantity=row.quantity, unit=row.unit, name=row.name, notes=row.notes)
        for row in request.ingredients
    ]
    with LoggingContext(recipe_id=request.recipe_id):
        estimate = await calculator.calculate(ingredients, request.servings)

    return NutritionResponse(
        calories_per_serving=estimate.calories_per_serving,
        protein_per_serving=estimate.protein_per_serving,
        carbs_per_serving=estimate.carbs_per_serving,
        fat_per_serving=estimate.fat_per_serving,
        matched=estimate.matched,
        skipped=estimate.skipped,
        skipped_ingredients=estimate.skipped_names,
    )
