"""API routes for consolidating ingredients into shopping lists."""

from fastapi import APIRouter

from recipebook.logging_config import LoggingContext, get_logger
from recipebook.plan.consolidate import IngredientEntry, consolidate_ingredients
from recipebook.plan.shopping_list import (
    PlannedRecipe,
    ShoppingItem,
    ShoppingListGenerator,
)
from recipebook.schemas import (
    ConsolidatedLine,
    ConsolidateRequest,
    ConsolidateResponse,
    GenerateShoppingListRequest,
    ShoppingEntry,
    ShoppingItemModel,
    ShoppingListResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


def _to_entries(entries: list[ShoppingEntry]) -> list[IngredientEntry]:
    return [IngredientEntry(name=e.name, quantity=e.quantity, unit=e.unit) for e in entries]


@router.post("/consolidate", response_model=ConsolidateResponse)
async def consolidate(request: ConsolidateRequest) -> ConsolidateResponse:
    """Merge already-scaled entries into sorted shopping-list lines."""
    merged = consolidate_ingredients(_to_entries(request.entries))
    return ConsolidateResponse(
        items=[
            ConsolidatedLine(
                name=entry.name,
                unit=entry.unit,
                quantity=entry.quantity,
                key=entry.key,
                display=entry.display_quantity(),
            )
            for entry in merged
        ]
    )


@router.post("/generate", response_model=ShoppingListResponse)
async def generate(request: GenerateShoppingListRequest) -> ShoppingListResponse:
    """
    Regenerate a shopping list from planned recipes.

    Quantities are scaled to each slot's target servings before merging.
    Previously checked items stay checked; manual items are kept as-is.
    """
    planned = [
        PlannedRecipe(
            recipe_id=r.recipe_id,
            servings=r.servings,
            target_servings=r.target_servings,
            ingredients=_to_entries(r.ingredients),
        )
        for r in request.recipes
    ]
    previous = [ShoppingItem(**item.model_dump()) for item in request.previous_items]

    with LoggingContext(week_id=request.week_id):
        shopping_list = ShoppingListGenerator().generate(
            planned,
            previous_items=previous,
            week_id=request.week_id,
        )

    return ShoppingListResponse(
        week_id=shopping_list.week_id,
        items=[ShoppingItemModel.model_validate(item) for item in shopping_list.items],
    )
