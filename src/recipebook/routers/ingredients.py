"""API routes for parsing ingredient text and estimating mass."""

from fastapi import APIRouter

from recipebook.logging_config import get_logger
from recipebook.normalize.parsing import parse_ingredients
from recipebook.normalize.units import to_grams
from recipebook.schemas import (
    GramsRequest,
    GramsResponse,
    ParseRequest,
    ParseResponse,
    ScrapedIngredientRow,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


@router.post("/parse", response_model=ParseResponse)
async def parse_lines(request: ParseRequest) -> ParseResponse:
    """
    Parse raw ingredient lines into structured rows.

    Blank lines are dropped; every other line yields a row, falling back to
    the whole line as the name when nothing can be extracted.
    """
    rows = parse_ingredients(request.lines)
    logger.info(f"Parsed {len(rows)} of {len(request.lines)} ingredient lines")
    return ParseResponse(
        ingredients=[ScrapedIngredientRow.model_validate(row, from_attributes=True) for row in rows]
    )


@router.post("/grams", response_model=GramsResponse)
async def estimate_grams(request: GramsRequest) -> GramsResponse:
    """Estimate the mass of an amount; grams is null when the unit cannot be converted."""
    return GramsResponse(grams=to_grams(request.quantity, request.unit, request.name))
