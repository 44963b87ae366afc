"""Request and response schemas for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class IngredientRow(BaseModel):
    """Structured ingredient row as persisted by the recipe store."""

    model_config = ConfigDict(from_attributes=True)

    quantity: float | None = Field(None, ge=0)
    unit: str | None = None
    name: str
    notes: str | None = None


class ScrapedIngredientRow(IngredientRow):
    """Parsed ingredient with its position in the recipe."""

    sort_order: int


class ParseRequest(BaseModel):
    """Raw ingredient lines to parse."""

    lines: list[str] = Field(min_length=1)


class ParseResponse(BaseModel):
    """Parsed ingredient rows in input order."""

    ingredients: list[ScrapedIngredientRow]


class GramsRequest(BaseModel):
    """A single amount to convert to grams."""

    quantity: float = Field(ge=0)
    unit: str | None = None
    name: str


class GramsResponse(BaseModel):
    """Estimated mass; None when the unit cannot be converted."""

    grams: float | None


class ShoppingEntry(BaseModel):
    """A quantity/unit/name entry to consolidate."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: float | None = Field(None, ge=0)
    unit: str | None = None


class ConsolidatedLine(BaseModel):
    """A merged shopping-list line."""

    name: str
    unit: str | None
    quantity: float | None
    key: str
    display: str


class ConsolidateRequest(BaseModel):
    entries: list[ShoppingEntry]


class ConsolidateResponse(BaseModel):
    items: list[ConsolidatedLine]


class PlannedRecipeIn(BaseModel):
    """A recipe in a meal-plan slot."""

    recipe_id: str
    servings: int = Field(ge=0)
    target_servings: int | None = Field(None, ge=0)
    ingredients: list[ShoppingEntry]


class ShoppingItemModel(BaseModel):
    """A shopping-list row, auto-generated or manual."""

    model_config = ConfigDict(from_attributes=True)

    ingredient_name: str
    quantity: float | None = None
    unit: str | None = None
    checked: bool = False
    is_manual: bool = False


class GenerateShoppingListRequest(BaseModel):
    """Regenerate a week's shopping list."""

    week_id: str | None = None
    recipes: list[PlannedRecipeIn]
    previous_items: list[ShoppingItemModel] = Field(default_factory=list)


class ShoppingListResponse(BaseModel):
    week_id: str | None
    items: list[ShoppingItemModel]


class NutritionRequest(BaseModel):
    """Recipe rows to estimate nutrition for."""

    servings: int = Field(default=1, ge=0)
    ingredients: list[IngredientRow]
    recipe_id: str | None = None


class NutritionResponse(BaseModel):
    """Per-serving macros and estimate completeness."""

    calories_per_serving: int
    protein_per_serving: int
    carbs_per_serving: int
    fat_per_serving: int
    matched: int
    skipped: int
    skipped_ingredients: list[str] = Field(default_factory=list)
