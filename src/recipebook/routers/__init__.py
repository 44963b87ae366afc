"""API routers for the recipebook application."""

from recipebook.routers.ingredients import router as ingredients_router
from recipebook.routers.nutrition import router as nutrition_router
from recipebook.routers.shopping import router as shopping_router

__all__ = [
    "ingredients_router",
    "nutrition_router",
    "shopping_router",
]
