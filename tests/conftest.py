"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from recipebook.normalize.parsing import ParsedIngredient
from recipebook.nutrition.client import Nutrients
from recipebook.plan.consolidate import IngredientEntry

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require external services)"
    )


# =============================================================================
# Ingredient Fixtures
# =============================================================================


@pytest.fixture
def raw_ingredient_lines():
    """Ingredient lines as scraped from a recipe page."""
    return [
        "1½ tbsp olive oil, plus extra",
        "2-3 large carrots, peeled",
        "",
        "400g tin chopped tomatoes",
        "a pinch of salt",
        "3 eggs",
    ]


@pytest.fixture
def recipe_ingredients():
    """Structured rows for a small omelette recipe."""
    return [
        ParsedIngredient(quantity=3, unit=None, name="eggs"),
        ParsedIngredient(quantity=1, unit="tbsp", name="olive oil"),
        ParsedIngredient(quantity=50, unit="g", name="cheddar", notes="grated"),
        ParsedIngredient(quantity=None, unit=None, name="salt"),
        ParsedIngredient(quantity=1, unit="pinch", name="black pepper"),
    ]


@pytest.fixture
def shopping_entries():
    """Entries gathered from two recipes, already scaled."""
    return [
        IngredientEntry(name="Onions", quantity=2, unit=None),
        IngredientEntry(name="plain flour", quantity=200, unit="grams"),
        IngredientEntry(name="an onion", quantity=1, unit=None),
        IngredientEntry(name="plain flour", quantity=50, unit="g"),
        IngredientEntry(name="Butter", quantity=2, unit="tablespoons"),
        IngredientEntry(name="butter", quantity=1, unit="tbsp"),
        IngredientEntry(name="chopped tomatoes", quantity=1, unit="tins"),
    ]


# =============================================================================
# Nutrition Fixtures
# =============================================================================


@pytest.fixture
def mock_fdc_search_response():
    """Sample FoodData Central foods/search response."""
    return {
        "totalHits": 2,
        "foods": [
            {
                "fdcId": 748967,
                "description": "Eggs, Grade A, Large, egg whole",
                "dataType": "Foundation",
                "foodNutrients": [
                    {"nutrientId": 1003, "nutrientName": "Protein", "value": 12.4},
                    {"nutrientId": 1004, "nutrientName": "Total lipid (fat)", "value": 9.96},
                    {"nutrientId": 1005, "nutrientName": "Carbohydrate", "value": 0.96},
                    {"nutrientId": 1008, "nutrientName": "Energy", "value": 148},
                ],
            },
            {
                "fdcId": 171287,
                "description": "Egg, whole, raw, fresh",
                "dataType": "SR Legacy",
                "foodNutrients": [
                    {"nutrientId": 1008, "nutrientName": "Energy", "value": 143},
                ],
            },
        ],
    }


@pytest.fixture
def nutrients_table():
    """Per-100g nutrients keyed by ingredient name."""
    return {
        "eggs": Nutrients(calories=148, protein=12.4, carbs=0.96, fat=9.96),
        "olive oil": Nutrients(calories=884, protein=0, carbs=0, fat=100),
        "cheddar": Nutrients(calories=403, protein=24.9, carbs=1.3, fat=33.1),
    }


@pytest.fixture
def mock_lookup(nutrients_table):
    """Lookup client returning values from the nutrients table."""
    lookup = AsyncMock()
    lookup.lookup.side_effect = lambda name: nutrients_table.get(name)
    return lookup
