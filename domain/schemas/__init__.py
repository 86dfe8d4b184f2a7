"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.mealdb_schemas import (
    MAX_INGREDIENT_SLOTS,
    MealSummary,
    MealDetail,
    MealSummaryList,
    MealDetailList,
)
from domain.schemas.recipe_schemas import (
    RecipeSearchRequest,
    Recipe,
    RecipeSearchResponse,
    ApiTestResponse,
)

__all__ = [
    # TheMealDB schemas
    "MAX_INGREDIENT_SLOTS",
    "MealSummary",
    "MealDetail",
    "MealSummaryList",
    "MealDetailList",
    # Recipe schemas
    "RecipeSearchRequest",
    "Recipe",
    "RecipeSearchResponse",
    "ApiTestResponse",
]
