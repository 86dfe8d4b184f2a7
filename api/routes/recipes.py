"""
Recipe routes - Recipe search backed by TheMealDB.
"""

from fastapi import APIRouter, Depends
from typing import Optional
import logging

from adapters.mealdb_adapter import MealDBAdapter
from api.dependencies import get_mealdb
from app.exceptions import ServiceError, UnexpectedServiceError
from domain.schemas.recipe_schemas import RecipeSearchRequest, RecipeSearchResponse
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("mealfinder.api.recipes")


@router.post("/search", response_model=RecipeSearchResponse)
async def search_recipes_endpoint(
    body: Optional[RecipeSearchRequest] = None,
    mealdb: MealDBAdapter = Depends(get_mealdb),
) -> RecipeSearchResponse:
    """
    Search recipes by main ingredient.

    - **ingredients**: list of ingredients or a comma-separated string; only the
      first one is searched
    - **cuisine**: keep only recipes of this cuisine ("Any" keeps all)
    - **dietaryPreferences**, **cookingTime**, **servings**: accepted, not used

    Returns 400 without ingredients and 404 (with suggestions) when nothing matched.
    """
    try:
        recipes = await RecipeService.search(mealdb, body or RecipeSearchRequest())
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Unexpected error in recipe search")
        raise UnexpectedServiceError() from e
    return RecipeSearchResponse(recipes=recipes)
