"""Health check and upstream connectivity routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.mealdb_adapter import MealDBAdapter
from api.dependencies import get_mealdb
from app.exceptions import UpstreamServiceError
from domain.schemas.recipe_schemas import ApiTestResponse
from services.recipe_service import RecipeService

router = APIRouter(tags=["Health"])
logger = logging.getLogger("mealfinder.api.health")


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "message": "Server is running"}


@router.get("/test", response_model=ApiTestResponse)
async def api_test(mealdb: MealDBAdapter = Depends(get_mealdb)) -> ApiTestResponse:
    """Fetch a random recipe to check that TheMealDB is reachable."""
    try:
        name = await RecipeService.random_recipe_name(mealdb)
    except UpstreamServiceError as e:
        logger.warning("TheMealDB connectivity check failed: %s", e.message)
        raise UpstreamServiceError(e.message, error="API test failed") from e
    return ApiTestResponse(message="API is working!", recipe=name)
