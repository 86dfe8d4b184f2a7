"""
Recipe Service - Searches TheMealDB and returns normalized recipes.
Ingredient filter first, then a name search fallback.
"""

from typing import List, Optional
import logging

import anyio

from adapters.mealdb_adapter import MealDBAdapter
from app.exceptions import NotFoundError, ServiceValidationError, UpstreamServiceError
from domain.mappers.recipe_mapper import ANY_CUISINE, RecipeMapper
from domain.schemas.mealdb_schemas import MealDetail, MealSummary
from domain.schemas.recipe_schemas import Recipe, RecipeSearchRequest

logger = logging.getLogger("mealfinder.recipe")

SUGGESTED_INGREDIENTS = ["chicken", "beef", "rice", "pasta", "fish", "vegetables"]


def _no_recipes_found() -> NotFoundError:
    return NotFoundError(
        "Try these ingredients instead: chicken, beef, rice, pasta, fish, or vegetables",
        suggestions=SUGGESTED_INGREDIENTS,
    )


def filter_by_cuisine(recipes: List[Recipe], cuisine: Optional[str]) -> List[Recipe]:
    """Keep recipes whose cuisine matches (case-insensitive). "Any" or empty keeps all."""
    if not cuisine or cuisine == ANY_CUISINE:
        return recipes
    wanted = cuisine.lower()
    return [r for r in recipes if r.cuisine.lower() == wanted]


class RecipeService:
    @staticmethod
    async def search(mealdb: MealDBAdapter, request: RecipeSearchRequest) -> List[Recipe]:
        """
        Search recipes for the first requested ingredient.

        Flow:
        1. Validate that at least one ingredient was sent
        2. Filter meals by the primary ingredient
        3. If nothing matched, search meals by name (results are returned
           without cuisine filtering)
        4. Otherwise look up every match in parallel and normalize
        5. Filter by cuisine

        Args:
            mealdb: TheMealDB adapter
            request: Parsed search request

        Returns:
            Non-empty list of normalized recipes

        Raises:
            ServiceValidationError: If no ingredients were provided
            NotFoundError: If nothing matched (carries suggestions)
            UpstreamServiceError: If any TheMealDB call failed
        """
        logger.info(
            "Received recipe search request: %s",
            request.model_dump(by_alias=True, exclude_none=True),
        )

        if not request.has_ingredients():
            raise ServiceValidationError(
                "Please provide at least one ingredient", error="Missing ingredients"
            )

        term = request.primary_term
        logger.info("Searching with main ingredient: %s", term)

        try:
            matches = await mealdb.filter_by_ingredient(term)
            logger.info("Number of results: %d", len(matches))

            if not matches:
                meals = await mealdb.search_by_name(term)
                if not meals:
                    raise _no_recipes_found()
                # Name search results skip the cuisine filter
                logger.debug(
                    "Returning %d name search results for %r without cuisine filter",
                    len(meals),
                    term,
                )
                return [RecipeMapper.to_recipe(meal) for meal in meals]

            details = await RecipeService._expand(mealdb, matches)
        except UpstreamServiceError as e:
            logger.error("Error in recipe search: %s", e.message)
            raise UpstreamServiceError(
                "Please try again with different ingredients or preferences",
                error="Failed to fetch recipes",
            ) from e

        recipes = filter_by_cuisine(
            [RecipeMapper.to_recipe(meal) for meal in details], request.cuisine
        )
        if not recipes:
            raise _no_recipes_found()
        return recipes

    @staticmethod
    async def _expand(
        mealdb: MealDBAdapter, matches: List[MealSummary]
    ) -> List[MealDetail]:
        # All lookups must succeed; the first failure cancels the rest
        details: List[Optional[MealDetail]] = [None] * len(matches)
        failures: List[UpstreamServiceError] = []

        async with anyio.create_task_group() as tg:

            async def fetch(index: int, meal_id: str) -> None:
                try:
                    details[index] = await mealdb.lookup_meal(meal_id)
                except UpstreamServiceError as e:
                    failures.append(e)
                    tg.cancel_scope.cancel()

            for index, match in enumerate(matches):
                tg.start_soon(fetch, index, match.idMeal)

        if failures:
            raise failures[0]
        return details

    @staticmethod
    async def random_recipe_name(mealdb: MealDBAdapter) -> Optional[str]:
        """Name of a random TheMealDB meal, used as an upstream connectivity check."""
        meal = await mealdb.random_meal()
        return meal.strMeal
