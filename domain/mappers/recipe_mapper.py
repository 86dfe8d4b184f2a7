"""
Recipe domain mappers.
Handles transformation of TheMealDB meal records into the public recipe shape.
"""

from typing import List, Optional

from domain.schemas.mealdb_schemas import MealDetail
from domain.schemas.recipe_schemas import Recipe

# TheMealDB does not provide cooking time or servings; fixed placeholders
DEFAULT_COOKING_TIME_MIN = 30
DEFAULT_SERVINGS = 4

ANY_CUISINE = "Any"


class RecipeMapper:
    """Mapper for TheMealDB → Recipe transformations."""

    @staticmethod
    def to_recipe(meal: MealDetail) -> Recipe:
        """
        Convert a TheMealDB meal record to a Recipe.

        Args:
            meal: Full meal record (lookup.php / search.php)

        Returns:
            Recipe with ingredients flattened to "<name> - <measure>" strings,
            instructions split into non-blank steps and tags split into a list
        """
        return Recipe(
            id=meal.idMeal,
            title=meal.strMeal,
            image=meal.strMealThumb,
            ingredients=RecipeMapper.ingredients(meal),
            instructions=RecipeMapper.instructions(meal.strInstructions),
            cooking_time=DEFAULT_COOKING_TIME_MIN,
            servings=DEFAULT_SERVINGS,
            dietary=RecipeMapper.tags(meal.strTags),
            cuisine=meal.strArea or ANY_CUISINE,
            source_url=meal.strSource or meal.strYoutube or None,
            category=meal.strCategory,
        )

    @staticmethod
    def ingredients(meal: MealDetail) -> List[str]:
        """Non-empty ingredient slots as "<name> - <measure>", in slot order."""
        return [
            f"{name} - {measure or ''}"
            for name, measure in meal.ingredient_slots()
            if name
        ]

    @staticmethod
    def instructions(text: Optional[str]) -> List[str]:
        # A missing instructions field is treated as no steps
        if not text:
            return []
        return [line.strip() for line in text.split("\n") if line.strip()]

    @staticmethod
    def tags(text: Optional[str]) -> List[str]:
        if not text:
            return []
        return [tag.strip() for tag in text.split(",") if tag.strip()]
