"""Services package - Business logic layer"""

from services.recipe_service import RecipeService

__all__ = [
    "RecipeService",
]
