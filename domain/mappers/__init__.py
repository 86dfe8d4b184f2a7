"""
Domain mappers package.
Handles transformation between upstream records and DTOs (Data Transfer Objects).
"""

from domain.mappers.recipe_mapper import RecipeMapper

__all__ = ["RecipeMapper"]
