"""Pydantic schemas for the recipe search API."""

from pydantic import BaseModel, Field, ConfigDict
from typing import Any, List, Optional, Union


class RecipeSearchRequest(BaseModel):
    """Body of POST /recipes/search.

    ``ingredients`` may be a list of terms or a single comma-delimited string.
    Only the first term drives the search; the remaining fields are accepted
    for client compatibility and are not used by the search.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ingredients: Optional[Union[List[str], str]] = None
    dietary_preferences: Optional[Union[List[str], str]] = Field(
        default=None, alias="dietaryPreferences"
    )
    cuisine: Optional[str] = None
    cooking_time: Optional[Any] = Field(default=None, alias="cookingTime")
    servings: Optional[Any] = None

    def has_ingredients(self) -> bool:
        return bool(self.ingredients)

    @property
    def primary_term(self) -> Optional[str]:
        """First ingredient of the list, or the text before the first comma."""
        if not self.ingredients:
            return None
        if isinstance(self.ingredients, list):
            return self.ingredients[0]
        return self.ingredients.split(",")[0]


class Recipe(BaseModel):
    """Normalized recipe returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: Optional[str] = None
    image: Optional[str] = None
    ingredients: List[str] = []
    instructions: List[str] = []
    cooking_time: int = Field(alias="cookingTime")
    servings: int
    dietary: List[str] = []
    cuisine: str
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")
    category: Optional[str] = None


class RecipeSearchResponse(BaseModel):
    """Successful search response."""

    recipes: List[Recipe]


class ApiTestResponse(BaseModel):
    """Response of the upstream connectivity check."""

    message: str
    recipe: Optional[str] = None
