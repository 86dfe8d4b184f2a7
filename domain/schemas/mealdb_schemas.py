"""Pydantic schemas for TheMealDB response payloads."""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Tuple

# TheMealDB exposes ingredients as numbered strIngredientN / strMeasureN fields
MAX_INGREDIENT_SLOTS = 20


class MealSummary(BaseModel):
    """Short meal record returned by filter.php."""

    model_config = ConfigDict(extra="ignore")

    idMeal: str
    strMeal: Optional[str] = None
    strMealThumb: Optional[str] = None


class MealDetail(BaseModel):
    """Full meal record returned by lookup.php, search.php and random.php."""

    model_config = ConfigDict(extra="allow")

    idMeal: str
    strMeal: Optional[str] = None
    strMealThumb: Optional[str] = None
    strInstructions: Optional[str] = None
    strTags: Optional[str] = None
    strArea: Optional[str] = None
    strCategory: Optional[str] = None
    strSource: Optional[str] = None
    strYoutube: Optional[str] = None

    def ingredient_slots(self) -> List[Tuple[Optional[str], Optional[str]]]:
        """Return the (ingredient, measure) pair of every slot, in slot order."""
        extra = self.model_extra or {}
        return [
            (extra.get(f"strIngredient{i}"), extra.get(f"strMeasure{i}"))
            for i in range(1, MAX_INGREDIENT_SLOTS + 1)
        ]


class MealSummaryList(BaseModel):
    """Envelope of filter.php. TheMealDB sends ``{"meals": null}`` for no matches."""

    meals: Optional[List[MealSummary]] = None


class MealDetailList(BaseModel):
    """Envelope of lookup.php, search.php and random.php."""

    meals: Optional[List[MealDetail]] = None
