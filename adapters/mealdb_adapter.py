"""TheMealDB adapter for recipe search and lookup.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel, ValidationError

from app.exceptions import UpstreamServiceError
from domain.schemas.mealdb_schemas import (
    MealDetail,
    MealDetailList,
    MealSummary,
    MealSummaryList,
)

logger = logging.getLogger("mealfinder.mealdb")

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


class MealDBAdapter:
    """Async client for the four TheMealDB endpoints used by the service.

    Every transport, HTTP status, decode or schema failure is raised as
    UpstreamServiceError so callers only deal with one error type.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
        logger.info("TheMealDB client closed")

    # ------------------ Endpoints ------------------
    async def random_meal(self) -> MealDetail:
        """Fetch one random meal (random.php)."""
        data = await self._get("random.php", None, MealDetailList)
        if not data.meals:
            raise UpstreamServiceError("TheMealDB returned no random meal")
        return data.meals[0]

    async def filter_by_ingredient(self, ingredient: str) -> List[MealSummary]:
        """List meals using ``ingredient`` as a main ingredient (filter.php)."""
        data = await self._get("filter.php", {"i": ingredient}, MealSummaryList)
        return data.meals or []

    async def search_by_name(self, name: str) -> List[MealDetail]:
        """Search meals by name (search.php). Returns full records."""
        data = await self._get("search.php", {"s": name}, MealDetailList)
        return data.meals or []

    async def lookup_meal(self, meal_id: str) -> MealDetail:
        """Fetch the full record of one meal (lookup.php)."""
        data = await self._get("lookup.php", {"i": meal_id}, MealDetailList)
        if not data.meals:
            raise UpstreamServiceError(f"TheMealDB has no meal with id {meal_id}")
        return data.meals[0]

    # ------------------ Transport ------------------
    async def _get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]],
        envelope: Type[EnvelopeT],
    ) -> EnvelopeT:
        try:
            response = await self._client.get(f"/{endpoint}", params=params)
            logger.debug("GET %s %s -> %s", endpoint, params, response.status_code)
            response.raise_for_status()
            return envelope.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(
                "TheMealDB %s returned HTTP %s: %s",
                endpoint,
                e.response.status_code,
                e.response.text[:100],
            )
            raise UpstreamServiceError(
                f"TheMealDB {endpoint} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("TheMealDB %s request failed: %s", endpoint, e)
            raise UpstreamServiceError(f"TheMealDB {endpoint} request failed") from e
        except (ValueError, ValidationError) as e:
            # ValueError covers bodies that are not JSON
            logger.error("TheMealDB %s returned an unexpected payload: %s", endpoint, e)
            raise UpstreamServiceError(
                f"TheMealDB {endpoint} returned an unexpected payload"
            ) from e
