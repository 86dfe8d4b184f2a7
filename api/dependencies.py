"""
API dependencies for dependency injection
"""

from fastapi import Request

from adapters.mealdb_adapter import MealDBAdapter


def get_mealdb(request: Request) -> MealDBAdapter:
    """
    TheMealDB adapter dependency for FastAPI routes.

    The adapter is created by the application lifespan and shared by all requests.

    Usage:
        @router.get("/example")
        async def example(mealdb: MealDBAdapter = Depends(get_mealdb)):
            ...
    """
    return request.app.state.mealdb
