"""
Error handling and edge case tests.

This test suite covers failure conditions between the API and TheMealDB:
- Transport errors, HTTP errors and malformed payloads in the adapter
- Upstream failures surfacing as generic 500 responses
- Unexpected exceptions in the search route
- Request validation and unknown routes
- Adapter lifecycle owned by the application lifespan
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from adapters.mealdb_adapter import MealDBAdapter
from app.exceptions import UpstreamServiceError
from main import create_app
from test_fixtures import (
    CHICKEN_CURRY,
    CHICKEN_PIE,
    STUB_BASE_URL,
    StubMealDB,
    make_client,
    make_settings,
)


def adapter_for(handler) -> MealDBAdapter:
    return MealDBAdapter(STUB_BASE_URL, transport=httpx.MockTransport(handler))


# =============================================================================
# ADAPTER ERRORS
# =============================================================================


@pytest.mark.anyio
async def test_adapter_wraps_transport_errors():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(UpstreamServiceError) as exc_info:
        await adapter_for(handler).filter_by_ingredient("chicken")

    assert "filter.php" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)


@pytest.mark.anyio
async def test_adapter_wraps_http_status_errors():
    adapter = adapter_for(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(UpstreamServiceError) as exc_info:
        await adapter.search_by_name("pie")

    assert "503" in exc_info.value.message


@pytest.mark.anyio
async def test_adapter_wraps_non_json_body():
    adapter = adapter_for(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(UpstreamServiceError):
        await adapter.lookup_meal("52795")


@pytest.mark.anyio
async def test_adapter_wraps_unexpected_payload():
    adapter = adapter_for(
        lambda request: httpx.Response(200, json={"meals": [{"strMeal": "No id"}]})
    )

    with pytest.raises(UpstreamServiceError):
        await adapter.lookup_meal("52795")


@pytest.mark.anyio
async def test_adapter_lookup_of_unknown_id():
    with pytest.raises(UpstreamServiceError) as exc_info:
        await StubMealDB().adapter().lookup_meal("00000")

    assert "00000" in exc_info.value.message


@pytest.mark.anyio
async def test_adapter_empty_results_are_lists():
    adapter = StubMealDB().adapter()

    assert await adapter.filter_by_ingredient("nothing") == []
    assert await adapter.search_by_name("nothing") == []
    await adapter.close()


# =============================================================================
# API ERROR RESPONSES
# =============================================================================


@pytest.mark.parametrize("endpoint", ["filter.php", "search.php", "lookup.php"])
def test_upstream_failure_is_generic_500(endpoint):
    stub = StubMealDB(filters={"chicken": [CHICKEN_CURRY]}, fail={endpoint})
    if endpoint == "search.php":
        stub.filters = {}

    with make_client(stub) as client:
        r = client.post("/api/recipes/search", json={"ingredients": ["chicken"]})

    assert r.status_code == 500
    assert r.json() == {
        "error": "Failed to fetch recipes",
        "message": "Please try again with different ingredients or preferences",
    }


def test_partial_lookup_failure_returns_no_recipes():
    """
    Test a search where one filter match has no lookup record.

    Verifies:
    - The response is the generic 500, not the recipes that did resolve
    """
    stub = StubMealDB(
        filters={"chicken": [CHICKEN_CURRY, CHICKEN_PIE]}, missing_ids={"52795"}
    )

    with make_client(stub) as client:
        r = client.post("/api/recipes/search", json={"ingredients": ["chicken"]})

    assert r.status_code == 500
    assert "recipes" not in r.json()


def test_unexpected_error_is_generic_500():
    with make_client(StubMealDB()) as client:
        with patch(
            "services.recipe_service.RecipeService.search",
            side_effect=RuntimeError("boom"),
        ):
            r = client.post("/api/recipes/search", json={"ingredients": ["chicken"]})

    assert r.status_code == 500
    assert r.json() == {
        "error": "Server error",
        "message": "An unexpected error occurred. Please try again.",
    }


@pytest.mark.parametrize(
    "body",
    [
        {"ingredients": {"main": "chicken"}},
        {"ingredients": [1, {"a": 2}]},
        {"ingredients": ["chicken"], "cuisine": ["French"]},
    ],
)
def test_malformed_body_is_400(body):
    with make_client(StubMealDB()) as client:
        r = client.post("/api/recipes/search", json=body)

    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request"
    assert r.json()["details"]


def test_invalid_json_is_400():
    with make_client(StubMealDB()) as client:
        r = client.post(
            "/api/recipes/search",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request"


def test_unknown_route():
    with make_client(StubMealDB()) as client:
        r = client.get("/api/nope")

    assert r.status_code == 404
    assert r.json()["error"] == "HTTP 404"


def test_wrong_method():
    with make_client(StubMealDB()) as client:
        r = client.get("/api/recipes/search")

    assert r.status_code == 405


# =============================================================================
# LIFESPAN
# =============================================================================


def test_lifespan_creates_and_closes_adapter():
    app = create_app(make_settings())
    assert app.state.mealdb is None

    with TestClient(app):
        adapter = app.state.mealdb
        assert isinstance(adapter, MealDBAdapter)
        assert adapter.base_url == STUB_BASE_URL

    assert app.state.mealdb is None


def test_lifespan_keeps_injected_adapter():
    adapter = StubMealDB().adapter()
    app = create_app(make_settings(), mealdb=adapter)

    with TestClient(app):
        assert app.state.mealdb is adapter

    assert app.state.mealdb is adapter


def test_custom_api_prefix():
    with make_client(StubMealDB(), api_prefix="/v1") as client:
        assert client.get("/v1/health").status_code == 200
        assert client.get("/api/health").status_code == 404
