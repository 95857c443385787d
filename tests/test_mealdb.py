from typing import Any, Callable

import httpx
import pytest

from remix.mealdb import RecipeClient, RecipeNotFound, RecipeServiceError, first_meal


@pytest.mark.asyncio
async def test_random(
    make_recipes: Callable[..., RecipeClient], lasagne: dict[str, Any]
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"meals": [lasagne, {"strMeal": "Tacos"}]})

    recipe = await make_recipes(handler).random()
    assert recipe.name == "Lasagne"
    assert len(requests) == 1
    assert str(requests[0].url) == "https://www.themealdb.com/api/json/v1/1/random.php"


@pytest.mark.asyncio
async def test_by_name(
    make_recipes: Callable[..., RecipeClient], lasagne: dict[str, Any]
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"meals": [lasagne]})

    recipe = await make_recipes(handler).by_name("Lasagne")
    assert recipe.name == "Lasagne"
    assert requests[0].url.path == "/api/json/v1/1/search.php"
    assert requests[0].url.params["s"] == "Lasagne"


@pytest.mark.parametrize("body", ({"meals": None}, {"meals": []}))
@pytest.mark.asyncio
async def test_by_name_not_found(
    make_recipes: Callable[..., RecipeClient], body: dict[str, Any]
) -> None:
    client = make_recipes(lambda request: httpx.Response(200, json=body))
    with pytest.raises(RecipeNotFound, match="Beans on Toast"):
        await client.by_name("Beans on Toast")


@pytest.mark.asyncio
async def test_random_with_no_meals(make_recipes: Callable[..., RecipeClient]) -> None:
    client = make_recipes(lambda request: httpx.Response(200, json={"meals": None}))
    with pytest.raises(RecipeNotFound):
        await client.random()


@pytest.mark.asyncio
async def test_error_status(make_recipes: Callable[..., RecipeClient]) -> None:
    client = make_recipes(lambda request: httpx.Response(503, text="Down"))
    with pytest.raises(RecipeServiceError):
        await client.random()


@pytest.mark.asyncio
async def test_invalid_json(make_recipes: Callable[..., RecipeClient]) -> None:
    client = make_recipes(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(RecipeServiceError):
        await client.by_name("Lasagne")


@pytest.mark.asyncio
async def test_network_failure(make_recipes: Callable[..., RecipeClient]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("No route to host", request=request)

    with pytest.raises(RecipeServiceError):
        await make_recipes(handler).random()


@pytest.mark.parametrize(
    "data",
    (
        [],
        "meals",
        {"meals": "Lasagne"},
        {"meals": ["Lasagne"]},
    ),
)
def test_first_meal_malformed(data: Any) -> None:
    with pytest.raises(RecipeServiceError):
        first_meal(data)


def test_first_meal() -> None:
    assert first_meal({"meals": None}) is None
    assert first_meal({}) is None
    assert first_meal({"meals": [{"strMeal": "A"}, {"strMeal": "B"}]}) == {
        "strMeal": "A"
    }
