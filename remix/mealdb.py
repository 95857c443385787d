"""Client for TheMealDB recipe api."""

import logging
from typing import Any

import httpx

from remix.models import Recipe


logger = logging.getLogger(__name__)


BASE_URL = "https://www.themealdb.com/api/json/v1/1/"
TIMEOUT = 20


class RecipeNotFound(Exception):
    pass


class RecipeServiceError(Exception):
    pass


def first_meal(data: Any) -> dict[str, Any] | None:
    """First record of a `{"meals": [...]}` envelope, None when there are none.

    TheMealDB answers `{"meals": null}` when nothing matches.
    """
    if not isinstance(data, dict):
        raise RecipeServiceError(f"Unexpected response. {data!r}")
    meals = data.get("meals")
    if meals is None:
        return None
    if not isinstance(meals, list):
        raise RecipeServiceError(f"Unexpected meals. {meals!r}")
    if not meals:
        return None
    meal = meals[0]
    if not isinstance(meal, dict):
        raise RecipeServiceError(f"Unexpected meal. {meal!r}")
    return meal


class RecipeClient:
    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = TIMEOUT,
    ) -> None:
        self._client = (
            httpx.AsyncClient(base_url=base_url, timeout=timeout)
            if client is None
            else client
        )

    async def _first_meal(
        self, path: str, params: dict[str, str] | None = None
    ) -> dict[str, Any] | None:
        try:
            resp = await self._client.get(path, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise RecipeServiceError(f"Problem fetching {path}. {e!r}") from e
        except ValueError as e:
            raise RecipeServiceError(f"Invalid JSON from {path}.") from e
        return first_meal(data)

    async def random(self) -> Recipe:
        meal = await self._first_meal("random.php")
        if meal is None:
            raise RecipeNotFound("random")
        recipe = Recipe.from_record(meal)
        logger.info("Random recipe: %s", recipe.name)
        return recipe

    async def by_name(self, name: str) -> Recipe:
        meal = await self._first_meal("search.php", params={"s": name})
        if meal is None:
            raise RecipeNotFound(name)
        return Recipe.from_record(meal)

    async def close(self) -> None:
        await self._client.aclose()
