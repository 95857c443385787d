from typing import Any, Callable

import httpx
import openai
import pytest

from remix.llm_service import LLMService
from remix.mealdb import BASE_URL, RecipeClient


Handler = Callable[[httpx.Request], httpx.Response]


def meal(name: str, pairs: list[tuple[str, str | None]], **fields: Any) -> dict[str, Any]:
    """A TheMealDB record with `pairs` as the first ingredients, rest blank."""
    record: dict[str, Any] = {
        "idMeal": "52844",
        "strMeal": name,
        "strMealThumb": f"https://www.themealdb.com/images/{name.lower()}.jpg",
        "strInstructions": "Heat the oven to 200C.\r\nLayer it all up.\nBake.",
    }
    for i in range(1, 21):
        ingredient, measure = pairs[i - 1] if i <= len(pairs) else ("", "")
        record[f"strIngredient{i}"] = ingredient
        record[f"strMeasure{i}"] = measure
    record.update(fields)
    return record


@pytest.fixture
def lasagne() -> dict[str, Any]:
    return meal(
        "Lasagne",
        [
            ("Olive Oil", "1 tblsp"),
            ("Bacon", "2"),
            ("Onion", " "),
            ("Lasagne Sheets", "9"),
        ],
    )


def completion(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4.1",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def make_recipes() -> Callable[[Handler], RecipeClient]:
    def factory(handler: Handler) -> RecipeClient:
        client = httpx.AsyncClient(
            base_url=BASE_URL, transport=httpx.MockTransport(handler)
        )
        return RecipeClient(client=client)

    return factory


@pytest.fixture
def make_llm() -> Callable[[Handler], LLMService]:
    def factory(handler: Handler) -> LLMService:
        client = openai.AsyncClient(
            api_key="sk-test",
            base_url="https://openai.test/v1",
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        return LLMService(client)

    return factory
