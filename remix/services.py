from remix.llm_service import LLMService
from remix.mealdb import RecipeClient
from remix.models import Recipe
from remix.state import Kitchen


class NoRecipeLoaded(Exception):
    pass


async def load_random(*, recipes: RecipeClient, kitchen: Kitchen) -> Recipe:
    recipe = await recipes.random()
    kitchen.show_recipe(recipe)
    return recipe


async def load_by_name(
    name: str,
    *,
    recipes: RecipeClient,
    kitchen: Kitchen,
) -> Recipe:
    recipe = await recipes.by_name(name)
    kitchen.show_recipe(recipe)
    return recipe


async def remix_current(theme: str, *, llm: LLMService, kitchen: Kitchen) -> str:
    recipe = kitchen.recipe
    if recipe is None:
        raise NoRecipeLoaded("Load a recipe first.")
    return await llm.remix(recipe, theme)
