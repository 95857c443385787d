import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable
from urllib.parse import urlencode

from jinja2 import Environment, FileSystemLoader, select_autoescape
import openai
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import HTTPConnection, Request
from starlette.responses import HTMLResponse
from starlette.routing import Mount, Route, WebSocketRoute
from starlette.staticfiles import StaticFiles
from starlette.websockets import WebSocket

from remix.llm_service import LLMService, RemixError
from remix.mealdb import RecipeClient, RecipeNotFound, RecipeServiceError
from remix.repository import SQLiteStore
from remix.saved import SavedRecipes
from remix.services import NoRecipeLoaded, load_by_name, load_random, remix_current
from remix.state import Kitchen, Kitchens
from remix_web import config
from remix_web.html.views import (
    PageView,
    RecipeView,
    RemixView,
    SavedListView,
    message_html,
)


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


RANDOM_FAILED = "Sorry, couldn't load a recipe."
SAVED_FAILED = "Sorry, couldn't load that saved recipe."
NOT_FOUND = "Couldn't find recipe: {name}"
NO_RECIPE = "Load a recipe first to remix it!"
REMIX_PENDING = "Stirring up a tasty remix, one sec… 🍳"
REMIX_FAILED = "Whoops, I couldn't get a remix right now. Try again in a moment."


KITCHEN_HEADER = "X-Kitchen"


def aHTMLResponse(route: Callable[..., Awaitable[str]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        return HTMLResponse(await route(*args, **kwargs))

    return wrapper


def kitchen_for(conn: HTTPConnection) -> Kitchen:
    """The kitchen of the page making the request.

    Pages send their id in the `X-Kitchen` header, websockets in the query.
    """
    id = conn.headers.get(KITCHEN_HEADER) or conn.query_params.get("kitchen", "")
    kitchens: Kitchens = conn.app.state.kitchens
    return kitchens.get(id)


def cleared_remix() -> str:
    return RemixView(environment=TEMPLATES, oob=True).render()


@aHTMLResponse
async def homepage(request: Request) -> str:
    saved: SavedRecipes = request.app.state.saved
    names = await saved.load()
    kitchens: Kitchens = request.app.state.kitchens
    return PageView(
        names, kitchen_id=kitchens.new_id(), environment=TEMPLATES
    ).render()


@aHTMLResponse
async def random_recipe(request: Request) -> str:
    try:
        recipe = await load_random(
            recipes=request.app.state.recipes, kitchen=kitchen_for(request)
        )
    except (RecipeNotFound, RecipeServiceError) as e:
        logger.warning("Random recipe failed: %r", e)
        return message_html(RANDOM_FAILED, environment=TEMPLATES) + cleared_remix()
    return RecipeView(recipe, environment=TEMPLATES).render() + cleared_remix()


@aHTMLResponse
async def search_recipe(request: Request) -> str:
    name = request.query_params.get("name", "").strip()
    if not name:
        return message_html(NOT_FOUND.format(name=name), environment=TEMPLATES)
    try:
        recipe = await load_by_name(
            name,
            recipes=request.app.state.recipes,
            kitchen=kitchen_for(request),
        )
    except RecipeNotFound:
        return message_html(NOT_FOUND.format(name=name), environment=TEMPLATES)
    except RecipeServiceError as e:
        logger.warning("Loading %r failed: %r", name, e)
        return message_html(SAVED_FAILED, environment=TEMPLATES)
    return RecipeView(recipe, environment=TEMPLATES).render() + cleared_remix()


@aHTMLResponse
async def saved_recipes(request: Request) -> str:
    saved: SavedRecipes = request.app.state.saved
    match request.method.lower():
        case "post":
            async with request.form() as form:
                name = str(form.get("name", "")).strip()
            names = await saved.add(name) if name else await saved.load()
        case "delete":
            name = request.query_params.get("name", "")
            names = await saved.remove(name)
        case _:
            names = await saved.load()
    return SavedListView(names, environment=TEMPLATES).render()


@aHTMLResponse
async def remix(request: Request) -> str:
    """Remix output div. Pending message plus the websocket delivering the remix."""
    async with request.form() as form:
        theme = str(form.get("theme", ""))
    if kitchen_for(request).recipe is None:
        return RemixView(environment=TEMPLATES, message=NO_RECIPE).render()
    params = urlencode(
        {"theme": theme, "kitchen": request.headers.get(KITCHEN_HEADER, "")}
    )
    ws_url = f"/remix-ws?{params}"
    return RemixView(
        environment=TEMPLATES, message=REMIX_PENDING, ws_url=ws_url
    ).render()


async def remix_ws(ws: WebSocket) -> None:
    theme = ws.query_params.get("theme", "")
    await ws.accept()
    try:
        text = await remix_current(
            theme,
            llm=ws.app.state.llm,
            kitchen=kitchen_for(ws),
        )
    except NoRecipeLoaded:
        view = RemixView(environment=TEMPLATES, message=NO_RECIPE)
    except RemixError as e:
        logger.error("Remix failed: %r", e)
        view = RemixView(environment=TEMPLATES, message=REMIX_FAILED)
    else:
        view = RemixView(environment=TEMPLATES, text=text)
    await ws.send_text(view.render())
    await ws.close()


def build_app(
    *,
    recipes: RecipeClient | None = None,
    llm: LLMService | None = None,
    saved: SavedRecipes | None = None,
) -> Starlette:
    """The web app. Services not given are built from `CONFIG` on startup."""

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        app.state.kitchens = Kitchens(max_size=CONFIG.max_kitchens)
        app.state.recipes = (
            RecipeClient(base_url=CONFIG.mealdb_url) if recipes is None else recipes
        )
        app.state.llm = (
            LLMService(
                openai.AsyncClient(api_key=CONFIG.openai_api_key, max_retries=0),
                model=CONFIG.remix_model,
                max_tokens=CONFIG.remix_max_tokens,
                temperature=CONFIG.remix_temperature,
            )
            if llm is None
            else llm
        )
        app.state.saved = (
            SavedRecipes(SQLiteStore(CONFIG.db_url), key=CONFIG.saved_recipes_key)
            if saved is None
            else saved
        )
        await app.state.saved.store.connect()
        logger.info("Recipe Remix ready (%s).", CONFIG.env.value)
        yield
        await app.state.saved.store.disconnect()
        await app.state.recipes.close()
        await app.state.llm.close()

    return Starlette(
        debug=True if CONFIG.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/recipes/random", random_recipe),
            Route("/recipes/search", search_recipe),
            Route("/saved", saved_recipes, methods=["GET", "POST", "DELETE"]),
            Route("/remix", remix, methods=["POST"]),
            WebSocketRoute("/remix-ws", remix_ws),
            Mount("/assets", StaticFiles(directory=CONFIG.assets_dir), name="assets"),
        ],
        lifespan=lifespan,
    )


app = build_app()
