"""View models. Each one maps domain state to a template."""

import re
from typing import Sequence

from jinja2 import Environment
from markupsafe import Markup, escape

from remix.models import Recipe


LINE_BREAK = re.compile(r"\r?\n")


def instructions_html(text: str) -> Markup:
    return Markup("<br>").join(escape(line) for line in LINE_BREAK.split(text))


class RecipeView:
    def __init__(
        self,
        recipe: Recipe,
        *,
        environment: Environment,
        template_name: str = "recipe.html",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.recipe.name

    @property
    def image(self) -> str:
        return self.recipe.image

    @property
    def ingredients(self) -> list[str]:
        return [str(i) for i in self.recipe.ingredients]

    @property
    def instructions(self) -> Markup:
        return instructions_html(self.recipe.instructions)

    def render(self) -> str:
        return self.env.get_template(self.name).render(recipe=self)


class SavedListView:
    def __init__(
        self,
        names: Sequence[str],
        *,
        environment: Environment,
        template_name: str = "saved-list.html",
    ) -> None:
        self.names = list(names)
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(saved=self)


class RemixView:
    """The remix output region.

    Shows one of: the remix text, a short message, or a pending message with
    the websocket that will deliver the remix.
    """

    def __init__(
        self,
        *,
        environment: Environment,
        text: str = "",
        message: str = "",
        ws_url: str = "",
        oob: bool = False,
        template_name: str = "remix.html",
    ) -> None:
        self.text = text
        self.message = message
        self.ws_url = ws_url
        self.oob = oob
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(remix=self)


class PageView:
    def __init__(
        self,
        saved: Sequence[str],
        *,
        kitchen_id: str,
        environment: Environment,
        template_name: str = "index.html",
    ) -> None:
        self.kitchen_id = kitchen_id
        self.saved = SavedListView(saved, environment=environment)
        self.remix = RemixView(environment=environment)
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(
            kitchen_id=self.kitchen_id, saved=self.saved, remix=self.remix
        )


def message_html(text: str, *, environment: Environment) -> str:
    return environment.get_template("message.html").render(text=text)
