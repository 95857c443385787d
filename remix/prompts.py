import json
from typing import Any


REMIX_SYSTEM_PROMPT = """
You are a friendly, creative chef assistant.
Produce a short (3-6 sentences) remix of the given recipe that is fun, creative,
and totally doable in a home kitchen.
Mention clearly any changed ingredients or cooking steps and keep the tone upbeat
and helpful.
""".strip()


REMIX_USER_PROMPT = """
Here is a recipe JSON object: {recipe}

Remix theme: {theme}

Return a short, clearly formatted remix that:
1) describes the final dish in one sentence,
2) lists any changed or swapped ingredients, and
3) summarizes any changed cooking steps.
Keep it friendly and concise.
""".strip()


class RemixPrompt:
    def __init__(self, recipe: dict[str, Any], theme: str) -> None:
        self.recipe = recipe
        self.theme = theme

    def __str__(self) -> str:
        return REMIX_USER_PROMPT.format(
            recipe=json.dumps(self.recipe, ensure_ascii=False),
            theme=self.theme,
        )
