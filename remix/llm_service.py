import logging

import openai
from openai.types.chat import (
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)

from remix.models import Recipe
from remix.prompts import REMIX_SYSTEM_PROMPT, RemixPrompt


logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gpt-4.1"
MAX_TOKENS = 300
TEMPERATURE = 0.9


class RemixError(Exception):
    pass


class LLMService:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
    ) -> None:
        # No retries. A failed remix is retried by the user.
        self.openai_client = (
            openai.AsyncClient(max_retries=0) if openai_client is None else openai_client
        )
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    def messages(self, recipe: Recipe, theme: str) -> list[ChatCompletionMessageParam]:
        system_message: ChatCompletionSystemMessageParam = {
            "role": "system",
            "content": REMIX_SYSTEM_PROMPT,
        }
        user_message: ChatCompletionUserMessageParam = {
            "role": "user",
            "content": str(RemixPrompt(recipe.to_dict(), theme)),
        }
        return [system_message, user_message]

    async def remix(self, recipe: Recipe, theme: str) -> str:
        """A creative variation of `recipe` following `theme`."""
        logger.info("Remixing %s as %r", recipe.name, theme)
        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=self.messages(recipe, theme),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            raise RemixError(f"Problem creating remix. {e!r}") from e

        try:
            ans = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise RemixError(f"Unexpected completion. {resp!r}") from e
        if not ans:
            raise RemixError("No response from AI.")
        return ans

    async def close(self) -> None:
        await self.openai_client.close()
