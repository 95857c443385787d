"""Recipe names the user wants to come back to."""

import json
import logging
from typing import Sequence

from remix.repository import KeyValueStore


logger = logging.getLogger(__name__)


STORAGE_KEY = "savedRecipes"


class SavedRecipes:
    """Ordered, duplicate free list of names stored as one JSON array."""

    def __init__(self, store: KeyValueStore, *, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    async def load(self) -> list[str]:
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            names = json.loads(raw)
        except ValueError:
            logger.warning("Saved recipes under %r are not JSON, ignoring.", self.key)
            return []
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            logger.warning("Saved recipes under %r are not a list of names.", self.key)
            return []
        return names

    async def save(self, names: Sequence[str]) -> None:
        unique = list(dict.fromkeys(names))
        await self.store.set(self.key, json.dumps(unique, ensure_ascii=False))

    async def add(self, name: str) -> list[str]:
        names = await self.load()
        if name in names:
            return names
        names.append(name)
        await self.save(names)
        return names

    async def remove(self, name: str) -> list[str]:
        names = await self.load()
        if name not in names:
            return names
        names = [n for n in names if n != name]
        await self.save(names)
        return names
