from typing import Protocol

from databases import Database


CREATE_STORE_TABLE = """
CREATE TABLE IF NOT EXISTS Store (id VARCHAR(256) PRIMARY KEY, value TEXT)
"""


GET_VALUE = "SELECT value FROM Store WHERE id = :id"


SET_VALUE = """
INSERT INTO Store(id, value) VALUES (:id, :value)
ON CONFLICT(id) DO UPDATE SET value = excluded.value
"""


class KeyValueStore(Protocol):
    async def connect(self) -> None:
        ...

    async def disconnect(self) -> None:
        ...

    async def get(self, key: str) -> str | None:
        ...

    async def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data = {} if data is None else data

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SQLiteStore:
    """String values by key in a single table."""

    def __init__(self, db: Database | str) -> None:
        self.db = Database(db) if isinstance(db, str) else db

    async def connect(self) -> None:
        await self.db.connect()
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            query=CREATE_STORE_TABLE
        )

    async def disconnect(self) -> None:
        await self.db.disconnect()

    async def get(self, key: str) -> str | None:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_VALUE, values={"id": key}
        )
        if result is None:
            return None
        return result["value"]

    async def set(self, key: str, value: str) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            SET_VALUE, values={"id": key, "value": value}
        )
