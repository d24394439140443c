from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Callable

from .database import DataBase
from .interfaces import AsyncDocumentStore, DocumentSerializer, T
from .settings import Settings


class AsyncDataBase(AsyncDocumentStore[T]):
    """
    Async wrapper around the file-backed DataBase.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Adds no locking: one owner per path, and callers must not run two
    mutations on the same store concurrently.
    """

    def __init__(self, db: DataBase[T]) -> None:
        self._db = db

    @classmethod
    async def open(
        cls,
        path: str | os.PathLike[str],
        doc_type: type[T],
        *,
        settings: Settings | None = None,
        serializer: DocumentSerializer[T] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> "AsyncDataBase[T]":
        db = await asyncio.to_thread(
            DataBase.open,
            path,
            doc_type,
            settings=settings,
            serializer=serializer,
            id_factory=id_factory,
        )
        return cls(db)

    @property
    def sync(self) -> DataBase[T]:
        return self._db

    @property
    def path(self) -> Path:
        return self._db.path

    @property
    def docs(self) -> list[T]:
        return self._db.docs

    async def push(self, doc: T) -> str:
        return await asyncio.to_thread(self._db.push, doc)

    async def get(self, doc_id: str) -> T | None:
        return await asyncio.to_thread(self._db.get, doc_id)

    async def delete(self, doc_id: str) -> T:
        return await asyncio.to_thread(self._db.delete, doc_id)

    async def flush(self) -> None:
        await asyncio.to_thread(self._db.flush)

    def __len__(self) -> int:
        return len(self._db)
