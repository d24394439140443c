from __future__ import annotations

import asyncio
import json

import pytest

from doc_types import Note
from memorable import AsyncDataBase, AsyncDocumentStore, NotFoundError


def test_async_database_basic_flow(db_path):
    async def _run():
        db = await AsyncDataBase.open(db_path, Note)
        assert len(db) == 0
        assert not db_path.exists()

        n1 = await db.push(Note(name="banana"))
        n2 = await db.push(Note(name="toast"))
        assert n1 and n2 and n1 != n2

        got = await db.get(n2)
        assert got is not None
        assert got.name == "toast"
        assert [n.name for n in db.docs] == ["banana", "toast"]

        removed = await db.delete(n1)
        assert removed.name == "banana"
        assert await db.get(n1) is None

        with pytest.raises(NotFoundError):
            await db.delete(n1)

        db.docs[0].name = "rye toast"
        await db.flush()

        return n2

    n2 = asyncio.run(_run())
    assert json.loads(db_path.read_text(encoding="utf-8")) == [{"id": n2, "name": "rye toast"}]


def test_async_database_wraps_sync_store(db_path):
    async def _run():
        db = await AsyncDataBase.open(db_path, Note)
        await db.push(Note(id="a", name="x"))
        return db

    db = asyncio.run(_run())
    assert db.path == db_path
    assert db.sync.get("a") == Note(id="a", name="x")


def test_async_database_implements_async_protocol():
    assert AsyncDocumentStore in AsyncDataBase.__mro__
    for name in ("push", "get", "delete", "flush"):
        assert asyncio.iscoroutinefunction(getattr(AsyncDataBase, name))
