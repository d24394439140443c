"""
A minimal durable document store: uniquely-identified records kept in
memory and mirrored to a single JSON file after every mutation.

    from memorable import DataBase, Document

    class Task(Document):
        name: str = ""

    db = DataBase.open("./db.json", Task)
    task_id = db.push(Task(name="a"))
"""

from __future__ import annotations

import logging

from .database import DataBase
from .document import Document, memodoc, new_id
from .errors import DecodeError, EncodeError, NotFoundError, StoreError, StoreIOError
from .interfaces import AsyncDocumentStore, DocumentSerializer, DocumentStore, MemoDoc
from .repositories import AsyncDataBase
from .serialization import JsonSerializer
from .settings import Settings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DataBase",
    "AsyncDataBase",
    "DocumentStore",
    "AsyncDocumentStore",
    "DocumentSerializer",
    "MemoDoc",
    "Document",
    "memodoc",
    "new_id",
    "JsonSerializer",
    "Settings",
    "get_settings",
    "StoreError",
    "StoreIOError",
    "DecodeError",
    "EncodeError",
    "NotFoundError",
]
