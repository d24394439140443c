from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base exception for all memorable errors."""


class StoreIOError(StoreError, OSError):
    """
    Reading or writing the backing file failed.

    The original OSError is chained as __cause__.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class DecodeError(StoreError, ValueError):
    """The backing file does not decode into a sequence of documents."""

    def __init__(self, path: Path | None, message: str):
        self.path = path
        where = f" ({path})" if path is not None else ""
        super().__init__(f"{message}{where}")


class EncodeError(StoreError, ValueError):
    """The in-memory documents could not be serialized."""


class NotFoundError(StoreError, KeyError):
    """No document with the requested id."""

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"Document with id {doc_id!r} was not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
