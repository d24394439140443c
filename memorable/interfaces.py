from __future__ import annotations

from typing import Iterator, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class MemoDoc(Protocol):
    """
    Identity capability a document type must provide to be stored.

    get_id returns "" while no id is assigned.
    """

    def get_id(self) -> str:
        ...

    def set_id(self, id: str) -> None:
        ...


T = TypeVar("T", bound=MemoDoc)


class DocumentSerializer(Protocol[T]):
    """Converts the full document sequence to and from its on-disk form."""

    def encode(self, docs: list[T]) -> bytes:
        ...

    def decode(self, raw: bytes | str) -> list[T]:
        ...


class DocumentStore(Protocol[T]):
    """
    Minimal document-store interface: ordered documents keyed by id,
    every mutation persisted before the call returns.
    """

    docs: list[T]

    def push(self, doc: T) -> str:
        """Append a document, assigning an id when it has none. Returns the id."""
        ...

    def get(self, doc_id: str) -> T | None:
        """Return a copy of the first document with this id, or None."""
        ...

    def delete(self, doc_id: str) -> T:
        """Remove and return the first document with this id."""
        ...

    def __iter__(self) -> Iterator[T]:
        ...


class AsyncDocumentStore(Protocol[T]):
    """Coroutine counterpart of DocumentStore for use inside an event loop."""

    @property
    def docs(self) -> list[T]:
        ...

    async def push(self, doc: T) -> str: ...
    async def get(self, doc_id: str) -> T | None: ...
    async def delete(self, doc_id: str) -> T: ...
    async def flush(self) -> None: ...
