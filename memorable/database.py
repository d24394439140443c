from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from .document import new_id
from .errors import DecodeError, NotFoundError, StoreIOError
from .interfaces import DocumentSerializer, DocumentStore, T
from .json_store import atomic_write_bytes, read_bytes
from .serialization import JsonSerializer
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class DataBase(DocumentStore[T]):
    """
    An ordered collection of documents backed by a single JSON file.

    Every mutating call re-encodes the whole collection and rewrites the
    file before returning. A failed write or encode rolls the in-memory
    change back, so `docs` and the file agree after every call.

    `docs` is public for direct inspection and editing; call flush() after
    editing it by hand.

    Example:
        @memodoc
        class Task(BaseModel):
            uuid: str = ""
            name: str = ""

        db = DataBase.open("./db.json", Task)
        task_id = db.push(Task(name="a"))
        db.get(task_id)     # Task(uuid=task_id, name="a")
        db.delete(task_id)  # returns the removed Task

    Single owner by contract: no locking, and two stores opened on the
    same path overwrite each other (last writer wins).
    """

    def __init__(
        self,
        path: Path,
        doc_type: type[T],
        docs: list[T],
        *,
        serializer: DocumentSerializer[T],
        settings: Settings,
        id_factory: Callable[[], str] = new_id,
    ):
        self._path = path
        self._doc_type = doc_type
        self._serializer = serializer
        self._settings = settings
        self._id_factory = id_factory
        self.docs: list[T] = docs

    @classmethod
    def open(
        cls,
        path: str | os.PathLike[str],
        doc_type: type[T],
        *,
        settings: Settings | None = None,
        serializer: DocumentSerializer[T] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> "DataBase[T]":
        """
        Open the store at `path`, loading any existing documents.

        A missing file gives an empty store; nothing is written until the
        first push/delete/flush.

        Raises:
            TypeError: doc_type lacks get_id/set_id
            StoreIOError: the file exists but could not be read
            DecodeError: the file content is not a JSON array of doc_type
        """
        for attr in ("get_id", "set_id"):
            if not callable(getattr(doc_type, attr, None)):
                raise TypeError(f"{doc_type.__name__} must define {attr}() to be stored (see memodoc)")

        settings = settings or get_settings()
        serializer = serializer or JsonSerializer(doc_type, indent=settings.json_indent)
        file_path = Path(path)

        try:
            raw = read_bytes(file_path)
        except OSError as exc:
            raise StoreIOError(file_path, "Failed to read database file") from exc

        docs: list[T] = []
        if raw is not None and raw.strip():
            try:
                docs = serializer.decode(raw)
            except DecodeError as exc:
                raise DecodeError(file_path, str(exc)) from exc

        logger.debug("opened %s with %d %s document(s)", file_path, len(docs), doc_type.__name__)
        return cls(
            file_path,
            doc_type,
            docs,
            serializer=serializer,
            settings=settings,
            id_factory=id_factory or new_id,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def doc_type(self) -> type[T]:
        return self._doc_type

    def push(self, doc: T) -> str:
        """
        Append a document and persist the collection.

        An empty id is replaced with a fresh one, written back onto `doc`.
        A non-empty id is kept as is, even when another stored document
        already uses it. The store keeps its own copy of `doc`.

        Returns the document's id. A failed push leaves `doc` unchanged.

        Raises:
            TypeError: doc is not an instance of the store's doc_type
            EncodeError: the collection could not be serialized
            StoreIOError: the file could not be written
        """
        if not isinstance(doc, self._doc_type):
            raise TypeError(f"Expected {self._doc_type.__name__}, got {type(doc).__name__}")

        stored = copy.deepcopy(doc)
        assigned = stored.get_id() == ""
        if assigned:
            stored.set_id(self._id_factory())
        doc_id = stored.get_id()

        self.docs.append(stored)
        try:
            self._persist()
        except BaseException:
            self.docs.pop()
            logger.debug("push of %s rolled back", doc_id)
            raise

        if assigned:
            doc.set_id(doc_id)
        logger.debug("pushed %s to %s", doc_id, self._path)
        return doc_id

    def get(self, doc_id: str) -> T | None:
        """Return a copy of the first document whose id equals `doc_id`, or None."""
        index = self._index_of(doc_id)
        if index is None:
            return None
        return copy.deepcopy(self.docs[index])

    def delete(self, doc_id: str) -> T:
        """
        Remove the first document whose id equals `doc_id` and persist.

        Returns the removed document.

        Raises:
            NotFoundError: no document has this id; nothing is written
            EncodeError: the collection could not be serialized
            StoreIOError: the file could not be written
        """
        index = self._index_of(doc_id)
        if index is None:
            raise NotFoundError(doc_id)

        removed = self.docs.pop(index)
        try:
            self._persist()
        except BaseException:
            self.docs.insert(index, removed)
            logger.debug("delete of %s rolled back", doc_id)
            raise

        logger.debug("deleted %s from %s", doc_id, self._path)
        return copy.deepcopy(removed)

    def flush(self) -> None:
        """Rewrite the backing file from the current `docs`."""
        self._persist()
        logger.debug("flushed %d document(s) to %s", len(self.docs), self._path)

    def _index_of(self, doc_id: str) -> int | None:
        for i, doc in enumerate(self.docs):
            if doc.get_id() == doc_id:
                return i
        return None

    def _persist(self) -> None:
        # Encode fully before touching the file.
        payload = self._serializer.encode(self.docs)
        try:
            atomic_write_bytes(
                self._path,
                payload,
                fsync=self._settings.fsync,
                create_dirs=self._settings.create_dirs,
            )
        except OSError as exc:
            raise StoreIOError(self._path, "Failed to write database file") from exc

    def __len__(self) -> int:
        return len(self.docs)

    def __iter__(self) -> Iterator[T]:
        for doc in list(self.docs):
            yield copy.deepcopy(doc)

    def __contains__(self, doc_id: object) -> bool:
        return isinstance(doc_id, str) and self._index_of(doc_id) is not None

    def __repr__(self) -> str:
        return f"DataBase(path={str(self._path)!r}, doc_type={self._doc_type.__name__}, docs={len(self.docs)})"
