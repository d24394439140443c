"""JSON encoding of document sequences, built on pydantic's TypeAdapter."""

from __future__ import annotations

import logging
from typing import Generic

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, EncodeError
from .interfaces import T

logger = logging.getLogger(__name__)


class JsonSerializer(Generic[T]):
    """
    Encode/decode a list of documents as a single JSON array.

    Any type pydantic can validate works as the document type: BaseModel
    subclasses, dataclasses, and so on. Field-level JSON rules are pydantic's.

    Example:
        serializer = JsonSerializer(Task)
        raw = serializer.encode([Task(uuid="a", name="x")])
        # b'[\\n  {\\n    "uuid": "a",\\n    "name": "x"\\n  }\\n]'
        tasks = serializer.decode(raw)
    """

    def __init__(self, doc_type: type[T], *, indent: int | None = 2):
        self.doc_type = doc_type
        self.indent = indent
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[doc_type])  # type: ignore[valid-type]

    def encode(self, docs: list[T]) -> bytes:
        try:
            # Mismatched document types are errors, not warnings.
            return self._adapter.dump_json(docs, indent=self.indent, warnings="error")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodeError(f"Failed to serialize {self.doc_type.__name__} documents: {exc}") from exc

    def decode(self, raw: bytes | str) -> list[T]:
        """
        Decode a JSON array of documents.

        Raises DecodeError for malformed JSON or a shape that does not
        validate as a list of the document type. The path is filled in by the caller.
        """
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            logger.debug("decode failed for %s: %s", self.doc_type.__name__, exc)
            raise DecodeError(None, f"Invalid {self.doc_type.__name__} document data: {exc}") from exc
