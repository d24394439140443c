from __future__ import annotations

import uuid
from typing import Any, Callable, TypeVar, overload

from pydantic import BaseModel

C = TypeVar("C", bound=type)


def new_id() -> str:
    """Default id factory: a random 128-bit UUID rendered as text."""
    return str(uuid.uuid4())


class Document(BaseModel):
    """
    Convenience base model carrying an `id` field and the identity accessors.

        class Task(Document):
            name: str = ""
    """

    id: str = ""

    def get_id(self) -> str:
        return self.id

    def set_id(self, id: str) -> None:
        self.id = id


@overload
def memodoc(cls: C, *, field: str = "uuid") -> C: ...


@overload
def memodoc(cls: None = None, *, field: str = "uuid") -> Callable[[C], C]: ...


def memodoc(cls: Any = None, *, field: str = "uuid") -> Any:
    """
    Class decorator that adds get_id/set_id reading and writing `field`.

        @memodoc
        class Task(BaseModel):
            uuid: str = ""

        @memodoc(field="key")
        @dataclass
        class Note:
            key: str = ""
    """

    def wrap(klass: C) -> C:
        def get_id(self) -> str:
            return getattr(self, field)

        def set_id(self, id: str) -> None:
            setattr(self, field, id)

        get_id.__qualname__ = f"{klass.__qualname__}.get_id"
        set_id.__qualname__ = f"{klass.__qualname__}.set_id"
        klass.get_id = get_id  # type: ignore[attr-defined]
        klass.set_id = set_id  # type: ignore[attr-defined]
        return klass

    if cls is None:
        return wrap
    return wrap(cls)
