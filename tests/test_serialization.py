from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict

from doc_types import Task
from memorable import DecodeError, EncodeError, JsonSerializer, memodoc


@memodoc
class Blob(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    uuid: str = ""
    payload: Any = None


def test_decode_accepts_str_and_bytes():
    serializer = JsonSerializer(Task)
    raw = '[{"uuid": "a", "title": "x"}]'
    assert serializer.decode(raw) == serializer.decode(raw.encode("utf-8")) == [Task(uuid="a", title="x")]


def test_missing_fields_use_defaults():
    tasks = JsonSerializer(Task).decode('[{"uuid": "a"}]')
    assert tasks == [Task(uuid="a")]


def test_decode_error_chains_validation_error():
    with pytest.raises(DecodeError) as excinfo:
        JsonSerializer(Task).decode("[{")
    assert excinfo.value.path is None
    assert excinfo.value.__cause__ is not None


def test_unserializable_value_raises_encode_error():
    serializer = JsonSerializer(Blob)
    with pytest.raises(EncodeError):
        serializer.encode([Blob(uuid="a", payload=object())])


def test_encode_empty_sequence():
    assert JsonSerializer(Task, indent=None).encode([]) == b"[]"
