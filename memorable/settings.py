from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_indent(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("", "none", "compact"):
        return None
    try:
        indent = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer or 'none', got {raw!r}") from exc
    if indent < 0:
        raise ValueError(f"{name} must not be negative, got {indent}")
    return indent


@dataclass(frozen=True)
class Settings:
    # Output
    json_indent: int | None = 2

    # Durability
    fsync: bool = True
    create_dirs: bool = True


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        # Values already present in the environment win over the file.
        load_dotenv(env_file, override=False)

    return Settings(
        json_indent=_env_indent("MEMORABLE_JSON_INDENT", 2),
        fsync=_env_bool("MEMORABLE_FSYNC", True),
        create_dirs=_env_bool("MEMORABLE_CREATE_DIRS", True),
    )
