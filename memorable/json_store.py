from __future__ import annotations

import os
from pathlib import Path


def read_bytes(path: Path) -> bytes | None:
    """
    Read a file's raw bytes from disk.

    Returns None when the file does not exist. Any other OSError propagates.
    Text decoding is left to the caller so bad encodings surface as decode errors.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def atomic_write_bytes(path: Path, payload: bytes, *, fsync: bool = True, create_dirs: bool = True) -> None:
    """
    Atomically write bytes to disk by writing to a temp file then replacing.

    On failure the temp file is removed and the previous content of `path` is untouched.
    """
    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("wb") as f:
            f.write(payload)
            if not payload.endswith(b"\n"):
                f.write(b"\n")
            if fsync:
                f.flush()
                os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
