"""Small filesystem helpers used by the object and index code."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def create_dir(path: PathLike) -> None:
    """Create a directory and any missing parents if it does not exist yet."""
    Path(path).mkdir(parents=True, exist_ok=True)


def create_file(path: PathLike) -> None:
    """Create an empty file unless one already exists at ``path``."""
    target = Path(path)
    if not target.exists():
        target.touch()


def write_file(path: PathLike, data: Union[str, bytes]) -> None:
    """Create or truncate ``path`` and write ``data`` to it.

    Text is stored as UTF-8 without newline translation.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else data
    Path(path).write_bytes(payload)


def read_file(path: PathLike) -> str:
    """Return the whole content of ``path`` as text."""
    return Path(path).read_text(encoding="utf-8")