"""Creation of commit objects."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional

from .objects import GitObject, ObjectKind


def create_commit(
    repo_path,
    tree_hash: str,
    parent_hash: Optional[str],
    author_info: str,
    message: str,
) -> str:
    """Store a commit object for ``tree_hash`` and return its hash.

    The author line carries the author text followed directly by the
    current UTC time in RFC 2822 form.
    """
    timestamp = format_datetime(datetime.now(timezone.utc))
    parent_part = f"parent {parent_hash}\n" if parent_hash is not None else ""
    content = (
        f"tree {tree_hash}\n"
        f"parent {parent_part}\n"
        f"author {author_info}{timestamp}\n"
        f"\n"
        f"{message}"
    )
    return GitObject(ObjectKind.COMMIT, content).save(repo_path)