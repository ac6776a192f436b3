"""Loose objects stored under ``.git/objects``."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from .fsutil import create_dir, write_file
from .hashing import sha1_hex


class ObjectKind(enum.Enum):
    """The kinds of object the store holds."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


@dataclass(frozen=True)
class GitObject:
    """An object of a given kind with its text payload."""

    kind: ObjectKind
    data: str

    def raw(self) -> bytes:
        """Return the stored form: ``<kind> <byte length>\\0<data>``."""
        body = self.data.encode("utf-8")
        header = f"{self.kind.value} {len(body)}\0".encode("utf-8")
        return header + body

    def save(self, repo_path) -> str:
        """Write the object into the repository and return its hash."""
        raw = self.raw()
        digest = sha1_hex(raw)
        directory = Path(repo_path) / ".git" / "objects" / digest[:2]
        create_dir(directory)
        write_file(directory / digest[2:], raw)
        return digest


def create_blob(repo_path, data: str) -> str:
    """Store ``data`` as a blob and return its hash."""
    return GitObject(ObjectKind.BLOB, data).save(repo_path)


def create_tree(repo_path, data: str) -> str:
    """Store ``data`` as a tree and return its hash."""
    return GitObject(ObjectKind.TREE, data).save(repo_path)