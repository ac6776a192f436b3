"""The staging area, kept as one path per line in ``.git/index``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .fsutil import create_file, read_file, write_file


def _index_path(repo_path) -> Path:
    return Path(repo_path) / ".git" / "index"


@dataclass
class Index:
    """The set of staged paths of a repository."""

    repo_path: str
    staged_files: set[str] = field(default_factory=set)

    @classmethod
    def load(cls, repo_path) -> "Index":
        """Load the index, creating an empty index file if there is none."""
        index_file = _index_path(repo_path)
        if not index_file.exists():
            create_file(index_file)
            return cls(str(repo_path))
        staged = set(read_file(index_file).splitlines())
        return cls(str(repo_path), staged)

    def stage_file(self, file_path: str) -> None:
        """Add ``file_path`` to the index and save it."""
        self.staged_files.add(file_path)
        self._persist()

    def unstage_file(self, file_path: str) -> None:
        """Drop ``file_path`` from the index, if present, and save it."""
        self.staged_files.discard(file_path)
        self._persist()

    def listing(self) -> str:
        """Return the staged paths joined by ``", "``."""
        return ", ".join(sorted(self.staged_files))

    def _persist(self) -> None:
        lines = "".join(f"{path}\n" for path in sorted(self.staged_files))
        write_file(_index_path(self.repo_path), lines)