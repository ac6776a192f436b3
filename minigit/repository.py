"""Repository layout creation and detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_DIRECTORIES = (
    ".git",
    ".git/objects",
    ".git/objects/info",
    ".git/objects/pack",
    ".git/refs",
    ".git/refs/heads",
    ".git/refs/tags",
    ".git/refs/remotes",
    ".git/hooks",
    ".git/info",
    ".git/logs",
    ".git/logs/refs",
)

_FILES = (
    (".git/HEAD", "ref: refs/heads/master\n"),
    (".git/description", "Unnamed repository\n"),
    (
        ".git/config",
        "[core]\n\trepositoryformatversion = 0\n\tfilemode = true\n\tbare = false\n",
    ),
    (
        ".git/info/exclude",
        "# git ls-files --others --exclude-from=.git/info/exclude\n",
    ),
)


@dataclass(frozen=True)
class Repository:
    """A repository rooted at ``path``."""

    path: str

    @classmethod
    def init(cls, path) -> "Repository":
        """Create the ``.git`` layout in ``path``.

        Raises FileExistsError if a ``.git`` directory is already there.
        """
        root = Path(path)
        for directory in _DIRECTORIES:
            (root / directory).mkdir()
        for name, content in _FILES:
            (root / name).write_text(content, encoding="utf-8")
        return cls(str(path))

    @classmethod
    def open(cls, path) -> "Repository":
        """Return the repository at an existing ``path``."""
        return cls(str(path))


def is_git_repo(path) -> bool:
    """Tell whether ``path`` holds a ``.git`` directory."""
    return (Path(path) / ".git").exists()