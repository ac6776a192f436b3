"""Branch references under ``.git/refs`` and the ``HEAD`` pointer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

_BRANCH_PREFIX = "ref: refs/heads/"


def _ref_path(repo_path, ref_name: str) -> Path:
    return Path(repo_path) / ".git" / "refs" / ref_name


def _head_path(repo_path) -> Path:
    return Path(repo_path) / ".git" / "HEAD"


def create_ref(repo_path, ref_name: str, target_hash: str) -> None:
    """Point ``refs/<ref_name>`` at ``target_hash``, creating or replacing it."""
    _ref_path(repo_path, ref_name).write_text(f"{target_hash}\n", encoding="utf-8")


def delete_ref(repo_path, ref_name: str) -> None:
    """Remove ``refs/<ref_name>``; raises FileNotFoundError if it is absent."""
    _ref_path(repo_path, ref_name).unlink()


def resolve_ref(repo_path, ref_name: str) -> Optional[str]:
    """Return the hash ``refs/<ref_name>`` points at, or None if it is absent."""
    path = _ref_path(repo_path, ref_name)
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8").strip()


def point_head_to_branch(repo_path, branch_name: str) -> None:
    """Make HEAD a symbolic reference to ``branch_name``."""
    _head_path(repo_path).write_text(f"{_BRANCH_PREFIX}{branch_name}\n", encoding="utf-8")


def point_head_to_commit(repo_path, commit_hash: str) -> None:
    """Detach HEAD at ``commit_hash``."""
    _head_path(repo_path).write_text(f"{commit_hash}\n", encoding="utf-8")


def resolve_head(repo_path) -> Optional[str]:
    """Return the commit HEAD leads to, or None if it cannot be resolved."""
    try:
        content = _head_path(repo_path).read_text(encoding="utf-8").strip()
    except OSError:
        return None
    if content.startswith(_BRANCH_PREFIX):
        branch = content[len(_BRANCH_PREFIX):]
        return resolve_ref(repo_path, f"heads/{branch}")
    print(f"detached head : {content}")
    return content


def is_head_detached(repo_path) -> bool:
    """Tell whether HEAD holds a commit hash rather than a branch reference."""
    try:
        content = _head_path(repo_path).read_text(encoding="utf-8")
    except OSError:
        return False
    return not content.startswith("ref: ")