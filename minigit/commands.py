"""The user-facing repository commands: init, add, rm, commit, branch and friends."""

from __future__ import annotations

import os
import string
import sys
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from .commit_object import create_commit
from .index import Index
from .objects import create_tree
from .references import (
    create_ref,
    delete_ref,
    is_head_detached,
    point_head_to_branch,
    point_head_to_commit,
    resolve_head,
    resolve_ref,
)
from .repository import Repository, is_git_repo

_BRANCH_PREFIX = "ref: refs/heads/"
_FILE_MODES = ("100644", "100755")
_DIR_MODE = "40000"


class CommandError(Exception):
    """A command could not be carried out."""


class MergeConflictError(CommandError):
    """Both sides of a merge hold different content for the same path."""


def git_init(path) -> Repository:
    """Create a new repository in ``path``."""
    return Repository.init(path)


def git_add(repo_path, file_path: str) -> None:
    """Stage ``file_path`` in the repository's index."""
    Index.load(repo_path).stage_file(file_path)


def git_rm(repo_path, file_path: str, force: bool) -> None:
    """Delete ``file_path`` from disk and drop it from the index.

    ``force`` is accepted for compatibility; the file is removed either way.
    Raises FileNotFoundError if the file does not exist.
    """
    staging_area = Index.load(repo_path)
    os.remove(file_path)
    staging_area.unstage_file(file_path)


def git_commit(repo_path, message: str) -> Optional[str]:
    """Record the staged files as a new commit and return its hash.

    Returns None, doing nothing, when ``repo_path`` is not a repository.
    """
    if not is_git_repo(repo_path):
        return None
    repo = Repository.open(repo_path)
    staging_index = Index.load(repo_path)
    tree_hash = create_tree(repo_path, staging_index.listing())
    parent_commit = resolve_ref(repo_path, "refs/heads/master")
    commit_hash = create_commit(
        repo_path, tree_hash, parent_commit, "Author Name", message
    )
    create_ref(repo_path, "heads/master", commit_hash)

    head_file = Path(repo.path) / ".git" / "HEAD"
    try:
        content = head_file.read_text(encoding="utf-8")
    except OSError:
        content = None
    if content is not None:
        if content.startswith(_BRANCH_PREFIX):
            branch = content[len(_BRANCH_PREFIX):].strip()
            create_ref(repo.path, f"heads/{branch}", commit_hash)
        else:
            point_head_to_commit(repo.path, commit_hash)

    print(commit_hash, file=sys.stderr)
    return commit_hash


def _current_branch(repo_path) -> Optional[str]:
    try:
        content = (Path(repo_path) / ".git" / "HEAD").read_text(encoding="utf-8")
    except OSError:
        return None
    content = content.strip()
    while content.startswith(_BRANCH_PREFIX):
        content = content[len(_BRANCH_PREFIX):]
    return content.strip()


def git_branch(repo_path, branch_name: str, delete: bool) -> None:
    """Create ``branch_name`` at the HEAD commit, or delete it when ``delete``."""
    ref_name = f"heads/{branch_name}"
    if delete:
        if not is_head_detached(repo_path) and _current_branch(repo_path) == branch_name:
            raise CommandError("Cannot delete the current branch")
        try:
            delete_ref(repo_path, ref_name)
        except FileNotFoundError as exc:
            raise CommandError(f"Branch '{branch_name}' not found") from exc
        return

    head_commit = resolve_head(repo_path)
    if head_commit is None:
        raise CommandError("Failed to resolve HEAD")
    if resolve_ref(repo_path, ref_name) is not None:
        raise CommandError(f"Branch '{branch_name}' already exists")
    create_ref(repo_path, ref_name, head_commit)


def _looks_like_commit_hash(target: str) -> bool:
    return len(target) == 40 and all(c in string.hexdigits for c in target)


def git_checkout(repo_path, target: str, new_branch: bool) -> None:
    """Point HEAD at branch ``target`` or detach it at commit ``target``.

    With ``new_branch`` the branch is created first.
    """
    ref_name = f"heads/{target}"
    if new_branch:
        if resolve_ref(repo_path, ref_name) is not None:
            raise CommandError(f"Branch '{target}' already exists")
        create_ref(repo_path, ref_name, target)

    if resolve_ref(repo_path, ref_name) is not None:
        point_head_to_branch(repo_path, target)
    elif _looks_like_commit_hash(target):
        point_head_to_commit(repo_path, target)
    else:
        raise CommandError(f"Branch or commit not found: {target}")


def git_merge(repo_path, branch_name: str) -> Optional[str]:
    """Merge ``branch_name`` into the current branch.

    Returns the hash of the merge commit, or None when there is nothing to
    merge. Raises MergeConflictError when a path differs on the two sides.
    """
    target_commit = resolve_ref(repo_path, f"heads/{branch_name}")
    if target_commit is None:
        raise CommandError(f"Branch '{branch_name}' not found")
    current_commit = resolve_head(repo_path)
    if current_commit is None:
        raise CommandError("Failed to resolve HEAD")
    if current_commit == target_commit:
        return None

    current_files = _commit_files(repo_path, current_commit)
    target_files = _commit_files(repo_path, target_commit)
    for path, target_content in target_files.items():
        current_content = current_files.get(path)
        if current_content is not None and current_content != target_content:
            raise MergeConflictError(f"Merge conflict in {path}: 1")

    return git_commit(repo_path, f"Merge branch '{branch_name}'")


def _local_heads(repo_path) -> Dict[str, str]:
    """Map each local branch name to the commit hash it points at."""
    heads_dir = Path(repo_path) / ".git" / "refs" / "heads"
    heads: Dict[str, str] = {}
    if not heads_dir.is_dir():
        return heads
    for ref_file in sorted(p for p in heads_dir.rglob("*") if p.is_file()):
        name = ref_file.relative_to(heads_dir).as_posix()
        try:
            heads[name] = ref_file.read_text(encoding="utf-8").strip()
        except OSError:
            continue
    return heads


def git_fetch(repo_path, remote_url: str) -> Dict[str, str]:
    """Fetch from ``remote_url``; no remote transport exists, so nothing changes.

    Returns the local branch heads, which are left as they were.
    """
    return _local_heads(repo_path)


def git_pull(repo_path, remote_url: str) -> Dict[str, str]:
    """Pull from ``remote_url``; no remote transport exists, so nothing changes.

    Returns the local branch heads, which are left as they were.
    """
    return _local_heads(repo_path)


def git_push(repo_path, remote_url: str) -> Dict[str, str]:
    """Push to ``remote_url``; no remote transport exists, so nothing is sent.

    Returns the local branch heads that a push would offer.
    """
    return _local_heads(repo_path)


def _read_object(repo_path, object_hash: str) -> Optional[bytes]:
    path = Path(repo_path) / ".git" / "objects" / object_hash[:2] / object_hash[2:]
    try:
        return path.read_bytes()
    except OSError:
        return None


def _commit_files(repo_path, commit_hash: str) -> Dict[str, str]:
    files: Dict[str, str] = {}
    _collect_files(repo_path, commit_hash, "", files)
    return files


def _collect_files(repo_path, object_hash: str, prefix: str, files: Dict[str, str]) -> None:
    raw = _read_object(repo_path, object_hash)
    if raw is None:
        return
    null_pos = raw.find(b"\0")
    if null_pos < 0:
        return
    kind = raw[:null_pos].decode("utf-8", errors="replace").split(" ")[0]
    body = raw[null_pos + 1:]

    if kind == "commit":
        for line in body.decode("utf-8", errors="replace").splitlines():
            if line.startswith("tree "):
                _collect_files(repo_path, line[5:].strip(), prefix, files)
                break
    elif kind == "tree":
        for mode, name, entry_hash in _tree_entries(body):
            path = f"{prefix}/{name}" if prefix else name
            if mode in _FILE_MODES:
                _collect_blob(repo_path, entry_hash, path, files)
            elif mode == _DIR_MODE:
                _collect_files(repo_path, entry_hash, path, files)


def _collect_blob(repo_path, blob_hash: str, path: str, files: Dict[str, str]) -> None:
    raw = _read_object(repo_path, blob_hash)
    if raw is None:
        return
    null_pos = raw.find(b"\0")
    if null_pos < 0:
        return
    try:
        files[path] = raw[null_pos + 1:].decode("utf-8")
    except UnicodeDecodeError:
        pass


def _tree_entries(content: bytes) -> Iterator[Tuple[str, str, str]]:
    """Yield ``(mode, name, hex hash)`` for each entry of a binary tree body."""
    pos = 0
    while pos < len(content):
        space_pos = content.find(b" ", pos)
        if space_pos < 0:
            break
        mode = content[pos:space_pos].decode("utf-8", errors="replace")
        pos = space_pos + 1
        null_pos = content.find(b"\0", pos)
        if null_pos < 0:
            continue
        name = content[pos:null_pos].decode("utf-8", errors="replace")
        pos = null_pos + 1
        if pos + 20 <= len(content):
            entry_hash = content[pos:pos + 20].hex()
            pos += 20
            yield mode, name, entry_hash