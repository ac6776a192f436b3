"""Command-line front end: argument parsing and command dispatch."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from .commands import (
    CommandError,
    git_add,
    git_branch,
    git_checkout,
    git_commit,
    git_fetch,
    git_init,
    git_merge,
    git_pull,
    git_push,
    git_rm,
)

_VERSION = "0.1.0"
_NO_COMMAND_MESSAGE = "Please provide a command. Use --help to see the available commands."
_DELETE_NEEDS_NAME = "A branch name is required when deleting a branch"


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``minigit`` command line."""
    parser = argparse.ArgumentParser(
        prog="minigit",
        description="A simple Git implementation",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    init = sub.add_parser("init", help="Create a new repository")
    init.add_argument("path", nargs="?", default=".", help="Repository path")

    add = sub.add_parser("add", help="Add a file to the index")
    add.add_argument("file", help="File to add")
    add.add_argument("repo_path", nargs="?", default=".", help=argparse.SUPPRESS)

    rm = sub.add_parser("rm", help="Remove a file from the repository")
    rm.add_argument("file", help="File to remove")
    rm.add_argument("--force", action="store_true", default=False, help=argparse.SUPPRESS)
    rm.add_argument("repo_path", nargs="?", default=".", help=argparse.SUPPRESS)

    commit = sub.add_parser("commit", help="Record changes")
    commit.add_argument("-m", "--message", required=True, help="Commit message")
    commit.add_argument("repo_path", nargs="?", default=".", help="Repository path")

    branch = sub.add_parser("branch", help="List, create or delete branches")
    branch.add_argument("name", nargs="?", default=None, help="Branch name")
    branch.add_argument("-d", "--delete", action="store_true", help="Delete the branch")
    branch.add_argument("repo_path", nargs="?", default=".", help="Repository path")

    checkout = sub.add_parser("checkout", help="Switch branches")
    checkout.add_argument("target", help="Branch name or commit to switch to")
    checkout.add_argument("repo_path", nargs="?", default=".", help="Repository path")
    checkout.add_argument(
        "-b",
        "--branch",
        dest="new_branch",
        action="store_true",
        help="Create a new branch and switch to it",
    )

    merge = sub.add_parser("merge", help="Merge a branch into the current one")
    merge.add_argument("branch", help="Branch to merge")
    merge.add_argument("repo_path", nargs="?", default=".", help="Repository path")

    fetch = sub.add_parser("fetch", help="Download objects and refs from a remote")
    fetch.add_argument("repo_path", nargs="?", default=".", help="Repository path")
    fetch.add_argument("remote", help="Remote repository address")

    for name, text in (
        ("pull", "Pull a remote repository into the local one"),
        ("push", "Push the local repository to a remote"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("repo_path", nargs="?", default=".", help="Repository path")
        cmd.add_argument("remote", help="Remote repository URL")
        cmd.add_argument("branch", nargs="?", default="main", help="Branch, main by default")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[str, Optional[List[str]]]:
    """Parse ``argv`` into a command name and its positional argument list.

    Returns ``("", None)`` when no command was given.
    """
    ns = build_parser().parse_args(argv)
    command = ns.command
    if command is None:
        return "", None
    if command == "init":
        return "init", [ns.path]
    if command == "add":
        return "add", [ns.repo_path, ns.file]
    if command == "rm":
        args = [ns.repo_path, ns.file]
        if ns.force:
            args.insert(1, "force")
        return "rm", args
    if command == "commit":
        return "commit", [ns.repo_path, ns.message]
    if command == "branch":
        args = [ns.repo_path]
        if ns.delete:
            args.append("--delete")
        if ns.name is not None:
            args.append(ns.name)
        return "branch", args
    if command == "checkout":
        return "checkout", [ns.repo_path, ns.target, str(ns.new_branch).lower()]
    if command == "merge":
        return "merge", [ns.repo_path, ns.branch]
    if command == "fetch":
        return "fetch", [ns.repo_path, ns.remote]
    return command, [ns.repo_path, ns.remote, ns.branch]


def _dispatch(ns: argparse.Namespace) -> int:
    command = ns.command
    if command == "init":
        git_init(ns.path)
    elif command == "add":
        git_add(ns.repo_path, ns.file)
    elif command == "rm":
        git_rm(ns.repo_path, ns.file, ns.force)
    elif command == "commit":
        git_commit(ns.repo_path, ns.message)
    elif command == "branch":
        if ns.delete:
            if ns.name is None:
                print(_DELETE_NEEDS_NAME)
                return 1
            git_branch(ns.repo_path, ns.name, True)
        else:
            git_branch(ns.repo_path, ns.name if ns.name is not None else "", False)
    elif command == "checkout":
        git_checkout(ns.repo_path, ns.target, ns.new_branch)
    elif command == "merge":
        git_merge(ns.repo_path, ns.branch)
    elif command == "fetch":
        git_fetch(ns.repo_path, ns.remote)
    elif command == "pull":
        git_pull(ns.repo_path, ns.remote)
    elif command == "push":
        git_push(ns.repo_path, ns.remote)
    else:
        print(_NO_COMMAND_MESSAGE)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command given in ``argv`` and return the exit status."""
    ns = build_parser().parse_args(argv)
    try:
        return _dispatch(ns)
    except (CommandError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())