# minigit

A small Git-like version control tool. It keeps a `.git` directory holding
loose objects (blobs, trees and commits named by their SHA-1), branch
references under `.git/refs/heads`, a `HEAD` file, and a staging index
stored as one path per line in `.git/index`.

## Install

    pip install .

## Command line

    minigit init [PATH]
    minigit add FILE
    minigit rm FILE
    minigit commit -m MESSAGE [REPO_PATH]
    minigit branch NAME [-d] [REPO_PATH]
    minigit checkout TARGET [REPO_PATH] [-b]
    minigit merge BRANCH [REPO_PATH]
    minigit fetch [REPO_PATH] REMOTE
    minigit pull [REPO_PATH] REMOTE [BRANCH]
    minigit push [REPO_PATH] REMOTE [BRANCH]

`REPO_PATH` and `PATH` default to the current directory; `minigit --version`
prints the version.

- `init` creates the `.git` layout, with `HEAD` pointing at `master`. It
  fails if a `.git` directory is already there.
- `add` records the path in the index exactly as given.
- `rm` deletes the file from disk and drops it from the index. The hidden
  `--force` flag is accepted; the file is removed either way.
- `commit` stores a tree object and a commit object, points `heads/master`
  and the current branch (or a detached `HEAD`) at the new commit, and
  prints its hash on stderr. It does nothing if the path is not a
  repository.
- `branch NAME` creates a branch at the `HEAD` commit; `-d` deletes it.
  Creating an existing branch or deleting the current branch is refused.
- `checkout` points `HEAD` at a branch, or detaches it onto a
  40-character hexadecimal commit hash. With `-b` it first creates the
  branch.
- `merge` refuses when a file differs between the two commits, does
  nothing when both sides are the same commit, and otherwise makes a
  commit with the message `Merge branch '<name>'`.
- `fetch`, `pull` and `push` accept their arguments and change nothing.

The command exits with status 0 on success. On a failure it prints
`error: <reason>` on stderr and exits with status 1.

## Library use

    from minigit.commands import git_init, git_add, git_commit, git_branch
    from minigit.references import resolve_head

    git_init("project")
    git_add("project", "notes.txt")
    git_commit("project", "first commit")
    git_branch("project", "feature", False)
    print(resolve_head("project"))

Modules:

- `minigit.commands`: `git_init`, `git_add`, `git_rm`, `git_commit`,
  `git_branch`, `git_checkout`, `git_merge`, `git_fetch`, `git_pull` and
  `git_push`. `git_commit` and `git_merge` return the new commit hash, or
  None when they do nothing. `git_fetch`, `git_pull` and `git_push` return
  a dict of local branch names to commit hashes. Failures raise
  `CommandError`, and merge conflicts raise `MergeConflictError`, a
  subclass of it.
- `minigit.repository`: `Repository.init`, `Repository.open` and
  `is_git_repo`.
- `minigit.index`: `Index.load`, `Index.stage_file`, `Index.unstage_file`
  and `Index.listing`, which joins the staged paths with `", "`.
- `minigit.references`: `create_ref`, `delete_ref`, `resolve_ref`,
  `point_head_to_branch`, `point_head_to_commit`, `resolve_head` and
  `is_head_detached`.
- `minigit.objects`: `ObjectKind`, `GitObject` (with `raw` and `save`),
  `create_blob` and `create_tree`.
- `minigit.commit_object`: `create_commit`.
- `minigit.hashing`: `sha1_hex`.
- `minigit.fsutil`: `create_dir`, `create_file`, `write_file` and
  `read_file`.
- `minigit.cli`: `build_parser`, `parse_args` and `main`.

## What it does not do

- A commit's tree object holds the index listing (the staged paths as
  text), not the files' contents, so a commit does not snapshot the
  working tree and `merge` finds no file contents to compare.
- A commit does not record its parent.
- There is no branch listing: `branch` needs a name.
- There is no remote transport: `fetch`, `pull` and `push` send and
  receive nothing.
- There is no `log`, `status`, `diff` or tag command, and checkout does
  not update the working tree.

## Tests

    pip install ".[test]"
    pytest