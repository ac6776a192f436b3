import pytest

from minigit.commit_object import create_commit
from minigit.hashing import sha1_hex


@pytest.fixture
def repo(tmp_path):
    (tmp_path / ".git" / "objects").mkdir(parents=True)
    return tmp_path


def _read(repo, digest):
    return (repo / ".git" / "objects" / digest[:2] / digest[2:]).read_bytes()


def _body(raw):
    header, _, body = raw.partition(b"\x00")
    return header, body.decode("utf-8")


def test_commit_without_parent(repo):
    tree = "a" * 40
    digest = create_commit(repo, tree, None, "Author Name", "first")
    header, body = _body(_read(repo, digest))
    assert header.startswith(b"commit ")
    assert body.startswith(f"tree {tree}\nparent \nauthor Author Name")
    assert body.endswith("\n\nfirst")


def test_commit_with_parent(repo):
    tree = "b" * 40
    parent = "c" * 40
    digest = create_commit(repo, tree, parent, "Author Name", "second")
    _, body = _body(_read(repo, digest))
    assert f"\nparent parent {parent}\n\nauthor Author Name" in body
    assert body.endswith("\n\nsecond")


def test_header_length_matches_body(repo):
    digest = create_commit(repo, "d" * 40, None, "Author Name", "msg ü")
    header, body = _body(_read(repo, digest))
    assert header == f"commit {len(body.encode('utf-8'))}".encode()


def test_hash_names_stored_content(repo):
    digest = create_commit(repo, "e" * 40, None, "Author Name", "msg")
    assert sha1_hex(_read(repo, digest)) == digest


def test_timestamp_is_utc(repo):
    digest = create_commit(repo, "f" * 40, None, "Author Name", "msg")
    _, body = _body(_read(repo, digest))
    author_line = next(line for line in body.splitlines() if line.startswith("author "))
    assert author_line.endswith("+0000") or author_line.endswith("GMT")