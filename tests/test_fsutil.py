import pytest

from minigit.fsutil import create_dir, create_file, read_file, write_file


def test_create_dir_makes_nested_directories(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    create_dir(target)
    assert target.is_dir()


def test_create_dir_is_idempotent(tmp_path):
    target = tmp_path / "dir"
    create_dir(target)
    (target / "keep.txt").write_text("kept")
    create_dir(target)
    assert (target / "keep.txt").read_text() == "kept"


def test_create_file_makes_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    create_file(target)
    assert target.is_file()
    assert target.read_bytes() == b""


def test_create_file_keeps_existing_content(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("content")
    create_file(target)
    assert target.read_text() == "content"


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "data.txt"
    write_file(target, "line one\nline two\n")
    assert read_file(target) == "line one\nline two\n"


def test_write_file_overwrites(tmp_path):
    target = tmp_path / "data.txt"
    write_file(target, "first version")
    write_file(target, "second")
    assert read_file(target) == "second"


def test_write_file_accepts_bytes(tmp_path):
    target = tmp_path / "raw.bin"
    write_file(target, b"blob 3\x00abc")
    assert target.read_bytes() == b"blob 3\x00abc"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")