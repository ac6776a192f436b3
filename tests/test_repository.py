import pytest

from minigit.repository import Repository, is_git_repo


def test_init_creates_layout(tmp_path):
    repo = Repository.init(tmp_path)
    assert repo.path == str(tmp_path)
    for sub in ("objects/info", "objects/pack", "refs/heads", "refs/tags",
                "refs/remotes", "hooks", "info", "logs/refs"):
        assert (tmp_path / ".git" / sub).is_dir()


def test_init_writes_head(tmp_path):
    Repository.init(tmp_path)
    assert (tmp_path / ".git" / "HEAD").read_text() == "ref: refs/heads/master\n"


def test_init_writes_description_and_config(tmp_path):
    Repository.init(tmp_path)
    assert (tmp_path / ".git" / "description").read_text() == "Unnamed repository\n"
    config = (tmp_path / ".git" / "config").read_text()
    assert config.startswith("[core]\n")
    assert "\tbare = false\n" in config
    assert (tmp_path / ".git" / "info" / "exclude").is_file()


def test_init_twice_fails(tmp_path):
    Repository.init(tmp_path)
    with pytest.raises(FileExistsError):
        Repository.init(tmp_path)


def test_init_in_missing_directory_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        Repository.init(tmp_path / "absent")


def test_is_git_repo(tmp_path):
    assert is_git_repo(tmp_path) is False
    Repository.init(tmp_path)
    assert is_git_repo(tmp_path) is True


def test_open_keeps_path(tmp_path):
    assert Repository.open(tmp_path) == Repository(str(tmp_path))