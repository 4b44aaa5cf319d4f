import re

import pytest

from minigit.commit import (
    LOG_SEPARATOR,
    current_time,
    last_commit_id,
    log_lines,
    make_commit,
    update_head,
)
from minigit.repository import MiniGitError, init


class _Sequence:
    def __init__(self, *values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert value < stop
        return value


@pytest.fixture
def repo(tmp_path):
    init(tmp_path)
    return tmp_path


def test_current_time_has_ctime_shape():
    stamp = current_time()
    assert stamp.endswith("\n")
    assert re.fullmatch(r"\w{3} \w{3} [ \d]\d \d\d:\d\d:\d\d \d{4}\n", stamp)


def test_last_commit_id_after_init(repo):
    assert last_commit_id(repo) == "NULL"


def test_last_commit_id_without_repo(tmp_path):
    assert last_commit_id(tmp_path) == ""


def test_update_head_roundtrip(repo):
    update_head(repo, "commit_42")
    assert last_commit_id(repo) == "commit_42"


def test_make_commit_writes_file_and_moves_head(repo):
    commit_id = make_commit(repo, "first change", _Sequence(7))
    assert commit_id == "commit_7"
    assert last_commit_id(repo) == "commit_7"
    lines = (repo / ".minigit" / "commits" / "commit_7.txt").read_text().split("\n")
    assert lines[0] == "ID: commit_7"
    assert lines[1] == "Message: first change"
    assert lines[2].startswith("Time: ")
    assert lines[3] == "Parent: NULL"


def test_make_commit_default_rng_id_range(repo):
    commit_id = make_commit(repo, "msg")
    assert commit_id.startswith("commit_")
    assert 0 <= int(commit_id[len("commit_"):]) < 10000


def test_make_commit_without_repo_raises(tmp_path):
    with pytest.raises(MiniGitError):
        make_commit(tmp_path, "msg", _Sequence(1))


def test_log_on_fresh_repo_is_empty(repo):
    assert list(log_lines(repo)) == []


def test_log_walks_parents_newest_first(repo):
    make_commit(repo, "one", _Sequence(1))
    make_commit(repo, "two", _Sequence(2))
    lines = list(log_lines(repo))
    ids = [line for line in lines if line.startswith("ID: ")]
    assert ids == ["ID: commit_2", "ID: commit_1"]
    assert lines.count(LOG_SEPARATOR) == 2
    assert lines[-1] == LOG_SEPARATOR
    assert "Parent: commit_1" in lines


def test_log_stops_on_self_parent(repo):
    (repo / ".minigit" / "commits" / "c.txt").write_text("ID: c\nParent: c\n")
    update_head(repo, "c")
    assert list(log_lines(repo)) == ["ID: c", "Parent: c", LOG_SEPARATOR]