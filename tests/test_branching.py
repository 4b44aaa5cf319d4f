import pytest

from minigit.branching import (
    BranchNotFoundError,
    CommitNotFoundError,
    checkout_branch,
    checkout_commit,
    create_branch,
)
from minigit.commit import last_commit_id, make_commit, update_head
from minigit.repository import MiniGitError, init


class _Sequence:
    def __init__(self, *values):
        self._values = list(values)

    def randrange(self, stop):
        return self._values.pop(0)


@pytest.fixture
def repo(tmp_path):
    init(tmp_path)
    return tmp_path


def test_create_branch_points_at_head(repo):
    make_commit(repo, "base", _Sequence(5))
    assert create_branch(repo, "feature") == "commit_5"
    assert (repo / ".minigit" / "branches" / "feature.txt").read_text() == "commit_5"


def test_create_branch_without_repo_raises(tmp_path):
    with pytest.raises(MiniGitError):
        create_branch(tmp_path, "feature")


def test_checkout_branch_moves_head(repo):
    make_commit(repo, "base", _Sequence(5))
    create_branch(repo, "feature")
    make_commit(repo, "next", _Sequence(6))
    assert checkout_branch(repo, "feature") == "commit_5"
    assert last_commit_id(repo) == "commit_5"


def test_checkout_empty_main_branch_clears_head(repo):
    update_head(repo, "commit_9")
    assert checkout_branch(repo, "main") == ""
    assert last_commit_id(repo) == ""


def test_checkout_missing_branch_raises(repo):
    with pytest.raises(BranchNotFoundError):
        checkout_branch(repo, "nope")
    assert last_commit_id(repo) == "NULL"


def test_checkout_commit_moves_head(repo):
    make_commit(repo, "a", _Sequence(1))
    make_commit(repo, "b", _Sequence(2))
    assert checkout_commit(repo, "commit_1") == "commit_1"
    assert last_commit_id(repo) == "commit_1"


def test_checkout_missing_commit_raises(repo):
    with pytest.raises(CommitNotFoundError):
        checkout_commit(repo, "commit_404")
    assert last_commit_id(repo) == "NULL"


def test_missing_branch_is_caught_as_minigit_error(repo):
    with pytest.raises(MiniGitError):
        checkout_branch(repo, "nope")
    assert last_commit_id(repo) == "NULL"


def test_missing_commit_is_caught_as_minigit_error(repo):
    with pytest.raises(MiniGitError):
        checkout_commit(repo, "commit_404")
    assert last_commit_id(repo) == "NULL"