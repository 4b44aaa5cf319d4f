"""Branch creation and checkout of branches or commits."""

from __future__ import annotations

import os

from minigit.commit import last_commit_id, update_head
from minigit.repository import MiniGitError, _minigit_dir, _read_first_line


class BranchNotFoundError(MiniGitError):
    """Raised when a named branch does not exist."""


class CommitNotFoundError(MiniGitError):
    """Raised when a commit id does not exist."""


def create_branch(root: str | os.PathLike[str], name: str) -> str:
    """Create a branch at the current HEAD commit and return that commit id."""
    commit_id = last_commit_id(root)
    path = _minigit_dir(root) / "branches" / f"{name}.txt"
    try:
        path.write_text(commit_id, encoding="utf-8")
    except OSError as exc:
        raise MiniGitError("Failed to create branch.") from exc
    return commit_id


def checkout_branch(root: str | os.PathLike[str], name: str) -> str:
    """Point HEAD at the commit of branch name and return that commit id."""
    commit_id = _read_first_line(_minigit_dir(root) / "branches" / f"{name}.txt")
    if commit_id is None:
        raise BranchNotFoundError(f"Branch not found: {name}")
    update_head(root, commit_id)
    return commit_id


def checkout_commit(root: str | os.PathLike[str], commit_id: str) -> str:
    """Point HEAD at an existing commit and return its id."""
    path = _minigit_dir(root) / "commits" / f"{commit_id}.txt"
    if not path.is_file():
        raise CommitNotFoundError(f"Commit not found: {commit_id}")
    update_head(root, commit_id)
    return commit_id