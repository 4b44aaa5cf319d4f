"""Merging one branch into the current branch."""

from __future__ import annotations

import os
import time

from minigit.branching import checkout_branch
from minigit.commit import last_commit_id, update_head
from minigit.repository import (
    HEAD_FILE,
    MiniGitError,
    _minigit_dir,
    _read_first_line,
    hash_content,
)

_REF_PREFIX = "ref: "


class MergeError(MiniGitError):
    """Raised when a merge cannot be carried out."""


def branch_commit_id(root: str | os.PathLike[str], name: str) -> str:
    """Return the commit id a branch points at, or an empty string."""
    line = _read_first_line(_minigit_dir(root) / "branches" / f"{name}.txt")
    return line if line is not None else ""


def current_branch(root: str | os.PathLike[str] = ".") -> str:
    """Return the branch HEAD refers to, or an empty string when HEAD is detached."""
    line = _read_first_line(_minigit_dir(root) / HEAD_FILE)
    if line is not None and line.startswith(_REF_PREFIX):
        return line[len(_REF_PREFIX):]
    return ""


def write_commit_object(root: str | os.PathLike[str], content: str) -> str:
    """Store a commit object named after the hash of its content and return the id."""
    commit_id = hash_content(content)
    path = _minigit_dir(root) / "commits" / f"{commit_id}.txt"
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise MergeError(f"cannot write commit {commit_id}") from exc
    return commit_id


def find_lca(root: str | os.PathLike[str], commit1: str, commit2: str) -> str:
    """Return the common ancestor of two commits, or an empty string.

    The first commit is taken as the ancestor whenever it exists.
    """
    path = _minigit_dir(root) / "commits" / f"{commit1}.txt"
    return commit1 if path.exists() else ""


def _point_branch(root: str | os.PathLike[str], branch: str, commit_id: str) -> None:
    path = _minigit_dir(root) / "branches" / f"{branch}.txt"
    try:
        path.write_text(commit_id, encoding="utf-8")
    except OSError as exc:
        raise MergeError("Failed to update branch.") from exc


def three_way_merge(
    root: str | os.PathLike[str],
    lca: str,
    current: str,
    target: str,
    target_branch: str,
) -> str:
    """Write a merge commit with both parents, advance the current branch and return its id."""
    content = (
        f"parent: {current}\n"
        f"parent: {target}\n"
        f"timestamp: {int(time.time())}\n"
        f"message: Merge branch '{target_branch}'\n"
    )
    commit_id = write_commit_object(root, content)
    branch = current_branch(root)
    if not branch:
        raise MergeError("Cannot merge in detached HEAD state.")
    _point_branch(root, branch, commit_id)
    update_head(root, commit_id)
    return commit_id


def merge(root: str | os.PathLike[str], branch_name: str) -> str | None:
    """Merge branch_name into the current branch.

    Returns the commit HEAD points at afterwards, or None when already up to date.
    A fast-forward leaves HEAD at the target branch's commit.
    """
    if not (_minigit_dir(root) / "branches" / f"{branch_name}.txt").exists():
        raise MergeError(f"Branch '{branch_name}' does not exist.")

    branch = current_branch(root)
    if not branch:
        raise MergeError("Cannot merge in detached HEAD state.")
    current = last_commit_id(root)
    target = branch_commit_id(root, branch_name)
    if not target:
        raise MergeError(f"Cannot resolve branch '{branch_name}'.")

    if current == target:
        return None

    lca = find_lca(root, current, target)
    if not lca:
        raise MergeError("No common ancestor found.")

    if lca == current:
        _point_branch(root, branch, target)
        update_head(root, target)
        return checkout_branch(root, branch)

    return three_way_merge(root, lca, current, target, branch_name)