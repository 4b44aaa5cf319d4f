"""Commits, HEAD handling and history."""

from __future__ import annotations

import os
import random
import time
from collections.abc import Iterator

from minigit.repository import (
    HEAD_FILE,
    MiniGitError,
    _minigit_dir,
    _read_first_line,
    _split_lines,
)

LOG_SEPARATOR = "------------"
_PARENT_MARKER = "Parent: "


def current_time() -> str:
    """Return the current local time in ctime form, newline included."""
    return time.ctime() + "\n"


def last_commit_id(root: str | os.PathLike[str] = ".") -> str:
    """Return the commit id stored in HEAD, or an empty string if there is none."""
    line = _read_first_line(_minigit_dir(root) / HEAD_FILE)
    return line if line is not None else ""


def update_head(root: str | os.PathLike[str], commit_id: str) -> None:
    """Point HEAD at commit_id."""
    try:
        (_minigit_dir(root) / HEAD_FILE).write_text(commit_id, encoding="utf-8")
    except OSError as exc:
        raise MiniGitError("cannot update HEAD") from exc


def make_commit(
    root: str | os.PathLike[str], message: str, rng: random.Random | None = None
) -> str:
    """Record a commit whose parent is the current HEAD and return its id."""
    chooser = rng if rng is not None else random
    parent = last_commit_id(root)
    commit_id = f"commit_{chooser.randrange(10000)}"
    path = _minigit_dir(root) / "commits" / f"{commit_id}.txt"
    body = (
        f"ID: {commit_id}\n"
        f"Message: {message}\n"
        f"Time: {current_time()}"
        f"Parent: {parent}\n"
    )
    try:
        path.write_text(body, encoding="utf-8")
    except OSError as exc:
        raise MiniGitError("error creating commit file.") from exc
    update_head(root, commit_id)
    return commit_id


def log_lines(root: str | os.PathLike[str] = ".") -> Iterator[str]:
    """Yield the lines of every commit from HEAD back through its parents."""
    commits = _minigit_dir(root) / "commits"
    current = last_commit_id(root)
    seen: set[str] = set()
    while current and current not in seen:
        seen.add(current)
        try:
            text = (commits / f"{current}.txt").read_text(encoding="utf-8")
        except OSError:
            return
        parent = ""
        for line in _split_lines(text):
            yield line
            if _PARENT_MARKER in line:
                parent = line[len(_PARENT_MARKER):]
        yield LOG_SEPARATOR
        current = parent