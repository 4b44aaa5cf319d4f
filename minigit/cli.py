"""Interactive command loop for the repository."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from minigit.branching import (
    BranchNotFoundError,
    CommitNotFoundError,
    checkout_branch,
    checkout_commit,
    create_branch,
)
from minigit.commit import log_lines, make_commit
from minigit.merge import branch_commit_id, merge
from minigit.repository import MiniGitError, add_file, init

PROMPT = "mingit > "


class _Tokens:
    """Whitespace-delimited reader over a text stream, read line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""

    def _skip_whitespace(self) -> bool:
        while True:
            self._line = self._line.lstrip()
            if self._line:
                return True
            line = self._stream.readline()
            if not line:
                return False
            self._line = line

    def word(self) -> str | None:
        """Return the next whitespace-delimited word, or None at end of input."""
        if not self._skip_whitespace():
            return None
        parts = self._line.split(maxsplit=1)
        self._line = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def rest_of_line(self) -> str | None:
        """Skip whitespace, then return the remainder of the current line."""
        if not self._skip_whitespace():
            return None
        text = self._line.rstrip("\r\n")
        self._line = ""
        return text


def _announce_init(root: Path) -> None:
    if init(root):
        print("MiniGit is initialized.")
    else:
        print("MiniGit already initialized.")


def _do_add(root: Path, filename: str) -> None:
    try:
        add_file(root, filename)
    except MiniGitError as exc:
        print(exc, file=sys.stderr)
        return
    print(f"File added and staged: {filename}")


def _do_commit(root: Path, message: str) -> None:
    try:
        commit_id = make_commit(root, message)
    except MiniGitError:
        print("error creating commit file.")
        return
    print(f"commit saved as {commit_id}")


def _do_branch(root: Path, name: str) -> None:
    try:
        commit_id = create_branch(root, name)
    except MiniGitError:
        print("Failed to create branch.")
        return
    print(f"Branch '{name}' created at commit {commit_id}")


def _do_checkout(root: Path, target: str) -> None:
    if (root / ".minigit" / "branches" / f"{target}.txt").exists():
        try:
            commit_id = checkout_branch(root, target)
        except BranchNotFoundError:
            print("Branch not found.")
            return
        print(f"Checked out branch '{target}' at commit {commit_id}")
        return
    try:
        checkout_commit(root, target)
    except CommitNotFoundError:
        print("Commit not found.")
        return
    print(f"Checked out to commit {target}")


def _do_merge(root: Path, branch_name: str) -> None:
    target = branch_commit_id(root, branch_name)
    try:
        result = merge(root, branch_name)
    except MiniGitError as exc:
        print(exc)
        return
    if result is None:
        print("Already up to date.")
    elif result == target:
        print("Fast-forward merge.")
        print(f"Checked out branch '{branch_name}' at commit {result}")
    else:
        print(f"Merge commit created: {result}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command loop, reading commands from standard input."""
    parser = argparse.ArgumentParser(prog="minigit", description="A tiny version control tool.")
    parser.add_argument(
        "-C", "--directory", default=".", help="repository root (default: current directory)"
    )
    args = parser.parse_args(argv)
    root = Path(args.directory)

    _announce_init(root)
    tokens = _Tokens(sys.stdin)
    handlers = {
        "add": (_Tokens.word, _do_add),
        "commit": (_Tokens.rest_of_line, _do_commit),
        "branch": (_Tokens.word, _do_branch),
        "checkout": (_Tokens.word, _do_checkout),
        "merge": (_Tokens.word, _do_merge),
    }

    print(PROMPT, end="", flush=True)
    while (command := tokens.word()) is not None:
        if command == "init":
            _announce_init(root)
        elif command == "log":
            for line in log_lines(root):
                print(line)
        elif command in handlers:
            read_argument, handler = handlers[command]
            argument = read_argument(tokens)
            if argument is None:
                break
            handler(root, argument)
        else:
            print("Unknown command.")
        print(PROMPT, end="", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())