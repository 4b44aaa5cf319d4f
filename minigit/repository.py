"""Repository layout, content hashing and the staging area."""

from __future__ import annotations

import os
from pathlib import Path

MINIGIT_DIR = ".minigit"
HEAD_FILE = "HEAD.txt"
STAGING_FILE = "staging_area.txt"
INITIAL_HEAD = "NULL"

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1


class MiniGitError(Exception):
    """Raised when a repository operation cannot be carried out."""


def _minigit_dir(root: str | os.PathLike[str]) -> Path:
    return Path(root) / MINIGIT_DIR


def _read_first_line(path: Path) -> str | None:
    """Return the first line of a file without its newline, or None if it cannot be read."""
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            line = handle.readline()
    except OSError:
        return None
    return line[:-1] if line.endswith("\n") else line


def _split_lines(text: str) -> list[str]:
    """Split text on newlines the way line-by-line reading does."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def init(root: str | os.PathLike[str] = ".") -> bool:
    """Create the repository structure; return False if it already exists."""
    base = _minigit_dir(root)
    if base.exists():
        return False
    base.mkdir()
    for sub in ("objects", "commits", "branches"):
        (base / sub).mkdir()
    (base / HEAD_FILE).write_text(INITIAL_HEAD, encoding="utf-8")
    (base / "branches" / "main.txt").write_text("", encoding="utf-8")
    return True


def check_file_exists(path: str | os.PathLike[str]) -> bool:
    """Return whether a file or directory exists at path."""
    return Path(path).exists()


def hash_content(content: str | bytes) -> str:
    """Return the DJB2 hash of content as a decimal string (64-bit, signed bytes)."""
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    digest = _HASH_SEED
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        digest = (digest * 33 + signed) & _HASH_MASK
    return str(digest)


def write_blob(root: str | os.PathLike[str], digest: str, content: str | bytes) -> Path:
    """Store content under its digest in the object store and return the blob path."""
    path = _minigit_dir(root) / "objects" / f"{digest}.txt"
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise MiniGitError(f"cannot write blob {digest}") from exc
    return path


def stage_file(root: str | os.PathLike[str], filename: str, digest: str) -> None:
    """Append a filename and its digest to the staging area."""
    path = _minigit_dir(root) / STAGING_FILE
    try:
        with path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(f"{filename} {digest}\n")
    except OSError as exc:
        raise MiniGitError("cannot write staging area") from exc


def add_file(root: str | os.PathLike[str], filename: str) -> str:
    """Hash a file, store it as a blob, stage it and return its digest."""
    path = Path(filename)
    if not path.is_absolute():
        path = Path(root) / path
    if not check_file_exists(path):
        raise MiniGitError(f"File does not exist: {filename}")
    content = path.read_bytes()
    digest = hash_content(content)
    write_blob(root, digest, content)
    stage_file(root, filename, digest)
    return digest