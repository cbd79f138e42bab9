"""
File-system helpers shared by the patcher.

Files are read and written as UTF-8 with newline translation disabled so
that untouched parts of a patched file keep their exact bytes.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

NON_WHITESPACE = re.compile(r"\S")


def path_exists(path: str | Path) -> bool:
    return Path(path).exists()


def read_text(path: str | Path) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: str | Path, content: str) -> None:
    """Override or create ``path``, creating missing parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def is_blank(content: str) -> bool:
    return NON_WHITESPACE.search(content) is None


def remove_file(path: str | Path) -> bool:
    p = Path(path)
    if not p.exists():
        return False
    p.unlink()
    return True


def copy_file(source: str | Path, destination: str | Path) -> Path:
    dst = Path(destination)
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dst)
    return dst
