"""
Input traversal: root paths -> (path, stat, bytes) entries.

Rules:
- directories are descended into (dot-named ones too) but never yielded
- files whose basename starts with "." are skipped, as are special files
- entries are visited in name order, so traversal is deterministic
- a file that cannot be read is dropped; the walk goes on
- a directory that cannot be listed ends the walk for that root (WalkError)
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

ReadErrorFn = Callable[[str, OSError], None]


class WalkError(OSError):
    pass


@dataclass(frozen=True)
class WalkEntry:
    path: str
    info: os.stat_result
    data: bytes


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def walk(root: str, on_error: Optional[ReadErrorFn] = None) -> Iterator[WalkEntry]:
    try:
        info = os.lstat(root)
    except OSError as e:
        raise WalkError(e.errno, f"cannot stat {root}: {e.strerror}", root) from e
    yield from _visit(root, info, on_error)


def _visit(path: str, info: os.stat_result, on_error: Optional[ReadErrorFn]) -> Iterator[WalkEntry]:
    if stat.S_ISDIR(info.st_mode):
        try:
            with os.scandir(path) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise WalkError(e.errno, f"cannot list {path}: {e.strerror}", path) from e
        for child in children:
            child_path = os.path.normpath(os.path.join(path, child.name))
            try:
                child_info = child.stat(follow_symlinks=False)
            except OSError as e:
                if on_error is not None:
                    on_error(child_path, e)
                continue
            yield from _visit(child_path, child_info, on_error)
        return

    if os.path.basename(path).startswith("."):
        return
    # fifos, sockets and devices would block or never end
    if not (stat.S_ISREG(info.st_mode) or stat.S_ISLNK(info.st_mode)):
        return
    try:
        data = _read(path)
    except OSError as e:
        if on_error is not None:
            on_error(path, e)
        return
    yield WalkEntry(path, info, data)
