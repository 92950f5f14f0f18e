"""Filesystem access used by the aggregator."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Callable, Iterator

from dirsize.core.errors import EntryNotFoundError

log = logging.getLogger(__name__)

ListingErrorHandler = Callable[[Path, OSError], None]


def stat_entry(path: str | os.PathLike[str]) -> tuple[bool, int]:
    """Return ``(is_directory, byte_length)`` for *path*.

    A symlink given directly is followed. Directories report a length of 0.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise EntryNotFoundError(path, e.strerror or str(e)) from e
    if stat.S_ISDIR(st.st_mode):
        return True, 0
    return False, st.st_size


def list_recursive(
    path: str | os.PathLike[str],
    on_error: ListingErrorHandler | None = None,
) -> Iterator[int]:
    """Yield the size of every regular file below *path*.

    Walks with ``os.scandir`` using an explicit stack. Symlinks are neither
    followed nor counted. When a directory or entry cannot be read the error
    goes to *on_error* and the walk carries on; without a handler it propagates.
    """
    stack: list[str] = [os.fspath(path)]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            if on_error is None:
                raise
            on_error(Path(current), e)
            continue

        for entry in entries:
            try:
                if entry.is_file(follow_symlinks=False):
                    yield entry.stat(follow_symlinks=False).st_size
                elif entry.is_dir(follow_symlinks=False):
                    stack.append(entry.path)
            except OSError as e:
                if on_error is None:
                    raise
                on_error(Path(entry.path), e)


def expand_default(cwd: Path | None = None) -> list[Path]:
    """Return the immediate children of *cwd* (default: the working directory)."""
    base = cwd or Path.cwd()
    return sorted(base.iterdir(), key=lambda p: p.name)
