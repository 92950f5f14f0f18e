"""Measures the size of a single file or directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from dirsize import fs
from dirsize.core.errors import ListingError
from dirsize.core.scale import scale
from dirsize.models.collect_result import ListingWarning
from dirsize.models.size_result import EntryKind, SizeResult

log = logging.getLogger(__name__)

StatFunc = Callable[[Path], tuple[bool, int]]
ListFunc = Callable[[Path, Callable[[Path, OSError], None]], Iterable[int]]
WarningCallback = Callable[[ListingWarning], None]


def entry_name(path: Path) -> str:
    """Base name of *path*; ``.`` and ``..`` resolve to the real directory name."""
    if path.name and path.name not in (".", ".."):
        return path.name
    return path.resolve().name or str(path)


class Aggregator:
    """Computes byte totals for files and directory trees.

    The filesystem is reached only through *stat_entry* and *list_recursive*,
    which default to the implementations in :mod:`dirsize.fs`.

    Args:
        stat_entry: Returns ``(is_directory, byte_length)`` or raises
            ``EntryNotFoundError``.
        list_recursive: Yields file sizes below a directory, reporting
            unreadable subtrees to the handler it is given.
        tolerate_listing_errors: If True, an unreadable subtree counts as
            0 bytes and is reported as a warning. If False, it fails the
            whole entry with ``ListingError``.
    """

    def __init__(
        self,
        stat_entry: StatFunc = fs.stat_entry,
        list_recursive: ListFunc = fs.list_recursive,
        *,
        tolerate_listing_errors: bool = True,
    ) -> None:
        self._stat_entry = stat_entry
        self._list_recursive = list_recursive
        self.tolerate_listing_errors = tolerate_listing_errors

    def measure(
        self,
        entry: str | os.PathLike[str],
        on_warning: WarningCallback | None = None,
    ) -> SizeResult:
        """Measure one entry.

        Raises:
            EntryNotFoundError: The entry does not exist or cannot be stat'ed.
            ListingError: A subtree could not be read and errors are not tolerated.
        """
        path = Path(entry)
        is_dir, length = self._stat_entry(path)

        if is_dir:
            kind = EntryKind.DIRECTORY
            byte_size = self._directory_size(path, on_warning)
        else:
            kind = EntryKind.FILE
            byte_size = length

        value, unit = scale(byte_size)
        log.debug("Measured %s: %d bytes", path, byte_size)
        return SizeResult(
            kind=kind,
            name=entry_name(path),
            path=path,
            byte_size=byte_size,
            scaled_value=value,
            scale_unit=unit,
        )

    def _directory_size(self, path: Path, on_warning: WarningCallback | None) -> int:
        def _on_error(subtree: Path, exc: OSError) -> None:
            reason = exc.strerror or str(exc)
            if not self.tolerate_listing_errors:
                raise ListingError(subtree, reason) from exc
            log.info("Skipping unreadable %s while measuring %s: %s", subtree, path, reason)
            if on_warning:
                on_warning(ListingWarning(path=subtree, entry=str(path), message=reason))

        # sum() of nothing is 0, which covers empty directories
        return sum(self._list_recursive(path, _on_error))
