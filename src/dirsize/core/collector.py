"""Measures a list of entries and sorts the results."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator

from dirsize.core.aggregator import Aggregator, WarningCallback, entry_name
from dirsize.core.errors import EntryNotFoundError, InvalidArgumentError, ListingError
from dirsize.models.collect_result import CollectResult, EntryError, ListingWarning
from dirsize.models.size_result import SizeResult

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str, float], None]  # (entry_name, percent_complete)

_EXHAUSTED = object()


class SortProperty(str, Enum):
    NAME = "name"
    SIZE = "size"

    @classmethod
    def parse(cls, text: str | SortProperty) -> SortProperty:
        """Parse a property name, ignoring case."""
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise InvalidArgumentError(f"Unknown sort property '{text}' (expected one of: {choices})") from None


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, text: str | SortDirection) -> SortDirection:
        """Parse a direction name, ignoring case."""
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise InvalidArgumentError(f"Unknown sort direction '{text}' (expected one of: {choices})") from None


_SORT_KEYS: dict[SortProperty, Callable[[SizeResult], Any]] = {
    SortProperty.NAME: lambda r: r.name.casefold(),
    SortProperty.SIZE: lambda r: r.byte_size,
}


def resolve_direction(ascending: bool = False, descending: bool = False) -> SortDirection:
    """Turn the two mutually exclusive flags into a direction; ascending by default."""
    if ascending and descending:
        raise InvalidArgumentError("Ascending and Descending cannot be used together")
    return SortDirection.DESCENDING if descending else SortDirection.ASCENDING


def flatten(entries: Any) -> Iterator[Any]:
    """Yield leaf entries of an arbitrarily nested list, depth-first, left to right.

    Strings, bytes and path objects are leaves; lists and tuples are expanded.
    Uses a stack of iterators, so nesting depth is not bounded by recursion.
    """
    if isinstance(entries, (str, bytes, os.PathLike)):
        yield entries
        return
    stack: list[Iterator[Any]] = [iter(entries)]
    while stack:
        item = next(stack[-1], _EXHAUSTED)
        if item is _EXHAUSTED:
            stack.pop()
        elif isinstance(item, (list, tuple)):
            stack.append(iter(item))
        else:
            yield item


def sort_results(
    results: Iterable[SizeResult],
    sort_by: SortProperty = SortProperty.SIZE,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[SizeResult]:
    """Return *results* sorted by name or byte size.

    The sort is stable in both directions, so equal keys keep their input order.
    """
    key = _SORT_KEYS[SortProperty.parse(sort_by)]
    reverse = SortDirection.parse(direction) is SortDirection.DESCENDING
    return sorted(results, key=key, reverse=reverse)


class Collector:
    """Drives the aggregator over a list of entries, one at a time."""

    def __init__(self, aggregator: Aggregator | None = None) -> None:
        self.aggregator = aggregator or Aggregator()

    def collect(
        self,
        entries: Any,
        sort_by: SortProperty | str = SortProperty.SIZE,
        ascending: bool = False,
        descending: bool = False,
        on_progress: ProgressCallback | None = None,
        on_warning: WarningCallback | None = None,
    ) -> CollectResult:
        """Measure every leaf entry and return the sorted results.

        Entries that cannot be measured end up in ``CollectResult.errors``;
        the rest are still measured. Skipped subtrees end up in
        ``CollectResult.warnings``.

        Args:
            entries: A path or an arbitrarily nested list of paths.
            sort_by: ``SortProperty`` or its name in any case.
            ascending: Sort ascending (the default when neither flag is set).
            descending: Sort descending.
            on_progress: Called with (entry name, percent complete) before each
                entry and with 100.0 once all are done.
            on_warning: Called for every skipped subtree.

        Raises:
            InvalidArgumentError: Both directions were requested, or the sort
                property is unknown. Nothing has been measured at that point.
        """
        direction = resolve_direction(ascending, descending)
        prop = SortProperty.parse(sort_by)
        leaves = list(flatten(entries))
        collected = CollectResult()

        def _on_warning(warning: ListingWarning) -> None:
            collected.warnings.append(warning)
            if on_warning:
                on_warning(warning)

        measured: list[SizeResult] = []
        total = len(leaves)
        name = ""
        for index, leaf in enumerate(leaves):
            entry = os.fsdecode(leaf)
            name = entry_name(Path(entry))
            if on_progress:
                on_progress(name, index * 100 / total)
            try:
                measured.append(self.aggregator.measure(entry, on_warning=_on_warning))
            except EntryNotFoundError as e:
                log.info("%s", e)
                collected.errors.append(EntryError(entry=entry, kind="not_found", message=str(e)))
            except ListingError as e:
                log.info("%s", e)
                collected.errors.append(EntryError(entry=entry, kind="permission_denied", message=str(e)))

        if on_progress and total:
            on_progress(name, 100.0)

        collected.results = sort_results(measured, prop, direction)
        log.info(
            "Measured %d of %d entries (%d bytes, %d skipped subtrees)",
            len(collected.results),
            total,
            collected.total_bytes,
            len(collected.warnings),
        )
        return collected
