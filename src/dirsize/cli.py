"""CLI interface for dirsize."""

from __future__ import annotations

import json
import logging
import sys

import click

from dirsize import fs
from dirsize.core.aggregator import Aggregator
from dirsize.core.collector import Collector, SortDirection, SortProperty
from dirsize.core.errors import InvalidArgumentError
from dirsize.core.scale import format_size
from dirsize.models.collect_result import CollectResult, ListingWarning
from dirsize.models.size_result import ScaleUnit
from dirsize.settings import Settings

log = logging.getLogger(__name__)

UNIT_COLORS = {
    ScaleUnit.KB: "green",
    ScaleUnit.MB: "yellow",
    ScaleUnit.GB: "red",
}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _render_table(collected: CollectResult) -> None:
    rows = [(r.kind.value, r.name, format_size(r.scaled_value, r.scale_unit), r.scale_unit) for r in collected.results]
    type_w = max([len("Type")] + [len(row[0]) for row in rows])
    name_w = max([len("Name")] + [len(row[1]) for row in rows])
    size_w = max([len("Size")] + [len(row[2]) for row in rows])

    click.echo(f"{'Type':{type_w}s}  {'Name':{name_w}s}  {'Size':>{size_w}s}")
    click.echo(f"{'-' * type_w}  {'-' * name_w}  {'-' * size_w}")
    for kind, name, size, unit in rows:
        colored = click.style(size.rjust(size_w), fg=UNIT_COLORS[unit])
        click.echo(f"{kind:{type_w}s}  {name:{name_w}s}  {colored}")


def _to_json(collected: CollectResult) -> dict:
    return {
        "results": [
            {
                "type": r.kind.value,
                "name": r.name,
                "path": str(r.path),
                "byte_size": r.byte_size,
                "scaled_value": str(r.scaled_value),
                "scale_unit": r.scale_unit.value,
            }
            for r in collected.results
        ],
        "errors": [{"entry": e.entry, "kind": e.kind, "message": e.message} for e in collected.errors],
        "warnings": [{"path": str(w.path), "entry": w.entry, "message": w.message} for w in collected.warnings],
    }


@click.command()
@click.argument("paths", nargs=-1)
@click.option("--sort-by", "-s", default=None, help="Sort by 'name' or 'size' (default: size)")
@click.option("--ascending", "-a", is_flag=True, help="Sort in ascending order (default)")
@click.option("--descending", "-d", is_flag=True, help="Sort in descending order")
@click.option("--strict", is_flag=True, help="Fail an entry instead of skipping unreadable subdirectories")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(
    paths: tuple[str, ...],
    sort_by: str | None,
    ascending: bool,
    descending: bool,
    strict: bool,
    as_json: bool,
    verbose: int,
) -> None:
    """Show the disk usage of files and directories.

    With no PATHS (or a single '*'), every entry in the current directory
    is measured.
    """
    _setup_logging(verbose)
    settings = Settings()

    if ascending and descending:
        raise click.UsageError("--ascending and --descending are mutually exclusive")
    if not ascending and not descending:
        try:
            default_direction = SortDirection.parse(settings.get("sort.direction"))
        except InvalidArgumentError as e:
            log.warning("Ignoring setting 'sort.direction': %s", e)
            default_direction = SortDirection.ASCENDING
        descending = default_direction is SortDirection.DESCENDING

    try:
        prop = SortProperty.parse(sort_by or settings.get("sort.property"))
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), param_hint="'--sort-by'") from e

    tolerate = not strict and settings.get_bool("listing.tolerate_errors")

    if not paths or paths == ("*",):
        entries: list = fs.expand_default()
    else:
        entries = list(paths)

    def on_progress(name: str, percent: float) -> None:
        if verbose and not as_json:
            click.echo(f"[{percent:5.1f}%] {name}", err=True)

    def on_warning(warning: ListingWarning) -> None:
        if not as_json:
            click.echo(click.style(f"warning: skipped {warning.path}: {warning.message}", fg="yellow"), err=True)

    collector = Collector(Aggregator(tolerate_listing_errors=tolerate))
    collected = collector.collect(
        entries,
        sort_by=prop,
        ascending=ascending,
        descending=descending,
        on_progress=on_progress,
        on_warning=on_warning,
    )

    if as_json:
        click.echo(json.dumps(_to_json(collected), indent=2))
    else:
        for error in collected.errors:
            click.echo(f"{click.style('error:', fg='red')} {error.message}", err=True)
        if collected.results:
            _render_table(collected)

    if collected.errors:
        sys.exit(1)
