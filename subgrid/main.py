from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import List, Optional

import typer

from subgrid.config import get_settings
from subgrid.domain.models import SortDirection
from subgrid.domain.sample import generate_records, load_records_json, sample_records
from subgrid.pipeline import recompute
from subgrid.reporter import print_frame
from subgrid.table import SubscriptionTable
from subgrid.utils.logging import configure_logging, get_logger
from subgrid.utils.profiler import profile_block

app = typer.Typer(help="Subscription table engine CLI.")
log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"rows_per_page={settings.default_rows_per_page} "
        f"options={settings.rows_per_page_options} | "
        f"sort={settings.default_sort_column} {settings.default_sort_direction}"
    )


@app.command()
def show(
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        "-d",
        exists=True,
        dir_okay=False,
        help="JSON array of subscriptions (defaults to the bundled sample).",
    ),
    query: str = typer.Option("", "--query", "-q", help="Search on name or category."),
    status: List[str] = typer.Option([], "--status", help="Status facet (repeatable)."),
    category: List[str] = typer.Option([], "--category", help="Category facet (repeatable)."),
    sort: Optional[str] = typer.Option(
        None, "--sort", help="Sort column, e.g. price or startDate."
    ),
    descending: Optional[bool] = typer.Option(
        None, "--desc/--asc", help="Sort direction (defaults to settings)."
    ),
    page: int = typer.Option(1, "--page", "-p", help="1-based page number."),
    rows_per_page: Optional[int] = typer.Option(None, "--rows-per-page", "-n"),
    hide: List[str] = typer.Option([], "--hide", help="Column to hide (repeatable)."),
    select: List[int] = typer.Option([], "--select", help="Record id to select (repeatable)."),
    as_json: bool = typer.Option(False, "--json", help="Print the render frame as JSON."),
) -> None:
    """
    Filter, sort, and page a subscription set and render one page.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        records = load_records_json(data) if data else sample_records()
        table = SubscriptionTable(records, settings=settings)

        table.set_query(query)
        for value in status:
            table.toggle_status_facet(value)
        for value in category:
            table.toggle_category_facet(value)
        if sort is not None or descending is not None:
            state = table.state
            direction = state.sort_direction
            if descending is not None:
                direction = SortDirection.DESC if descending else SortDirection.ASC
            table.set_sort(sort if sort is not None else state.sort_column, direction)
        for value in hide:
            table.toggle_column_visible(value)
        if rows_per_page is not None:
            table.set_rows_per_page(rows_per_page)
        table.set_current_page(page)
        for record_id in select:
            table.toggle_selection(record_id)
    except ValueError as exc:
        # InvalidConfiguration, pydantic ValidationError and unknown enum values
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    frame = table.render()
    if as_json:
        typer.echo(json.dumps(frame.to_dict(), indent=2))
    else:
        print_frame(frame, max_links=settings.page_link_count)


@app.command()
def bench(
    rows: Optional[int] = typer.Option(
        None, "--rows", "-r", help="Synthetic records to generate (default from settings)."
    ),
    query: str = typer.Option("premium", "--query", "-q"),
    seed: int = typer.Option(42, "--seed"),
) -> None:
    """
    Time one full recompute over a synthetic record set.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    total_rows = rows or settings.bench_rows

    records = generate_records(total_rows, random.Random(seed))
    table = SubscriptionTable(records, settings=settings)
    table.set_query(query)

    with profile_block("recompute") as stats:
        frame = recompute(table.records, table.state)
    stats.extra.update(
        {"records": frame.total_count, "filtered": frame.filtered_count, "pages": frame.total_pages}
    )
    log.info("Benchmark complete", extra=stats.as_dict())
    typer.echo(json.dumps(stats.as_dict(), indent=2))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
