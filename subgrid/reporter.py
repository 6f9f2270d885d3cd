from __future__ import annotations

from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from subgrid.domain.models import COLUMNS, ColumnId, SortDirection
from subgrid.pipeline import RenderFrame
from subgrid.stages.pagination import page_links

_LABELS: Dict[ColumnId, str] = {c.uid: c.label for c in COLUMNS}

_STATUS_STYLES = {
    "Active": "green",
    "Cancelled": "red",
    "Expired": "yellow",
}


def _header(frame: RenderFrame, column: ColumnId) -> str:
    label = _LABELS[column]
    if column == frame.sort_column:
        arrow = "▲" if frame.sort_direction is SortDirection.ASC else "▼"
        return f"{label} {arrow}"
    return label


def _pagination_caption(frame: RenderFrame, max_links: int) -> str:
    links = page_links(frame.total_pages, max_links)
    parts = [f"[{n}]" if n == frame.current_page else str(n) for n in links.leading]
    if links.has_gap:
        parts.append("…")
        parts.append(f"[{links.last}]" if links.last == frame.current_page else str(links.last))
    return (
        f"{frame.selection_summary} │ rows per page: {frame.rows_per_page} │ "
        f"page {frame.current_page} of {frame.total_pages} │ ‹ {' '.join(parts)} ›"
    )


def build_table(frame: RenderFrame, max_links: int = 5, title: Optional[str] = None) -> Table:
    """
    Build a rich table for one render frame.

    The first column is the selection checkbox; its header reflects whether
    every row on the visible page is selected.
    """
    table = Table(
        title=title or "Subscriptions",
        box=box.ROUNDED,
        caption=_pagination_caption(frame, max_links),
    )

    table.add_column("☑" if frame.all_visible_selected else "☐", justify="center", no_wrap=True)
    for column in frame.visible_columns:
        justify = "right" if column is ColumnId.PRICE else "left"
        style = "cyan" if column is ColumnId.NAME else None
        table.add_column(_header(frame, column), justify=justify, style=style)

    if not frame.rows:
        if frame.visible_columns:
            filler = [""] * (len(frame.visible_columns) - 1)
            table.add_row("", Text("No subscriptions found", style="dim"), *filler)
        return table

    for record, cells in zip(frame.rows, frame.projected_rows):
        rendered = []
        for column in frame.visible_columns:
            value = cells[column.value]
            if column is ColumnId.STATUS:
                rendered.append(Text(value, style=_STATUS_STYLES.get(value, "")))
            else:
                rendered.append(value)
        table.add_row("☑" if frame.is_selected(record.id) else "☐", *rendered)

    return table


def print_frame(frame: RenderFrame, max_links: int = 5, console: Optional[Console] = None) -> None:
    """Render a frame to the terminal."""
    console = console or Console()
    console.print(build_table(frame, max_links))
