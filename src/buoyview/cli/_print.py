"""``--print`` output — the feed as a rich table on stdout."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from buoyview.core.feeds import Feed
from buoyview.core.table import Row


def build_table(feed: Feed, rows: Sequence[Row]) -> Table:
    table = Table(title=feed.title, header_style="bold", show_lines=False)
    for column in feed.columns:
        table.add_column(column, no_wrap=True)
    for row in rows:
        # Feed values are plain text; "[" must not start markup.
        table.add_row(*(Text(cell) for cell in row))
    return table


def cmd_print(feed: Feed, rows: Sequence[Row], console: Console) -> None:
    console.print(build_table(feed, rows))
    console.print(f"[dim]{len(rows)} rows[/dim]")
