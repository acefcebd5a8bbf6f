"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table

# Keys Nautobot uses to label nested objects, most specific first
_LABEL_KEYS = ("display", "label", "name", "value", "id")


def cell(value: Any) -> str:
    """Render one value for a table cell.

    Nested objects (status, region, tenant) show their label instead of the
    whole dict.
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        for key in _LABEL_KEYS:
            if value.get(key) is not None:
                return str(value[key])
        return ""
    if isinstance(value, list):
        return ", ".join(cell(v) for v in value)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell(value) for value in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a record as a two-column key/value table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, cell(value))
    return table
