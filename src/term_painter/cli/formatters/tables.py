"""Rich tables for structured data display."""

from typing import Any

from rich.table import Table

from term_painter.cli.formatters import console


def create_key_value_table(
    data: dict[str, Any],
    title: str | None = None,
    *,
    key_style: str = "cyan",
    value_style: str = "",
) -> Table:
    """Create a two-column table for key-value data.

    Args:
        data: Dictionary of key-value pairs to display.
        title: Optional table title.
        key_style: Style for the key column.
        value_style: Style for the value column.

    Returns:
        Rich Table populated with the key-value data.
    """
    table = Table(
        title=title,
        show_header=False,
        border_style="blue",
        row_styles=["", "dim"],
    )
    table.add_column("Key", style=key_style, no_wrap=True)
    table.add_column("Value", style=value_style)

    for key, value in data.items():
        table.add_row(str(key), str(value))

    return table


def print_table(table: Table) -> None:
    """Print a Rich Table to the shared console."""
    console.print(table)


__all__ = ["create_key_value_table", "print_table"]
