# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Rich rendering of `ParsedArgs` for interactive shells and debugging."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argline.console import console as default_console
from argline.parsed_args import ParsedArgs


def build_table(parsed: ParsedArgs, title: str | None = None) -> Table:
    """Build a table with one row per positional, keyword and flag argument."""
    if title is not None:
        title = escape(title)
    table = Table(title=title, box=box.SIMPLE, show_header=True, expand=False)
    table.add_column("Kind", style="bold cyan")
    table.add_column("Name")
    table.add_column("Value", style="green")

    for index, arg in enumerate(parsed.positional_args):
        table.add_row("positional", str(index), escape(arg))
    for name, value in parsed.keyword_args.items():
        table.add_row("keyword", f"--{escape(name)}", escape(value))
    for flag, count in parsed.flag_counts.items():
        table.add_row("flag", f"-{escape(flag)}", str(count))
    return table


def render_parsed_args(
    parsed: ParsedArgs,
    title: str | None = None,
    console: Console | None = None,
) -> Table:
    """Print `parsed` as a Rich table and return the table."""
    table = build_table(parsed, title=title)
    (console or default_console).print(table)
    return table
