"""Shared utility functions for cd-engine.

Provides the name helpers used to derive component identifiers from a
human title, plus Rich-based console reporting.  Everything the CLI prints
goes through the two module-level consoles so tests can capture output;
both soft-wrap, so long paths are never split by inserted newlines.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Convert a component title to its directory/file slug.

    The title is lowercased and every run of whitespace becomes a single
    hyphen.  Nothing else is touched, so applying ``slugify`` to its own
    output returns the same value.

    Examples::

        slugify("Free Zone")        -> "free-zone"
        slugify("Order   History")  -> "order-history"
    """
    return _WHITESPACE_RUN.sub("-", title).lower()


def to_pascal(slug: str) -> str:
    """Convert ``free-zone`` to ``FreeZone``.

    Empty segments (from leading, trailing or doubled hyphens) are dropped.
    """
    return "".join(part[:1].upper() + part[1:] for part in slug.split("-") if part)


def split_columns(raw: str | None) -> list[str]:
    """Split a comma-separated column list, trimming each name.

    Blank entries are dropped: ``"Name, ,Age"`` -> ``["Name", "Age"]``.
    """
    if not raw:
        return []
    return [col.strip() for col in raw.split(",") if col.strip()]


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")
