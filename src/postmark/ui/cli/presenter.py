"""Rich presentation helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich import box
from rich.table import Table

from postmark.core.metadata import DATE_FORMAT, PostMeta
from postmark.macros import BuiltinMacro

from .state import CLIState, get_cli_state


def _build_table(*, title: str | None, columns: Sequence[str]) -> Table:
    """Create a Rich table with the house style."""
    table = Table(title=title or None, box=box.SQUARE, show_edge=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column)
    return table


def metadata_rows(meta: PostMeta) -> list[tuple[str, str]]:
    """Return displayable ``(field, value)`` pairs for post metadata."""
    return [
        ("Title", meta.title),
        ("Name", meta.name),
        ("Author", meta.author),
        ("Author link", meta.author_link),
        ("Date", meta.date.strftime(DATE_FORMAT)),
        ("Tags", " ".join(meta.tags)),
        ("Type", meta.type),
        ("Protected", "yes" if meta.protected else "no"),
    ]


def present_metadata(meta: PostMeta, *, state: CLIState | None = None) -> None:
    """Print the metadata table to stderr so stdout keeps the rendered content."""
    state = state or get_cli_state()
    table = _build_table(title="Metadata", columns=("Field", "Value"))
    for field_name, value in metadata_rows(meta):
        table.add_row(field_name, value or "[dim]-[/dim]")
    state.err_console.print(table)


def present_macros(macros: Iterable[BuiltinMacro], *, state: CLIState | None = None) -> None:
    """Print the built-in macro catalogue."""
    state = state or get_cli_state()
    table = _build_table(title="Built-in macros", columns=("Macro", "Description", "Properties"))
    for entry in macros:
        table.add_row(f"{{{entry.name}}}", entry.description, ", ".join(entry.properties))
    state.console.print(table)


__all__ = ["metadata_rows", "present_macros", "present_metadata"]
