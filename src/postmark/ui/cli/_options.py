"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"

PostPathArgument = Annotated[
    Path,
    typer.Argument(
        metavar="POST",
        help="Post file: a ++++ delimited metadata block followed by the content.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file with render settings (allow_html, disabled, macros, ...).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=RENDERING_PANEL,
    ),
]

AllowHtmlOption = Annotated[
    bool | None,
    typer.Option(
        "--allow-html/--no-allow-html",
        help="Accept raw HTML in the post content (overrides the settings file).",
        show_default=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

MacroOption = Annotated[
    list[str] | None,
    typer.Option(
        "--macro",
        "-m",
        help="Enable a built-in macro (repeatable). See `postmark macros`.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the rendered content to this file instead of stdout.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

MetaOption = Annotated[
    bool,
    typer.Option(
        "--meta",
        help="Print the post metadata as a table after rendering.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]


__all__ = [
    "AllowHtmlOption",
    "ConfigOption",
    "MacroOption",
    "MetaOption",
    "OUTPUT_PANEL",
    "OutputPathOption",
    "PostPathArgument",
    "RENDERING_PANEL",
]
