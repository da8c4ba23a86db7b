"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from postmark.config import RenderSettings, load_settings
from postmark.core.exceptions import PostmarkError
from postmark.core.post import Post, process_file

from .state import emit_error


def resolve_settings(
    config: Path | None,
    *,
    allow_html: bool | None = None,
    macros: list[str] | None = None,
) -> RenderSettings:
    """Load the settings file (if any) and apply command line overrides."""
    settings = load_settings(config) if config is not None else RenderSettings()
    return settings.merged(allow_html=allow_html, macros=macros or None)


def process_or_exit(path: Path, settings: RenderSettings) -> Post:
    """Process a post file, turning library errors into a CLI exit."""
    try:
        return process_file(path, settings.build_render())
    except PostmarkError as exc:
        emit_error(f"{path.name}: {exc}", exception=exc)
        raise typer.Exit(code=1) from exc


def load_settings_or_exit(
    config: Path | None,
    *,
    allow_html: bool | None = None,
    macros: list[str] | None = None,
) -> RenderSettings:
    """Resolve settings, turning validation failures into a CLI exit."""
    try:
        return resolve_settings(config, allow_html=allow_html, macros=macros)
    except PostmarkError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


def write_output_file(path: Path, content: str) -> None:
    """Write rendered content, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


__all__ = ["load_settings_or_exit", "process_or_exit", "resolve_settings", "write_output_file"]
