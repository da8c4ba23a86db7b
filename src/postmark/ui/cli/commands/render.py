"""Implementation of the ``postmark render`` command."""

from __future__ import annotations

import typer

from .._options import (
    AllowHtmlOption,
    ConfigOption,
    MacroOption,
    MetaOption,
    OutputPathOption,
    PostPathArgument,
)
from ..presenter import present_metadata
from ..state import emit_info
from ..utils import load_settings_or_exit, process_or_exit, write_output_file


def render(
    input_path: PostPathArgument,
    output: OutputPathOption = None,
    config: ConfigOption = None,
    allow_html: AllowHtmlOption = None,
    macros: MacroOption = None,
    show_meta: MetaOption = False,
) -> None:
    """Render a post to HTML."""
    settings = load_settings_or_exit(config, allow_html=allow_html, macros=macros)
    post = process_or_exit(input_path, settings)

    if output is None:
        typer.echo(post.content, nl=False)
    else:
        write_output_file(output, post.content)
        emit_info(f"Wrote {output}")

    if show_meta:
        present_metadata(post.meta)


__all__ = ["render"]
