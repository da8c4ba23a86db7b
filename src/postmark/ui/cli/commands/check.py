"""Implementation of the ``postmark check`` command."""

from __future__ import annotations

import typer

from postmark.core.post import Post

from .._options import ConfigOption, PostPathArgument
from ..presenter import present_metadata
from ..state import emit_error, emit_info
from ..utils import load_settings_or_exit, process_or_exit


def validity_problems(post: Post) -> list[str]:
    """List the reasons a processed post is not valid."""
    problems: list[str] = []
    if not post.meta.title:
        problems.append("missing title")
    if not post.meta.author:
        problems.append("missing author")
    if not post.content:
        problems.append("empty content")
    return problems


def check(
    input_path: PostPathArgument,
    config: ConfigOption = None,
) -> None:
    """Process a post and report whether it is complete."""
    settings = load_settings_or_exit(config)
    post = process_or_exit(input_path, settings)
    present_metadata(post.meta)

    if post.is_valid():
        emit_info(f"{input_path.name} is valid")
        return

    emit_error(f"{input_path.name} is not valid: {', '.join(validity_problems(post))}")
    raise typer.Exit(code=1)


__all__ = ["check", "validity_problems"]
