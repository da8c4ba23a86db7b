"""Implementation of the ``postmark macros`` command."""

from __future__ import annotations

from postmark.macros import BUILTIN_MACROS

from ..presenter import present_macros


def macros() -> None:
    """List the built-in macros and the properties they accept."""
    present_macros(BUILTIN_MACROS.values())


__all__ = ["macros"]
