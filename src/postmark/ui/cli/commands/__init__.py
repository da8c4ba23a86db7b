"""CLI command implementations exposed via ``postmark.ui.cli``."""

from __future__ import annotations

from .check import check
from .macros import macros
from .render import render


__all__ = ["check", "macros", "render"]
