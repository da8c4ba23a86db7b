"""Per-call rendering context shared by the scanner and the inline engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .render import Construct, Render


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .macros import Macro


@dataclass(slots=True)
class RenderContext:
    """State derived from a ``Render`` once per ``process`` call."""

    render: Render
    constructs: frozenset[Construct] = field(default_factory=frozenset)
    macros: dict[str, Macro] = field(default_factory=dict)
    line: int | None = None

    @classmethod
    def from_render(cls, render: Render) -> RenderContext:
        """Build a context with the enabled constructs and the macro registry."""
        return cls(
            render=render,
            constructs=render.enabled_constructs(),
            macros={macro.name: macro for macro in render.macros},
        )

    def enabled(self, construct: Construct) -> bool:
        """Return True when the render supplies a callback for ``construct``."""
        return construct in self.constructs

    @property
    def has_macros(self) -> bool:
        """Return True when at least one macro definition is registered."""
        return bool(self.macros)

    def lookup_macro(self, name: str) -> Macro | None:
        """Return the macro registered under ``name`` when available."""
        return self.macros.get(name)


__all__ = ["RenderContext"]
