"""Render configuration supplied by callers.

Each construct the markup knows about has an optional callback slot. Leaving
a block-level slot (``header``, ``image``, ``paragraph``) unset passes the raw
line through; leaving an inline slot unset disables the corresponding
substitution pass entirely.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .macros import Macro


class Construct(Enum):
    """Markup constructs backed by a render callback slot."""

    HEADER = "header"
    PARAGRAPH = "paragraph"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    CODE = "code"
    HR = "hr"
    LINK = "link"
    INLINE_IMAGE = "inline_image"
    IMAGE = "image"

    @property
    def slot(self) -> str:
        """Name of the ``Render`` attribute holding the callback."""
        return self.value


TextCallback = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class Render:
    """Immutable set of render callbacks, HTML gate and macro definitions."""

    header: Callable[[str, int], str] | None = None
    paragraph: TextCallback | None = None
    bold: TextCallback | None = None
    italic: TextCallback | None = None
    underline: TextCallback | None = None
    strikethrough: TextCallback | None = None
    superscript: TextCallback | None = None
    subscript: TextCallback | None = None
    code: TextCallback | None = None
    hr: Callable[[], str] | None = None
    link: Callable[[str, str], str] | None = None
    inline_image: Callable[[str, str], str] | None = None
    image: Callable[[str, str, str], str] | None = None
    unsupported_macro: TextCallback | None = None
    allow_html: bool = False
    macros: tuple[Macro, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        macros = tuple(self.macros)
        object.__setattr__(self, "macros", macros)
        seen: set[str] = set()
        for macro in macros:
            if macro.name in seen:
                msg = f"Macro {macro.name!r} is declared more than once"
                raise ValueError(msg)
            seen.add(macro.name)

    def enabled_constructs(self) -> frozenset[Construct]:
        """Return the constructs whose callback slot is populated."""
        return frozenset(
            construct for construct in Construct if getattr(self, construct.slot) is not None
        )


__all__ = ["Construct", "Render", "TextCallback"]
