"""Embed macros for video and audio players.

Each family exposes two factories: one delegating rendering to a caller
supplied handler that receives a typed configuration, and an ``*_html``
variant producing the provider's standard iframe. All instances of a family
share one proxy handler and differ only by their store.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from postmark.core.macros import Macro

from . import soundcloud as _soundcloud, vimeo as _vimeo, youtube as _youtube
from ._common import parse_boolean, parse_color, parse_int, parse_size
from .soundcloud import SoundcloudConfig, soundcloud, soundcloud_html
from .vimeo import VimeoConfig, vimeo, vimeo_html
from .youtube import YouTubeConfig, youtube, youtube_html


@dataclass(frozen=True, slots=True)
class BuiltinMacro:
    """Describe a macro family shipped with postmark."""

    name: str
    description: str
    properties: tuple[str, ...]
    html_factory: Callable[[], Macro]


BUILTIN_MACROS: Mapping[str, BuiltinMacro] = {
    entry.name: entry
    for entry in (
        BuiltinMacro(
            name=_youtube.NAME,
            description="YouTube video player",
            properties=_youtube.PROPERTIES,
            html_factory=youtube_html,
        ),
        BuiltinMacro(
            name=_vimeo.NAME,
            description="Vimeo video player",
            properties=_vimeo.PROPERTIES,
            html_factory=vimeo_html,
        ),
        BuiltinMacro(
            name=_soundcloud.NAME,
            description="SoundCloud track widget",
            properties=_soundcloud.PROPERTIES,
            html_factory=soundcloud_html,
        ),
    )
}


def html_macros(names: Iterable[str]) -> tuple[Macro, ...]:
    """Instantiate the HTML variant of the named built-in macros."""
    macros: list[Macro] = []
    for name in names:
        entry = BUILTIN_MACROS.get(name)
        if entry is None:
            known = ", ".join(sorted(BUILTIN_MACROS))
            msg = f"Unknown built-in macro '{name}' (known: {known})"
            raise ValueError(msg)
        macros.append(entry.html_factory())
    return tuple(macros)


__all__ = [
    "BUILTIN_MACROS",
    "BuiltinMacro",
    "SoundcloudConfig",
    "VimeoConfig",
    "YouTubeConfig",
    "html_macros",
    "parse_boolean",
    "parse_color",
    "parse_int",
    "parse_size",
    "soundcloud",
    "soundcloud_html",
    "vimeo",
    "vimeo_html",
    "youtube",
    "youtube_html",
]
