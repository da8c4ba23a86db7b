"""SoundCloud embed macro.

Example::

    {soundcloud:268954121|width=300|autoPlay|hideComments}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from postmark.core.macros import Macro

from ._common import EmbedStore, make_proxy_handler, parse_boolean, parse_int


NAME = "soundcloud"
PROPERTIES = ("width", "autoPlay", "hideRelated", "hideComments", "hideUser", "showReposts")
DEFAULT_WIDTH = 450


@dataclass(frozen=True, slots=True)
class SoundcloudConfig:
    """Properties of a ``{soundcloud}`` call.

    ``width`` is the player height in pixels (300, 450 or 600 in the SoundCloud
    widget terminology).
    """

    id: str
    width: int = DEFAULT_WIDTH
    auto_play: bool = False
    hide_related: bool = False
    hide_comments: bool = False
    hide_user: bool = False
    show_reposts: bool = False

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> SoundcloudConfig:
        return cls(
            id=properties.get("", ""),
            width=parse_int(properties.get("width"), DEFAULT_WIDTH),
            auto_play=parse_boolean(properties.get("autoPlay")),
            hide_related=parse_boolean(properties.get("hideRelated")),
            hide_comments=parse_boolean(properties.get("hideComments")),
            hide_user=parse_boolean(properties.get("hideUser")),
            show_reposts=parse_boolean(properties.get("showReposts")),
        )


@dataclass(frozen=True, slots=True)
class SoundcloudStore(EmbedStore[SoundcloudConfig]):
    """Store attached to ``soundcloud`` macro instances."""


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_html(config: SoundcloudConfig) -> str:
    """Render the SoundCloud widget iframe."""
    arguments = "&amp;".join(
        (
            config.id,
            f"auto_play={_flag(config.auto_play)}",
            f"hide_related={_flag(config.hide_related)}",
            f"show_comments={_flag(not config.hide_comments)}",
            f"show_user={_flag(not config.hide_user)}",
            f"show_reposts={_flag(config.show_reposts)}",
            "visual=true",
        )
    )
    return (
        f'<iframe width="100%" height="{config.width}" scrolling="no" frameborder="no" '
        'src="https://w.soundcloud.com/player/?url=https%3A//api.soundcloud.com/tracks/'
        f'{arguments}">'
        "</iframe>"
    )


_proxy = make_proxy_handler(SoundcloudStore, SoundcloudConfig.from_properties, render_html)


def soundcloud(handler: Callable[[SoundcloudConfig], str]) -> Macro:
    """Return a ``soundcloud`` macro delegating rendering to ``handler``."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=SoundcloudStore(handler=handler),
        proxy_handler=_proxy,
    )


def soundcloud_html() -> Macro:
    """Return a ``soundcloud`` macro rendering the standard widget."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=SoundcloudStore(html=True),
        proxy_handler=_proxy,
    )


__all__ = [
    "SoundcloudConfig",
    "SoundcloudStore",
    "render_html",
    "soundcloud",
    "soundcloud_html",
]
