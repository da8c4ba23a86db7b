"""Vimeo embed macro.

Example::

    {vimeo:126553902|size=560x315|color=#00adef|hidePortrait|loop}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from postmark.core.macros import Macro

from ._common import EmbedStore, make_proxy_handler, parse_boolean, parse_color, parse_size


NAME = "vimeo"
PROPERTIES = (
    "size",
    "color",
    "hidePortrait",
    "hideTitle",
    "hideByline",
    "loop",
    "autoplay",
)
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 360


@dataclass(frozen=True, slots=True)
class VimeoConfig:
    """Properties of a ``{vimeo}`` call."""

    id: str
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    color: str = ""
    hide_portrait: bool = False
    hide_title: bool = False
    hide_byline: bool = False
    loop: bool = False
    autoplay: bool = False

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> VimeoConfig:
        width, height = parse_size(properties.get("size"), DEFAULT_WIDTH, DEFAULT_HEIGHT)
        return cls(
            id=properties.get("", ""),
            width=width,
            height=height,
            color=parse_color(properties.get("color")),
            hide_portrait=parse_boolean(properties.get("hidePortrait")),
            hide_title=parse_boolean(properties.get("hideTitle")),
            hide_byline=parse_boolean(properties.get("hideByline")),
            loop=parse_boolean(properties.get("loop")),
            autoplay=parse_boolean(properties.get("autoplay")),
        )


@dataclass(frozen=True, slots=True)
class VimeoStore(EmbedStore[VimeoConfig]):
    """Store attached to ``vimeo`` macro instances."""


def render_html(config: VimeoConfig) -> str:
    """Render the Vimeo player iframe."""
    arguments: list[str] = []
    if config.color:
        arguments.append(f"color={config.color}")
    if config.hide_portrait:
        arguments.append("portrait=0")
    if config.hide_title:
        arguments.append("title=0")
    if config.hide_byline:
        arguments.append("byline=0")
    if config.loop:
        arguments.append("loop=1")
    if config.autoplay:
        arguments.append("autoplay=1")

    query = "?" + "&amp;".join(arguments) if arguments else ""
    return (
        f'<iframe src="https://player.vimeo.com/video/{config.id}{query}" '
        f'width="{config.width}" height="{config.height}" frameborder="0" '
        "webkitallowfullscreen mozallowfullscreen allowfullscreen></iframe>"
    )


_proxy = make_proxy_handler(VimeoStore, VimeoConfig.from_properties, render_html)


def vimeo(handler: Callable[[VimeoConfig], str]) -> Macro:
    """Return a ``vimeo`` macro delegating rendering to ``handler``."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=VimeoStore(handler=handler),
        proxy_handler=_proxy,
    )


def vimeo_html() -> Macro:
    """Return a ``vimeo`` macro rendering the standard iframe."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=VimeoStore(html=True),
        proxy_handler=_proxy,
    )


__all__ = ["VimeoConfig", "VimeoStore", "render_html", "vimeo", "vimeo_html"]
