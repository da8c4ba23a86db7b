"""YouTube embed macro.

Example::

    {youtube:yMn863_910w|size=560x315|hideRelated|hideControls|hideInfo|enhancedPrivacy}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from postmark.core.macros import Macro

from ._common import EmbedStore, make_proxy_handler, parse_boolean, parse_size


NAME = "youtube"
PROPERTIES = ("size", "hideRelated", "hideControls", "hideInfo", "enhancedPrivacy")
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 340


@dataclass(frozen=True, slots=True)
class YouTubeConfig:
    """Properties of a ``{youtube}`` call."""

    id: str
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    hide_related: bool = False
    hide_controls: bool = False
    hide_info: bool = False
    enhanced_privacy: bool = False

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> YouTubeConfig:
        width, height = parse_size(properties.get("size"), DEFAULT_WIDTH, DEFAULT_HEIGHT)
        return cls(
            id=properties.get("", ""),
            width=width,
            height=height,
            hide_related=parse_boolean(properties.get("hideRelated")),
            hide_controls=parse_boolean(properties.get("hideControls")),
            hide_info=parse_boolean(properties.get("hideInfo")),
            enhanced_privacy=parse_boolean(properties.get("enhancedPrivacy")),
        )


@dataclass(frozen=True, slots=True)
class YouTubeStore(EmbedStore[YouTubeConfig]):
    """Store attached to ``youtube`` macro instances."""


def render_html(config: YouTubeConfig) -> str:
    """Render the YouTube player iframe."""
    arguments: list[str] = []
    if config.hide_controls:
        arguments.append("controls=0")
    if config.hide_info:
        arguments.append("showinfo=0")
    if config.hide_related:
        arguments.append("rel=0")

    domain = "www.youtube-nocookie.com" if config.enhanced_privacy else "www.youtube.com"
    query = "?" + "&amp;".join(arguments) if arguments else ""
    return (
        f'<iframe width="{config.width}" height="{config.height}" '
        f'src="https://{domain}/embed/{config.id}{query}" '
        'frameborder="0" allowfullscreen></iframe>'
    )


_proxy = make_proxy_handler(YouTubeStore, YouTubeConfig.from_properties, render_html)


def youtube(handler: Callable[[YouTubeConfig], str]) -> Macro:
    """Return a ``youtube`` macro delegating rendering to ``handler``."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=YouTubeStore(handler=handler),
        proxy_handler=_proxy,
    )


def youtube_html() -> Macro:
    """Return a ``youtube`` macro rendering the standard iframe."""
    return Macro(
        name=NAME,
        properties=PROPERTIES,
        store=YouTubeStore(html=True),
        proxy_handler=_proxy,
    )


__all__ = ["YouTubeConfig", "YouTubeStore", "render_html", "youtube", "youtube_html"]
