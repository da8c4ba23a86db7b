"""Helpers shared by the embed macros."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar


ConfigT = TypeVar("ConfigT")


@dataclass(frozen=True, slots=True)
class EmbedStore(Generic[ConfigT]):
    """Per-instance configuration carried by an embed macro.

    ``html`` selects the built-in iframe renderer; otherwise ``handler``
    receives the parsed configuration.
    """

    handler: Callable[[ConfigT], str] | None = None
    html: bool = False


def make_proxy_handler(
    store_type: type[EmbedStore[Any]],
    to_config: Callable[[Mapping[str, str]], ConfigT],
    to_html: Callable[[ConfigT], str],
) -> Callable[[Any, str, dict[str, str]], str]:
    """Build the proxy handler shared by every instance of an embed macro family."""

    def proxy(store: Any, body: str, properties: dict[str, str]) -> str:
        if not isinstance(store, store_type):
            return ""
        config = to_config(properties)
        if store.html:
            return to_html(config)
        if store.handler is not None:
            return store.handler(config)
        return ""

    return proxy


def parse_size(value: str | None, width: int, height: int) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` value, falling back to the given defaults."""
    if not value:
        return width, height
    parts = value.split("x")
    if len(parts) != 2:
        return width, height
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return width, height


def parse_boolean(value: str | None) -> bool:
    """Return False for missing, empty or ``"false"`` values."""
    return value not in (None, "", "false")


def parse_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_color(value: str | None) -> str:
    """Strip the leading ``#`` from a colour value."""
    if not value:
        return ""
    return value.lstrip("#")


__all__ = [
    "EmbedStore",
    "make_proxy_handler",
    "parse_boolean",
    "parse_color",
    "parse_int",
    "parse_size",
]
