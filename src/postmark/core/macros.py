"""Macro definitions, property parsing and dispatch.

A macro tag looks like ``{name}`` or ``{name:props}`` where ``props`` is a
``|`` separated list of tokens::

    {youtube:yMn863_910w|size=560x315|hideRelated}

The first bare token becomes the anonymous property (key ``""``), later bare
tokens are boolean flags (value ``"true"``) and ``key=value`` tokens split on
the first ``=``.

Macros come in two flavours that reduce to the same call signature:

* a direct ``handler(body, properties)``;
* a ``proxy_handler(store, body, properties)`` paired with an opaque ``store``,
  which lets a single implementation back several differently configured
  macro instances (see :mod:`postmark.macros`).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
import functools
import logging
import re
from typing import Any

from . import patterns
from .context import RenderContext
from .exceptions import (
    HTMLNotAllowedError,
    MacroHandlerMissingError,
    UnsupportedMacroPropertyError,
)


logger = logging.getLogger(__name__)

ANONYMOUS_PROPERTY = ""
FLAG_VALUE = "true"

MacroHandler = Callable[[str, dict[str, str]], str]
ProxyHandler = Callable[[Any, str, dict[str, str]], str]


@dataclass(frozen=True, slots=True)
class Macro:
    """Definition of a named macro."""

    name: str
    multiline: bool = False
    handler: MacroHandler | None = None
    properties: tuple[str, ...] = ()
    allow_html: bool = False
    store: Any = None
    proxy_handler: ProxyHandler | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))

    def bound_handler(self, *, line: int | None = None) -> MacroHandler:
        """Return a ``(body, properties)`` callable for either handler flavour."""
        if self.handler is not None:
            return self.handler
        if self.proxy_handler is not None:
            return functools.partial(self.proxy_handler, self.store)
        raise MacroHandlerMissingError(self.name, line=line)

    def check_properties(self, properties: Mapping[str, str], *, line: int | None = None) -> None:
        """Reject property keys missing from a non-empty whitelist."""
        if not self.properties:
            return
        for key in properties:
            if key == ANONYMOUS_PROPERTY:
                continue
            if key not in self.properties:
                raise UnsupportedMacroPropertyError(self.name, key, line=line)


@dataclass(slots=True)
class MacroCall:
    """A macro tag resolved against the registry."""

    name: str
    macro: Macro | None
    properties: dict[str, str] = field(default_factory=dict)
    line: int | None = None
    body_lines: list[str] = field(default_factory=list)

    @property
    def known(self) -> bool:
        return self.macro is not None

    @property
    def multiline(self) -> bool:
        return self.macro is not None and self.macro.multiline

    @property
    def body(self) -> str:
        """Captured body lines joined in encounter order."""
        return "\n".join(self.body_lines)

    def capture(self, text: str) -> None:
        """Append one physical line to the multiline body."""
        self.body_lines.append(text)


def parse_properties(text: str | None) -> dict[str, str]:
    """Parse a macro property string into a mapping."""
    properties: dict[str, str] = {}
    if not text:
        return properties

    anonymous_seen = False
    for raw_token in text.split("|"):
        token = raw_token.strip()
        if not token:
            continue
        key, separator, value = token.partition("=")
        if separator:
            properties[key.strip()] = value.strip()
        elif not anonymous_seen:
            properties[ANONYMOUS_PROPERTY] = token
            anonymous_seen = True
        else:
            properties[token] = FLAG_VALUE
    return properties


def is_macro_line(text: str) -> bool:
    """Return True when the whole line is a macro tag."""
    return patterns.MACRO_LINE.match(text) is not None


def call_from_match(
    match: re.Match[str], context: RenderContext, *, line: int | None = None
) -> MacroCall:
    """Build a ``MacroCall`` from a macro tag match, validating its properties."""
    name = match.group("name")
    properties = parse_properties(match.group("props"))
    macro = context.lookup_macro(name)
    if macro is not None:
        macro.check_properties(properties, line=line)
    return MacroCall(name=name, macro=macro, properties=properties, line=line)


def resolve_macro(
    tag: str, context: RenderContext, *, line: int | None = None
) -> MacroCall | None:
    """Resolve a macro tag line, returning ``None`` when ``tag`` is not a macro tag."""
    match = patterns.MACRO_LINE.match(tag)
    if match is None:
        return None
    return call_from_match(match, context, line=line)


def invoke_macro(call: MacroCall, context: RenderContext) -> str | None:
    """Render a resolved macro call.

    Returns ``None`` when the macro is unknown and the render has no
    ``unsupported_macro`` callback, meaning the tag is dropped.
    """
    if call.macro is None:
        callback = context.render.unsupported_macro
        if callback is None:
            logger.debug("Dropping unknown macro '%s' (line %s)", call.name, call.line)
            return None
        return callback(call.name)

    handler = call.macro.bound_handler(line=call.line)
    body = call.body if call.macro.multiline else ""
    if call.macro.multiline and not call.macro.allow_html and patterns.contains_html(body):
        raise HTMLNotAllowedError(line=call.line)
    return handler(body, dict(call.properties))


__all__ = [
    "ANONYMOUS_PROPERTY",
    "FLAG_VALUE",
    "Macro",
    "MacroCall",
    "MacroHandler",
    "ProxyHandler",
    "call_from_match",
    "invoke_macro",
    "is_macro_line",
    "parse_properties",
    "resolve_macro",
]
