"""Inline substitution engine.

Span-level markup is rewritten by an ordered sequence of regex passes. Each
pass replaces every match in the current text with the output of its render
callback, so later passes see what earlier passes produced. A pass only runs
when its callback is configured.

Order: code, HTML gate, horizontal rule, bold, italic, underline,
strikethrough, superscript, subscript, inline image, link, inline macro.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import Any

from . import patterns
from .context import RenderContext
from .exceptions import HTMLNotAllowedError
from .macros import call_from_match, invoke_macro
from .render import Construct, Render


Replacement = Callable[[re.Match[str], Render], str]


@dataclass(frozen=True, slots=True)
class SpanRule:
    """One inline pass: the construct it belongs to, its pattern and its replacement."""

    construct: Construct
    pattern: re.Pattern[str]
    replace: Replacement

    def apply(self, text: str, render: Render) -> str:
        return self.pattern.sub(lambda match: self.replace(match, render), text)


def _callback(render: Render, construct: Construct) -> Callable[..., str]:
    callback: Any = getattr(render, construct.slot)
    return callback


def _text_span(construct: Construct) -> Replacement:
    def replace(match: re.Match[str], render: Render) -> str:
        return _callback(render, construct)(match.group("text"))

    return replace


def _horizontal_rule(match: re.Match[str], render: Render) -> str:
    return _callback(render, Construct.HR)()


def _inline_image(match: re.Match[str], render: Render) -> str:
    return _callback(render, Construct.INLINE_IMAGE)(match.group("url"), match.group("alt") or "")


def _link(match: re.Match[str], render: Render) -> str:
    return _callback(render, Construct.LINK)(match.group("url"), match.group("text") or "")


CODE_RULE = SpanRule(Construct.CODE, patterns.CODE, _text_span(Construct.CODE))

# Applied after the HTML gate, strictly in this order.
SPAN_RULES: tuple[SpanRule, ...] = (
    SpanRule(Construct.HR, patterns.HR, _horizontal_rule),
    SpanRule(Construct.BOLD, patterns.BOLD, _text_span(Construct.BOLD)),
    SpanRule(Construct.ITALIC, patterns.ITALIC, _text_span(Construct.ITALIC)),
    SpanRule(Construct.UNDERLINE, patterns.UNDERLINE, _text_span(Construct.UNDERLINE)),
    SpanRule(Construct.STRIKETHROUGH, patterns.STRIKETHROUGH, _text_span(Construct.STRIKETHROUGH)),
    SpanRule(Construct.SUPERSCRIPT, patterns.SUPERSCRIPT, _text_span(Construct.SUPERSCRIPT)),
    SpanRule(Construct.SUBSCRIPT, patterns.SUBSCRIPT, _text_span(Construct.SUBSCRIPT)),
    SpanRule(Construct.INLINE_IMAGE, patterns.INLINE_IMAGE, _inline_image),
    SpanRule(Construct.LINK, patterns.LINK, _link),
)


def check_html(text: str, *, allowed: bool, line: int | None = None) -> None:
    """Raise ``HTMLNotAllowedError`` when ``text`` holds HTML and the gate is closed."""
    if not allowed and patterns.contains_html(text):
        raise HTMLNotAllowedError(line=line)


def substitute_macros(text: str, context: RenderContext) -> str:
    """Replace inline simple macro tags with their rendered output."""

    def replace(match: re.Match[str]) -> str:
        macro = context.lookup_macro(match.group("name"))
        if macro is not None and macro.multiline:
            return match.group(0)
        call = call_from_match(match, context, line=context.line)
        rendered = invoke_macro(call, context)
        return rendered if rendered is not None else ""

    return patterns.INLINE_MACRO.sub(replace, text)


def substitute_inline(text: str, context: RenderContext) -> str:
    """Rewrite span-level markup inside one line of text."""
    render = context.render

    # Literal markup inside code spans is exempt from the HTML gate.
    if context.enabled(Construct.CODE):
        gated = patterns.CODE.sub("", text)
        text = CODE_RULE.apply(text, render)
    else:
        gated = text
    check_html(gated, allowed=render.allow_html, line=context.line)

    for rule in SPAN_RULES:
        if context.enabled(rule.construct):
            text = rule.apply(text, render)

    if context.has_macros:
        text = substitute_macros(text, context)
    return text


__all__ = [
    "CODE_RULE",
    "SPAN_RULES",
    "SpanRule",
    "check_html",
    "substitute_inline",
    "substitute_macros",
]
