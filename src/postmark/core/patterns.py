"""Compiled patterns shared by the scanner, the macro registry and the inline engine."""

from __future__ import annotations

import re


IMAGE_EXTENSIONS = ("jpg", "jpeg", "gif", "png", "svg", "webp")
LINK_SCHEMES = ("http", "https", "ftp", "mailto")

_IMAGE_PATH = r"[^\s!|]+\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")"
_MACRO_TAG = r"\{(?P<name>[a-z0-9-]{2,})(?::(?P<props>[^{}]*))?\}"

# Block level
HEADER = re.compile(r"^h(?P<level>[1-6])\. (?P<text>.*)$")
IMAGE = re.compile(
    r"^!(?P<url>" + _IMAGE_PATH + r")(?:\|(?P<alt>[^!]*))?!(?P<caption>.*)$",
    re.IGNORECASE,
)
MACRO_LINE = re.compile(r"^\s*" + _MACRO_TAG + r"\s*$")

# Inline spans, in the order the engine applies them
CODE = re.compile(r"`(?P<text>[^\s`][^`]*?)`")
HTML_TAG = re.compile(r"<(?:/?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?|![^<>]*)>")
HR = re.compile(r"^\s*-{4,}\s*$")
BOLD = re.compile(r"\*(?P<text>[^\s*][^*]*?)\*")
ITALIC = re.compile(r"_(?P<text>[^\s_][^_]*?)_")
UNDERLINE = re.compile(r"\+(?P<text>[^\s+][^+]*?)\+")
STRIKETHROUGH = re.compile(r"-(?P<text>[^\s-][^-]*?)-")
SUPERSCRIPT = re.compile(r"\^(?P<text>[^\s^][^^]*?)\^")
SUBSCRIPT = re.compile(r"~(?P<text>[^\s~][^~]*?)~")
INLINE_IMAGE = re.compile(
    r"!(?P<url>" + _IMAGE_PATH + r")(?:\|(?P<alt>[^!]*))?!",
    re.IGNORECASE,
)
LINK = re.compile(
    r"\[(?:(?P<text>[^\[\]|]*)\|)?(?P<url>(?:"
    + "|".join(LINK_SCHEMES)
    + r"):[^\s\[\]|]{3,})\]"
)
INLINE_MACRO = re.compile(_MACRO_TAG)


def contains_html(text: str) -> bool:
    """Return True when ``text`` holds something that looks like an HTML tag."""
    return HTML_TAG.search(text) is not None


__all__ = [
    "BOLD",
    "CODE",
    "HEADER",
    "HR",
    "HTML_TAG",
    "IMAGE",
    "IMAGE_EXTENSIONS",
    "INLINE_IMAGE",
    "INLINE_MACRO",
    "ITALIC",
    "LINK",
    "LINK_SCHEMES",
    "MACRO_LINE",
    "STRIKETHROUGH",
    "SUBSCRIPT",
    "SUPERSCRIPT",
    "UNDERLINE",
    "contains_html",
]
