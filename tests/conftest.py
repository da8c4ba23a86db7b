from __future__ import annotations

import pytest

from postmark import Render


def _header(text: str, level: int) -> str:
    return f"Level: {level} Text: {text}"


def _link(url: str, text: str) -> str:
    return f'(URL: {url} Text: "{text}")'


def _inline_image(url: str, alt: str) -> str:
    return f'(URL: {url} Alt: "{alt}")'


def _image(url: str, alt: str, caption: str) -> str:
    return f'(URL: {url} Alt: "{alt}" Caption: "{caption}")'


DEBUG_CALLBACKS = {
    "header": _header,
    "paragraph": lambda text: f"  {text}",
    "bold": lambda text: f"(Bold: {text})",
    "italic": lambda text: f"(Italic: {text})",
    "underline": lambda text: f"(Underline: {text})",
    "strikethrough": lambda text: f"(Del: {text})",
    "superscript": lambda text: f"(Sup: {text})",
    "subscript": lambda text: f"(Sub: {text})",
    "code": lambda text: f"(Code: {text})",
    "hr": lambda: "(HR)",
    "link": _link,
    "inline_image": _inline_image,
    "image": _image,
    "unsupported_macro": lambda name: f'(Unsupported macro "{name}")',
}


@pytest.fixture
def debug_render() -> Render:
    """Render that spells out every construct it sees."""
    return Render(**DEBUG_CALLBACKS)
