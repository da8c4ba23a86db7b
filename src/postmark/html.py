"""Ready-made ``Render`` producing HTML."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from html import escape

from .core.macros import Macro
from .core.render import Construct, Render


def _header(offset: int) -> Callable[[str, int], str]:
    def header(text: str, level: int) -> str:
        level = min(6, level + offset)
        return f"<h{level}>{escape(text, quote=False)}</h{level}>"

    return header


def _wrap(tag: str) -> Callable[[str], str]:
    def wrap(text: str) -> str:
        return f"<{tag}>{text}</{tag}>"

    return wrap


def _paragraph(text: str) -> str:
    if text == _hr():
        return text
    return f"<p>{text}</p>"


def _code(text: str) -> str:
    return f"<code>{escape(text, quote=False)}</code>"


def _hr() -> str:
    return "<hr/>"


def _link(url: str, text: str) -> str:
    label = text or url
    return f'<a href="{escape(url)}">{label}</a>'


def _inline_image(url: str, alt: str) -> str:
    return f'<img src="{escape(url)}" alt="{escape(alt)}"/>'


def _image(image_class: str | None) -> Callable[[str, str, str], str]:
    class_attr = f' class="{escape(image_class)}"' if image_class else ""

    def image(url: str, alt: str, caption: str) -> str:
        figure = f'<img src="{escape(url)}" alt="{escape(alt)}"/>'
        if caption:
            figure += f"<figcaption>{caption}</figcaption>"
        return f"<figure{class_attr}>{figure}</figure>"

    return image


def _unsupported_comment(name: str) -> str:
    return f"<!-- unsupported macro: {escape(name)} -->"


def _unsupported_keep(name: str) -> str:
    return "{" + name + "}"


UNSUPPORTED_MACRO_POLICIES: dict[str, Callable[[str], str] | None] = {
    "drop": None,
    "comment": _unsupported_comment,
    "keep": _unsupported_keep,
}


def html_render(
    *,
    allow_html: bool = False,
    macros: Iterable[Macro] = (),
    disabled: Iterable[Construct] = (),
    unsupported_macro: str = "drop",
    header_offset: int = 0,
    image_class: str | None = None,
) -> Render:
    """Return a ``Render`` emitting HTML.

    Constructs listed in ``disabled`` keep their callback unset, so inline
    spans of that kind are left untouched and block lines pass through raw.
    """
    try:
        unsupported = UNSUPPORTED_MACRO_POLICIES[unsupported_macro]
    except KeyError as exc:
        msg = f"Unknown unsupported macro policy '{unsupported_macro}'"
        raise ValueError(msg) from exc

    callbacks: dict[Construct, Callable[..., str]] = {
        Construct.HEADER: _header(header_offset),
        Construct.PARAGRAPH: _paragraph,
        Construct.BOLD: _wrap("strong"),
        Construct.ITALIC: _wrap("em"),
        Construct.UNDERLINE: _wrap("u"),
        Construct.STRIKETHROUGH: _wrap("del"),
        Construct.SUPERSCRIPT: _wrap("sup"),
        Construct.SUBSCRIPT: _wrap("sub"),
        Construct.CODE: _code,
        Construct.HR: _hr,
        Construct.LINK: _link,
        Construct.INLINE_IMAGE: _inline_image,
        Construct.IMAGE: _image(image_class),
    }
    for construct in disabled:
        callbacks.pop(construct, None)

    return Render(
        **{construct.slot: callback for construct, callback in callbacks.items()},
        unsupported_macro=unsupported,
        allow_html=allow_html,
        macros=tuple(macros),
    )


__all__ = ["UNSUPPORTED_MACRO_POLICIES", "html_render"]
