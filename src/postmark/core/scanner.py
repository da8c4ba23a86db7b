"""Line-oriented scanner turning post content into rendered blocks.

The scanner is a small state machine. In the ``NORMAL`` state every physical
line is classified as a macro tag, a blank line, a header, a block image or a
paragraph. Opening a multiline macro switches to ``MACRO_CAPTURE``, where lines
are buffered as the macro body until the next line that looks like a macro
tag.

Any macro-tag line closes a capture, whatever its name and whether or not it
resolves to a registered macro: ``{note}`` ... ``{youtube:id}`` ends the note
and the YouTube tag itself is consumed. This mirrors how posts have always
been written with ``{note}`` ... ``{note}`` pairs and is kept as is.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
import logging

from . import patterns
from .context import RenderContext
from .inline import check_html, substitute_inline
from .macros import MacroCall, invoke_macro, is_macro_line, resolve_macro


logger = logging.getLogger(__name__)


class ScanState(Enum):
    """States of the content scanner."""

    NORMAL = auto()
    MACRO_CAPTURE = auto()


class BlockScanner:
    """Consume content lines one at a time and accumulate rendered fragments."""

    def __init__(self, context: RenderContext) -> None:
        self.context = context
        self.state = ScanState.NORMAL
        self._active: MacroCall | None = None
        self._fragments: list[str] = []

    def feed(self, text: str, *, line: int | None = None) -> None:
        """Process one physical line (without its line terminator)."""
        self.context.line = line
        if self.state is ScanState.MACRO_CAPTURE:
            self._capture(text)
        else:
            self._scan(text, line)

    def finish(self) -> str:
        """Close any pending capture and return the rendered content."""
        if self._active is not None:
            logger.warning(
                "Multiline macro '%s' opened on line %s is never closed",
                self._active.name,
                self._active.line,
            )
            self._close()
        return "".join(self._fragments)

    def _emit(self, fragment: str) -> None:
        self._fragments.append(fragment + "\n")

    def _scan(self, text: str, line: int | None) -> None:
        if self.context.has_macros:
            call = resolve_macro(text, self.context, line=line)
            if call is not None:
                self._dispatch(call)
                return

        if not text.strip():
            return

        header = patterns.HEADER.match(text)
        if header is not None:
            self._header(text, header.group("text"), int(header.group("level")))
            return

        image = patterns.IMAGE.match(text)
        if image is not None:
            self._image(text, image.group("url"), image.group("alt") or "", image.group("caption"))
            return

        self._paragraph(text)

    def _dispatch(self, call: MacroCall) -> None:
        if call.multiline:
            logger.debug("Capturing multiline macro '%s' from line %s", call.name, call.line)
            self._active = call
            self.state = ScanState.MACRO_CAPTURE
            return
        fragment = invoke_macro(call, self.context)
        if fragment is not None:
            self._emit(fragment)

    def _capture(self, text: str) -> None:
        if is_macro_line(text):
            self._close()
        elif self._active is not None:
            self._active.capture(text)

    def _close(self) -> None:
        call = self._active
        self._active = None
        self.state = ScanState.NORMAL
        if call is None:
            return
        logger.debug("Closing multiline macro '%s' (%d lines)", call.name, len(call.body_lines))
        fragment = invoke_macro(call, self.context)
        if fragment is not None:
            self._emit(fragment)

    def _header(self, raw: str, text: str, level: int) -> None:
        render = self.context.render
        check_html(raw, allowed=render.allow_html, line=self.context.line)
        if render.header is None:
            self._emit(raw)
            return
        self._emit(render.header(text, level))

    def _image(self, raw: str, url: str, alt: str, caption: str) -> None:
        render = self.context.render
        # The caption is gated by substitute_inline, which honours code spans.
        head = raw[: len(raw) - len(caption)]
        check_html(head, allowed=render.allow_html, line=self.context.line)
        caption = caption.lstrip()
        if caption:
            caption = substitute_inline(caption, self.context)
        if render.image is None:
            self._emit(raw)
            return
        self._emit(render.image(url, alt, caption))

    def _paragraph(self, text: str) -> None:
        render = self.context.render
        text = substitute_inline(text, self.context)
        if render.paragraph is None:
            self._emit(text)
            return
        self._emit(render.paragraph(text))


def scan_content(lines: Iterable[str], context: RenderContext, *, first_line: int = 1) -> str:
    """Render content lines, numbering them from ``first_line``."""
    scanner = BlockScanner(context)
    for number, text in enumerate(lines, start=first_line):
        scanner.feed(text, line=number)
    return scanner.finish()


__all__ = ["BlockScanner", "ScanState", "scan_content"]
