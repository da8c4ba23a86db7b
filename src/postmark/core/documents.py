"""Document loading and line splitting helpers."""

from __future__ import annotations

import os
from pathlib import Path

from .exceptions import DocumentAccessError, DocumentDecodeError


def decode_document(document: str | bytes) -> str:
    """Return the document as text, decoding bytes as UTF-8."""
    if isinstance(document, bytes):
        try:
            return document.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            # utf-8-sig reports offsets past a stripped BOM.
            position = exc.start + len(document) - len(exc.object)
            raise DocumentDecodeError(position, exc.reason) from exc
    return document


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping one trailing ``\\r`` from every line.

    A final line terminator does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_document(path: Path | str) -> str:
    """Read a post file after checking it exists and is readable."""
    candidate = Path(path)
    if not candidate.exists():
        raise DocumentAccessError(candidate, "does not exist")
    if not candidate.is_file():
        raise DocumentAccessError(candidate, "is not a file")
    if not os.access(candidate, os.R_OK):
        raise DocumentAccessError(candidate, "is not readable")
    try:
        payload = candidate.read_bytes()
    except OSError as exc:
        raise DocumentAccessError(candidate, f"cannot be read: {exc}") from exc
    return decode_document(payload)


__all__ = ["decode_document", "load_document", "split_lines"]
