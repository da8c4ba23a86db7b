"""Custom exception hierarchy for the post processing pipeline."""

from __future__ import annotations


class PostmarkError(RuntimeError):
    """Base exception for post processing failures.

    ``line`` holds the 1-based document line that triggered the failure when it
    is known.
    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} (line {self.line})"


class RenderConfigMissingError(PostmarkError):
    """Raised when ``process`` is called without a render configuration."""

    def __init__(self) -> None:
        super().__init__("Render configuration is missing")


class EmptyDocumentError(PostmarkError):
    """Raised when the document to process has zero length."""

    def __init__(self) -> None:
        super().__init__("Document is empty")


class DocumentAccessError(PostmarkError):
    """Raised when a post file cannot be located or read."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"File {path} {reason}")
        self.path = path
        self.reason = reason


class DocumentDecodeError(PostmarkError):
    """Raised when document bytes are not valid UTF-8.

    ``position`` is the offset of the first offending byte.
    """

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Document is not valid UTF-8 at byte {position}: {reason}")
        self.position = position
        self.reason = reason


class MetadataError(PostmarkError):
    """Base class for failures in the metadata block."""


class MetadataMissingError(MetadataError):
    """Raised when the metadata block is absent or never closed."""

    def __init__(self, *, line: int | None = None) -> None:
        super().__init__("Metadata section is missing", line=line)


class MetadataMalformedError(MetadataError):
    """Raised when a metadata line is not a ``key: value`` record."""

    def __init__(self, text: str, *, line: int | None = None) -> None:
        super().__init__(f"Malformed metadata record {text!r}", line=line)
        self.text = text


class UnsupportedMetadataPropertyError(MetadataError):
    """Raised for metadata keys outside the recognised set."""

    def __init__(self, key: str, *, line: int | None = None) -> None:
        super().__init__(f"Unsupported metadata property {key!r}", line=line)
        self.key = key


class InvalidDateError(MetadataError):
    """Raised when the ``date`` metadata value does not match ``YYYY/MM/DD HH:MM``."""

    def __init__(self, value: str, *, line: int | None = None) -> None:
        super().__init__(f"Invalid date {value!r}, expected YYYY/MM/DD HH:MM", line=line)
        self.value = value


class MacroError(PostmarkError):
    """Base class for macro resolution and dispatch failures."""


class UnsupportedMacroPropertyError(MacroError):
    """Raised when a macro call uses a property outside the macro whitelist."""

    def __init__(self, macro: str, key: str, *, line: int | None = None) -> None:
        super().__init__(f"Macro {macro!r} does not support property {key!r}", line=line)
        self.macro = macro
        self.key = key


class MacroHandlerMissingError(MacroError):
    """Raised when a known macro has neither a handler nor a proxy handler."""

    def __init__(self, name: str, *, line: int | None = None) -> None:
        super().__init__(f"Macro {name!r} has no handler", line=line)
        self.name = name


class HTMLNotAllowedError(PostmarkError):
    """Raised when HTML markup appears where the applicable gate forbids it."""

    def __init__(self, *, line: int | None = None) -> None:
        super().__init__("HTML markup is not allowed", line=line)


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "DocumentAccessError",
    "DocumentDecodeError",
    "EmptyDocumentError",
    "HTMLNotAllowedError",
    "InvalidDateError",
    "MacroError",
    "MacroHandlerMissingError",
    "MetadataError",
    "MetadataMalformedError",
    "MetadataMissingError",
    "PostmarkError",
    "RenderConfigMissingError",
    "UnsupportedMacroPropertyError",
    "UnsupportedMetadataPropertyError",
    "exception_hint",
    "exception_messages",
]
