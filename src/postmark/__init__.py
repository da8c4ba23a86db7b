"""Primary public API for postmark."""

from __future__ import annotations

from postmark.core import (
    Construct,
    DocumentAccessError,
    DocumentDecodeError,
    EmptyDocumentError,
    HTMLNotAllowedError,
    InvalidDateError,
    Macro,
    MacroError,
    MacroHandlerMissingError,
    MetadataError,
    MetadataMalformedError,
    MetadataMissingError,
    Post,
    PostMeta,
    PostmarkError,
    Render,
    RenderConfigMissingError,
    UnsupportedMacroPropertyError,
    UnsupportedMetadataPropertyError,
    is_valid,
    load_document,
    parse_properties,
    process,
    process_file,
)
from postmark.core.macros import ANONYMOUS_PROPERTY
from postmark.html import html_render
from postmark.version import get_version


__version__ = get_version()

__all__ = [
    "ANONYMOUS_PROPERTY",
    "Construct",
    "DocumentAccessError",
    "DocumentDecodeError",
    "EmptyDocumentError",
    "HTMLNotAllowedError",
    "InvalidDateError",
    "Macro",
    "MacroError",
    "MacroHandlerMissingError",
    "MetadataError",
    "MetadataMalformedError",
    "MetadataMissingError",
    "Post",
    "PostMeta",
    "PostmarkError",
    "Render",
    "RenderConfigMissingError",
    "UnsupportedMacroPropertyError",
    "UnsupportedMetadataPropertyError",
    "__version__",
    "get_version",
    "html_render",
    "is_valid",
    "load_document",
    "parse_properties",
    "process",
    "process_file",
]
