"""Core parsing and rendering pipeline."""

from __future__ import annotations

from .context import RenderContext
from .documents import decode_document, load_document, split_lines
from .exceptions import (
    DocumentAccessError,
    DocumentDecodeError,
    EmptyDocumentError,
    HTMLNotAllowedError,
    InvalidDateError,
    MacroError,
    MacroHandlerMissingError,
    MetadataError,
    MetadataMalformedError,
    MetadataMissingError,
    PostmarkError,
    RenderConfigMissingError,
    UnsupportedMacroPropertyError,
    UnsupportedMetadataPropertyError,
)
from .inline import substitute_inline
from .macros import Macro, MacroCall, invoke_macro, parse_properties, resolve_macro
from .metadata import PostMeta, extract_metadata
from .post import Post, is_valid, process, process_file
from .render import Construct, Render
from .scanner import BlockScanner, ScanState, scan_content


__all__ = [
    "BlockScanner",
    "Construct",
    "DocumentAccessError",
    "DocumentDecodeError",
    "EmptyDocumentError",
    "HTMLNotAllowedError",
    "InvalidDateError",
    "Macro",
    "MacroCall",
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
    "RenderContext",
    "ScanState",
    "UnsupportedMacroPropertyError",
    "UnsupportedMetadataPropertyError",
    "decode_document",
    "extract_metadata",
    "invoke_macro",
    "is_valid",
    "load_document",
    "parse_properties",
    "process",
    "process_file",
    "resolve_macro",
    "scan_content",
    "split_lines",
    "substitute_inline",
]
