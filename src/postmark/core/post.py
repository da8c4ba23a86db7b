"""Post assembly: metadata extraction followed by content scanning."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from .context import RenderContext
from .documents import decode_document, load_document, split_lines
from .exceptions import EmptyDocumentError, RenderConfigMissingError
from .metadata import PostMeta, extract_metadata
from .render import Render
from .scanner import scan_content


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Post:
    """Parsed metadata and rendered content of a post."""

    meta: PostMeta
    content: str

    def is_valid(self) -> bool:
        """Return True when the post has an author, a title and some content."""
        return is_valid(self)


def is_valid(post: Post | None) -> bool:
    """Return True when ``post`` carries metadata with author and title and non-empty content."""
    if post is None or post.meta is None:
        return False
    if not post.meta.author or not post.meta.title:
        return False
    return bool(post.content)


def process(document: str | bytes, render: Render | None) -> Post:
    """Parse ``document`` and render its content with ``render``.

    Raises a :class:`~postmark.core.exceptions.PostmarkError` subclass on the
    first problem encountered; no partially rendered post is ever returned.
    """
    if render is None:
        raise RenderConfigMissingError()
    if len(document) == 0:
        raise EmptyDocumentError()

    lines = split_lines(decode_document(document))
    meta, offset = extract_metadata(lines)
    context = RenderContext.from_render(render)
    content = scan_content(lines[offset:], context, first_line=offset + 1)
    logger.debug("Rendered post '%s' (%d content lines)", meta.title, len(lines) - offset)
    return Post(meta=meta, content=content)


def process_file(path: Path | str, render: Render | None) -> Post:
    """Load a post file and process it."""
    if render is None:
        raise RenderConfigMissingError()
    return process(load_document(path), render)


__all__ = ["Post", "is_valid", "process", "process_file"]
