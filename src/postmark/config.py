"""Settings used to build the HTML render from a YAML file.

RenderSettings

`allow_html` (`bool`)
: Let raw HTML through paragraphs, headers and images instead of failing the
  post with ``HTMLNotAllowedError``.

`disabled` (`list[Construct]`)
: Constructs to leave unrendered, e.g. ``[strikethrough, underline]`` for
  posts with many hyphenated words or plus signs.

`macros` (`list[str]`)
: Built-in embed macros to enable (``youtube``, ``vimeo``, ``soundcloud``).

`unsupported_macro` (`"drop" | "comment" | "keep"`)
: What to render for macro tags that match no enabled macro.

`header_offset` (`int`)
: Number of levels added to every header, capped at ``h6``.

`image_class` (`str | None`)
: CSS class set on ``<figure>`` elements produced for block images.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .core.exceptions import PostmarkError
from .core.render import Construct, Render
from .html import html_render
from .macros import BUILTIN_MACROS, html_macros


class SettingsError(PostmarkError):
    """Raised when a settings file cannot be read or validated."""


class RenderSettings(BaseModel):
    """Options controlling the HTML render."""

    model_config = ConfigDict(extra="forbid")

    allow_html: bool = False
    disabled: list[Construct] = Field(default_factory=list)
    macros: list[str] = Field(default_factory=list)
    unsupported_macro: Literal["drop", "comment", "keep"] = "drop"
    header_offset: int = Field(default=0, ge=0, le=5)
    image_class: str | None = None

    @field_validator("macros")
    @classmethod
    def _known_macros(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - set(BUILTIN_MACROS))
        if unknown:
            known = ", ".join(sorted(BUILTIN_MACROS))
            raise ValueError(f"Unknown macros: {', '.join(unknown)} (known: {known})")
        return list(dict.fromkeys(value))

    def merged(self, **overrides: Any) -> RenderSettings:
        """Return a copy with the non-``None`` overrides applied."""
        payload = self.model_dump()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return settings_from_mapping(payload)

    def build_render(self) -> Render:
        """Create the HTML ``Render`` described by these settings."""
        return html_render(
            allow_html=self.allow_html,
            macros=html_macros(self.macros),
            disabled=self.disabled,
            unsupported_macro=self.unsupported_macro,
            header_offset=self.header_offset,
            image_class=self.image_class,
        )


def settings_from_mapping(data: Mapping[str, Any] | None) -> RenderSettings:
    """Validate a mapping into ``RenderSettings``."""
    try:
        return RenderSettings.model_validate(dict(data or {}))
    except ValidationError as exc:
        raise SettingsError(f"Invalid render settings: {exc}") from exc


def load_settings(path: Path | str) -> RenderSettings:
    """Load ``RenderSettings`` from a YAML file."""
    source = Path(path)
    try:
        payload = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file '{source}': {exc}") from exc

    try:
        parsed = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file '{source}': {exc}") from exc

    if parsed is None:
        return RenderSettings()
    if not isinstance(parsed, Mapping):
        raise SettingsError(f"Settings file '{source}' must contain a mapping.")
    return settings_from_mapping(parsed)


__all__ = ["RenderSettings", "SettingsError", "load_settings", "settings_from_mapping"]
