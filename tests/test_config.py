from __future__ import annotations

from pathlib import Path

import pytest

from postmark import Construct, process
from postmark.config import RenderSettings, SettingsError, load_settings, settings_from_mapping


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "postmark.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_settings(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "allow_html: true\n"
        "disabled: [strikethrough, underline]\n"
        "macros: [youtube, vimeo, youtube]\n"
        "unsupported_macro: comment\n"
        "header_offset: 1\n"
        "image_class: figure\n",
    )

    settings = load_settings(path)

    assert settings.allow_html is True
    assert settings.disabled == [Construct.STRIKETHROUGH, Construct.UNDERLINE]
    assert settings.macros == ["youtube", "vimeo"]
    assert settings.unsupported_macro == "comment"
    assert settings.header_offset == 1
    assert settings.image_class == "figure"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write(tmp_path, "")) == RenderSettings()


@pytest.mark.parametrize(
    "text",
    [
        "macros: [dailymotion]\n",
        "header_offset: 9\n",
        "unsupported_macro: shout\n",
        "disabled: [blink]\n",
        "colour: red\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, text: str) -> None:
    with pytest.raises(SettingsError):
        load_settings(_write(tmp_path, text))


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_settings(_write(tmp_path, "macros: [youtube\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="mapping"):
        load_settings(_write(tmp_path, "- youtube\n"))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Failed to read"):
        load_settings(tmp_path / "absent.yml")


def test_merged_ignores_none_overrides() -> None:
    settings = RenderSettings(allow_html=True, macros=["youtube"])

    merged = settings.merged(allow_html=None, macros=["vimeo"])

    assert merged.allow_html is True
    assert merged.macros == ["vimeo"]


def test_merged_validates_overrides() -> None:
    with pytest.raises(SettingsError):
        RenderSettings().merged(macros=["dailymotion"])


def test_build_render_uses_settings() -> None:
    settings = settings_from_mapping(
        {"macros": ["youtube"], "disabled": ["bold"], "header_offset": 2}
    )
    render = settings.build_render()

    post = process("++++\nTitle: T\n++++\nh1. *Hi*\n{youtube:abc}\n", render)

    assert post.content.startswith("<h3>*Hi*</h3>\n<iframe ")
    assert [macro.name for macro in render.macros] == ["youtube"]
