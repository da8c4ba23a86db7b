from __future__ import annotations

import pytest

from postmark import Render, UnsupportedMacroPropertyError, process
from postmark.macros import (
    BUILTIN_MACROS,
    SoundcloudConfig,
    VimeoConfig,
    YouTubeConfig,
    html_macros,
    parse_boolean,
    parse_color,
    parse_int,
    parse_size,
    soundcloud,
    soundcloud_html,
    vimeo,
    vimeo_html,
    youtube,
    youtube_html,
)
from postmark.macros._common import make_proxy_handler
from postmark.macros.youtube import YouTubeStore, render_html as youtube_iframe


DOCUMENT = "++++\nTitle: T\nAuthor: A\n++++\n{body}\n"


def _render_line(line: str, render: Render) -> str:
    return process(DOCUMENT.format(body=line), render).content


def test_youtube_handler_receives_config() -> None:
    configs: list[YouTubeConfig] = []

    def handler(config: YouTubeConfig) -> str:
        configs.append(config)
        return "video"

    render = Render(macros=(youtube(handler),))
    content = _render_line("{youtube:yMn863_910w|size=560x315|hideRelated|enhancedPrivacy}", render)

    assert content == "video\n"
    assert configs == [
        YouTubeConfig(
            id="yMn863_910w",
            width=560,
            height=315,
            hide_related=True,
            enhanced_privacy=True,
        )
    ]


def test_youtube_defaults() -> None:
    config = YouTubeConfig.from_properties({"": "abc"})

    assert (config.width, config.height) == (600, 340)
    assert not (config.hide_related or config.hide_controls or config.hide_info)
    assert config.enhanced_privacy is False


def test_youtube_html_iframe() -> None:
    render = Render(macros=(youtube_html(),))
    content = _render_line("{youtube:yMn863_910w|size=560x315|hideRelated|enhancedPrivacy}", render)

    assert content == (
        '<iframe width="560" height="315" '
        'src="https://www.youtube-nocookie.com/embed/yMn863_910w?rel=0" '
        'frameborder="0" allowfullscreen></iframe>\n'
    )


def test_youtube_html_query_arguments() -> None:
    config = YouTubeConfig(id="abc", hide_controls=True, hide_info=True, hide_related=True)

    assert "embed/abc?controls=0&amp;showinfo=0&amp;rel=0" in youtube_iframe(config)
    assert "www.youtube.com" in youtube_iframe(config)


def test_youtube_rejects_unknown_properties() -> None:
    render = Render(macros=(youtube_html(),))

    with pytest.raises(UnsupportedMacroPropertyError) as excinfo:
        _render_line("{youtube:abc|autoplay}", render)

    assert excinfo.value.key == "autoplay"


def test_false_flags_stay_disabled() -> None:
    config = YouTubeConfig.from_properties({"": "abc", "hideRelated": "false"})

    assert config.hide_related is False


def test_vimeo_html_iframe() -> None:
    render = Render(macros=(vimeo_html(),))
    content = _render_line("{vimeo:126553902|color=#00adef|loop}", render)

    assert content == (
        '<iframe src="https://player.vimeo.com/video/126553902?color=00adef&amp;loop=1" '
        'width="640" height="360" frameborder="0" '
        "webkitallowfullscreen mozallowfullscreen allowfullscreen></iframe>\n"
    )


def test_vimeo_handler_receives_config() -> None:
    configs: list[VimeoConfig] = []
    render = Render(macros=(vimeo(lambda config: configs.append(config) or "v"),))

    _render_line("{vimeo:1|size=100x50|hidePortrait|hideTitle|hideByline|autoplay}", render)

    assert configs == [
        VimeoConfig(
            id="1",
            width=100,
            height=50,
            hide_portrait=True,
            hide_title=True,
            hide_byline=True,
            autoplay=True,
        )
    ]


def test_soundcloud_config() -> None:
    config = SoundcloudConfig.from_properties({"": "268954121", "width": "300", "autoPlay": "true"})

    assert config == SoundcloudConfig(id="268954121", width=300, auto_play=True)
    assert SoundcloudConfig.from_properties({"": "1", "width": "wide"}).width == 450


def test_soundcloud_html_widget() -> None:
    render = Render(macros=(soundcloud_html(),))
    content = _render_line("{soundcloud:268954121|hideComments}", render)

    assert content.startswith('<iframe width="100%" height="450" scrolling="no"')
    assert "tracks/268954121&amp;auto_play=false" in content
    assert "show_comments=false" in content
    assert "show_user=true" in content
    assert content.endswith("visual=true\"></iframe>\n")


def test_soundcloud_handler() -> None:
    render = Render(macros=(soundcloud(lambda config: f"track {config.id}"),))

    assert _render_line("{soundcloud:42}", render) == "track 42\n"


def test_families_can_be_combined() -> None:
    render = Render(macros=(youtube(lambda c: f"yt {c.id}"), vimeo(lambda c: f"vm {c.id}")))

    assert _render_line("{youtube:a}", render) == "yt a\n"
    assert _render_line("{vimeo:b}", render) == "vm b\n"


def test_proxy_ignores_foreign_store() -> None:
    proxy = make_proxy_handler(YouTubeStore, YouTubeConfig.from_properties, youtube_iframe)

    assert proxy(object(), "", {"": "abc"}) == ""
    assert proxy(YouTubeStore(), "", {"": "abc"}) == ""


def test_builtin_catalogue() -> None:
    assert sorted(BUILTIN_MACROS) == ["soundcloud", "vimeo", "youtube"]
    assert [macro.name for macro in html_macros(["vimeo", "youtube"])] == ["vimeo", "youtube"]

    with pytest.raises(ValueError, match="dailymotion"):
        html_macros(["dailymotion"])


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, (1, 2)), ("", (1, 2)), ("560x315", (560, 315)), ("560", (1, 2)), ("axb", (1, 2))],
)
def test_parse_size(value: str | None, expected: tuple[int, int]) -> None:
    assert parse_size(value, 1, 2) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("", False), ("false", False), ("true", True), ("1", True)],
)
def test_parse_boolean(value: str | None, expected: bool) -> None:
    assert parse_boolean(value) is expected


def test_parse_int_and_color() -> None:
    assert parse_int("12", 5) == 12
    assert parse_int("x", 5) == 5
    assert parse_int(None, 5) == 5
    assert parse_color("#00adef") == "00adef"
    assert parse_color(None) == ""
