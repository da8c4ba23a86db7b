from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import postmark
from postmark.ui.cli import app
from postmark.ui.cli.commands.check import validity_problems
from postmark.ui.cli.presenter import metadata_rows


VALID_POST = (
    "++++\n"
    "Title: Hello\n"
    "Author: Jane Doe\n"
    "Date: 2015/09/24 22:18\n"
    "Tags: intro news\n"
    "++++\n"
    "h1. Welcome\n"
    "Some *bold* words.\n"
    "{youtube:abc}\n"
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def post_file(tmp_path: Path) -> Path:
    path = tmp_path / "post.txt"
    path.write_text(VALID_POST, encoding="utf-8")
    return path


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_render_to_stdout(runner: CliRunner, post_file: Path) -> None:
    result = runner.invoke(app, ["render", str(post_file)])

    assert result.exit_code == 0, result.output
    assert "<h1>Welcome</h1>" in result.output
    assert "<p>Some <strong>bold</strong> words.</p>" in result.output
    assert "iframe" not in result.output


def test_render_with_macro_option(runner: CliRunner, post_file: Path) -> None:
    result = runner.invoke(app, ["render", str(post_file), "--macro", "youtube"])

    assert result.exit_code == 0, result.output
    assert "https://www.youtube.com/embed/abc" in result.output


def test_render_with_config_file(runner: CliRunner, tmp_path: Path, post_file: Path) -> None:
    config = _write(tmp_path, "postmark.yml", "macros: [youtube]\nheader_offset: 1\n")

    result = runner.invoke(app, ["render", str(post_file), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "<h2>Welcome</h2>" in result.output
    assert "youtube.com/embed/abc" in result.output


def test_render_to_file(runner: CliRunner, tmp_path: Path, post_file: Path) -> None:
    output = tmp_path / "out" / "post.html"

    result = runner.invoke(app, ["render", str(post_file), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8").startswith("<h1>Welcome</h1>\n")
    assert "Wrote" in result.output


def test_render_with_metadata_table(runner: CliRunner, post_file: Path) -> None:
    result = runner.invoke(app, ["render", str(post_file), "--meta"])

    assert result.exit_code == 0, result.output
    assert "Jane Doe" in result.output
    assert "intro news" in result.output


def test_render_reports_html_errors(runner: CliRunner, tmp_path: Path) -> None:
    path = _write(tmp_path, "bad.txt", "++++\nTitle: T\n++++\n<script>x</script>\n")

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1
    assert "HTML markup is not allowed" in result.output
    assert "line 4" in result.output


def test_render_reports_invalid_utf8(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"++++\nTitle: T\n++++\ncaf\xe9\n")

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_render_allow_html_flag(runner: CliRunner, tmp_path: Path) -> None:
    path = _write(tmp_path, "raw.txt", "++++\nTitle: T\n++++\n<em>ok</em>\n")

    result = runner.invoke(app, ["render", str(path), "--allow-html"])

    assert result.exit_code == 0, result.output
    assert "<p><em>ok</em></p>" in result.output


def test_render_rejects_invalid_config(runner: CliRunner, tmp_path: Path, post_file: Path) -> None:
    config = _write(tmp_path, "bad.yml", "macros: [dailymotion]\n")

    result = runner.invoke(app, ["render", str(post_file), "--config", str(config)])

    assert result.exit_code == 1
    assert "dailymotion" in result.output


def test_check_valid_post(runner: CliRunner, post_file: Path) -> None:
    result = runner.invoke(app, ["check", str(post_file)])

    assert result.exit_code == 0, result.output
    assert "post.txt is valid" in result.output


def test_check_incomplete_post(runner: CliRunner, tmp_path: Path) -> None:
    path = _write(tmp_path, "draft.txt", "++++\nTitle: Draft\n++++\nBody\n")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "missing author" in result.output


def test_macros_command_lists_builtins(runner: CliRunner) -> None:
    result = runner.invoke(app, ["macros"])

    assert result.exit_code == 0, result.output
    for name in ("youtube", "vimeo", "soundcloud"):
        assert name in result.output


def test_version_flag(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == postmark.get_version()


def test_validity_problems() -> None:
    post = postmark.Post(meta=postmark.PostMeta(), content="")

    assert validity_problems(post) == ["missing title", "missing author", "empty content"]


def test_metadata_rows_formats_values() -> None:
    meta = postmark.PostMeta(title="T", tags=("a", "b"), protected=True)

    rows = dict(metadata_rows(meta))

    assert rows["Tags"] == "a b"
    assert rows["Protected"] == "yes"
    assert rows["Type"] == "post"
