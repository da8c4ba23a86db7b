from __future__ import annotations

from typing import Any

import pytest

from postmark import (
    Macro,
    MacroHandlerMissingError,
    Render,
    UnsupportedMacroPropertyError,
    parse_properties,
)
from postmark.core.context import RenderContext
from postmark.core.macros import MacroCall, invoke_macro, is_macro_line, resolve_macro


def _echo(body: str, properties: dict[str, str]) -> str:
    return f"{body}|{sorted(properties.items())}"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, {}),
        ("", {}),
        ("a", {"": "a"}),
        ("a|x=1|y", {"": "a", "x": "1", "y": "true"}),
        ("x=1|a|b", {"x": "1", "": "a", "b": "true"}),
        ("url=https://x.org/?q=1", {"url": "https://x.org/?q=1"}),
        (" a | x = 1 || y ", {"": "a", "x": "1", "y": "true"}),
    ],
)
def test_parse_properties(text: str | None, expected: dict[str, str]) -> None:
    assert parse_properties(text) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("{note}", True),
        ("  {youtube:abc|size=1x2}  ", True),
        ("{a}", False),
        ("{Note}", False),
        ("text {note}", False),
        ("{note} text", False),
    ],
)
def test_is_macro_line(line: str, expected: bool) -> None:
    assert is_macro_line(line) is expected


def test_resolve_macro_known_and_unknown() -> None:
    context = RenderContext.from_render(Render(macros=(Macro(name="note", multiline=True),)))

    known = resolve_macro("{note:warning}", context, line=7)
    unknown = resolve_macro("{other}", context)

    assert known is not None and known.known and known.multiline
    assert known.properties == {"": "warning"}
    assert known.line == 7
    assert unknown is not None and not unknown.known
    assert resolve_macro("plain text", context) is None


def test_whitelist_rejects_unknown_keys() -> None:
    macro = Macro(name="video", handler=_echo, properties=("size",))
    context = RenderContext.from_render(Render(macros=(macro,)))

    with pytest.raises(UnsupportedMacroPropertyError) as excinfo:
        resolve_macro("{video:abc|size=1x2|color=red}", context, line=3)

    assert excinfo.value.key == "color"
    assert excinfo.value.macro == "video"
    assert excinfo.value.line == 3


def test_empty_whitelist_accepts_anything() -> None:
    macro = Macro(name="video", handler=_echo)

    macro.check_properties({"": "id", "anything": "true"})


def test_direct_handler_gets_empty_body_for_simple_macros() -> None:
    macro = Macro(name="simple", handler=_echo)
    context = RenderContext.from_render(Render(macros=(macro,)))
    call = MacroCall(name="simple", macro=macro, properties={"": "x"}, body_lines=["ignored"])

    assert invoke_macro(call, context) == "|[('', 'x')]"


def test_proxy_handler_receives_store() -> None:
    seen: list[Any] = []

    def proxy(store: Any, body: str, properties: dict[str, str]) -> str:
        seen.append((store, body, properties))
        return "proxied"

    store = object()
    macro = Macro(name="proxy", proxy_handler=proxy, store=store)

    handler = macro.bound_handler()

    assert handler("", {"k": "v"}) == "proxied"
    assert seen == [(store, "", {"k": "v"})]


def test_direct_handler_wins_over_proxy() -> None:
    macro = Macro(
        name="both",
        handler=lambda body, props: "direct",
        proxy_handler=lambda *args: "proxy",
    )

    assert macro.bound_handler()("", {}) == "direct"


def test_missing_handler_raises() -> None:
    macro = Macro(name="broken")

    with pytest.raises(MacroHandlerMissingError) as excinfo:
        macro.bound_handler(line=12)

    assert excinfo.value.line == 12


def test_unknown_macro_without_callback_returns_none() -> None:
    context = RenderContext.from_render(Render(macros=(Macro(name="known", handler=_echo),)))

    assert invoke_macro(MacroCall(name="other", macro=None), context) is None


def test_handler_receives_a_copy_of_properties() -> None:
    def mutate(body: str, properties: dict[str, str]) -> str:
        properties["extra"] = "1"
        return ""

    macro = Macro(name="mutate", handler=mutate)
    context = RenderContext.from_render(Render(macros=(macro,)))
    call = MacroCall(name="mutate", macro=macro, properties={"": "a"})

    invoke_macro(call, context)

    assert call.properties == {"": "a"}


def test_duplicate_macro_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="more than once"):
        Render(macros=(Macro(name="dup", handler=_echo), Macro(name="dup", handler=_echo)))
