"""Tests for theme helpers (colour is disabled for the test session)."""

from __future__ import annotations

from pathlib import Path

import pytest

import theme
from theme import color, load_env_overrides, normalize_hex, parse_env_file, resolve_hex


def test_color_is_plain_when_disabled() -> None:
    assert theme._ENABLE is False
    assert color("text", theme.BOLD) == "text"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#A7E399", "#A7E399"),
        ("a7e399", "#a7e399"),
        (" #123abc ", "#123abc"),
        ("#12345", None),
        ("zzzzzz", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_hex(value: str | None, expected: str | None) -> None:
    assert normalize_hex(value) == expected


def test_parse_env_file_keeps_valid_palette_keys() -> None:
    text = "\n".join(
        [
            "# comment",
            "TASKS_PRIMARY=#112233",
            "TASKS_DONE = 445566",
            "TASKS_PENDING=nothex",
            "OTHER_KEY=#778899",
            "garbage line",
        ]
    )
    assert parse_env_file(text) == {"TASKS_PRIMARY": "#112233", "TASKS_DONE": "#445566"}


def test_resolve_hex_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    overrides = {"TASKS_DONE": "#445566"}
    monkeypatch.delenv("TASKS_DONE", raising=False)
    assert resolve_hex("TASKS_DONE", "#000000", overrides) == "#445566"
    assert resolve_hex("TASKS_DONE", "#000000", {}) == "#000000"
    monkeypatch.setenv("TASKS_DONE", "#abcdef")
    assert resolve_hex("TASKS_DONE", "#000000", overrides) == "#abcdef"
    monkeypatch.setenv("TASKS_DONE", "bogus")
    assert resolve_hex("TASKS_DONE", "#000000", overrides) == "#445566"


def test_256_color_approximation() -> None:
    assert theme._fg_256(255, 255, 255) == "\033[38;5;231m"
    assert theme._fg_256(0, 0, 0) == "\033[38;5;16m"


def test_load_env_overrides(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    assert load_env_overrides(env) == {}
    env.write_text("TASKS_DUE_SOON=#010203\n", encoding="utf-8")
    assert load_env_overrides(env) == {"TASKS_DUE_SOON": "#010203"}


def test_load_env_overrides_ignores_undecodable_file(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    env.write_bytes(b"TASKS_DONE=#\xff\xfe\xfd\n")
    assert load_env_overrides(env) == {}
