from __future__ import annotations

import re
from dataclasses import FrozenInstanceError

import pytest

from greeting_printer.domain import GREETINGS, Greeting, summary_line

LINE_RE = re.compile(r"^(\d+)\. \[([^\]]+)\] (\S.*\S|\S)$")


def test_sequence_holds_five_greetings() -> None:
    assert len(GREETINGS) == 5


def test_ids_match_one_based_position() -> None:
    assert [greeting.id for greeting in GREETINGS] == list(range(1, len(GREETINGS) + 1))


def test_sequence_keeps_display_order() -> None:
    assert [greeting.language for greeting in GREETINGS] == ["English", "Spanish", "French", "German", "Italian"]


@pytest.mark.parametrize(
    "greeting, line",
    [
        (GREETINGS[0], "1. [English] Hello, World!"),
        (GREETINGS[1], "2. [Spanish] Hola, Mundo!"),
        (GREETINGS[2], "3. [French] Bonjour, le Monde!"),
        (GREETINGS[3], "4. [German] Hallo, Welt!"),
        (GREETINGS[4], "5. [Italian] Ciao, Mondo!"),
    ],
)
def test_format_line_renders_exact_text(greeting: Greeting, line: str) -> None:
    assert greeting.format_line() == line


@pytest.mark.parametrize("greeting", GREETINGS)
def test_format_line_has_no_stray_whitespace(greeting: Greeting) -> None:
    match = LINE_RE.match(greeting.format_line())
    assert match is not None
    assert match.groups() == (str(greeting.id), greeting.language, greeting.message)


def test_greeting_is_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        GREETINGS[0].message = "Howdy"  # type: ignore[misc]


def test_sequence_is_a_tuple() -> None:
    assert isinstance(GREETINGS, tuple)


@pytest.mark.parametrize("bad_id", [0, -1, True, "1"])
def test_rejects_non_positive_or_non_integer_ids(bad_id: object) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        Greeting(bad_id, "English", "Hello")  # type: ignore[arg-type]


def test_rejects_blank_language() -> None:
    with pytest.raises(ValueError, match="language"):
        Greeting(1, "  ", "Hello")


def test_rejects_blank_message() -> None:
    with pytest.raises(ValueError, match="message"):
        Greeting(1, "English", "")


def test_to_dict_exposes_all_fields() -> None:
    assert GREETINGS[2].to_dict() == {"id": 3, "language": "French", "message": "Bonjour, le Monde!"}


def test_summary_line_uses_decimal_count() -> None:
    assert summary_line(5) == "Total greetings: 5"
    assert summary_line(12) == "Total greetings: 12"
