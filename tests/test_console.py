import io

import pytest

from authorcompany.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_ask_strips_newline_and_echoes_prompt():
    console, out = make("Alice\n")
    assert console.ask("Name? ") == "Alice"
    assert out.getvalue() == "Name? "


def test_ask_without_trailing_newline():
    console, _ = make("Bob")
    assert console.ask("? ") == "Bob"


def test_ask_keeps_inner_spaces():
    console, _ = make("  two words \n")
    assert console.ask("? ") == "  two words "


def test_ask_at_end_of_input_raises():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.ask("? ")


def test_ask_int_then_ask():
    console, _ = make("42\nParis\n")
    assert console.ask_int("Age? ") == 42
    assert console.ask("Where? ") == "Paris"


def test_ask_int_negative_and_leading_space():
    console, _ = make("   -7\n")
    assert console.ask_int("? ") == -7


def test_ask_int_skips_blank_lines():
    console, _ = make("\n\n19\n")
    assert console.ask_int("? ") == 19


def test_ask_int_leftover_goes_to_next_question():
    console, _ = make("30 xyz\nnext\n")
    assert console.ask_int("? ") == 30
    assert console.ask("? ") == "xyz"
    assert console.ask("? ") == "next"


def test_ask_int_rejects_text():
    console, _ = make("abc\n")
    with pytest.raises(ValueError):
        console.ask_int("? ")


def test_ask_int_at_end_of_input_raises():
    console, _ = make("\n")
    with pytest.raises(EOFError):
        console.ask_int("? ")


def test_say_and_write():
    console, out = make("")
    console.write("a")
    console.say("b")
    console.say()
    assert out.getvalue() == "ab\n\n"