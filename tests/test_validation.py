import pytest

from ticketbooker.validation import (
    ask_yes_no,
    confirm,
    is_alpha,
    is_number,
    is_positive_number,
    is_valid_name,
    prompt_retry,
    read_ticket_number,
)


def _feed(monkeypatch, answers):
    replies = iter(answers)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(replies)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


@pytest.mark.parametrize("text,expected", [("abc", True), ("AbC", True), ("", False), ("ab1", False), ("a b", False)])
def test_is_alpha(text, expected):
    assert is_alpha(text) is expected


@pytest.mark.parametrize("text,expected", [("123", True), ("0", True), ("", False), ("-1", False), ("1.5", False)])
def test_is_number(text, expected):
    assert is_number(text) is expected


@pytest.mark.parametrize("text,expected", [("5", True), ("015", True), ("0", False), ("", False), ("x", False)])
def test_is_positive_number(text, expected):
    assert is_positive_number(text) is expected


@pytest.mark.parametrize(
    "text",
    ["Ada", "A", "Ada Lovelace", "O'Brien", "Jean-Luc", "J. Smith", "Zoë", "e\u0301"],
)
def test_valid_names(text):
    assert is_valid_name(text) is True


@pytest.mark.parametrize("text", ["", " Ada", "Ada ", "Ada-", "1Ada", "Ada2", "\u0301a"])
def test_invalid_names(text):
    assert is_valid_name(text) is False


def test_ask_yes_no_retries_until_valid(monkeypatch, capsys):
    prompts = _feed(monkeypatch, ["maybe", "1", "yes"])
    assert ask_yes_no("Go? ") == "Y"
    assert prompts == ["Go? "] * 3
    assert capsys.readouterr().out.count("Invalid input") == 2


@pytest.mark.parametrize("answer,expected", [("y", "Y"), ("Yes", "Y"), ("n", "N"), ("NO", "N")])
def test_ask_yes_no_answers(monkeypatch, answer, expected):
    _feed(monkeypatch, [answer])
    assert ask_yes_no("? ") == expected


def test_confirm(monkeypatch):
    _feed(monkeypatch, ["n", "y"])
    assert confirm("? ") is False
    assert confirm("? ") is True


def test_prompt_retry(monkeypatch):
    prompts = _feed(monkeypatch, ["yes"])
    assert prompt_retry() is True
    assert "Try again?" in prompts[0]


def test_read_ticket_number(monkeypatch):
    prompts = _feed(monkeypatch, ["Show-1-2-abcd"])
    assert read_ticket_number() == "Show-1-2-abcd"
    assert prompts == ["\nEnter your ticket number: "]


def test_eof_propagates(monkeypatch):
    def fake_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    with pytest.raises(EOFError):
        confirm("? ")