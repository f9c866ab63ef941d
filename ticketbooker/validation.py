"""Input checks and yes/no prompts."""

from __future__ import annotations

import string
import unicodedata

from .constants import CYAN, RESET, YES_NO_HINT

_ASCII_DIGITS = frozenset(string.digits)
_ASCII_LETTERS = frozenset(string.ascii_letters)
_NAME_PUNCTUATION = frozenset(" '.-")


def is_alpha(text: str) -> bool:
    """True if the text is non-empty and holds only ASCII letters."""
    return bool(text) and all(char in _ASCII_LETTERS for char in text)


def is_number(text: str) -> bool:
    """True if the text is non-empty and holds only ASCII digits."""
    return bool(text) and all(char in _ASCII_DIGITS for char in text)


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def _is_letter_or_mark(char: str) -> bool:
    return unicodedata.category(char)[0] in "LM"


def is_valid_name(text: str) -> bool:
    """True if the text looks like a personal name.

    A name starts with a letter, ends with a letter or combining mark, and in
    between holds letters, marks, spaces, apostrophes, dots and hyphens.
    """
    if not text or not _is_letter(text[0]):
        return False
    if len(text) == 1:
        return True
    return _is_letter_or_mark(text[-1]) and all(
        _is_letter_or_mark(char) or char in _NAME_PUNCTUATION for char in text[1:-1]
    )


def is_positive_number(text: str) -> bool:
    """True if the text is a whole number greater than zero."""
    return is_number(text) and int(text) > 0


def ask_yes_no(prompt: str) -> str:
    """Ask until the user answers yes or no; return 'Y' or 'N'."""
    while True:
        answer = input(prompt)
        if is_alpha(answer):
            answer = answer.upper()
            if answer in ("Y", "YES"):
                return "Y"
            if answer in ("N", "NO"):
                return "N"
        print(f"\nInvalid input. Please enter {CYAN}Y{RESET} or {CYAN}N{RESET}.")


def confirm(prompt: str) -> bool:
    """Ask a yes/no question and return True for yes."""
    return ask_yes_no(prompt) == "Y"


def prompt_retry() -> bool:
    """Ask whether to try again."""
    return confirm(f"\nTry again? {YES_NO_HINT}: ")


def read_ticket_number(prompt: str = "\nEnter your ticket number: ") -> str:
    """Read a ticket number as typed."""
    return input(prompt)