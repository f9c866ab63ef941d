"""Finding, listing, choosing and deleting event folders."""

from __future__ import annotations

import shutil
import sys
import time
from enum import Enum
from pathlib import Path

from .console import clear_screen
from .constants import PARENT_DIRECTORY, RED, RESET, YELLOW
from .datafile import PathType
from .validation import is_number

_MENU_WIDTH = 40


class EventPurpose(Enum):
    """What the user is choosing an event for."""

    BOOKING = "booking"
    EDITOR = "editor"
    DELETE = "delete"

    @property
    def menu_title(self) -> str:
        return _MENU_TITLES[self]

    @property
    def list_heading(self) -> str:
        if self is EventPurpose.BOOKING:
            return "These are the events we have available:"
        return "Available Events"

    @property
    def selection_prompt(self) -> str:
        return f"\nEnter the number of the event you want to {_ACTIONS[self]}."


_MENU_TITLES = {
    EventPurpose.BOOKING: "EVENT BOOKING MENU",
    EventPurpose.EDITOR: "RENAME EVENT MENU",
    EventPurpose.DELETE: "DELETE EVENT MENU",
}

_ACTIONS = {
    EventPurpose.BOOKING: "open",
    EventPurpose.EDITOR: "rename",
    EventPurpose.DELETE: "delete",
}


class EventDirectoryError(OSError):
    """Raised when the folder holding the events cannot be read."""


def find_events(folder_path: PathType) -> list[str]:
    """Return the names of the event folders inside `folder_path`."""
    try:
        return [entry.name for entry in Path(folder_path).iterdir() if entry.is_dir()]
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        raise EventDirectoryError(f"Cannot read event folder: {folder_path}") from err


def list_events(event_names: list[str], purpose: EventPurpose) -> list[str]:
    """Print the numbered, sorted list of events and return it in that order.

    Returns an empty list, after telling the user, when there are no events.
    """
    if not event_names:
        print("We are sorry. We don't have any events right now.\n", file=sys.stderr)
        time.sleep(1)
        return []

    ordered = sorted(event_names)
    title = purpose.menu_title
    padding = (_MENU_WIDTH - len(title)) // 2
    clear_screen()
    print("--------------------------------------")
    print(title.rjust(padding + len(title)))
    print("--------------------------------------")
    print(purpose.list_heading)
    for number, name in enumerate(ordered, start=1):
        print(f"{YELLOW}{number}{RESET}. {name}")
    print()
    return ordered


def select_event(event_names: list[str], purpose: EventPurpose) -> int:
    """Ask for an event number; return 1..len(event_names), or 0 to go back."""
    max_events = len(event_names)
    while True:
        answer = input(
            f"{purpose.selection_prompt}\nEnter {RED}0 {RESET}to return to main menu: "
        )
        if is_number(answer):
            choice = int(answer)
            if choice == 0 or 1 <= choice <= max_events:
                return choice
            continue
        print(
            f"\nInvalid input. Please enter a valid number between "
            f"{YELLOW}1{RESET} and {YELLOW}{max_events}{RESET}, or "
            f"{RED}0{RESET} to return to main menu."
        )
        time.sleep(1)


def choose_event(
    purpose: EventPurpose, parent_directory: PathType = PARENT_DIRECTORY
) -> Path | None:
    """Let the user pick an event folder.

    Returns the folder's path, or None when there are no events or the user
    goes back. Raises EventDirectoryError when the events cannot be listed.
    """
    names = find_events(parent_directory)
    clear_screen()
    shown = list_events(names, purpose)
    if not shown:
        return None
    choice = select_event(shown, purpose)
    if choice == 0:
        return None
    return Path(parent_directory) / shown[choice - 1]


def delete_event_folder(folder_path: PathType) -> bool:
    """Delete an event folder and everything in it; False if that failed."""
    path = Path(folder_path)
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
    except OSError as err:
        print(f"Filesystem error: {err}", file=sys.stderr)
        return False
    return True