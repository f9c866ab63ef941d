"""Interactive menu for creating a new event."""

from __future__ import annotations

import time
from pathlib import Path

from .console import clear_screen
from .constants import GREEN, PARENT_DIRECTORY, RED, RESET, YELLOW, YES_NO_HINT
from .creator import create_event_folder
from .datafile import PathType
from .events import delete_event_folder
from .generator import prompt_venue_size
from .validation import confirm

_CONTINUE_PROMPT = f"\nContinue? {YES_NO_HINT}: "


def _read_event_name() -> str | None:
    attempts = 0
    while True:
        clear_screen()
        print("--------------------------------------")
        print("           EVENT CREATOR MENU")
        print("--------------------------------------")
        if attempts > 0 and not confirm(_CONTINUE_PROMPT):
            return None
        attempts += 1
        name = input("\nNew event name: ")
        if not name:
            print("\nPlease enter a valid event name")
            continue
        if confirm(f"\nIs {YELLOW}{name}{RESET} the correct event name? {YES_NO_HINT}: "):
            return name


def _build_event(event_name: str, folder: Path) -> None:
    venue = prompt_venue_size()
    try:
        created = create_event_folder(event_name, venue, folder)
    except (OSError, ValueError):
        created = False
    if created:
        print(f"{GREEN}\nFiles created successfully.{RESET}")
    else:
        print(f"{RED}\nFailed to create files.{RESET}")
    time.sleep(1)


def create_event_menu(parent_directory: PathType = PARENT_DIRECTORY) -> None:
    """Ask for an event name and venue size, then create the event's files."""
    event_name = _read_event_name()
    if event_name is None:
        return
    folder = Path(parent_directory) / event_name
    if not folder.exists():
        _build_event(event_name, folder)
        return

    print(f"{RED}\nFolder already exists.{RESET}")
    if not confirm(_CONTINUE_PROMPT):
        return
    if not delete_event_folder(folder):
        print(f"{RED}\nFailed to delete files.{RESET}")
        return
    _build_event(event_name, folder)