"""Interactive menu for deleting an event."""

from __future__ import annotations

import time
from pathlib import Path

from .console import clear_screen
from .constants import PARENT_DIRECTORY, RED, RESET, YELLOW, YES_NO_HINT
from .datafile import PathType
from .events import EventDirectoryError, EventPurpose, choose_event, delete_event_folder
from .validation import confirm

_CONTINUE_PROMPT = f"\nContinue? {YES_NO_HINT}: "


def delete_event_menu(parent_directory: PathType = PARENT_DIRECTORY) -> None:
    """Let the user pick an event and delete it after two confirmations."""
    parent = Path(parent_directory)
    while True:
        clear_screen()
        try:
            event_folder = choose_event(EventPurpose.DELETE, parent)
        except EventDirectoryError:
            return
        if event_folder is None:
            return

        event_name = event_folder.name
        source = parent / event_name
        if not source.exists():
            print(
                f"{RED}Error: {RESET}{YELLOW}{event_name}{RESET}"
                f"{RED} does not exist.\n{RESET}"
            )
            time.sleep(1)
            if not confirm(_CONTINUE_PROMPT):
                return
            continue

        first = (
            f"\n{RED}Are you sure you want to delete {RESET}{YELLOW}{event_name}"
            f"{RESET}{RED} ?{RESET} {YES_NO_HINT}: "
        )
        if not confirm(first):
            return
        second = (
            f"\n{RED}Are you really sure you want to delete {RESET}{YELLOW}"
            f"{event_name}{RESET}{RED} ? PROCEED WITH EXTREME CAUTION! THIS ACTION "
            f"IS IRREVERSIBLE!{RESET} {YES_NO_HINT}: "
        )
        if not confirm(second):
            return

        if delete_event_folder(source):
            return
        print(f"{RED}\nFailed to delete files.{RESET}")
        time.sleep(1)
        if not confirm(_CONTINUE_PROMPT):
            return