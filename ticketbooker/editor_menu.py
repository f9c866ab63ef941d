"""Interactive menu for renaming an event."""

from __future__ import annotations

import errno
import os
import shutil
import sys
import time
from pathlib import Path

from .constants import GREEN, PARENT_DIRECTORY, RED, RESET, YELLOW, YES_NO_HINT
from .datafile import PathType
from .events import EventDirectoryError, EventPurpose, choose_event
from .validation import confirm

_CONTINUE_PROMPT = f"\nContinue? {YES_NO_HINT}: "


def _print_error(message: str) -> None:
    print(f"{RED}\nError: {RESET}{YELLOW}{message}{RESET}", file=sys.stderr)


def copy_directory(source: PathType, destination: PathType) -> None:
    """Copy a folder tree into `destination`, overwriting files already there."""
    Path(destination).mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, destination, dirs_exist_ok=True)


def prompt_nonempty(prompt: str) -> str:
    """Ask until the user types something."""
    while True:
        answer = input(prompt)
        if answer:
            return answer
        _print_error("Invalid input. Please enter a valid value.\n")


def rename_event_folder(source: PathType, destination: PathType) -> None:
    """Rename a folder, copying it across when it lives on another device."""
    try:
        os.rename(source, destination)
    except OSError as err:
        if err.errno != errno.EXDEV:
            raise
        copy_directory(source, destination)
        try:
            shutil.rmtree(source)
        except OSError as remove_err:
            print(f"Filesystem error: {remove_err}", file=sys.stderr)


def _remove_existing(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except OSError as err:
        print(f"Filesystem error: {err}", file=sys.stderr)


def rename_event_menu(parent_directory: PathType = PARENT_DIRECTORY) -> None:
    """Let the user pick an event and give it a new name."""
    parent = Path(parent_directory)
    while True:
        try:
            event_folder = choose_event(EventPurpose.EDITOR, parent)
        except EventDirectoryError:
            return
        if event_folder is None:
            return

        event_name = event_folder.name
        source = parent / event_name
        if not source.exists():
            _print_error(f"{event_name} does not exist.")
            time.sleep(1)
            if not confirm(_CONTINUE_PROMPT):
                return
            continue

        new_name = prompt_nonempty("\nWhat would you like to rename it to? ")
        destination = parent / new_name

        if destination.exists():
            _print_error(
                f"{RESET}A folder with the name {YELLOW}{new_name}{RESET} already exists."
            )
            if not confirm(_CONTINUE_PROMPT):
                return
            _remove_existing(destination)

        try:
            rename_event_folder(source, destination)
        except OSError as err:
            print(f"Error during rename: {err}", file=sys.stderr)
        else:
            print(f"{GREEN}\nFolder renamed successfully{RESET}")
        time.sleep(1)
        return