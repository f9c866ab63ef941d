"""The main menu and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable

from .booking import event_booking_menu
from .checkin import check_in_menu
from .console import clear_screen, startup_loader
from .constants import PARENT_DIRECTORY, RED, RESET, YELLOW
from .creator_menu import create_event_menu
from .datafile import PathType
from .delete_menu import delete_event_menu
from .editor_menu import rename_event_menu
from .refund import refund_ticket_menu
from .validation import is_number

_ACTIONS: tuple[tuple[str, Callable[[PathType], object]], ...] = (
    ("Book a ticket", event_booking_menu),
    ("Check In Desk", check_in_menu),
    ("Refund Ticket", refund_ticket_menu),
    ("Create an event", create_event_menu),
    ("Rename an event", rename_event_menu),
    ("Delete an Event", delete_event_menu),
)
_EXIT_LABEL = "Exit"
NUMBER_OF_OPTIONS = len(_ACTIONS) + 1


def display_main_menu() -> None:
    """Print the main menu."""
    print("======================================")
    print("          TICKET BOOKER SYSTEM")
    print("======================================")
    print("\n               MAIN MENU")
    print("--------------------------------------")
    labels = [label for label, _ in _ACTIONS] + [_EXIT_LABEL]
    for number, label in enumerate(labels, start=1):
        print(f"  {YELLOW}{number}{RESET}. {label}")
    print("--------------------------------------")


def read_menu_choice() -> int:
    """Ask until the user enters a valid menu number."""
    while True:
        answer = input("\nEnter your choice: ")
        if is_number(answer):
            choice = int(answer)
            if 1 <= choice <= NUMBER_OF_OPTIONS:
                return choice
            continue
        print(
            f"{RED}\nInvalid input. Please enter a valid number between {RESET}"
            f"{YELLOW}1{RESET} and {RESET}{YELLOW}{NUMBER_OF_OPTIONS}{RESET}"
            f"{RED} to exit.\n{RESET}",
            end="",
            file=sys.stderr,
        )
        time.sleep(1)


def main_menu(parent_directory: PathType = PARENT_DIRECTORY) -> None:
    """Show the main menu and run the chosen screens until the user exits."""
    while True:
        clear_screen()
        display_main_menu()
        choice = read_menu_choice()
        if choice == NUMBER_OF_OPTIONS:
            print("\nThank you for using Ticket Booker!\n\n")
            return
        _, action = _ACTIONS[choice - 1]
        action(parent_directory)


def main(argv: list[str] | None = None) -> int:
    """Run the ticket booker."""
    parser = argparse.ArgumentParser(
        prog="ticketbooker",
        description="Book tickets for events and manage the events on offer.",
    )
    parser.add_argument(
        "--data-dir",
        default=str(PARENT_DIRECTORY),
        help="folder holding one sub-folder per event (default: %(default)s)",
    )
    parser.add_argument(
        "--no-intro",
        action="store_true",
        help="skip the start-up animation",
    )
    args = parser.parse_args(argv)
    if not args.no_intro:
        startup_loader()
    main_menu(args.data_dir)
    return 0