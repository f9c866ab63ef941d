"""Checking ticket holders in at the door."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from .console import clear_screen
from .constants import (
    CHECKED_IN,
    CHECKED_IN_DATA_FILE,
    NAMES_DATA_FILE,
    NOT_CHECKED_IN,
    PARENT_DIRECTORY,
    RED,
    RESET,
    TICKET_DATA_FILE,
    YELLOW,
    Matrix,
)
from .datafile import (
    DataFileError,
    PathType,
    event_name_from_ticket,
    find_ticket,
    load_matrix,
    update_and_save,
)
from .validation import prompt_retry, read_ticket_number


@dataclass(frozen=True)
class CheckInResult:
    """Who holds a checked ticket, where they sit, and whether they came before."""

    name: str
    row: int
    column: int
    already_checked_in: bool


def _load(path: Path, label: str) -> Matrix:
    try:
        return load_matrix(path)
    except DataFileError as err:
        raise DataFileError(f"Failed to load {label} data.") from err


def check_in_ticket(
    ticket_number: str, parent_directory: PathType = PARENT_DIRECTORY
) -> CheckInResult | None:
    """Check in the holder of a ticket.

    Returns None when the ticket was never issued. Raises DataFileError when
    the event's data files cannot be read or written.
    """
    folder = Path(parent_directory) / event_name_from_ticket(ticket_number)
    check_in_file = folder / CHECKED_IN_DATA_FILE
    customer_info = _load(folder / NAMES_DATA_FILE, "customer")
    issued_tickets = _load(folder / TICKET_DATA_FILE, "ticket")
    checked_in = _load(check_in_file, "check in")

    location = find_ticket(issued_tickets, ticket_number)
    if location is None:
        return None
    row, column = location
    name = customer_info[row][column]
    if checked_in[row][column] == NOT_CHECKED_IN:
        update_and_save(checked_in, check_in_file, row, column, CHECKED_IN)
        return CheckInResult(name, row, column, already_checked_in=False)
    return CheckInResult(name, row, column, already_checked_in=True)


def _report(result: CheckInResult) -> None:
    print(f"\nHello, {YELLOW}{result.name}{RESET}!")
    if result.already_checked_in:
        print("You have already checked in.")
    else:
        print("Thank you for checking in!")
    print(
        f"Your seat is row {YELLOW}{result.row}{RESET} and column "
        f"{YELLOW}{result.column}{RESET}."
    )
    if not result.already_checked_in:
        print("Enjoy the event!")


def check_in_menu(
    parent_directory: PathType = PARENT_DIRECTORY,
) -> CheckInResult | None:
    """Ask for ticket numbers until one is checked in or the user gives up."""
    while True:
        clear_screen()
        print("--------------------------------------")
        print("             CHECK IN MENU")
        print("--------------------------------------")
        ticket_number = read_ticket_number(
            "Please enter your ticket number to enter: "
        )
        if not ticket_number:
            print("Invalid ticket number.")
            if not prompt_retry():
                return None
            continue

        try:
            result = check_in_ticket(ticket_number, parent_directory)
        except DataFileError as err:
            print(f"{RED}{err}{RESET}")
            time.sleep(1)
            if not prompt_retry():
                return None
            continue

        if result is not None:
            _report(result)
            time.sleep(5)
            return result

        print(f"{RED}Ticket number not found.{RESET}")
        time.sleep(1)
        if not prompt_retry():
            return None