"""Refunding tickets that have not been used yet."""

from __future__ import annotations

import time
from enum import Enum
from pathlib import Path

from .console import clear_screen
from .constants import (
    AVAILABLE,
    CHECKED_IN_DATA_FILE,
    EMPTY,
    GREEN,
    NAMES_DATA_FILE,
    NOT_CHECKED_IN,
    PARENT_DIRECTORY,
    RED,
    RESET,
    SOLD_DATA_FILE,
    TICKET_DATA_FILE,
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


class RefundResult(Enum):
    """Outcome of a refund request."""

    REFUNDED = "refunded"
    ALREADY_USED = "already used"
    NOT_FOUND = "not found"


def _load(path: Path, label: str) -> Matrix:
    try:
        return load_matrix(path)
    except DataFileError as err:
        raise DataFileError(f"Error loading {label} file.") from err


def refund_ticket(
    ticket_number: str, parent_directory: PathType = PARENT_DIRECTORY
) -> RefundResult:
    """Refund a ticket, freeing its seat unless the holder has checked in.

    Raises DataFileError when the event's data files cannot be read or written.
    """
    folder = Path(parent_directory) / event_name_from_ticket(ticket_number)
    customer_file = folder / NAMES_DATA_FILE
    seats_file = folder / SOLD_DATA_FILE
    ticket_file = folder / TICKET_DATA_FILE

    seat_availability = _load(seats_file, "seats availability")
    customer_info = _load(customer_file, "customer")
    issued_tickets = _load(ticket_file, "ticket")
    checked_in = _load(folder / CHECKED_IN_DATA_FILE, "checked in")

    location = find_ticket(issued_tickets, ticket_number)
    if location is None:
        return RefundResult.NOT_FOUND
    row, column = location
    if checked_in[row][column] != NOT_CHECKED_IN:
        return RefundResult.ALREADY_USED

    update_and_save(customer_info, customer_file, row, column, EMPTY)
    update_and_save(seat_availability, seats_file, row, column, AVAILABLE)
    update_and_save(issued_tickets, ticket_file, row, column, EMPTY)
    return RefundResult.REFUNDED


def refund_ticket_menu(
    parent_directory: PathType = PARENT_DIRECTORY,
) -> RefundResult | None:
    """Ask for a ticket number and refund it; return the final outcome."""
    while True:
        clear_screen()
        print("--------------------------------------")
        print("           TICKET REFUND MENU")
        print("--------------------------------------")
        ticket_number = read_ticket_number(
            "Please enter the ticket number you want to refund: "
        )
        if not ticket_number:
            print("Invalid ticket number.")
            if not prompt_retry():
                return None
            continue

        try:
            result = refund_ticket(ticket_number, parent_directory)
        except DataFileError as err:
            print(f"{RED}{err}{RESET}")
            time.sleep(1)
            if not prompt_retry():
                return None
            continue

        if result is RefundResult.REFUNDED:
            print(f"{GREEN}{ticket_number} refunded successfully{RESET}")
            time.sleep(2)
            return result
        if result is RefundResult.ALREADY_USED:
            print(
                f"{RED}\nTicket number was already used, unfortunately we can't "
                f"refund you.{RESET}"
            )
            if not prompt_retry():
                return result
            continue

        print(f"{RED}Ticket number not found.{RESET}")
        time.sleep(2)
        return result