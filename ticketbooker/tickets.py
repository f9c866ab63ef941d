"""Ticket numbers, customer names and the follow-up purchase question."""

from __future__ import annotations

import random
import string

from .constants import BLUE, MAGENTA, RESET, YELLOW, YES_NO_HINT, Matrix
from .datafile import PathType, update_and_save, was_ticket_issued
from .validation import confirm, is_valid_name

TICKET_ID_CHARACTERS = string.digits + string.ascii_uppercase + string.ascii_lowercase
TICKET_ID_LENGTH = 4

_rng = random.SystemRandom()


def generate_random_id(length: int = TICKET_ID_LENGTH) -> str:
    """Return a random string of digits and ASCII letters."""
    return "".join(_rng.choice(TICKET_ID_CHARACTERS) for _ in range(length))


def generate_ticket_number(
    event_name: str, row: int, column: int, id_length: int = TICKET_ID_LENGTH
) -> str:
    """Build a ticket number such as 'My-Show-3-4-AbC1'."""
    name = event_name.replace(" ", "-")
    return f"{name}-{row}-{column}-{generate_random_id(id_length)}"


def _display_ticket_number(ticket: str) -> None:
    print(f"\nYour ticket number is: {YELLOW}{ticket}{RESET}")
    print("\nMake sure to write it down.")
    print("\nYou will need to present this number to get into your event.")


def issue_ticket_number(
    event_name: str,
    ticket_file: PathType,
    issued_tickets: Matrix,
    row: int,
    column: int,
) -> str:
    """Create a ticket number not issued before, store it and show it."""
    ticket = generate_ticket_number(event_name, row, column)
    while was_ticket_issued(issued_tickets, ticket):
        ticket = generate_ticket_number(event_name, row, column)
    update_and_save(issued_tickets, ticket_file, row, column, ticket)
    print(
        f"\nThank you for booking a seat at {BLUE}row {RESET}{YELLOW}{row}{RESET}"
        f"{MAGENTA} column {RESET}{YELLOW}{column}{RESET}."
    )
    _display_ticket_number(ticket)
    return ticket


def save_customer_info(
    customer_info: Matrix, customer_file: PathType, row: int, column: int
) -> str:
    """Ask for the name on the ticket, store it at the seat and return it."""
    while True:
        name = input("\nWhat name should go on the ticket? ")
        if not name or not is_valid_name(name):
            print("\nPlease enter a valid name")
            continue
        if confirm(f"\nIs {YELLOW}{name}{RESET} the correct name? {YES_NO_HINT}: "):
            break
    update_and_save(customer_info, customer_file, row, column, name)
    return name


def ask_to_buy_another_seat() -> bool:
    """Ask whether the customer wants another seat."""
    return confirm(f"\nWould you like to buy another seat? {YES_NO_HINT}: ")