"""Generation of the initial data files for a new event venue."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .constants import (
    AVAILABLE,
    CHECKED_IN_DATA_FILE,
    DOOR,
    EMPTY,
    NAMES_DATA_FILE,
    NOT_AVAILABLE,
    NOT_CHECKED_IN,
    PRICE_DATA_FILE,
    PRICE_NOT_AVAILABLE,
    SEAT,
    SEAT_DATA_FILE,
    SOLD_DATA_FILE,
    TICKET_DATA_FILE,
    WALKWAY,
    WALKWAY_CHAR,
    Matrix,
)
from .validation import is_number

MAX_VENUE_UNITS = 15
MAX_SECTION_PRICE = 573.99
SECTION_PRICE_DECREMENT = 124.00


@dataclass(frozen=True)
class VenueSize:
    """Dimensions of a venue as entered by the event creator."""

    row_count: int
    row_length: int
    seats_between_walkways: int


def section_size(row_count: int) -> int:
    """Number of rows per section, so horizontal walkways spread evenly.

    Returns 0 when the venue has too few rows to be divided.
    """
    section = 0
    for factor in range(2, math.isqrt(row_count + 1) + 1):
        if row_count % factor == 0:
            section = row_count // factor
        if (row_count + 1) % factor == 0:
            section = (row_count + 1) // factor
    return section


def _check_section(section: int) -> None:
    if section < 1:
        raise ValueError("The venue has too few rows to be divided into sections.")


def _is_walkway_column(column: int, seats_between_walkway: int) -> bool:
    return column % (seats_between_walkway + 1) == 0


def _grid_rows(
    row_count: int,
    row_length: int,
    section: int,
    seats_between_walkway: int,
    blocked: str,
    seat_value: Callable[[int], str],
) -> Matrix:
    _check_section(section)
    rows: Matrix = []
    for row in range(row_count + 1):
        if row % section == 0:
            rows.append([blocked] * (row_length + 1))
            continue
        value = seat_value(row)
        rows.append(
            [blocked]
            + [
                blocked if _is_walkway_column(column, seats_between_walkway) else value
                for column in range(1, row_length + 1)
            ]
        )
    return rows


def sold_rows(
    row_count: int, row_length: int, section: int, seats_between_walkway: int
) -> Matrix:
    """Seat availability: every seat starts out available."""
    return _grid_rows(
        row_count,
        row_length,
        section,
        seats_between_walkway,
        NOT_AVAILABLE,
        lambda _row: AVAILABLE,
    )


def booker_rows(
    row_count: int, row_length: int, section: int, seats_between_walkway: int
) -> Matrix:
    """Booker names or ticket numbers: every seat starts out empty."""
    return _grid_rows(
        row_count,
        row_length,
        section,
        seats_between_walkway,
        NOT_AVAILABLE,
        lambda _row: EMPTY,
    )


def check_in_rows(
    row_count: int, row_length: int, section: int, seats_between_walkway: int
) -> Matrix:
    """Check-in state: nobody has checked in yet."""
    return _grid_rows(
        row_count,
        row_length,
        section,
        seats_between_walkway,
        NOT_AVAILABLE,
        lambda _row: NOT_CHECKED_IN,
    )


def price_rows(
    row_count: int, row_length: int, section: int, seats_between_walkway: int
) -> Matrix:
    """Seat prices, cheaper by a fixed step for each section further back."""

    def price(row: int) -> str:
        value = MAX_SECTION_PRICE - SECTION_PRICE_DECREMENT * (row // section)
        return f"{value:g}"

    return _grid_rows(
        row_count,
        row_length,
        section,
        seats_between_walkway,
        PRICE_NOT_AVAILABLE,
        price,
    )


def seat_map_rows(
    row_count: int, row_length: int, section: int, seats_between_walkway: int
) -> Matrix:
    """Venue layout: column numbers on top, doors on walkway rows, seats elsewhere."""
    _check_section(section)
    columns = range(1, row_length + 1)
    rows: Matrix = []
    for row in range(row_count + 1):
        if row % section != 0:
            rows.append(
                [str(row)]
                + [
                    WALKWAY if _is_walkway_column(column, seats_between_walkway) else SEAT
                    for column in columns
                ]
            )
        elif row == 0:
            rows.append(
                [""]
                + [
                    WALKWAY_CHAR
                    if _is_walkway_column(column, seats_between_walkway)
                    else str(column)
                    for column in columns
                ]
            )
        else:
            rows.append(
                [""]
                + [DOOR if column in (1, row_length) else WALKWAY for column in columns]
            )
    return rows


_GENERATORS: dict[str, Callable[[int, int, int, int], Matrix]] = {
    SOLD_DATA_FILE: sold_rows,
    SEAT_DATA_FILE: seat_map_rows,
    PRICE_DATA_FILE: price_rows,
    NAMES_DATA_FILE: booker_rows,
    TICKET_DATA_FILE: booker_rows,
    CHECKED_IN_DATA_FILE: check_in_rows,
}


def generate_data(
    file_name: str, row_count: int, row_length: int, seats_between_walkway: int
) -> Matrix:
    """Build the initial contents of the named event data file."""
    try:
        generator = _GENERATORS[file_name]
    except KeyError:
        raise ValueError(f"Invalid data file name: {file_name}") from None
    return generator(
        row_count, row_length, section_size(row_count), seats_between_walkway
    )


def prompt_venue_dimension(prompt: str) -> int:
    """Ask until the user enters a whole number from 1 to the venue limit."""
    while True:
        answer = input(prompt)
        if not is_number(answer) or int(answer) < 1:
            print("\nInvalid input. Please enter a positive integer.")
        elif int(answer) > MAX_VENUE_UNITS:
            print(
                f"\nOur platform currently supports venues smaller than "
                f"{MAX_VENUE_UNITS} units."
            )
        else:
            return int(answer)


def prompt_venue_size() -> VenueSize:
    """Ask for the row count, row length and seats between walkways."""
    row_count = prompt_venue_dimension("\nEnter row count: ")
    row_length = prompt_venue_dimension("\nEnter row length: ")
    seats = prompt_venue_dimension("\nEnter the number of seats between walkways: ")
    return VenueSize(row_count, row_length, seats)