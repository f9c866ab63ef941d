"""Drawing the seat map and walking a customer through choosing a seat."""

from __future__ import annotations

import time
from collections.abc import Sequence

from .console import clear_screen
from .constants import (
    AVAILABLE,
    AVAILABLE_SEAT_CHAR,
    BLUE,
    COLUMN_CHAR,
    DOOR_CHAR,
    GREEN,
    MAGENTA,
    NOT_AVAILABLE,
    RED,
    RESET,
    ROW_CHAR,
    SEAT_CHAR,
    SELECTED_SEAT_CHAR,
    SOLD,
    TAKEN_SEAT_CHAR,
    YELLOW,
    YES_NO_HINT,
)
from .datafile import update_and_save
from .eventdata import EventData
from .tickets import ask_to_buy_another_seat, issue_ticket_number, save_customer_info
from .validation import confirm, is_number, is_positive_number

Grid = Sequence[Sequence[str]]


def format_legend_item(color: str, name: str, symbol: str, last: bool = False) -> str:
    """Format one entry of the map legend."""
    return f"{color}({symbol}) {name}{RESET}{'' if last else ' - '}"


def map_legend() -> str:
    """Return the legend line shown above the seat map."""
    items = (
        format_legend_item(RED, "sold", TAKEN_SEAT_CHAR),
        format_legend_item(GREEN, "available", AVAILABLE_SEAT_CHAR),
        format_legend_item(YELLOW, "your selection", SELECTED_SEAT_CHAR),
        format_legend_item(BLUE, "row", ROW_CHAR),
        format_legend_item(MAGENTA, "column", COLUMN_CHAR),
        format_legend_item(RESET, "door", DOOR_CHAR, True),
    )
    return "Legend: " + "".join(items)


def render_venue_layout(
    event: EventData, selected_row: int = -1, selected_seat: int = -1
) -> str:
    """Return the coloured seat map of the event, marking the selected seat."""
    layout = event.venue_layout
    widths = event.seating_capacity
    lines = [f"Event: {event.event_name}\n", map_legend(), "\n", "Event seat map:\n"]
    for row_index, (cells, states) in enumerate(zip(layout, event.seat_availability)):
        parts = []
        for column, (cell, state) in enumerate(zip(cells, states)):
            color = ""
            if state == NOT_AVAILABLE:
                color = RESET
                if column == 0 and is_number(cells[0]):
                    color = BLUE
                if row_index == 0 and is_number(layout[0][column]):
                    color = MAGENTA
            if state == SOLD:
                cell, color = TAKEN_SEAT_CHAR, RED
            elif state == AVAILABLE:
                cell, color = AVAILABLE_SEAT_CHAR, GREEN
            if row_index == selected_row and column == selected_seat:
                cell, color = SELECTED_SEAT_CHAR, YELLOW
            width = widths[column] if column < len(widths) else 0
            parts.append(f"{color}{cell.rjust(width)}{RESET} ")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def _show_layout(event: EventData, selected_row: int = -1, selected_seat: int = -1) -> None:
    clear_screen()
    print(render_venue_layout(event, selected_row, selected_seat), end="")


def is_seat(venue_layout: Grid, row: int, column: int = 1) -> bool:
    """True if the layout holds a seat at (row, column)."""
    if not 0 <= row < len(venue_layout):
        return False
    cells = venue_layout[row]
    return 0 <= column < len(cells) and cells[column] == SEAT_CHAR


def is_within_range(value: int, bound: int) -> bool:
    """True if 0 < value < bound."""
    return 0 < value < bound


def is_seat_available(
    venue_layout: Grid, seat_availability: Grid, row: int, column: int
) -> bool:
    """True if (row, column) is inside the venue and the seat is for sale."""
    return (
        is_within_range(row, len(venue_layout))
        and is_within_range(column, len(venue_layout[0]))
        and seat_availability[row][column] == AVAILABLE
    )


def is_row_available(venue_layout: Grid, seat_availability: Grid, row: int) -> bool:
    """True if the row has at least one seat still for sale."""
    if not is_within_range(row, len(venue_layout)):
        return False
    return any(
        is_seat(venue_layout, row, column) and seat_availability[row][column] == AVAILABLE
        for column in range(len(venue_layout[row]))
    )


def _read_row(venue_layout: Grid, seat_availability: Grid) -> int | None:
    """Ask for a row; None when the chosen row is sold out."""
    last_row = len(venue_layout) - 1
    while True:
        answer = input(f"\nEnter your preferred {BLUE}row{RESET} number: ")
        if not is_positive_number(answer):
            print(
                f"\nInvalid input. Please enter a valid {BLUE}row{RESET} number, "
                f"between 1 and {last_row}."
            )
            continue
        row = int(answer)
        if not is_within_range(row, len(venue_layout)):
            print(
                f"\nInvalid {BLUE}row{RESET}. Please choose a {BLUE}row{RESET} "
                f"between 1 and {last_row}."
            )
            continue
        if not is_seat(venue_layout, row):
            print(
                f"\n{BLUE}Row {RESET}{YELLOW}{row}{RESET} is {RED}not available{RESET}"
                f"! Please choose a different {BLUE}row{RESET}."
            )
            continue
        if is_row_available(venue_layout, seat_availability, row):
            return row
        print(
            f"\n{BLUE}Row{RESET} is {RED}fully sold out{RESET}! Please choose a "
            f"different {BLUE}row{RESET}."
        )
        time.sleep(1)
        return None


def _read_column(venue_layout: Grid, seat_availability: Grid, row: int) -> int | None:
    """Ask for a column in `row`; None when the chosen seat is sold."""
    last_column = len(venue_layout[0]) - 1
    invalid_seat = (
        f"\nInvalid seat. Please enter a valid {MAGENTA}column{RESET} number, "
        f"between {YELLOW}1{RESET} and {YELLOW}{last_column}{RESET}."
    )
    while True:
        answer = input(f"\nEnter your preferred {MAGENTA}column{RESET} number: ")
        if not is_positive_number(answer):
            print(invalid_seat)
            continue
        column = int(answer)
        if not is_seat(venue_layout, row, column):
            print(
                f"\n{MAGENTA}Column {RESET}{YELLOW}{column}{RESET} is {RED}not "
                f"available{RESET}! Please choose a different {MAGENTA}column{RESET}."
            )
            continue
        if is_within_range(column, len(venue_layout[0])):
            if is_seat_available(venue_layout, seat_availability, row, column):
                return column
            print(
                f"\nSeat is {RED}sold out{RESET}! Please choose a different "
                f"{MAGENTA}column{RESET}."
            )
            time.sleep(2)
            print(invalid_seat)
            return None
        print(invalid_seat)


def select_seat(venue_layout: Grid, seat_availability: Grid) -> tuple[int, int] | None:
    """Ask for a row and column; return the seat, or None if it was sold out."""
    row = _read_row(venue_layout, seat_availability)
    if row is None:
        return None
    column = _read_column(venue_layout, seat_availability, row)
    if column is None:
        return None
    return row, column


def choose_seat(event: EventData) -> list[str]:
    """Run a booking session for the event; return the ticket numbers issued."""
    issued: list[str] = []
    while True:
        _show_layout(event)
        if not confirm(f"\nContinue? {YES_NO_HINT}: "):
            return issued

        selection = select_seat(event.venue_layout, event.seat_availability)
        if selection is None:
            print("\nSorry, the event/seat is sold out!")
            continue
        row, column = selection

        _show_layout(event, row, column)
        if not confirm(f"\nIs this the correct seat? {YES_NO_HINT}: "):
            continue

        print(
            f"\nThe selected seat at {BLUE}row {RESET}{YELLOW}{row}{RESET}{MAGENTA} "
            f"column {RESET}{YELLOW}{column}{RESET} costs "
            f"${event.seat_prices[row][column]}."
        )
        if not confirm(f"\nAre you okay with that price? {YES_NO_HINT}: "):
            continue

        update_and_save(
            event.seat_availability, event.seats_availability_file, row, column, SOLD
        )
        save_customer_info(event.customer_info, event.customer_file, row, column)
        issued.append(
            issue_ticket_number(
                event.event_name, event.ticket_file, event.issued_tickets, row, column
            )
        )
        if not ask_to_buy_another_seat():
            return issued