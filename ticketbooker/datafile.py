"""Reading and writing the comma-separated event data matrices."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from typing import Union

from .constants import (
    DOOR,
    DOOR_CHAR,
    EMPTY,
    SEAT,
    SEAT_CHAR,
    SEPARATOR,
    WALKWAY,
    WALKWAY_CHAR,
    Matrix,
)

PathType = Union[str, "PathLike[str]"]

_CELL_SYMBOLS = {DOOR: DOOR_CHAR, SEAT: SEAT_CHAR, WALKWAY: WALKWAY_CHAR}


class DataFileError(OSError):
    """Raised when an event data file cannot be read or written."""


def _split_cells(line: str) -> list[str]:
    cells = line.split(SEPARATOR)
    # A trailing separator does not start another cell.
    if cells and cells[-1] == "":
        cells.pop()
    return [_CELL_SYMBOLS.get(cell, cell) if cell else EMPTY for cell in cells]


def load_matrix(path: PathType) -> Matrix:
    """Load a data file into a matrix, turning layout words into map symbols."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as err:
        raise DataFileError(f"Error opening the file for reading: {path}") from err
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [_split_cells(line) for line in lines]


def save_matrix(data: Sequence[Sequence[str]], path: PathType) -> None:
    """Write a matrix to a data file, one comma-separated row per line."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            for row in data:
                handle.write(SEPARATOR.join(row) + "\n")
    except OSError as err:
        raise DataFileError(f"Error opening the file for writing: {path}") from err


def update_and_save(
    data: Matrix, path: PathType, row: int, column: int, value: str
) -> None:
    """Set one cell of the matrix and write the whole matrix to the file."""
    data[row][column] = value
    save_matrix(data, path)


def find_ticket(
    ticket_data: Sequence[Sequence[str]], ticket_number: str
) -> tuple[int, int] | None:
    """Return the (row, column) holding the ticket number, or None."""
    for row_index, row in enumerate(ticket_data):
        for column_index, cell in enumerate(row):
            if cell == ticket_number:
                return row_index, column_index
    return None


def was_ticket_issued(
    ticket_data: Sequence[Sequence[str]], ticket_number: str
) -> bool:
    """Tell whether the ticket number appears anywhere in the ticket data."""
    return find_ticket(ticket_data, ticket_number) is not None


def event_name_from_directory(event_folder_path: str) -> str:
    """Return the text between the second and third slash, or an empty string."""
    parts = str(event_folder_path).split("/")
    if len(parts) >= 4:
        return parts[2]
    return ""


def event_name_from_ticket(ticket_number: str) -> str:
    """Recover the event name from a ticket number such as 'My-Show-3-4-AbCd'."""
    position = next(
        (index for index, char in enumerate(ticket_number) if char in "0123456789"),
        None,
    )
    name = ticket_number if not position else ticket_number[: position - 1]
    return name.replace("-", " ")