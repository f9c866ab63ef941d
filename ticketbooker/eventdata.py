"""Loading everything the booking screens need to know about one event."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest
from pathlib import Path

from .constants import (
    NAMES_DATA_FILE,
    PRICE_DATA_FILE,
    SEAT_DATA_FILE,
    SOLD_DATA_FILE,
    TICKET_DATA_FILE,
    Matrix,
)
from .datafile import PathType, load_matrix


@dataclass
class EventData:
    """The data matrices of one event and where they are stored."""

    event_name: str
    directory: Path
    venue_layout: Matrix
    seat_availability: Matrix
    seat_prices: Matrix
    customer_info: Matrix
    issued_tickets: Matrix
    seating_capacity: list[int] = field(default_factory=list)

    @property
    def customer_file(self) -> Path:
        return self.directory / NAMES_DATA_FILE

    @property
    def seats_availability_file(self) -> Path:
        return self.directory / SOLD_DATA_FILE

    @property
    def ticket_file(self) -> Path:
        return self.directory / TICKET_DATA_FILE

    @property
    def seat_file(self) -> Path:
        return self.directory / SEAT_DATA_FILE

    @property
    def price_file(self) -> Path:
        return self.directory / PRICE_DATA_FILE


def column_widths(venue_layout: Matrix) -> list[int]:
    """Return the widest cell of each column of the layout."""
    return [
        max((len(cell) for cell in column if cell is not None), default=0)
        for column in zip_longest(*venue_layout)
    ]


def load_event_data(event_directory: PathType) -> EventData:
    """Load all the data files of the event stored in `event_directory`.

    Raises DataFileError when one of the files cannot be read.
    """
    directory = Path(event_directory)
    venue_layout = load_matrix(directory / SEAT_DATA_FILE)
    seat_availability = load_matrix(directory / SOLD_DATA_FILE)
    seat_prices = load_matrix(directory / PRICE_DATA_FILE)
    customer_info = load_matrix(directory / NAMES_DATA_FILE)
    issued_tickets = load_matrix(directory / TICKET_DATA_FILE)
    return EventData(
        event_name=directory.name,
        directory=directory,
        venue_layout=venue_layout,
        seat_availability=seat_availability,
        seat_prices=seat_prices,
        customer_info=customer_info,
        issued_tickets=issued_tickets,
        seating_capacity=column_widths(venue_layout),
    )