"""Interactive menu for booking seats at an event."""

from __future__ import annotations

import sys
import time

from .constants import PARENT_DIRECTORY
from .datafile import DataFileError, PathType
from .eventdata import load_event_data
from .events import EventDirectoryError, EventPurpose, choose_event
from .seatmap import choose_seat


def event_booking_menu(parent_directory: PathType = PARENT_DIRECTORY) -> list[str]:
    """Let the user pick events and book seats; return every ticket issued."""
    issued: list[str] = []
    while True:
        try:
            event_folder = choose_event(EventPurpose.BOOKING, parent_directory)
        except EventDirectoryError:
            return issued
        if event_folder is None:
            return issued

        try:
            event = load_event_data(event_folder)
        except DataFileError:
            print("Error loading event data", file=sys.stderr)
            time.sleep(1)
            return issued

        issued.extend(choose_seat(event))