"""Shared constants: cell markers, terminal colours and event data file names."""

from pathlib import Path

Matrix = list[list[str]]

# Cell values stored in the event data files.
SOLD = "s"
AVAILABLE = "a"
NOT_AVAILABLE = "na"
NOT_AVAILABLE_COMMA = "na,"
NOT_CHECKED_IN = "no"
CHECKED_IN = "yes"
PRICE_NOT_AVAILABLE = "-1"
PRICE_NOT_AVAILABLE_COMMA = "-1,"
DOOR = "door"
SEAT = "seat"
WALKWAY = "walk"

# Characters used when drawing the venue.
DOOR_CHAR = "H"
SEAT_CHAR = "#"
AVAILABLE_SEAT_CHAR = "O"
TAKEN_SEAT_CHAR = "Ø"
SELECTED_SEAT_CHAR = "X"
WALKWAY_CHAR = " "
EMPTY = " "
ROW_CHAR = "↕"
COLUMN_CHAR = "↔"
SEPARATOR = ","
SPINNER_CHAR = "*"
SPINNER_BACKGROUND_CHAR = "-"

# ANSI terminal colours.
RESET = "\033[0;0m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;93m"
BLUE = "\033[0;34m"
MAGENTA = "\033[0;95m"
CYAN = "\033[0;96m"

# Event data files.
SEAT_DATA_FILE = "map_data.txt"
SOLD_DATA_FILE = "sold_data.txt"
PRICE_DATA_FILE = "price_data.txt"
NAMES_DATA_FILE = "names_data.txt"
TICKET_DATA_FILE = "ticket_data.txt"
CHECKED_IN_DATA_FILE = "check_in_data.txt"
PARENT_DIRECTORY = Path("event_data")

DATA_FILES = (
    SEAT_DATA_FILE,
    SOLD_DATA_FILE,
    PRICE_DATA_FILE,
    NAMES_DATA_FILE,
    TICKET_DATA_FILE,
    CHECKED_IN_DATA_FILE,
)

YES_NO_HINT = f"({CYAN}y{RESET}/{CYAN}n{RESET})"