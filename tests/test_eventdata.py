import pytest

from ticketbooker.constants import (
    AVAILABLE,
    NAMES_DATA_FILE,
    SEAT_CHAR,
    SOLD_DATA_FILE,
    TICKET_DATA_FILE,
)
from ticketbooker.creator import create_event_folder
from ticketbooker.datafile import DataFileError, load_matrix
from ticketbooker.eventdata import column_widths, load_event_data
from ticketbooker.generator import VenueSize


@pytest.fixture
def event_dir(tmp_path):
    folder = tmp_path / "Show"
    create_event_folder("Show", VenueSize(3, 4, 2), folder)
    return folder


def test_column_widths_takes_longest_cell_per_column():
    layout = [["1", "22"], ["333", "4"]]
    assert column_widths(layout) == [len("333"), len("22")]


def test_column_widths_of_empty_layout():
    assert column_widths([]) == []


def test_column_widths_covers_every_column():
    layout = [["a", "bb", "c"], ["dddd", "e", "ff"]]
    widths = column_widths(layout)
    assert len(widths) == 3
    for row in layout:
        for cell, width in zip(row, widths):
            assert len(cell) <= width


def test_load_event_data_reads_all_files(event_dir):
    event = load_event_data(event_dir)
    assert event.event_name == "Show"
    assert event.venue_layout == load_matrix(event_dir / "map_data.txt")
    assert event.seat_availability == load_matrix(event_dir / SOLD_DATA_FILE)
    assert event.customer_info == load_matrix(event_dir / NAMES_DATA_FILE)
    assert event.issued_tickets == load_matrix(event_dir / TICKET_DATA_FILE)
    assert event.seating_capacity == column_widths(event.venue_layout)


def test_load_event_data_converts_layout_words(event_dir):
    event = load_event_data(event_dir)
    assert event.venue_layout[1][1] == SEAT_CHAR
    assert event.seat_availability[1][1] == AVAILABLE


def test_event_file_paths(event_dir):
    event = load_event_data(event_dir)
    assert event.customer_file == event_dir / NAMES_DATA_FILE
    assert event.seats_availability_file == event_dir / SOLD_DATA_FILE
    assert event.ticket_file == event_dir / TICKET_DATA_FILE


def test_load_event_data_missing_folder(tmp_path):
    with pytest.raises(DataFileError):
        load_event_data(tmp_path / "Nothing")


def test_load_event_data_missing_one_file(event_dir):
    (event_dir / TICKET_DATA_FILE).unlink()
    with pytest.raises(DataFileError):
        load_event_data(event_dir)