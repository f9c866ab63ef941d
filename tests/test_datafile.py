import pytest

from ticketbooker.constants import DOOR_CHAR, EMPTY, SEAT_CHAR, WALKWAY_CHAR
from ticketbooker.datafile import (
    DataFileError,
    event_name_from_directory,
    event_name_from_ticket,
    find_ticket,
    load_matrix,
    save_matrix,
    update_and_save,
    was_ticket_issued,
)


def test_round_trip(tmp_path):
    path = tmp_path / "sold_data.txt"
    data = [["na", "na", "na"], ["na", "a", "s"]]
    save_matrix(data, path)
    assert load_matrix(path) == data


def test_saved_format(tmp_path):
    path = tmp_path / "data.txt"
    save_matrix([["na", "a"], ["-1", "573.99"]], path)
    assert path.read_text(encoding="utf-8") == "na,a\n-1,573.99\n"


def test_layout_words_become_symbols(tmp_path):
    path = tmp_path / "map_data.txt"
    path.write_text(",1,2\n1,seat,walk\n,door,door\n", encoding="utf-8")
    assert load_matrix(path) == [
        [EMPTY, "1", "2"],
        ["1", SEAT_CHAR, WALKWAY_CHAR],
        [EMPTY, DOOR_CHAR, DOOR_CHAR],
    ]


def test_trailing_separator_does_not_add_cell(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("a,b,\na,,b\n\n", encoding="utf-8")
    assert load_matrix(path) == [["a", "b"], ["a", EMPTY, "b"], []]


def test_last_line_without_newline(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("a,b\nc,d", encoding="utf-8")
    assert load_matrix(path) == [["a", "b"], ["c", "d"]]


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError):
        load_matrix(tmp_path / "missing.txt")


def test_unwritable_path_raises(tmp_path):
    with pytest.raises(DataFileError):
        save_matrix([["a"]], tmp_path / "no_dir" / "file.txt")


def test_update_and_save(tmp_path):
    path = tmp_path / "names_data.txt"
    data = [["na", "na"], ["na", " "]]
    update_and_save(data, path, 1, 1, "Ada")
    assert data[1][1] == "Ada"
    assert load_matrix(path) == [["na", "na"], ["na", "Ada"]]


def test_find_ticket():
    tickets = [["na", "na"], ["na", " ", "Show-1-2-abcd"]]
    assert find_ticket(tickets, "Show-1-2-abcd") == (1, 2)
    assert find_ticket(tickets, "Show-9-9-zzzz") is None


def test_was_ticket_issued():
    tickets = [["na", "Show-1-1-wxyz"]]
    assert was_ticket_issued(tickets, "Show-1-1-wxyz") is True
    assert was_ticket_issued(tickets, "Other") is False


def test_event_name_from_directory():
    assert event_name_from_directory("./event_data/Concert/") == "Concert"
    assert event_name_from_directory("./event_data") == ""


def test_event_name_from_ticket():
    assert event_name_from_ticket("Rock-Concert-3-4-AbCd") == "Rock Concert"


def test_event_name_from_ticket_without_digits():
    assert event_name_from_ticket("no-digits") == "no digits"