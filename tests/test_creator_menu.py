import subprocess
import time

import pytest

from ticketbooker.constants import DATA_FILES, SOLD_DATA_FILE
from ticketbooker.creator_menu import create_event_menu
from ticketbooker.datafile import load_matrix
from ticketbooker.generator import generate_data


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    monkeypatch.setattr(
        subprocess, "run", lambda *a, **k: subprocess.CompletedProcess(a, 0)
    )


def feed(monkeypatch, *answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def parent(tmp_path):
    folder = tmp_path / "event_data"
    folder.mkdir()
    return folder


def test_creates_new_event(monkeypatch, parent, capsys):
    feed(monkeypatch, "Gala", "y", "5", "6", "2")
    create_event_menu(parent)
    folder = parent / "Gala"
    assert sorted(p.name for p in folder.iterdir()) == sorted(DATA_FILES)
    assert load_matrix(folder / SOLD_DATA_FILE) == generate_data(SOLD_DATA_FILE, 5, 6, 2)
    assert "Files created successfully." in capsys.readouterr().out


def test_empty_name_then_quit(monkeypatch, parent):
    feed(monkeypatch, "", "n")
    create_event_menu(parent)
    assert list(parent.iterdir()) == []


def test_rejected_name_then_new_name(monkeypatch, parent):
    feed(monkeypatch, "Gala", "n", "y", "Show", "y", "5", "6", "2")
    create_event_menu(parent)
    assert [p.name for p in parent.iterdir()] == ["Show"]


def test_existing_folder_replaced(monkeypatch, parent):
    folder = parent / "Gala"
    folder.mkdir()
    (folder / "stray.txt").write_text("old")
    feed(monkeypatch, "Gala", "y", "y", "5", "6", "2")
    create_event_menu(parent)
    assert not (folder / "stray.txt").exists()
    assert sorted(p.name for p in folder.iterdir()) == sorted(DATA_FILES)


def test_existing_folder_kept_when_declined(monkeypatch, parent):
    folder = parent / "Gala"
    folder.mkdir()
    (folder / "stray.txt").write_text("old")
    feed(monkeypatch, "Gala", "y", "n")
    create_event_menu(parent)
    assert (folder / "stray.txt").read_text() == "old"


def test_too_few_rows_fails(monkeypatch, parent, capsys):
    feed(monkeypatch, "Gala", "y", "1", "3", "2")
    create_event_menu(parent)
    assert not (parent / "Gala").exists()
    assert "Failed to create files." in capsys.readouterr().out