import subprocess

from ticketbooker.console import (
    SPINNER_SIZE,
    clear_screen,
    render_spinner,
    run_spinner,
    spinner_frame,
)
from ticketbooker.constants import (
    BLUE,
    RED,
    RESET,
    SPINNER_BACKGROUND_CHAR,
    SPINNER_CHAR,
)


def test_frame_shape_and_alphabet():
    frame = spinner_frame(0)
    assert len(frame) == SPINNER_SIZE
    assert all(len(row) == SPINNER_SIZE for row in frame)
    assert set("".join(frame)) <= {" ", SPINNER_CHAR, SPINNER_BACKGROUND_CHAR}


def test_frame_has_arc_and_background():
    joined = "".join(spinner_frame(90))
    assert SPINNER_CHAR in joined
    assert SPINNER_BACKGROUND_CHAR in joined


def test_center_and_corner_are_blank():
    frame = spinner_frame(45)
    center = SPINNER_SIZE // 2
    assert frame[center][center] == " "
    assert frame[0][0] == " "


def test_arc_moves_with_phase():
    center = SPINNER_SIZE // 2
    far = SPINNER_SIZE - 1
    assert spinner_frame(0)[far][center] == SPINNER_CHAR
    assert spinner_frame(180)[far][center] == SPINNER_BACKGROUND_CHAR
    assert spinner_frame(180)[1][center] == SPINNER_CHAR


def test_render_colours_every_cell():
    frame = spinner_frame(0)
    text = render_spinner(frame)
    assert text.count("\n") == SPINNER_SIZE
    stars = "".join(frame).count(SPINNER_CHAR)
    assert text.count(f"{RED}{SPINNER_CHAR} {RESET}") == stars
    assert text.count(BLUE) == SPINNER_SIZE * SPINNER_SIZE - stars


def test_run_spinner_zero_duration_draws_nothing(capsys):
    run_spinner(0)
    assert capsys.readouterr().out == ""


def test_run_spinner_draws_and_rerenders(capsys):
    run_spinner(0.05)
    out = capsys.readouterr().out
    assert out.startswith(render_spinner(spinner_frame(0)))
    assert out.endswith("\033[2J\033[1;1H")


def test_clear_screen_failure(monkeypatch, capsys):
    monkeypatch.setattr(
        subprocess, "run", lambda *a, **k: subprocess.CompletedProcess(a, 1)
    )
    assert clear_screen() is False
    assert "Clearing the screen failed." in capsys.readouterr().err


def test_clear_screen_success(monkeypatch, capsys):
    calls = []

    def fake_run(*args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert clear_screen() is True
    assert len(calls) == 1
    assert capsys.readouterr().err == ""