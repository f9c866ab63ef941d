"""Terminal helpers: screen clearing and the start-up spinner."""

from __future__ import annotations

import math
import os
import subprocess
import sys
import time

from .constants import BLUE, RED, RESET, SPINNER_BACKGROUND_CHAR, SPINNER_CHAR

SPINNER_SIZE = 12
_RERENDER = "\033[2J\033[1;1H"


def clear_screen() -> bool:
    """Clear the terminal; return False and report on stderr if that failed."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        result = subprocess.run(command, shell=True, check=False)
        ok = result.returncode == 0
    except OSError:
        ok = False
    if not ok:
        print("Clearing the screen failed.", file=sys.stderr)
    return ok


def _circle_points(start: float, steps: int):
    radius = SPINNER_SIZE // 2 - 1
    center = SPINNER_SIZE // 2
    for step in range(steps):
        angle = math.radians(start + step * 0.5)
        x = center + int(radius * math.cos(angle))
        y = center + int(radius * math.sin(angle))
        if 0 <= x < SPINNER_SIZE and 0 <= y < SPINNER_SIZE:
            yield x, y


def spinner_frame(phase: int) -> list[str]:
    """Draw the spinner circle with a 60-degree highlighted arc at `phase`."""
    grid = [[" "] * SPINNER_SIZE for _ in range(SPINNER_SIZE)]
    for x, y in _circle_points(0, 720):
        grid[x][y] = SPINNER_BACKGROUND_CHAR
    for x, y in _circle_points(phase, 120):
        grid[x][y] = SPINNER_CHAR
    return ["".join(row) for row in grid]


def render_spinner(frame: list[str]) -> str:
    """Colour a spinner frame for the terminal."""
    lines = []
    for row in frame:
        cells = (
            f"{RED if char == SPINNER_CHAR else BLUE}{char} {RESET}" for char in row
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def run_spinner(duration: float = 10.0) -> None:
    """Animate the spinner on stdout for `duration` seconds."""
    phase = 0
    start = time.monotonic()
    while time.monotonic() - start < duration:
        sys.stdout.write(render_spinner(spinner_frame(phase)))
        sys.stdout.flush()
        phase = (phase + 5) % 360
        time.sleep(0.1)
        sys.stdout.write(_RERENDER)
        sys.stdout.flush()


def startup_loader() -> None:
    """Show the start-up animation."""
    run_spinner(10.0)