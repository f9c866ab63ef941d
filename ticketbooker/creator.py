"""Creation of an event folder and its data files."""

from __future__ import annotations

from pathlib import Path

from .constants import DATA_FILES, RED, RESET, YELLOW, YES_NO_HINT
from .datafile import DataFileError, PathType, save_matrix
from .generator import VenueSize, generate_data, section_size
from .validation import confirm


def create_data_file(file_name: str, file_path: PathType, venue: VenueSize) -> None:
    """Generate the named data file for the venue and write it to `file_path`."""
    rows = generate_data(
        file_name, venue.row_count, venue.row_length, venue.seats_between_walkways
    )
    save_matrix(rows, file_path)


def _write_data_files(folder: Path, venue: VenueSize, replace: bool) -> None:
    failed = []
    for name in DATA_FILES:
        path = folder / name
        try:
            if replace:
                path.unlink(missing_ok=True)
            create_data_file(name, path, venue)
        except OSError:
            failed.append(name)
    if failed:
        raise DataFileError(f"Failed to create files: {', '.join(failed)}")


def create_event_folder(
    event_name: str, venue: VenueSize, folder_path: PathType
) -> bool:
    """Create the event folder with all its data files.

    If the folder already exists the user is asked whether to override it;
    returns False when they decline. Raises DataFileError when the folder or
    any of the files cannot be written, and ValueError when the venue has too
    few rows to be laid out.
    """
    if section_size(venue.row_count) < 1:
        raise ValueError("The venue has too few rows to be divided into sections.")
    folder = Path(folder_path)
    if folder.is_dir():
        prompt = (
            f"\nEvent: {YELLOW}{event_name}{RESET} already exists. \n"
            f"Do you want to {RED}override it{RESET}? {YES_NO_HINT}: "
        )
        if not confirm(prompt):
            return False
        _write_data_files(folder, venue, replace=True)
        return True
    try:
        folder.mkdir(parents=True)
    except OSError as err:
        raise DataFileError(f"Error creating directory: {folder}") from err
    _write_data_files(folder, venue, replace=False)
    return True