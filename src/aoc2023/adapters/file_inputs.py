"""File-based puzzle input adapter."""

from pathlib import Path


def input_filename(day: int) -> str:
    return f"day{day}.txt"


class FileInputSource:
    """
    Directory of puzzle inputs.

    Implements InputSource protocol. Each day is a UTF-8 file named dayN.txt.
    """

    def __init__(self, input_dir: Path | str):
        self.input_dir = Path(input_dir).expanduser()

    def _path_for_day(self, day: int) -> Path:
        """Get the file path for a given day."""
        return self.input_dir / input_filename(day)

    def read(self, day: int) -> str:
        """Read the input for a day."""
        return self._path_for_day(day).read_text(encoding="utf-8")

    def exists(self, day: int) -> bool:
        """Check if an input file exists for a day."""
        return self._path_for_day(day).is_file()
