"""Puzzle inputs shipped inside the package."""

from importlib import resources

from .file_inputs import input_filename

PACKAGE = "aoc2023.inputs"


class BundledInputSource:
    """
    Inputs bundled as package data.

    Implements InputSource protocol. These are the published puzzle
    examples; personal inputs are read from the configured directory.
    """

    def __init__(self, package: str = PACKAGE):
        self.package = package

    def read(self, day: int) -> str:
        resource = resources.files(self.package) / input_filename(day)
        if not resource.is_file():
            raise FileNotFoundError(f"No bundled input for day {day}")
        return resource.read_text(encoding="utf-8")

    def exists(self, day: int) -> bool:
        return (resources.files(self.package) / input_filename(day)).is_file()
