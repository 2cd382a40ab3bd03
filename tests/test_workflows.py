"""Tests for the shared workflow layer."""

from unittest.mock import MagicMock

import pytest

from aoc2023.adapters import BundledInputSource
from aoc2023.config import Config
from aoc2023.core.errors import ParseError
from aoc2023.days import DAYS
from aoc2023.table import format_table
from aoc2023.workflows import DayResult, selected_days, solve_all, solve_day

SAMPLE_ANSWERS = {
    1: (142, 142),
    2: (8, 2286),
    3: (4361, 467835),
    4: (13, 30),
    5: (35, 46),
    6: (288, 71503),
}


@pytest.fixture
def config(tmp_path):
    return Config(input_dir=str(tmp_path))


class TestSolveDay:
    def test_both_parts(self):
        result = solve_day(DAYS[4], BundledInputSource().read(4))
        assert result == DayResult(day=4, title="Scratchcards", part1=13, part2=30)

    def test_single_part(self):
        result = solve_day(DAYS[6], BundledInputSource().read(6), parts=(2,))
        assert result.part1 is None
        assert result.part2 == 71503


class TestSelectedDays:
    def test_all_days_by_default(self):
        assert [d.number for d in selected_days(Config())] == [1, 2, 3, 4, 5, 6]

    def test_configured_days(self):
        assert [d.number for d in selected_days(Config(days=[5, 2]))] == [5, 2]

    def test_unknown_days_skipped(self):
        assert [d.number for d in selected_days(Config(days=[2, 9]))] == [2]


class TestSolveAll:
    def test_bundled_samples(self, config):
        results = solve_all(config)
        assert {r.day: (r.part1, r.part2) for r in results} == SAMPLE_ANSWERS

    def test_personal_input_overrides_bundled(self, config, tmp_path):
        (tmp_path / "day6.txt").write_text("Time: 7\nDistance: 9\n", encoding="utf-8")
        results = solve_all(Config(input_dir=str(tmp_path), days=[6]))
        assert (results[0].part1, results[0].part2) == (4, 4)

    def test_invalid_input_aborts(self, config, tmp_path):
        (tmp_path / "day2.txt").write_text("Game 1: 3 mauve\n", encoding="utf-8")
        with pytest.raises(ParseError):
            solve_all(config)

    def test_reads_from_given_source(self):
        source = MagicMock()
        source.read.return_value = "Card 1: 1 | 1\n"
        results = solve_all(Config(days=[4]), source)
        source.read.assert_called_once_with(4)
        assert (results[0].part1, results[0].part2) == (1, 1)

    def test_idempotent(self, config):
        assert solve_all(config) == solve_all(config)


class TestFormatTable:
    def test_layout(self):
        table = format_table([DayResult(1, "a", 142, 281), DayResult(12, "b", 8, None)])
        assert table.splitlines() == [
            "╭─────┬────────┬────────╮",
            "│ Day ┆ Part 1 ┆ Part 2 │",
            "╞═════╪════════╪════════╡",
            "│   1 ┆    142 ┆    281 │",
            "├╌╌╌╌╌┼╌╌╌╌╌╌╌╌┼╌╌╌╌╌╌╌╌┤",
            "│  12 ┆      8 ┆        │",
            "╰─────┴────────┴────────╯",
        ]

    def test_wide_numbers_grow_columns(self):
        table = format_table([DayResult(6, "a", 71503, 123456789)])
        assert "│   6 ┆  71503 ┆ 123456789 │" in table.splitlines()
