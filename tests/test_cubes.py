"""Tests for day 2 cube games."""

import pytest

from aoc2023.core.cubes import BAG_CONTENTS, CubeSet, Game, first_part, parse_cube_set, second_part
from aoc2023.core.errors import ParseError

SAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


@pytest.fixture
def games():
    return [Game.parse(line) for line in SAMPLE.splitlines()]


class TestParseCubeSet:
    def test_all_colors(self):
        assert parse_cube_set("1 red, 2 green, 6 blue") == CubeSet(red=1, green=2, blue=6)

    def test_missing_colors_are_zero(self):
        assert parse_cube_set("2 green") == CubeSet(green=2)

    def test_duplicate_color_overwrites(self):
        assert parse_cube_set("3 red, 5 red") == CubeSet(red=5)

    @pytest.mark.parametrize(
        "text",
        ["3 purple", "three red", "3red", "3 red,4 blue", "", "3 red extra", "-1 red"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(ParseError):
            parse_cube_set(text)


class TestGameParse:
    def test_first_sample_game(self):
        game = Game.parse("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game.id == 1
        assert game.cube_sets == (
            CubeSet(red=4, green=0, blue=3),
            CubeSet(red=1, green=2, blue=6),
            CubeSet(red=0, green=2, blue=0),
        )

    @pytest.mark.parametrize(
        "line",
        [
            "Gam 1: 3 blue",
            "Game 1 3 blue",
            "Game x: 3 blue",
            "Game 1: 3 blue;4 red",
            "Game 1: ",
        ],
    )
    def test_rejects_malformed(self, line):
        with pytest.raises(ParseError):
            Game.parse(line)


class TestGameRules:
    def test_possible_games(self, games):
        assert [g.id for g in games if g.is_possible()] == [1, 2, 5]

    def test_custom_caps(self, games):
        caps = CubeSet(red=20, green=13, blue=15)
        assert games[2].is_possible(caps)

    def test_every_set_must_fit(self):
        game = Game.parse("Game 7: 1 red; 13 red")
        assert not game.is_possible(BAG_CONTENTS)

    def test_required_set(self, games):
        assert games[0].required_set() == CubeSet(red=4, green=2, blue=6)

    def test_powers(self, games):
        assert [g.required_set().power for g in games] == [48, 12, 1560, 630, 36]

    def test_missing_color_gives_zero_power(self):
        assert Game.parse("Game 1: 3 red, 2 blue").required_set().power == 0


class TestParts:
    def test_first_part_sample(self):
        assert first_part(SAMPLE) == 8

    def test_second_part_sample(self):
        assert second_part(SAMPLE) == 2286

    def test_invalid_line_aborts(self):
        with pytest.raises(ParseError):
            first_part(SAMPLE + "Game 6: 1 yellow\n")
