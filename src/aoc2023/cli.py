"""aoc2023 CLI - Advent of Code 2023 solvers."""

import json
import logging
import sys
from pathlib import Path

import click

from .config import load_config
from .core.errors import InvalidInput
from .days import DAYS
from .table import format_table
from .workflows import get_input_source, solve_all, solve_day


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Advent of Code 2023 - solve days 1 to 6."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(table)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def table(as_json: bool = False):
    """Solve every day and print the results table."""
    config = load_config()
    try:
        results = solve_all(config)
    except (InvalidInput, FileNotFoundError, UnicodeDecodeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        click.echo(format_table(results))


@main.command()
@click.argument("day", type=click.IntRange(min(DAYS), max(DAYS)))
@click.option("--part", "-p", type=click.IntRange(1, 2), default=None, help="Only run this part")
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the input from this file instead",
)
def solve(day: int, part: int | None, input_file: Path | None):
    """Solve a single day."""
    try:
        if input_file:
            text = input_file.read_text(encoding="utf-8")
        else:
            text = get_input_source(load_config()).read(day)
        result = solve_day(DAYS[day], text, parts=(part,) if part else (1, 2))
    except (InvalidInput, FileNotFoundError, UnicodeDecodeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Day {result.day}: {result.title}")
    if result.part1 is not None:
        click.echo(f"  Part 1: {result.part1}")
    if result.part2 is not None:
        click.echo(f"  Part 2: {result.part2}")


@main.command("days")
def list_days():
    """List the solved days."""
    for number in sorted(DAYS):
        click.echo(f"{number:>2}  {DAYS[number].title}")


if __name__ == "__main__":
    main()
