"""Results table formatting."""

from .workflows import DayResult

HEADERS = ("Day", "Part 1", "Part 2")


def _cells(result: DayResult) -> tuple[str, str, str]:
    return (
        str(result.day),
        "" if result.part1 is None else str(result.part1),
        "" if result.part2 is None else str(result.part2),
    )


def format_table(results: list[DayResult]) -> str:
    """
    Render results as a box-drawn table with rounded corners.

    Every cell is right-aligned and padded by one space on each side.
    """
    rows = [_cells(result) for result in results]
    widths = [max(len(row[i]) for row in [HEADERS, *rows]) for i in range(len(HEADERS))]

    def line(left: str, fill: str, middle: str, right: str) -> str:
        return left + middle.join(fill * (width + 2) for width in widths) + right

    def row_line(cells: tuple[str, ...]) -> str:
        return "│" + "┆".join(f" {cell:>{width}} " for cell, width in zip(cells, widths)) + "│"

    out = [line("╭", "─", "┬", "╮"), row_line(HEADERS), line("╞", "═", "╪", "╡")]
    for i, row in enumerate(rows):
        if i:
            out.append(line("├", "╌", "┼", "┤"))
        out.append(row_line(row))
    out.append(line("╰", "─", "┴", "╯"))
    return "\n".join(out)
