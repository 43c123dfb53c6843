"""Utility helper functions."""
from typing import Callable, Dict, List

from ..models.cell import Cell
from ..models.level import Level

# Glyphs accepted by parse_level. Floors can be written as space or '-'.
_PARSE_GLYPHS: Dict[str, Cell] = {
    "#": Cell.WALL,
    " ": Cell.FLOOR,
    "-": Cell.FLOOR,
    "_": Cell.FLOOR,
    "$": Cell.BOX,
    "*": Cell.BOX_ON_GOAL,
    ".": Cell.GOAL,
    "@": Cell.PLAYER,
    "+": Cell.PLAYER_ON_GOAL,
}


def copy_level(level: Level) -> Level:
    """Return an independent copy of the level grid."""
    return [row[:] for row in level]


def frame_level(level: Level) -> Level:
    """Surround the level with a one cell wide wall border."""
    width = len(level[0]) if level else 0
    border = [Cell.WALL] * (width + 2)

    framed = [border[:]]
    for row in level:
        framed.append([Cell.WALL] + row + [Cell.WALL])
    framed.append(border[:])
    return framed


def level_to_rows(level: Level) -> List[str]:
    """Render every row of the level as a string of glyphs."""
    return ["".join(cell.glyph for cell in row) for row in level]


def render_text(level: Level) -> str:
    """
    Create the string representation of a level.

    One line per row, one character per cell, every row is newline
    terminated.
    """
    return "".join(row + "\n" for row in level_to_rows(level))


def encode_level(level: Level) -> str:
    """
    Encode the level on a single line.

    Floors are written as '-', rows are separated by '|'.
    """
    return "|".join("".join(cell.encoding_char for cell in row) for row in level)


def parse_level(text: str) -> Level:
    """
    Parse a level drawn with rendering glyphs.

    Rows are padded with floor cells to the width of the longest row.

    Raises:
        ValueError: If the text contains an unknown glyph.
    """
    lines = [line for line in text.split("\n") if line]
    if not lines:
        return []

    width = max(len(line) for line in lines)
    level: Level = []
    for row_idx, line in enumerate(lines):
        row = []
        for col_idx, char in enumerate(line.ljust(width)):
            if char not in _PARSE_GLYPHS:
                raise ValueError(f"Unknown glyph {char!r} at row {row_idx}, col {col_idx}")
            row.append(_PARSE_GLYPHS[char])
        level.append(row)
    return level


def count_cells(level: Level, predicate: Callable[[Cell], bool]) -> int:
    """Count the cells of the level matching the predicate."""
    return sum(1 for row in level for cell in row if predicate(cell))
