"""Level assembly from randomly rotated room templates.

Rooms are placed one 3x3 slot at a time, left to right and top to bottom.
A room fits a slot when the outer ring of its template agrees with the
cells already placed around the slot. Empty cells on either side match
anything.
"""
import logging
import random
from typing import List, Optional

from ..models.cell import Cell
from ..models.level import Level
from .rooms import pick_random_room

logger = logging.getLogger(__name__)

ROOM_SIZE = 3


def assemble(height: int, width: int, rng: Optional[random.Random] = None) -> Level:
    """
    Generate a level with the given dimension of rooms.

    Args:
        height: Number of room rows.
        width: Number of room columns.
        rng: Random number generator used for room selection.

    Returns:
        Level of (height * 3) x (width * 3) cells.
    """
    if rng is None:
        rng = random.Random()

    level = [[Cell.EMPTY] * (width * ROOM_SIZE) for _ in range(height * ROOM_SIZE)]

    for room_row in range(height):
        for room_col in range(width):
            surroundings = extract_surrounding_cells(level, room_row, room_col, height, width)

            draws = 0
            while True:
                draws += 1
                room = pick_random_room(rng)
                borders = extract_room_borders(room, room_row, room_col, height, width)
                if template_match(surroundings, borders):
                    break

            logger.debug("Room (%d, %d) placed after %d draws", room_row, room_col, draws)
            _place_room(level, room, room_row, room_col)

    return level


def template_match(surroundings: List[Cell], borders: List[Cell]) -> bool:
    """Check the cells around a slot against the outer ring of a room."""
    for placed, wanted in zip(surroundings, borders):
        if placed == Cell.EMPTY or wanted == Cell.EMPTY:
            continue
        if placed != wanted:
            return False
    return True


def extract_surrounding_cells(
    level: Level, room_row: int, room_col: int, height: int, width: int
) -> List[Cell]:
    """
    Collect the level cells bordering a slot.

    Order: left column, right column, top row, bottom row. Sides on the
    edge of the level are left out.
    """
    top = room_row * ROOM_SIZE
    left = room_col * ROOM_SIZE
    rows = range(top, top + ROOM_SIZE)
    cols = range(left, left + ROOM_SIZE)

    parts: List[Cell] = []
    if room_col != 0:
        parts.extend(level[row][left - 1] for row in rows)
    if room_col != width - 1:
        parts.extend(level[row][left + ROOM_SIZE] for row in rows)
    if room_row != 0:
        parts.extend(level[top - 1][col] for col in cols)
    if room_row != height - 1:
        parts.extend(level[top + ROOM_SIZE][col] for col in cols)
    return parts


def extract_room_borders(
    room: Level, room_row: int, room_col: int, height: int, width: int
) -> List[Cell]:
    """Collect the outer ring of a room in the order of extract_surrounding_cells."""
    inner = range(1, ROOM_SIZE + 1)
    edge = ROOM_SIZE + 1

    parts: List[Cell] = []
    if room_col != 0:
        parts.extend(room[row][0] for row in inner)
    if room_col != width - 1:
        parts.extend(room[row][edge] for row in inner)
    if room_row != 0:
        parts.extend(room[0][col] for col in inner)
    if room_row != height - 1:
        parts.extend(room[edge][col] for col in inner)
    return parts


def _place_room(level: Level, room: Level, room_row: int, room_col: int) -> None:
    top = room_row * ROOM_SIZE
    left = room_col * ROOM_SIZE
    for row in range(ROOM_SIZE):
        level[top + row][left:left + ROOM_SIZE] = room[row + 1][1:ROOM_SIZE + 1]
