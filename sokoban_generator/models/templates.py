"""Room template catalogue.

Every template is a 5x5 block of cells. The inner 3x3 is the room that ends
up in the level, the outer ring describes what the neighbouring rooms must
look like along the shared border. Empty cells in the ring match anything.

Legend used below:
    ~  empty (no constraint)
    #  wall
    _  floor
    s  special floor (exempt from the connectivity check)
"""
from typing import Dict, List, Tuple

from .cell import Cell

Template = Tuple[Tuple[Cell, ...], ...]

TEMPLATE_SIZE = 5

_LEGEND: Dict[str, Cell] = {
    "~": Cell.EMPTY,
    "#": Cell.WALL,
    "_": Cell.FLOOR,
    "s": Cell.SPECIAL_FLOOR,
}

_TEMPLATE_ROWS: List[Tuple[str, ...]] = [
    (
        "~~~~~",
        "~___~",
        "~___~",
        "~___~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~#__~",
        "~___~",
        "~___~",
        "~~~~~",
    ),
    (
        "~~~__",
        "~##__",
        "~___~",
        "~___~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~###~",
        "~___~",
        "~___~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~###~",
        "~#__~",
        "~#__~",
        "~~~~~",
    ),
    (
        "~~_~~",
        "~#__~",
        "____~",
        "~__#~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~#__~",
        "____~",
        "~#__~",
        "~~~~~",
    ),
    (
        "~~_~~",
        "~#__~",
        "____~",
        "~#_#~",
        "~~_~~",
    ),
    (
        "~~_~~",
        "~#_#~",
        "_____",
        "~#_#~",
        "~~_~~",
    ),
    # Alcove: the special floor is only reachable from the side opening,
    # so it is left out of the connectivity check.
    (
        "~~_~~",
        "~#_#~",
        "~#s__",
        "~###~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~###~",
        "_____",
        "~###~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~____",
        "~_#__",
        "~___~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~###~",
        "~###~",
        "~###~",
        "~~~~~",
    ),
    (
        "~~~~~",
        "~###~",
        "~#__~",
        "____~",
        "__~~~",
    ),
    (
        "~_~_~",
        "~___~",
        "~#_#~",
        "~___~",
        "~_~_~",
    ),
    (
        "~~~~~",
        "~###~",
        "~###~",
        "~___~",
        "~___~",
    ),
    (
        "~~~~~",
        "~###~",
        "__#__",
        "~___~",
        "~__~~",
    ),
]


def _decode(rows: Tuple[str, ...]) -> Template:
    return tuple(tuple(_LEGEND[char] for char in row) for row in rows)


TEMPLATES: Tuple[Template, ...] = tuple(_decode(rows) for rows in _TEMPLATE_ROWS)


def template_to_rows(template: Template) -> List[str]:
    """Draw a template with the catalogue legend."""
    symbols = {cell: char for char, cell in _LEGEND.items()}
    return ["".join(symbols[cell] for cell in row) for row in template]
