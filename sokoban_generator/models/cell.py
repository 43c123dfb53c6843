"""Cell types of a sokoban level."""
from enum import Enum


class Cell(str, Enum):
    """Tile kind of a single cell in the level grid."""
    EMPTY = "empty"  # Unassigned, matches anything while tiling
    WALL = "wall"
    PLAYER = "player"
    PLAYER_ON_GOAL = "player_on_goal"
    BOX = "box"
    BOX_ON_GOAL = "box_on_goal"
    GOAL = "goal"
    FLOOR = "floor"
    SPECIAL_FLOOR = "special_floor"  # Floor skipped by the connectivity check

    @property
    def glyph(self) -> str:
        """Character used when rendering the level as text."""
        return GLYPHS[self]

    @property
    def encoding_char(self) -> str:
        """Character used in the compact level encoding."""
        if self in (Cell.EMPTY, Cell.FLOOR, Cell.SPECIAL_FLOOR):
            return "-"
        return GLYPHS[self]

    def is_floor(self) -> bool:
        return self in (Cell.FLOOR, Cell.SPECIAL_FLOOR)

    def is_box(self) -> bool:
        return self in (Cell.BOX, Cell.BOX_ON_GOAL)

    def is_player(self) -> bool:
        return self in (Cell.PLAYER, Cell.PLAYER_ON_GOAL)

    def is_goal(self) -> bool:
        """True for every cell that holds a goal slot."""
        return self in (Cell.GOAL, Cell.BOX_ON_GOAL, Cell.PLAYER_ON_GOAL)

    def is_walkable(self) -> bool:
        return self in (Cell.FLOOR, Cell.SPECIAL_FLOOR, Cell.GOAL)


GLYPHS = {
    Cell.EMPTY: " ",
    Cell.WALL: "#",
    Cell.PLAYER: "@",
    Cell.PLAYER_ON_GOAL: "+",
    Cell.BOX: "$",
    Cell.BOX_ON_GOAL: "*",
    Cell.GOAL: ".",
    Cell.FLOOR: " ",
    Cell.SPECIAL_FLOOR: " ",
}
