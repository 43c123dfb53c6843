"""Requirement checks for assembled levels.

An assembled level is only used when it has room for the player and all
boxes, all of its floors are connected, no floor is a dead end, there are no
large open areas and there are enough places for goals.
"""
from ..models.cell import Cell
from ..models.level import Level, RequirementReport
from .entities import get_possible_goal_locations


def level_meets_requirements(level: Level, box_count: int) -> bool:
    """Return False if the level should not be used."""
    return (
        has_enough_space(level, box_count)
        and has_connectivity(level)
        and has_no_surrounded_floors(level)
        and has_no_large_spaces(level)
        and has_enough_goal_places(level, box_count)
    )


def check_requirements(level: Level, box_count: int) -> RequirementReport:
    """Run every requirement check and report each outcome."""
    return RequirementReport(
        enough_space=has_enough_space(level, box_count),
        connected=has_connectivity(level),
        no_surrounded_floors=has_no_surrounded_floors(level),
        no_large_spaces=has_no_large_spaces(level),
        enough_goal_places=has_enough_goal_places(level, box_count),
    )


def has_enough_space(level: Level, box_count: int) -> bool:
    """Ensure there is space for the boxes, the player and one free cell."""
    target_floors = box_count + 2
    floors = sum(1 for row in level for cell in row if cell.is_floor())
    return floors >= target_floors


def has_enough_goal_places(level: Level, box_count: int) -> bool:
    return len(get_possible_goal_locations(level)) >= box_count


def has_connectivity(level: Level) -> bool:
    """
    Ensure that all floors in the level are connected.

    Only plain floors are followed. Special floors belong to the alcove
    template, which is playable without a floor-to-floor connection.
    """
    start = next(
        ((row, col)
         for row, cells in enumerate(level)
         for col, cell in enumerate(cells)
         if cell == Cell.FLOOR),
        None,
    )
    if start is None:
        return False

    height, width = len(level), len(level[0])
    visited = [[False] * width for _ in range(height)]
    stack = [start]

    while stack:
        row, col = stack.pop()
        if visited[row][col]:
            continue
        visited[row][col] = True

        for n_row, n_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if (0 <= n_row < height and 0 <= n_col < width
                    and level[n_row][n_col] == Cell.FLOOR
                    and not visited[n_row][n_col]):
                stack.append((n_row, n_col))

    return all(
        visited[row][col]
        for row in range(height)
        for col in range(width)
        if level[row][col] == Cell.FLOOR
    )


def has_no_surrounded_floors(level: Level) -> bool:
    """Ensure no floor has walls on three or more sides. The level edge counts as wall."""
    height = len(level)
    width = len(level[0]) if level else 0

    for row in range(height):
        for col in range(width):
            if not level[row][col].is_floor():
                continue

            surrounding_walls = 0
            for n_row, n_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
                if not (0 <= n_row < height and 0 <= n_col < width):
                    surrounding_walls += 1
                elif level[n_row][n_col] == Cell.WALL:
                    surrounding_walls += 1

            if surrounding_walls >= 3:
                return False

    return True


def has_no_large_spaces(level: Level) -> bool:
    """Ensure there is no 3x4 or 4x3 block of floors, those make dull levels."""
    for block_height, block_width in ((3, 4), (4, 3)):
        for top in range(len(level) - block_height + 1):
            for left in range(len(level[top]) - block_width + 1):
                if all(
                    level[row][col].is_floor()
                    for row in range(top, top + block_height)
                    for col in range(left, left + block_width)
                ):
                    return False
    return True
