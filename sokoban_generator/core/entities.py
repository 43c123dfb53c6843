"""Placement of goals, boxes and the player.

The boxes start on their goals. From there every box configuration the
player can produce is explored by moving boxes away from the goals: a box
moves one cell in a direction when the player can reach both that cell and
the cell behind it, and the player ends up on the latter. Played forwards
this is a push back onto the goals. The configuration that needs the most
moves to reach becomes the start of the level.

Configurations are remembered by the content of their grid. For each one a
step map keeps, per player cell, the smallest number of moves that reached
it, so a configuration is only explored again when it was reached faster.
"""
import logging
import random
from enum import Enum
from typing import List, NamedTuple, Optional, Set

from ..models.cell import Cell
from ..models.level import BacktrackMap, Level, Placement, Position, StepMap
from ..utils.helpers import copy_level

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Movement direction as a (row, col) delta."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def make_move(self, position: Position, height: int, width: int) -> Optional[Position]:
        """Step one cell in this direction, None when leaving the level."""
        row = position[0] + self.value[0]
        col = position[1] + self.value[1]
        if 0 <= row < height and 0 <= col < width:
            return row, col
        return None


class TrackingState(NamedTuple):
    """One node of the box search."""
    boxes: List[Position]
    player: Position
    level: Level
    step: int


def place_entities(level: Level, box_count: int, rng: Optional[random.Random] = None) -> Optional[Placement]:
    """
    Place goals, boxes and the player in the level.

    1. Calculate all possible goal locations and shuffle them
    2. Put a box on a goal at each of the first box_count locations
    3. For every player start, explore the box configurations reachable
       from there
    4. Pick the configuration and player cell that took the most moves

    Args:
        level: Assembled level, it is modified in place.
        box_count: Number of boxes to place.
        rng: Random number generator for the goal shuffle.

    Returns:
        The placement, or None when no box could be moved at all.
    """
    for row, col in get_random_goal_locations(level, box_count, rng):
        level[row][col] = Cell.BOX_ON_GOAL

    backtrack = create_box_backtrack_map(level)

    max_level = None
    max_pos = None
    max_steps = -1

    for steps, snapshot in backtrack.values():
        position, step = _max_step(steps)
        if step > max_steps:
            max_level = snapshot
            max_pos = position
            max_steps = step

    if max_level is None or max_pos is None:
        return None

    result = copy_level(max_level)
    row, col = max_pos
    result[row][col] = Cell.PLAYER_ON_GOAL if result[row][col] == Cell.GOAL else Cell.PLAYER

    return Placement(level=result, player=max_pos, push_depth=max_steps)


def get_random_goal_locations(
    level: Level, box_count: int, rng: Optional[random.Random] = None
) -> List[Position]:
    """Shuffle all possible goal locations and take the first box_count."""
    if rng is None:
        rng = random.Random()

    possible_goals = get_possible_goal_locations(level)
    rng.shuffle(possible_goals)
    return possible_goals[:box_count]


def get_possible_goal_locations(level: Level) -> List[Position]:
    """
    Get all floors that can hold a goal.

    A floor qualifies when the two cells next to it in one direction are
    floors too, so a box on it can be moved along a straight line.
    """
    height = len(level)
    width = len(level[0]) if level else 0
    locations = []

    for row in range(height):
        for col in range(width):
            if not level[row][col].is_floor():
                continue

            for d_row, d_col in (direction.value for direction in Direction):
                near_row, near_col = row + d_row, col + d_col
                far_row, far_col = row + 2 * d_row, col + 2 * d_col
                if (0 <= far_row < height and 0 <= far_col < width
                        and level[near_row][near_col].is_floor()
                        and level[far_row][far_col].is_floor()):
                    locations.append((row, col))
                    break

    return locations


def create_box_backtrack_map(level: Level) -> BacktrackMap:
    """Explore the box configurations reachable from every player start."""
    height = len(level)
    width = len(level[0]) if level else 0

    player_starts = [
        (row, col)
        for row in range(height)
        for col in range(width)
        if level[row][col].is_floor()
    ]
    initial_boxes = [
        (row, col)
        for row in range(height)
        for col in range(width)
        if level[row][col].is_box()
    ]

    backtrack: BacktrackMap = {}
    expanded = 0

    for start in player_starts:
        stack = [TrackingState(list(initial_boxes), start, level, 0)]

        while stack:
            state = stack.pop()
            if check_for_cached_map(state, backtrack):
                continue

            expanded += 1
            reachable = reachable_cells(state.level, state.player)

            for index, box in enumerate(state.boxes):
                for direction in Direction:
                    new_box = direction.make_move(box, height, width)
                    if new_box is None or new_box not in reachable:
                        continue

                    new_player = direction.make_move(new_box, height, width)
                    if new_player is None or new_player not in reachable:
                        continue

                    new_boxes = list(state.boxes)
                    new_boxes[index] = new_box
                    stack.append(TrackingState(
                        new_boxes,
                        new_player,
                        move_box(state.level, box, new_box),
                        state.step + 1,
                    ))

    logger.debug("Explored %d states, %d box configurations", expanded, len(backtrack))
    return backtrack


def move_box(level: Level, source: Position, target: Position) -> Level:
    """
    Return a copy of the level with the box moved from source to target.

    Raises:
        RuntimeError: If source holds no box or target is not free, which
            means the tracked boxes no longer match the grid.
    """
    new_level = copy_level(level)
    src_row, src_col = source
    dst_row, dst_col = target

    if level[src_row][src_col] == Cell.BOX_ON_GOAL:
        new_level[src_row][src_col] = Cell.GOAL
    elif level[src_row][src_col] == Cell.BOX:
        new_level[src_row][src_col] = Cell.FLOOR
    else:
        raise RuntimeError(f"Invalid box cell {level[src_row][src_col].value} at {source}")

    if level[dst_row][dst_col] == Cell.GOAL:
        new_level[dst_row][dst_col] = Cell.BOX_ON_GOAL
    elif level[dst_row][dst_col].is_floor():
        new_level[dst_row][dst_col] = Cell.BOX
    else:
        raise RuntimeError(f"Invalid box target {level[dst_row][dst_col].value} at {target}")

    return new_level


def check_for_cached_map(state: TrackingState, backtrack_map: BacktrackMap) -> bool:
    """
    Look up the state's configuration and record the moves it took.

    Returns True when the configuration was already reached at the player's
    cell with at most as many moves, so the state needs no exploration.
    Otherwise the step map is updated and False is returned. Start states
    are never recorded.
    """
    if state.step == 0:
        return False

    key = level_identifier(state.level)
    row, col = state.player

    cached = backtrack_map.get(key)
    if cached is None:
        steps = [[0] * len(state.level[0]) for _ in state.level]
        backtrack_map[key] = (steps, state.level)
    else:
        steps = cached[0]
        used_steps = steps[row][col]
        if 0 < used_steps <= state.step:
            return True

    update_backtrack_steps(state.level, steps, state.player, state.step)
    return False


def update_backtrack_steps(level: Level, steps: StepMap, start: Position, step: int) -> None:
    """Set the step count on every walkable cell connected to start."""
    height, width = len(level), len(level[0])
    stack = [start]

    while stack:
        row, col = stack.pop()
        if steps[row][col] == step or not level[row][col].is_walkable():
            continue

        steps[row][col] = step

        if row > 0:
            stack.append((row - 1, col))
        if row < height - 1:
            stack.append((row + 1, col))
        if col > 0:
            stack.append((row, col - 1))
        if col < width - 1:
            stack.append((row, col + 1))


def level_identifier(level: Level) -> str:
    """Identify a level by concatenating the glyphs of all its cells."""
    return "".join(cell.glyph for row in level for cell in row)


def reachable_cells(level: Level, start: Position) -> Set[Position]:
    """Flood fill the walkable cells connected to start."""
    height = len(level)
    width = len(level[0]) if level else 0
    row, col = start

    if not (0 <= row < height and 0 <= col < width) or not level[row][col].is_walkable():
        return set()

    visited = {start}
    stack = [start]

    while stack:
        row, col = stack.pop()
        for n_row, n_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if ((n_row, n_col) not in visited
                    and 0 <= n_row < height and 0 <= n_col < width
                    and level[n_row][n_col].is_walkable()):
                visited.add((n_row, n_col))
                stack.append((n_row, n_col))

    return visited


def is_reachable(level: Level, source: Position, target: Position) -> bool:
    """
    Check if target can be walked to from source.

    Both cells must be inside the level and walkable.
    """
    height = len(level)
    width = len(level[0]) if level else 0
    row, col = target

    if not (0 <= row < height and 0 <= col < width) or not level[row][col].is_walkable():
        return False

    return target in reachable_cells(level, source)


def _max_step(steps: StepMap):
    """Return the first cell holding the highest step count, with the count."""
    best_pos = (0, 0)
    best_step = -1
    for row, cells in enumerate(steps):
        for col, step in enumerate(cells):
            if step > best_step:
                best_pos = (row, col)
                best_step = step
    return best_pos, best_step
