"""Level generator engine.

Generation runs in two retry loops. Rooms are assembled until the result
meets the requirements, then goals, boxes and the player are placed until a
placement with at least one box move exists. The finished level is framed
with a wall border.
"""
import logging
import random
import time
from typing import Optional

from ..models.level import GenerationParams, GenerationResult, Level
from ..utils.helpers import copy_level, frame_level, level_to_rows
from .assembly import assemble
from .entities import place_entities
from .requirements import level_meets_requirements

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when a retry limit is exhausted before a level was found."""

    def __init__(self, message: str, assembly_attempts: int = 0, placement_attempts: int = 0):
        super().__init__(message)
        self.assembly_attempts = assembly_attempts
        self.placement_attempts = placement_attempts


class LevelGenerator:
    """Generates sokoban levels from room templates."""

    def generate(self, params: GenerationParams) -> GenerationResult:
        """
        Generate a level.

        Args:
            params: Generation parameters. Without a seed a random one is
                drawn and reported in the result.

        Returns:
            GenerationResult with the framed level.

        Raises:
            GenerationError: If a retry limit in params is exhausted.
        """
        start_time = time.time()

        seed = params.seed if params.seed is not None else random.randint(1, 999999)
        rng = random.Random(seed)

        rooms, assembly_attempts = self._assemble_valid_rooms(params, rng)

        placement_attempts = 0
        while True:
            placement_attempts += 1
            placement = place_entities(copy_level(rooms), params.boxes, rng)
            if placement is not None:
                break

            logger.debug("Placement attempt %d found no box move", placement_attempts)
            if (params.max_placement_attempts is not None
                    and placement_attempts >= params.max_placement_attempts):
                raise GenerationError(
                    f"No solvable placement of {params.boxes} boxes after "
                    f"{placement_attempts} attempts",
                    assembly_attempts=assembly_attempts,
                    placement_attempts=placement_attempts,
                )

        level = frame_level(placement.level)
        generation_time_ms = int((time.time() - start_time) * 1000)

        logger.info(
            "Generated %dx%d level with %d boxes: depth=%d, seed=%d, attempts=%d/%d, %dms",
            len(level), len(level[0]), params.boxes, placement.push_depth, seed,
            assembly_attempts, placement_attempts, generation_time_ms,
        )

        return GenerationResult(
            level=level,
            seed=seed,
            push_depth=placement.push_depth,
            box_count=params.boxes,
            assembly_attempts=assembly_attempts,
            placement_attempts=placement_attempts,
            generation_time_ms=generation_time_ms,
            rows=level_to_rows(level),
        )

    def _assemble_valid_rooms(self, params: GenerationParams, rng: random.Random):
        """Assemble rooms until they meet the requirements."""
        attempts = 0
        while True:
            attempts += 1
            rooms = assemble(params.height, params.width, rng)
            if level_meets_requirements(rooms, params.boxes):
                return rooms, attempts

            logger.debug("Assembly attempt %d rejected", attempts)
            if (params.max_assembly_attempts is not None
                    and attempts >= params.max_assembly_attempts):
                raise GenerationError(
                    f"No {params.height}x{params.width} room layout met the requirements "
                    f"for {params.boxes} boxes after {attempts} attempts",
                    assembly_attempts=attempts,
                )


def generate_level(height: int, width: int, boxes: int, seed: Optional[int] = None) -> Level:
    """
    Generate a new level with the given dimensions and box count.

    Height and width are the number of rooms, a room is 3x3 cells. The
    returned level has a wall border, so it is (height * 3 + 2) x
    (width * 3 + 2) cells.
    """
    params = GenerationParams(height=height, width=width, boxes=boxes, seed=seed)
    return LevelGenerator().generate(params).level


# Singleton instance
_generator = None


def get_generator() -> LevelGenerator:
    """Get or create generator singleton instance."""
    global _generator
    if _generator is None:
        _generator = LevelGenerator()
    return _generator
