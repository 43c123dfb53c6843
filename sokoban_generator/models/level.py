"""Level data models and structures."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .cell import Cell

# A level is a row-major grid: level[row][col]
Level = List[List[Cell]]

# (row, col)
Position = Tuple[int, int]

# Minimum pushes needed to reach each cell of one box configuration
StepMap = List[List[int]]

# Level identifier -> (step map, level snapshot)
BacktrackMap = Dict[str, Tuple[StepMap, Level]]


@dataclass
class GenerationParams:
    """Parameters for level generation.

    Height and width are counted in rooms, every room is 3x3 cells.
    The retry caps are None for unbounded retries.
    """
    height: int
    width: int
    boxes: int
    seed: Optional[int] = None
    max_assembly_attempts: Optional[int] = None
    max_placement_attempts: Optional[int] = None

    def __post_init__(self):
        """Reject negative sizes."""
        for name in ("height", "width", "boxes"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass
class Placement:
    """Outcome of placing goals, boxes and the player on a level."""
    level: Level
    player: Position
    push_depth: int


@dataclass
class RequirementReport:
    """Outcome of every requirement check on an assembled level."""
    enough_space: bool
    connected: bool
    no_surrounded_floors: bool
    no_large_spaces: bool
    enough_goal_places: bool

    @property
    def passed(self) -> bool:
        return (
            self.enough_space
            and self.connected
            and self.no_surrounded_floors
            and self.no_large_spaces
            and self.enough_goal_places
        )

    def to_dict(self) -> Dict[str, bool]:
        """Convert to dictionary."""
        return {
            "enough_space": self.enough_space,
            "connected": self.connected,
            "no_surrounded_floors": self.no_surrounded_floors,
            "no_large_spaces": self.no_large_spaces,
            "enough_goal_places": self.enough_goal_places,
        }


@dataclass
class GenerationResult:
    """Result of level generation."""
    level: Level
    seed: int
    push_depth: int
    box_count: int
    assembly_attempts: int = 1
    placement_attempts: int = 1
    generation_time_ms: int = 0
    rows: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rows": self.rows,
            "height": len(self.level),
            "width": len(self.level[0]) if self.level else 0,
            "box_count": self.box_count,
            "push_depth": self.push_depth,
            "seed": self.seed,
            "assembly_attempts": self.assembly_attempts,
            "placement_attempts": self.placement_attempts,
            "generation_time_ms": self.generation_time_ms,
        }
