"""Core business logic package.

This package contains the room assembly, requirement checks, entity
placement and the generator pipeline tying them together.
"""
from .assembly import assemble
from .entities import is_reachable, place_entities, get_possible_goal_locations
from .generator import GenerationError, LevelGenerator, generate_level, get_generator
from .requirements import check_requirements, level_meets_requirements
from .rooms import pick_random_room, rotate_template

__all__ = [
    "assemble",
    "is_reachable",
    "place_entities",
    "get_possible_goal_locations",
    "GenerationError",
    "LevelGenerator",
    "generate_level",
    "get_generator",
    "check_requirements",
    "level_meets_requirements",
    "pick_random_room",
    "rotate_template",
]
