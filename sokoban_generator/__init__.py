"""Procedural sokoban level generator."""
from .core.generator import GenerationError, LevelGenerator, generate_level
from .models.cell import Cell
from .utils.helpers import encode_level, render_text

__version__ = "1.0.0"

__all__ = [
    "Cell",
    "GenerationError",
    "LevelGenerator",
    "encode_level",
    "generate_level",
    "render_text",
]
