"""Utility helpers package."""
from .helpers import (
    copy_level,
    count_cells,
    encode_level,
    frame_level,
    level_to_rows,
    parse_level,
    render_text,
)

__all__ = [
    "copy_level",
    "count_cells",
    "encode_level",
    "frame_level",
    "level_to_rows",
    "parse_level",
    "render_text",
]
