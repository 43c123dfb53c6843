"""Data models package.

This package contains the cell types, the room template catalogue, level
data models and API schemas.
"""
from .cell import Cell
from .level import (
    BacktrackMap,
    GenerationParams,
    GenerationResult,
    Level,
    Placement,
    Position,
    RequirementReport,
    StepMap,
)
from .templates import TEMPLATES, Template
from .schemas import (
    GenerateRequest,
    GenerateResponse,
    ValidateRequest,
    ValidateResponse,
    TemplateItem,
    TemplateListResponse,
    ErrorResponse,
)

__all__ = [
    # Cells
    "Cell",
    # Level models
    "BacktrackMap",
    "GenerationParams",
    "GenerationResult",
    "Level",
    "Placement",
    "Position",
    "RequirementReport",
    "StepMap",
    # Templates
    "TEMPLATES",
    "Template",
    # API schemas
    "GenerateRequest",
    "GenerateResponse",
    "ValidateRequest",
    "ValidateResponse",
    "TemplateItem",
    "TemplateListResponse",
    "ErrorResponse",
]
