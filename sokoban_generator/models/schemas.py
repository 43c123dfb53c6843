"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class GenerateRequest(BaseModel):
    """Request schema for level generation."""
    height: int = Field(default=2, ge=1, description="Level height in 3x3 rooms")
    width: int = Field(default=2, ge=1, description="Level width in 3x3 rooms")
    boxes: int = Field(default=2, ge=1, description="Number of boxes")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible levels")


class GenerateResponse(BaseModel):
    """Response schema for level generation."""
    rows: List[str] = Field(..., description="Level rows, one glyph per cell")
    text: str = Field(..., description="Level as newline terminated text")
    encoded: str = Field(..., description="Single line level encoding")
    height: int = Field(..., description="Level height in cells, including the border")
    width: int = Field(..., description="Level width in cells, including the border")
    box_count: int = Field(..., description="Number of boxes")
    push_depth: int = Field(..., description="Box moves between the goals and the start")
    seed: int = Field(..., description="Seed that reproduces the level")
    assembly_attempts: int = Field(default=1, description="Room layouts tried")
    placement_attempts: int = Field(default=1, description="Goal selections tried")
    generation_time_ms: int = Field(default=0, description="Generation time in milliseconds")


class ValidateRequest(BaseModel):
    """Request schema for checking a room layout against the requirements."""
    rows: List[str] = Field(..., min_length=1, description="Layout rows, '#' wall and ' ' or '-' floor")
    box_count: int = Field(default=1, ge=0, description="Number of boxes the layout must hold")


class ValidateResponse(BaseModel):
    """Response schema for requirement checks."""
    passed: bool = Field(..., description="Whether every requirement holds")
    checks: Dict[str, bool] = Field(..., description="Outcome per requirement")


class TemplateItem(BaseModel):
    """Single room template."""
    index: int = Field(..., description="Position in the catalogue")
    rows: List[str] = Field(..., description="Template rows, '~' marks unconstrained cells")


class TemplateListResponse(BaseModel):
    """Response schema for the template catalogue."""
    templates: List[TemplateItem] = Field(default=[], description="Room templates")


class ErrorResponse(BaseModel):
    """Error body of a refused request."""
    detail: str = Field(..., description="Reason the request was refused")
