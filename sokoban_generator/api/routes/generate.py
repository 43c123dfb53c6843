"""Level generation API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...models.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from ...models.level import GenerationParams
from ...core.generator import GenerationError, LevelGenerator
from ...utils.helpers import encode_level, render_text
from ..deps import get_app_settings, get_level_generator

router = APIRouter(prefix="/api", tags=["generate"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}},
)
def generate_level(
    request: GenerateRequest,
    generator: LevelGenerator = Depends(get_level_generator),
    settings: Settings = Depends(get_app_settings),
) -> GenerateResponse:
    """
    Generate a sokoban level.

    Declared without async so the box search runs in the threadpool and
    does not hold up the event loop.

    Args:
        request: GenerateRequest with level size and box count.
        generator: LevelGenerator dependency.
        settings: Application settings with the request limits.

    Returns:
        GenerateResponse with the rendered level and generation statistics.
    """
    if request.height > settings.max_room_rows or request.width > settings.max_room_cols:
        raise HTTPException(
            status_code=400,
            detail=f"Level size is limited to {settings.max_room_rows}x{settings.max_room_cols} rooms",
        )
    if request.boxes > settings.max_boxes:
        raise HTTPException(
            status_code=400,
            detail=f"Box count is limited to {settings.max_boxes}",
        )

    params = GenerationParams(
        height=request.height,
        width=request.width,
        boxes=request.boxes,
        seed=request.seed,
        max_assembly_attempts=settings.max_assembly_attempts,
        max_placement_attempts=settings.max_placement_attempts,
    )

    try:
        result = generator.generate(params)
    except GenerationError as e:
        raise HTTPException(status_code=400, detail=f"Generation failed: {str(e)}")

    return GenerateResponse(
        text=render_text(result.level),
        encoded=encode_level(result.level),
        **result.to_dict(),
    )
