"""Room layout validation API routes."""
from fastapi import APIRouter, HTTPException

from ...models.schemas import ErrorResponse, ValidateRequest, ValidateResponse
from ...core.requirements import check_requirements
from ...utils.helpers import parse_level

router = APIRouter(prefix="/api", tags=["validate"])


@router.post(
    "/validate",
    response_model=ValidateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def validate_layout(request: ValidateRequest) -> ValidateResponse:
    """
    Check an unframed room layout against the generation requirements.

    Args:
        request: ValidateRequest with layout rows and box count.

    Returns:
        ValidateResponse with the outcome of every check.
    """
    try:
        level = parse_level("\n".join(request.rows))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid layout: {str(e)}")

    report = check_requirements(level, request.box_count)

    return ValidateResponse(passed=report.passed, checks=report.to_dict())
