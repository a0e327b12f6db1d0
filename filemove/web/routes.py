"""
API Routes
==========

REST endpoint for relocating files.

Author: FileMove Project
License: MIT
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Dict, List

from ..core.models import MoveRequest, MoveSummary
from ..core.relocator import FileRelocator
from ..utils.logger import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while moving the files."

api_router = APIRouter()


def get_relocator(request: Request) -> FileRelocator:
    """Relocator configured on the application (see ``create_app``)."""
    return request.app.state.relocator


# ============================================================================
# Pydantic Models for API Requests/Responses
# ============================================================================

class MoveFilesRequest(BaseModel):
    """Move request model."""

    model_config = ConfigDict(populate_by_name=True)

    search_directory: str = Field(
        ...,
        alias="searchDirectory",
        description="Directory whose files (recursively) are moved"
    )
    destination_directory: str = Field(
        ...,
        alias="destinationDirectory",
        description="Directory receiving the files, created if missing"
    )

    @field_validator("search_directory", "destination_directory")
    @classmethod
    def require_value(cls, v: str, info: ValidationInfo) -> str:
        """Reject blank directories."""
        if not v.strip():
            label = info.field_name.replace("_", " ")
            raise ValueError(f"The {label} is required.")
        return v


class MoveFailureResponse(BaseModel):
    """A file that could not be moved."""
    source: str
    destination: str
    reason: str


class MoveSummaryResponse(BaseModel):
    """Move summary response model."""

    model_config = ConfigDict(populate_by_name=True)

    total_files: int = Field(..., alias="totalFiles")
    moved_files: int = Field(..., alias="movedFiles")
    failed_files: int = Field(..., alias="failedFiles")
    failures: List[MoveFailureResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: MoveSummary) -> "MoveSummaryResponse":
        return cls(
            total_files=summary.total_files,
            moved_files=summary.moved_files,
            failed_files=summary.failed_files,
            failures=[
                MoveFailureResponse(
                    source=failure.source,
                    destination=failure.destination,
                    reason=failure.reason
                )
                for failure in summary.failures
            ]
        )


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""
    message: str
    errors: Dict[str, List[str]] = Field(default_factory=dict)


# ============================================================================
# Relocation Routes
# ============================================================================

@api_router.post(
    "/filemove",
    response_model=MoveSummaryResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def move_files(
    request: MoveFilesRequest,
    relocator: FileRelocator = Depends(get_relocator)
):
    """
    Move every file below ``searchDirectory`` into ``destinationDirectory``.

    Files from subdirectories land directly in the destination; name
    collisions get a `` (N)`` suffix. Individual failures are reported in
    the summary instead of failing the request.
    """
    move_request = MoveRequest(
        search_directory=request.search_directory,
        destination_directory=request.destination_directory
    )

    try:
        result = relocator.try_move_all(move_request)
    except Exception as e:
        logger.error(
            f"Unexpected error moving files from {request.search_directory} "
            f"to {request.destination_directory}: {e}",
            exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": UNEXPECTED_ERROR_MESSAGE}
        )

    if not result.success:
        logger.warning(
            f"Rejected move from {request.search_directory} to "
            f"{request.destination_directory}: {result.error_message}"
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": result.error_message}
        )

    return MoveSummaryResponse.from_summary(result.summary)
