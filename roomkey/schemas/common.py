"""Response envelope shared by every endpoint: {success, message?, ...payload}."""

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Base envelope; endpoint responses extend it with their payload."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    message: str | None = Field(default=None, description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Body of every error response. detail is only set outside production."""

    success: bool = False
    message: str
    detail: str | None = None


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """OpenAPI `responses=` entries documenting the error envelope for each status code."""
    return {code: {"model": ErrorResponse} for code in status_codes}
