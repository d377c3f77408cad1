"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from roomkey.schemas.common import ApiResponse


class RegisterRequest(BaseModel):
    """
    Registration body. Fields are optional at the schema level so that a
    missing field yields a 400 with a readable message from the service
    instead of a generic schema error.
    """

    email: str | None = Field(default=None, max_length=255, description="Email address")
    password: str | None = Field(default=None, max_length=128, description="Password")
    name: str | None = Field(default=None, max_length=255, description="Display name")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=128)


class LoginResponse(ApiResponse):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token (send as: Authorization: Bearer <token>)")


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, max_length=255, description="New display name")


class UpdateProfileResponse(ApiResponse):
    name: str


class VerifyAadhaarRequest(BaseModel):
    aadhaar_number: str | None = Field(default=None, max_length=64)


class Principal(BaseModel):
    """Authenticated identity attached to a request after token verification."""

    user_id: str


class UserProfile(BaseModel):
    """Public view of an account (no password hash)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    email: str | None = None
    name: str | None = None
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")


class MeResponse(ApiResponse):
    user: UserProfile
