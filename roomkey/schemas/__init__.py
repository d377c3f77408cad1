"""Pydantic request/response schemas."""

from roomkey.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    Principal,
    RegisterRequest,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UserProfile,
    VerifyAadhaarRequest,
)
from roomkey.schemas.catalog import (
    HotelItem,
    HotelsResponse,
    OfferItem,
    OffersResponse,
    RoomItem,
    RoomsResponse,
)
from roomkey.schemas.common import ApiResponse, ErrorResponse, error_responses
from roomkey.schemas.health import HealthResponse
from roomkey.schemas.room_access import (
    RoomAccessGrant,
    VerifyAccessRequest,
    VerifyAccessResponse,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "error_responses",
    "HealthResponse",
    "HotelItem",
    "HotelsResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "OfferItem",
    "OffersResponse",
    "Principal",
    "RegisterRequest",
    "RoomAccessGrant",
    "RoomItem",
    "RoomsResponse",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UserProfile",
    "VerifyAadhaarRequest",
    "VerifyAccessRequest",
    "VerifyAccessResponse",
]
