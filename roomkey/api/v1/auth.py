"""Account endpoints and the bearer-token dependency (get_current_principal)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.orm import Session

from roomkey.core.database import get_db
from roomkey.core.errors import TokenExpired, TokenInvalid, Unauthenticated
from roomkey.core.security import decode_access_token
from roomkey.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    Principal,
    RegisterRequest,
    UpdateProfileRequest,
    UpdateProfileResponse,
    VerifyAadhaarRequest,
)
from roomkey.schemas.common import ApiResponse, error_responses
from roomkey.services import accounts

router = APIRouter()


def get_current_principal(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """
    Dependency: require `Authorization: Bearer <token>` and return the principal.

    Raises Unauthenticated (401) when the header is missing, malformed,
    expired or invalid. Does not query the database.
    """
    if not authorization:
        raise Unauthenticated("No token provided. Please login first.")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise Unauthenticated("Invalid token format")
    try:
        payload = decode_access_token(token)
    except TokenExpired:
        raise Unauthenticated("Token expired. Please login again.")
    except TokenInvalid:
        raise Unauthenticated("Invalid token")
    principal = Principal(user_id=payload["sub"])
    request.state.principal = principal
    return principal


@router.post(
    "/register",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 409),
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    """Create an account. Log in afterwards to obtain a token."""
    accounts.register_user(db, body.email, body.password, body.name)
    return ApiResponse(message="Account created")


@router.post("/login", response_model=LoginResponse, responses=error_responses(400, 401))
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = accounts.authenticate(db, body.email, body.password)
    return LoginResponse(token=token)


@router.get("/me", response_model=MeResponse, responses=error_responses(401, 404))
def get_me(
    principal: Annotated[Principal, Depends(get_current_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> MeResponse:
    return MeResponse(user=accounts.get_profile(db, principal))


@router.put(
    "/update-profile",
    response_model=UpdateProfileResponse,
    responses=error_responses(400, 401, 404),
)
def update_profile(
    body: UpdateProfileRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> UpdateProfileResponse:
    """Change the display name."""
    name = accounts.update_display_name(db, principal, body.name)
    return UpdateProfileResponse(message="Profile updated", name=name)


@router.post("/logout", response_model=ApiResponse, responses=error_responses(401))
def logout(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> ApiResponse:
    """Acknowledge logout. The token stays valid until it expires; clients discard it."""
    accounts.logout(principal)
    return ApiResponse(message="Logged out")


@router.post("/verify-aadhaar", response_model=ApiResponse, responses=error_responses(400, 401))
def verify_aadhaar(
    body: VerifyAadhaarRequest,
    _principal: Annotated[Principal, Depends(get_current_principal)],
) -> ApiResponse:
    accounts.verify_aadhaar(body.aadhaar_number)
    return ApiResponse(message="Aadhaar verified (stub)")
