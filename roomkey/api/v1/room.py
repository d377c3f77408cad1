"""Room access endpoint: verify a scanned QR code against the user's current booking."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roomkey.core.database import get_db
from roomkey.schemas.common import error_responses
from roomkey.schemas.room_access import VerifyAccessRequest, VerifyAccessResponse
from roomkey.services.room_access import verify_room_access

router = APIRouter()


@router.post(
    "/verify-access",
    response_model=VerifyAccessResponse,
    responses=error_responses(400, 403),
)
def post_verify_access(
    body: VerifyAccessRequest,
    db: Annotated[Session, Depends(get_db)],
) -> VerifyAccessResponse:
    """
    Grant access when the user holds a valid booking for the scanned room right now.
    Returns 403 with a generic message otherwise.
    """
    grant = verify_room_access(db, body.user_id, body.qr_code_id)
    return VerifyAccessResponse(
        message="Access granted!",
        booking_token=grant.booking_token,
        digital_signature=grant.digital_signature,
    )
