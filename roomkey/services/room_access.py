"""QR-code room access: confirm the scanner is the owner of a current booking for that room."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from roomkey.core.errors import Forbidden, ValidationError
from roomkey.models import Booking, BookingToken, Room
from roomkey.schemas.room_access import RoomAccessGrant

logger = logging.getLogger(__name__)

VERIFICATION_FAILED_MESSAGE = "Verification failed. Invalid or expired booking."
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1


def _booking_owner_id(value: Any) -> int | None:
    """bookings.user_id is a 32-bit integer column; anything else matches no booking."""
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def verify_room_access(
    db: Session,
    user_id: Any,
    qr_code_id: str | None,
    now: datetime | None = None,
) -> RoomAccessGrant:
    """
    Return the stored access token for the user's booking of the room behind `qr_code_id`.

    The booking must belong to `user_id`, have a valid token, and satisfy
    check_in_time <= now <= check_out_time. Any mismatch raises the same
    Forbidden error; the caller is not told which condition failed.
    """
    if user_id is None or user_id == "" or not qr_code_id:
        raise ValidationError("User ID and QR Code ID required")
    owner_id = _booking_owner_id(user_id)
    if owner_id is None:
        logger.info("Room access denied", extra={"user_id": str(user_id)})
        raise Forbidden(VERIFICATION_FAILED_MESSAGE)
    at = now or datetime.now(UTC)

    stmt = (
        select(
            Booking.booking_id,
            Booking.status,
            Room.qr_code_id,
            BookingToken.token_id,
            BookingToken.digital_signature,
        )
        .join(Room, Booking.room_id == Room.room_id)
        .join(BookingToken, Booking.booking_id == BookingToken.booking_id)
        .where(
            Booking.user_id == owner_id,
            Room.qr_code_id == qr_code_id,
            BookingToken.is_valid.is_(True),
            Booking.check_in_time <= at,
            Booking.check_out_time >= at,
        )
        .limit(1)
    )
    row = db.execute(stmt).first()
    if row is None:
        logger.info("Room access denied", extra={"user_id": str(user_id)})
        raise Forbidden(VERIFICATION_FAILED_MESSAGE)

    logger.info(
        "Room access granted",
        extra={"user_id": str(user_id), "booking_id": row.booking_id},
    )
    return RoomAccessGrant(
        booking_token=str(row.token_id),
        digital_signature=row.digital_signature,
    )
