"""Schemas for QR-code room access verification."""

from pydantic import BaseModel, Field

from roomkey.schemas.common import ApiResponse


class VerifyAccessRequest(BaseModel):
    """Scan event from a room door: who is asking and which QR code they scanned."""

    user_id: int | str | None = Field(default=None, description="Booking owner's user id")
    qr_code_id: str | None = Field(default=None, max_length=255, description="QR code on the room")


class RoomAccessGrant(BaseModel):
    """Stored access token for a currently valid booking."""

    booking_token: str
    digital_signature: str


class VerifyAccessResponse(ApiResponse):
    booking_token: str
    digital_signature: str
