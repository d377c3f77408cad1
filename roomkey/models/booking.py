"""ORM models for bookings and the access tokens issued for them."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func, true

from roomkey.models.base import Base


class Booking(Base):
    """
    A user's stay in one room between check_in_time and check_out_time.

    user_id is not a foreign key: the accounts table's id column varies
    between deployments.
    """

    __tablename__ = "bookings"

    booking_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.room_id"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="confirmed")
    check_in_time = Column(DateTime(timezone=True), nullable=False)
    check_out_time = Column(DateTime(timezone=True), nullable=False)


class BookingToken(Base):
    """Signed room-access credential, created elsewhere when a booking is confirmed."""

    __tablename__ = "booking_tokens"

    token_id = Column(String(64), primary_key=True)
    booking_id = Column(Integer, ForeignKey("bookings.booking_id"), nullable=False, index=True)
    digital_signature = Column(Text, nullable=False)
    is_valid = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
