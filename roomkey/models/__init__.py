"""SQLAlchemy ORM models."""

from roomkey.models.base import Base
from roomkey.models.booking import Booking, BookingToken
from roomkey.models.catalog import Hotel, Offer, Room
from roomkey.models.user import User

__all__ = ["Base", "Booking", "BookingToken", "Hotel", "Offer", "Room", "User"]
