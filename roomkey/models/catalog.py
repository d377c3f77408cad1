"""ORM models for the read-only hotel catalog: hotels, rooms, offers."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, Numeric, String, Text, true

from roomkey.models.base import Base


class Hotel(Base):
    __tablename__ = "hotels"

    hotel_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())


class Room(Base):
    """A bookable room. qr_code_id is printed on the door and scanned at check-in."""

    __tablename__ = "rooms"

    room_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True, index=True)
    room_number = Column(String(32), nullable=True)
    room_type = Column(String(64), nullable=True)
    price_per_night = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    qr_code_id = Column(String(255), nullable=True, unique=True)


class Offer(Base):
    """Discount offer; current when valid_from <= today <= valid_to."""

    __tablename__ = "offers"

    offer_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    discount_percent = Column(Numeric(5, 2, asdecimal=False), nullable=True)
    valid_from = Column(Date, nullable=False)
    valid_to = Column(Date, nullable=False)
