"""Read-only listings for hotels, rooms and current offers."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from roomkey.models import Hotel, Offer, Room


def list_hotels(db: Session) -> list[Hotel]:
    """Active hotels only."""
    stmt = select(Hotel).where(Hotel.is_active.is_(True)).order_by(Hotel.hotel_id)
    return list(db.scalars(stmt))


def list_rooms(db: Session) -> list[Room]:
    return list(db.scalars(select(Room).order_by(Room.room_id)))


def list_offers(db: Session, today: date | None = None) -> list[Offer]:
    """Offers whose validity window contains `today` (inclusive on both ends)."""
    day = today or date.today()
    stmt = (
        select(Offer)
        .where(Offer.valid_from <= day, Offer.valid_to >= day)
        .order_by(Offer.offer_id)
    )
    return list(db.scalars(stmt))
