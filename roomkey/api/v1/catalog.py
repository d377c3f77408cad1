"""Public listings: active hotels, rooms, and offers valid today."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roomkey.core.database import get_db
from roomkey.schemas.catalog import (
    HotelItem,
    HotelsResponse,
    OfferItem,
    OffersResponse,
    RoomItem,
    RoomsResponse,
)
from roomkey.services.catalog import list_hotels, list_offers, list_rooms

router = APIRouter()


@router.get("/hotels", response_model=HotelsResponse)
def get_hotels(db: Annotated[Session, Depends(get_db)]) -> HotelsResponse:
    hotels = list_hotels(db)
    return HotelsResponse(hotels=[HotelItem.model_validate(h) for h in hotels])


@router.get("/rooms", response_model=RoomsResponse)
def get_rooms(db: Annotated[Session, Depends(get_db)]) -> RoomsResponse:
    rooms = list_rooms(db)
    return RoomsResponse(rooms=[RoomItem.model_validate(r) for r in rooms])


@router.get("/offers", response_model=OffersResponse)
def get_offers(db: Annotated[Session, Depends(get_db)]) -> OffersResponse:
    offers = list_offers(db)
    return OffersResponse(offers=[OfferItem.model_validate(o) for o in offers])
