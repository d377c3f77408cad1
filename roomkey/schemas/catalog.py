"""Response schemas for hotel, room and offer listings."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from roomkey.schemas.common import ApiResponse


class HotelItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hotel_id: int
    name: str
    city: str | None = None
    address: str | None = None
    is_active: bool


class RoomItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_id: int
    hotel_id: int | None = None
    room_number: str | None = None
    room_type: str | None = None
    price_per_night: float | None = None
    qr_code_id: str | None = None


class OfferItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    offer_id: int
    hotel_id: int | None = None
    title: str
    description: str | None = None
    discount_percent: float | None = None
    valid_from: date
    valid_to: date


class HotelsResponse(ApiResponse):
    hotels: list[HotelItem]


class RoomsResponse(ApiResponse):
    rooms: list[RoomItem]


class OffersResponse(ApiResponse):
    offers: list[OfferItem]
