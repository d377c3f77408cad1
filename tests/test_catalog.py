"""Tests for hotel, room and offer listings."""

from datetime import date, timedelta

from _support import ApiTestCase, DatabaseTestCase

from roomkey.models import Hotel, Offer, Room
from roomkey.services.catalog import list_hotels, list_offers, list_rooms

TODAY = date(2026, 10, 18)


def seed_catalog(db) -> None:
    db.add_all(
        [
            Hotel(hotel_id=1, name="Harbor Inn", city="Kochi", is_active=True),
            Hotel(hotel_id=2, name="Closed Lodge", city="Munnar", is_active=False),
        ]
    )
    db.flush()
    db.add_all(
        [
            Room(room_id=1, hotel_id=1, room_number="101", room_type="double", price_per_night=89.5),
            Room(room_id=2, hotel_id=2, room_number="1", room_type="single", price_per_night=40),
        ]
    )
    db.add_all(
        [
            Offer(offer_id=1, hotel_id=1, title="Current", valid_from=TODAY - timedelta(days=3), valid_to=TODAY + timedelta(days=3)),
            Offer(offer_id=2, hotel_id=1, title="Ends today", valid_from=TODAY - timedelta(days=3), valid_to=TODAY),
            Offer(offer_id=3, hotel_id=1, title="Starts today", valid_from=TODAY, valid_to=TODAY + timedelta(days=1)),
            Offer(offer_id=4, hotel_id=1, title="Expired", valid_from=TODAY - timedelta(days=9), valid_to=TODAY - timedelta(days=1)),
            Offer(offer_id=5, hotel_id=1, title="Upcoming", valid_from=TODAY + timedelta(days=1), valid_to=TODAY + timedelta(days=9)),
        ]
    )
    db.commit()


class TestCatalogService(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        seed_catalog(self.db)

    def test_only_active_hotels(self) -> None:
        self.assertEqual([h.name for h in list_hotels(self.db)], ["Harbor Inn"])

    def test_all_rooms(self) -> None:
        self.assertEqual([r.room_id for r in list_rooms(self.db)], [1, 2])

    def test_offers_valid_on_day_inclusive(self) -> None:
        titles = [o.title for o in list_offers(self.db, today=TODAY)]
        self.assertEqual(titles, ["Current", "Ends today", "Starts today"])


class TestCatalogEndpoints(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        seed_catalog(self.db)

    def test_hotels(self) -> None:
        resp = self.client.get("/api/hotels")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual([h["hotel_id"] for h in body["hotels"]], [1])

    def test_rooms(self) -> None:
        body = self.client.get("/api/rooms").json()
        self.assertEqual(len(body["rooms"]), 2)
        self.assertEqual(body["rooms"][0]["price_per_night"], 89.5)

    def test_offers_envelope(self) -> None:
        resp = self.client.get("/api/offers")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["success"])
        self.assertIsInstance(resp.json()["offers"], list)
