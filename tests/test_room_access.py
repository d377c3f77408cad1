"""Tests for QR-code room access verification (service and POST /api/room/verify-access)."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

from _support import ApiTestCase, DatabaseTestCase

from roomkey.core.errors import Forbidden, ValidationError
from roomkey.models import Booking, BookingToken, Hotel, Room
from roomkey.services.room_access import VERIFICATION_FAILED_MESSAGE, verify_room_access

NOW = datetime(2026, 10, 18, 15, 0, tzinfo=UTC)


def seed_bookings(db) -> None:
    """Two rooms; user 1 holds a current booking for QR-101, user 2 for QR-102."""
    hotel = Hotel(hotel_id=1, name="Harbor Inn", city="Kochi", is_active=True)
    rooms = [
        Room(room_id=101, hotel_id=1, room_number="101", qr_code_id="QR-101"),
        Room(room_id=102, hotel_id=1, room_number="102", qr_code_id="QR-102"),
        Room(room_id=103, hotel_id=1, room_number="103", qr_code_id="QR-103"),
    ]
    window = {
        "check_in_time": NOW - timedelta(hours=3),
        "check_out_time": NOW + timedelta(days=1),
    }
    bookings = [
        Booking(booking_id=1, user_id=1, room_id=101, status="confirmed", **window),
        Booking(booking_id=2, user_id=2, room_id=102, status="confirmed", **window),
        # Past stay for user 1.
        Booking(
            booking_id=3,
            user_id=1,
            room_id=103,
            status="completed",
            check_in_time=NOW - timedelta(days=5),
            check_out_time=NOW - timedelta(days=3),
        ),
    ]
    tokens = [
        BookingToken(token_id="tok-1", booking_id=1, digital_signature="sig-1", is_valid=True),
        BookingToken(token_id="tok-2", booking_id=2, digital_signature="sig-2", is_valid=True),
        BookingToken(token_id="tok-3", booking_id=3, digital_signature="sig-3", is_valid=True),
    ]
    db.add(hotel)
    db.add_all(rooms)
    db.flush()
    db.add_all(bookings)
    db.flush()
    db.add_all(tokens)
    db.commit()


class TestVerifyRoomAccessService(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        seed_bookings(self.db)

    def test_owner_within_window_is_granted(self) -> None:
        grant = verify_room_access(self.db, 1, "QR-101", now=NOW)
        self.assertEqual(grant.booking_token, "tok-1")
        self.assertEqual(grant.digital_signature, "sig-1")

    def test_string_user_id_is_accepted(self) -> None:
        grant = verify_room_access(self.db, "1", "QR-101", now=NOW)
        self.assertEqual(grant.booking_token, "tok-1")

    def test_window_boundaries_are_inclusive(self) -> None:
        check_in = NOW - timedelta(hours=3)
        check_out = NOW + timedelta(days=1)
        self.assertEqual(verify_room_access(self.db, 1, "QR-101", now=check_in).booking_token, "tok-1")
        self.assertEqual(verify_room_access(self.db, 1, "QR-101", now=check_out).booking_token, "tok-1")

    def test_every_failed_predicate_gives_same_error(self) -> None:
        cases = {
            "other user's room": (1, "QR-102", NOW),
            "unknown qr code": (1, "QR-999", NOW),
            "unknown user": (99, "QR-101", NOW),
            "stay ended": (1, "QR-103", NOW),
            "before check-in": (1, "QR-101", NOW - timedelta(days=1)),
            "after check-out": (1, "QR-101", NOW + timedelta(days=2)),
        }
        for label, (user_id, qr, at) in cases.items():
            with self.subTest(label):
                with self.assertRaises(Forbidden) as ctx:
                    verify_room_access(self.db, user_id, qr, now=at)
                self.assertEqual(ctx.exception.message, VERIFICATION_FAILED_MESSAGE)

    def test_non_integer_user_id_is_denied_without_query(self) -> None:
        for user_id in ("abc", "1a", "-", " ", "2147483648", 2**40, True, 1.0):
            with self.subTest(user_id=user_id):
                db = MagicMock()
                with self.assertRaises(Forbidden) as ctx:
                    verify_room_access(db, user_id, "QR-101", now=NOW)
                self.assertEqual(ctx.exception.message, VERIFICATION_FAILED_MESSAGE)
                db.execute.assert_not_called()

    def test_padded_numeric_string_is_accepted(self) -> None:
        self.assertEqual(verify_room_access(self.db, " 1 ", "QR-101", now=NOW).booking_token, "tok-1")

    def test_revoked_token_is_denied(self) -> None:
        token = self.db.get(BookingToken, "tok-1")
        token.is_valid = False
        self.db.commit()
        with self.assertRaises(Forbidden):
            verify_room_access(self.db, 1, "QR-101", now=NOW)

    def test_missing_input_is_validation_error(self) -> None:
        for user_id, qr in ((None, "QR-101"), ("", "QR-101"), (1, None), (1, "")):
            with self.subTest(user_id=user_id, qr=qr):
                with self.assertRaises(ValidationError):
                    verify_room_access(self.db, user_id, qr, now=NOW)


class TestVerifyAccessEndpoint(ApiTestCase):
    """Endpoint uses the current time, so bookings are seeded around now."""

    def setUp(self) -> None:
        super().setUp()
        now = datetime.now(UTC)
        self.db.add(Hotel(hotel_id=1, name="Harbor Inn", is_active=True))
        self.db.add_all(
            [
                Room(room_id=1, hotel_id=1, qr_code_id="QR-A"),
                Room(room_id=2, hotel_id=1, qr_code_id="QR-B"),
            ]
        )
        self.db.flush()
        self.db.add_all(
            [
                Booking(
                    booking_id=1,
                    user_id=7,
                    room_id=1,
                    check_in_time=now - timedelta(hours=1),
                    check_out_time=now + timedelta(hours=12),
                ),
                Booking(
                    booking_id=2,
                    user_id=8,
                    room_id=2,
                    check_in_time=now - timedelta(hours=1),
                    check_out_time=now + timedelta(hours=12),
                ),
            ]
        )
        self.db.flush()
        self.db.add_all(
            [
                BookingToken(token_id="tok-A", booking_id=1, digital_signature="sig-A"),
                BookingToken(token_id="tok-B", booking_id=2, digital_signature="sig-B"),
            ]
        )
        self.db.commit()

    def test_access_granted(self) -> None:
        resp = self.client.post("/api/room/verify-access", json={"user_id": 7, "qr_code_id": "QR-A"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["booking_token"], "tok-A")
        self.assertEqual(body["digital_signature"], "sig-A")

    def test_other_users_room_is_generic_403(self) -> None:
        resp = self.client.post("/api/room/verify-access", json={"user_id": 7, "qr_code_id": "QR-B"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"success": False, "message": VERIFICATION_FAILED_MESSAGE})

    def test_missing_fields_is_400(self) -> None:
        resp = self.client.post("/api/room/verify-access", json={"user_id": 7})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "User ID and QR Code ID required")

    def test_non_numeric_user_id_is_generic_403(self) -> None:
        resp = self.client.post("/api/room/verify-access", json={"user_id": "abc", "qr_code_id": "QR-A"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"success": False, "message": VERIFICATION_FAILED_MESSAGE})
