"""Tests for roomkey.core.database: sessions are always returned to the pool."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from roomkey.core import database
from roomkey.core.database import check_db_connected, get_db


class TestGetDb(unittest.TestCase):
    """get_db closes the session on normal exit and when the handler raises."""

    def test_closes_after_success(self) -> None:
        session = MagicMock()
        with patch.object(database, "SessionLocal", return_value=session):
            gen = get_db()
            self.assertIs(next(gen), session)
            with self.assertRaises(StopIteration):
                next(gen)
        session.close.assert_called_once()

    def test_closes_when_handler_raises(self) -> None:
        session = MagicMock()
        with patch.object(database, "SessionLocal", return_value=session):
            gen = get_db()
            next(gen)
            with self.assertRaises(RuntimeError):
                gen.throw(RuntimeError("handler failed"))
        session.close.assert_called_once()

    def test_closes_when_abandoned(self) -> None:
        session = MagicMock()
        with patch.object(database, "SessionLocal", return_value=session):
            gen = get_db()
            next(gen)
            gen.close()
        session.close.assert_called_once()


class TestCheckDbConnected(unittest.TestCase):
    def test_connected(self) -> None:
        self.assertTrue(check_db_connected(MagicMock()))

    def test_disconnected(self) -> None:
        session = MagicMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        self.assertFalse(check_db_connected(session))


if __name__ == "__main__":
    unittest.main()
