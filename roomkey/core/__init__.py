"""Core app configuration and database."""

from roomkey.core.config import get_settings, settings
from roomkey.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
