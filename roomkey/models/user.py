"""ORM model for the canonical shape of the accounts table."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from roomkey.models.base import Base


class User(Base):
    """
    Account row as created by migrations on a fresh database.

    Deployed databases may differ (id vs user_id, full_name vs name, no
    created_at); request-time code goes through services.user_schema and never
    assumes this exact shape. The model exists for migrations and fixtures.
    """

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    name = Column(Text, nullable=True)
    full_name = Column(Text, nullable=True)
    password_hash = Column(Text, nullable=True)
    aadhaar_key = Column(String(64), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
    )
