"""Add hotels, rooms, offers, bookings and booking_tokens tables.

Revision ID: 20251018010000
Revises: 20251018000000
Create Date: 2025-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251018010000"
down_revision: Union[str, None] = "20251018000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "hotels",
        sa.Column("hotel_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("hotel_id"),
    )
    op.create_table(
        "rooms",
        sa.Column("room_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hotel_id", sa.Integer(), nullable=True),
        sa.Column("room_number", sa.String(length=32), nullable=True),
        sa.Column("room_type", sa.String(length=64), nullable=True),
        sa.Column("price_per_night", sa.Numeric(10, 2), nullable=True),
        sa.Column("qr_code_id", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(["hotel_id"], ["hotels.hotel_id"]),
        sa.PrimaryKeyConstraint("room_id"),
        sa.UniqueConstraint("qr_code_id"),
    )
    op.create_index(op.f("ix_rooms_hotel_id"), "rooms", ["hotel_id"])
    op.create_table(
        "offers",
        sa.Column("offer_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hotel_id", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("discount_percent", sa.Numeric(5, 2), nullable=True),
        sa.Column("valid_from", sa.Date(), nullable=False),
        sa.Column("valid_to", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["hotel_id"], ["hotels.hotel_id"]),
        sa.PrimaryKeyConstraint("offer_id"),
    )
    op.create_index(op.f("ix_offers_hotel_id"), "offers", ["hotel_id"])
    op.create_table(
        "bookings",
        sa.Column("booking_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="confirmed"),
        sa.Column("check_in_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("check_out_time", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.room_id"]),
        sa.PrimaryKeyConstraint("booking_id"),
    )
    op.create_index(op.f("ix_bookings_user_id"), "bookings", ["user_id"])
    op.create_index(op.f("ix_bookings_room_id"), "bookings", ["room_id"])
    op.create_table(
        "booking_tokens",
        sa.Column("token_id", sa.String(length=64), nullable=False),
        sa.Column("booking_id", sa.Integer(), nullable=False),
        sa.Column("digital_signature", sa.Text(), nullable=False),
        sa.Column("is_valid", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(["booking_id"], ["bookings.booking_id"]),
        sa.PrimaryKeyConstraint("token_id"),
    )
    op.create_index(op.f("ix_booking_tokens_booking_id"), "booking_tokens", ["booking_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_booking_tokens_booking_id"), table_name="booking_tokens")
    op.drop_table("booking_tokens")
    op.drop_index(op.f("ix_bookings_room_id"), table_name="bookings")
    op.drop_index(op.f("ix_bookings_user_id"), table_name="bookings")
    op.drop_table("bookings")
    op.drop_index(op.f("ix_offers_hotel_id"), table_name="offers")
    op.drop_table("offers")
    op.drop_index(op.f("ix_rooms_hotel_id"), table_name="rooms")
    op.drop_table("rooms")
