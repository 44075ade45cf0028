from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

events = Table(
    "events",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("location", String(255), nullable=False),
    Column("organization", String(255), nullable=False),
    Column("rating", String(8), nullable=False),
    Column("date", DateTime, nullable=False),
    Column("image_url", String(500)),
    Column("capacity", Integer, nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
    Column("partner_id", Integer, nullable=False),
)

spots = Table(
    "spots",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("event_id", String(36), ForeignKey("events.id"), nullable=False),
    Column("name", String(10), nullable=False),
    Column("status", String(16), nullable=False),
    Column("ticket_id", String(36)),
    UniqueConstraint("event_id", "name", name="uq_spots_event_name"),
)

tickets = Table(
    "tickets",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("event_id", String(36), ForeignKey("events.id"), nullable=False),
    Column("spot_id", String(36), ForeignKey("spots.id"), nullable=False),
    Column("ticket_kind", String(8), nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
    # a spot can only ever back one ticket
    UniqueConstraint("spot_id", name="uq_tickets_spot"),
)
