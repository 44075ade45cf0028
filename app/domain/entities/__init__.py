"""Entidades del dominio de venta de lugares."""

from app.domain.entities.event import Event, Rating
from app.domain.entities.spot import Spot, SpotStatus
from app.domain.entities.ticket import Ticket, TicketKind

__all__ = [
    # Event
    "Event",
    "Rating",
    # Spot
    "Spot",
    "SpotStatus",
    # Ticket
    "Ticket",
    "TicketKind",
]
