"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.event_repo import EventRepo
from app.application.interfaces.partner_gateway import (
    PartnerGateway,
    ReservationRequest,
    ReservationResponse,
)
from app.application.interfaces.spot_store import SpotStore
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import (
    FakeUUIDGenerator,
    RealUUIDGenerator,
    UUIDGenerator,
)

__all__ = [
    # Repositories
    "EventRepo",
    "SpotStore",
    # Gateways
    "PartnerGateway",
    "ReservationRequest",
    "ReservationResponse",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "UUIDGenerator",
    "RealUUIDGenerator",
    "FakeUUIDGenerator",
]
