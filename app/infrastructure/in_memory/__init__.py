"""Implementaciones in-memory para desarrollo y testing."""

from app.infrastructure.in_memory.event_repo import InMemoryEventRepo
from app.infrastructure.in_memory.partner_gateway import StubPartnerGateway
from app.infrastructure.in_memory.spot_store import InMemorySpotStore
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager

__all__ = [
    # Repositories
    "InMemoryEventRepo",
    "InMemorySpotStore",
    # Gateways
    "StubPartnerGateway",
    # Infrastructure
    "InMemoryTransactionManager",
]
