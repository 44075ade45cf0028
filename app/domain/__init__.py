"""
Capa de Dominio - Venta de lugares para eventos.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Event, Spot, Ticket)
- value_objects/: Objetos de valor inmutables (SpotName)
- errors.py: Excepciones específicas del dominio
"""

from app.domain.entities import Event, Rating, Spot, SpotStatus, Ticket, TicketKind
from app.domain.errors import (
    ConflictError,
    DomainError,
    DuplicateEventError,
    DuplicateSpotError,
    EventNotFoundError,
    InvalidBatchError,
    InvalidSpotNameError,
    InvalidTicketKindError,
    NonPositivePriceError,
    NotFoundError,
    PartnerError,
    PartnerNotFoundError,
    PersistenceError,
    PurchaseCancelledError,
    ReconciliationError,
    SpotAlreadyReservedError,
    SpotNotFoundError,
    UpstreamError,
    ValidationError,
)
from app.domain.value_objects import SpotName

__all__ = [
    # Entities
    "Event",
    "Rating",
    "Spot",
    "SpotStatus",
    "Ticket",
    "TicketKind",
    # Value Objects
    "SpotName",
    # Errors
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "UpstreamError",
    "PersistenceError",
    "PurchaseCancelledError",
    "InvalidSpotNameError",
    "InvalidTicketKindError",
    "NonPositivePriceError",
    "InvalidBatchError",
    "EventNotFoundError",
    "SpotNotFoundError",
    "PartnerNotFoundError",
    "SpotAlreadyReservedError",
    "DuplicateEventError",
    "DuplicateSpotError",
    "ReconciliationError",
    "PartnerError",
]
