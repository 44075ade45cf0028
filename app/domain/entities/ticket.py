"""Entidad Ticket - el comprobante emitido por una compra exitosa."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from app.domain.errors import InvalidTicketKindError, NonPositivePriceError


class TicketKind(str, Enum):
    """Tipos de ticket soportados."""

    HALF = "half"
    FULL = "full"

    @classmethod
    def parse(cls, value: "str | TicketKind") -> "TicketKind":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidTicketKindError(str(value)) from exc


@dataclass(frozen=True)
class Ticket:
    """
    Ticket emitido una única vez al completar la compra de un lugar.

    Se vincula al lugar por `spot_id`; es inmutable una vez creado.
    """

    id: str
    event_id: str
    spot_id: str
    ticket_kind: TicketKind
    price: Decimal

    @staticmethod
    def price_for(base_price: Decimal, ticket_kind: TicketKind) -> Decimal:
        """Half = base / 2, Full = base. Falla si el resultado no es positivo."""
        price = Decimal(base_price)
        if ticket_kind == TicketKind.HALF:
            price = price / 2
        if price <= 0:
            raise NonPositivePriceError(price)
        return price

    @classmethod
    def create(
        cls,
        ticket_id: str,
        event_id: str,
        spot_id: str,
        ticket_kind: "str | TicketKind",
        base_price: Decimal,
    ) -> "Ticket":
        """Factory que valida el tipo y calcula el precio."""
        kind = TicketKind.parse(ticket_kind)
        return cls(
            id=ticket_id,
            event_id=event_id,
            spot_id=spot_id,
            ticket_kind=kind,
            price=cls.price_for(base_price, kind),
        )
