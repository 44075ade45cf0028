"""DTOs para la compra de tickets."""

from dataclasses import dataclass, field
from decimal import Decimal

# estado normalizado de toda compra confirmada
CONFIRMED = "confirmed"


@dataclass
class BuyTicketsInput:
    """Lote de lugares solicitados para un evento."""

    event_id: str
    spots: list[str] = field(default_factory=list)
    ticket_kind: str = "full"
    email: str = ""


@dataclass
class PurchaseConfirmation:
    """Confirmación por lugar, en el mismo orden en que se solicitó."""

    ticket_id: str
    spot: str
    price: Decimal
    reservation_id: str
    partner_status: str  # texto tal como lo reporta el partner
    status: str = CONFIRMED
