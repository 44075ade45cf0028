"""Entidad Spot - un lugar vendible de un evento."""

from dataclasses import dataclass
from enum import Enum

from app.domain.errors import SpotAlreadyReservedError
from app.domain.value_objects.spot_name import SpotName


class SpotStatus(str, Enum):
    """Estados de un lugar. SOLD es terminal."""

    AVAILABLE = "available"
    SOLD = "sold"


@dataclass
class Spot:
    """
    Lugar identificado por evento + nombre.

    El ticket se referencia solo por id; el Spot nunca apunta al objeto Ticket.
    """

    id: str
    event_id: str
    name: str
    status: SpotStatus = SpotStatus.AVAILABLE
    ticket_id: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status == SpotStatus.AVAILABLE

    @property
    def is_sold(self) -> bool:
        return self.status == SpotStatus.SOLD

    def reserve(self, ticket_id: str) -> None:
        """Transición AVAILABLE -> SOLD, asociando el ticket emitido."""
        if self.is_sold:
            raise SpotAlreadyReservedError([self.name])
        self.status = SpotStatus.SOLD
        self.ticket_id = ticket_id

    @classmethod
    def create(cls, spot_id: str, event_id: str, name: str) -> "Spot":
        """Factory para crear un lugar disponible con nombre validado."""
        SpotName(name)
        return cls(id=spot_id, event_id=event_id, name=name, status=SpotStatus.AVAILABLE)
