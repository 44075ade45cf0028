"""Entidad Event - un evento con lugares numerados a la venta."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Rating(str, Enum):
    """Clasificación indicativa del contenido."""

    LIVRE = "L"
    L10 = "L10"
    L12 = "L12"
    L14 = "L14"
    L16 = "L16"
    L18 = "L18"


@dataclass(frozen=True)
class Event:
    """
    Evento programado cuyos lugares se venden a través de un partner externo.

    `price` es el precio base del ticket completo; `partner_id` selecciona el
    partner que confirma las compras de este evento.
    """

    id: str
    name: str
    location: str
    organization: str
    rating: Rating
    date: datetime
    capacity: int
    price: Decimal
    partner_id: int
    image_url: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"price no puede ser negativo: {self.price}")
        if self.capacity < 0:
            raise ValueError(f"capacity no puede ser negativa: {self.capacity}")
