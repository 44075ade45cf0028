from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.event import Event, Rating
from app.domain.entities.spot import Spot, SpotStatus


class SpotResponse(BaseModel):
    id: str
    event_id: str
    name: str
    status: SpotStatus
    ticket_id: str | None = None

    @classmethod
    def from_entity(cls, spot: Spot) -> "SpotResponse":
        return cls(
            id=spot.id,
            event_id=spot.event_id,
            name=spot.name,
            status=spot.status,
            ticket_id=spot.ticket_id,
        )


class EventResponse(BaseModel):
    id: str
    name: str
    location: str
    organization: str
    rating: Rating
    date: datetime
    image_url: str | None = None
    capacity: int
    price: Decimal
    partner_id: int

    @classmethod
    def from_entity(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            name=event.name,
            location=event.location,
            organization=event.organization,
            rating=event.rating,
            date=event.date,
            image_url=event.image_url,
            capacity=event.capacity,
            price=event.price,
            partner_id=event.partner_id,
        )


class EventDetailResponse(EventResponse):
    spots: list[SpotResponse] = Field(default_factory=list)


class CreateEventRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    organization: str = Field(min_length=1, max_length=255)
    rating: Rating
    date: datetime
    image_url: str | None = None
    capacity: int = Field(ge=0)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    partner_id: int


class CreateSpotsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # names are validated by the domain so each bad one is reported by name
    names: list[str]
