from dataclasses import dataclass, field

from app.application.interfaces.event_repo import EventRepo
from app.domain.entities.event import Event
from app.domain.entities.spot import Spot
from app.domain.errors import EventNotFoundError


@dataclass
class EventWithSpots:
    event: Event
    spots: list[Spot] = field(default_factory=list)


class GetEventUseCase:
    def __init__(self, event_repo: EventRepo) -> None:
        self._event_repo = event_repo

    async def execute(self, event_id: str) -> EventWithSpots:
        event = await self._event_repo.get_event(event_id)
        if not event:
            raise EventNotFoundError(event_id)
        spots = await self._event_repo.list_spots(event_id)
        return EventWithSpots(event=event, spots=spots)
