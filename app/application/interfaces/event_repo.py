from typing import Sequence

from app.domain.entities.event import Event
from app.domain.entities.spot import Spot


class EventRepo:
    async def get_event(self, event_id: str) -> Event | None:
        raise NotImplementedError

    async def list_events(self) -> list[Event]:
        raise NotImplementedError

    async def list_spots(self, event_id: str) -> list[Spot]:
        raise NotImplementedError

    async def create_event(self, event: Event) -> None:
        raise NotImplementedError

    async def create_spots(self, spots: Sequence[Spot]) -> None:
        """Raises DuplicateSpotError if any (event_id, name) already exists."""
        raise NotImplementedError
