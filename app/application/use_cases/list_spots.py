from app.application.interfaces.event_repo import EventRepo
from app.domain.entities.spot import Spot
from app.domain.errors import EventNotFoundError


class ListSpotsUseCase:
    def __init__(self, event_repo: EventRepo) -> None:
        self._event_repo = event_repo

    async def execute(self, event_id: str) -> list[Spot]:
        if not await self._event_repo.get_event(event_id):
            raise EventNotFoundError(event_id)
        return await self._event_repo.list_spots(event_id)
