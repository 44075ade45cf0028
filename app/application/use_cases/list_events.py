from app.application.interfaces.event_repo import EventRepo
from app.domain.entities.event import Event


class ListEventsUseCase:
    def __init__(self, event_repo: EventRepo) -> None:
        self._event_repo = event_repo

    async def execute(self) -> list[Event]:
        return await self._event_repo.list_events()
