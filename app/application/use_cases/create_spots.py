from typing import Sequence

from app.application.interfaces.event_repo import EventRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import UUIDGenerator
from app.domain.entities.spot import Spot
from app.domain.errors import EventNotFoundError, InvalidBatchError


class CreateSpotsUseCase:
    """Provisions an event's layout: every new spot starts available."""

    def __init__(
        self,
        event_repo: EventRepo,
        transaction_manager: TransactionManager,
        id_generator: UUIDGenerator,
    ) -> None:
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager
        self._id_generator = id_generator

    async def execute(self, event_id: str, names: Sequence[str]) -> list[Spot]:
        if not names:
            raise InvalidBatchError("Debe indicar al menos un lugar")

        event = await self._event_repo.get_event(event_id)
        if not event:
            raise EventNotFoundError(event_id)

        spots = [
            Spot.create(spot_id=self._id_generator.generate_uuid(), event_id=event_id, name=name)
            for name in names
        ]
        existing = await self._event_repo.list_spots(event_id)
        if len(existing) + len(spots) > event.capacity:
            raise InvalidBatchError(
                f"El evento {event_id} admite {event.capacity} lugares "
                f"y ya tiene {len(existing)}"
            )

        async with self._transaction_manager.start():
            await self._event_repo.create_spots(spots)
        return spots
