from datetime import datetime
from decimal import Decimal

from app.application.interfaces.event_repo import EventRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import UUIDGenerator
from app.domain.entities.event import Event, Rating


class CreateEventUseCase:
    def __init__(
        self,
        event_repo: EventRepo,
        transaction_manager: TransactionManager,
        id_generator: UUIDGenerator,
    ) -> None:
        self._event_repo = event_repo
        self._transaction_manager = transaction_manager
        self._id_generator = id_generator

    async def execute(
        self,
        name: str,
        location: str,
        organization: str,
        rating: Rating,
        date: datetime,
        capacity: int,
        price: Decimal,
        partner_id: int,
        image_url: str | None = None,
    ) -> Event:
        event = Event(
            id=self._id_generator.generate_uuid(),
            name=name,
            location=location,
            organization=organization,
            rating=rating,
            date=date,
            capacity=capacity,
            price=price,
            partner_id=partner_id,
            image_url=image_url,
        )
        async with self._transaction_manager.start():
            await self._event_repo.create_event(event)
        return event
