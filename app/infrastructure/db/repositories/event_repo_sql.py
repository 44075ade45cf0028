from typing import Any, Sequence

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.event_repo import EventRepo
from app.domain.entities.event import Event, Rating
from app.domain.entities.spot import Spot, SpotStatus
from app.domain.errors import DuplicateEventError, DuplicateSpotError, PersistenceError
from app.infrastructure.db.tables import events, spots


def row_to_event(row: Any) -> Event:
    return Event(
        id=row["id"],
        name=row["name"],
        location=row["location"],
        organization=row["organization"],
        rating=Rating(row["rating"]),
        date=row["date"],
        image_url=row["image_url"],
        capacity=row["capacity"],
        price=row["price"],
        partner_id=row["partner_id"],
    )


def row_to_spot(row: Any) -> Spot:
    return Spot(
        id=row["id"],
        event_id=row["event_id"],
        name=row["name"],
        status=SpotStatus(row["status"]),
        ticket_id=row["ticket_id"],
    )


class EventRepoSQL(EventRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_event(self, event_id: str) -> Event | None:
        stmt = select(events).where(events.c.id == event_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(row) if row else None

    async def list_events(self) -> list[Event]:
        result = await self._session.execute(select(events).order_by(events.c.date))
        return [row_to_event(row) for row in result.mappings()]

    async def list_spots(self, event_id: str) -> list[Spot]:
        stmt = select(spots).where(spots.c.event_id == event_id).order_by(spots.c.name)
        result = await self._session.execute(stmt)
        return [row_to_spot(row) for row in result.mappings()]

    async def create_event(self, event: Event) -> None:
        stmt = insert(events).values(
            id=event.id,
            name=event.name,
            location=event.location,
            organization=event.organization,
            rating=event.rating.value,
            date=event.date,
            image_url=event.image_url,
            capacity=event.capacity,
            price=event.price,
            partner_id=event.partner_id,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateEventError(event.id) from exc
        except SQLAlchemyError as exc:
            raise PersistenceError(f"No se pudo crear el evento {event.id}") from exc

    async def create_spots(self, new_spots: Sequence[Spot]) -> None:
        if not new_spots:
            return
        event_id = new_spots[0].event_id
        names = [s.name for s in new_spots]
        existing = await self._session.execute(
            select(spots.c.name).where(spots.c.event_id == event_id, spots.c.name.in_(names))
        )
        taken = set(existing.scalars())
        duplicated = [n for i, n in enumerate(names) if n in taken or n in names[:i]]
        if duplicated:
            raise DuplicateSpotError(event_id, duplicated)

        rows = [
            {
                "id": s.id,
                "event_id": s.event_id,
                "name": s.name,
                "status": s.status.value,
                "ticket_id": s.ticket_id,
            }
            for s in new_spots
        ]
        try:
            await self._session.execute(insert(spots), rows)
        except IntegrityError as exc:
            # lost a race against a concurrent provisioning of the same names
            raise DuplicateSpotError(event_id, names) from exc
        except SQLAlchemyError as exc:
            raise PersistenceError(f"No se pudieron crear lugares del evento {event_id}") from exc
