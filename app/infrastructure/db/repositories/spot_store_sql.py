import logging
from typing import Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.spot_store import SpotStore
from app.domain.entities.spot import Spot, SpotStatus
from app.domain.entities.ticket import Ticket
from app.domain.errors import PersistenceError, SpotAlreadyReservedError, SpotNotFoundError
from app.infrastructure.db.repositories.event_repo_sql import row_to_spot
from app.infrastructure.db.tables import spots, tickets

logger = logging.getLogger(__name__)


class SpotStoreSQL(SpotStore):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_names(self, event_id: str, names: Sequence[str]) -> dict[str, Spot]:
        stmt = select(spots).where(spots.c.event_id == event_id, spots.c.name.in_(list(names)))
        result = await self._session.execute(stmt)
        by_name = {row["name"]: row_to_spot(row) for row in result.mappings()}
        missing = [name for name in names if name not in by_name]
        if missing:
            raise SpotNotFoundError(event_id, missing)
        return {name: by_name[name] for name in names}

    async def reserve(self, spot_id: str, ticket_id: str) -> None:
        # Compare-and-set on status: the WHERE clause is the only mutual
        # exclusion between concurrent buyers of the same spot.
        stmt = (
            update(spots)
            .where(spots.c.id == spot_id, spots.c.status == SpotStatus.AVAILABLE.value)
            .values(status=SpotStatus.SOLD.value, ticket_id=ticket_id)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"No se pudo reservar el lugar {spot_id}") from exc

        if result.rowcount == 0:
            name = await self._session.scalar(select(spots.c.name).where(spots.c.id == spot_id))
            if name is None:
                raise PersistenceError(f"Lugar inexistente: {spot_id}")
            logger.info(
                "Spot reserve lost compare-and-set",
                extra={"spot_id": spot_id, "spot": name, "ticket_id": ticket_id},
            )
            raise SpotAlreadyReservedError([name])

    async def create_ticket(self, ticket: Ticket) -> None:
        stmt = insert(tickets).values(
            id=ticket.id,
            event_id=ticket.event_id,
            spot_id=ticket.spot_id,
            ticket_kind=ticket.ticket_kind.value,
            price=ticket.price,
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"No se pudo crear el ticket {ticket.id}") from exc
