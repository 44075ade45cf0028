"""Implementación in-memory del Spot Store."""

from dataclasses import replace
from typing import Sequence

from app.application.interfaces.spot_store import SpotStore
from app.domain.entities.spot import Spot, SpotStatus
from app.domain.entities.ticket import Ticket
from app.domain.errors import PersistenceError, SpotNotFoundError
from app.infrastructure.in_memory.event_repo import InMemoryEventRepo
from app.infrastructure.in_memory.transaction_manager import record_undo


class InMemorySpotStore(SpotStore):
    """
    Spot Store sobre el estado de InMemoryEventRepo.

    `reserve` es un compare-and-set bajo el lock del repositorio: entre N
    llamadas concurrentes para el mismo lugar exactamente una gana.
    """

    def __init__(self, event_repo: InMemoryEventRepo) -> None:
        self._repo = event_repo
        self.tickets: dict[str, Ticket] = {}

    async def find_by_names(self, event_id: str, names: Sequence[str]) -> dict[str, Spot]:
        with self._repo.lock:
            by_name = {
                s.name: replace(s)
                for s in self._repo.spots.values()
                if s.event_id == event_id and s.name in names
            }
        missing = [name for name in names if name not in by_name]
        if missing:
            raise SpotNotFoundError(event_id, missing)
        return {name: by_name[name] for name in names}

    async def reserve(self, spot_id: str, ticket_id: str) -> None:
        with self._repo.lock:
            spot = self._repo.spots.get(spot_id)
            if spot is None:
                raise PersistenceError(f"Lugar inexistente: {spot_id}")
            spot.reserve(ticket_id)

        def undo() -> None:
            with self._repo.lock:
                current = self._repo.spots.get(spot_id)
                if current is not None and current.ticket_id == ticket_id:
                    current.status = SpotStatus.AVAILABLE
                    current.ticket_id = None

        record_undo(undo)

    async def create_ticket(self, ticket: Ticket) -> None:
        with self._repo.lock:
            if ticket.id in self.tickets:
                raise PersistenceError(f"Ticket duplicado: {ticket.id}")
            if any(t.spot_id == ticket.spot_id for t in self.tickets.values()):
                raise PersistenceError(f"El lugar {ticket.spot_id} ya tiene ticket")
            self.tickets[ticket.id] = ticket

        def undo() -> None:
            with self._repo.lock:
                self.tickets.pop(ticket.id, None)

        record_undo(undo)
