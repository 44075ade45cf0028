from typing import Sequence

from app.domain.entities.spot import Spot
from app.domain.entities.ticket import Ticket


class SpotStore:
    async def find_by_names(self, event_id: str, names: Sequence[str]) -> dict[str, Spot]:
        """
        Loads every requested spot of the event, keyed by name.

        Raises SpotNotFoundError naming every missing spot.
        """
        raise NotImplementedError

    async def reserve(self, spot_id: str, ticket_id: str) -> None:
        """
        Atomic conditional transition available -> sold.

        Raises SpotAlreadyReservedError (and changes nothing) when the spot is
        not available at the moment of the write.
        """
        raise NotImplementedError

    async def create_ticket(self, ticket: Ticket) -> None:
        """Raises PersistenceError when the ticket cannot be stored."""
        raise NotImplementedError
