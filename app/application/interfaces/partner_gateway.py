from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ReservationRequest:
    event_id: str
    spots: list[str] = field(default_factory=list)
    ticket_kind: str = "full"
    email: str = ""


@dataclass
class ReservationResponse:
    reservation_id: str
    spot: str
    status: str  # partner-reported, e.g. "reserved"


class PartnerGateway(ABC):
    name: str = "partner"

    @abstractmethod
    async def make_reservation(self, request: ReservationRequest) -> list[ReservationResponse]:
        """
        Submits the whole batch to the partner.

        Returns one response per reserved spot, in the partner's order.
        Raises PartnerError for transport errors, non-201 statuses and
        undecodable bodies.
        """
        pass
