from uuid import uuid4

from app.application.interfaces.partner_gateway import (
    PartnerGateway,
    ReservationRequest,
    ReservationResponse,
)


class StubPartnerGateway(PartnerGateway):
    """Confirms every spot of the batch; used when no partner is reachable."""

    name = "stub"

    def __init__(self) -> None:
        self.requests: list[ReservationRequest] = []

    async def make_reservation(self, request: ReservationRequest) -> list[ReservationResponse]:
        self.requests.append(request)
        return [
            ReservationResponse(
                reservation_id=f"STUB-{uuid4().hex[:8].upper()}",
                spot=spot,
                status="reserved",
            )
            for spot in request.spots
        ]
