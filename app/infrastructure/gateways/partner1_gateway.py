from typing import Any

from app.application.interfaces.partner_gateway import ReservationRequest, ReservationResponse
from app.infrastructure.gateways.partner_gateway_http import PartnerGatewayHTTP


class Partner1Gateway(PartnerGatewayHTTP):
    """
    Gateway para el Partner 1 (campos en inglés).

    Request:  POST {base_url}/event/{event_id}/reserve
              {"spots": [...], "ticket_kind": "...", "email": "..."}
    Response: 201, [{"id", "email", "spot", "ticket_kind", "status", "event_id"}]
    """

    name = "partner1"

    def _reserve_url(self, event_id: str) -> str:
        return f"{self._base_url}/event/{event_id}/reserve"

    def _to_wire(self, request: ReservationRequest) -> dict[str, Any]:
        return {
            "spots": list(request.spots),
            "ticket_kind": request.ticket_kind,
            "email": request.email,
        }

    def _from_wire(self, item: dict[str, Any]) -> ReservationResponse:
        return ReservationResponse(
            reservation_id=str(item["id"]),
            spot=item["spot"],
            status=item["status"],
        )
