from typing import Any

from app.application.interfaces.partner_gateway import ReservationRequest, ReservationResponse
from app.infrastructure.gateways.partner_gateway_http import PartnerGatewayHTTP


class Partner2Gateway(PartnerGatewayHTTP):
    """
    Gateway para el Partner 2 (campos en portugués).

    Request:  POST {base_url}/eventos/{event_id}/reservar
              {"lugares": [...], "tipo_ingresso": "...", "email": "..."}
    Response: 201, [{"id", "email", "lugar", "tipo_ingresso", "estado", "evento_id"}]
    """

    name = "partner2"

    def _reserve_url(self, event_id: str) -> str:
        return f"{self._base_url}/eventos/{event_id}/reservar"

    def _to_wire(self, request: ReservationRequest) -> dict[str, Any]:
        return {
            "lugares": list(request.spots),
            "tipo_ingresso": request.ticket_kind,
            "email": request.email,
        }

    def _from_wire(self, item: dict[str, Any]) -> ReservationResponse:
        return ReservationResponse(
            reservation_id=str(item["id"]),
            spot=item["lugar"],
            status=item["estado"],
        )
