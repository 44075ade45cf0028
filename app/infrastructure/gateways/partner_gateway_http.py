import logging
from typing import Any

import httpx

from app.application.interfaces.partner_gateway import (
    PartnerGateway,
    ReservationRequest,
    ReservationResponse,
)
from app.domain.errors import PartnerError
from app.infrastructure.circuit_breaker import async_partner_breaker

logger = logging.getLogger(__name__)


class PartnerGatewayHTTP(PartnerGateway):
    """
    JSON-over-HTTP partner gateway.

    Subclasses only describe the partner's wire shape: the reserve URL, the
    request body and how one item of the response array maps back to a
    ReservationResponse. Everything else (timeout, status check, decoding,
    error mapping, circuit breaker) is shared.
    """

    name = "partner"

    def __init__(self, base_url: str, timeout_seconds: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def _reserve_url(self, event_id: str) -> str:
        raise NotImplementedError

    def _to_wire(self, request: ReservationRequest) -> dict[str, Any]:
        raise NotImplementedError

    def _from_wire(self, item: dict[str, Any]) -> ReservationResponse:
        raise NotImplementedError

    def _fail(
        self,
        request: ReservationRequest,
        error_code: str,
        error_message: str | None = None,
        http_status: int | None = None,
    ) -> PartnerError:
        logger.warning(
            "Partner reservation failed",
            extra={
                "partner": self.name,
                "event_id": request.event_id,
                "spots": request.spots,
                "error_code": error_code,
                "http_status": http_status,
            },
        )
        return PartnerError(
            partner=self.name,
            error_code=error_code,
            error_message=error_message,
            http_status=http_status,
            spots=request.spots,
        )

    @async_partner_breaker
    async def make_reservation(self, request: ReservationRequest) -> list[ReservationResponse]:
        url = self._reserve_url(request.event_id)
        payload = self._to_wire(request)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, json=payload)
        except httpx.TimeoutException as exc:
            raise self._fail(request, "TIMEOUT", str(exc)) from exc
        except httpx.HTTPError as exc:
            raise self._fail(request, "NETWORK_ERROR", str(exc)) from exc

        if response.status_code != httpx.codes.CREATED:
            raise self._fail(
                request,
                "UNEXPECTED_STATUS",
                f"unexpected status code: {response.status_code}",
                http_status=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise self._fail(
                request, "INVALID_RESPONSE", "body is not JSON", response.status_code
            ) from exc

        if not isinstance(body, list):
            raise self._fail(
                request, "INVALID_RESPONSE", "expected a JSON array", response.status_code
            )

        try:
            responses = [self._from_wire(item) for item in body]
        except (KeyError, TypeError) as exc:
            raise self._fail(
                request, "INVALID_RESPONSE", f"malformed item: {exc}", response.status_code
            ) from exc

        logger.info(
            "Partner reservation confirmed",
            extra={
                "partner": self.name,
                "event_id": request.event_id,
                "reservation_ids": [r.reservation_id for r in responses],
            },
        )
        return responses
