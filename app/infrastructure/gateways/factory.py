from typing import Dict, Type

from app.application.interfaces.partner_gateway import PartnerGateway
from app.domain.errors import PartnerNotFoundError
from app.infrastructure.gateways.partner1_gateway import Partner1Gateway
from app.infrastructure.gateways.partner2_gateway import Partner2Gateway
from app.infrastructure.gateways.partner_gateway_http import PartnerGatewayHTTP


class PartnerGatewayFactory:
    """Resolves an event's partner id to its (shared, stateless) gateway."""

    VARIANTS: Dict[int, Type[PartnerGatewayHTTP]] = {
        1: Partner1Gateway,
        2: Partner2Gateway,
    }

    def __init__(self, base_urls: Dict[int, str], timeout_seconds: float = 10.0):
        self._base_urls = {int(pid): url for pid, url in base_urls.items()}
        self._timeout = timeout_seconds
        self._gateways: Dict[int, PartnerGateway] = {}

    def get_gateway(self, partner_id: int) -> PartnerGateway:
        if partner_id in self._gateways:
            return self._gateways[partner_id]

        base_url = self._base_urls.get(partner_id)
        variant = self.VARIANTS.get(partner_id)
        if not base_url or variant is None:
            raise PartnerNotFoundError(partner_id)

        gateway = variant(base_url=base_url, timeout_seconds=self._timeout)
        self._gateways[partner_id] = gateway
        return gateway

    def register(self, partner_id: int, gateway: PartnerGateway) -> None:
        """Overrides the gateway for a partner id (stubs, tests)."""
        self._gateways[partner_id] = gateway
