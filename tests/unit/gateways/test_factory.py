import pytest

from app.domain.errors import PartnerNotFoundError
from app.infrastructure.gateways.factory import PartnerGatewayFactory
from app.infrastructure.gateways.partner1_gateway import Partner1Gateway
from app.infrastructure.gateways.partner2_gateway import Partner2Gateway
from app.infrastructure.in_memory.partner_gateway import StubPartnerGateway


@pytest.fixture
def factory():
    return PartnerGatewayFactory(
        base_urls={1: "http://p1.test", 2: "http://p2.test"},
        timeout_seconds=2.5,
    )


def test_partner_one_resolves_to_english_variant(factory):
    gateway = factory.get_gateway(1)
    assert isinstance(gateway, Partner1Gateway)
    assert gateway.base_url == "http://p1.test"


def test_partner_two_resolves_to_portuguese_variant(factory):
    assert isinstance(factory.get_gateway(2), Partner2Gateway)


def test_gateways_are_reused(factory):
    assert factory.get_gateway(1) is factory.get_gateway(1)


def test_unknown_partner(factory):
    with pytest.raises(PartnerNotFoundError) as exc_info:
        factory.get_gateway(3)
    assert exc_info.value.code == "PARTNER_NOT_FOUND"


def test_known_variant_without_base_url():
    factory = PartnerGatewayFactory(base_urls={1: "http://p1.test"})
    with pytest.raises(PartnerNotFoundError):
        factory.get_gateway(2)


def test_register_overrides_variant(factory):
    stub = StubPartnerGateway()
    factory.register(2, stub)
    assert factory.get_gateway(2) is stub


@pytest.mark.asyncio
async def test_stub_confirms_every_spot():
    from app.application.interfaces.partner_gateway import ReservationRequest

    stub = StubPartnerGateway()
    result = await stub.make_reservation(ReservationRequest(event_id="e", spots=["A1", "B2"]))
    assert [r.spot for r in result] == ["A1", "B2"]
    assert all(r.reservation_id.startswith("STUB-") for r in result)
    assert len(stub.requests) == 1
