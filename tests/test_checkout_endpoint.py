from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_use_cases
from app.application.interfaces.uuid_generator import FakeUUIDGenerator
from app.application.use_cases.buy_tickets import BuyTicketsUseCase
from app.domain.entities.spot import SpotStatus
from app.domain.errors import PartnerError, PersistenceError, PurchaseCancelledError
from app.main import app
from tests.conftest import EVENT_ID


class RaisingUseCase:
    def __init__(self, error):
        self.error = error

    async def execute(self, *args, **kwargs):
        raise self.error


@pytest.fixture
def use_cases(event_repo, spot_store, partner_factory, tx_manager):
    return {
        "buy_tickets": BuyTicketsUseCase(
            event_repo=event_repo,
            spot_store=spot_store,
            partner_factory=partner_factory,
            transaction_manager=tx_manager,
            id_generator=FakeUUIDGenerator(prefix="tkt"),
            partner_timeout_seconds=1.0,
        ),
    }


@pytest_asyncio.fixture
async def client(use_cases):
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _payload(*spots, kind="full"):
    return {
        "event_id": EVENT_ID,
        "spots": list(spots),
        "ticket_kind": kind,
        "email": "buyer@example.com",
    }


async def test_checkout_success(client, event_repo):
    response = await client.post("/checkout", json=_payload("A1", "B1", kind="half"))

    assert response.status_code == 200
    body = response.json()
    assert [item["spot"] for item in body] == ["A1", "B1"]
    assert [Decimal(item["price"]) for item in body] == [Decimal("50"), Decimal("50")]
    assert body[0]["ticket_id"] == "tkt-0001"
    assert body[0]["reservation_id"] == "R-A1"
    assert body[0]["status"] == "confirmed"
    assert body[0]["partner_status"] == "reserved"
    assert event_repo.spots["s-a1"].status is SpotStatus.SOLD


async def test_ticket_kind_is_case_insensitive(client):
    response = await client.post("/checkout", json=_payload("B2", kind="FULL"))
    assert response.status_code == 200


@pytest.mark.parametrize(
    "payload, status_code, error_code",
    [
        (_payload("a1"), 400, "INVALID_SPOT_NAME"),
        (_payload(), 400, "INVALID_BATCH"),
        (_payload("A1", "A1"), 400, "INVALID_BATCH"),
        (_payload("A1", kind="vip"), 400, "INVALID_TICKET_KIND"),
        ({**_payload("A1"), "event_id": "missing"}, 404, "EVENT_NOT_FOUND"),
        (_payload("A1", "Z9"), 404, "SPOT_NOT_FOUND"),
        (_payload("A2"), 409, "SPOT_ALREADY_RESERVED"),
    ],
)
async def test_checkout_rejections(client, fake_gateway, payload, status_code, error_code):
    response = await client.post("/checkout", json=payload)

    assert response.status_code == status_code
    assert response.headers["X-Error-Code"] == error_code
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text
    assert fake_gateway.requests == []


async def test_malformed_body(client):
    response = await client.post("/checkout", json={"event_id": EVENT_ID, "spots": "A1"})

    assert response.status_code == 400
    assert response.headers["X-Error-Code"] == "INVALID_REQUEST"


async def test_missing_ticket_kind_is_rejected(client, fake_gateway):
    payload = _payload("A1")
    del payload["ticket_kind"]

    response = await client.post("/checkout", json=payload)

    assert response.status_code == 400
    assert response.headers["X-Error-Code"] == "INVALID_REQUEST"
    assert "ticket_kind" in response.text
    assert fake_gateway.requests == []


async def test_partner_failure_is_bad_gateway(client, fake_gateway, event_repo):
    fake_gateway.error = PartnerError(partner="fake", error_code="UNEXPECTED_STATUS")

    response = await client.post("/checkout", json=_payload("A1"))

    assert response.status_code == 502
    assert response.headers["X-Error-Code"] == "PARTNER_ERROR"
    assert event_repo.spots["s-a1"].status is SpotStatus.AVAILABLE


async def test_reconciliation_is_conflict(client, fake_gateway, spot_store):
    async def competing_buyer(_request):
        await spot_store.reserve("s-a1", "competitor")

    fake_gateway.before_return = competing_buyer

    response = await client.post("/checkout", json=_payload("A1"))

    assert response.status_code == 409
    assert response.headers["X-Error-Code"] == "RECONCILIATION_REQUIRED"


@pytest.mark.parametrize(
    "error, status_code, error_code",
    [
        (PersistenceError("escritura fallida"), 500, "PERSISTENCE_ERROR"),
        (PurchaseCancelledError(["A1"], reconciliation_required=True), 499, "PURCHASE_CANCELLED"),
    ],
)
async def test_error_mapping(client, use_cases, error, status_code, error_code):
    use_cases["buy_tickets"] = RaisingUseCase(error)

    response = await client.post("/checkout", json=_payload("A1"))

    assert response.status_code == status_code
    assert response.headers["X-Error-Code"] == error_code
    assert response.text == error.message


async def test_unhandled_error_is_generic_500(use_cases):
    use_cases["buy_tickets"] = RaisingUseCase(RuntimeError("secret detail"))
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.post("/checkout", json=_payload("A1"))
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert "error_id" in response.json()
    assert "secret detail" not in response.text
