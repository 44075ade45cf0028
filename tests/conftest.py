"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Repositorios in-memory sembrados con un evento de prueba
- Gateways de partner falsos (controlables desde cada test)
- Base de datos SQLite (aiosqlite) en archivo temporal
- Reset del circuit breaker entre tests
"""

import asyncio
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.application.interfaces.partner_gateway import (
    PartnerGateway,
    ReservationRequest,
    ReservationResponse,
)
from app.application.interfaces.uuid_generator import FakeUUIDGenerator
from app.application.use_cases.buy_tickets import BuyTicketsUseCase
from app.domain.entities.event import Event, Rating
from app.domain.entities.spot import Spot, SpotStatus
from app.infrastructure.db.tables import metadata
from app.infrastructure.gateways.factory import PartnerGatewayFactory
from app.infrastructure.in_memory.event_repo import InMemoryEventRepo
from app.infrastructure.in_memory.spot_store import InMemorySpotStore
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager

EVENT_ID = "evt-1"
PARTNER_ID = 1


def make_event(event_id: str = EVENT_ID, price: str = "100.00", partner_id: int = PARTNER_ID):
    return Event(
        id=event_id,
        name="Concierto de prueba",
        location="Auditorio Central",
        organization="Eventos SA",
        rating=Rating.L12,
        date=datetime(2027, 3, 1, 20, 0),
        capacity=10,
        price=Decimal(price),
        partner_id=partner_id,
    )


# ============================================================================
# GATEWAYS DE PRUEBA
# ============================================================================

class FakePartnerGateway(PartnerGateway):
    """
    Partner controlable: confirma todo el lote salvo que el test indique lo
    contrario (error, respuesta incompleta, demora o un hook previo).
    """

    name = "fake"

    def __init__(self) -> None:
        self.requests: list[ReservationRequest] = []
        self.error: Exception | None = None
        self.drop_spots: set[str] = set()
        self.delay: float = 0.0
        self.before_return = None

    async def make_reservation(self, request: ReservationRequest) -> list[ReservationResponse]:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.before_return is not None:
            await self.before_return(request)
        return [
            ReservationResponse(
                reservation_id=f"R-{spot}",
                spot=spot,
                status="reserved",
            )
            for spot in request.spots
            if spot not in self.drop_spots
        ]


# ============================================================================
# FIXTURES IN-MEMORY
# ============================================================================

@pytest.fixture
def event_repo() -> InMemoryEventRepo:
    """Evento de 100.00 con A1 disponible y A2 vendido (más B1..B3 disponibles)."""
    repo = InMemoryEventRepo()
    repo.events[EVENT_ID] = make_event()
    for spot_id, name in [("s-a1", "A1"), ("s-b1", "B1"), ("s-b2", "B2"), ("s-b3", "B3")]:
        repo.spots[spot_id] = Spot(id=spot_id, event_id=EVENT_ID, name=name)
    repo.spots["s-a2"] = Spot(
        id="s-a2",
        event_id=EVENT_ID,
        name="A2",
        status=SpotStatus.SOLD,
        ticket_id="previous-ticket",
    )
    return repo


@pytest.fixture
def spot_store(event_repo) -> InMemorySpotStore:
    return InMemorySpotStore(event_repo)


@pytest.fixture
def tx_manager() -> InMemoryTransactionManager:
    return InMemoryTransactionManager()


@pytest.fixture
def fake_gateway() -> FakePartnerGateway:
    return FakePartnerGateway()


@pytest.fixture
def partner_factory(fake_gateway) -> PartnerGatewayFactory:
    factory = PartnerGatewayFactory(base_urls={PARTNER_ID: "http://partner.test"})
    factory.register(PARTNER_ID, fake_gateway)
    return factory


@pytest.fixture
def id_generator() -> FakeUUIDGenerator:
    return FakeUUIDGenerator(prefix="tkt")


@pytest.fixture
def buy_tickets(event_repo, spot_store, partner_factory, tx_manager, id_generator):
    return BuyTicketsUseCase(
        event_repo=event_repo,
        spot_store=spot_store,
        partner_factory=partner_factory,
        transaction_manager=tx_manager,
        id_generator=id_generator,
        partner_timeout_seconds=1.0,
    )


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """SQLite en archivo: cada sesión ve los commits de las demás."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return async_sessionmaker(sqlite_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests que usan una base de datos real (SQLite en archivo)"
    )
    config.addinivalue_line(
        "markers",
        "circuit_breaker: Tests del circuit breaker de partners"
    )


@pytest.fixture(autouse=True)
def reset_circuit_breakers():
    """
    Reset del circuit breaker antes de cada test.
    Evita que tests fallen por un breaker abierto en tests anteriores.
    """
    from app.infrastructure.circuit_breaker import partner_breaker

    partner_breaker.close()
    yield
    partner_breaker.close()
