from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import AsyncSessionLocal
from app.application.interfaces.uuid_generator import RealUUIDGenerator
from app.application.use_cases.buy_tickets import BuyTicketsUseCase
from app.application.use_cases.create_event import CreateEventUseCase
from app.application.use_cases.create_spots import CreateSpotsUseCase
from app.application.use_cases.get_event import GetEventUseCase
from app.application.use_cases.list_events import ListEventsUseCase
from app.application.use_cases.list_spots import ListSpotsUseCase
from app.config import Settings, get_settings
from app.infrastructure.db.repositories.event_repo_sql import EventRepoSQL
from app.infrastructure.db.repositories.spot_store_sql import SpotStoreSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.gateways.factory import PartnerGatewayFactory
from app.infrastructure.in_memory.event_repo import InMemoryEventRepo
from app.infrastructure.in_memory.partner_gateway import StubPartnerGateway
from app.infrastructure.in_memory.spot_store import InMemorySpotStore
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager


async def get_session(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AsyncSession | None, None]:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def _build_partner_factory(settings: Settings) -> PartnerGatewayFactory:
    factory = PartnerGatewayFactory(
        base_urls=settings.partner_base_urls,
        timeout_seconds=settings.partner_timeout_seconds,
    )
    if settings.use_stub_partners:
        stub = StubPartnerGateway()
        for partner_id in settings.partner_base_urls:
            factory.register(partner_id, stub)
    return factory


@lru_cache(maxsize=1)
def get_partner_factory() -> PartnerGatewayFactory:
    # Gateways are stateless; one factory is shared by every request
    return _build_partner_factory(get_settings())


@lru_cache(maxsize=1)
def get_in_memory_bundle():
    event_repo = InMemoryEventRepo()
    return {
        "event_repo": event_repo,
        "spot_store": InMemorySpotStore(event_repo),
        "tx_manager": InMemoryTransactionManager(),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
    partner_factory: PartnerGatewayFactory = Depends(get_partner_factory),
):
    if settings.use_in_memory:
        bundle = get_in_memory_bundle()
        event_repo = bundle["event_repo"]
        spot_store = bundle["spot_store"]
        tx_manager = bundle["tx_manager"]
    else:
        if not session:
            raise RuntimeError("DB session not available")
        event_repo = EventRepoSQL(session)
        spot_store = SpotStoreSQL(session)
        tx_manager = SQLAlchemyTransactionManager(session)

    id_generator = RealUUIDGenerator()
    return {
        "list_events": ListEventsUseCase(event_repo=event_repo),
        "get_event": GetEventUseCase(event_repo=event_repo),
        "list_spots": ListSpotsUseCase(event_repo=event_repo),
        "create_event": CreateEventUseCase(
            event_repo=event_repo,
            transaction_manager=tx_manager,
            id_generator=id_generator,
        ),
        "create_spots": CreateSpotsUseCase(
            event_repo=event_repo,
            transaction_manager=tx_manager,
            id_generator=id_generator,
        ),
        "buy_tickets": BuyTicketsUseCase(
            event_repo=event_repo,
            spot_store=spot_store,
            partner_factory=partner_factory,
            transaction_manager=tx_manager,
            id_generator=id_generator,
            partner_timeout_seconds=settings.partner_timeout_seconds,
        ),
    }
