from datetime import datetime
from decimal import Decimal

import pytest

from app.application.interfaces.uuid_generator import FakeUUIDGenerator
from app.application.use_cases.create_event import CreateEventUseCase
from app.application.use_cases.create_spots import CreateSpotsUseCase
from app.application.use_cases.get_event import GetEventUseCase
from app.application.use_cases.list_events import ListEventsUseCase
from app.application.use_cases.list_spots import ListSpotsUseCase
from app.domain.entities.event import Rating
from app.domain.errors import (
    ConflictError,
    DuplicateEventError,
    DuplicateSpotError,
    EventNotFoundError,
    InvalidBatchError,
    InvalidSpotNameError,
)
from app.main import status_for
from tests.conftest import EVENT_ID, make_event


@pytest.fixture
def create_spots(event_repo, tx_manager):
    return CreateSpotsUseCase(
        event_repo=event_repo,
        transaction_manager=tx_manager,
        id_generator=FakeUUIDGenerator(prefix="spot"),
    )


async def test_list_events(event_repo):
    events = await ListEventsUseCase(event_repo).execute()
    assert [e.id for e in events] == [EVENT_ID]


async def test_get_event_includes_spots(event_repo):
    found = await GetEventUseCase(event_repo).execute(EVENT_ID)
    assert found.event.id == EVENT_ID
    assert len(found.spots) == 5


async def test_get_unknown_event(event_repo):
    with pytest.raises(EventNotFoundError):
        await GetEventUseCase(event_repo).execute("missing")


async def test_list_spots_of_unknown_event(event_repo):
    with pytest.raises(EventNotFoundError):
        await ListSpotsUseCase(event_repo).execute("missing")


async def test_create_event(event_repo, tx_manager):
    use_case = CreateEventUseCase(
        event_repo=event_repo,
        transaction_manager=tx_manager,
        id_generator=FakeUUIDGenerator(prefix="evt"),
    )
    event = await use_case.execute(
        name="Festival",
        location="Parque",
        organization="Org",
        rating=Rating.L18,
        date=datetime(2027, 5, 1, 18, 0),
        capacity=3,
        price=Decimal("45.50"),
        partner_id=2,
    )
    assert event.id == "evt-0001"
    assert (await event_repo.get_event("evt-0001")) == event


async def test_create_event_with_taken_id_is_conflict(event_repo):
    original = await event_repo.get_event(EVENT_ID)

    with pytest.raises(DuplicateEventError) as exc_info:
        await event_repo.create_event(make_event(price="10.00"))

    assert isinstance(exc_info.value, ConflictError)
    assert exc_info.value.code == "DUPLICATE_EVENT"
    assert status_for(exc_info.value) == 409
    assert await event_repo.get_event(EVENT_ID) == original


async def test_create_spots_start_available(create_spots, event_repo):
    spots = await create_spots.execute(EVENT_ID, ["C1", "C2"])
    assert [s.name for s in spots] == ["C1", "C2"]
    assert all(s.is_available for s in spots)
    assert {s.id for s in spots} <= set(event_repo.spots)


async def test_create_spots_rejects_bad_name(create_spots, event_repo):
    with pytest.raises(InvalidSpotNameError):
        await create_spots.execute(EVENT_ID, ["C1", "c2"])
    assert len(event_repo.spots) == 5


async def test_create_spots_rejects_duplicates(create_spots):
    with pytest.raises(DuplicateSpotError):
        await create_spots.execute(EVENT_ID, ["B1"])


async def test_create_spots_respects_capacity(create_spots):
    # capacity 10, five spots already provisioned
    with pytest.raises(InvalidBatchError):
        await create_spots.execute(EVENT_ID, [f"D{i}" for i in range(1, 7)])


async def test_create_spots_empty(create_spots):
    with pytest.raises(InvalidBatchError):
        await create_spots.execute(EVENT_ID, [])
