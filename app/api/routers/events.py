from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_use_cases
from app.api.schemas.events import (
    CreateEventRequest,
    CreateSpotsRequest,
    EventDetailResponse,
    EventResponse,
    SpotResponse,
)

router = APIRouter()


@router.get("/events", response_model=list[EventResponse], status_code=status.HTTP_200_OK)
async def list_events(use_cases=Depends(get_use_cases)) -> list[EventResponse]:
    events = await use_cases["list_events"].execute()
    return [EventResponse.from_entity(event) for event in events]


@router.get(
    "/events/{event_id}",
    response_model=EventDetailResponse,
    status_code=status.HTTP_200_OK,
)
async def get_event(event_id: str, use_cases=Depends(get_use_cases)) -> EventDetailResponse:
    found = await use_cases["get_event"].execute(event_id=event_id)
    return EventDetailResponse(
        **EventResponse.from_entity(found.event).model_dump(),
        spots=[SpotResponse.from_entity(spot) for spot in found.spots],
    )


@router.get(
    "/events/{event_id}/spots",
    response_model=list[SpotResponse],
    status_code=status.HTTP_200_OK,
)
async def list_spots(event_id: str, use_cases=Depends(get_use_cases)) -> list[SpotResponse]:
    spots = await use_cases["list_spots"].execute(event_id=event_id)
    return [SpotResponse.from_entity(spot) for spot in spots]


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: CreateEventRequest,
    use_cases=Depends(get_use_cases),
) -> EventResponse:
    event = await use_cases["create_event"].execute(**payload.model_dump())
    return EventResponse.from_entity(event)


@router.post(
    "/events/{event_id}/spots",
    response_model=list[SpotResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_spots(
    event_id: str,
    payload: CreateSpotsRequest,
    use_cases=Depends(get_use_cases),
) -> list[SpotResponse]:
    spots = await use_cases["create_spots"].execute(event_id=event_id, names=payload.names)
    return [SpotResponse.from_entity(spot) for spot in spots]
