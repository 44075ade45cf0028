"""Implementación in-memory del repositorio de eventos."""

import threading
from dataclasses import replace
from typing import Sequence

from app.application.interfaces.event_repo import EventRepo
from app.domain.entities.event import Event
from app.domain.entities.spot import Spot
from app.domain.errors import DuplicateEventError, DuplicateSpotError


class InMemoryEventRepo(EventRepo):
    """
    Eventos y lugares en memoria.

    `spots` es compartido con InMemorySpotStore; toda mutación se hace bajo
    `lock`. Hacia afuera siempre se entregan copias.
    """

    def __init__(self) -> None:
        self.events: dict[str, Event] = {}
        self.spots: dict[str, Spot] = {}
        self.lock = threading.Lock()

    async def get_event(self, event_id: str) -> Event | None:
        return self.events.get(event_id)

    async def list_events(self) -> list[Event]:
        return list(self.events.values())

    async def list_spots(self, event_id: str) -> list[Spot]:
        with self.lock:
            return [replace(s) for s in self.spots.values() if s.event_id == event_id]

    async def create_event(self, event: Event) -> None:
        with self.lock:
            if event.id in self.events:
                raise DuplicateEventError(event.id)
            self.events[event.id] = event

    async def create_spots(self, spots: Sequence[Spot]) -> None:
        with self.lock:
            taken = {(s.event_id, s.name) for s in self.spots.values()}
            seen: set[tuple[str, str]] = set()
            duplicated = []
            for spot in spots:
                key = (spot.event_id, spot.name)
                if key in taken or key in seen:
                    duplicated.append(spot.name)
                seen.add(key)
            if duplicated:
                raise DuplicateSpotError(spots[0].event_id, duplicated)
            for spot in spots:
                self.spots[spot.id] = replace(spot)
