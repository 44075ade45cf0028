import asyncio
import logging
from typing import Sequence

from app.application.dtos.purchase_dto import BuyTicketsInput, PurchaseConfirmation
from app.application.interfaces.event_repo import EventRepo
from app.application.interfaces.partner_gateway import (
    PartnerGateway,
    ReservationRequest,
    ReservationResponse,
)
from app.application.interfaces.spot_store import SpotStore
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import UUIDGenerator
from app.domain.entities.event import Event
from app.domain.entities.spot import Spot
from app.domain.entities.ticket import Ticket, TicketKind
from app.domain.errors import (
    EventNotFoundError,
    InvalidBatchError,
    PartnerError,
    PersistenceError,
    PurchaseCancelledError,
    ReconciliationError,
    SpotAlreadyReservedError,
)
from app.domain.value_objects.spot_name import SpotName
from app.infrastructure.db.retry import retry_on_deadlock
from app.infrastructure.gateways.factory import PartnerGatewayFactory


def _validate_batch(names: Sequence[str]) -> list[str]:
    if not names:
        raise InvalidBatchError("Debe solicitar al menos un lugar")
    duplicated = sorted({n for n in names if names.count(n) > 1})
    if duplicated:
        raise InvalidBatchError(
            f"Lugares repetidos en el lote: {', '.join(duplicated)}", spots=duplicated
        )
    for name in names:
        SpotName(name)
    return list(names)


class BuyTicketsUseCase:
    """
    Sells a batch of spots of one event, confirmed by the event's partner.

    Validation, lookups and the sold pre-check happen before the partner is
    contacted and leave no trace. The partner sees the whole batch in one
    call; only after it confirms are the spots marked sold and the tickets
    written, all in a single transaction.
    """

    def __init__(
        self,
        event_repo: EventRepo,
        spot_store: SpotStore,
        partner_factory: PartnerGatewayFactory,
        transaction_manager: TransactionManager,
        id_generator: UUIDGenerator,
        partner_timeout_seconds: float = 10.0,
    ) -> None:
        self._event_repo = event_repo
        self._spot_store = spot_store
        self._partner_factory = partner_factory
        self._transaction_manager = transaction_manager
        self._id_generator = id_generator
        self._partner_timeout = partner_timeout_seconds
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        request: BuyTicketsInput,
        cancel_event: asyncio.Event | None = None,
    ) -> list[PurchaseConfirmation]:
        names = _validate_batch(request.spots)
        kind = TicketKind.parse(request.ticket_kind)

        event = await self._event_repo.get_event(request.event_id)
        if not event:
            raise EventNotFoundError(request.event_id)

        gateway = self._partner_factory.get_gateway(event.partner_id)

        spots = await self._spot_store.find_by_names(event.id, names)
        sold = [name for name in names if spots[name].is_sold]
        if sold:
            raise SpotAlreadyReservedError(sold)

        price = Ticket.price_for(event.price, kind)

        if cancel_event is not None and cancel_event.is_set():
            raise PurchaseCancelledError(names, reconciliation_required=False)

        reservation = ReservationRequest(
            event_id=event.id,
            spots=names,
            ticket_kind=kind.value,
            email=request.email,
        )
        responses = await self._reserve_with_partner(gateway, reservation, cancel_event)
        confirmed = self._match_responses(gateway, reservation, responses)
        reservation_ids = [confirmed[name].reservation_id for name in names]

        if cancel_event is not None and cancel_event.is_set():
            self._logger.error(
                "Purchase cancelled after partner confirmation; reconciliation required",
                extra={
                    "event_id": event.id,
                    "spots": names,
                    "partner": gateway.name,
                    "reservation_ids": reservation_ids,
                },
            )
            raise PurchaseCancelledError(
                names,
                reconciliation_required=True,
                partner_reservation_ids=reservation_ids,
            )

        return await self._commit(event, spots, names, kind, confirmed)

    async def _reserve_with_partner(
        self,
        gateway: PartnerGateway,
        reservation: ReservationRequest,
        cancel_event: asyncio.Event | None,
    ) -> list[ReservationResponse]:
        call = asyncio.ensure_future(
            asyncio.wait_for(gateway.make_reservation(reservation), self._partner_timeout)
        )
        waiters: set[asyncio.Future] = {call}
        if cancel_event is not None:
            waiters.add(asyncio.ensure_future(cancel_event.wait()))

        try:
            done, _ = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            self._logger.error(
                "Purchase task cancelled during partner call; reconciliation may be required",
                extra={
                    "event_id": reservation.event_id,
                    "spots": reservation.spots,
                    "partner": gateway.name,
                },
            )
            raise
        finally:
            for waiter in waiters:
                if not waiter.done():
                    waiter.cancel()

        if call not in done:
            self._logger.error(
                "Purchase cancelled during partner call; reconciliation may be required",
                extra={
                    "event_id": reservation.event_id,
                    "spots": reservation.spots,
                    "partner": gateway.name,
                },
            )
            raise PurchaseCancelledError(reservation.spots, reconciliation_required=True)

        try:
            return call.result()
        except asyncio.TimeoutError as exc:
            self._logger.warning(
                "Partner call timed out",
                extra={
                    "event_id": reservation.event_id,
                    "spots": reservation.spots,
                    "partner": gateway.name,
                    "timeout": self._partner_timeout,
                },
            )
            raise PartnerError(
                partner=gateway.name,
                error_code="TIMEOUT",
                error_message=f"no response after {self._partner_timeout}s",
                spots=reservation.spots,
            ) from exc

    def _match_responses(
        self,
        gateway: PartnerGateway,
        reservation: ReservationRequest,
        responses: list[ReservationResponse],
    ) -> dict[str, ReservationResponse]:
        by_spot = {r.spot: r for r in responses}
        missing = [name for name in reservation.spots if name not in by_spot]
        if missing:
            raise PartnerError(
                partner=gateway.name,
                error_code="INCOMPLETE_RESPONSE",
                error_message=f"no confirmation for {', '.join(missing)}",
                spots=missing,
            )
        return by_spot

    async def _commit(
        self,
        event: Event,
        spots: dict[str, Spot],
        names: list[str],
        kind: TicketKind,
        confirmed: dict[str, ReservationResponse],
    ) -> list[PurchaseConfirmation]:
        reservation_ids = [confirmed[name].reservation_id for name in names]

        async def _run() -> list[PurchaseConfirmation]:
            confirmations = []
            async with self._transaction_manager.start():
                for name in names:
                    spot = spots[name]
                    ticket = Ticket.create(
                        ticket_id=self._id_generator.generate_uuid(),
                        event_id=event.id,
                        spot_id=spot.id,
                        ticket_kind=kind,
                        base_price=event.price,
                    )
                    await self._spot_store.reserve(spot.id, ticket.id)
                    await self._spot_store.create_ticket(ticket)
                    confirmations.append(
                        PurchaseConfirmation(
                            ticket_id=ticket.id,
                            spot=name,
                            price=ticket.price,
                            partner_status=confirmed[name].status,
                            reservation_id=confirmed[name].reservation_id,
                        )
                    )
            return confirmations

        try:
            confirmations = await retry_on_deadlock(_run)
        except SpotAlreadyReservedError as exc:
            self._logger.error(
                "Partner confirmed spots already sold locally; reconciliation required",
                extra={
                    "event_id": event.id,
                    "spots": exc.spots,
                    "batch": names,
                    "reservation_ids": reservation_ids,
                },
            )
            raise ReconciliationError(event.id, exc.spots, reservation_ids) from exc
        except PersistenceError as exc:
            self._logger.error(
                "Purchase commit failed after partner confirmation; reconciliation required",
                extra={
                    "event_id": event.id,
                    "spots": names,
                    "reservation_ids": reservation_ids,
                    "error": exc.message,
                },
            )
            raise PersistenceError(
                exc.message, spots=names, partner_reservation_ids=reservation_ids
            ) from exc

        self._logger.info(
            "Tickets purchased",
            extra={
                "event_id": event.id,
                "spots": names,
                "ticket_ids": [c.ticket_id for c in confirmations],
            },
        )
        return confirmations
