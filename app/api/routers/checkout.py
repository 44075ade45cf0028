import asyncio
import logging

from fastapi import APIRouter, Depends, Request, status

from app.api.dependencies import get_use_cases
from app.api.schemas.checkout import CheckoutItemResponse, CheckoutRequest

logger = logging.getLogger(__name__)

router = APIRouter()

DISCONNECT_POLL_SECONDS = 0.1


async def _watch_disconnect(request: Request, cancel_event: asyncio.Event) -> None:
    """Sets `cancel_event` once the client goes away."""
    while not cancel_event.is_set():
        if await request.is_disconnected():
            logger.warning(
                "Client disconnected during checkout",
                extra={"path": request.url.path},
            )
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)


@router.post(
    "/checkout",
    response_model=list[CheckoutItemResponse],
    status_code=status.HTTP_200_OK,
)
async def checkout(
    payload: CheckoutRequest,
    request: Request,
    use_cases=Depends(get_use_cases),
) -> list[CheckoutItemResponse]:
    cancel_event = asyncio.Event()
    watcher = asyncio.create_task(_watch_disconnect(request, cancel_event))
    try:
        confirmations = await use_cases["buy_tickets"].execute(
            payload.to_input(), cancel_event=cancel_event
        )
    finally:
        watcher.cancel()
    return [CheckoutItemResponse.from_confirmation(c) for c in confirmations]
