"""
Circuit Breaker configuration for partner reservation calls.

Prevents a failing partner from tying up every checkout request: after
`fail_max` consecutive partner failures the circuit opens and further calls
fail fast until `reset_timeout` seconds have passed.

Circuit Breaker Pattern:
- CLOSED: Normal operation, requests pass through
- OPEN: Too many failures, requests fail immediately
- HALF_OPEN: Testing if the partner recovered
"""

import logging
from functools import wraps

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

from app.domain.errors import PartnerError

logger = logging.getLogger(__name__)


# Shared by every partner gateway variant
partner_breaker = CircuitBreaker(
    fail_max=5,  # Open circuit after 5 consecutive failures
    reset_timeout=60,  # Wait 60 seconds before attempting recovery
    name="partner_circuit_breaker",
)


class StateChangeLogger(CircuitBreakerListener):
    """Logs circuit breaker state changes for monitoring and alerting."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


partner_breaker.add_listener(StateChangeLogger("partner"))


def async_partner_breaker(func):
    """
    Guard an async partner call with the shared breaker.

    The awaited call runs inside ``partner_breaker.calling()`` so its real
    outcome is recorded: a success closes a half-open circuit, and any failure
    counts, cancellation by the per-partner timeout included. A call rejected
    by an open circuit surfaces as ``PartnerError`` with code ``CIRCUIT_OPEN``.
    """

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        partner = getattr(self, "name", "partner")
        entered = False
        try:
            with partner_breaker.calling():
                entered = True
                return await func(self, *args, **kwargs)
        except CircuitBreakerError as exc:
            if entered:
                # The guarded call failed and tripped the breaker
                failure = exc.__context__
                logger.error(
                    "Partner circuit breaker opened",
                    extra={
                        "partner": partner,
                        "error_code": getattr(failure, "error_code", type(failure).__name__),
                    },
                )
                if failure is not None:
                    raise failure from None
            raise PartnerError(
                partner=partner,
                error_code="CIRCUIT_OPEN",
                error_message="Partner temporarily unavailable (circuit breaker open)",
            ) from exc

    return wrapper


__all__ = [
    "partner_breaker",
    "async_partner_breaker",
    "CircuitBreakerError",
]
