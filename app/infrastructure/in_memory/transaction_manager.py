from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Callable

from app.application.interfaces.transaction_manager import TransactionManager

# Undo actions recorded by in-memory stores while a transaction is open
_undo_log: ContextVar[list[Callable[[], None]] | None] = ContextVar("_undo_log", default=None)


def record_undo(action: Callable[[], None]) -> None:
    undo = _undo_log.get()
    if undo is not None:
        undo.append(action)


class InMemoryTransactionManager(TransactionManager):
    """Rolls back in-memory writes made inside `start()` when the block raises."""

    @asynccontextmanager
    async def start(self):
        if _undo_log.get() is not None:
            # Nested: the outer transaction owns the rollback
            yield
            return

        undo: list[Callable[[], None]] = []
        token = _undo_log.set(undo)
        try:
            yield
        except BaseException:
            for action in reversed(undo):
                action()
            raise
        finally:
            _undo_log.reset(token)
