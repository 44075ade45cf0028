from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        """
        All-or-nothing unit of work for store writes.

        Commits when the block exits normally; any exception discards every
        write made inside the block and propagates.
        """
        yield
