"""In-flight request guard: at most one running call per named operation."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from planner.errors import RequestInFlightError

logger = logging.getLogger(__name__)


class RequestGuard:
    """Single-slot lock per operation name.

    A second call for an operation that is still running is rejected
    immediately instead of queued. The check-and-mark happens without an
    await in between, so it is atomic on a single event loop.
    """

    def __init__(self) -> None:
        self._in_flight: set[str] = set()

    def is_busy(self, operation: str) -> bool:
        return operation in self._in_flight

    @asynccontextmanager
    async def hold(self, operation: str) -> AsyncIterator[None]:
        if operation in self._in_flight:
            logger.warning("Rejected concurrent %s call", operation)
            raise RequestInFlightError(operation)
        self._in_flight.add(operation)
        try:
            yield
        finally:
            self._in_flight.discard(operation)
