"""The one trip a device is currently tracking."""

import logging

from planner.errors import InvariantViolation
from planner.storage import BindingStore

logger = logging.getLogger(__name__)

TRIP_STORAGE_KEY = "@planner:tripId"


class DeviceTripBinding:
    """Zero or one bound trip id per device. Saving always overwrites.

    The store is read once (``load``) at startup; ``get`` serves the cached
    value afterwards. Not thread-safe: all access happens on one event loop.
    """

    def __init__(self, store: BindingStore):
        self._store = store
        self._trip_id: str | None = None
        self._loaded = False

    def load(self) -> str | None:
        self._trip_id = self._store.get(TRIP_STORAGE_KEY) or None
        self._loaded = True
        return self._trip_id

    def get(self) -> str | None:
        if not self._loaded:
            return self.load()
        return self._trip_id

    def save(self, trip_id: str) -> None:
        if not trip_id or not trip_id.strip():
            raise InvariantViolation("Cannot bind device to an empty trip id")
        previous = self.get()
        self._store.put(TRIP_STORAGE_KEY, trip_id)
        self._trip_id = trip_id
        if previous and previous != trip_id:
            logger.info("Rebound device from trip %s to %s", previous, trip_id)
        else:
            logger.info("Bound device to trip %s", trip_id)

    def remove(self) -> None:
        self._store.delete(TRIP_STORAGE_KEY)
        self._trip_id = None
        self._loaded = True
        logger.info("Removed device trip binding")
