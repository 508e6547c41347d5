"""Owner removes the trip from this device."""

from typing import Any

from planner.services.binding import DeviceTripBinding
from planner.storage import get_binding_store


def handler(event: dict[str, Any], context: object) -> dict[str, int]:
    """Only the device binding is cleared; the remote trip is untouched."""
    DeviceTripBinding(get_binding_store()).remove()
    return {"statusCode": 200}
