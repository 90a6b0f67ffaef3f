"""Trip lookups used by the ledger."""

from __future__ import annotations

from collections.abc import Sequence

from faretrack.models.trip import Trip


def open_trip_index(trips: Sequence[Trip], customer_id: int) -> int | None:
    """Return the position of the first open trip for *customer_id*."""
    for index, trip in enumerate(trips):
        if trip.customer_id == customer_id and trip.is_open:
            return index
    return None


def open_trip_for_customer(trips: Sequence[Trip], customer_id: int) -> Trip | None:
    """Return the first open trip for *customer_id* in sequence order."""
    index = open_trip_index(trips, customer_id)
    return None if index is None else trips[index]


def closed_trips_between(trips: Sequence[Trip], start_station: str, end_station: str) -> list[Trip]:
    """Return closed trips that departed *start_station* and returned to *end_station*."""
    return [trip for trip in trips if trip.departs_from(start_station) and trip.returns_to(end_station)]
