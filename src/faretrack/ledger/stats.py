"""Running travel-time totals per ordered station pair."""

from __future__ import annotations

from dataclasses import dataclass

from faretrack.exceptions import NoMatchingTripsError, TripNotClosedError
from faretrack.models.trip import Trip


@dataclass
class RouteTotals:
    """Sum and count of trip times for one (start, end) station pair."""

    total_time: int = 0
    trip_count: int = 0

    def add(self, trip_time: int) -> None:
        self.total_time += trip_time
        self.trip_count += 1

    def mean(self) -> float:
        """Average trip time, from the exact integer sum divided once."""
        return self.total_time / self.trip_count


def mean_trip_time(trips: list[Trip], start_station: str, end_station: str) -> float:
    """Average trip time over *trips*, which must all be closed.

    Raises
    ------
    NoMatchingTripsError
        If *trips* is empty.
    """
    if not trips:
        raise _no_trips(start_station, end_station)
    totals = RouteTotals()
    for trip in trips:
        totals.add(trip.trip_time())
    return totals.mean()


def _no_trips(start_station: str, end_station: str) -> NoMatchingTripsError:
    return NoMatchingTripsError(
        f"no completed trips from {start_station!r} to {end_station!r}",
        start_station=start_station,
        end_station=end_station,
    )


class RouteStatsIndex:
    """Incrementally maintained :class:`RouteTotals` keyed by station pair."""

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], RouteTotals] = {}

    def __len__(self) -> int:
        return len(self._routes)

    def record(self, trip: Trip) -> None:
        """Add a closed trip to the totals of its station pair."""
        if trip.return_event is None:
            raise TripNotClosedError(f"cannot record open trip for customer {trip.customer_id}")
        key = (trip.departure.station_name, trip.return_event.station_name)
        totals = self._routes.get(key)
        if totals is None:
            totals = RouteTotals()
            self._routes[key] = totals
        totals.add(trip.trip_time())

    def totals(self, start_station: str, end_station: str) -> RouteTotals | None:
        return self._routes.get((start_station, end_station))

    def average(self, start_station: str, end_station: str) -> float:
        totals = self._routes.get((start_station, end_station))
        if totals is None or totals.trip_count == 0:
            raise _no_trips(start_station, end_station)
        return totals.mean()
