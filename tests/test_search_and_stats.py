from __future__ import annotations

import pytest

from faretrack.exceptions import NoMatchingTripsError, TripNotClosedError
from faretrack.ledger.search import closed_trips_between, open_trip_for_customer, open_trip_index
from faretrack.ledger.stats import RouteStatsIndex, RouteTotals, mean_trip_time
from faretrack.models.check import CheckEvent
from faretrack.models.trip import Trip


def _trip(customer_id: int, start: str, t0: int, end: str | None = None, t1: int | None = None) -> Trip:
    trip = Trip(customer_id=customer_id, departure=CheckEvent(station_name=start, timestamp=t0))
    if end is not None and t1 is not None:
        trip = trip.closed(CheckEvent(station_name=end, timestamp=t1))
    return trip


def test_open_trip_lookup_skips_closed_trips() -> None:
    closed = _trip(1, "Leyton", 3, "Waterloo", 9)
    still_open = _trip(1, "Waterloo", 20)

    assert open_trip_for_customer([closed, still_open], 1) is still_open


def test_open_trip_lookup_returns_first_in_order() -> None:
    first = _trip(1, "Leyton", 3)
    second = _trip(1, "Bank", 5)

    assert open_trip_for_customer([first, second], 1) is first
    assert open_trip_for_customer([first, second], 2) is None


def test_closed_trips_between_filters_on_both_stations() -> None:
    trips = [
        _trip(1, "Leyton", 3, "Waterloo", 15),
        _trip(2, "Leyton", 4, "Bank", 9),
        _trip(3, "Paradise", 5, "Waterloo", 9),
        _trip(4, "Leyton", 6),
    ]

    assert [t.customer_id for t in closed_trips_between(trips, "Leyton", "Waterloo")] == [1]


def test_mean_trip_time_empty_raises() -> None:
    with pytest.raises(NoMatchingTripsError):
        mean_trip_time([], "Leyton", "Waterloo")


def test_route_totals_mean() -> None:
    totals = RouteTotals()
    totals.add(12)
    totals.add(10)

    assert totals == RouteTotals(total_time=22, trip_count=2)
    assert totals.mean() == 11.0


def test_index_records_by_ordered_pair() -> None:
    index = RouteStatsIndex()
    index.record(_trip(1, "Leyton", 3, "Waterloo", 15))
    index.record(_trip(2, "Leyton", 10, "Waterloo", 20))
    index.record(_trip(3, "Waterloo", 10, "Leyton", 11))

    assert len(index) == 2
    assert index.average("Leyton", "Waterloo") == 11.0
    assert index.average("Waterloo", "Leyton") == 1.0
    assert index.totals("Leyton", "Bank") is None
    with pytest.raises(NoMatchingTripsError):
        index.average("Leyton", "Bank")


def test_index_rejects_open_trip() -> None:
    index = RouteStatsIndex()

    with pytest.raises(TripNotClosedError):
        index.record(_trip(1, "Leyton", 3))

    assert len(index) == 0


def test_open_trip_index_points_at_open_entry() -> None:
    trips = [_trip(1, "Leyton", 3, "Waterloo", 9), _trip(2, "Bank", 4), _trip(1, "Waterloo", 20)]

    assert open_trip_index(trips, 1) == 2
    assert open_trip_index(trips, 2) == 1
    assert open_trip_index(trips, 3) is None
