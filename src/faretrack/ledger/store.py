"""In-memory trip ledger.

This is the only component allowed to open or close trips.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from faretrack.config import LedgerConfig
from faretrack.exceptions import (
    CustomerAlreadyCheckedInError,
    DuplicateCheckInError,
    InvalidTimestampOrderError,
    NoOpenTripError,
)
from faretrack.ledger.events import LedgerEvent, LedgerEventKind
from faretrack.ledger.search import closed_trips_between, open_trip_for_customer, open_trip_index
from faretrack.ledger.stats import RouteStatsIndex, mean_trip_time
from faretrack.models.check import CheckEvent
from faretrack.models.trip import Trip

_logger = logging.getLogger(__name__)


class TripLedger:
    """Records check-ins and check-outs and answers average travel times.

    Trips are kept in check-in order and never removed. Stored trips are
    frozen; check-out replaces the open entry with its closed copy. Every
    public operation and view runs under one re-entrant lock, held across
    a whole :meth:`replay`, and every error is raised before any state is
    touched.
    """

    def __init__(self, config: LedgerConfig | None = None) -> None:
        self._config = config or LedgerConfig()
        self._lock = threading.RLock()
        self._trips: list[Trip] = []
        self._open_check_ins: set[CheckEvent] = set()
        self._routes = RouteStatsIndex()

    @property
    def config(self) -> LedgerConfig:
        return self._config

    @property
    def trips(self) -> tuple[Trip, ...]:
        """All trips ever created, in check-in order."""
        with self._lock:
            return tuple(self._trips)

    @property
    def open_check_ins(self) -> frozenset[CheckEvent]:
        with self._lock:
            return frozenset(self._open_check_ins)

    def __len__(self) -> int:
        with self._lock:
            return len(self._trips)

    def open_trip_for(self, customer_id: int) -> Trip | None:
        with self._lock:
            return open_trip_for_customer(self._trips, customer_id)

    def check_in(self, customer_id: int, station_name: str, timestamp: int) -> Trip:
        """Open a new trip for *customer_id* at *station_name*.

        Raises
        ------
        DuplicateCheckInError
            If an open check-in with the same station and timestamp exists.
        CustomerAlreadyCheckedInError
            If the customer already has an open trip and
            ``enforce_single_open_trip`` is set.
        """
        check = CheckEvent(station_name=station_name, timestamp=timestamp)
        with self._lock:
            if check in self._open_check_ins:
                _logger.debug("Rejected duplicate check-in %s for customer=%s", check, customer_id)
                raise DuplicateCheckInError(
                    f"an open check-in already exists at {check}",
                    station_name=station_name,
                    timestamp=timestamp,
                )
            if self._config.enforce_single_open_trip:
                existing = open_trip_for_customer(self._trips, customer_id)
                if existing is not None:
                    _logger.debug("Rejected check-in %s: customer=%s already checked in", check, customer_id)
                    raise CustomerAlreadyCheckedInError(
                        f"customer {customer_id} is still checked in at {existing.departure}",
                        customer_id=customer_id,
                    )

            trip = Trip(customer_id=customer_id, departure=check)
            self._trips.append(trip)
            self._open_check_ins.add(check)
            _logger.debug("Check-in customer=%s at %s", customer_id, check)
            return trip

    def check_out(self, customer_id: int, station_name: str, timestamp: int) -> Trip:
        """Close the customer's open trip at *station_name* and return the closed trip.

        When several open trips exist for the customer (only possible with
        ``enforce_single_open_trip`` disabled) the earliest one is closed.

        Raises
        ------
        NoOpenTripError
            If the customer has no open trip.
        InvalidTimestampOrderError
            If ``validate_timestamp_order`` is set and *timestamp* is
            earlier than the check-in.
        """
        check = CheckEvent(station_name=station_name, timestamp=timestamp)
        with self._lock:
            index = open_trip_index(self._trips, customer_id)
            if index is None:
                _logger.debug("Rejected check-out %s: customer=%s has no open trip", check, customer_id)
                raise NoOpenTripError(f"customer {customer_id} has no open trip", customer_id=customer_id)
            trip = self._trips[index]
            if self._config.validate_timestamp_order and timestamp < trip.departure.timestamp:
                _logger.debug(
                    "Rejected check-out %s: customer=%s checked in at %s",
                    check,
                    customer_id,
                    trip.departure,
                )
                raise InvalidTimestampOrderError(
                    f"customer {customer_id} checked out at {timestamp} before checking in at {trip.departure.timestamp}",
                    customer_id=customer_id,
                    departure_timestamp=trip.departure.timestamp,
                    return_timestamp=timestamp,
                )

            closed = trip.closed(check)
            self._trips[index] = closed
            self._open_check_ins.discard(closed.departure)
            self._routes.record(closed)
            _logger.debug("Check-out customer=%s at %s trip_time=%d", customer_id, check, closed.trip_time())
            return closed

    def average_time(self, start_station: str, end_station: str) -> float:
        """Mean trip time of completed trips from *start_station* to *end_station*.

        Raises
        ------
        NoMatchingTripsError
            If no completed trip matches the station pair.
        """
        with self._lock:
            if self._config.incremental_averages:
                return self._routes.average(start_station, end_station)
            trips = closed_trips_between(self._trips, start_station, end_station)
            return mean_trip_time(trips, start_station, end_station)

    def apply(self, event: LedgerEvent) -> Trip:
        """Apply a normalized ledger event."""
        if event.kind == LedgerEventKind.CHECK_IN:
            return self.check_in(event.customer_id, event.station_name, event.timestamp)
        return self.check_out(event.customer_id, event.station_name, event.timestamp)

    def replay(self, events: Iterable[LedgerEvent]) -> int:
        """Apply *events* in order and return how many were applied.

        Other threads see none of the batch until it finishes. Stops at the
        first event that fails; its error propagates and the events applied
        before it are kept.
        """
        applied = 0
        with self._lock:
            for event in events:
                self.apply(event)
                applied += 1
        _logger.debug("Replayed %d ledger events", applied)
        return applied
