"""Custom exception hierarchy for faretrack."""

from __future__ import annotations


class FareTrackError(Exception):
    """Base exception for all faretrack errors."""


class FareTrackConfigError(FareTrackError):
    """Invalid configuration value."""


class LedgerError(FareTrackError):
    """A call violated the check-in/check-out protocol."""


class DuplicateCheckInError(LedgerError):
    """An open check-in with the same station and timestamp already exists.

    Two open check-ins that cannot be told apart would make the later
    check-out lookup ambiguous, so the second one is rejected.
    """

    def __init__(self, message: str, *, station_name: str, timestamp: int) -> None:
        self.station_name = station_name
        self.timestamp = timestamp
        super().__init__(message)


class CustomerAlreadyCheckedInError(LedgerError):
    """Customer tried to check in while a previous trip is still open."""

    def __init__(self, message: str, *, customer_id: int) -> None:
        self.customer_id = customer_id
        super().__init__(message)


class NoOpenTripError(LedgerError):
    """Check-out for a customer that has no open trip."""

    def __init__(self, message: str, *, customer_id: int) -> None:
        self.customer_id = customer_id
        super().__init__(message)


class NoMatchingTripsError(LedgerError):
    """No completed trip exists between the requested stations."""

    def __init__(self, message: str, *, start_station: str, end_station: str) -> None:
        self.start_station = start_station
        self.end_station = end_station
        super().__init__(message)


class InvalidTimestampOrderError(LedgerError):
    """Check-out timestamp precedes the check-in timestamp.

    Only raised when ``LedgerConfig.validate_timestamp_order`` is enabled;
    by default negative trip times are recorded as given.
    """

    def __init__(
        self,
        message: str,
        *,
        customer_id: int,
        departure_timestamp: int,
        return_timestamp: int,
    ) -> None:
        self.customer_id = customer_id
        self.departure_timestamp = departure_timestamp
        self.return_timestamp = return_timestamp
        super().__init__(message)


class TripStateError(LedgerError):
    """Operation is not valid in the trip's current state."""


class TripNotClosedError(TripStateError):
    """Trip time requested for a trip that has not been checked out."""


class TripAlreadyClosedError(TripStateError):
    """A closed trip cannot be checked out again."""
