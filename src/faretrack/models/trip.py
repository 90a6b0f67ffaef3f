"""Trip model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from faretrack.exceptions import TripAlreadyClosedError, TripNotClosedError
from faretrack.models.check import CheckEvent


class Trip(BaseModel):
    """One customer journey from a departure check-in to an optional return.

    A trip is *open* until it has a return event and *closed* afterwards.
    Trips are immutable snapshots: :meth:`closed` returns a new closed trip
    and only the ledger replaces its stored copy with it.

    Parameters
    ----------
    customer_id : int
        Customer that made the journey.
    departure : CheckEvent
        Check-in event. Shared with the ledger's open check-in index.
    return_event : CheckEvent or None
        Check-out event, ``None`` while the trip is open.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    customer_id: int
    departure: CheckEvent
    return_event: CheckEvent | None = None

    @property
    def is_open(self) -> bool:
        return self.return_event is None

    @property
    def is_closed(self) -> bool:
        return self.return_event is not None

    def departs_from(self, station_name: str) -> bool:
        return self.departure.station_name == station_name

    def returns_to(self, station_name: str) -> bool:
        """Return ``True`` when the trip is closed at *station_name*."""
        if self.return_event is None:
            return False
        return self.return_event.station_name == station_name

    def closed(self, return_event: CheckEvent) -> Trip:
        """Return a copy of this trip closed at *return_event*.

        The departure event is shared with the copy, not duplicated.

        Raises
        ------
        TripAlreadyClosedError
            If the trip already has a return event.
        """
        if self.return_event is not None:
            raise TripAlreadyClosedError(
                f"trip for customer {self.customer_id} from {self.departure} is already closed at {self.return_event}"
            )
        return self.model_copy(update={"return_event": return_event})

    def trip_time(self) -> int:
        """Return timestamp minus departure timestamp.

        Not validated for ordering: out-of-order input gives a negative value.

        Raises
        ------
        TripNotClosedError
            If the trip is still open.
        """
        if self.return_event is None:
            raise TripNotClosedError(f"trip for customer {self.customer_id} from {self.departure} is not completed")
        return self.return_event.timestamp - self.departure.timestamp
