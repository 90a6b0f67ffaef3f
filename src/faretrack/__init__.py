"""faretrack - In-memory underground fare tracker with average travel times."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("faretrack")
except PackageNotFoundError:
    __version__ = "0+local"
from faretrack.config import LedgerConfig
from faretrack.exceptions import (
    CustomerAlreadyCheckedInError,
    DuplicateCheckInError,
    FareTrackConfigError,
    FareTrackError,
    InvalidTimestampOrderError,
    LedgerError,
    NoMatchingTripsError,
    NoOpenTripError,
    TripAlreadyClosedError,
    TripNotClosedError,
    TripStateError,
)
from faretrack.ledger.events import LedgerEvent, LedgerEventKind
from faretrack.ledger.store import TripLedger
from faretrack.models import CheckEvent, Trip

__all__ = [
    "__version__",
    "CheckEvent",
    "CustomerAlreadyCheckedInError",
    "DuplicateCheckInError",
    "FareTrackConfigError",
    "FareTrackError",
    "InvalidTimestampOrderError",
    "LedgerConfig",
    "LedgerError",
    "LedgerEvent",
    "LedgerEventKind",
    "NoMatchingTripsError",
    "NoOpenTripError",
    "Trip",
    "TripAlreadyClosedError",
    "TripLedger",
    "TripNotClosedError",
    "TripStateError",
]
