from __future__ import annotations

import pytest

from faretrack.exceptions import NoOpenTripError
from faretrack.ledger.events import LedgerEvent, LedgerEventKind
from faretrack.ledger.store import TripLedger


def _event(kind: str, customer_id: int, station_name: str, timestamp: int) -> LedgerEvent:
    return LedgerEvent(kind=kind, customer_id=customer_id, station_name=station_name, timestamp=timestamp)


def test_event_kind_parsed_from_string() -> None:
    event = _event("check_in", 1, "Leyton", 3)

    assert event.kind == LedgerEventKind.CHECK_IN


def test_replay_applies_in_order() -> None:
    ledger = TripLedger()
    events = [
        _event("check_in", 45, "Leyton", 3),
        _event("check_in", 32, "Paradise", 8),
        _event("check_in", 27, "Leyton", 10),
        _event("check_out", 45, "Waterloo", 15),
        _event("check_out", 27, "Waterloo", 20),
        _event("check_out", 32, "Cambridge", 22),
    ]

    assert ledger.replay(events) == 6
    assert ledger.average_time("Paradise", "Cambridge") == 14.0
    assert ledger.average_time("Leyton", "Waterloo") == 11.0


def test_replay_stops_at_first_failure() -> None:
    ledger = TripLedger()
    events = [
        _event("check_in", 1, "Leyton", 3),
        _event("check_out", 2, "Waterloo", 5),
        _event("check_out", 1, "Waterloo", 9),
    ]

    with pytest.raises(NoOpenTripError):
        ledger.replay(events)

    assert len(ledger) == 1
    assert ledger.open_trip_for(1) is not None
