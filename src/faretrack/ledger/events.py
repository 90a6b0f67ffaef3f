"""Normalized ledger events.

Batches of already-validated gate events are converted into these before
being applied to a :class:`~faretrack.ledger.store.TripLedger`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class LedgerEventKind(StrEnum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"


class LedgerEvent(BaseModel):
    """A single check-in or check-out to apply to the ledger."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: LedgerEventKind
    customer_id: int = Field(..., description="Customer passing the gate")
    station_name: str = Field(..., description="Station of the gate")
    timestamp: int = Field(..., description="Time of passage")
