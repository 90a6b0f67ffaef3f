"""Data models for the trip ledger."""

from faretrack.models.check import CheckEvent
from faretrack.models.trip import Trip

__all__ = [
    "CheckEvent",
    "Trip",
]
