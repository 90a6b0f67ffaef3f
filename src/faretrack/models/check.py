"""Check event model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CheckEvent(BaseModel):
    """A customer passing a fare gate at a station.

    Immutable and hashable: two events are equal when both the station
    and the timestamp match. Station names are compared case-sensitively
    and are stored exactly as given.

    Parameters
    ----------
    station_name : str
        Station where the gate was passed.
    timestamp : int
        Time of passage, in whatever integer unit the caller uses.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    station_name: str
    timestamp: int

    def __str__(self) -> str:
        return f"{self.station_name}@{self.timestamp}"
