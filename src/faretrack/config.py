"""Ledger configuration for faretrack."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from faretrack.exceptions import FareTrackConfigError


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise FareTrackConfigError(f"{name} must be a boolean flag, got {value!r}")


@dataclasses.dataclass(frozen=True)
class LedgerConfig:
    """Behaviour switches for :class:`~faretrack.ledger.store.TripLedger`.

    Parameters
    ----------
    enforce_single_open_trip : bool
        Reject a check-in while the same customer still has an open trip.
        When disabled, check-out closes the customer's earliest open trip.
    validate_timestamp_order : bool
        Reject a check-out whose timestamp is earlier than the matching
        check-in. Disabled by default, in which case negative trip times
        are recorded as given.
    incremental_averages : bool
        Answer ``average_time`` from running per station-pair totals kept
        up to date at check-out. When disabled the full trip history is
        re-scanned on every query. Both give identical results.
    """

    enforce_single_open_trip: bool = True
    validate_timestamp_order: bool = False
    incremental_averages: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> LedgerConfig:
        """Create configuration from ``FARETRACK_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        FareTrackConfigError
            If a variable holds something that is not a boolean flag.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "FARETRACK_ENFORCE_SINGLE_OPEN_TRIP": "enforce_single_open_trip",
            "FARETRACK_VALIDATE_TIMESTAMP_ORDER": "validate_timestamp_order",
            "FARETRACK_INCREMENTAL_AVERAGES": "incremental_averages",
        }
        defaults = cls()
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            config_kwargs[field_name] = _env_bool(env_key, env.get(env_key), getattr(defaults, field_name))

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
