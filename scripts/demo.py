#!/usr/bin/env python3
"""Run the reference fare-tracker scenarios and print average travel times.

Usage
-----
    python scripts/demo.py
    python scripts/demo.py --scenario 2 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from faretrack import LedgerConfig, TripLedger  # noqa: E402


def _scenario_one(config: LedgerConfig) -> list[tuple[str, float]]:
    ledger = TripLedger(config)
    ledger.check_in(45, "Leyton", 3)
    ledger.check_in(32, "Paradise", 8)
    ledger.check_in(27, "Leyton", 10)
    ledger.check_out(45, "Waterloo", 15)
    ledger.check_out(27, "Waterloo", 20)
    ledger.check_out(32, "Cambridge", 22)
    results = [
        ("Paradise -> Cambridge", ledger.average_time("Paradise", "Cambridge")),
        ("Leyton -> Waterloo", ledger.average_time("Leyton", "Waterloo")),
    ]
    ledger.check_in(10, "Leyton", 24)
    results.append(("Leyton -> Waterloo (10 still travelling)", ledger.average_time("Leyton", "Waterloo")))
    ledger.check_out(10, "Waterloo", 38)
    results.append(("Leyton -> Waterloo", ledger.average_time("Leyton", "Waterloo")))
    return results


def _scenario_two(config: LedgerConfig) -> list[tuple[str, float]]:
    ledger = TripLedger(config)
    results: list[tuple[str, float]] = []
    for customer_id, start, end in ((10, 3, 8), (5, 10, 16), (2, 21, 30)):
        ledger.check_in(customer_id, "Leyton", start)
        ledger.check_out(customer_id, "Paradise", end)
        results.append(("Leyton -> Paradise", ledger.average_time("Leyton", "Paradise")))
    return results


_SCENARIOS = {"1": _scenario_one, "2": _scenario_two}


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--scenario", choices=[*_SCENARIOS, "all"], default="all")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every ledger transition")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = LedgerConfig.from_env()
    names = list(_SCENARIOS) if args.scenario == "all" else [args.scenario]
    for name in names:
        print(f"scenario {name}")
        for label, value in _SCENARIOS[name](config):
            print(f"  {label}: {value:.5f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
