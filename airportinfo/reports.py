"""Text reports over route aggregates.

Every report sorts airport codes explicitly before rendering, so output never depends on
dictionary iteration order.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence

from .aggregate import RouteAggregates
from .errors import ParseError

logger = logging.getLogger(__name__)

MODE_MAX = "MAX"
MODE_DEPARTURES = "DEPARTURES"
MODE_LIMIT = "LIMIT"
REPORT_MODES = (MODE_MAX, MODE_DEPARTURES, MODE_LIMIT)

# Optional sign and ASCII digits only; no padding or digit-group underscores
LIMIT_PATTERN = re.compile(r"[+-]?[0-9]+")


def max_airports(flight_counts: Mapping[str, int]):
    """Return the highest flight count and the sorted airports that reach it."""
    max_flights = 0
    leaders: List[str] = []
    for airport, count in flight_counts.items():
        if count > max_flights:
            max_flights = count
            leaders = [airport]
        elif count == max_flights:
            leaders.append(airport)
    return max_flights, sorted(leaders)


def get_max(flight_counts: Mapping[str, int]) -> str:
    max_flights, leaders = max_airports(flight_counts)
    report = f"MAX FLIGHTS {max_flights}"
    if leaders:
        report += f" : {' '.join(leaders)}"
    return report.rstrip()


def get_departures(destinations: Mapping[str, Sequence[str]]) -> str:
    lines = [
        f"{source} flies to {' '.join(destinations[source])}"
        for source in sorted(destinations)
    ]
    return "\n".join(lines)


def airports_over_limit(limit: int, flight_counts: Mapping[str, int]) -> Dict[str, int]:
    """Airports with strictly more than ``limit`` flights, keyed in code order."""
    return {
        airport: flight_counts[airport]
        for airport in sorted(flight_counts)
        if flight_counts[airport] > limit
    }


def get_limits(limit: int, flight_counts: Mapping[str, int]) -> str:
    selected = airports_over_limit(limit, flight_counts)
    return "\n".join(f"{airport} - {count}" for airport, count in selected.items())


def parse_limit(raw_value: Optional[str]) -> int:
    if raw_value is None:
        raise ParseError("LIMIT mode requires an integer limit argument")
    if not LIMIT_PATTERN.fullmatch(raw_value):
        raise ParseError(f"Limit must be an integer, got {raw_value!r}")
    return int(raw_value)


def run_report(mode: str, aggregates: RouteAggregates, raw_limit: Optional[str] = None) -> Optional[str]:
    """
    Render the report named by ``mode``.

    Returns ``None`` for an unrecognised mode; that is a silent no-op rather than an error.
    """
    if mode == MODE_MAX:
        return get_max(aggregates.flight_counts)
    if mode == MODE_DEPARTURES:
        return get_departures(aggregates.destinations)
    if mode == MODE_LIMIT:
        return get_limits(parse_limit(raw_limit), aggregates.flight_counts)
    logger.debug("ignoring unknown report mode", extra={"mode": mode})
    return None
