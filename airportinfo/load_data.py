"""Route file loading.

Route files follow the OpenFlights ``routes.dat`` column order with a single header line:
``airline, airline id, source airport, source id, destination airport, destination id,
codeshare, stops, equipment``. Only the source (index 2) and destination (index 4) codes are
used. Lines are split on bare commas; there is no quoting and no whitespace trimming.
"""

import logging
from pathlib import Path
from typing import Iterator, Tuple

import pandas as pd

from .errors import MalformedRowError, NotFoundError, RouteDecodeError

logger = logging.getLogger(__name__)

SOURCE_INDEX = 2
DESTINATION_INDEX = 4
MIN_FIELDS = DESTINATION_INDEX + 1
ROUTE_COLUMNS = ["Source airport", "Destination airport"]


def _present_fields(fields: Tuple[str, ...]) -> int:
    """Count fields up to the last non-empty one; trailing empty fields do not count."""
    count = len(fields)
    while count and not fields[count - 1]:
        count -= 1
    return count


def iter_route_records(path, encoding: str = "utf-8") -> Iterator[Tuple[str, ...]]:
    """
    Yield one tuple of raw fields per data line of ``path``.

    The first line is treated as a header and discarded. Lines are decoded one at a time,
    so ``encoding`` must be ASCII-compatible (utf-8, latin-1, cp1252...). The file is closed
    when the generator is exhausted or closed.
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise NotFoundError(path, exc.strerror) from exc

    with handle:
        # Header row
        handle.readline()
        for line_number, raw_line in enumerate(handle, start=2):
            try:
                line = raw_line.decode(encoding)
            except UnicodeDecodeError as exc:
                raise RouteDecodeError(line_number, encoding, exc.reason) from exc
            fields = tuple(line.rstrip("\r\n").split(","))
            present = _present_fields(fields)
            if present < MIN_FIELDS:
                raise MalformedRowError(line_number, present, MIN_FIELDS)
            yield fields


def load_routes(path, encoding: str = "utf-8") -> pd.DataFrame:
    """Read every route of ``path`` into a two-column frame of source/destination codes."""
    rows = [
        (fields[SOURCE_INDEX], fields[DESTINATION_INDEX])
        for fields in iter_route_records(path, encoding=encoding)
    ]
    routes = pd.DataFrame(rows, columns=ROUTE_COLUMNS, dtype=object)
    logger.info(
        "routes loaded",
        extra={"routes_path": str(Path(path)), "rows": len(routes)},
    )
    return routes
