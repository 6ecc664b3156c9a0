"""Error types raised while loading and reporting on route files."""

from __future__ import annotations

from typing import Optional


class AirportInfoError(Exception):
    """Base class for failures that abort a report run."""


class NotFoundError(AirportInfoError, FileNotFoundError):
    """Raised when the route file is missing or cannot be opened."""

    def __init__(self, path, reason: Optional[str] = None):
        message = f"Route file not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class MalformedRowError(AirportInfoError, ValueError):
    """Raised when a data line has too few comma-separated fields."""

    def __init__(self, line_number: int, field_count: int, required: int):
        super().__init__(
            f"Line {line_number}: expected at least {required} fields, found {field_count}"
        )
        self.line_number = line_number
        self.field_count = field_count


class ParseError(AirportInfoError, ValueError):
    """Raised when a command argument cannot be parsed."""


class RouteDecodeError(AirportInfoError, ValueError):
    """Raised when a data line is not valid text in the configured encoding."""

    def __init__(self, line_number: int, encoding: str, reason: str):
        super().__init__(f"Line {line_number}: cannot decode as {encoding} ({reason})")
        self.line_number = line_number
        self.encoding = encoding
