"""
Environment-driven settings shared by the CLI and the HTTP service.

* ROUTES_PATH selects the route file served by the API.
* ROUTES_ENCODING sets the text encoding used to read route files.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_ROUTES_PATH = BASE_DIR / "data" / "routes.csv"
DEFAULT_ENCODING = "utf-8"


def _env_value(name: str) -> Optional[str]:
    raw_value = os.environ.get(name)
    if raw_value is None or not raw_value.strip():
        return None
    return raw_value.strip()


@dataclass(frozen=True)
class Settings:
    routes_path: Path = DEFAULT_ROUTES_PATH
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls) -> "Settings":
        routes_path = _env_value("ROUTES_PATH")
        return cls(
            routes_path=Path(routes_path) if routes_path else DEFAULT_ROUTES_PATH,
            encoding=_env_value("ROUTES_ENCODING") or DEFAULT_ENCODING,
        )
