"""ASGI entrypoint for auto-discovery tools.

Some servers look specifically for `app` in a well-known file (e.g. `uvicorn app:app`).
The real application lives in `airportinfo.api`; this module re-exports it.
"""

import os

from airportinfo.api import app

__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host="0.0.0.0", port=port)
