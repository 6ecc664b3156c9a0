import logging
import threading
import time
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import BaseModel

from .aggregate import RouteAggregates, aggregate_routes, analyze_network, build_network
from .config import Settings
from .errors import AirportInfoError, NotFoundError
from .load_data import load_routes
from .logging_setup import setup_logging
from .reports import (
    MODE_DEPARTURES,
    MODE_LIMIT,
    MODE_MAX,
    airports_over_limit,
    get_departures,
    get_limits,
    get_max,
    max_airports,
)

setup_logging()
logger = logging.getLogger(__name__)


class RouteStore:
    """Loads the configured route file once per process and keeps its aggregates."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.aggregates: Optional[RouteAggregates] = None
        self.network: Optional[Dict[str, Any]] = None
        self._lock = threading.Lock()
        self._error: Optional[Exception] = None

    @property
    def loaded(self) -> bool:
        return self.aggregates is not None

    def get(self) -> RouteAggregates:
        if self.aggregates is not None:
            return self.aggregates
        if self._error is not None:
            raise self._error

        with self._lock:
            if self.aggregates is not None:
                return self.aggregates
            try:
                routes = load_routes(self.settings.routes_path, encoding=self.settings.encoding)
            except Exception as exc:
                self._error = exc
                raise
            self.network = analyze_network(build_network(routes))
            self.aggregates = aggregate_routes(routes)
            logger.info(
                "route aggregates ready",
                extra={
                    "routes_path": str(self.settings.routes_path),
                    "rows": self.aggregates.routes,
                    "airports": len(self.aggregates.flight_counts),
                },
            )
            return self.aggregates


class MaxReport(BaseModel):
    mode: str
    report: str
    max_flights: int
    airports: List[str]


class DeparturesReport(BaseModel):
    mode: str
    report: str
    departures: Dict[str, List[str]]


class LimitReport(BaseModel):
    mode: str
    report: str
    limit: int
    airports: Dict[str, int]


class NetworkSummary(BaseModel):
    airports: int
    routes: int
    departure_airports: int
    top_hubs: List[Tuple[str, int]]


app = FastAPI(
    title="Airport Info",
    description="Flight activity reports over an OpenFlights-style route file.",
    version="0.1.0",
)

route_store = RouteStore()


def _aggregates() -> RouteAggregates:
    try:
        return route_store.get()
    except NotFoundError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except AirportInfoError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.middleware("http")
async def add_timing(request: Request, call_next):
    start = time.perf_counter()
    response: Response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"

    logger.info(
        "request",
        extra={
            "request_path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round(latency_ms, 2),
            "client": request.client.host if request.client else "unknown",
        },
    )
    return response


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/max", response_model=MaxReport)
async def max_report() -> Dict[str, Any]:
    aggregates = await run_in_threadpool(_aggregates)
    max_flights, leaders = max_airports(aggregates.flight_counts)
    return {
        "mode": MODE_MAX,
        "report": get_max(aggregates.flight_counts),
        "max_flights": max_flights,
        "airports": leaders,
    }


@app.get("/api/departures", response_model=DeparturesReport)
async def departures_report() -> Dict[str, Any]:
    aggregates = await run_in_threadpool(_aggregates)
    return {
        "mode": MODE_DEPARTURES,
        "report": get_departures(aggregates.destinations),
        "departures": {source: aggregates.destinations[source] for source in sorted(aggregates.destinations)},
    }


@app.get("/api/limit", response_model=LimitReport)
async def limit_report(
    limit: int = Query(..., description="Report airports with strictly more flights than this."),
) -> Dict[str, Any]:
    aggregates = await run_in_threadpool(_aggregates)
    return {
        "mode": MODE_LIMIT,
        "report": get_limits(limit, aggregates.flight_counts),
        "limit": limit,
        "airports": airports_over_limit(limit, aggregates.flight_counts),
    }


@app.get("/api/network", response_model=NetworkSummary)
async def network_summary() -> Dict[str, Any]:
    await run_in_threadpool(_aggregates)
    return route_store.network
