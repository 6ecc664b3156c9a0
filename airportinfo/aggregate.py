"""Aggregations over loaded route frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import networkx as nx
import pandas as pd

SOURCE_COLUMN = "Source airport"
DESTINATION_COLUMN = "Destination airport"


def build_destinations(routes_df: pd.DataFrame) -> Dict[str, List[str]]:
    """
    Map every source airport to its destinations.

    Destinations keep file order and duplicates; an airport that never departs has no entry.
    """
    if routes_df is None or routes_df.empty:
        return {}
    grouped = routes_df.groupby(SOURCE_COLUMN, sort=False)[DESTINATION_COLUMN].agg(list)
    return {str(source): list(destinations) for source, destinations in grouped.items()}


def build_flight_counts(routes_df: pd.DataFrame) -> Dict[str, int]:
    """Count how many route endpoints name each airport (a self-loop counts twice)."""
    if routes_df is None or routes_df.empty:
        return {}
    endpoints = pd.concat(
        [routes_df[SOURCE_COLUMN], routes_df[DESTINATION_COLUMN]],
        ignore_index=True,
    )
    counts = endpoints.value_counts(sort=False)
    return {str(airport): int(count) for airport, count in counts.items()}


@dataclass(frozen=True)
class RouteAggregates:
    destinations: Dict[str, List[str]] = field(default_factory=dict)
    flight_counts: Dict[str, int] = field(default_factory=dict)
    routes: int = 0


def aggregate_routes(routes_df: pd.DataFrame) -> RouteAggregates:
    return RouteAggregates(
        destinations=build_destinations(routes_df),
        flight_counts=build_flight_counts(routes_df),
        routes=0 if routes_df is None else int(len(routes_df)),
    )


def build_network(routes_df: pd.DataFrame) -> nx.MultiDiGraph:
    """One directed edge per route line; repeated routes and self-loops are kept."""
    G = nx.MultiDiGraph()
    if routes_df is None or routes_df.empty:
        return G
    for source, destination in zip(routes_df[SOURCE_COLUMN], routes_df[DESTINATION_COLUMN]):
        G.add_edge(source, destination)
    return G


def analyze_network(G: nx.MultiDiGraph, top_n: int = 5) -> Dict[str, Any]:
    hubs = sorted(G.degree, key=lambda item: (-item[1], item[0]))[: max(0, int(top_n))]
    departing = sum(1 for _, out_degree in G.out_degree if out_degree > 0)
    return {
        "airports": G.number_of_nodes(),
        "routes": G.number_of_edges(),
        "departure_airports": departing,
        "top_hubs": [(str(airport), int(degree)) for airport, degree in hubs],
    }
