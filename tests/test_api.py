import pytest
from fastapi.testclient import TestClient

from airportinfo import api
from airportinfo.config import Settings
from tests.helpers import HEADER, SAMPLE_PAIRS, write_route_file


@pytest.fixture
def client(tmp_path, monkeypatch):
    path = write_route_file(tmp_path, SAMPLE_PAIRS)
    monkeypatch.setattr(api, "route_store", api.RouteStore(Settings(routes_path=path)))
    return TestClient(api.app)


def test_health_does_not_load_routes(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert api.route_store.loaded is False


def test_max_report(client):
    response = client.get("/api/max")

    assert response.status_code == 200
    assert response.json() == {
        "mode": "MAX",
        "report": "MAX FLIGHTS 3 : AAA",
        "max_flights": 3,
        "airports": ["AAA"],
    }
    assert "X-Request-Latency-ms" in response.headers


def test_departures_report(client):
    body = client.get("/api/departures").json()

    assert body["report"] == "AAA flies to BBB CCC\nBBB flies to AAA"
    assert body["departures"] == {"AAA": ["BBB", "CCC"], "BBB": ["AAA"]}


def test_limit_report(client):
    body = client.get("/api/limit", params={"limit": 1}).json()

    assert body["report"] == "AAA - 3\nBBB - 2"
    assert body["airports"] == {"AAA": 3, "BBB": 2}
    assert body["limit"] == 1


def test_limit_requires_integer(client):
    assert client.get("/api/limit", params={"limit": "ten"}).status_code == 422
    assert client.get("/api/limit").status_code == 422


def test_network_summary(client):
    body = client.get("/api/network").json()

    assert body["airports"] == 3
    assert body["routes"] == 3
    assert body["departure_airports"] == 2
    assert body["top_hubs"][0] == ["AAA", 3]


def test_routes_are_loaded_once(client):
    client.get("/api/max")
    first = api.route_store.aggregates
    client.get("/api/departures")

    assert api.route_store.aggregates is first


def test_missing_route_file_returns_503(tmp_path, monkeypatch):
    monkeypatch.setattr(api, "route_store", api.RouteStore(Settings(routes_path=tmp_path / "missing.csv")))
    client = TestClient(api.app)

    response = client.get("/api/max")

    assert response.status_code == 503
    assert "missing.csv" in response.json()["detail"]


def test_malformed_route_file_returns_500(tmp_path, monkeypatch):
    path = tmp_path / "routes.csv"
    path.write_text(f"{HEADER}\nSA,1,AAA\n", encoding="utf-8")
    monkeypatch.setattr(api, "route_store", api.RouteStore(Settings(routes_path=path)))
    client = TestClient(api.app)

    response = client.get("/api/departures")

    assert response.status_code == 500
    assert "Line 2" in response.json()["detail"]


def test_header_only_route_file_max_report(tmp_path, monkeypatch):
    path = write_route_file(tmp_path, [])
    monkeypatch.setattr(api, "route_store", api.RouteStore(Settings(routes_path=path)))
    client = TestClient(api.app)

    body = client.get("/api/max").json()

    assert body["report"] == "MAX FLIGHTS 0"
    assert body["airports"] == []
