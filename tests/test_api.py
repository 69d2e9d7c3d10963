"""
Integration tests for the REST API endpoints.

The app is built around the session-wide optimizer (bundled network) and
driven through ``httpx.AsyncClient`` over ``ASGITransport``.
"""

import pytest
from httpx import AsyncClient


async def _optimize(client: AsyncClient, origin, destination, algorithm):
    return await client.post(
        "/api/optimize",
        json={"origin": origin, "destination": destination, "algorithm": algorithm},
    )


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_cities_sorted(client: AsyncClient):
    resp = await client.get("/api/cities")
    assert resp.status_code == 200
    cities = resp.json()["cities"]
    assert len(cities) == 14
    assert cities == sorted(cities)


@pytest.mark.asyncio
async def test_dijkstra_new_york_london(client: AsyncClient):
    resp = await _optimize(client, "New York", "London", "dijkstra")
    assert resp.status_code == 200
    data = resp.json()
    assert data["algorithm"] == "Dijkstra"
    assert data["path"] == ["New York", "London"]
    assert data["distance"] == 5567
    assert data["time"] == "6.5 hours"
    assert data["cost"] == "$668"
    assert data["nodesExplored"] == 4
    assert data["executionTime"].endswith(" ms")
    assert data["success"] is True


@pytest.mark.asyncio
async def test_astar_new_york_sydney(client: AsyncClient):
    resp = await _optimize(client, "New York", "Sydney", "astar")
    data = resp.json()
    assert data["algorithm"] == "A*"
    assert data["success"] is True
    assert data["path"] == ["New York", "Los Angeles", "Sydney"]
    assert data["distance"] == 15996
    assert data["time"] == "18.8 hours"
    assert data["cost"] == "$1920"


@pytest.mark.asyncio
async def test_unknown_city_dijkstra(client: AsyncClient):
    resp = await _optimize(client, "Nowhere", "Tokyo", "dijkstra")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is False
    assert data["path"] == []
    assert data["distance"] is None


@pytest.mark.asyncio
async def test_unknown_city_astar_reports_zero(client: AsyncClient):
    data = (await _optimize(client, "Nowhere", "Tokyo", "astar")).json()
    assert data["success"] is False
    assert data["distance"] == 0
    assert data["time"] == "0.0 hours"
    assert data["cost"] == "$0"


@pytest.mark.asyncio
async def test_compare(client: AsyncClient):
    resp = await _optimize(client, "New York", "London", "compare")
    assert resp.status_code == 200
    data = resp.json()
    assert data["dijkstra"]["algorithm"] == "Dijkstra"
    assert data["aStar"]["algorithm"] == "A*"

    comparison = data["comparison"]
    assert comparison["bothSuccessful"] is True
    assert comparison["distanceDifference"] == 0
    assert comparison["timeDifference"] == "0.0 hours"
    assert comparison["costDifference"] == "$0"
    assert comparison["nodesExploredDifference"] == 2
    assert comparison["executionTimeDifference"].endswith(" ms")
    assert comparison["efficiency"]["nodesExploredRatio"] == "50%"
    assert set(comparison["characteristics"]) == {"Dijkstra", "A*"}


@pytest.mark.asyncio
async def test_compare_with_unknown_city_omits_differences(client: AsyncClient):
    data = (await _optimize(client, "Nowhere", "Tokyo", "compare")).json()
    assert data["comparison"] == {"bothSuccessful": False}
    assert data["dijkstra"]["success"] is False
    assert data["aStar"]["success"] is False


@pytest.mark.asyncio
async def test_invalid_algorithm(client: AsyncClient):
    resp = await _optimize(client, "New York", "London", "bfs")
    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "Invalid algorithm"}


@pytest.mark.asyncio
async def test_missing_field_is_bad_request(client: AsyncClient):
    resp = await client.post(
        "/api/optimize", json={"origin": "New York", "algorithm": "astar"}
    )
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert "destination" in data["error"]


@pytest.mark.asyncio
async def test_empty_origin_is_bad_request(client: AsyncClient):
    resp = await _optimize(client, "", "London", "astar")
    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_invalid_json_is_bad_request(client: AsyncClient):
    resp = await client.post(
        "/api/optimize",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_repeated_queries_are_identical(client: AsyncClient):
    first = (await _optimize(client, "Rome", "Seoul", "astar")).json()
    second = (await _optimize(client, "Rome", "Seoul", "astar")).json()
    for key in ("path", "distance", "time", "cost", "nodesExplored"):
        assert first[key] == second[key]


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient):
    resp = await client.options(
        "/api/optimize",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
