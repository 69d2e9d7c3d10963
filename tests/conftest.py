"""
Shared test fixtures.

Two networks are used:

* the bundled 14-city flight network (``optimizer``), and
* a tiny hand-built graph (``tiny_graph``) whose frontier behaviour is
  easy to trace by hand::

      A --1--> B --1--> C --10--> D        E --1--> A
      A --------5------> C

  ``A -> D`` pops a stale ``C`` entry; ``E`` has no incoming legs.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from flight_optimizer.domain.graph import FlightGraph
from flight_optimizer.domain.optimizer import RouteOptimizer
from flight_optimizer.infrastructure.loader import load_network

TINY_ROUTES = {
    "A": {"B": 1, "C": 5},
    "B": {"C": 1},
    "C": {"D": 10},
    "D": {},
    "E": {"A": 1},
}


@pytest.fixture(scope="session")
def network():
    return load_network()


@pytest.fixture(scope="session")
def optimizer(network) -> RouteOptimizer:
    return RouteOptimizer(network)


@pytest.fixture
def tiny_graph() -> FlightGraph:
    return FlightGraph(TINY_ROUTES)


@pytest_asyncio.fixture
async def client(optimizer) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the bundled network."""
    from flight_optimizer.api.app import create_app

    app = create_app(optimizer)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
