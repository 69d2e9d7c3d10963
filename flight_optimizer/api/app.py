"""
FastAPI application factory.

* Builds the route optimizer once from the configured network dataset.
* Registers the flight and health routes under ``/api``.
* Applies CORS and rate-limiting middleware.
* Reports request validation failures as ``400 {"success": false, ...}``.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flight_optimizer.api.middleware import limiter
from flight_optimizer.api.routes import flights, health
from flight_optimizer.api.schemas import ErrorResponse
from flight_optimizer.config import settings
from flight_optimizer.domain.metrics import MetricCalculator
from flight_optimizer.domain.optimizer import RouteOptimizer
from flight_optimizer.infrastructure.loader import load_network

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Flight Route Optimizer ready (%d cities)",
        len(app.state.optimizer.list_locations()),
    )
    yield
    logger.info("Flight Route Optimizer stopped")


def build_optimizer() -> RouteOptimizer:
    """Build the optimizer from the configured dataset and constants."""
    return RouteOptimizer(
        load_network(settings.network_file),
        MetricCalculator(settings.cruise_speed_kmh, settings.cost_per_km),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', '')}"
        for e in errors
    ) or "Malformed request"
    logger.warning("Malformed request to %s: %s", request.url.path, message)
    return JSONResponse(
        status_code=400, content=ErrorResponse(error=message).model_dump()
    )


def create_app(optimizer: Optional[RouteOptimizer] = None) -> FastAPI:
    app = FastAPI(
        title="Flight Route Optimizer API",
        description=(
            "Finds the shortest flight route between cities with Dijkstra "
            "or A* (great-circle heuristic) and compares the two "
            "algorithms on the same query."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.optimizer = optimizer or build_optimizer()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Routers
    app.include_router(flights.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app
