"""FastAPI dependency injection helpers."""

from fastapi import Request

from flight_optimizer.domain.optimizer import RouteOptimizer


def get_optimizer(request: Request) -> RouteOptimizer:
    """Return the process-wide optimizer built by the app factory."""
    return request.app.state.optimizer
