"""
Flight routing endpoints
========================

GET  /api/cities   -- all cities, sorted
POST /api/optimize -- shortest route (``dijkstra`` | ``astar``) or a
                      side-by-side comparison (``compare``)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from flight_optimizer.api.dependencies import get_optimizer
from flight_optimizer.api.middleware import limiter
from flight_optimizer.api.schemas import (
    CitiesResponse,
    ComparisonResponse,
    ErrorResponse,
    OptimizeRequest,
    SearchResultResponse,
)
from flight_optimizer.config import settings
from flight_optimizer.domain.entities import ComparisonResult, RequestError
from flight_optimizer.domain.enums import RequestErrorCode
from flight_optimizer.domain.optimizer import RouteOptimizer

router = APIRouter(tags=["flights"])


@router.get(
    "/cities",
    response_model=CitiesResponse,
    summary="List all cities in the network",
)
@limiter.limit(settings.rate_limit)
async def list_cities(
    request: Request,
    optimizer: RouteOptimizer = Depends(get_optimizer),
):
    return CitiesResponse(cities=optimizer.list_locations())


@router.post(
    "/optimize",
    summary="Find the shortest route or compare both algorithms",
    responses={
        200: {"description": "Search result, comparison, or invalid-algorithm error."},
        400: {"model": ErrorResponse, "description": "Malformed request."},
    },
)
@limiter.limit(settings.rate_limit)
async def optimize(
    request: Request,
    body: OptimizeRequest,
    optimizer: RouteOptimizer = Depends(get_optimizer),
):
    result = optimizer.optimize(body.origin, body.destination, body.algorithm)

    if isinstance(result, RequestError):
        error = ErrorResponse.from_error(result)
        if result.code is RequestErrorCode.MALFORMED_REQUEST:
            return JSONResponse(status_code=400, content=error.model_dump())
        return error
    if isinstance(result, ComparisonResult):
        return ComparisonResponse.from_result(result)
    return SearchResultResponse.from_result(result)
