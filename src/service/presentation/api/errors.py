"""
Maps domain exceptions to HTTP responses shaped as {"error": message}.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ....common.exceptions import (
    TrafficMonitorError, InvalidInputError, ConfigurationError,
    DatasetError, UpstreamError, RouteNotFoundError,
)
from ....common.logging import setup_logger

logger = setup_logger(__name__)

# Checked in order, most specific first
STATUS_BY_ERROR = (
    (InvalidInputError, 400),
    (ConfigurationError, 400),
    (RouteNotFoundError, 404),
    (DatasetError, 500),
    (UpstreamError, 500),
)

def status_for(exc: TrafficMonitorError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500

async def handle_traffic_monitor_error(request: Request, exc: TrafficMonitorError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content={"error": str(exc)})

async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

def register_error_handlers(app: FastAPI):
    app.add_exception_handler(TrafficMonitorError, handle_traffic_monitor_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
