"""
API package.
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .routes import datasets, proxy, traffic, directions, insights, reports, status
from .errors import register_error_handlers
from .state import init_services
from ...application.builder import BackendApplicationBuilder, BackendServices
from ....common.config.models import BackendConfig
from ....common.logging import setup_logger

def create_app(config: BackendConfig, services: Optional[BackendServices] = None) -> FastAPI:
    """
    Builds the FastAPI application for the given configuration.
    """
    logger = setup_logger(__name__, config.log_level)
    if services is None:
        services = BackendApplicationBuilder(config).build()

    app = FastAPI(title=config.service_name, version=config.version)

    # Empty list allows every origin
    allowed_origins = list(config.cors.allowed_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS allowed origins: {allowed_origins}")

    register_error_handlers(app)

    # Include routers
    app.include_router(datasets.app.router, tags=["datasets"])
    app.include_router(proxy.app.router, tags=["proxy"])
    app.include_router(traffic.app.router, tags=["traffic"])
    app.include_router(directions.app.router, tags=["directions"])
    app.include_router(insights.app.router, tags=["insights"])
    app.include_router(reports.app.router, tags=["reports"])
    app.include_router(status.app.router, tags=["status"])

    app.mount(
        services.uploads.url_prefix,
        StaticFiles(directory=services.uploads.uploads_dir),
        name="uploads",
    )

    init_services(services)
    return app
