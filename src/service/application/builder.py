from dataclasses import dataclass
from typing import Optional

import httpx

from ..infrastructure.repositories import JsonDatasetRepository
from ..infrastructure.forwarder import HttpForwarder
from ..infrastructure.directions import GoogleDirectionsClient
from ..infrastructure.storage import LocalUploadStorage
from ...common.config.models import BackendConfig
from ...common.logging import setup_logger

@dataclass
class BackendServices:
    """
    Collaborators shared by the API routes. Built once at startup.
    """
    config: BackendConfig
    datasets: JsonDatasetRepository
    proxy: HttpForwarder
    directions: GoogleDirectionsClient
    uploads: LocalUploadStorage

class BackendApplicationBuilder:
    """
    Builder pattern for constructing the backend services.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: BackendConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.transport = transport
        self.logger = setup_logger(__name__, config.log_level)

        # Components
        self.datasets: Optional[JsonDatasetRepository] = None
        self.proxy: Optional[HttpForwarder] = None
        self.directions: Optional[GoogleDirectionsClient] = None
        self.uploads: Optional[LocalUploadStorage] = None

    def build_datasets(self) -> 'BackendApplicationBuilder':
        self.logger.info(f"Serving datasets from {self.config.storage.data_dir}")
        self.datasets = JsonDatasetRepository(self.config.storage.data_dir)
        return self

    def build_proxy(self) -> 'BackendApplicationBuilder':
        self.proxy = HttpForwarder(
            user_agent=self.config.proxy.user_agent,
            timeout_seconds=self.config.proxy.timeout_seconds,
            transport=self.transport,
        )
        return self

    def build_directions(self) -> 'BackendApplicationBuilder':
        cfg = self.config.directions
        if not cfg.api_key:
            self.logger.warning("GOOGLE_MAPS_API_KEY not set, /api/directions will reject requests")
        forwarder = HttpForwarder(timeout_seconds=cfg.timeout_seconds, transport=self.transport)
        self.directions = GoogleDirectionsClient(forwarder, api_key=cfg.api_key, base_url=cfg.base_url)
        return self

    def build_uploads(self) -> 'BackendApplicationBuilder':
        storage_cfg = self.config.storage
        self.logger.info(f"Storing uploads in {storage_cfg.uploads_dir}")
        self.uploads = LocalUploadStorage(storage_cfg.uploads_dir, url_prefix=storage_cfg.uploads_url_prefix)
        return self

    def build(self) -> BackendServices:
        if not self.datasets:
            self.build_datasets()
        if not self.proxy:
            self.build_proxy()
        if not self.directions:
            self.build_directions()
        if not self.uploads:
            self.build_uploads()

        return BackendServices(
            config=self.config,
            datasets=self.datasets,
            proxy=self.proxy,
            directions=self.directions,
            uploads=self.uploads,
        )
