import os
from src.service.application.builder import BackendApplicationBuilder, BackendServices
from src.service.infrastructure import (
    JsonDatasetRepository, HttpForwarder, GoogleDirectionsClient, LocalUploadStorage,
)

def test_builder_constructs_all_services(backend_config):
    services = BackendApplicationBuilder(backend_config).build()

    assert isinstance(services, BackendServices)
    assert isinstance(services.datasets, JsonDatasetRepository)
    assert isinstance(services.proxy, HttpForwarder)
    assert isinstance(services.directions, GoogleDirectionsClient)
    assert isinstance(services.uploads, LocalUploadStorage)
    assert services.config is backend_config

def test_builder_applies_config(backend_config):
    builder = BackendApplicationBuilder(backend_config)
    services = (
        builder
        .build_datasets()
        .build_proxy()
        .build_directions()
        .build_uploads()
        .build()
    )

    assert services.datasets.data_dir == backend_config.storage.data_dir
    assert services.proxy.user_agent == "Mozilla/5.0"
    assert services.directions.api_key == "test-key"
    assert services.directions.base_url == backend_config.directions.base_url
    assert services.uploads.url_prefix == "/uploads"

def test_builder_creates_uploads_dir(backend_config):
    BackendApplicationBuilder(backend_config).build_uploads()
    assert os.path.isdir(backend_config.storage.uploads_dir)
