import json
import os
import httpx
import pytest
from fastapi.testclient import TestClient
from src.common.config.manager import ConfigManager
from src.service.application.builder import BackendApplicationBuilder
from src.service.presentation.api import create_app
from tests.sample_data import POI, CCTV, BASELINE, DIRECTIONS_OK

ENV_VARS = ("PORT", "ALLOWED_ORIGINS", "GOOGLE_MAPS_API_KEY")

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for var in ENV_VARS:
        os.environ.pop(var, None)

@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    (path / "poi.json").write_text(json.dumps(POI), encoding="utf-8")
    (path / "cctv.json").write_text(json.dumps(CCTV), encoding="utf-8")
    (path / "baseline.json").write_text(json.dumps(BASELINE), encoding="utf-8")
    return path

@pytest.fixture
def config_overrides(tmp_path, data_dir):
    return {
        "storage": {"data_dir": str(data_dir), "uploads_dir": str(tmp_path / "uploads")},
        "directions": {"api_key": "test-key"},
    }

@pytest.fixture
def backend_config(tmp_path, config_overrides):
    manager = ConfigManager(env_file=tmp_path / "missing.env")
    return manager.from_dictconfig(config_overrides)

@pytest.fixture
def upstream():
    """
    Fake third-party services. Tests can replace directions_payload or
    inspect the recorded requests.
    """
    state = {"requests": [], "directions_payload": DIRECTIONS_OK}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        if request.url.host == "maps.googleapis.com":
            return httpx.Response(200, json=state["directions_payload"])
        if request.url.path == "/ok":
            return httpx.Response(200, text="hello", headers={"content-type": "text/plain; charset=utf-8"})
        if request.url.path == "/missing":
            return httpx.Response(404, content=b"not here")
        if request.url.path == "/garbage":
            return httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})
        raise httpx.ConnectError("connection refused", request=request)

    state["transport"] = httpx.MockTransport(handler)
    return state

@pytest.fixture
def services(backend_config, upstream):
    return BackendApplicationBuilder(backend_config, transport=upstream["transport"]).build()

@pytest.fixture
def client(backend_config, services):
    return TestClient(create_app(backend_config, services))
