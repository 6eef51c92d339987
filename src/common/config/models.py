from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8091

@dataclass
class CorsConfig:
    # Empty list allows every origin
    allowed_origins: List[str] = field(default_factory=list)

@dataclass
class StorageConfig:
    data_dir: str = "data"
    uploads_dir: str = "uploads"
    uploads_url_prefix: str = "/uploads"

@dataclass
class ProxyConfig:
    user_agent: str = "Mozilla/5.0"
    timeout_seconds: float = 30.0

@dataclass
class DirectionsConfig:
    api_key: Optional[str] = None
    base_url: str = "https://maps.googleapis.com/maps/api/directions/json"
    timeout_seconds: float = 15.0

@dataclass
class BackendConfig:
    service_name: str = "Traffic Monitor Backend"
    version: str = "1.0.0"
    log_level: str = "INFO"
    max_json_body_mb: float = 5.0
    server: ServerConfig = field(default_factory=ServerConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    directions: DirectionsConfig = field(default_factory=DirectionsConfig)

    @property
    def max_json_body_bytes(self) -> int:
        return int(self.max_json_body_mb * 1024 * 1024)
