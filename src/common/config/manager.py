import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from .models import BackendConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of the backend configuration."""

    def __init__(self, config_dir: Path = Path("conf"), env_file: Optional[Path] = None):
        self.config_dir = config_dir
        self.env_file = env_file

    def load_backend_config(self, profile: str = "default") -> BackendConfig:
        """Loads conf/backend/<profile>.yaml and applies environment overrides."""
        config_path = self.config_dir / "backend" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        return self.from_dictconfig(OmegaConf.load(config_path))

    def from_dictconfig(self, cfg: Union[DictConfig, Mapping, None] = None) -> BackendConfig:
        """
        Validates a raw config (hydra node, YAML or plain dict) against the
        BackendConfig schema and returns the typed object.
        """
        schema = OmegaConf.structured(BackendConfig)
        try:
            merged = OmegaConf.merge(schema, cfg or {})
            merged = OmegaConf.merge(merged, self._environment_overrides())
            config = OmegaConf.to_object(merged)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid backend configuration: {e}") from e

        if not 0 < config.server.port < 65536:
            raise ConfigurationError(f"Invalid port: {config.server.port}")
        if config.max_json_body_mb <= 0:
            raise ConfigurationError("max_json_body_mb must be positive")
        return config

    def _environment_overrides(self) -> dict:
        # .env never overrides variables already set in the process
        load_dotenv(self.env_file, override=False)

        overrides: dict = {}
        port = os.getenv("PORT")
        if port:
            overrides.setdefault("server", {})["port"] = port
        origins = os.getenv("ALLOWED_ORIGINS")
        if origins is not None:
            overrides["cors"] = {
                "allowed_origins": [o.strip() for o in origins.split(",") if o.strip()]
            }
        api_key = os.getenv("GOOGLE_MAPS_API_KEY")
        if api_key:
            overrides["directions"] = {"api_key": api_key}
        return overrides
