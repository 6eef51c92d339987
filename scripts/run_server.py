import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.logging import setup_logger
from src.service.presentation.api import create_app

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    config = ConfigManager().from_dictconfig(cfg.backend)
    logger = setup_logger("traffic_monitor", config.log_level)
    logger.info("Configuration loaded.")

    app = create_app(config)

    logger.info(f"Starting server at http://{config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)

if __name__ == "__main__":
    main()
