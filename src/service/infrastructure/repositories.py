import json
import logging
import os
from typing import Any

from ..domain.datasets import DatasetName, DatasetRepository
from ...common.exceptions import DatasetError
from ...common.logging import setup_logger, log_execution_time

class JsonDatasetRepository(DatasetRepository):
    """
    Reads datasets from <data_dir>/<name>.json.
    Files are reread on every call so edits show up without a restart.
    """
    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self.logger = setup_logger(__name__)

    def path_for(self, name: DatasetName) -> str:
        return os.path.join(self.data_dir, name.filename)

    @log_execution_time(logging.getLogger(__name__))
    def load(self, name: DatasetName) -> Any:
        path = self.path_for(name)
        try:
            with open(path, mode='r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DatasetError(f"Dataset not found: {name.filename}") from e
        except json.JSONDecodeError as e:
            raise DatasetError(f"Dataset {name.filename} is not valid JSON: {e}") from e
        except OSError as e:
            raise DatasetError(f"Could not read dataset {name.filename}: {e}") from e
