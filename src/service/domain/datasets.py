"""
Static datasets served by the backend.
"""
from enum import Enum
from typing import Any, Protocol

class DatasetName(str, Enum):
    POI = "poi"
    CCTV = "cctv"
    BASELINE = "baseline"

    @property
    def filename(self) -> str:
        return f"{self.value}.json"

class DatasetRepository(Protocol):
    """
    Read-only access to the static JSON datasets.
    """
    def load(self, name: DatasetName) -> Any:
        """Returns the parsed content of a dataset. Raises DatasetError."""
        ...
