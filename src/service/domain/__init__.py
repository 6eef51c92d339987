from .datasets import DatasetName, DatasetRepository
from .insights import build_insights

__all__ = [
    "DatasetName",
    "DatasetRepository",
    "build_insights",
]
