from .repositories import JsonDatasetRepository
from .forwarder import HttpForwarder, ForwardedResponse
from .directions import GoogleDirectionsClient
from .storage import LocalUploadStorage, StoredUpload

__all__ = [
    "JsonDatasetRepository",
    "HttpForwarder",
    "ForwardedResponse",
    "GoogleDirectionsClient",
    "LocalUploadStorage",
    "StoredUpload",
]
