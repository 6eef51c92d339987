from .estimation import EstimateResponse, ErrorResponse
from .directions import DirectionsResponse
from .insights import Insight, BaselineComparison
from .reports import VideoReportReceipt, ServiceStatus

__all__ = [
    "EstimateResponse",
    "ErrorResponse",
    "DirectionsResponse",
    "Insight",
    "BaselineComparison",
    "VideoReportReceipt",
    "ServiceStatus",
]
