"""
Traffic flow estimation by inverting the BPR link-performance function.
"""
from .domain import (
    EstimationRequest,
    EstimationResult,
    estimate,
    parse_estimation_request,
    FREE_FLOW_NOTE,
)

__all__ = [
    "EstimationRequest",
    "EstimationResult",
    "estimate",
    "parse_estimation_request",
    "FREE_FLOW_NOTE",
]
