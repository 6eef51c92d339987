"""
Domain model for the BPR inversion estimator.

The BPR link-performance function relates travel time to flow:

    T = Tff * (1 + alpha * (q / qpc) ** beta)

Solving for q gives the flow that explains an observed travel time:

    q = qpc * ((T / Tff - 1) / alpha) ** (1 / beta)
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Optional

from ..common.exceptions import InvalidInputError

FREE_FLOW_NOTE = "Free flow or better than free flow."
INVALID_FIELDS_MESSAGE = "All fields must be positive numbers."
INVALID_BASE_MESSAGE = "Invalid base value, check parameters."

# Wire name -> attribute name, in the order fields are validated
WIRE_FIELDS = {
    "T_min": "observed_travel_time_min",
    "Tff_min": "free_flow_travel_time_min",
    "L_km": "link_length_km",
    "qpc": "capacity_flow_veh_per_hour",
    "alpha": "alpha",
    "beta": "beta",
}

@dataclass(frozen=True)
class EstimationRequest:
    """
    Inputs for a single estimation. Build it with parse_estimation_request.
    """
    observed_travel_time_min: float
    free_flow_travel_time_min: float
    link_length_km: float  # not used by the formula
    capacity_flow_veh_per_hour: float
    alpha: float
    beta: float

@dataclass(frozen=True)
class EstimationResult:
    flow_veh_per_hour: float
    vehicle_count_veh: int
    travel_time_ratio: Optional[float] = None
    note: Optional[str] = None

    @property
    def is_free_flow(self) -> bool:
        return self.note is not None

def _is_positive_number(value: Any) -> bool:
    # bool is a subclass of int but is not a number on the wire
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        number = float(value)
    except OverflowError:
        # integer literals beyond float range
        return False
    return math.isfinite(number) and number > 0

def parse_estimation_request(payload: Any) -> EstimationRequest:
    """
    Validates a decoded JSON body and builds an EstimationRequest.

    A payload that is not an object is treated as if every field were missing.
    Raises InvalidInputError when any field is missing, non-numeric,
    non-finite or not strictly positive.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(INVALID_FIELDS_MESSAGE)

    values = {}
    for wire_name, attr in WIRE_FIELDS.items():
        value = payload.get(wire_name)
        if not _is_positive_number(value):
            raise InvalidInputError(INVALID_FIELDS_MESSAGE)
        values[attr] = float(value)

    return EstimationRequest(**values)

def estimate(req: EstimationRequest) -> EstimationResult:
    """
    Estimates flow rate and vehicle count on a link from its travel times.

    Travel at or below free-flow time yields a zero result with a note rather
    than an error.
    """
    if req.observed_travel_time_min <= req.free_flow_travel_time_min:
        return EstimationResult(flow_veh_per_hour=0.0, vehicle_count_veh=0, note=FREE_FLOW_NOTE)

    t_h = req.observed_travel_time_min / 60
    tff_h = req.free_flow_travel_time_min / 60
    ratio = t_h / tff_h
    base = (ratio - 1) / req.alpha
    if base < 0:
        raise InvalidInputError(INVALID_BASE_MESSAGE)

    flow = req.capacity_flow_veh_per_hour * math.pow(base, 1 / req.beta)
    vehicles = flow * t_h  # approx. vehicles on the link

    return EstimationResult(
        flow_veh_per_hour=round(flow, 2),
        vehicle_count_veh=int(round(vehicles)),
        travel_time_ratio=round(ratio, 3),
    )
