from typing import Optional
from pydantic import BaseModel, Field

from ...estimation.domain import EstimationResult

class EstimateResponse(BaseModel):
    """
    Wire shape of a traffic estimation result.
    Tratio is only present when flow was computed, note only in free flow.
    """
    q_veh_per_h: float = Field(..., ge=0, description="Estimated flow rate in vehicles per hour")
    N_veh: int = Field(..., ge=0, description="Approximate number of vehicles on the link")
    Tratio: Optional[float] = Field(None, ge=1, description="Observed / free-flow travel time")
    note: Optional[str] = Field(None, description="Explanation for the free-flow case")

    @classmethod
    def from_result(cls, result: EstimationResult) -> "EstimateResponse":
        return cls(
            q_veh_per_h=result.flow_veh_per_hour,
            N_veh=result.vehicle_count_veh,
            Tratio=result.travel_time_ratio,
            note=result.note,
        )

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")
