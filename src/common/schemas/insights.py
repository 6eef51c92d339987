from typing import Literal, Optional
from pydantic import BaseModel, Field

class BaselineComparison(BaseModel):
    region: str = Field(..., description="Region code")
    now_mbps: float = Field(..., ge=0, description="Current average throughput")
    baseline_mbps: float = Field(..., description="Regional baseline throughput")

class Insight(BaseModel):
    """
    A single entry of the insights feed.
    """
    type: Literal['info', 'alert', 'warning'] = Field(..., description="Severity of the insight")
    message: str = Field(..., description="Text shown to operators")
    time: str = Field(..., description="Relative time label")
    compare: Optional[BaselineComparison] = Field(None, description="Baseline comparison for alarms")
