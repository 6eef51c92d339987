from typing import Any, Dict
from pydantic import BaseModel, Field

class DirectionsResponse(BaseModel):
    """
    Travel time and length of the first leg of the first route,
    plus the untouched provider payload.
    """
    T_min: int = Field(..., ge=0, description="Travel time in minutes (in traffic when available)")
    L_km: float = Field(..., ge=0, description="Route length in kilometers")
    raw: Dict[str, Any] = Field(..., description="Provider response as received")
