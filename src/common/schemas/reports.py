from typing import Optional
from pydantic import BaseModel, Field

class VideoReportReceipt(BaseModel):
    """
    Acknowledgement returned after a video report is stored.
    """
    ok: bool = True
    region: Optional[str] = Field(None, description="Region the report belongs to")
    poi_id: Optional[str] = Field(None, description="Point of interest the report belongs to")
    url: str = Field(..., description="Path where the stored file can be retrieved")

class ServiceStatus(BaseModel):
    status: str = "running"
    service: str
    version: str
