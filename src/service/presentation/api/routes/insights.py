from typing import List
from fastapi import FastAPI
from ..state import get_services
from ....domain.datasets import DatasetName
from ....domain.insights import build_insights
from .....common.schemas import Insight

app = FastAPI()

@app.get("/api/insights", response_model=List[Insight], response_model_exclude_none=True)
def list_insights():
    """Demo insights feed, compared against the current baseline dataset."""
    baseline = get_services().datasets.load(DatasetName.BASELINE)
    return build_insights(baseline)
