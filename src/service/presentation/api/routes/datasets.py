"""
Static dataset endpoints. Files are reread on every request.
"""
from fastapi import FastAPI
from ..state import get_services
from ....domain.datasets import DatasetName

app = FastAPI()

@app.get("/api/poi")
def list_poi():
    """Points of interest."""
    return get_services().datasets.load(DatasetName.POI)

@app.get("/api/cctv")
def list_cctv():
    """CCTV feed list."""
    return get_services().datasets.load(DatasetName.CCTV)

@app.get("/api/baseline")
def get_baseline():
    """Regional baseline table."""
    return get_services().datasets.load(DatasetName.BASELINE)
