from typing import Optional
from fastapi import FastAPI, Query
from ..state import get_services
from .....common.schemas import DirectionsResponse, ErrorResponse

app = FastAPI()

@app.get(
    "/api/directions",
    response_model=DirectionsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_directions(
    origin: Optional[str] = Query(None, description="Address or lat,lng"),
    destination: Optional[str] = Query(None, description="Address or lat,lng"),
):
    """
    Live travel time and distance between two places.
    T_min and L_km can be fed to /api/traffic/estimate.
    """
    return await get_services().directions.lookup(origin, destination)
