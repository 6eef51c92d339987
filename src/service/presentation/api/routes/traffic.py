"""
BPR estimator endpoint.
"""
import json
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from ..state import get_services
from .....common.exceptions import InvalidInputError
from .....common.logging import setup_logger
from .....common.schemas import EstimateResponse, ErrorResponse
from .....estimation.domain import estimate, parse_estimation_request

app = FastAPI()
logger = setup_logger(__name__)

TOO_LARGE = {"error": "Request body too large."}

@app.post(
    "/api/traffic/estimate",
    response_model=EstimateResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def estimate_traffic(request: Request):
    """
    Estimates flow and vehicle count on a link.

    Body example:
    {
        "T_min": 60, "Tff_min": 30, "L_km": 5,
        "qpc": 1000, "alpha": 0.15, "beta": 4
    }
    """
    limit = get_services().config.max_json_body_bytes
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        return JSONResponse(status_code=413, content=TOO_LARGE)

    body = await request.body()
    if len(body) > limit:
        return JSONResponse(status_code=413, content=TOO_LARGE)

    try:
        payload = json.loads(body) if body.strip() else {}
    except ValueError as e:
        raise InvalidInputError("Malformed JSON body.") from e

    try:
        result = estimate(parse_estimation_request(payload))
    except InvalidInputError:
        raise
    except Exception as e:
        logger.error(f"Estimation failed: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(e)})

    return EstimateResponse.from_result(result)
