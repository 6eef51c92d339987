"""
Video report intake.
"""
from typing import Optional
from fastapi import FastAPI, File, Form, UploadFile
from ..state import get_services
from .....common.exceptions import InvalidInputError
from .....common.logging import setup_logger
from .....common.schemas import VideoReportReceipt, ErrorResponse

app = FastAPI()
logger = setup_logger(__name__)

@app.post("/api/video-report", response_model=VideoReportReceipt, responses={400: {"model": ErrorResponse}})
def upload_video_report(
    file: Optional[UploadFile] = File(None),
    region: Optional[str] = Form(None),
    poi_id: Optional[str] = Form(None),
):
    """
    Stores an uploaded video and returns the URL it is served from.
    Runs in the threadpool since writing the file blocks.
    """
    if file is None or not file.filename:
        raise InvalidInputError("No file uploaded")

    stored = get_services().uploads.save(file.file, file.filename)
    logger.info(f"Video report received: region={region} poi_id={poi_id} url={stored.url}")

    return VideoReportReceipt(
        ok=True,
        region=region or None,
        poi_id=poi_id or None,
        url=stored.url,
    )
