from fastapi import FastAPI
from ..state import get_services
from .....common.schemas import ServiceStatus

app = FastAPI()

@app.get("/api/status", response_model=ServiceStatus)
def status():
    config = get_services().config
    return ServiceStatus(status="running", service=config.service_name, version=config.version)
