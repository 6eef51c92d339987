"""
Holds the service container shared by the route modules.
"""
from typing import Optional
from fastapi import HTTPException
from ...application.builder import BackendServices

# Singleton
_services: Optional[BackendServices] = None

def init_services(services: BackendServices):
    global _services
    _services = services

def get_services() -> BackendServices:
    if _services is None:
        raise HTTPException(500, "Services not initialized")
    return _services
