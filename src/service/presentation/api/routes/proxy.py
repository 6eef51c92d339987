"""
Generic URL proxy, lets the dashboard fetch resources that lack CORS headers.
"""
from typing import Optional
from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse, Response
from ..state import get_services
from .....common.exceptions import UpstreamError

app = FastAPI()

@app.get("/api/proxy")
async def proxy(url: Optional[str] = Query(None, description="Absolute URL to fetch")):
    """
    Fetches url and relays status, content-type and body.

    Example: /api/proxy?url=https://example.com/feed.m3u8
    """
    if not url:
        return PlainTextResponse("Missing url", status_code=400)

    try:
        forwarded = await get_services().proxy.fetch(url)
    except UpstreamError as e:
        return PlainTextResponse(f"Proxy error: {e}", status_code=500)

    headers = {"content-type": forwarded.content_type} if forwarded.content_type else None
    return Response(content=forwarded.content, status_code=forwarded.status_code, headers=headers)
