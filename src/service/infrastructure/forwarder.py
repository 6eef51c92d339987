"""
Generic outbound HTTP capability shared by the URL proxy and the
directions passthrough.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ...common.exceptions import UpstreamError
from ...common.logging import setup_logger

@dataclass
class ForwardedResponse:
    status_code: int
    content_type: Optional[str]
    content: bytes

class HttpForwarder:
    """
    Forwards GET requests to third-party URLs.
    A new AsyncClient is opened per call; no connection state is shared
    between requests.
    """
    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds
        # Injected in tests (httpx.MockTransport)
        self.transport = transport
        self.logger = setup_logger(__name__)

    def _client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self.user_agent} if self.user_agent else None
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            headers=headers,
            follow_redirects=True,
            transport=self.transport,
        )

    async def fetch(self, url: str, params: Optional[Dict[str, str]] = None) -> ForwardedResponse:
        """
        Fetches url and returns status, content type and body untouched.
        Non-2xx upstream statuses are returned, not raised.
        """
        try:
            async with self._client() as client:
                response = await client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"Forwarding to {url} failed: {e}")
            raise UpstreamError(str(e) or e.__class__.__name__) from e

        return ForwardedResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
            content=response.content,
        )

    async def fetch_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        forwarded = await self.fetch(url, params=params)
        try:
            return json.loads(forwarded.content)
        except ValueError as e:
            raise UpstreamError(f"Upstream returned invalid JSON: {e}") from e
