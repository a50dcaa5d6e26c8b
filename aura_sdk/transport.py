"""aiohttp transport for JSON-RPC POST requests."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from .interfaces.transport import TransportResponse

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """POST JSON payloads over HTTPS using a certifi-backed SSL context."""

    def __init__(self, timeout: float = 30) -> None:
        self.timeout = timeout

    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        """Send ``payload`` and return the raw status and body text."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                text = await response.text()
                logger.debug("POST %s -> HTTP %s", payload.get("method"), response.status)
                return TransportResponse(status=response.status, text=text)
