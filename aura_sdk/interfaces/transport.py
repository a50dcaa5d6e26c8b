"""Transport protocol — one HTTP POST carrying a JSON body."""
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP outcome; the body is decoded by the client, not the transport."""

    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Abstract interface for posting a JSON payload to a URL.

    Network failures are raised; the client turns them into ``TransportError``.
    """

    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse: ...
