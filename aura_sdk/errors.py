"""Error types returned inside ``Err`` results.

Two families exist:

* :class:`AuraError` -- the service ran the method and answered with a
  JSON-RPC error envelope (bad id, rate limit, bad parameter, ...).
* :class:`TransportError` -- no usable answer was produced: non-2xx status,
  network failure or an undecodable body.
"""
from __future__ import annotations

from typing import Any

ERROR_CODES: dict[str, int] = {
    "INVALID_PUBKEY": -32000,
    "RATE_LIMIT_EXCEEDED": -32001,
    "INVALID_PARAMETER": -32602,
    "METHOD_NOT_FOUND": -32601,
    "INTERNAL_ERROR": -32603,
}

# Presentation only, never used for branching.
ERROR_MESSAGES: dict[int, str] = {
    ERROR_CODES["INVALID_PUBKEY"]: "Invalid public key provided",
    ERROR_CODES["RATE_LIMIT_EXCEEDED"]: "Rate limit exceeded",
    ERROR_CODES["INVALID_PARAMETER"]: "Invalid parameter provided",
    ERROR_CODES["METHOD_NOT_FOUND"]: "Method not found",
    ERROR_CODES["INTERNAL_ERROR"]: "Internal server error",
}


def is_aura_error_response(body: Any) -> bool:
    """Return True iff ``body`` has the JSON-RPC 2.0 error envelope shape."""
    if not isinstance(body, dict):
        return False
    if body.get("jsonrpc") != "2.0":
        return False
    error = body.get("error")
    if not isinstance(error, dict):
        return False
    code = error.get("code")
    # bool is an int subclass but never a valid code
    if not isinstance(code, int) or isinstance(code, bool):
        return False
    return isinstance(error.get("message"), str)


class AuraError(Exception):
    """Business error reported by the Aura service."""

    def __init__(
        self,
        code: int,
        message: str,
        id: str | int | None = None,
        jsonrpc: str = "2.0",
    ) -> None:
        super().__init__(message)
        self._code = code
        self._message = message
        self._id = id
        self._jsonrpc = jsonrpc

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def id(self) -> str | int | None:
        return self._id

    @property
    def jsonrpc(self) -> str:
        return self._jsonrpc

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> AuraError:
        """Build from a body that passed :func:`is_aura_error_response`."""
        error = body["error"]
        return cls(
            code=error["code"],
            message=error["message"],
            id=body.get("id"),
            jsonrpc=body["jsonrpc"],
        )

    @property
    def description(self) -> str | None:
        """Human text for a known code, None for anything else."""
        return ERROR_MESSAGES.get(self.code)

    @property
    def is_rate_limited(self) -> bool:
        return self.code == ERROR_CODES["RATE_LIMIT_EXCEEDED"]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuraError):
            return NotImplemented
        return (self.code, self.message, self.id, self.jsonrpc) == (
            other.code,
            other.message,
            other.id,
            other.jsonrpc,
        )

    def __hash__(self) -> int:
        return hash((self.code, self.message, self.id, self.jsonrpc))

    def __repr__(self) -> str:
        return f"AuraError(code={self.code}, message={self.message!r}, id={self.id!r})"


class TransportError(Exception):
    """The request did not produce a decodable JSON-RPC answer."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._status = status
        self._cause = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def __repr__(self) -> str:
        return f"TransportError(message={self.message!r}, status={self.status!r})"
