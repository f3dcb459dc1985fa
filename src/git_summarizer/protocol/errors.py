"""JSON-RPC protocol errors.

Each error carries the JSON-RPC ``code`` it maps to; the dispatcher turns
them into error objects on the response envelope.  Tool-domain failures
never use these classes, they travel in-band as ``isError`` results.
"""

from __future__ import annotations

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-level failures."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str = "Internal error", detail: str = "") -> None:
        self.message = message
        self.detail = detail
        super().__init__(message + (f": {detail}" if detail else ""))


class MethodNotFoundError(ProtocolError):
    """The request named a method this server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__("Method not found")


class InvalidParamsError(ProtocolError):
    """The request's ``params`` do not fit the method's shape."""

    code = INVALID_PARAMS

    def __init__(self, detail: str = "") -> None:
        super().__init__("Invalid params", detail)
