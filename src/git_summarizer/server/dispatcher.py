"""Dispatcher: the JSON-RPC message loop of the stdio server.

Reads one line at a time, decodes it, routes it by method name and writes
at most one response line, strictly in arrival order.

Errors travel on two tiers:

1. **Protocol errors** (unknown method, malformed ``tools/call`` params,
   unexpected handler failures) become JSON-RPC error objects.
2. **Tool errors** (anything the repository refuses) become successful
   responses whose result carries ``isError: true``.

Notifications never get a response on either tier, and lines that do not
decode into a request are logged and dropped.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from git_summarizer import __version__
from git_summarizer.protocol.errors import (
    INTERNAL_ERROR,
    InvalidParamsError,
    MethodNotFoundError,
    ProtocolError,
)
from git_summarizer.protocol.models import (
    CallToolParams,
    InitializeParams,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
)
from git_summarizer.session import SessionState
from git_summarizer.tools.executor import ToolExecutor
from git_summarizer.tools.registry import build_catalog
from git_summarizer.utils.telemetry import ATTR_RPC_METHOD, ATTR_RPC_NOTIFICATION, get_tracer

if TYPE_CHECKING:
    from collections.abc import Callable

    from git_summarizer.protocol.transport import LineTransport
    from git_summarizer.vcs.adapter import VCSAdapter

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class Dispatcher:
    """Routes JSON-RPC messages to the ``initialize``, ``tools/*`` handlers.

    Usage::

        dispatcher = Dispatcher(GitAdapter("."), session=SessionState())
        dispatcher.serve(StdioTransport())      # blocks until end of input

    The :class:`SessionState` is shared by reference; only ``initialize``
    writes to it.
    """

    def __init__(self, adapter: VCSAdapter, session: SessionState | None = None) -> None:
        self._session = session if session is not None else SessionState()
        self._executor = ToolExecutor(adapter)
        self._handlers: dict[str, Callable[[Any], dict[str, Any] | None]] = {
            "initialize": self._initialize,
            "notifications/initialized": self._initialized,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    @property
    def session(self) -> SessionState:
        return self._session

    def serve(self, transport: LineTransport) -> None:
        """Run the read-process-write loop until the transport reports end of input."""
        while True:
            line = transport.receive()
            if line is None:
                logger.info("Input closed, shutting down")
                return
            output = self.handle_line(line)
            if output is not None:
                transport.send(output)

    def handle_line(self, line: str) -> str | None:
        """Process one raw line and return the serialized response, if any."""
        if not line.strip():
            return None
        logger.debug("Received: %s", line)

        try:
            data = json.loads(line)
        except ValueError as exc:
            logger.warning("Dropping malformed JSON line: %s", exc)
            return None

        try:
            request = JsonRpcRequest.model_validate(data)
        except ValidationError as exc:
            logger.warning("Dropping invalid JSON-RPC message: %d validation error(s)", exc.error_count())
            return None

        response = self.handle(request)
        if response is None:
            return None

        output = json.dumps(response.to_wire(), ensure_ascii=False)
        logger.debug("Sent: %s", output)
        return output

    def handle(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Dispatch a decoded request; ``None`` means nothing is sent back."""
        with _tracer.start_as_current_span(f"rpc.{request.method}") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            span.set_attribute(ATTR_RPC_NOTIFICATION, request.is_notification)
            try:
                result = self._dispatch(request)
            except ProtocolError as exc:
                if request.id is None:
                    logger.debug("Ignoring notification %s: %s", request.method, exc)
                    return None
                return _error_response(request.id, exc.code, exc.message, exc.detail or None)
            except Exception:
                logger.exception("Unhandled error while handling %s", request.method)
                if request.id is None:
                    return None
                return _error_response(request.id, INTERNAL_ERROR, "Internal error")

        if request.id is None:
            return None
        return JsonRpcResponse(id=request.id, result=result if result is not None else {})

    def _dispatch(self, request: JsonRpcRequest) -> dict[str, Any] | None:
        handler = self._handlers.get(request.method)
        if handler is None:
            raise MethodNotFoundError(request.method)
        return handler(request.params)

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------

    def _initialize(self, params: Any) -> dict[str, Any]:
        parsed = InitializeParams.model_validate(params) if isinstance(params, dict) else InitializeParams()
        if parsed.options is not None:
            self._session.update(parsed.options)
        result = InitializeResult(server_info=ServerInfo(version=__version__))
        return result.model_dump(by_alias=True)

    def _initialized(self, params: Any) -> None:
        logger.info("Client confirmed initialization")

    def _list_tools(self, params: Any) -> dict[str, Any]:
        config = self._session.snapshot()
        return {"tools": [tool.model_dump() for tool in build_catalog(config)]}

    def _call_tool(self, params: Any) -> dict[str, Any]:
        if not isinstance(params, dict):
            raise InvalidParamsError("tools/call params must be an object")
        try:
            call_params = CallToolParams.model_validate(params)
        except ValidationError as exc:
            raise InvalidParamsError("tools/call requires a string 'name'") from exc
        return self._executor.call_tool(call_params).to_wire()


def _error_response(
    request_id: int | float | str,
    code: int,
    message: str,
    data: Any = None,
) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=code, message=message, data=data))
