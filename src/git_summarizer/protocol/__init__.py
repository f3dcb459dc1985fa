"""Protocol layer: JSON-RPC envelope, MCP payloads and line transport."""

from git_summarizer.protocol.errors import (
    InvalidParamsError,
    MethodNotFoundError,
    ProtocolError,
)
from git_summarizer.protocol.models import (
    CallToolParams,
    InitializeOptions,
    InitializeParams,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    TextContent,
    ToolCall,
    ToolCallResult,
    ToolDef,
)
from git_summarizer.protocol.transport import LineTransport, StdioTransport

__all__ = [
    "CallToolParams",
    "InitializeOptions",
    "InitializeParams",
    "InitializeResult",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineTransport",
    "MethodNotFoundError",
    "ProtocolError",
    "StdioTransport",
    "TextContent",
    "ToolCall",
    "ToolCallResult",
    "ToolDef",
]
