"""MCP models: JSON-RPC 2.0 envelope, handshake, tools and tool calls.

Implements the message shapes of the Model Context Protocol subset this
server speaks: ``initialize``, ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "git-summarizer"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    ``id`` is kept with its original JSON type so the response can echo it
    verbatim.  A missing or ``null`` id marks a notification.
    """

    jsonrpc: str = "2.0"
    method: str
    id: int | float | str | None = None
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: str = "2.0"
    id: int | float | str
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the envelope with exactly one of ``result`` or ``error``."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result if self.result is not None else {}
        return data


# ---------------------------------------------------------------------------
# Handshake
# ---------------------------------------------------------------------------


def _string_items(value: list[Any]) -> list[str]:
    return [item for item in value if isinstance(item, str)]


class InitializeOptions(BaseModel):
    """Session overrides a client may pass under ``initialize`` ``params.options``.

    Values of the wrong type are ignored rather than rejected, so a sloppy
    client still completes the handshake with the defaults in place.
    """

    model_config = ConfigDict(populate_by_name=True)

    commit_format: list[str] | None = Field(default=None, alias="commitFormat")
    extra_constraints: list[str] | None = Field(default=None, alias="extraConstraints")

    @field_validator("commit_format", mode="before")
    @classmethod
    def _coerce_commit_format(cls, value: Any) -> list[str] | None:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return _string_items(value)
        return None

    @field_validator("extra_constraints", mode="before")
    @classmethod
    def _coerce_extra_constraints(cls, value: Any) -> list[str] | None:
        if isinstance(value, list):
            return _string_items(value)
        return None


class InitializeParams(BaseModel):
    """``initialize`` params; everything but ``options`` is accepted and ignored."""

    options: InitializeOptions | None = None

    @field_validator("options", mode="before")
    @classmethod
    def _ignore_non_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class ServerInfo(BaseModel):
    name: str = SERVER_NAME
    version: str


class InitializeResult(BaseModel):
    """The fixed handshake payload returned by ``initialize``."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(
        default_factory=lambda: {"tools": {"listChanged": True}},
    )
    server_info: ServerInfo = Field(alias="serverInfo")


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class ToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """A plain-text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Outcome of one ``tools/call``.

    Failures are reported in-band: the JSON-RPC response is still a success
    and ``isError`` tells the caller the tool itself failed.
    """

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = False

    @property
    def success(self) -> bool:
        return not self.is_error

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> ToolCallResult:
        return cls(content=[TextContent(text=text)], is_error=True)

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": [block.model_dump() for block in self.content]}
        if self.is_error:
            data["isError"] = True
        return data


# ---------------------------------------------------------------------------
# tools/call: one variant per tool, discriminated by ``name``
# ---------------------------------------------------------------------------


class NoArgs(BaseModel):
    """Arguments of tools that take none; anything supplied is ignored."""


class StageFilesArgs(BaseModel):
    paths: list[str] = Field(default_factory=list)

    @field_validator("paths", mode="before")
    @classmethod
    def _coerce_paths(cls, value: Any) -> list[str]:
        if isinstance(value, list):
            return _string_items(value)
        return []


class ExecuteCommitArgs(BaseModel):
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class ListUnstagedCall(BaseModel):
    name: Literal["list_unstaged"]
    arguments: NoArgs = Field(default_factory=NoArgs)


class StageFilesCall(BaseModel):
    name: Literal["stage_files"]
    arguments: StageFilesArgs = Field(default_factory=StageFilesArgs)


class GetStagedDiffCall(BaseModel):
    name: Literal["get_staged_diff"]
    arguments: NoArgs = Field(default_factory=NoArgs)


class ExecuteCommitCall(BaseModel):
    name: Literal["execute_commit"]
    arguments: ExecuteCommitArgs = Field(default_factory=ExecuteCommitArgs)


ToolCall = Annotated[
    ListUnstagedCall | StageFilesCall | GetStagedDiffCall | ExecuteCommitCall,
    Field(discriminator="name"),
]

TOOL_CALL_ADAPTER: TypeAdapter[ToolCall] = TypeAdapter(ToolCall)

TOOL_NAMES: tuple[str, ...] = ("list_unstaged", "stage_files", "get_staged_diff", "execute_commit")


class CallToolParams(BaseModel):
    """Raw ``tools/call`` params before they are narrowed to a :data:`ToolCall`."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _require_string(cls, value: Any) -> Any:
        if not isinstance(value, str):
            msg = "tool name must be a string"
            raise ValueError(msg)
        return value

    @field_validator("arguments", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    def to_tool_call(self) -> ToolCall | None:
        """Narrow to the typed variant, or ``None`` for an unknown tool name."""
        if self.name not in TOOL_NAMES:
            return None
        return TOOL_CALL_ADAPTER.validate_python({"name": self.name, "arguments": self.arguments})
