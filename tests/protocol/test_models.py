"""Tests for JSON-RPC and MCP models."""

import pytest
from pydantic import ValidationError

from git_summarizer.protocol.models import (
    CallToolParams,
    ExecuteCommitCall,
    GetStagedDiffCall,
    InitializeOptions,
    InitializeParams,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ListUnstagedCall,
    ServerInfo,
    StageFilesCall,
    ToolCallResult,
    ToolDef,
)


class TestJsonRpcRequest:
    def test_notification_without_id(self) -> None:
        req = JsonRpcRequest.model_validate({"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert req.id is None
        assert req.is_notification
        assert req.params is None

    def test_null_id_is_notification(self) -> None:
        req = JsonRpcRequest.model_validate({"method": "tools/list", "id": None})
        assert req.is_notification

    @pytest.mark.parametrize("raw_id", [7, "abc", "7", 1.5, 0])
    def test_id_type_preserved(self, raw_id: object) -> None:
        req = JsonRpcRequest.model_validate({"method": "tools/list", "id": raw_id})
        assert req.id == raw_id
        assert type(req.id) is type(raw_id)
        assert not req.is_notification

    def test_params_untyped(self) -> None:
        req = JsonRpcRequest.model_validate({"method": "x", "id": 1, "params": [1, 2]})
        assert req.params == [1, 2]

    def test_method_required(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate({"id": 1})

    def test_method_must_be_string(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate({"id": 1, "method": 42})


class TestJsonRpcResponse:
    def test_result_shape(self) -> None:
        wire = JsonRpcResponse(id=3, result={"tools": []}).to_wire()
        assert wire == {"jsonrpc": "2.0", "id": 3, "result": {"tools": []}}

    def test_error_shape(self) -> None:
        resp = JsonRpcResponse(id="x", error=JsonRpcError(code=-32601, message="Method not found"))
        assert resp.to_wire() == {
            "jsonrpc": "2.0",
            "id": "x",
            "error": {"code": -32601, "message": "Method not found"},
        }

    def test_error_data_included_when_set(self) -> None:
        resp = JsonRpcResponse(id=1, error=JsonRpcError(code=-32602, message="Invalid params", data="why"))
        assert resp.to_wire()["error"]["data"] == "why"

    def test_missing_result_serializes_empty(self) -> None:
        assert JsonRpcResponse(id=1).to_wire()["result"] == {}


class TestInitializeOptions:
    def test_commit_format_string(self) -> None:
        opts = InitializeOptions.model_validate({"commitFormat": "feat: <desc>"})
        assert opts.commit_format == ["feat: <desc>"]

    def test_commit_format_array_drops_non_strings(self) -> None:
        opts = InitializeOptions.model_validate({"commitFormat": ["a", 1, None, "b", {"c": 1}]})
        assert opts.commit_format == ["a", "b"]

    def test_commit_format_wrong_type_ignored(self) -> None:
        opts = InitializeOptions.model_validate({"commitFormat": 12})
        assert opts.commit_format is None

    def test_extra_constraints_array(self) -> None:
        opts = InitializeOptions.model_validate({"extraConstraints": ["x", False, "y"]})
        assert opts.extra_constraints == ["x", "y"]

    def test_extra_constraints_string_ignored(self) -> None:
        opts = InitializeOptions.model_validate({"extraConstraints": "not a list"})
        assert opts.extra_constraints is None

    def test_unknown_keys_ignored(self) -> None:
        opts = InitializeOptions.model_validate({"theme": "dark"})
        assert opts.commit_format is None
        assert opts.extra_constraints is None


class TestInitializeParams:
    def test_without_options(self) -> None:
        params = InitializeParams.model_validate({"protocolVersion": "2024-11-05", "capabilities": {}})
        assert params.options is None

    def test_non_mapping_options_ignored(self) -> None:
        assert InitializeParams.model_validate({"options": ["commitFormat"]}).options is None

    def test_with_options(self) -> None:
        params = InitializeParams.model_validate({"options": {"commitFormat": "x"}})
        assert params.options is not None
        assert params.options.commit_format == ["x"]


class TestInitializeResult:
    def test_wire_shape(self) -> None:
        data = InitializeResult(server_info=ServerInfo(version="9.9.9")).model_dump(by_alias=True)
        assert data == {
            "protocolVersion": "2024-11-05",
            "capabilities": {"tools": {"listChanged": True}},
            "serverInfo": {"name": "git-summarizer", "version": "9.9.9"},
        }


class TestToolDef:
    def test_dump_uses_input_schema_key(self) -> None:
        tool = ToolDef(name="t", description="d", input_schema={"type": "object"})
        assert tool.model_dump() == {"name": "t", "description": "d", "input_schema": {"type": "object"}}

    def test_frozen(self) -> None:
        tool = ToolDef(name="t")
        with pytest.raises(ValidationError):
            tool.name = "other"  # type: ignore[misc]


class TestToolCallResult:
    def test_success_omits_is_error(self) -> None:
        result = ToolCallResult.from_text("done")
        assert result.success
        assert result.to_wire() == {"content": [{"type": "text", "text": "done"}]}

    def test_error_sets_flag(self) -> None:
        result = ToolCallResult.error("boom")
        assert not result.success
        assert result.to_wire() == {"content": [{"type": "text", "text": "boom"}], "isError": True}

    def test_text_joins_blocks(self) -> None:
        result = ToolCallResult.model_validate({"content": [{"text": "a"}, {"text": "b"}]})
        assert result.text == "a\nb"


class TestCallToolParams:
    def test_list_unstaged(self) -> None:
        call = CallToolParams(name="list_unstaged").to_tool_call()
        assert isinstance(call, ListUnstagedCall)

    def test_get_staged_diff_ignores_arguments(self) -> None:
        call = CallToolParams.model_validate({"name": "get_staged_diff", "arguments": {"x": 1}}).to_tool_call()
        assert isinstance(call, GetStagedDiffCall)

    def test_stage_files_paths(self) -> None:
        call = CallToolParams.model_validate(
            {"name": "stage_files", "arguments": {"paths": ["a", 3, "b"]}},
        ).to_tool_call()
        assert isinstance(call, StageFilesCall)
        assert call.arguments.paths == ["a", "b"]

    @pytest.mark.parametrize("arguments", [{}, {"paths": "a.txt"}, {"paths": None}])
    def test_stage_files_malformed_paths_become_empty(self, arguments: dict[str, object]) -> None:
        call = CallToolParams.model_validate({"name": "stage_files", "arguments": arguments}).to_tool_call()
        assert isinstance(call, StageFilesCall)
        assert call.arguments.paths == []

    def test_non_mapping_arguments(self) -> None:
        params = CallToolParams.model_validate({"name": "stage_files", "arguments": ["a.txt"]})
        assert params.arguments == {}

    @pytest.mark.parametrize("arguments", [{}, {"message": 5}, {"message": None}])
    def test_execute_commit_message_defaults_empty(self, arguments: dict[str, object]) -> None:
        call = CallToolParams.model_validate({"name": "execute_commit", "arguments": arguments}).to_tool_call()
        assert isinstance(call, ExecuteCommitCall)
        assert call.arguments.message == ""

    def test_execute_commit_message(self) -> None:
        call = CallToolParams.model_validate(
            {"name": "execute_commit", "arguments": {"message": "fix: typo"}},
        ).to_tool_call()
        assert isinstance(call, ExecuteCommitCall)
        assert call.arguments.message == "fix: typo"

    def test_unknown_tool(self) -> None:
        assert CallToolParams(name="rm_rf").to_tool_call() is None

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            CallToolParams.model_validate({"arguments": {}})

    def test_name_must_be_string(self) -> None:
        with pytest.raises(ValidationError):
            CallToolParams.model_validate({"name": 5})
