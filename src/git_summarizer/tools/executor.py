"""ToolExecutor: runs ``tools/call`` requests against a :class:`VCSAdapter`.

Every adapter failure is turned into an in-band error result, so a
recognized tool call always produces a successful JSON-RPC response.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from git_summarizer.protocol.models import (
    ExecuteCommitCall,
    GetStagedDiffCall,
    ListUnstagedCall,
    StageFilesCall,
    ToolCallResult,
)
from git_summarizer.utils.telemetry import ATTR_TOOL_IS_ERROR, ATTR_TOOL_NAME, get_tracer
from git_summarizer.vcs.errors import VCSError

if TYPE_CHECKING:
    from git_summarizer.protocol.models import CallToolParams, ToolCall
    from git_summarizer.vcs.adapter import VCSAdapter

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

NOTHING_UNSTAGED = "No unstaged files."

_UNSTAGED_GUIDANCE = """\
Workflow reminder:
1. Show the file list above to the user.
2. You **must** ask the user to confirm which files should be staged (git add).
3. Only call `stage_files` after the user has explicitly chosen the files."""

_STAGED_MESSAGE = """\
Files staged successfully.

Hint: now call `get_staged_diff` to fetch the staged changes and draft a commit message."""

_DIFF_GUIDANCE = """\
Workflow reminder:
1. Draft a commit message summarizing the diff above.
2. You **must** ask the user to confirm the PMS reference (e.g. BUG-123 or TASK-456).
3. Show the final commit message and ask the user for explicit confirmation.
4. Only call `execute_commit` after the user has confirmed."""


class ToolExecutor:
    """Executes the four git tools.

    Usage::

        executor = ToolExecutor(GitAdapter("."))
        result = executor.call_tool(CallToolParams(name="list_unstaged"))
    """

    def __init__(self, adapter: VCSAdapter) -> None:
        self._adapter = adapter

    def call_tool(self, params: CallToolParams) -> ToolCallResult:
        """Validate *params* into a typed call and execute it."""
        call = params.to_tool_call()
        if call is None:
            logger.warning("Unknown tool requested: %s", params.name)
            return ToolCallResult.error(f"Unknown tool: {params.name}")
        return self.execute(call)

    def execute(self, call: ToolCall) -> ToolCallResult:
        """Run one typed tool call, reporting adapter failures in-band."""
        with _tracer.start_as_current_span(f"tool.{call.name}") as span:
            span.set_attribute(ATTR_TOOL_NAME, call.name)
            try:
                result = self._run(call)
            except VCSError as exc:
                logger.warning("Tool %s failed: %s", call.name, exc)
                result = ToolCallResult.error(str(exc))
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
        return result

    def _run(self, call: ToolCall) -> ToolCallResult:
        if isinstance(call, ListUnstagedCall):
            return self._list_unstaged()
        if isinstance(call, StageFilesCall):
            return self._stage_files(call.arguments.paths)
        if isinstance(call, GetStagedDiffCall):
            return self._get_staged_diff()
        if isinstance(call, ExecuteCommitCall):
            return self._execute_commit(call.arguments.message)
        msg = f"Unhandled tool call: {call!r}"
        raise TypeError(msg)

    def _list_unstaged(self) -> ToolCallResult:
        files = self._adapter.list_unstaged()
        if not files:
            return ToolCallResult.from_text(NOTHING_UNSTAGED)
        listing = "\n".join(files)
        return ToolCallResult.from_text(f"Unstaged files:\n{listing}\n\n{_UNSTAGED_GUIDANCE}")

    def _stage_files(self, paths: list[str]) -> ToolCallResult:
        self._adapter.stage_files(paths)
        return ToolCallResult.from_text(_STAGED_MESSAGE)

    def _get_staged_diff(self) -> ToolCallResult:
        diff = self._adapter.get_staged_diff()
        return ToolCallResult.from_text(f"{diff}\n\n{_DIFF_GUIDANCE}")

    def _execute_commit(self, message: str) -> ToolCallResult:
        if not message.strip():
            logger.warning("Committing with an empty commit message")
        commit_id = self._adapter.commit(message)
        return ToolCallResult.from_text(f"Commit successful: {commit_id}")
