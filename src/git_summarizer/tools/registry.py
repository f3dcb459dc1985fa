"""Tool catalog: the four tools advertised by ``tools/list``.

The catalog is rebuilt from a :class:`SessionConfig` snapshot on every call
so the ``get_staged_diff`` description always shows the template and
constraints most recently set by ``initialize``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from git_summarizer.protocol.models import ToolDef

if TYPE_CHECKING:
    from git_summarizer.session import SessionConfig


def _empty_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


_DIFF_DESCRIPTION = """\
Fetch the changes currently in the git staging area (git diff --staged).

### Workflow requirements:
1. Draft a commit message: summarize the changes into a commit message draft.
2. Handle the PMS reference:
   - If the reference cannot be determined, you **must** ask the user for it.
   - If the user provides one, fill it into the commit message.
   - If the user explicitly has none, you **must remove the whole PMS line** from the final message.
3. Preview and revise: show the draft to the user and ask for confirmation.
4. Never commit directly: only call execute_commit after the user has explicitly confirmed.

### Commit format:
{format_hint}

### Extra constraints:
{constraints_hint}"""


def render_staged_diff_description(config: SessionConfig) -> str:
    """Render the ``get_staged_diff`` description for *config*."""
    format_hint = "\n".join(config.commit_format)
    constraints_hint = "\n".join(f"- {c}" for c in config.extra_constraints)
    return _DIFF_DESCRIPTION.format(format_hint=format_hint, constraints_hint=constraints_hint)


def build_catalog(config: SessionConfig) -> list[ToolDef]:
    """Return the full tool catalog rendered against *config*."""
    return [
        ToolDef(
            name="list_unstaged",
            description="List every unstaged or untracked file in the current project.",
            input_schema=_empty_schema(),
        ),
        ToolDef(
            name="stage_files",
            description="Add the given files to the git staging area.",
            input_schema={
                "type": "object",
                "properties": {
                    "paths": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Paths of the files to stage",
                    },
                },
                "required": ["paths"],
            },
        ),
        ToolDef(
            name="get_staged_diff",
            description=render_staged_diff_description(config),
            input_schema=_empty_schema(),
        ),
        ToolDef(
            name="execute_commit",
            description=(
                "Create the commit. Only call this tool after the user has confirmed "
                "the commit message you drafted."
            ),
            input_schema={
                "type": "object",
                "properties": {
                    "message": {"type": "string", "description": "The commit message"},
                },
                "required": ["message"],
            },
        ),
    ]
