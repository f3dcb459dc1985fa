"""VCSAdapter protocol: the primitives the tool layer needs from a repository.

The tool executor only talks to this protocol, so tests can substitute an
in-memory fake and the git backend stays swappable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class VCSAdapter(Protocol):
    """Staged-diff, commit, status and staging primitives over one repository.

    Every method raises :class:`~git_summarizer.vcs.errors.VCSError` (or a
    subclass) on failure.
    """

    def get_staged_diff(self) -> str:
        """Return the unified diff between HEAD (or the empty tree) and the index.

        Raises ``NothingStagedError`` when the diff is empty.
        """
        ...

    def commit(self, message: str) -> str:
        """Commit the index on the current branch and return the new commit id."""
        ...

    def list_unstaged(self) -> list[str]:
        """Return modified, deleted and untracked paths not yet in the index."""
        ...

    def stage_files(self, paths: Sequence[str]) -> None:
        """Add *paths* to the index, writing it once after all of them succeed."""
        ...
