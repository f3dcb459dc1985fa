"""Error types raised by version-control adapters."""

from __future__ import annotations


class VCSError(Exception):
    """Base error for all version-control failures."""


class RepositoryError(VCSError):
    """The repository could not be opened or read."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        msg = f"Cannot open git repository at {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class NothingStagedError(VCSError):
    """The index holds no changes relative to HEAD."""

    def __init__(self) -> None:
        super().__init__("No staged changes found.")


class StagingError(VCSError):
    """A path could not be added to the index."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        msg = f"Cannot stage {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class CommitError(VCSError):
    """Writing the commit object or updating HEAD failed."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Commit failed" + (f": {detail}" if detail else ""))
