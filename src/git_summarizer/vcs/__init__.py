"""Version-control layer: the repository primitives behind the tools."""

from git_summarizer.vcs.adapter import VCSAdapter
from git_summarizer.vcs.errors import (
    CommitError,
    NothingStagedError,
    RepositoryError,
    StagingError,
    VCSError,
)
from git_summarizer.vcs.git_adapter import GitAdapter

__all__ = [
    "CommitError",
    "GitAdapter",
    "NothingStagedError",
    "RepositoryError",
    "StagingError",
    "VCSAdapter",
    "VCSError",
]
