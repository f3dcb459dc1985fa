"""GitAdapter: :class:`VCSAdapter` backed by GitPython.

The repository is reopened for every operation so that changes made by other
processes (an editor, a terminal ``git add``) are always observed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from git import Actor, Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError

from git_summarizer.vcs.errors import (
    CommitError,
    NothingStagedError,
    RepositoryError,
    StagingError,
    VCSError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class GitAdapter:
    """Runs the four tool primitives against the repository at *repo_path*.

    Satisfies the :class:`~git_summarizer.vcs.adapter.VCSAdapter` protocol.
    """

    def __init__(self, repo_path: str | Path = ".") -> None:
        self._path = Path(repo_path)

    @property
    def path(self) -> Path:
        return self._path

    def get_staged_diff(self) -> str:
        """Diff HEAD against the index; an unborn branch diffs against the empty tree."""
        args = ["--cached", "--no-color", "--no-ext-diff"]
        with self._open() as repo:
            # Without a commit argument git compares an unborn branch's index
            # against the empty tree.
            if repo.head.is_valid():
                args.append("HEAD")
            try:
                raw: bytes = repo.git.diff(*args, stdout_as_string=False)
            except GitError as exc:
                raise VCSError(f"git diff failed: {exc}") from exc

        # File contents need not be UTF-8; undecodable bytes become U+FFFD.
        diff = raw.decode("utf-8", errors="replace")
        if not diff.strip():
            raise NothingStagedError
        return diff

    def commit(self, message: str) -> str:
        """Write the index as a commit on the branch tip (a root commit if none)."""
        with self._open() as repo:
            author = _identity(repo, "AUTHOR")
            committer = _identity(repo, "COMMITTER")
            try:
                commit = repo.index.commit(message, author=author, committer=committer)
            except (GitError, OSError, ValueError) as exc:
                raise CommitError(str(exc)) from exc
            logger.debug("Created commit %s (parents: %s)", commit.hexsha, [p.hexsha for p in commit.parents])
        return commit.hexsha

    def list_unstaged(self) -> list[str]:
        """Working-tree changes against the index plus untracked files, sorted."""
        with self._open() as repo:
            try:
                changed = {item.a_path or item.b_path for item in repo.index.diff(None)}
                untracked = set(repo.untracked_files)
            except (GitError, OSError) as exc:
                raise VCSError(f"git status failed: {exc}") from exc
        return sorted(p for p in changed | untracked if p)

    def stage_files(self, paths: Sequence[str]) -> None:
        """Add each path in order, failing on the first bad one; write the index once."""
        if not paths:
            return

        with self._open() as repo:
            root = Path(repo.working_tree_dir or self._path).resolve()
            index = repo.index

            for path in paths:
                target = Path(os.path.normpath(root / path))
                try:
                    target.relative_to(root)
                except ValueError:
                    raise StagingError(path, "path is outside the repository") from None
                if not os.path.lexists(target):
                    raise StagingError(path, "no such file or directory")
                if target.is_dir() and not target.is_symlink():
                    raise StagingError(path, "is a directory, not a file")
                try:
                    index.add([str(target.relative_to(root))], write=False)
                except (GitError, OSError, ValueError) as exc:
                    raise StagingError(path, str(exc)) from exc

            try:
                index.write()
            except (GitError, OSError) as exc:
                raise VCSError(f"Cannot write index: {exc}") from exc
        logger.debug("Staged %d path(s): %s", len(paths), ", ".join(paths))

    def _open(self) -> Repo:
        try:
            return Repo(self._path)
        except NoSuchPathError as exc:
            raise RepositoryError(str(self._path), "no such directory") from exc
        except InvalidGitRepositoryError as exc:
            raise RepositoryError(str(self._path), "not a git repository") from exc


def _identity(repo: Repo, role: str) -> Actor:
    """Resolve the author or committer the way ``git commit`` does.

    ``GIT_<role>_NAME`` / ``GIT_<role>_EMAIL`` win over ``user.name`` /
    ``user.email`` from the system, global and repository config.  Unlike
    GitPython's own fallback, a missing identity is an error.
    """
    with repo.config_reader() as reader:
        name = os.environ.get(f"GIT_{role}_NAME") or str(reader.get_value("user", "name", ""))
        email = os.environ.get(f"GIT_{role}_EMAIL") or str(reader.get_value("user", "email", ""))
    if not name or not email:
        msg = "no identity configured; set user.name and user.email in the git config"
        raise CommitError(msg)
    return Actor(name, email)
