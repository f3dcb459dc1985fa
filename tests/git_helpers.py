"""Helpers for arranging working-tree and index state in tests."""

from __future__ import annotations

from pathlib import Path

from git import Repo


def repo_root(repo: Repo) -> Path:
    assert repo.working_tree_dir is not None
    return Path(repo.working_tree_dir)


def write_file(repo: Repo, name: str, content: str) -> Path:
    """Create or overwrite *name* inside the working tree."""
    path = repo_root(repo) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def commit_file(repo: Repo, name: str, content: str, message: str = "add file") -> str:
    """Write, stage and commit one file; return the commit sha."""
    write_file(repo, name, content)
    repo.index.add([name])
    return repo.index.commit(message).hexsha


def staged_paths(repo: Repo) -> set[str]:
    """Paths currently recorded in the on-disk index."""
    return {path for path, _stage in Repo(repo_root(repo)).index.entries}
