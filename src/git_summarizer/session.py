"""Session configuration: the commit template and constraints shown to clients.

One :class:`SessionState` lives for the whole process.  It is handed to the
dispatcher at construction time and only the ``initialize`` handler writes
to it.  Every read and write takes the lock for just that access and never
holds it while a repository operation runs.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from git_summarizer.errors import ConfigError
from git_summarizer.protocol.models import InitializeOptions

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_FORMAT: tuple[str, ...] = (
    "<type>[optional scope]: <english description>",
    "",
    "[English body]",
    "",
    "[Chinese body]",
    "",
    "Log: [short description of the change in Chinese]",
    "PMS: <BUG-number> or <TASK-number> (must carry a 'BUG-' or 'TASK-' prefix. "
    "If unknown, ask the user; if the user explicitly has none, remove this line "
    "from the commit message)",
    "Influence: Explain in Chinese the potential impact of this change.",
)

DEFAULT_EXTRA_CONSTRAINTS: tuple[str, ...] = (
    "No line of the body may exceed 80 characters.",
    "The English and Chinese bodies must come in pairs; never write only one of them.",
)


class SessionConfig(BaseModel):
    """Commit template lines and extra formatting constraints."""

    commit_format: list[str] = Field(default_factory=lambda: list(DEFAULT_COMMIT_FORMAT))
    extra_constraints: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTRA_CONSTRAINTS))

    def apply(self, options: InitializeOptions) -> SessionConfig:
        """Return a copy with every option the client supplied replacing ours."""
        update: dict[str, Any] = {}
        if options.commit_format is not None:
            update["commit_format"] = list(options.commit_format)
        if options.extra_constraints is not None:
            update["extra_constraints"] = list(options.extra_constraints)
        return self.model_copy(update=update, deep=True)


class SessionState:
    """Lock-guarded holder of the current :class:`SessionConfig`.

    Access is sequential today; the lock keeps it safe if a concurrent
    reader is ever added.
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._config = config or SessionConfig()

    def snapshot(self) -> SessionConfig:
        """Return a private copy of the current configuration."""
        with self._lock:
            return self._config.model_copy(deep=True)

    def update(self, options: InitializeOptions) -> SessionConfig:
        """Apply handshake overrides and return the resulting configuration."""
        with self._lock:
            self._config = self._config.apply(options)
            current = self._config.model_copy(deep=True)
        if options.commit_format is not None or options.extra_constraints is not None:
            logger.info(
                "Session configured: %d template line(s), %d constraint(s)",
                len(current.commit_format),
                len(current.extra_constraints),
            )
        return current


def load_session_config(path: Path) -> SessionConfig:
    """Read a YAML file with ``commitFormat`` / ``extraConstraints`` keys.

    The keys and their coercions match the ``initialize`` options.  Environment
    variables in the form ``${VAR}`` or ``$VAR`` are expanded before parsing.

    Raises:
        ConfigError: When the file cannot be read, parsed or validated.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Session config YAML must be a mapping")

    try:
        options = InitializeOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    return SessionConfig().apply(options)
