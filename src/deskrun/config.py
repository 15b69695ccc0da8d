# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment-driven configuration for the launcher."""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

DATA_DIRS_ENV: Final[str] = "XDG_DATA_DIRS"
DATA_HOME_ENV: Final[str] = "XDG_DATA_HOME"
HOME_ENV: Final[str] = "HOME"
RUNNER_ENV: Final[str] = "RUNNER_CMD"
LAUNCH_HANDLER_ENV: Final[str] = "LAUNCH_HANDLER"

APPLICATIONS_DIR_NAME: Final[str] = "applications"
FALLBACK_SYSTEM_DIR: Final[Path] = Path("/usr/share/applications")
USER_DATA_FALLBACK: Final[Path] = Path(".local") / "share"
DEFAULT_LAUNCH_HANDLER: Final[str] = "dex"
DEFAULT_WORKERS: Final[int] = 6


class LauncherConfig(BaseModel):
    """Resolved launcher settings for a single run."""

    model_config = ConfigDict(frozen=True)

    system_dirs: tuple[Path, ...] = (FALLBACK_SYSTEM_DIR,)
    user_dir: Path
    runner_cmd: tuple[str, ...] | None = None
    launch_handler: str = Field(default=DEFAULT_LAUNCH_HANDLER, min_length=1)
    workers: int = Field(default=DEFAULT_WORKERS, ge=1)


def _env_value(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key)
    if value is None or not value.strip():
        return None
    return value


def resolve_system_dirs(environ: Mapping[str, str]) -> tuple[Path, ...]:
    """Return the system application directories named by ``XDG_DATA_DIRS``.

    Args:
        environ: Environment mapping to read from.

    Returns:
        tuple[Path, ...]: ``<root>/applications`` for every non-empty root in
        declaration order, or the conventional fallback when the variable is unset.
    """

    raw = _env_value(environ, DATA_DIRS_ENV)
    if raw is None:
        return (FALLBACK_SYSTEM_DIR,)
    return tuple(Path(root) / APPLICATIONS_DIR_NAME for root in raw.split(":") if root)


def resolve_user_dir(environ: Mapping[str, str]) -> Path:
    """Return the user override directory.

    Args:
        environ: Environment mapping to read from.

    Returns:
        Path: ``$XDG_DATA_HOME/applications`` or ``$HOME/.local/share/applications``.

    Raises:
        ConfigurationError: If neither ``XDG_DATA_HOME`` nor ``HOME`` is set.
    """

    data_home = _env_value(environ, DATA_HOME_ENV)
    if data_home is not None:
        return Path(data_home) / APPLICATIONS_DIR_NAME
    home = _env_value(environ, HOME_ENV)
    if home is None:
        raise ConfigurationError("Unable to determine home directory!")
    return Path(home) / USER_DATA_FALLBACK / APPLICATIONS_DIR_NAME


def resolve_runner(environ: Mapping[str, str]) -> tuple[str, ...] | None:
    """Return the runner argv parsed from ``RUNNER_CMD`` or ``None`` when unset."""

    raw = _env_value(environ, RUNNER_ENV)
    if raw is None:
        return None
    try:
        argv = tuple(shlex.split(raw))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {RUNNER_ENV} value {raw!r}: {exc}") from exc
    return argv or None


def load_config(environ: Mapping[str, str] | None = None, *, workers: int | None = None) -> LauncherConfig:
    """Build a :class:`LauncherConfig` from ``environ`` (defaults to ``os.environ``).

    Args:
        environ: Optional environment mapping; the process environment is used when omitted.
        workers: Optional worker count override.

    Returns:
        LauncherConfig: Validated configuration.

    Raises:
        ConfigurationError: If the environment cannot produce a valid configuration.
    """

    env = os.environ if environ is None else environ
    payload: dict[str, object] = {
        "system_dirs": resolve_system_dirs(env),
        "user_dir": resolve_user_dir(env),
        "runner_cmd": resolve_runner(env),
    }
    handler = _env_value(env, LAUNCH_HANDLER_ENV)
    if handler is not None:
        payload["launch_handler"] = handler.strip()
    if workers is not None:
        payload["workers"] = workers
    try:
        return LauncherConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid launcher configuration: {exc}") from exc


__all__ = [
    "APPLICATIONS_DIR_NAME",
    "DEFAULT_LAUNCH_HANDLER",
    "DEFAULT_WORKERS",
    "FALLBACK_SYSTEM_DIR",
    "LauncherConfig",
    "load_config",
    "resolve_runner",
    "resolve_system_dirs",
    "resolve_user_dir",
]
