# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by the discovery, merge and launch stages."""

from __future__ import annotations

from pathlib import Path


class LauncherError(RuntimeError):
    """Base error for launcher failures carrying a process exit status."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ConfigurationError(LauncherError):
    """Raised when no usable data directories or home directory can be resolved."""


class DirectoryReadError(LauncherError):
    """Raised when a single system application directory cannot be listed."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Error reading directory {path}: {reason}")
        self.path = path


class EntryReadError(LauncherError):
    """Raised when a desktop-entry file cannot be opened or decoded."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Error reading desktop entry {path}: {reason}")
        self.path = path


class UserDirectoryError(LauncherError):
    """Raised when the user override directory cannot be listed."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to read user application directory {path}: {reason}")
        self.path = path


class RunnerSpawnError(LauncherError):
    """Raised when the configured runner process cannot be started."""


class RunnerOutputError(LauncherError):
    """Raised when the runner's output cannot be captured."""


class LaunchHandlerError(LauncherError):
    """Raised when the external launch handler cannot be started."""


__all__ = [
    "ConfigurationError",
    "DirectoryReadError",
    "EntryReadError",
    "LaunchHandlerError",
    "LauncherError",
    "RunnerOutputError",
    "RunnerSpawnError",
    "UserDirectoryError",
]
