# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Present the catalog to a runner or stdout and hand the choice to a launch handler."""

from __future__ import annotations

import subprocess  # nosec B404
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .catalog import Catalog
from .config import DEFAULT_LAUNCH_HANDLER, LauncherConfig
from .errors import LaunchHandlerError, RunnerOutputError, RunnerSpawnError
from .logging import ConsoleLogger, build_logger
from .models import DesktopEntry
from .process_utils import spawn_process

Spawner = Callable[..., subprocess.Popen[str]]


@dataclass(frozen=True, slots=True)
class LaunchRecord:
    """Entry handed to the launch handler together with its process handle."""

    entry: DesktopEntry
    process: subprocess.Popen[str]


class SelectionLauncher:
    """Drive either listing mode or the runner round trip followed by a launch.

    The runner round trip has no timeout; a runner that never exits blocks
    the caller indefinitely.
    """

    def __init__(
        self,
        *,
        runner_cmd: Sequence[str] | None = None,
        launch_handler: str = DEFAULT_LAUNCH_HANDLER,
        logger: ConsoleLogger | None = None,
        spawner: Spawner = spawn_process,
    ) -> None:
        self.runner_cmd = tuple(runner_cmd) if runner_cmd else None
        self.launch_handler = launch_handler
        self._logger = logger or build_logger()
        self._spawn = spawner

    @classmethod
    def from_config(cls, config: LauncherConfig, *, logger: ConsoleLogger | None = None) -> SelectionLauncher:
        return cls(runner_cmd=config.runner_cmd, launch_handler=config.launch_handler, logger=logger)

    def present(self, catalog: Catalog, *, list_only: bool = False) -> LaunchRecord | None:
        """Present ``catalog`` and launch the selected entry when a runner is configured.

        Args:
            catalog: Merged application catalog.
            list_only: Print labels even when a runner is configured.

        Returns:
            LaunchRecord | None: The launched entry, or ``None`` when nothing was launched.

        Raises:
            RunnerSpawnError: If the runner cannot be started.
            LaunchHandlerError: If the launch handler cannot be started.
        """

        if self.runner_cmd is None or list_only:
            self.list_entries(catalog)
            return None

        try:
            label = self.select(catalog, self.runner_cmd)
        except RunnerOutputError as exc:
            self._logger.fail(str(exc))
            return None

        self._logger.echo(label)
        entry = catalog.find_by_label(label)
        if entry is None:
            self._logger.debug(f"no entry matches label={label!r}")
            return None
        return LaunchRecord(entry=entry, process=self.launch(entry))

    def list_entries(self, catalog: Catalog) -> None:
        """Print every display label, one per line, to standard output."""

        for label in catalog.labels():
            self._logger.echo(label)

    def select(self, catalog: Catalog, runner_cmd: Sequence[str]) -> str:
        """Pipe every label to the runner and return its trimmed answer.

        Raises:
            RunnerSpawnError: If the runner cannot be started.
            RunnerOutputError: If the runner's output cannot be captured.
        """

        payload = "".join(f"{label}\n" for label in catalog.labels())
        try:
            process = self._spawn(runner_cmd, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
        except (OSError, ValueError) as exc:
            raise RunnerSpawnError(f"Failed to start runner {runner_cmd[0]!r}: {exc}") from exc
        self._logger.debug(f"runner started cmd={runner_cmd[0]} entries={len(catalog)}")
        try:
            output, _ = process.communicate(payload)
        except (OSError, UnicodeError) as exc:
            process.kill()
            process.wait()
            raise RunnerOutputError(f"Failed to capture child process output: {exc}") from exc
        return (output or "").strip()

    def launch(self, entry: DesktopEntry) -> subprocess.Popen[str]:
        """Start the launch handler for ``entry`` without waiting for it.

        Raises:
            LaunchHandlerError: If the launch handler cannot be started.
        """

        argv = (self.launch_handler, str(entry.source_path))
        try:
            process = self._spawn(argv, stdin=subprocess.DEVNULL, detach=True)
        except (OSError, ValueError) as exc:
            raise LaunchHandlerError(f"Failed to start launch handler {self.launch_handler!r}: {exc}") from exc
        self._logger.debug(f"launched cmd={self.launch_handler} path={entry.source_path}")
        return process


__all__ = ["LaunchRecord", "SelectionLauncher"]
