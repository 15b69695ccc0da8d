# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` spawning."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are passed as argument
# lists and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import IO


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute() or head_path.parent != Path():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def spawn_process(
    args: Sequence[str],
    *,
    stdin: int | IO[str] | None = None,
    stdout: int | IO[str] | None = None,
    detach: bool = False,
) -> subprocess.Popen[str]:
    """Start *args* after normalising the executable path and return the handle.

    Args:
        args: Command and arguments.
        stdin: Standard input disposition passed to :class:`subprocess.Popen`.
        stdout: Standard output disposition passed to :class:`subprocess.Popen`.
        detach: Start the child in a new session so it outlives the caller.

    Returns:
        subprocess.Popen[str]: Text-mode process handle using UTF-8 with replacement on both pipes.

    Raises:
        OSError: If the executable cannot be found or started.
        ValueError: If ``args`` is empty.
    """

    normalized = _normalize_args(args)
    # Bandit: argv lists only, no shell expansion.
    return subprocess.Popen(  # nosec B603
        normalized,
        stdin=stdin,
        stdout=stdout,
        encoding="utf-8",
        errors="replace",
        start_new_session=detach,
    )


__all__ = ["spawn_process"]
