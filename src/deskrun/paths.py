# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Directory enumeration for system application directories."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigurationError, DirectoryReadError
from .logging import ConsoleLogger, build_logger


def list_directory(directory: Path) -> list[Path]:
    """Return the entries of ``directory`` sorted by name.

    Args:
        directory: Directory to enumerate.

    Returns:
        list[Path]: Absolute paths of every entry in the directory.

    Raises:
        OSError: If the directory cannot be opened or listed.
    """

    base = directory.absolute()
    with os.scandir(base) as entries:
        names = sorted(entry.name for entry in entries)
    return [base / name for name in names]


def collect_system_entries(
    directories: Iterable[Path],
    *,
    logger: ConsoleLogger | None = None,
) -> tuple[Path, ...]:
    """Enumerate every configured system application directory.

    Unreadable directories are reported and contribute nothing.

    Args:
        directories: Application directories in declaration order.
        logger: Optional diagnostic logger.

    Returns:
        tuple[Path, ...]: Directory entries in directory order, then name order.

    Raises:
        ConfigurationError: If no entries were found in any directory.
    """

    log = logger or build_logger()
    collected: list[Path] = []
    for directory in directories:
        try:
            listing = list_directory(directory)
        except OSError as exc:
            log.warn(str(DirectoryReadError(directory, exc.strerror or exc)))
            continue
        log.debug(f"listed dir={directory} entries={len(listing)}")
        collected.extend(listing)
    if not collected:
        raise ConfigurationError("No valid desktop file directories found!")
    return tuple(collected)


__all__ = ["collect_system_entries", "list_directory"]
