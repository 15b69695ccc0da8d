# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared application catalog and the user override merge pass."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from threading import Lock

from .errors import EntryReadError, UserDirectoryError
from .logging import ConsoleLogger, build_logger
from .models import DesktopEntry
from .parser import parse_desktop_file
from .paths import list_directory


class Catalog:
    """Mapping of desktop-entry file names to discovered entries.

    Writes are serialised by a lock. The parse stage folds each worker's
    mapping from the coordinating thread, in shard order, once every worker
    has finished. Iteration follows insertion order.
    """

    def __init__(self) -> None:
        self._entries: dict[str, DesktopEntry] = {}
        self._lock = Lock()

    def fold(self, partial: Mapping[str, DesktopEntry]) -> None:
        """Merge a worker's private mapping in a single critical section."""

        with self._lock:
            self._entries.update(partial)

    def put(self, key: str, entry: DesktopEntry) -> None:
        """Insert or replace the entry stored under ``key``."""

        with self._lock:
            self._entries[key] = entry

    def labels(self) -> list[str]:
        """Return every display label in presentation order."""

        return [entry.display_label for entry in self._entries.values()]

    def find_by_label(self, label: str) -> DesktopEntry | None:
        """Return the first entry whose display label equals ``label``."""

        for entry in self._entries.values():
            if entry.display_label == label:
                return entry
        return None

    def __getitem__(self, key: str) -> DesktopEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def apply_user_overrides(
    catalog: Catalog,
    user_dir: Path,
    *,
    logger: ConsoleLogger | None = None,
) -> int:
    """Overlay entries from ``user_dir`` onto ``catalog``.

    Runs single-threaded after the parallel stage, so user entries always
    replace system entries with the same file name.

    Args:
        catalog: Catalog populated by the system-wide pass.
        user_dir: User application directory.
        logger: Optional diagnostic logger.

    Returns:
        int: Number of entries written from the user directory.

    Raises:
        UserDirectoryError: If ``user_dir`` cannot be listed.
    """

    log = logger or build_logger()
    try:
        listing = list_directory(user_dir)
    except OSError as exc:
        raise UserDirectoryError(user_dir, exc.strerror or exc) from exc

    applied = 0
    for path in listing:
        try:
            entry = parse_desktop_file(path)
        except EntryReadError as exc:
            log.warn(str(exc))
            continue
        if entry is None:
            continue
        if entry.key in catalog:
            log.debug(f"user override key={entry.key} path={path}")
        catalog.put(entry.key, entry)
        applied += 1
    return applied


__all__ = ["Catalog", "apply_user_overrides"]
