# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Desktop-entry extraction and the parallel parse stage."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .config import DEFAULT_WORKERS
from .errors import EntryReadError
from .logging import ConsoleLogger, build_logger
from .models import DesktopEntry

if TYPE_CHECKING:
    from .catalog import Catalog

DESKTOP_SUFFIX: Final[str] = ".desktop"
NAME_PREFIX: Final[str] = "Name="
EXEC_PREFIX: Final[str] = "Exec="

EntryMap = dict[str, DesktopEntry]


def extract_fields(lines: Iterable[str]) -> tuple[str, str] | None:
    """Return the first ``Name=`` and ``Exec=`` values found in ``lines``.

    Iteration stops as soon as both values are known, so callers may pass a
    lazily read file handle.

    Args:
        lines: Lines of a desktop-entry file, with or without line endings.

    Returns:
        tuple[str, str] | None: ``(name, command)`` or ``None`` when either is missing.
    """

    name: str | None = None
    command: str | None = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if name is None and line.startswith(NAME_PREFIX):
            name = line[len(NAME_PREFIX) :]
        elif command is None and line.startswith(EXEC_PREFIX):
            command = line[len(EXEC_PREFIX) :]
        if name is not None and command is not None:
            return name, command
    return None


def parse_desktop_file(path: Path) -> DesktopEntry | None:
    """Parse ``path`` into a :class:`DesktopEntry`.

    Args:
        path: Candidate directory entry.

    Returns:
        DesktopEntry | None: The entry, or ``None`` when ``path`` is not a
        desktop-entry file or lacks either required field.

    Raises:
        EntryReadError: If the file cannot be opened, read or decoded.
    """

    if path.suffix != DESKTOP_SUFFIX:
        return None
    try:
        with path.open(encoding="utf-8") as handle:
            fields = extract_fields(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise EntryReadError(path, exc) from exc
    if fields is None:
        return None
    name, command = fields
    return DesktopEntry.from_fields(name, command, path)


def parse_shard(shard: Sequence[Path], *, logger: ConsoleLogger | None = None) -> EntryMap:
    """Parse every entry in ``shard`` into a private mapping keyed by file name.

    Unreadable files are reported and skipped. Within a shard the later file in
    scan order wins a key collision.
    """

    log = logger or build_logger()
    entries: EntryMap = {}
    for path in shard:
        try:
            entry = parse_desktop_file(path)
        except EntryReadError as exc:
            log.warn(str(exc))
            continue
        if entry is None:
            continue
        entries[entry.key] = entry
    return entries


def partition(entries: Sequence[Path], workers: int) -> list[tuple[Path, ...]]:
    """Split ``entries`` into at most ``workers`` contiguous shards.

    Args:
        entries: Ordered directory entries.
        workers: Maximum number of shards.

    Returns:
        list[tuple[Path, ...]]: Non-empty shards covering ``entries`` in order.
    """

    if workers < 1:
        raise ValueError("workers must be at least 1")
    if not entries:
        return []
    size = math.ceil(len(entries) / workers)
    return [tuple(entries[start : start + size]) for start in range(0, len(entries), size)]


class ParallelParser:
    """Fan the parse stage out over a fixed-size thread pool."""

    def __init__(self, workers: int = DEFAULT_WORKERS, *, logger: ConsoleLogger | None = None) -> None:
        """Create a parser running at most ``workers`` shards concurrently.

        Args:
            workers: Size of the worker pool and maximum shard count.
            logger: Optional diagnostic logger shared with the workers.
        """

        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.workers = workers
        self._logger = logger or build_logger()

    def parse(self, entries: Sequence[Path]) -> list[EntryMap]:
        """Parse ``entries`` concurrently and return one mapping per shard.

        Blocks until every worker has finished. Results are ordered by shard,
        not by completion.
        """

        shards = partition(entries, self.workers)
        if not shards:
            return []
        results: dict[int, EntryMap] = {}
        with ThreadPoolExecutor(max_workers=len(shards)) as executor:
            future_map = {
                executor.submit(parse_shard, shard, logger=self._logger): order for order, shard in enumerate(shards)
            }
            for future in as_completed(future_map):
                order = future_map[future]
                results[order] = future.result()
                self._logger.debug(f"worker finished shard={order} entries={len(results[order])}")
        return [results[order] for order in sorted(results)]

    def run(self, entries: Sequence[Path], catalog: Catalog) -> Catalog:
        """Parse ``entries`` and fold every shard's mapping into ``catalog``.

        Shards are folded in shard order, so for a key present in two system
        directories the entry from the later directory wins regardless of
        thread scheduling.
        """

        for partial in self.parse(entries):
            catalog.fold(partial)
        return catalog


__all__ = [
    "DESKTOP_SUFFIX",
    "ParallelParser",
    "extract_fields",
    "parse_desktop_file",
    "parse_shard",
    "partition",
]
