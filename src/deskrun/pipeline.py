# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery, parse, merge and presentation wired into a single run."""

from __future__ import annotations

from .catalog import Catalog, apply_user_overrides
from .config import LauncherConfig
from .launcher import LaunchRecord, SelectionLauncher
from .logging import ConsoleLogger, build_logger
from .parser import ParallelParser
from .paths import collect_system_entries


def build_catalog(config: LauncherConfig, *, logger: ConsoleLogger | None = None) -> Catalog:
    """Discover system entries, parse them in parallel and apply user overrides.

    Raises:
        ConfigurationError: If no system directory yields any entry.
        UserDirectoryError: If the user override directory cannot be listed.
    """

    log = logger or build_logger()
    entries = collect_system_entries(config.system_dirs, logger=log)
    catalog = ParallelParser(config.workers, logger=log).run(entries, Catalog())
    log.debug(f"system pass entries={len(catalog)} workers={config.workers}")
    overrides = apply_user_overrides(catalog, config.user_dir, logger=log)
    log.debug(f"user pass dir={config.user_dir} overrides={overrides}")
    return catalog


def run(
    config: LauncherConfig,
    *,
    logger: ConsoleLogger | None = None,
    list_only: bool = False,
) -> LaunchRecord | None:
    """Execute a complete launcher run and return the launched entry, if any."""

    log = logger or build_logger()
    catalog = build_catalog(config, logger=log)
    return SelectionLauncher.from_config(config, logger=log).present(catalog, list_only=list_only)


__all__ = ["build_catalog", "run"]
