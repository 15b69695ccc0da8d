# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations for the launcher command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import typer

from ..config import DEFAULT_WORKERS

JOBS_OPTION = Annotated[
    int,
    typer.Option("--jobs", "-j", min=1, help="Number of parse workers."),
]
LIST_OPTION = Annotated[
    bool,
    typer.Option("--list", help="Print every label even when RUNNER_CMD is set."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in diagnostics."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured diagnostics."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug diagnostics on stderr."),
]


@dataclass(slots=True)
class LaunchCLIOptions:
    """Capture CLI overrides supplied to the launcher command."""

    jobs: int = DEFAULT_WORKERS
    list_only: bool = False
    emoji: bool = True
    no_color: bool = False
    debug: bool = False


__all__ = [
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "JOBS_OPTION",
    "LIST_OPTION",
    "LaunchCLIOptions",
    "NO_COLOR_OPTION",
]
