# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from ..config import DEFAULT_WORKERS, load_config
from ..errors import LauncherError
from ..logging import build_logger
from ..pipeline import run
from .options import (
    DEBUG_OPTION,
    EMOJI_OPTION,
    JOBS_OPTION,
    LIST_OPTION,
    NO_COLOR_OPTION,
    LaunchCLIOptions,
)

app = typer.Typer(
    name="deskrun",
    help="List desktop applications or pick one through RUNNER_CMD and launch it.",
    add_completion=False,
    no_args_is_help=False,
)


@app.command()
def launch(
    jobs: JOBS_OPTION = DEFAULT_WORKERS,
    list_only: LIST_OPTION = False,
    emoji: EMOJI_OPTION = True,
    no_color: NO_COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Discover applications, then list them or run the selector and launch the choice.

    Raises:
        typer.Exit: With a non-zero status when a fatal error occurs.
    """

    options = LaunchCLIOptions(jobs=jobs, list_only=list_only, emoji=emoji, no_color=no_color, debug=debug)
    logger = build_logger(emoji=options.emoji, debug=options.debug, no_color=options.no_color)
    try:
        config = load_config(workers=options.jobs)
        run(config, logger=logger, list_only=options.list_only)
    except LauncherError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def main() -> None:
    """Console-script entry point."""

    app(prog_name="deskrun")


__all__ = ["app", "launch", "main"]
