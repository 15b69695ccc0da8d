# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

DesktopWriter = Callable[..., Path]


@dataclass(slots=True)
class XdgLayout:
    """Temporary system and user application directories wired into the environment."""

    data_root: Path
    data_home: Path

    @property
    def system_apps(self) -> Path:
        return self.data_root / "applications"

    @property
    def user_apps(self) -> Path:
        return self.data_home / "applications"


@pytest.fixture
def write_desktop() -> DesktopWriter:
    """Return a helper writing a desktop-entry file with optional fields."""

    def _write(
        directory: Path,
        filename: str,
        *,
        name: str | None = None,
        command: str | None = None,
        extra: tuple[str, ...] = (),
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = ["[Desktop Entry]", "Type=Application"]
        if name is not None:
            lines.append(f"Name={name}")
        if command is not None:
            lines.append(f"Exec={command}")
        lines.extend(extra)
        path = directory / filename
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def xdg_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> XdgLayout:
    """Point the XDG variables at empty temporary directories."""

    layout = XdgLayout(data_root=tmp_path / "sysA", data_home=tmp_path / "home" / ".local" / "share")
    layout.system_apps.mkdir(parents=True)
    layout.user_apps.mkdir(parents=True)
    monkeypatch.setenv("XDG_DATA_DIRS", str(layout.data_root))
    monkeypatch.setenv("XDG_DATA_HOME", str(layout.data_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("RUNNER_CMD", raising=False)
    monkeypatch.delenv("LAUNCH_HANDLER", raising=False)
    return layout
