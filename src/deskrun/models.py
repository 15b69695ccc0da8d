# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data model for discovered applications."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DesktopEntry:
    """A launchable application discovered from a desktop-entry file."""

    display_label: str
    source_path: Path

    @classmethod
    def from_fields(cls, name: str, command: str, source_path: Path) -> DesktopEntry:
        """Build an entry labelled ``"<name> (<command>)"``."""

        return cls(display_label=f"{name} ({command})", source_path=source_path)

    @property
    def key(self) -> str:
        """Return the catalog key, the base name of the source file."""

        return self.source_path.name


__all__ = ["DesktopEntry"]
