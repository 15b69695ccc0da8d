# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for desktop-entry extraction and the parallel parse stage."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from deskrun.catalog import Catalog
from deskrun.errors import EntryReadError
from deskrun.logging import build_logger
from deskrun.parser import ParallelParser, extract_fields, parse_desktop_file, parse_shard, partition

DesktopWriter = Callable[..., Path]


def test_extract_fields_uses_first_occurrence() -> None:
    lines = iter(
        [
            "[Desktop Entry]\n",
            "Name[de]=Fuchs\n",
            "Name=Firefox\n",
            "Exec=firefox %u\n",
            "Name=Ignored\n",
        ]
    )

    assert extract_fields(lines) == ("Firefox", "firefox %u")


def test_extract_fields_stops_once_both_fields_are_known() -> None:
    consumed: list[str] = []

    def _lines():
        for line in ("Exec=run", "Name=App", "Comment=never read"):
            consumed.append(line)
            yield line

    assert extract_fields(_lines()) == ("App", "run")
    assert consumed == ["Exec=run", "Name=App"]


def test_extract_fields_keeps_values_verbatim() -> None:
    assert extract_fields(["Name= Spaced App ", "Exec=env A=b app --x=1\r\n"]) == (
        " Spaced App ",
        "env A=b app --x=1",
    )


@pytest.mark.parametrize("lines", [["Name=Bar"], ["Exec=bar"], []])
def test_extract_fields_requires_both(lines: list[str]) -> None:
    assert extract_fields(lines) is None


def test_parse_desktop_file_builds_label(tmp_path: Path, write_desktop: DesktopWriter) -> None:
    path = write_desktop(tmp_path, "foo.desktop", name="Foo", command="foo --flag")

    entry = parse_desktop_file(path)

    assert entry is not None
    assert entry.display_label == "Foo (foo --flag)"
    assert entry.source_path == path
    assert entry.key == "foo.desktop"


def test_parse_desktop_file_ignores_other_extensions(tmp_path: Path, write_desktop: DesktopWriter) -> None:
    path = write_desktop(tmp_path, "foo.txt", name="Foo", command="foo")

    assert parse_desktop_file(path) is None


def test_parse_desktop_file_without_exec(tmp_path: Path, write_desktop: DesktopWriter) -> None:
    path = write_desktop(tmp_path, "bar.desktop", name="Bar")

    assert parse_desktop_file(path) is None


def test_parse_desktop_file_reports_unreadable_files(tmp_path: Path) -> None:
    directory_named_like_entry = tmp_path / "dir.desktop"
    directory_named_like_entry.mkdir()
    binary = tmp_path / "binary.desktop"
    binary.write_bytes(b"\xff\xfe\x00Name=x\n")

    with pytest.raises(EntryReadError):
        parse_desktop_file(directory_named_like_entry)
    with pytest.raises(EntryReadError):
        parse_desktop_file(binary)


def test_parse_shard_skips_bad_files(
    tmp_path: Path,
    write_desktop: DesktopWriter,
    capsys: pytest.CaptureFixture[str],
) -> None:
    good = write_desktop(tmp_path, "good.desktop", name="Good", command="good")
    broken = tmp_path / "broken.desktop"
    broken.mkdir()
    partial = write_desktop(tmp_path, "partial.desktop", name="Partial")

    entries = parse_shard([broken, good, partial], logger=build_logger(no_color=True))

    assert list(entries) == ["good.desktop"]
    assert entries["good.desktop"].source_path == good
    assert "broken.desktop" in capsys.readouterr().err


def test_parse_shard_later_duplicate_wins(tmp_path: Path, write_desktop: DesktopWriter) -> None:
    first = write_desktop(tmp_path / "a", "app.desktop", name="First", command="one")
    second = write_desktop(tmp_path / "b", "app.desktop", name="Second", command="two")

    entries = parse_shard([first, second])

    assert entries["app.desktop"].source_path == second


def test_partition_is_contiguous_and_bounded() -> None:
    entries = [Path(f"/apps/{index}.desktop") for index in range(14)]

    shards = partition(entries, 6)

    assert len(shards) <= 6
    assert [path for shard in shards for path in shard] == entries
    assert all(shards)


def test_partition_handles_fewer_entries_than_workers() -> None:
    entries = [Path("/apps/a.desktop"), Path("/apps/b.desktop")]

    assert partition(entries, 6) == [(entries[0],), (entries[1],)]
    assert partition([], 6) == []
    with pytest.raises(ValueError):
        partition(entries, 0)


def test_parallel_parser_populates_catalog(tmp_path: Path, write_desktop: DesktopWriter) -> None:
    for index in range(20):
        write_desktop(tmp_path, f"app{index:02d}.desktop", name=f"App {index}", command=f"app{index}")
    write_desktop(tmp_path, "noexec.desktop", name="NoExec")
    (tmp_path / "readme.txt").write_text("Name=x\nExec=y\n", encoding="utf-8")
    entries = sorted(tmp_path.iterdir())

    catalog = ParallelParser(6).run(entries, Catalog())

    assert len(catalog) == 20
    assert "noexec.desktop" not in catalog
    assert catalog.labels() == [f"App {index} (app{index})" for index in range(20)]


def test_parallel_parser_cross_directory_collision_is_deterministic(
    tmp_path: Path,
    write_desktop: DesktopWriter,
) -> None:
    early = write_desktop(tmp_path / "early", "shared.desktop", name="Early", command="early")
    late = write_desktop(tmp_path / "late", "shared.desktop", name="Late", command="late")
    filler = [write_desktop(tmp_path / "fill", f"f{index}.desktop", name="F", command=str(index)) for index in range(4)]
    entries = [early, *filler, late]

    for _ in range(5):
        catalog = ParallelParser(3).run(entries, Catalog())
        assert catalog["shared.desktop"].source_path == late


def test_parallel_parser_rejects_zero_workers() -> None:
    with pytest.raises(ValueError):
        ParallelParser(0)
