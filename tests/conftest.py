"""Shared test fixtures."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from dirsize import fs
from dirsize.core.errors import EntryNotFoundError
from dirsize.core.scale import GIB, MIB


class FakeFS:
    """In-memory stand-in for the stat/list capability.

    ``files`` maps a path to its byte length, ``dirs`` maps a path to the file
    sizes below it. Paths in ``unreadable`` raise PermissionError while listing.
    """

    def __init__(
        self,
        files: dict[str, int] | None = None,
        dirs: dict[str, list[int]] | None = None,
        unreadable: dict[str, list[str]] | None = None,
    ) -> None:
        self.files = files or {}
        self.dirs = dirs or {}
        self.unreadable = unreadable or {}
        self.stat_calls: list[str] = []

    def stat_entry(self, path: Path) -> tuple[bool, int]:
        key = str(path)
        self.stat_calls.append(key)
        if key in self.files:
            return False, self.files[key]
        if key in self.dirs:
            return True, 0
        raise EntryNotFoundError(path, "No such file or directory")

    def list_recursive(self, path: Path, on_error):
        key = str(path)
        yield from self.dirs[key]
        for sub in self.unreadable.get(key, []):
            on_error(Path(sub), PermissionError(13, "Permission denied", sub))


@pytest.fixture
def fake_fs() -> FakeFS:
    return FakeFS(
        files={
            "small.txt": 500,
            "medium.bin": 2 * MIB,
            "huge.iso": 3 * GIB,
            "empty.txt": 0,
        },
        dirs={
            "project": [100, 200, 300],
            "empty_dir": [],
            "locked": [4096],
        },
        unreadable={"locked": ["locked/secret"]},
    )


@pytest.fixture
def tree(tmp_path):
    """Create a small directory tree with known sizes."""
    root = tmp_path / "tree"
    root.mkdir()

    (root / "a.txt").write_bytes(b"a" * 100)
    (root / "b.txt").write_bytes(b"b" * 2500)

    docs = root / "docs"
    docs.mkdir()
    (docs / "readme.md").write_bytes(b"r" * 300)
    nested = docs / "nested" / "deeper"
    nested.mkdir(parents=True)
    (nested / "notes.txt").write_bytes(b"n" * 700)

    (root / "empty").mkdir()
    (root / "zero.txt").write_bytes(b"")
    return root


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp directory and return the settings file."""
    config = tmp_path / "config"
    config.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    return config / "dirsize" / "settings.json"


@pytest.fixture
def write_settings(isolate_settings):
    """Write a settings dict as the user's JSON settings file."""

    def _write(data: dict) -> None:
        isolate_settings.parent.mkdir(parents=True, exist_ok=True)
        isolate_settings.write_text(json.dumps(data))

    return _write


@pytest.fixture
def deny_scandir(monkeypatch):
    """Make os.scandir fail for the given directory names."""
    denied: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.path.basename(os.fspath(path)) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(fs.os, "scandir", fake_scandir)
    return denied
