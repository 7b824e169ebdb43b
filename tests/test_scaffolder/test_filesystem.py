"""Tests for the filesystem wrapper (crudgen.scaffolder.filesystem)."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from crudgen.scaffolder.errors import SkeletonMissingError
from crudgen.scaffolder.filesystem import Filesystem

pytestmark = pytest.mark.unit


@pytest.fixture
def fs() -> Filesystem:
    return Filesystem()


class TestExists:
    def test_file_and_dir(self, fs, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("x", encoding="utf-8")
        assert fs.exists(f)
        assert fs.exists(tmp_path)
        assert fs.exists(str(f))

    def test_missing(self, fs, tmp_path: Path):
        assert not fs.exists(tmp_path / "missing")


class TestMkdir:
    def test_creates_parents(self, fs, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        returned = fs.mkdir(target)
        assert returned == target
        assert target.is_dir()

    def test_existing_is_fine(self, fs, tmp_path: Path):
        fs.mkdir(tmp_path)
        assert tmp_path.is_dir()

    def test_mode(self, fs, tmp_path: Path):
        target = tmp_path / "views"
        fs.mkdir(target, 0o700)
        assert stat.S_IMODE(target.stat().st_mode) & 0o077 == 0


class TestCopy:
    def test_copies_bytes_and_creates_parents(self, fs, tmp_path: Path):
        src = tmp_path / "skeleton.php"
        src.write_bytes(b"<?php\n{{ entity }}\n")
        dst = tmp_path / "bundle" / "Controller" / "PostController.php"

        returned = fs.copy(src, dst)

        assert returned == dst
        assert dst.read_bytes() == b"<?php\n{{ entity }}\n"

    def test_overwrites_existing(self, fs, tmp_path: Path):
        src = tmp_path / "new.txt"
        src.write_text("new", encoding="utf-8")
        dst = tmp_path / "old.txt"
        dst.write_text("old", encoding="utf-8")
        fs.copy(src, dst)
        assert dst.read_text(encoding="utf-8") == "new"

    def test_missing_source(self, fs, tmp_path: Path):
        with pytest.raises(SkeletonMissingError) as exc_info:
            fs.copy(tmp_path / "nope.php", tmp_path / "out.php")
        assert exc_info.value.path == tmp_path / "nope.php"
        assert not (tmp_path / "out.php").exists()

    def test_directory_source_is_missing(self, fs, tmp_path: Path):
        with pytest.raises(SkeletonMissingError):
            fs.copy(tmp_path, tmp_path / "out.php")
