"""Filesystem operations used by the generator.

A thin wrapper around :mod:`pathlib` and :mod:`shutil` so the generator can
be exercised against a fake in tests.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import SkeletonMissingError


class Filesystem:
    """Creates directories and copies skeleton files into a bundle."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def mkdir(self, path: str | Path, mode: int = 0o755) -> Path:
        """Create *path* and any missing parents.

        Raises:
            OSError: If the directory cannot be created.
        """
        dir_path = Path(path)
        dir_path.mkdir(mode=mode, parents=True, exist_ok=True)
        return dir_path

    def copy(self, source: str | Path, target: str | Path) -> Path:
        """Copy *source* to *target*, creating the target's parent directories.

        Raises:
            SkeletonMissingError: If *source* does not exist.
            OSError: If *target* cannot be written.
        """
        src = Path(source)
        dst = Path(target)
        if not src.is_file():
            raise SkeletonMissingError(src)
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
        return dst
