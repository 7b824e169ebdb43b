"""Exceptions raised while scaffolding CRUD artifacts.

Every error derives from :class:`ScaffoldError` so callers (the CLI in
particular) can catch the whole family in one place.  Each carries the
offending path or identifier so the message can point at what to fix.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class UnsupportedSchemaError(ScaffoldError):
    """Raised when the entity's identifier shape cannot be scaffolded."""

    def __init__(self, message: str, identifier: list[str]) -> None:
        self.identifier = list(identifier)
        super().__init__(message)


class DestinationExistsError(ScaffoldError):
    """Raised when an artifact that refuses overwrites already exists."""

    def __init__(self, path: Path, kind: str) -> None:
        self.path = Path(path)
        self.kind = kind
        super().__init__(f"Unable to generate the {kind} as it already exists: {self.path}")


class SkeletonMissingError(ScaffoldError):
    """Raised when a skeleton file is not present in the skeleton directory."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Skeleton file not found: {self.path}")


class RenderError(ScaffoldError):
    """Raised when a copied skeleton cannot be rendered in place."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to render {self.path}: {reason}")
