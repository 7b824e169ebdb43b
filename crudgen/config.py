"""crudgen configuration.

Typed generator settings built on Pydantic v2 models so they can be validated
at construction time and serialised to/from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from crudgen.scaffolder.filesystem import Filesystem
from crudgen.scaffolder.generator import CrudGenerator
from crudgen.scaffolder.models import ArtifactKind
from crudgen.scaffolder.templates import DEFAULT_SKELETON_DIR


_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Settings for a CRUD generation run.

    Instances are typically created once by the CLI (from flags, a saved
    JSON file or the environment) and turned into a generator with
    :meth:`build_generator`.
    """

    skeleton_dir: Path = Field(
        default=DEFAULT_SKELETON_DIR, description="Directory holding the CRUD skeletons"
    )
    route_prefix: str = Field(default="", description="Prefix for generated route names and URLs")
    with_write: bool = Field(
        default=False, description="Generate the new, edit and delete actions"
    )
    format: str = Field(
        default="annotation", description="Routing configuration format (yml, xml, annotation)"
    )
    source_extension: str = Field(default="php", min_length=1)
    refuse_overwrite: list[ArtifactKind] = Field(
        default_factory=lambda: [ArtifactKind.CONTROLLER],
        description="Artifact kinds that must not overwrite an existing file",
    )

    @field_validator("route_prefix")
    @classmethod
    def _strip_route_prefix(cls, value: str) -> str:
        return value.strip("/")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build_generator(self, filesystem: Filesystem | None = None) -> CrudGenerator:
        """Create a :class:`CrudGenerator` from these settings."""
        return CrudGenerator(
            filesystem or Filesystem(),
            self.skeleton_dir,
            self.route_prefix,
            self.with_write,
            refuse_overwrite=self.refuse_overwrite,
            source_extension=self.source_extension,
        )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            CRUDGEN_SKELETON_DIR, CRUDGEN_ROUTE_PREFIX, CRUDGEN_WITH_WRITE,
            CRUDGEN_FORMAT, CRUDGEN_SOURCE_EXTENSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRUDGEN_SKELETON_DIR"):
            kwargs["skeleton_dir"] = Path(os.environ["CRUDGEN_SKELETON_DIR"])
        if os.environ.get("CRUDGEN_ROUTE_PREFIX"):
            kwargs["route_prefix"] = os.environ["CRUDGEN_ROUTE_PREFIX"]
        if os.environ.get("CRUDGEN_WITH_WRITE"):
            kwargs["with_write"] = os.environ["CRUDGEN_WITH_WRITE"].strip().lower() in _TRUTHY
        if os.environ.get("CRUDGEN_FORMAT"):
            kwargs["format"] = os.environ["CRUDGEN_FORMAT"]
        if os.environ.get("CRUDGEN_SOURCE_EXTENSION"):
            kwargs["source_extension"] = os.environ["CRUDGEN_SOURCE_EXTENSION"]
        return cls(**kwargs)
