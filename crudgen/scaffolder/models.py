"""Data models for CRUD scaffolding.

Defines the entity metadata, target bundle, action set, configuration format
and the per-run generation context consumed by
:class:`~crudgen.scaffolder.generator.CrudGenerator`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Action(str, Enum):
    """A scaffolded controller operation."""
    INDEX = "index"
    SHOW = "show"
    NEW = "new"
    EDIT = "edit"
    DELETE = "delete"


class ConfigFormat(str, Enum):
    """Routing configuration format of the generated bundle."""
    YML = "yml"
    XML = "xml"
    ANNOTATION = "annotation"


class ArtifactKind(str, Enum):
    """The kinds of file a generation run produces."""
    CONTROLLER = "controller"
    VIEW = "view"
    TEST = "test"
    ROUTING = "routing"


# Canonical ordering of every action; ActionSet members are always emitted
# in this order regardless of how they were requested.
ALL_ACTIONS: tuple[Action, ...] = (
    Action.INDEX,
    Action.SHOW,
    Action.NEW,
    Action.EDIT,
    Action.DELETE,
)

READ_ACTIONS: frozenset[Action] = frozenset({Action.INDEX, Action.SHOW})
WRITE_ACTIONS: frozenset[Action] = frozenset({Action.NEW, Action.EDIT, Action.DELETE})
RECORD_ACTIONS: frozenset[Action] = frozenset({Action.SHOW, Action.EDIT, Action.DELETE})

ROUTING_FORMATS: frozenset[ConfigFormat] = frozenset({ConfigFormat.YML, ConfigFormat.XML})


def normalize_format(value: str | ConfigFormat | None) -> ConfigFormat:
    """Return the canonical :class:`ConfigFormat` for *value*.

    Unrecognised values (including ``None``) fall back to ``yml`` instead of
    raising.  Use :func:`is_known_format` to detect the fallback.
    """
    if isinstance(value, ConfigFormat):
        return value
    try:
        return ConfigFormat(value)
    except ValueError:
        return ConfigFormat.YML


def is_known_format(value: str | ConfigFormat | None) -> bool:
    """Whether *value* names one of the recognised formats."""
    return isinstance(value, ConfigFormat) or value in {f.value for f in ConfigFormat}


def build_actions(with_write: bool = False) -> tuple[Action, ...]:
    """Build the ordered action set.

    ``index`` and ``show`` are always enabled; ``new``, ``edit`` and
    ``delete`` are enabled together when *with_write* is true.
    """
    enabled = set(READ_ACTIONS)
    if with_write:
        enabled |= WRITE_ACTIONS
    return tuple(a for a in ALL_ACTIONS if a in enabled)


def record_actions(actions: tuple[Action, ...]) -> list[str]:
    """Return the per-record actions (show/edit/delete) in *actions* order."""
    return [a.value for a in actions if a in RECORD_ACTIONS]


# ---------------------------------------------------------------------------
# Entity & bundle descriptors
# ---------------------------------------------------------------------------

class EntityMetadata(BaseModel):
    """Read-only description of the entity being scaffolded."""
    model_config = ConfigDict(frozen=True)

    field_names: list[str] = Field(
        default_factory=list,
        description="Mapped field names, in display order",
    )
    identifier: list[str] = Field(
        default_factory=lambda: ["id"],
        description="Identifier (primary key) field names",
    )


class TargetBundle(BaseModel):
    """The bundle the CRUD artifacts are generated into."""
    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Bundle root directory")
    name: str = Field(..., description="Bundle name, e.g. 'AcmeBlogBundle'")
    namespace: str = Field(..., description="Bundle namespace, e.g. 'Acme\\BlogBundle'")


# ---------------------------------------------------------------------------
# Per-run state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationContext:
    """Everything a single ``generate()`` call needs, bundled together."""

    bundle: TargetBundle
    entity: str
    metadata: EntityMetadata
    actions: tuple[Action, ...]
    format: ConfigFormat
    route_prefix: str
    skeleton_dir: Path

    @property
    def entity_class(self) -> str:
        """Last namespace segment, e.g. ``Post`` for ``Blog\\Post``."""
        return self.entity.split("\\")[-1]

    @property
    def entity_namespace(self) -> str:
        """Namespace part, e.g. ``Blog`` for ``Blog\\Post`` (may be empty)."""
        return "\\".join(self.entity.split("\\")[:-1])

    @property
    def action_names(self) -> list[str]:
        return [a.value for a in self.actions]

    @property
    def record_actions(self) -> list[str]:
        return record_actions(self.actions)

    def has_action(self, action: Action) -> bool:
        return action in self.actions


@dataclass
class GenerationResult:
    """Files written by a generation run, in the order they were written."""

    written: list[tuple[ArtifactKind, Path]] = field(default_factory=list)

    def add(self, kind: ArtifactKind, path: Path) -> None:
        self.written.append((kind, path))

    def paths(self, kind: ArtifactKind | None = None) -> list[Path]:
        """Return written paths, optionally restricted to one artifact kind."""
        return [p for k, p in self.written if kind is None or k == kind]
