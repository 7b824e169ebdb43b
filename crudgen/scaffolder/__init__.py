"""CRUD scaffolder -- copies skeletons into a bundle and renders them.

For one entity this generates a controller, ``index``/``show`` (and, with
write actions, ``new``/``edit``) Twig views, a functional test and, for the
``yml`` and ``xml`` formats, a routing configuration file.
"""

from crudgen.scaffolder.errors import (
    DestinationExistsError,
    RenderError,
    ScaffoldError,
    SkeletonMissingError,
    UnsupportedSchemaError,
)
from crudgen.scaffolder.filesystem import Filesystem
from crudgen.scaffolder.generator import CrudGenerator
from crudgen.scaffolder.metadata import load_entity_metadata
from crudgen.scaffolder.models import (
    Action,
    ArtifactKind,
    ConfigFormat,
    EntityMetadata,
    GenerationResult,
    TargetBundle,
    normalize_format,
)
from crudgen.scaffolder.templates import DEFAULT_SKELETON_DIR, TemplateRenderer

__all__ = [
    "Action",
    "ArtifactKind",
    "ConfigFormat",
    "CrudGenerator",
    "DEFAULT_SKELETON_DIR",
    "DestinationExistsError",
    "EntityMetadata",
    "Filesystem",
    "GenerationResult",
    "RenderError",
    "ScaffoldError",
    "SkeletonMissingError",
    "TargetBundle",
    "TemplateRenderer",
    "UnsupportedSchemaError",
    "load_entity_metadata",
    "normalize_format",
]
