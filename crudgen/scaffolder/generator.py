"""CRUD scaffolding orchestrator.

Takes a target bundle, an entity name and its metadata and generates a
controller, Twig views, a functional test and (for ``yml``/``xml``) a routing
configuration file by copying skeletons into the bundle and rendering them
in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable

from .errors import DestinationExistsError, UnsupportedSchemaError
from .filesystem import Filesystem
from .models import (
    ROUTING_FORMATS,
    Action,
    ArtifactKind,
    ConfigFormat,
    EntityMetadata,
    GenerationContext,
    GenerationResult,
    TargetBundle,
    build_actions,
    normalize_format,
)
from .templates import TemplateRenderer


# Artifact kinds that refuse to overwrite an existing destination.  Only the
# controller is protected by default; views, tests and routing files are
# overwritten silently.
DEFAULT_REFUSE_OVERWRITE: frozenset[ArtifactKind] = frozenset({ArtifactKind.CONTROLLER})

Step = Callable[[GenerationContext, GenerationResult], None]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class CrudGenerator:
    """Generates the CRUD controller, views, test and routing for an entity.

    The action set is fixed at construction: ``index`` and ``show`` always,
    plus ``new``, ``edit`` and ``delete`` when *with_write* is true.
    An empty *route_prefix* is derived from the entity name, so ``Blog\\Post``
    gets the ``blog_post`` prefix.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        skeleton_dir: str | Path,
        route_prefix: str,
        with_write: bool = False,
        *,
        renderer: TemplateRenderer | None = None,
        refuse_overwrite: Iterable[ArtifactKind] | None = None,
        source_extension: str = "php",
    ) -> None:
        self.filesystem = filesystem
        self.skeleton_dir = Path(skeleton_dir)
        self.route_prefix = route_prefix
        self.actions = build_actions(with_write)
        self.renderer = renderer or TemplateRenderer(self.skeleton_dir)
        self.refuse_overwrite = (
            DEFAULT_REFUSE_OVERWRITE
            if refuse_overwrite is None
            else frozenset(ArtifactKind(k) for k in refuse_overwrite)
        )
        self.source_extension = source_extension.lstrip(".")

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        bundle: TargetBundle,
        entity: str,
        metadata: EntityMetadata,
        format: str | ConfigFormat,
    ) -> GenerationResult:
        """Generate every CRUD artifact for *entity* into *bundle*.

        Args:
            bundle: The bundle receiving the generated files.
            entity: Entity name relative to the bundle's ``Entity``
                namespace, e.g. ``Post`` or ``Blog\\Post``.
            metadata: The entity's field names and identifier.
            format: ``yml``, ``xml`` or ``annotation``.  Anything else is
                treated as ``yml``.

        Returns:
            The files written, in order.

        Raises:
            UnsupportedSchemaError: The entity does not have a single ``id``
                identifier.  Nothing has been written.
            DestinationExistsError: The controller already exists.  Nothing
                has been written.
            SkeletonMissingError: A skeleton file is missing.
            RenderError: A copied skeleton could not be rendered.
        """
        check_identifier(metadata)

        context = self._build_context(bundle, entity, metadata, format)
        result = GenerationResult()
        for _name, step in self.steps():
            step(context, result)
        return result

    def steps(self) -> list[tuple[str, Step]]:
        """Return the ordered, named generation steps."""
        return [
            ("controller", self.generate_controller),
            ("views_dir", self.ensure_views_dir),
            ("index_view", self._view_step(Action.INDEX)),
            ("show_view", self._view_step(Action.SHOW)),
            ("new_view", self._view_step(Action.NEW)),
            ("edit_view", self._view_step(Action.EDIT)),
            ("test", self.generate_test),
            ("routing", self.generate_routing),
        ]

    # -- Context building --------------------------------------------------

    def _build_context(
        self,
        bundle: TargetBundle,
        entity: str,
        metadata: EntityMetadata,
        format: str | ConfigFormat,
    ) -> GenerationContext:
        return GenerationContext(
            bundle=bundle,
            entity=entity,
            metadata=metadata,
            actions=self.actions,
            format=normalize_format(format),
            route_prefix=self.route_prefix or default_route_prefix(entity),
            skeleton_dir=self.skeleton_dir,
        )

    # -- Steps -------------------------------------------------------------

    def generate_controller(self, ctx: GenerationContext, result: GenerationResult) -> None:
        """Generate ``Controller/<ns>/<Entity>Controller.<ext>``."""
        target = controller_path(ctx.bundle.path, ctx.entity, self.source_extension)
        self._emit(
            ArtifactKind.CONTROLLER,
            f"controller.{self.source_extension}",
            target,
            {
                "actions": ctx.action_names,
                "route_prefix": ctx.route_prefix,
                "dir": str(ctx.skeleton_dir),
                "bundle": ctx.bundle.name,
                "entity": ctx.entity,
                "entity_class": ctx.entity_class,
                "namespace": ctx.bundle.namespace,
                "entity_namespace": ctx.entity_namespace,
                "format": ctx.format.value,
            },
            result,
        )

    def ensure_views_dir(self, ctx: GenerationContext, result: GenerationResult) -> None:
        """Create ``Resources/views/<entity path>`` if it does not exist."""
        target = views_dir(ctx.bundle.path, ctx.entity)
        if not self.filesystem.exists(target):
            self.filesystem.mkdir(target, 0o755)

    def generate_view(
        self, action: Action, ctx: GenerationContext, result: GenerationResult
    ) -> None:
        """Generate ``<action>.html.twig`` when *action* is enabled."""
        if not ctx.has_action(action):
            return
        filename = f"{action.value}.html.twig"
        self._emit(
            ArtifactKind.VIEW,
            f"views/{filename}",
            views_dir(ctx.bundle.path, ctx.entity) / filename,
            _view_variables(action, ctx),
            result,
        )

    def generate_test(self, ctx: GenerationContext, result: GenerationResult) -> None:
        """Generate ``Tests/Controller/<ns>/<Entity>ControllerTest.<ext>``."""
        target = functional_test_path(ctx.bundle.path, ctx.entity, self.source_extension)
        self._emit(
            ArtifactKind.TEST,
            f"tests/test.{self.source_extension}",
            target,
            {
                "route_prefix": ctx.route_prefix,
                "entity": ctx.entity,
                "entity_class": ctx.entity_class,
                "namespace": ctx.bundle.namespace,
                "entity_namespace": ctx.entity_namespace,
                "actions": ctx.action_names,
                "dir": str(ctx.skeleton_dir),
            },
            result,
        )

    def generate_routing(self, ctx: GenerationContext, result: GenerationResult) -> None:
        """Generate ``Resources/config/<entity>.routing.<format>``.

        Skipped for the ``annotation`` format, where routes live in the
        controller itself.
        """
        if ctx.format not in ROUTING_FORMATS:
            return
        self._emit(
            ArtifactKind.ROUTING,
            f"config/routing.{ctx.format.value}",
            routing_path(ctx.bundle.path, ctx.entity, ctx.format),
            {
                "actions": ctx.action_names,
                "route_prefix": ctx.route_prefix,
                "bundle": ctx.bundle.name,
                "entity": ctx.entity,
            },
            result,
        )

    # -- Internals ---------------------------------------------------------

    def _view_step(self, action: Action) -> Step:
        def step(ctx: GenerationContext, result: GenerationResult) -> None:
            self.generate_view(action, ctx, result)

        return step

    def _emit(
        self,
        kind: ArtifactKind,
        skeleton: str,
        target: Path,
        variables: dict[str, Any],
        result: GenerationResult,
    ) -> None:
        """Copy *skeleton* to *target* and render it with *variables*."""
        if kind in self.refuse_overwrite and self.filesystem.exists(target):
            raise DestinationExistsError(target, kind.value)

        self.filesystem.copy(self.skeleton_dir / skeleton, target)
        self.renderer.render_file(target, variables)
        result.add(kind, target)


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------


def check_identifier(metadata: EntityMetadata) -> None:
    """Ensure the entity has exactly one identifier, named ``id``."""
    if len(metadata.identifier) != 1:
        raise UnsupportedSchemaError(
            "The CRUD generator does not support entity classes with "
            "multiple or missing primary keys (composite primary keys not supported).",
            metadata.identifier,
        )
    if metadata.identifier[0] != "id":
        raise UnsupportedSchemaError(
            'The CRUD generator expects the entity to expose a primary key '
            f'field named "id", got "{metadata.identifier[0]}".',
            metadata.identifier,
        )


# ---------------------------------------------------------------------------
# Destination paths
# ---------------------------------------------------------------------------


def _split_entity(entity: str) -> tuple[list[str], str]:
    parts = entity.split("\\")
    return [p for p in parts[:-1] if p], parts[-1]


def controller_path(bundle_path: str | Path, entity: str, extension: str = "php") -> Path:
    """``<bundle>/Controller/<ns>/<Entity>Controller.<ext>``."""
    namespace, entity_class = _split_entity(entity)
    return Path(bundle_path, "Controller", *namespace, f"{entity_class}Controller.{extension}")


def functional_test_path(bundle_path: str | Path, entity: str, extension: str = "php") -> Path:
    """``<bundle>/Tests/Controller/<ns>/<Entity>ControllerTest.<ext>``."""
    namespace, entity_class = _split_entity(entity)
    return Path(
        bundle_path, "Tests", "Controller", *namespace, f"{entity_class}ControllerTest.{extension}"
    )


def views_dir(bundle_path: str | Path, entity: str) -> Path:
    """``<bundle>/Resources/views/<entity with \\ as />``."""
    return Path(bundle_path, "Resources", "views", *entity.split("\\"))


def routing_path(bundle_path: str | Path, entity: str, format: ConfigFormat) -> Path:
    """``<bundle>/Resources/config/<entity_lowercased>.routing.<format>``."""
    basename = entity.replace("\\", "_").lower()
    return Path(bundle_path, "Resources", "config", f"{basename}.routing.{format.value}")


def default_route_prefix(entity: str) -> str:
    """Route prefix used when none is configured, e.g. ``blog_post``."""
    return entity.replace("\\", "_").lower()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _view_variables(action: Action, ctx: GenerationContext) -> dict[str, Any]:
    """Variables passed to each view skeleton."""
    variables: dict[str, Any] = {
        "dir": str(ctx.skeleton_dir),
        "entity": ctx.entity,
        "actions": ctx.action_names,
        "route_prefix": ctx.route_prefix,
    }
    if action in (Action.INDEX, Action.SHOW):
        variables["fields"] = list(ctx.metadata.field_names)
    if action is Action.INDEX:
        variables["record_actions"] = ctx.record_actions
    return variables
