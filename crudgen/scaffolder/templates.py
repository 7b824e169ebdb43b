"""Jinja2 rendering of copied skeleton files.

Provides the TemplateRenderer class.  Skeletons are copied into the bundle
first and then rendered in place: the destination file is read, rendered
with the artifact's variables and written back.  The Jinja2 loader is rooted
at the skeleton directory so skeletons can ``{% include %}`` shared
fragments (e.g. ``actions/index.php``).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
)

from .errors import RenderError


# ---------------------------------------------------------------------------
# Skeleton directory discovery
# ---------------------------------------------------------------------------

DEFAULT_SKELETON_DIR = Path(__file__).parent / "skeleton" / "crud"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders skeleton files in place with Jinja2.

    Undefined variables are errors (``StrictUndefined``): a skeleton that
    references a variable the generator does not supply fails loudly instead
    of producing a half-empty file.  Supplying variables a skeleton never
    uses is fine.
    """

    def __init__(self, skeleton_dir: str | Path | None = None) -> None:
        if skeleton_dir is None:
            skeleton_dir = DEFAULT_SKELETON_DIR
        self.skeleton_dir = Path(skeleton_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.skeleton_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["route_name"] = _route_name_filter
        self.env.filters["entity_path"] = _entity_path_filter
        self.env.filters["humanize"] = _humanize_filter

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render_file(self, path: str | Path, variables: dict[str, Any]) -> Path:
        """Render the file at *path* with *variables*, rewriting it in place.

        Raises:
            RenderError: If the file cannot be read or written, has a syntax
                error, or references an undefined variable.
        """
        target = Path(path)
        try:
            source = target.read_text(encoding="utf-8")
            content = self.render_string(source, variables)
            target.write_text(content, encoding="utf-8")
        except TemplateError as exc:
            raise RenderError(target, str(exc)) from exc
        except OSError as exc:
            raise RenderError(target, exc.strerror or str(exc)) from exc
        return target


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _route_name_filter(value: str) -> str:
    """Turn a route prefix such as ``admin/post`` into ``admin_post``."""
    return value.strip("/").replace("/", "_")


def _entity_path_filter(value: str) -> str:
    """Convert ``Blog\\Post`` to ``Blog/Post``."""
    return value.replace("\\", "/")


def _humanize_filter(value: str) -> str:
    """Convert ``createdAt`` or ``created_at`` to ``Created at``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    words = re.sub(r"[-_\s]+", " ", s2).strip().lower()
    return words[:1].upper() + words[1:]
