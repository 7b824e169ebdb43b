"""Shared pytest fixtures for the crudgen test suite.

Provides reusable fixtures for:
- A temporary target bundle
- Sample entity metadata
- A minimal skeleton directory whose files echo every variable they receive
- Generator factories wired to either the minimal or the packaged skeletons
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from crudgen.scaffolder.filesystem import Filesystem
from crudgen.scaffolder.generator import CrudGenerator
from crudgen.scaffolder.models import EntityMetadata, TargetBundle
from crudgen.scaffolder.templates import DEFAULT_SKELETON_DIR


# ---------------------------------------------------------------------------
# Minimal skeletons
# ---------------------------------------------------------------------------

# Each skeleton prints the variables it is rendered with, one per line, so
# tests can assert on exactly what the generator passed in.
MINIMAL_SKELETONS: dict[str, str] = {
    "controller.php": (
        "kind=controller\n"
        "actions={{ actions|join(',') }}\n"
        "route_prefix={{ route_prefix }}\n"
        "dir={{ dir }}\n"
        "bundle={{ bundle }}\n"
        "entity={{ entity }}\n"
        "entity_class={{ entity_class }}\n"
        "namespace={{ namespace }}\n"
        "entity_namespace={{ entity_namespace }}\n"
        "format={{ format }}\n"
    ),
    "tests/test.php": (
        "kind=test\n"
        "actions={{ actions|join(',') }}\n"
        "route_prefix={{ route_prefix }}\n"
        "entity={{ entity }}\n"
        "entity_class={{ entity_class }}\n"
        "namespace={{ namespace }}\n"
        "entity_namespace={{ entity_namespace }}\n"
    ),
    "views/index.html.twig": (
        "kind=index\n"
        "entity={{ entity }}\n"
        "fields={{ fields|join(',') }}\n"
        "actions={{ actions|join(',') }}\n"
        "record_actions={{ record_actions|join(',') }}\n"
        "route_prefix={{ route_prefix }}\n"
    ),
    "views/show.html.twig": (
        "kind=show\n"
        "entity={{ entity }}\n"
        "fields={{ fields|join(',') }}\n"
        "actions={{ actions|join(',') }}\n"
    ),
    "views/new.html.twig": "kind=new\nentity={{ entity }}\nroute_prefix={{ route_prefix }}\n",
    "views/edit.html.twig": "kind=edit\nentity={{ entity }}\nactions={{ actions|join(',') }}\n",
    "config/routing.yml": (
        "kind=routing.yml\n"
        "actions={{ actions|join(',') }}\n"
        "bundle={{ bundle }}\n"
        "entity={{ entity }}\n"
    ),
    "config/routing.xml": (
        "kind=routing.xml\n"
        "actions={{ actions|join(',') }}\n"
        "bundle={{ bundle }}\n"
        "entity={{ entity }}\n"
    ),
}


def read_vars(path: Path) -> dict[str, str]:
    """Parse a file rendered from a minimal skeleton into a dict."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, _, value = line.partition("=")
        result[key] = value
    return result


def list_files(root: Path) -> set[str]:
    """Every file under *root*, as POSIX paths relative to it."""
    if not root.exists():
        return set()
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def skeleton_dir(tmp_path: Path) -> Path:
    """A temporary skeleton directory populated with MINIMAL_SKELETONS."""
    root = tmp_path / "skeleton"
    for rel, content in MINIMAL_SKELETONS.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def bundle(tmp_path: Path) -> TargetBundle:
    """An empty bundle under ``tmp_path/src/Acme/BlogBundle``."""
    return TargetBundle(
        path=tmp_path / "src" / "Acme" / "BlogBundle",
        name="AcmeBlogBundle",
        namespace="Acme\\BlogBundle",
    )


@pytest.fixture
def metadata() -> EntityMetadata:
    """A simple blog post entity."""
    return EntityMetadata(
        field_names=["id", "title", "body", "publishedAt"],
        identifier=["id"],
    )


@pytest.fixture
def make_generator(skeleton_dir: Path) -> Callable[..., CrudGenerator]:
    """Factory building a generator over the minimal skeletons."""

    def _make(with_write: bool = False, **kwargs) -> CrudGenerator:
        return CrudGenerator(Filesystem(), skeleton_dir, "post", with_write, **kwargs)

    return _make


@pytest.fixture
def make_real_generator() -> Callable[..., CrudGenerator]:
    """Factory building a generator over the packaged skeletons."""

    def _make(with_write: bool = False, route_prefix: str = "post") -> CrudGenerator:
        return CrudGenerator(Filesystem(), DEFAULT_SKELETON_DIR, route_prefix, with_write)

    return _make


@pytest.fixture
def rendered_vars() -> Callable[[Path], dict[str, str]]:
    """The ``read_vars`` helper, as a fixture."""
    return read_vars


@pytest.fixture
def files_under() -> Callable[[Path], set[str]]:
    """The ``list_files`` helper, as a fixture."""
    return list_files
