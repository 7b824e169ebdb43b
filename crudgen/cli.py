"""Command-line entry point for crudgen.

Collects the bundle, entity and format from the command line, builds a
generator from :class:`~crudgen.config.GeneratorConfig` and runs it once.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from crudgen.config import GeneratorConfig
from crudgen.scaffolder.errors import ScaffoldError
from crudgen.scaffolder.generator import default_route_prefix
from crudgen.scaffolder.metadata import load_entity_metadata
from crudgen.scaffolder.models import TargetBundle, is_known_format, normalize_format
from crudgen.utils import (
    print_error,
    print_generation_result,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crudgen",
        description="Generate a CRUD controller, views, test and routing for an entity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crudgen Post --bundle-path src/Acme/BlogBundle --bundle-name AcmeBlogBundle \\\n"
            "      --bundle-namespace 'Acme\\BlogBundle' --metadata post.yml\n"
            "  crudgen 'Blog\\Post' ... --format yml --route-prefix admin/post --with-write\n"
        ),
    )

    parser.add_argument("entity", help="Entity name relative to the bundle, e.g. Post or Blog\\Post")
    parser.add_argument("--bundle-path", required=True, help="Bundle root directory")
    parser.add_argument("--bundle-name", required=True, help="Bundle name, e.g. AcmeBlogBundle")
    parser.add_argument(
        "--bundle-namespace", required=True, help="Bundle namespace, e.g. Acme\\BlogBundle"
    )
    parser.add_argument(
        "--metadata", required=True, help="Entity description file (.yml, .yaml or .json)"
    )
    parser.add_argument(
        "--format",
        default=None,
        help="Routing format: yml, xml or annotation (default: annotation)",
    )
    parser.add_argument("--route-prefix", default=None, help="Route name and URL prefix")
    parser.add_argument(
        "--with-write",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate the new, edit and delete actions (--no-with-write turns them off)",
    )
    parser.add_argument("--skeleton-dir", default=None, help="Override the skeleton directory")
    parser.add_argument(
        "--config", default=None, help="JSON configuration file (default: environment)"
    )
    return parser


def load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Resolve settings: config file or environment, then CLI overrides."""
    config = GeneratorConfig.load(Path(args.config)) if args.config else GeneratorConfig.from_env()

    overrides: dict[str, object] = {}
    if args.format is not None:
        overrides["format"] = args.format
    if args.route_prefix is not None:
        overrides["route_prefix"] = args.route_prefix
    if args.with_write is not None:
        overrides["with_write"] = args.with_write
    if args.skeleton_dir is not None:
        overrides["skeleton_dir"] = Path(args.skeleton_dir)
    if overrides:
        config = GeneratorConfig.model_validate({**config.model_dump(), **overrides})
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``crudgen`` / ``python -m crudgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
        metadata = load_entity_metadata(args.metadata)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        return 1

    if not is_known_format(config.format):
        print_warning(
            f"Unknown format '{config.format}', falling back to "
            f"'{normalize_format(config.format).value}'"
        )

    bundle = TargetBundle(
        path=Path(args.bundle_path),
        name=args.bundle_name,
        namespace=args.bundle_namespace,
    )

    print_summary_table(
        {
            "Bundle": f"{bundle.name} ({bundle.path})",
            "Entity": args.entity,
            "Format": normalize_format(config.format).value,
            "Route prefix": config.route_prefix or default_route_prefix(args.entity),
            "Write actions": "yes" if config.with_write else "no",
        },
        title="CRUD generation",
    )

    generator = config.build_generator()
    try:
        result = generator.generate(bundle, args.entity, metadata, config.format)
    except ScaffoldError as exc:
        print_error(f"{type(exc).__name__}: {exc}")
        return 1
    except OSError as exc:
        print_error(f"Error: {exc}")
        return 1

    print_generation_result(result, bundle.path)
    print_success(f"Generated CRUD for {args.entity}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
