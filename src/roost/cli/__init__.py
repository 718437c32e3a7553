"""Roost CLI — inspect resolved page routes.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys

from roost.config import DEFAULT_EXTENSIONS


def _add_resolver_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "src_dirs",
        nargs="+",
        metavar="SRC_DIR",
        help="Source directory of each layer, highest priority first",
    )
    parser.add_argument(
        "--pages-dir",
        default="pages",
        help="Routable subdirectory inside each source directory (default: pages)",
    )
    parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        default=None,
        help=f"Page file extension, repeatable (default: {' '.join(DEFAULT_EXTENSIONS)})",
    )
    parser.add_argument(
        "--names",
        action="store_true",
        help="Read route name overrides from page scripts",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — derive a nested route table from page files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print the resolved route tree")
    _add_resolver_arguments(routes_parser)
    routes_parser.add_argument("--json", action="store_true", help="Print routes as JSON")

    # -- roost manifest ---------------------------------------------------
    manifest_parser = subparsers.add_parser("manifest", help="Print the page-data manifest")
    _add_resolver_arguments(manifest_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "manifest":
        from roost.cli._manifest import run_manifest

        run_manifest(args)
