"""``roost manifest`` — print the page-data import manifest."""

import argparse
import sys

import anyio

from roost.cli._config import config_from_args
from roost.errors import RoostError
from roost.pages.manifest import create_data_manifest


def run_manifest(args: argparse.Namespace) -> None:
    """Resolve routes for ``args.src_dirs`` and print the data manifest."""
    config = config_from_args(args)
    try:
        manifest = anyio.run(create_data_manifest, config)
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(manifest, end="")
