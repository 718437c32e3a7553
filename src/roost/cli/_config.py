"""Build a ResolverConfig from parsed CLI arguments."""

import argparse

from roost.config import DEFAULT_EXTENSIONS, ResolverConfig


def config_from_args(args: argparse.Namespace) -> ResolverConfig:
    return ResolverConfig(
        src_dirs=tuple(args.src_dirs),
        pages_dir=args.pages_dir,
        extensions=tuple(args.extensions) if args.extensions else DEFAULT_EXTENSIONS,
        extract_route_names=args.names,
    )
