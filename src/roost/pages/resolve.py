"""Page route resolution across source layers.

Scans each layer's pages directory, merges the results (earlier layers
win on identical relative paths), builds the route forest and
finalizes it.

Usage::

    config = ResolverConfig(src_dirs=("app", "layers/base"))
    routes = anyio.run(resolve_page_routes, config)
"""

import logging
from functools import partial
from pathlib import Path

import anyio
import anyio.to_thread

from roost.config import ResolverConfig
from roost.pages.meta import extract_route_name
from roost.routing.finalize import prepare_routes
from roost.routing.tree import RouteNode, ScannedFile, build_route_tree, unique_by

logger = logging.getLogger("roost.pages")


def scan_pages(pages_dir: str | Path, extensions: tuple[str, ...]) -> list[ScannedFile]:
    """Recursively list page files under *pages_dir*.

    Returns files only, in no particular order.  A missing directory
    yields an empty list: not every layer has pages.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        logger.debug("No pages directory at %s", root)
        return []

    files: list[ScannedFile] = []
    for item in root.rglob("*"):
        if not item.is_file() or item.suffix not in extensions:
            continue
        files.append(
            ScannedFile(
                relative_path=item.relative_to(root).as_posix(),
                absolute_path=str(item),
            )
        )
    return files


async def scan_layers(config: ResolverConfig) -> list[ScannedFile]:
    """Scan every layer concurrently; results keep layer order."""
    page_dirs = config.page_dirs()
    results: list[list[ScannedFile]] = [[] for _ in page_dirs]

    async def _scan(index: int, pages_dir: Path) -> None:
        results[index] = await anyio.to_thread.run_sync(
            partial(scan_pages, pages_dir, config.extensions)
        )

    async with anyio.create_task_group() as tg:
        for index, pages_dir in enumerate(page_dirs):
            tg.start_soon(_scan, index, pages_dir)

    files = [file for layer in results for file in layer]
    logger.debug("Scanned %d page files across %d layers", len(files), len(page_dirs))
    return files


def resolve_routes(files: list[ScannedFile], config: ResolverConfig) -> list[RouteNode]:
    """Build and finalize the route forest for already scanned files.

    Files are sorted by relative path (stable, so layer order breaks
    ties) and de-duplicated before building.
    """
    ordered = sorted(files, key=lambda file: file.relative_path)
    extract_name = None
    if config.extract_route_names:
        extract_name = partial(extract_route_name, function=config.meta_function)

    routes = build_route_tree(
        unique_by(ordered, lambda file: file.relative_path),
        extract_name=extract_name,
        sources=config.sources,
    )
    prepare_routes(routes, meta_function=config.meta_function)
    return unique_by(routes, lambda route: route.path)


async def resolve_page_routes(config: ResolverConfig) -> list[RouteNode]:
    """Resolve the finalized route forest for all configured layers.

    Raises:
        ConfigurationError: If *config* is invalid.
        SegmentParseError: If any page file name is malformed.
    """
    config.validate()
    files = await scan_layers(config)
    return resolve_routes(files, config)
