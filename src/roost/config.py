"""Resolver configuration.

ResolverConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from roost.errors import ConfigurationError

DEFAULT_EXTENSIONS: tuple[str, ...] = (".vue", ".js", ".jsx", ".mjs", ".ts", ".tsx")
DEFAULT_META_FUNCTION = "definePageMeta"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Page route resolution settings. Immutable after creation.

    Override what you need::

        config = ResolverConfig(src_dirs=("app", "layers/base"), extract_route_names=True)
    """

    # Layers, highest priority first
    src_dirs: tuple[str | Path, ...] = (".",)
    pages_dir: str = "pages"
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    # Route name overrides declared inside page files
    extract_route_names: bool = False
    meta_function: str = DEFAULT_META_FUNCTION

    # In-memory file contents keyed by absolute path, consulted before disk
    sources: Mapping[str, str] = field(default_factory=dict)

    def page_dirs(self) -> list[Path]:
        """Return the routable directory of every layer, in priority order."""
        return [Path(src).resolve() / self.pages_dir for src in self.src_dirs]

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the settings cannot be used."""
        if not self.src_dirs:
            msg = "ResolverConfig.src_dirs must name at least one source directory."
            raise ConfigurationError(msg)
        for ext in self.extensions:
            if not ext.startswith("."):
                msg = f"Page extension {ext!r} must start with '.' (e.g. '.{ext}')."
                raise ConfigurationError(msg)
        if not self.meta_function:
            msg = "ResolverConfig.meta_function must not be empty."
            raise ConfigurationError(msg)
