"""Roost exception hierarchy.

Shared across the tokenizer, tree builder, resolver and CLI so every
module raises and catches the same types.
"""


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when resolver configuration is invalid.

    Typically raised by ``ResolverConfig.validate()`` before a scan.
    """


class SegmentParseError(RoostError):
    """A path segment uses malformed bracket syntax.

    Fatal to the whole derivation: a misnamed page file would produce an
    unusable route, so the build stops instead of emitting it.

    Attributes:
        reason: Short description (``"Empty param"``, ``'Unfinished param "id"'``).
        segment: The offending path segment, extension stripped.
        file: Relative path of the page file, once known.
    """

    def __init__(self, reason: str, segment: str, file: str | None = None) -> None:
        self.reason = reason
        self.segment = segment
        self.file = file
        super().__init__(reason)

    def with_file(self, file: str) -> "SegmentParseError":
        """Return a copy of this error attributed to *file*."""
        return SegmentParseError(self.reason, self.segment, file)

    def __str__(self) -> str:
        where = f" in {self.file!r}" if self.file else ""
        return f"{self.reason} in segment {self.segment!r}{where}"


class ManifestNotInstalledError(RoostError):
    """Raised when kida is not installed for manifest rendering."""
