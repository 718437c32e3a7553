"""Tests for roost.errors — exception hierarchy."""

from roost.errors import (
    ConfigurationError,
    ManifestNotInstalledError,
    RoostError,
    SegmentParseError,
)


class TestHierarchy:
    def test_all_derive_from_roost_error(self) -> None:
        for exc_type in (ConfigurationError, SegmentParseError, ManifestNotInstalledError):
            assert issubclass(exc_type, RoostError)


class TestSegmentParseError:
    def test_str_without_file(self) -> None:
        exc = SegmentParseError("Empty param", "[]")
        assert str(exc) == "Empty param in segment '[]'"

    def test_with_file(self) -> None:
        exc = SegmentParseError('Unfinished param "id"', "[id").with_file("posts/[id.vue")

        assert exc.file == "posts/[id.vue"
        assert exc.segment == "[id"
        assert str(exc) == "Unfinished param \"id\" in segment '[id' in 'posts/[id.vue'"
