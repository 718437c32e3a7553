"""Tests for the roost package surface."""

import tomllib
from pathlib import Path

import roost

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


class TestPackage:
    def test_version_matches_project_metadata(self) -> None:
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f)["project"]
        assert roost.__version__ == project["version"]

    def test_lazy_exports(self) -> None:
        from roost.config import ResolverConfig

        assert roost.ResolverConfig is ResolverConfig
