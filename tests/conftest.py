"""Shared fixtures for package importer tests."""

import json
from pathlib import Path

import pytest

from sass_package_importer.options import ImporterOptions


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with an empty node_modules directory."""
    (tmp_path / "node_modules").mkdir()
    return tmp_path


@pytest.fixture
def make_package(project: Path):
    """Factory creating a package directory (optionally with package.json).

    Usage: make_package("@org/name", {"scss": "index.scss"}, root="vendor")
    Pass manifest=None to create no package.json, or a str to write raw content.
    """

    def _make(name: str, manifest: dict | str | None = None, root: str | Path = "node_modules") -> Path:
        root_path = Path(root) if Path(root).is_absolute() else project / root
        package_dir = root_path / name
        package_dir.mkdir(parents=True, exist_ok=True)
        if isinstance(manifest, str):
            (package_dir / "package.json").write_text(manifest, encoding="utf-8")
        elif manifest is not None:
            (package_dir / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        return package_dir

    return _make


@pytest.fixture
def options(project: Path) -> ImporterOptions:
    """Default options rooted at the test project."""
    return ImporterOptions(working_directory=project)


@pytest.fixture
def strict_options(project: Path) -> ImporterOptions:
    """Strict options rooted at the test project."""
    return ImporterOptions(working_directory=project, strict=True)
