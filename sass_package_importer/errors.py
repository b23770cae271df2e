"""Errors raised by the package importer.

Only strict mode raises. In the default (loose) mode every failure is
recovered locally and the host stylesheet engine reports the final
"file not found" when it reads the returned URL.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class PackageImporterError(Exception):
    """Base class for all package importer failures."""


class PackageNotFoundError(PackageImporterError):
    """No search root contains a directory for the package."""

    def __init__(self, package_name: str, search_roots: Sequence[str]):
        self.package_name = package_name
        self.search_roots = tuple(search_roots)
        roots = ", ".join(self.search_roots) or "(none)"
        super().__init__(f"Failed to resolve an existing path for package '{package_name}' (searched: {roots})")


class ManifestLoadError(PackageImporterError):
    """The package manifest is missing, unreadable or not a JSON object."""

    def __init__(self, package_name: str, package_directory: Path, reason: str):
        self.package_name = package_name
        self.package_directory = package_directory
        self.reason = reason
        super().__init__(f"Failed to load package.json for '{package_name}' in {package_directory}: {reason}")


class SearchRootError(PackageImporterError):
    """Probing a search root failed for a reason other than "does not exist"."""

    def __init__(self, search_root: str, package_name: str, path: Path, reason: str):
        self.search_root = search_root
        self.package_name = package_name
        self.path = path
        super().__init__(
            f"Cannot check '{path}' for package '{package_name}' under search root '{search_root}': {reason}"
        )
