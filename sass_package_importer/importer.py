"""Package importer - resolve ``~package`` specifiers to file URLs.

The importer holds nothing but its frozen options, so one instance can be
shared by every compilation, including ones running in parallel.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

from .manifest import find_manifest_entry
from .options import ImporterOptions
from .options import coerce_options
from .package_info import PackageInfo
from .package_info import resolve_package_info
from .settings import SettingsManager

logger = logging.getLogger(__name__)

Origin = Literal["sub_path", "manifest", "directory"]


@dataclass(frozen=True)
class Resolution:
    """A resolved specifier and how it was reached.

    Attributes:
        url: ``file://`` URL handed to the stylesheet engine
        package: Located package
        source: Path relative to the package directory ("" means the directory itself)
        origin: sub_path (named in the specifier), manifest (from package.json) or directory
        manifest_key: Manifest field the source came from, when origin is manifest
    """

    url: str
    package: PackageInfo
    source: str
    origin: Origin
    manifest_key: str | None = None


class PackageImporter:
    """File importer for stylesheet engines.

    The host calls :meth:`find_file_url` for every import it sees. Imports
    without the prefix return None so the host can try its other importers.
    """

    def __init__(self, options: ImporterOptions | None = None):
        self.options = options if options is not None else ImporterOptions()

    @classmethod
    def from_settings(cls, project_dir: Path | None = None, **overrides: Any) -> PackageImporter:
        """Build an importer from user/project/local settings files."""
        options = SettingsManager(project_dir=project_dir).get_options()
        return cls(options.merged(overrides))

    def handles(self, specifier: object) -> bool:
        """Whether ``specifier`` carries this importer's prefix."""
        return isinstance(specifier, str) and specifier.startswith(self.options.prefix)

    def resolve(self, specifier: str) -> Resolution | None:
        """Resolve ``specifier`` and report how the URL was built.

        Returns:
            Resolution, or None when the specifier is not a package specifier

        Raises:
            PackageNotFoundError: Strict mode, package directory not found
            ManifestLoadError: Strict mode, no sub-path and package.json unusable
            SearchRootError: A search root could not be checked
        """
        if not self.handles(specifier):
            return None

        package = resolve_package_info(specifier[len(self.options.prefix) :], self.options)

        manifest_key = None
        if package.sub_path:
            source = package.sub_path
            origin: Origin = "sub_path"
        else:
            entry = find_manifest_entry(package.package_name, package.package_directory, self.options)
            if entry is not None:
                source, manifest_key, origin = entry.source, entry.key, "manifest"
            else:
                source, origin = "", "directory"

        target = package.package_directory
        if source:
            # Sources are package-relative even when written with a leading slash
            target = Path(os.path.normpath(os.path.join(target, source.lstrip("/"))))
        url = target.as_uri()
        logger.debug(f"[importer:resolve] {specifier} -> {url} ({origin})")
        return Resolution(url=url, package=package, source=source, origin=origin, manifest_key=manifest_key)

    def find_file_url(self, specifier: str) -> str | None:
        """Return the ``file://`` URL for ``specifier``, or None if it is not ours."""
        resolution = self.resolve(specifier)
        return resolution.url if resolution else None

    resolve_specifier = find_file_url

    def __repr__(self) -> str:
        return f"PackageImporter(prefix={self.options.prefix!r}, strict={self.options.strict})"


def package_importer(
    options: ImporterOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> PackageImporter:
    """Create a package importer.

    Args:
        options: ImporterOptions, a mapping of option names (short names
            such as ``cwd`` or ``paths`` are accepted) or None for defaults
        **overrides: Individual options applied on top of ``options``

    Returns:
        PackageImporter ready to hand to a stylesheet engine

    Example:
        >>> importer = package_importer(paths=["node_modules", "vendor"])
        >>> importer.find_file_url("not-a-package")  # no prefix
    """
    return PackageImporter(coerce_options(options, **overrides))
