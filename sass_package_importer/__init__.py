"""Resolve ``~package`` imports in stylesheets to files inside installed packages.

Public API:
- package_importer / PackageImporter: the file importer handed to a stylesheet compiler
- ImporterOptions: importer configuration
- parse_specifier, resolve_package_path, resolve_package_info,
  find_manifest_entry, resolve_manifest_entry: the individual resolution steps
- PackageImporterError and subclasses: strict-mode failures
"""

from .errors import ManifestLoadError
from .errors import PackageImporterError
from .errors import PackageNotFoundError
from .errors import SearchRootError
from .host import file_url_to_path
from .host import libsass_importer
from .host import register_importer
from .importer import PackageImporter
from .importer import Resolution
from .importer import package_importer
from .manifest import ManifestEntry
from .manifest import find_manifest_entry
from .manifest import load_manifest
from .manifest import resolve_manifest_entry
from .options import ImporterOptions
from .package_info import PackageInfo
from .package_info import resolve_package_info
from .search_paths import resolve_package_path
from .specifier import ParsedSpecifier
from .specifier import parse_specifier

__all__ = [
    "ImporterOptions",
    "ManifestEntry",
    "ManifestLoadError",
    "PackageImporter",
    "PackageImporterError",
    "PackageInfo",
    "PackageNotFoundError",
    "ParsedSpecifier",
    "Resolution",
    "SearchRootError",
    "file_url_to_path",
    "find_manifest_entry",
    "libsass_importer",
    "load_manifest",
    "package_importer",
    "parse_specifier",
    "register_importer",
    "resolve_manifest_entry",
    "resolve_package_info",
    "resolve_package_path",
]
