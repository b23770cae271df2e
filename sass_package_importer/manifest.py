"""Pick a stylesheet entry point from a package manifest.

Manifest keys are checked in priority order. A key is used only when its
value is a non-empty string whose extension is empty or allowed, so an
earlier key pointing at, say, a ``.less`` file is skipped in favour of a
later key pointing at a ``.css`` file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from pathlib import PurePosixPath
from typing import Any

from .errors import ManifestLoadError
from .options import MANIFEST_FILENAME
from .options import ImporterOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManifestEntry:
    """Accepted manifest field and its value (relative to the package directory)."""

    key: str
    source: str


def load_manifest(package_directory: Path, package_name: str = "") -> dict[str, Any]:
    """Read and parse ``package.json`` from ``package_directory``.

    Raises:
        ManifestLoadError: File missing or unreadable, invalid JSON, or not a JSON object
    """
    manifest_path = package_directory / MANIFEST_FILENAME
    name = package_name or package_directory.name

    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestLoadError(name, package_directory, e.strerror or str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestLoadError(name, package_directory, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ManifestLoadError(name, package_directory, f"expected a JSON object, got {type(data).__name__}")
    return data


def select_entry(manifest: dict[str, Any], options: ImporterOptions) -> ManifestEntry | None:
    """Return the first manifest key whose value is an acceptable stylesheet path."""
    for key in options.manifest_keys:
        value = manifest.get(key)
        if not isinstance(value, str) or not value:
            continue

        ext = PurePosixPath(value).suffix
        if ext and ext not in options.allowed_extensions:
            logger.debug(f"[importer:manifest] skipping '{key}': {value} ({ext} not allowed)")
            continue

        return ManifestEntry(key=key, source=value)

    return None


def find_manifest_entry(package_name: str, package_directory: Path, options: ImporterOptions) -> ManifestEntry | None:
    """Find the stylesheet entry declared by a package.

    Args:
        package_name: Package name (for messages)
        package_directory: Directory holding ``package.json``
        options: Active importer options

    Returns:
        The accepted entry, or None when the manifest is unusable (loose mode)
        or declares no acceptable entry (either mode)

    Raises:
        ManifestLoadError: Strict mode and the manifest could not be loaded
    """
    try:
        manifest = load_manifest(package_directory, package_name)
    except ManifestLoadError as e:
        if options.strict:
            raise
        logger.warning(f"[importer:manifest] {e}; leaving entry lookup to the stylesheet engine")
        return None

    entry = select_entry(manifest, options)
    if entry is None:
        logger.debug(f"[importer:manifest] {package_name} declares no usable stylesheet entry")
    else:
        logger.debug(f"[importer:manifest] {package_name} -> {entry.source} (key: {entry.key})")
    return entry


def resolve_manifest_entry(package_name: str, package_directory: Path, options: ImporterOptions) -> str | None:
    """Relative path of the package's stylesheet entry, or None."""
    entry = find_manifest_entry(package_name, package_directory, options)
    return entry.source if entry else None
