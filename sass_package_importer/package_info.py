"""Resolve a specifier to a package directory.

Search roots are tried in the configured order and the first existing
directory wins. In loose mode a missing package still yields a directory
under the first search root so the host engine can run its own lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import PackageNotFoundError
from .options import ImporterOptions
from .search_paths import candidate_path
from .search_paths import resolve_package_path
from .specifier import parse_specifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageInfo:
    """Where a specifier's package lives.

    Attributes:
        package_name: Package name, including scope
        package_directory: Absolute package directory (a best guess when ``exists`` is False)
        sub_path: Path inside the package named by the specifier, if any
        search_root: Search root that contained the package, None for the loose-mode fallback
        exists: Whether ``package_directory`` was found on disk
    """

    package_name: str
    package_directory: Path
    sub_path: str | None = None
    search_root: str | None = None
    exists: bool = True


def resolve_package_info(specifier: str, options: ImporterOptions) -> PackageInfo:
    """Parse ``specifier`` (prefix already stripped) and locate its package.

    Raises:
        PackageNotFoundError: Strict mode and no search root has the package
        SearchRootError: A search root could not be checked
    """
    parsed = parse_specifier(specifier)
    package_name = parsed.package_name

    for search_root in options.search_roots:
        package_directory = resolve_package_path(search_root, package_name, options)
        if package_directory is not None:
            logger.debug(f"[importer:search] {package_name} -> {package_directory} (root: {search_root})")
            return PackageInfo(
                package_name=package_name,
                package_directory=package_directory,
                sub_path=parsed.sub_path,
                search_root=search_root,
            )

    if options.strict:
        raise PackageNotFoundError(package_name, options.search_roots)

    fallback = candidate_path(options.search_roots[0], package_name, options)
    logger.warning(f"[importer:search] {package_name} not found in any search root, falling back to {fallback}")
    return PackageInfo(
        package_name=package_name,
        package_directory=fallback,
        sub_path=parsed.sub_path,
        search_root=None,
        exists=False,
    )
