"""Locate a package directory under a single search root."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .errors import SearchRootError
from .options import ImporterOptions

logger = logging.getLogger(__name__)


def candidate_path(search_root: str, package_name: str, options: ImporterOptions) -> Path:
    """Absolute location ``package_name`` would have under ``search_root``.

    Relative roots are taken relative to the configured working directory.
    The path is normalized but symlinks are left in place.
    """
    root = Path(search_root)
    if not root.is_absolute():
        root = options.base_directory() / root
    return Path(os.path.abspath(Path(root, package_name)))


def resolve_package_path(search_root: str, package_name: str, options: ImporterOptions) -> Path | None:
    """Return the package directory under ``search_root`` if it exists.

    Args:
        search_root: Absolute or relative search root
        package_name: Package name, possibly scoped (``@org/name``)
        options: Active importer options

    Returns:
        Absolute path of the directory, or None when it does not exist or is not a directory

    Raises:
        SearchRootError: The path could not be checked (e.g. permission denied)
    """
    # An empty name would match the search root itself
    if not package_name:
        return None

    check = candidate_path(search_root, package_name, options)

    try:
        mode = check.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"[importer:search] {package_name} not in {search_root} ({check})")
        return None
    except OSError as e:
        raise SearchRootError(search_root, package_name, check, e.strerror or str(e)) from e
    except ValueError as e:
        # Names the OS cannot represent, such as ones containing NUL
        raise SearchRootError(search_root, package_name, check, str(e)) from e

    if not stat.S_ISDIR(mode):
        logger.debug(f"[importer:search] {check} exists but is not a directory")
        return None
    return check
