"""Glue between the importer and stylesheet compilers.

Nothing here resolves anything; it only reshapes :class:`PackageImporter`
results into what particular hosts expect.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

from .importer import PackageImporter

ImporterCallable = Callable[[str], "list[tuple[str]] | None"]


def file_url_to_path(url: str) -> Path:
    """Convert a ``file://`` URL produced by the importer back to a path."""
    parsed = urlparse(url)
    if parsed.scheme != "file":
        raise ValueError(f"Not a file URL: {url}")
    return Path(url2pathname(parsed.path))


def libsass_importer(importer: PackageImporter, priority: int = 0) -> tuple[int, ImporterCallable]:
    """Wrap ``importer`` as a ``(priority, callable)`` pair for libsass ``importers=``.

    The callable returns ``[(filename,)]`` for package specifiers, letting
    the compiler load the file itself, and None for everything else.
    """

    def _import(path: str) -> list[tuple[str]] | None:
        url = importer.find_file_url(path)
        if url is None:
            return None
        return [(str(file_url_to_path(url)),)]

    return (priority, _import)


def register_importer(
    compile_options: MutableMapping[str, Any], importer: PackageImporter | None = None
) -> MutableMapping[str, Any]:
    """Append ``importer`` (default: a new one) to ``compile_options["importers"]``.

    Returns the same mapping so calls can be chained into a compile call.
    """
    importers = compile_options.get("importers")
    if importers is None:
        importers = compile_options["importers"] = []
    importers.append(importer if importer is not None else PackageImporter())
    return compile_options
