"""Importer options.

Options are captured once when an importer is built and read, never written,
by every resolution call. The short option names (``cwd``, ``ext``,
``keys``, ``paths``) are accepted as aliases, so configurations written for
other package importers carry over unchanged.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

DEFAULT_PREFIX = "~"
DEFAULT_EXTENSIONS = (".scss", ".sass", ".css")
DEFAULT_MANIFEST_KEYS = (
    "scss",
    "sass",
    "style",
    "css",
    "main.scss",
    "main.sass",
    "main.style",
    "main.css",
    "main",
)
DEFAULT_SEARCH_ROOTS = ("node_modules",)
MANIFEST_FILENAME = "package.json"


class ImporterOptions(BaseModel):
    """Configuration for a package importer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    strict: bool = Field(
        default=False,
        description="Require an existing package directory and a readable package.json when no sub-path is given",
    )
    working_directory: Path | None = Field(
        default=None, alias="cwd", description="Base for relative search roots (default: current directory)"
    )
    prefix: str = Field(default=DEFAULT_PREFIX, description="Marker that identifies package specifiers")
    allowed_extensions: tuple[str, ...] = Field(
        default=DEFAULT_EXTENSIONS, alias="ext", description="Extensions accepted for manifest entries"
    )
    manifest_keys: tuple[str, ...] = Field(
        default=DEFAULT_MANIFEST_KEYS, alias="keys", description="Manifest fields checked, in priority order"
    )
    search_roots: tuple[str, ...] = Field(
        default=DEFAULT_SEARCH_ROOTS, alias="paths", description="Directories searched for packages, in priority order"
    )

    @field_validator("prefix")
    @classmethod
    def _prefix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix must not be empty")
        return value

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized: list[str] = []
        for ext in value:
            if not ext:
                continue
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        return tuple(normalized)

    @field_validator("search_roots", mode="before")
    @classmethod
    def _search_roots_as_strings(cls, value: Any) -> Any:
        if isinstance(value, (str, os.PathLike)):
            value = [value]
        if isinstance(value, (list, tuple)):
            return [os.fspath(root) if isinstance(root, os.PathLike) else root for root in value]
        return value

    @field_validator("search_roots")
    @classmethod
    def _search_roots_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        roots = tuple(root for root in value if root)
        if not roots:
            raise ValueError("at least one search root is required")
        return roots

    def base_directory(self) -> Path:
        """Directory that relative search roots are resolved against."""
        if self.working_directory is not None:
            return Path(os.path.abspath(self.working_directory))
        return Path.cwd()

    def merged(self, overrides: Mapping[str, Any]) -> ImporterOptions:
        """Return a validated copy with ``overrides`` applied (field names or aliases)."""
        if not overrides:
            return self
        data = self.model_dump()
        for key, value in overrides.items():
            data[canonical_option_name(key)] = value
        return ImporterOptions.model_validate(data)


_FIELD_BY_ALIAS = {
    field.alias: name for name, field in ImporterOptions.model_fields.items() if field.alias is not None
}


def canonical_option_name(key: str) -> str:
    """Map an option alias (``cwd``, ``ext``, ...) or dashed name to its field name."""
    key = key.replace("-", "_")
    return _FIELD_BY_ALIAS.get(key, key)


def coerce_options(options: ImporterOptions | Mapping[str, Any] | None = None, **overrides: Any) -> ImporterOptions:
    """Build ``ImporterOptions`` from an instance, a mapping or nothing, plus keyword overrides.

    Unspecified fields take their defaults.
    """
    if options is None:
        base = ImporterOptions()
    elif isinstance(options, ImporterOptions):
        base = options
    elif isinstance(options, Mapping):
        base = ImporterOptions.model_validate(dict(options))
    else:
        raise TypeError(f"options must be ImporterOptions, a mapping or None, not {type(options).__name__}")
    return base.merged(overrides)
