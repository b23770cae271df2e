"""Split package specifiers into package name and sub-path."""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"
SCOPE_MARKER = "@"


@dataclass(frozen=True)
class ParsedSpecifier:
    """A specifier with the prefix already stripped.

    Attributes:
        package_name: Package name, including the ``@org/`` scope when present
        sub_path: Path inside the package, or None when only the package was named
    """

    package_name: str
    sub_path: str | None = None


def parse_specifier(specifier: str) -> ParsedSpecifier:
    """Parse ``name``, ``name/sub/path`` or ``@org/name/sub/path``.

    Empty segments are ignored, so ``name//sub/`` parses like ``name/sub``.
    A scoped name always takes two segments.

    Examples:
        >>> parse_specifier("@org/name/sub/dir")
        ParsedSpecifier(package_name='@org/name', sub_path='sub/dir')
        >>> parse_specifier("name")
        ParsedSpecifier(package_name='name', sub_path=None)
    """
    segments = [segment for segment in specifier.split(SEPARATOR) if segment]

    if not segments:
        return ParsedSpecifier(package_name="")
    if len(segments) == 1:
        return ParsedSpecifier(package_name=segments[0])

    package_name = segments.pop(0)
    if segments and package_name.startswith(SCOPE_MARKER):
        package_name = f"{package_name}{SEPARATOR}{segments.pop(0)}"

    sub_path = SEPARATOR.join(segments) if segments else None
    return ParsedSpecifier(package_name=package_name, sub_path=sub_path)
