"""Error message formatting for CLI output.

Ensures exceptions always have a useful display message, and that paths or
specifiers containing brackets are not read as Rich markup.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.markup import escape as _escape_markup

from ..errors import PackageImporterError

# Fallbacks for exceptions that commonly arrive with an empty str()
FRIENDLY_MESSAGES: dict[type, str] = {
    PermissionError: "Permission denied while reading the filesystem.",
    FileNotFoundError: "File or directory not found.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Importer errors already describe the package and paths involved, so they
    are shown without their type name. Validation errors are flattened to
    one ``field: problem`` line per error.

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(PermissionError())
        'PermissionError: Permission denied while reading the filesystem.'
    """
    if isinstance(e, ValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'options'}: {err['msg']}" for err in e.errors()
        )
        return f"Invalid importer options: {problems}"

    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if isinstance(e, PackageImporterError) or not include_type or error_type in error_str:
            return error_str
        return f"{error_type}: {error_str}"

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings."""
    return _escape_markup(str(value))
