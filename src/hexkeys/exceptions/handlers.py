"""
Error translation utilities.

Each layer translates errors to be more useful at the next level up:

```
CLI          formats error.user_message and error.recovery_hint
   ↑ HexKeysError
Services     converts pydantic / IO errors, adds context and hints
   ↑ Exception, OSError, ValidationError
Low level    mido, pygame, json parsing
```
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import HexKeysError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def _field_name(err: dict) -> str:
    return ".".join(str(loc) for loc in err.get('loc', ('unknown',))) or "root"


def wrap_pydantic_error(error: Exception, file_path: str) -> HexKeysError:
    """
    Convert Pydantic validation errors to hexkeys exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    error_msg = str(error)

    # Invalid JSON syntax is reported by pydantic as a json_invalid error
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            return ConfigValidationError(
                field=_field_name(first_error),
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = [
                f"  - {_field_name(err)}: {err.get('msg', 'validation failed')}"
                for err in errors
            ]
            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HexKeysError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
