"""
Centralized error handling utilities.

Low-level errors (pydantic validation, JSON syntax) are translated here into
PaletteBridgeError subclasses carrying a user message and a recovery hint.
The CLI then only needs `format_error_for_display` to report them.

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑
                  │ PaletteBridgeError
                  │
┌─────────────────────────────────────┐
│  APPLICATION LAYER (persistence,    │
│  editing)                           │
│  - Converts ValidationError         │
└─────────────────────────────────────┘
```

Soft failures of the color core (unresolvable references, unparseable
lines) never reach this module: they are expressed as absent values.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import PaletteBridgeError
from .state import StateError, StateFileInvalidError, StateValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, source: str) -> StateError:
    """
    Convert Pydantic validation errors to state exceptions.

    Args:
        error: The Pydantic ValidationError
        source: Path or label of the snapshot that failed validation

    Returns:
        A StateError with appropriate type and message
    """
    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return StateFileInvalidError(source, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return StateValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                source=source,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return StateValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                source=source,
            )

    return StateValidationError(field="unknown", value=None, error_msg=error_msg, source=source)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, PaletteBridgeError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
