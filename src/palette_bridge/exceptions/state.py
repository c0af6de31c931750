"""Saved-state exceptions.

This module defines exceptions for loading or importing a state snapshot:
- StateError: Base class for state errors
- StateFileInvalidError: Snapshot is not valid JSON (or is empty)
- StateValidationError: Snapshot is valid JSON but structurally malformed
"""

from typing import Any

from .base import PaletteBridgeError


class StateError(PaletteBridgeError):
    """A state snapshot is invalid or cannot be loaded."""
    pass


class StateFileInvalidError(StateError):
    """Snapshot has invalid JSON syntax."""

    def __init__(self, source: str, parse_error: str):
        """
        Initialize state file invalid error.

        Args:
            source: Path (or label) of the snapshot that failed to parse
            parse_error: The parsing error message
        """
        user_msg = "State file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {source}"

        if "trailing comma" in parse_error.lower():
            user_msg = "State file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {source}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = "State file is empty"
            recovery = f"Export a mapping again or delete {source} to start from defaults"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {source}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.source = source
        self.parse_error = parse_error


class StateValidationError(StateError):
    """Snapshot fields are missing or malformed."""

    def __init__(self, field: str, value: Any, error_msg: str, source: str | None = None):
        """
        Initialize state validation error.

        Args:
            field: Dotted path of the field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            source: Path (or label) of the snapshot (optional)
        """
        user_msg = f"Invalid mapping file: '{field}' {error_msg}"

        recovery = f"Fix the '{field}' value in the mapping file"
        if source:
            recovery += f"\nMapping file: {source}"

        if "contrastlevel" in field.lower():
            recovery += "\nValid contrast levels: standard, medium, high"
        elif "thememode" in field.lower():
            recovery += "\nValid theme modes: light, dark"
        elif "hex" in field.lower():
            recovery += "\nColors must be 6-digit hex values such as #3b82f6"

        super().__init__(
            user_message=user_msg,
            technical_message=f"State validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.source = source
