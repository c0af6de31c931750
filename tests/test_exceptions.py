"""Tests for the exception hierarchy and error formatting."""

import pytest
from pydantic import BaseModel, ValidationError

from palette_bridge.exceptions import (
    InvalidColorError,
    PaletteBridgeError,
    PaletteError,
    StateError,
    StateFileInvalidError,
    StateValidationError,
    UnknownPaletteError,
    format_error_for_display,
    wrap_pydantic_error,
)


class Sample(BaseModel):
    name: str
    count: int


def _validation_error(json_text: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        Sample.model_validate_json(json_text)
    return exc_info.value


class TestHierarchy:
    """Test exception inheritance."""

    def test_palette_errors(self):
        assert issubclass(UnknownPaletteError, PaletteError)
        assert issubclass(InvalidColorError, PaletteError)
        assert issubclass(PaletteError, PaletteBridgeError)

    def test_state_errors(self):
        assert issubclass(StateFileInvalidError, StateError)
        assert issubclass(StateValidationError, StateError)
        assert issubclass(StateError, PaletteBridgeError)

    def test_str_is_user_message(self):
        error = UnknownPaletteError("accent", ["primary", "neutral"])
        assert str(error) == "Unknown palette 'accent'"
        assert "Available palettes: primary, neutral" in error.get_full_message()
        assert error.recoverable


class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    def test_invalid_json(self):
        error = wrap_pydantic_error(_validation_error("{ nope"), "state.json")
        assert isinstance(error, StateFileInvalidError)
        assert error.source == "state.json"

    def test_single_field(self):
        error = wrap_pydantic_error(_validation_error('{"name": "a", "count": "many"}'), "state.json")
        assert isinstance(error, StateValidationError)
        assert "count" in error.user_message

    def test_multiple_fields(self):
        error = wrap_pydantic_error(_validation_error("{}"), "state.json")
        assert isinstance(error, StateValidationError)
        assert "2 validation errors" in error.user_message


class TestFormatErrorForDisplay:
    """Test user-facing formatting."""

    def test_palette_bridge_error(self):
        message, hint = format_error_for_display(InvalidColorError("#12"))
        assert message == "Invalid color value '#12'"
        assert "6-digit" in hint

    def test_other_error(self):
        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None
