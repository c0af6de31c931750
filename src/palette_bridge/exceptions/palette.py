"""Palette editing exceptions.

- PaletteError: Base class for palette edit failures
- UnknownPaletteError: Edit targets a palette that does not exist
- InvalidColorError: A color value could not be read as a 6-digit hex
"""

from .base import PaletteBridgeError


class PaletteError(PaletteBridgeError):
    """A palette edit could not be applied."""
    pass


class UnknownPaletteError(PaletteError):
    """The named palette is not part of the palette configuration."""

    def __init__(self, palette: str, available: list[str] | None = None):
        hint = "Check the palette name"
        if available:
            hint += f"\nAvailable palettes: {', '.join(available)}"

        super().__init__(
            user_message=f"Unknown palette '{palette}'",
            technical_message=f"Palette lookup failed for '{palette}' (available={available})",
            recoverable=True,
            recovery_hint=hint,
        )
        self.palette = palette


class InvalidColorError(PaletteError):
    """A color value is not a valid 6-digit hex color."""

    def __init__(self, value: str):
        super().__init__(
            user_message=f"Invalid color value '{value}'",
            technical_message=f"Expected #rrggbb hex color, got {value!r}",
            recoverable=True,
            recovery_hint="Use a 6-digit hex color such as #3b82f6",
        )
        self.value = value
