"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from palette_bridge.persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".palette-bridge"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Paths
    state_path: Path = Field(
        default_factory=lambda: DEFAULT_CONFIG_DIR / "state.json",
        description="Where the editor state snapshot is saved",
    )

    # Export defaults
    kotlin_package: str = Field(
        default="com.example.ui.theme",
        description="Package name written at the top of generated Kotlin files",
    )

    # Interpolation defaults
    interpolation_palette: str = Field(
        default="neutral",
        description="Palette that receives interpolated intermediate shades",
    )
    interpolation_targets: list[int] = Field(
        default_factory=lambda: [150, 250, 350, 450, 550, 650, 750, 850],
        description="Intermediate shade values to synthesize",
    )

    @field_serializer("state_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.palette-bridge/config.json).

        Raises:
            StateFileInvalidError: If config file has invalid JSON syntax
            StateValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_DIR / "config.json"
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_DIR / "config.json"
        PydanticPersistence.save_json(self, path, backup=False)
