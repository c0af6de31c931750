"""Application state snapshot (the import/export and persistence unit)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import ContrastLevel, ThemeMode
from .mapping import RoleAssignments, ThemeMapping
from .palette import PaletteConfig


class AppState(BaseModel):
    """Everything the editor persists.

    Serialized with camelCase keys (`paletteConfig`, `themeMapping`,
    `activeContrastLevel`, `activeThemeMode`, `interpolationEnabled`).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    palette_config: PaletteConfig = Field(description="User palettes")
    theme_mapping: ThemeMapping = Field(description="Role assignments for all 6 cells")
    active_contrast_level: ContrastLevel = Field(default=ContrastLevel.STANDARD)
    active_theme_mode: ThemeMode = Field(default=ThemeMode.LIGHT)
    interpolation_enabled: bool = Field(default=False)

    def active_assignments(self) -> RoleAssignments:
        """Assignments for the active contrast level and mode."""
        return self.theme_mapping.get(self.active_contrast_level, self.active_theme_mode)
