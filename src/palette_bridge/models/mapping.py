"""Role mapping models: shade references and per-mode/contrast assignments."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import ContrastLevel, RoleName, ThemeMode


class ShadeRef(BaseModel):
    """Reference to a shade of a palette.

    A reference, not a value: it may point at a palette or shade that does
    not exist, in which case resolution yields nothing.
    """

    model_config = ConfigDict(frozen=True)

    palette: str = Field(description="Palette name")
    shade: str = Field(description="Shade label (e.g. '600', 'white')")

    def __str__(self) -> str:
        return f"{self.palette}.{self.shade}"


RoleAssignments = dict[RoleName, ShadeRef]
"""Role -> shade reference for one (contrast level, mode) cell. May be partial."""


class ModeAssignments(BaseModel):
    """Light and dark assignments for one contrast level."""

    light: RoleAssignments = Field(default_factory=dict)
    dark: RoleAssignments = Field(default_factory=dict)

    def for_mode(self, mode: ThemeMode) -> RoleAssignments:
        return self.light if mode is ThemeMode.LIGHT else self.dark


class ThemeMapping(BaseModel):
    """Six independent role assignment sets, one per (contrast level, mode).

    Standard contrast lives at the top level (`light`/`dark`); the other two
    levels are nested, matching the exported JSON layout.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    light: RoleAssignments = Field(default_factory=dict)
    dark: RoleAssignments = Field(default_factory=dict)
    medium_contrast: ModeAssignments = Field(default_factory=ModeAssignments)
    high_contrast: ModeAssignments = Field(default_factory=ModeAssignments)

    def level(self, contrast_level: ContrastLevel) -> ModeAssignments:
        """Get the light/dark pair for a contrast level.

        For standard contrast a new ModeAssignments wrapping the top-level
        dicts is returned.
        """
        if contrast_level is ContrastLevel.MEDIUM:
            return self.medium_contrast
        if contrast_level is ContrastLevel.HIGH:
            return self.high_contrast
        return ModeAssignments(light=self.light, dark=self.dark)

    def get(self, contrast_level: ContrastLevel, mode: ThemeMode) -> RoleAssignments:
        """Get the assignments for one (contrast level, mode) cell."""
        return self.level(contrast_level).for_mode(mode)
