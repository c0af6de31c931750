"""Default role assignments derived from the tone table."""

import logging

from palette_bridge.models import (
    ContrastLevel,
    ModeAssignments,
    PaletteConfig,
    RoleAssignments,
    ThemeMapping,
    ThemeMode,
)

from .catalog import ALL_ROLES
from .tone_table import lookup_shade_ref

logger = logging.getLogger(__name__)


def build_role_assignments(contrast_level: ContrastLevel, mode: ThemeMode) -> RoleAssignments:
    """Assign every role its default shade reference for one cell, in catalog order."""
    return {role: lookup_shade_ref(role, contrast_level, mode) for role in ALL_ROLES}


def build_mode_assignments(contrast_level: ContrastLevel) -> ModeAssignments:
    return ModeAssignments(
        light=build_role_assignments(contrast_level, ThemeMode.LIGHT),
        dark=build_role_assignments(contrast_level, ThemeMode.DARK),
    )


def build_default_mapping(palette_config: PaletteConfig | None = None) -> ThemeMapping:
    """
    Build the complete default ThemeMapping (6 cells x 49 roles).

    Only references are emitted; the palette contents are not consulted.
    Palettes the table refers to but `palette_config` lacks are logged,
    since those roles will not resolve until the palette is added.

    Args:
        palette_config: Current palettes, used only to report missing names
    """
    if palette_config is not None:
        referenced = {ref.palette for ref in build_role_assignments(
            ContrastLevel.STANDARD, ThemeMode.LIGHT).values()}
        missing = sorted(referenced - set(palette_config.palettes))
        if missing:
            logger.warning(f"Default mapping references missing palettes: {', '.join(missing)}")

    standard = build_mode_assignments(ContrastLevel.STANDARD)
    return ThemeMapping(
        light=standard.light,
        dark=standard.dark,
        medium_contrast=build_mode_assignments(ContrastLevel.MEDIUM),
        high_contrast=build_mode_assignments(ContrastLevel.HIGH),
    )
