"""Data models for Palette Bridge."""

from .config import AppConfig
from .enums import AccentFamily, ContrastLevel, RoleFamily, RoleName, ThemeMode, WCAGLevel
from .mapping import ModeAssignments, RoleAssignments, ShadeRef, ThemeMapping
from .palette import (
    SENTINEL_LABELS,
    SHADE_LABELS,
    InterpolatedShade,
    InterpolationSource,
    Palette,
    PaletteConfig,
    ShadeValue,
    normalize_hex,
)
from .state import AppState

__all__ = [
    # Models
    "AppConfig",
    "AppState",
    "InterpolatedShade",
    "InterpolationSource",
    "ModeAssignments",
    "Palette",
    "PaletteConfig",
    "RoleAssignments",
    "ShadeRef",
    "ShadeValue",
    "ThemeMapping",
    # Enums
    "AccentFamily",
    "ContrastLevel",
    "RoleFamily",
    "RoleName",
    "ThemeMode",
    "WCAGLevel",
    # Constants
    "SENTINEL_LABELS",
    "SHADE_LABELS",
    "normalize_hex",
]
