"""Static catalog of the 49 Material 3 color roles."""

from dataclasses import dataclass
from typing import Optional

from palette_bridge.models import RoleFamily, RoleName

R = RoleName
F = RoleFamily


@dataclass(frozen=True)
class RoleInfo:
    """Metadata about a color role."""
    name: RoleName
    family: RoleFamily
    paired_with: Optional[RoleName]  # counterpart used for contrast scoring
    description: str
    default_palette: str
    in_kotlin_color_scheme: bool = True


M3_ROLES: tuple[RoleInfo, ...] = (
    # Primary family
    RoleInfo(R.PRIMARY, F.PRIMARY, R.ON_PRIMARY, "Primary action color", "primary"),
    RoleInfo(R.ON_PRIMARY, F.PRIMARY, R.PRIMARY, "Text/icon on primary", "primary"),
    RoleInfo(R.PRIMARY_CONTAINER, F.PRIMARY, R.ON_PRIMARY_CONTAINER, "Primary container background", "primary"),
    RoleInfo(R.ON_PRIMARY_CONTAINER, F.PRIMARY, R.PRIMARY_CONTAINER, "Text/icon on primary container", "primary"),

    # Secondary family
    RoleInfo(R.SECONDARY, F.SECONDARY, R.ON_SECONDARY, "Secondary action color", "secondary"),
    RoleInfo(R.ON_SECONDARY, F.SECONDARY, R.SECONDARY, "Text/icon on secondary", "secondary"),
    RoleInfo(R.SECONDARY_CONTAINER, F.SECONDARY, R.ON_SECONDARY_CONTAINER, "Secondary container background", "secondary"),
    RoleInfo(R.ON_SECONDARY_CONTAINER, F.SECONDARY, R.SECONDARY_CONTAINER, "Text/icon on secondary container", "secondary"),

    # Tertiary family
    RoleInfo(R.TERTIARY, F.TERTIARY, R.ON_TERTIARY, "Tertiary action color", "tertiary"),
    RoleInfo(R.ON_TERTIARY, F.TERTIARY, R.TERTIARY, "Text/icon on tertiary", "tertiary"),
    RoleInfo(R.TERTIARY_CONTAINER, F.TERTIARY, R.ON_TERTIARY_CONTAINER, "Tertiary container background", "tertiary"),
    RoleInfo(R.ON_TERTIARY_CONTAINER, F.TERTIARY, R.TERTIARY_CONTAINER, "Text/icon on tertiary container", "tertiary"),

    # Error family
    RoleInfo(R.ERROR, F.ERROR, R.ON_ERROR, "Error color", "error"),
    RoleInfo(R.ON_ERROR, F.ERROR, R.ERROR, "Text/icon on error", "error"),
    RoleInfo(R.ERROR_CONTAINER, F.ERROR, R.ON_ERROR_CONTAINER, "Error container background", "error"),
    RoleInfo(R.ON_ERROR_CONTAINER, F.ERROR, R.ERROR_CONTAINER, "Text/icon on error container", "error"),

    # Surface family
    RoleInfo(R.SURFACE, F.SURFACE, R.ON_SURFACE, "Default surface", "neutral"),
    RoleInfo(R.ON_SURFACE, F.SURFACE, R.SURFACE, "Text/icon on surface", "neutral"),
    RoleInfo(R.SURFACE_VARIANT, F.SURFACE, R.ON_SURFACE_VARIANT, "Surface variant", "neutral"),
    RoleInfo(R.ON_SURFACE_VARIANT, F.SURFACE, R.SURFACE_VARIANT, "Text/icon on surface variant", "neutral"),
    RoleInfo(R.SURFACE_DIM, F.SURFACE, R.ON_SURFACE, "Dimmed surface", "neutral"),
    RoleInfo(R.SURFACE_BRIGHT, F.SURFACE, R.ON_SURFACE, "Bright surface", "neutral"),
    RoleInfo(R.SURFACE_CONTAINER_LOWEST, F.SURFACE, R.ON_SURFACE, "Lowest elevation container", "neutral"),
    RoleInfo(R.SURFACE_CONTAINER_LOW, F.SURFACE, R.ON_SURFACE, "Low elevation container", "neutral"),
    RoleInfo(R.SURFACE_CONTAINER, F.SURFACE, R.ON_SURFACE, "Default container", "neutral"),
    RoleInfo(R.SURFACE_CONTAINER_HIGH, F.SURFACE, R.ON_SURFACE, "High elevation container", "neutral"),
    RoleInfo(R.SURFACE_CONTAINER_HIGHEST, F.SURFACE, R.ON_SURFACE, "Highest elevation container", "neutral"),
    RoleInfo(R.INVERSE_SURFACE, F.SURFACE, R.INVERSE_ON_SURFACE, "Inverse surface (snackbars)", "neutral"),
    RoleInfo(R.INVERSE_ON_SURFACE, F.SURFACE, R.INVERSE_SURFACE, "Text on inverse surface", "neutral"),
    RoleInfo(R.BACKGROUND, F.SURFACE, R.ON_BACKGROUND, "Background", "neutral"),
    RoleInfo(R.ON_BACKGROUND, F.SURFACE, R.BACKGROUND, "Text/icon on background", "neutral"),

    # Other
    RoleInfo(R.INVERSE_PRIMARY, F.OTHER, R.INVERSE_SURFACE, "Primary on inverse surface", "primary"),
    RoleInfo(R.OUTLINE, F.OTHER, None, "Border/divider", "neutral"),
    RoleInfo(R.OUTLINE_VARIANT, F.OTHER, None, "Subtle border", "neutral"),
    RoleInfo(R.SCRIM, F.OTHER, None, "Scrim overlay", "neutral"),
    RoleInfo(R.SHADOW, F.OTHER, None, "Shadow color", "neutral", in_kotlin_color_scheme=False),
    RoleInfo(R.SURFACE_TINT, F.OTHER, None, "Surface tint (elevation overlay)", "primary", in_kotlin_color_scheme=False),

    # Fixed colors (JSON export only)
    RoleInfo(R.PRIMARY_FIXED, F.PRIMARY, R.ON_PRIMARY_FIXED, "Fixed primary (cross-theme)", "primary", False),
    RoleInfo(R.ON_PRIMARY_FIXED, F.PRIMARY, R.PRIMARY_FIXED, "On fixed primary", "primary", False),
    RoleInfo(R.PRIMARY_FIXED_DIM, F.PRIMARY, R.ON_PRIMARY_FIXED, "Dimmed fixed primary", "primary", False),
    RoleInfo(R.ON_PRIMARY_FIXED_VARIANT, F.PRIMARY, R.PRIMARY_FIXED_DIM, "On fixed primary variant", "primary", False),
    RoleInfo(R.SECONDARY_FIXED, F.SECONDARY, R.ON_SECONDARY_FIXED, "Fixed secondary", "secondary", False),
    RoleInfo(R.ON_SECONDARY_FIXED, F.SECONDARY, R.SECONDARY_FIXED, "On fixed secondary", "secondary", False),
    RoleInfo(R.SECONDARY_FIXED_DIM, F.SECONDARY, R.ON_SECONDARY_FIXED, "Dimmed fixed secondary", "secondary", False),
    RoleInfo(R.ON_SECONDARY_FIXED_VARIANT, F.SECONDARY, R.SECONDARY_FIXED_DIM, "On fixed secondary variant", "secondary", False),
    RoleInfo(R.TERTIARY_FIXED, F.TERTIARY, R.ON_TERTIARY_FIXED, "Fixed tertiary", "tertiary", False),
    RoleInfo(R.ON_TERTIARY_FIXED, F.TERTIARY, R.TERTIARY_FIXED, "On fixed tertiary", "tertiary", False),
    RoleInfo(R.TERTIARY_FIXED_DIM, F.TERTIARY, R.ON_TERTIARY_FIXED, "Dimmed fixed tertiary", "tertiary", False),
    RoleInfo(R.ON_TERTIARY_FIXED_VARIANT, F.TERTIARY, R.TERTIARY_FIXED_DIM, "On fixed tertiary variant", "tertiary", False),
)

_ROLE_INFO: dict[RoleName, RoleInfo] = {info.name: info for info in M3_ROLES}

ALL_ROLES: tuple[RoleName, ...] = tuple(info.name for info in M3_ROLES)
"""Every role, in catalog (export) order."""

KOTLIN_COLOR_SCHEME_ROLES: tuple[RoleName, ...] = tuple(
    info.name for info in M3_ROLES if info.in_kotlin_color_scheme
)
"""Roles that are parameters of Compose's lightColorScheme/darkColorScheme."""

# Every enum member must have exactly one catalog entry
assert set(_ROLE_INFO) == set(RoleName) and len(M3_ROLES) == len(RoleName)


def get_role_info(role: RoleName) -> RoleInfo:
    """Look up the catalog entry for a role."""
    return _ROLE_INFO[role]


def get_roles_by_family(family: RoleFamily) -> list[RoleInfo]:
    """All roles of a family, in catalog order."""
    return [info for info in M3_ROLES if info.family is family]
