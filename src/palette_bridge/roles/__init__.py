"""Color role catalog, tone-shade table and default mapping builder."""

from .catalog import (
    ALL_ROLES,
    KOTLIN_COLOR_SCHEME_ROLES,
    M3_ROLES,
    RoleInfo,
    get_role_info,
    get_roles_by_family,
)
from .default_mapping import build_default_mapping, build_mode_assignments, build_role_assignments
from .tone_table import TONE_TABLE, RoleTone, ToneSpec, lookup_shade_ref

__all__ = [
    "ALL_ROLES",
    "KOTLIN_COLOR_SCHEME_ROLES",
    "M3_ROLES",
    "TONE_TABLE",
    "RoleInfo",
    "RoleTone",
    "ToneSpec",
    "build_default_mapping",
    "build_mode_assignments",
    "build_role_assignments",
    "get_role_info",
    "get_roles_by_family",
    "lookup_shade_ref",
]
