"""Resolve shade references against a palette configuration."""

import logging
from collections.abc import Mapping
from typing import Optional

from palette_bridge.colors import contrast_ratio, meets_wcag
from palette_bridge.models import PaletteConfig, RoleName, ShadeRef, WCAGLevel
from palette_bridge.roles import get_role_info

logger = logging.getLogger(__name__)


def resolve_shade_ref(config: PaletteConfig, ref: ShadeRef) -> Optional[str]:
    """
    Look up the hex color a reference points at.

    Base shades win over interpolated shades of the same palette.

    Returns:
        '#rrggbb', or None when the palette or shade does not exist
    """
    palette = config.palettes.get(ref.palette)
    if palette is None:
        return None

    shade = palette.shades.get(ref.shade)
    if shade is not None:
        return shade.hex

    interpolated = config.interpolated.get(ref.palette, {}).get(ref.shade)
    if interpolated is not None:
        return interpolated.hex

    return None


def resolve_all_roles(
    config: PaletteConfig, assignments: Mapping[RoleName, ShadeRef]
) -> dict[RoleName, str]:
    """
    Resolve every assigned role to a hex color.

    Roles whose reference does not resolve are left out of the result.
    """
    result: dict[RoleName, str] = {}
    for role, ref in assignments.items():
        hex_value = resolve_shade_ref(config, ref)
        if hex_value is None:
            logger.debug(f"Role {role.value} unresolved: no shade {ref}")
            continue
        result[role] = hex_value
    return result


def score_role_pair(
    resolved: Mapping[RoleName, str], role: RoleName
) -> Optional[tuple[float, WCAGLevel]]:
    """
    Contrast of a role against its paired role within one resolved map.

    Returns:
        (ratio, level), or None if the role has no pair or either color is missing
    """
    paired = get_role_info(role).paired_with
    if paired is None:
        return None

    fg = resolved.get(role)
    bg = resolved.get(paired)
    if fg is None or bg is None:
        return None

    ratio = contrast_ratio(fg, bg)
    return ratio, meets_wcag(ratio)
