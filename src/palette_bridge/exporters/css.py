"""CSS custom property export."""

import re

from palette_bridge.models import PaletteConfig, RoleAssignments, ThemeMapping
from palette_bridge.palette import resolve_shade_ref
from palette_bridge.roles import ALL_ROLES

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def camel_to_kebab(name: str) -> str:
    """'onPrimaryContainer' -> 'on-primary-container'."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def build_css_block(selector: str, config: PaletteConfig, assignments: RoleAssignments) -> str:
    lines = [f"{selector} {{"]
    for role in ALL_ROLES:
        ref = assignments.get(role)
        if ref is None:
            continue
        hex_value = resolve_shade_ref(config, ref)
        if hex_value is None:
            continue
        lines.append(f"  --md-sys-color-{camel_to_kebab(role.value)}: {hex_value};")
    lines.append("}")
    return "\n".join(lines)


def generate_css(config: PaletteConfig, mapping: ThemeMapping) -> str:
    """
    Standard-contrast roles as `--md-sys-color-*` variables.

    Light values go in `:root`, dark values in `[data-theme="dark"]`.
    """
    light = build_css_block(":root", config, mapping.light)
    dark = build_css_block('[data-theme="dark"]', config, mapping.dark)
    return f"{light}\n\n{dark}\n"
