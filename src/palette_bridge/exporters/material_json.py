"""Material Theme Builder JSON export."""

import json

from palette_bridge.models import ContrastLevel, PaletteConfig, RoleAssignments, ThemeMapping, ThemeMode
from palette_bridge.palette import resolve_shade_ref
from palette_bridge.roles import ALL_ROLES

SCHEME_KEYS: dict[str, tuple[ContrastLevel, ThemeMode]] = {
    "light": (ContrastLevel.STANDARD, ThemeMode.LIGHT),
    "dark": (ContrastLevel.STANDARD, ThemeMode.DARK),
    "light-medium-contrast": (ContrastLevel.MEDIUM, ThemeMode.LIGHT),
    "dark-medium-contrast": (ContrastLevel.MEDIUM, ThemeMode.DARK),
    "light-high-contrast": (ContrastLevel.HIGH, ThemeMode.LIGHT),
    "dark-high-contrast": (ContrastLevel.HIGH, ThemeMode.DARK),
}


def to_upper_hex(hex_value: str) -> str:
    return "#" + hex_value.lstrip("#").upper()


def resolve_scheme(config: PaletteConfig, assignments: RoleAssignments) -> dict[str, str]:
    scheme: dict[str, str] = {}
    for role in ALL_ROLES:
        ref = assignments.get(role)
        if ref is None:
            continue
        hex_value = resolve_shade_ref(config, ref)
        if hex_value is not None:
            scheme[role.value] = to_upper_hex(hex_value)
    return scheme


def build_palettes(config: PaletteConfig) -> dict[str, dict[str, str]]:
    """Raw shades per palette, interpolated shades included."""
    palettes: dict[str, dict[str, str]] = {}
    for name, palette in config.palettes.items():
        shades = {label: to_upper_hex(value.hex) for label, value in palette.shades.items()}
        for label, value in config.interpolated.get(name, {}).items():
            shades[label] = to_upper_hex(value.hex)
        palettes[name] = shades
    return palettes


def generate_material_json(config: PaletteConfig, mapping: ThemeMapping) -> str:
    output = {
        "description": "Palette Bridge export",
        "source": "palette-bridge",
        "schemes": {
            key: resolve_scheme(config, mapping.get(level, mode))
            for key, (level, mode) in SCHEME_KEYS.items()
        },
        "palettes": build_palettes(config),
    }
    return json.dumps(output, indent=2)
