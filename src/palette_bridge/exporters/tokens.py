"""Design token (DTCG) export: core primitives plus light/dark role references."""

import json
from typing import NamedTuple

from palette_bridge.models import PaletteConfig, RoleAssignments, ThemeMapping
from palette_bridge.roles import ALL_ROLES


class DesignTokens(NamedTuple):
    """Three JSON documents."""
    core: str
    light: str
    dark: str


def _token(value: str) -> dict[str, str]:
    return {"$type": "color", "$value": value}


def build_core(config: PaletteConfig) -> dict:
    palettes: dict[str, dict[str, dict[str, str]]] = {}
    for name, palette in config.palettes.items():
        tokens = {shade: _token(value.hex) for shade, value in palette.shades.items()}
        for shade, value in config.interpolated.get(name, {}).items():
            tokens[shade] = _token(value.hex)
        palettes[name] = tokens
    return {"palette": palettes}


def build_theme(assignments: RoleAssignments) -> dict:
    """Roles as `{palette.<name>.<shade>}` references into the core tokens."""
    colors: dict[str, dict[str, str]] = {}
    for role in ALL_ROLES:
        ref = assignments.get(role)
        if ref is not None:
            colors[role.value] = _token(f"{{palette.{ref.palette}.{ref.shade}}}")
    return {"color": colors}


def generate_design_tokens(config: PaletteConfig, mapping: ThemeMapping) -> DesignTokens:
    return DesignTokens(
        core=json.dumps(build_core(config), indent=2),
        light=json.dumps(build_theme(mapping.light), indent=2),
        dark=json.dumps(build_theme(mapping.dark), indent=2),
    )
