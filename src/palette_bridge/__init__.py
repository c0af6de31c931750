"""Palette Bridge: map color palettes onto Material 3 color roles."""

__version__ = "0.1.0"

# Models
from .models import AppState, PaletteConfig, ShadeRef, ThemeMapping

# Core operations
from .palette import create_initial_state, parse_palette_input, resolve_all_roles, resolve_shade_ref
from .roles import build_default_mapping

__all__ = [
    "AppState",
    "PaletteConfig",
    "ShadeRef",
    "ThemeMapping",
    "build_default_mapping",
    "create_initial_state",
    "parse_palette_input",
    "resolve_all_roles",
    "resolve_shade_ref",
]
