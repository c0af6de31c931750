"""Palette operations: resolution, parsing, interpolation and edits."""

from .editing import (
    apply_interpolation,
    apply_paste,
    apply_shades,
    clear_interpolation,
    create_initial_state,
    export_state,
    import_state,
    reset_contrast_to_defaults,
    set_role_assignment,
    update_shade,
)
from .interpolation import generate_intermediate_neutrals
from .parser import parse_line, parse_palette_input, resolve_color
from .resolver import resolve_all_roles, resolve_shade_ref, score_role_pair
from .sample import SAMPLE_PALETTE_CONFIG, sample_palette_config

__all__ = [
    "SAMPLE_PALETTE_CONFIG",
    "apply_interpolation",
    "apply_paste",
    "apply_shades",
    "clear_interpolation",
    "create_initial_state",
    "export_state",
    "generate_intermediate_neutrals",
    "import_state",
    "parse_line",
    "parse_palette_input",
    "reset_contrast_to_defaults",
    "resolve_all_roles",
    "resolve_color",
    "resolve_shade_ref",
    "sample_palette_config",
    "score_role_pair",
    "set_role_assignment",
    "update_shade",
]
