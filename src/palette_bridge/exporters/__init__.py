"""Serializers from a palette config + theme mapping to downstream formats."""

from .css import camel_to_kebab, generate_css
from .kotlin import generate_color_kt, generate_theme_kt, hex_to_argb
from .material_json import generate_material_json
from .tokens import DesignTokens, generate_design_tokens

__all__ = [
    "DesignTokens",
    "camel_to_kebab",
    "generate_color_kt",
    "generate_css",
    "generate_design_tokens",
    "generate_material_json",
    "generate_theme_kt",
    "hex_to_argb",
]
