"""Color math: WCAG contrast and OKLCH conversions.

All functions are pure and operate on '#rrggbb' strings or plain floats.
"""

from .contrast import (
    contrast_ratio,
    hex_to_rgb,
    meets_wcag,
    relative_luminance,
    rgb_to_hex,
    text_color,
)
from .oklch import (
    format_oklch,
    hex_to_oklch,
    interpolate_oklch,
    lerp_angle,
    oklch_to_hex,
)

__all__ = [
    "contrast_ratio",
    "format_oklch",
    "hex_to_oklch",
    "hex_to_rgb",
    "interpolate_oklch",
    "lerp_angle",
    "meets_wcag",
    "oklch_to_hex",
    "relative_luminance",
    "rgb_to_hex",
    "text_color",
]
