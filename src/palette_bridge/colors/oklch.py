"""sRGB <-> OKLab <-> OKLCH conversions and OKLCH interpolation.

Uses the published OKLab matrices (Björn Ottosson, 2020) so results match
other OKLCH tools. Hue is in degrees, normalized to [0, 360).
"""

import math

from .contrast import hex_to_rgb, rgb_to_hex, srgb_to_linear

ACHROMATIC_CHROMA = 0.001
"""Below this chroma on both ends, hue is meaningless and pinned to 0."""


def linear_to_srgb(c: float) -> int:
    """Gamma-compress linear light to an 8-bit channel, clamped and rounded."""
    s = 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055
    # half-up rounding, not banker's rounding
    return math.floor(min(255.0, max(0.0, s * 255)) + 0.5)


def linear_rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_ = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m_ = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s_ = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l = math.cbrt(l_)
    m = math.cbrt(m_)
    s = math.cbrt(s_)

    return (
        0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s,
        1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s,
        0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s,
    )


def oklab_to_linear_rgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    return (
        +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def oklab_to_oklch(L: float, a: float, b: float) -> tuple[float, float, float]:
    C = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return (L, C, h)


def oklch_to_oklab(L: float, C: float, h: float) -> tuple[float, float, float]:
    h_rad = math.radians(h)
    return (L, C * math.cos(h_rad), C * math.sin(h_rad))


def hex_to_oklch(hex_color: str) -> tuple[float, float, float]:
    """
    Convert a hex color to OKLCH.

    Returns:
        (L, C, h) with L in [0, 1], C >= 0 and h in [0, 360)
    """
    r, g, b = hex_to_rgb(hex_color)
    lab = linear_rgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return oklab_to_oklch(*lab)


def oklch_to_hex(L: float, C: float, h: float) -> str:
    """Convert OKLCH to a lowercase hex color, clamping out-of-gamut channels."""
    lr, lg, lb = oklab_to_linear_rgb(*oklch_to_oklab(L, C, h))
    return rgb_to_hex(linear_to_srgb(lr), linear_to_srgb(lg), linear_to_srgb(lb))


def format_oklch(L: float, C: float, h: float) -> str:
    """CSS notation, e.g. 'oklch(0.6232 0.1880 259.8)'."""
    return f"oklch({L:.4f} {C:.4f} {h:.1f})"


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate between two hues along the shortest arc."""
    diff = b - a
    if diff > 180:
        diff -= 360
    if diff < -180:
        diff += 360
    result = (a + diff * t) % 360
    # -0.0 % 360 and tiny negatives can round up to exactly 360
    return 0.0 if result >= 360 else result


def interpolate_oklch(hex_a: str, hex_b: str, position: float) -> str:
    """
    Blend two hex colors in OKLCH space.

    L and C are interpolated linearly, hue along the shortest arc. When both
    colors are achromatic the hue is fixed at 0 so grays do not drift.
    Position 0 returns `hex_a` and 1 returns `hex_b` (within rounding).
    """
    l1, c1, h1 = hex_to_oklch(hex_a)
    l2, c2, h2 = hex_to_oklch(hex_b)

    L = l1 + (l2 - l1) * position
    C = c1 + (c2 - c1) * position
    if c1 < ACHROMATIC_CHROMA and c2 < ACHROMATIC_CHROMA:
        H = 0.0
    else:
        H = lerp_angle(h1, h2, position)

    return oklch_to_hex(L, C, H)
