"""WCAG relative luminance and contrast ratio."""

from palette_bridge.models import WCAGLevel


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse a 6-digit hex color (with or without '#', any case) into 8-bit RGB."""
    h = hex_color.strip().lstrip("#")
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode 8-bit RGB as lowercase '#rrggbb'."""
    return f"#{r:02x}{g:02x}{b:02x}"


def srgb_to_linear(c: float) -> float:
    """Gamma-expand one 8-bit sRGB channel to linear light in [0, 1]."""
    s = c / 255
    return s / 12.92 if s <= 0.04045 else ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    WCAG relative luminance of an 8-bit sRGB color.

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    return (
        0.2126 * srgb_to_linear(r)
        + 0.7152 * srgb_to_linear(g)
        + 0.0722 * srgb_to_linear(b)
    )


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Symmetric in its arguments; ranges from 1 (identical colors) to 21
    (black on white).

    Example:
        >>> round(contrast_ratio("#000000", "#ffffff"), 1)
        21.0
    """
    l1 = relative_luminance(*hex_to_rgb(hex_a))
    l2 = relative_luminance(*hex_to_rgb(hex_b))
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag(ratio: float) -> WCAGLevel:
    """Classify a contrast ratio against the WCAG 2 thresholds."""
    if ratio >= 7:
        return WCAGLevel.AAA
    if ratio >= 4.5:
        return WCAGLevel.AA
    if ratio >= 3:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def text_color(background: str) -> str:
    """Black or white, whichever reads better on `background`."""
    if contrast_ratio(background, "#000000") >= contrast_ratio(background, "#ffffff"):
        return "#000000"
    return "#ffffff"
