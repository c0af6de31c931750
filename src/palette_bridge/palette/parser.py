"""
Free-form palette text parser.

Accepts what people usually paste from design tools and Tailwind configs,
one color per line:

    #eff6ff                     plain hex list (assigned 50, 100, 200, ...)
    50: #eff6ff                 labeled, colon-separated
    '50': '#eff6ff',            JS object entry
    50 #eff6ff                  labeled, space-separated
    --color-blue-50: #eff6ff;   CSS custom property
    50: oklch(97% 0.01 250)     OKLCH instead of hex

If any line carries a shade label the whole paste is read as labeled and
unlabeled lines are dropped; otherwise values are assigned in shade order.
Lines that cannot be read, and labels outside 50..950, are skipped.
"""

import logging
import re
from typing import NamedTuple, Optional

from palette_bridge.colors import oklch_to_hex
from palette_bridge.models import SHADE_LABELS

logger = logging.getLogger(__name__)

VALID_SHADES = frozenset(SHADE_LABELS)

# oklch(L C h), lightness optionally in percent
OKLCH_RE = re.compile(r"oklch\(\s*([\d.]+)(%?)\s+([\d.]+)\s+([\d.]+)\s*\)")

# 6-digit or 3-digit hex, '#' optional
HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")

CSS_VAR_RE = re.compile(r"^--[\w-]+-(\d+)\s*:\s*(.+?);?\s*$", re.ASCII)
COLON_RE = re.compile(r"""^['"]?(\d+)['"]?\s*:\s*(.+?),?\s*$""")
SPACE_RE = re.compile(r"^(\d+)\s+(#?[0-9a-fA-F]{6}|oklch\(.+?\))\s*$")


class ParsedLine(NamedTuple):
    """One successfully read line; `shade` is None for a bare value."""
    shade: Optional[str]
    hex: str


def resolve_color(raw: str) -> Optional[str]:
    """
    Read a hex or oklch() value as '#rrggbb'.

    Surrounding quotes and a trailing ';' or ',' are ignored. 3-digit hex
    is expanded by doubling each digit.

    Returns:
        Lowercase '#rrggbb', or None if the value is not a color
    """
    trimmed = raw.strip()
    if trimmed.endswith(";"):
        trimmed = trimmed[:-1]
    trimmed = re.sub(r",\s*$", "", trimmed).strip()

    oklch_match = OKLCH_RE.search(trimmed)
    if oklch_match:
        try:
            L = float(oklch_match.group(1))
            C = float(oklch_match.group(3))
            h = float(oklch_match.group(4))
        except ValueError:
            return None
        if oklch_match.group(2) == "%":
            L /= 100
        return oklch_to_hex(L, C, h)

    unquoted = re.sub(r"""['"]$""", "", re.sub(r"""^['"]""", "", trimmed)).strip()
    hex_match = HEX_RE.match(unquoted)
    if hex_match:
        digits = hex_match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return "#" + digits

    return None


def _labeled(shade: str, value: str) -> Optional[ParsedLine]:
    color = resolve_color(value)
    if color is None:
        return None
    if shade not in VALID_SHADES:
        logger.debug(f"Skipping unsupported shade label {shade}")
        return None
    return ParsedLine(shade=shade, hex=color)


def parse_line(line: str) -> Optional[ParsedLine]:
    """
    Classify and read a single line.

    Formats are tried in order (CSS custom property, colon-labeled,
    space-labeled, bare value); the first one whose shape matches decides,
    even if its value or label then turns out to be invalid.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    for pattern in (CSS_VAR_RE, COLON_RE, SPACE_RE):
        match = pattern.match(trimmed)
        if match:
            return _labeled(match.group(1), match.group(2))

    color = resolve_color(trimmed)
    if color is not None:
        return ParsedLine(shade=None, hex=color)
    return None


def parse_palette_input(text: str) -> dict[str, str]:
    """
    Parse pasted text into a shade label -> hex mapping.

    Args:
        text: Multi-line input in any of the supported formats

    Returns:
        Label -> '#rrggbb'; empty when nothing could be read

    Example:
        >>> parse_palette_input("50: #eff6ff\\n100: #dbeafe")
        {'50': '#eff6ff', '100': '#dbeafe'}
    """
    if not text.strip():
        return {}

    parsed = [result for result in map(parse_line, text.splitlines()) if result is not None]
    if not parsed:
        return {}

    if any(p.shade is not None for p in parsed):
        return {p.shade: p.hex for p in parsed if p.shade is not None}

    # Positional: assign in shade order, extra values are dropped
    return {shade: p.hex for shade, p in zip(SHADE_LABELS, parsed)}
