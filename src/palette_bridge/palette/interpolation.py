"""Synthesize intermediate shades by OKLCH interpolation."""

import logging
from collections.abc import Iterable, Mapping

from palette_bridge.colors import format_oklch, hex_to_oklch, interpolate_oklch
from palette_bridge.models import InterpolatedShade, InterpolationSource, ShadeValue

logger = logging.getLogger(__name__)


def _bracket(labels: list[int], target: float) -> tuple[int, int]:
    """Tightest (lower, upper) pair around target, or the outermost pair if none."""
    for lower, upper in zip(labels, labels[1:]):
        if lower <= target <= upper:
            return lower, upper
    return labels[0], labels[-1]


def generate_intermediate_neutrals(
    existing: Mapping[str, ShadeValue], targets: Iterable[int]
) -> dict[str, InterpolatedShade]:
    """
    Create shades at `targets` between the existing numeric shades.

    Each target is interpolated between its nearest existing neighbours.
    A target outside the existing range uses the first and last shades and
    extrapolates (its position falls outside [0, 1]).

    Args:
        existing: Shade label -> value; non-numeric labels ('white', 'black') are ignored
        targets: Numeric shade values to create, e.g. [150, 250]

    Returns:
        Target label -> InterpolatedShade; empty if there are no numeric shades
    """
    by_value = {int(label): label for label in existing if label.isdigit()}
    labels = sorted(by_value)
    if not labels:
        logger.debug("No numeric shades to interpolate between")
        return {}

    result: dict[str, InterpolatedShade] = {}
    for target in targets:
        lower, upper = _bracket(labels, target)
        position = 0.0 if upper == lower else (target - lower) / (upper - lower)

        hex_value = interpolate_oklch(
            existing[by_value[lower]].hex, existing[by_value[upper]].hex, position
        )
        result[str(target)] = InterpolatedShade(
            hex=hex_value,
            oklch=format_oklch(*hex_to_oklch(hex_value)),
            source=InterpolationSource(between=(by_value[lower], by_value[upper]), position=position),
        )
        logger.debug(f"Interpolated {target} between {lower} and {upper} at {position:.3f}: {hex_value}")

    return result
