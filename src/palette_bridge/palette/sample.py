"""Bundled sample palettes (Tailwind CSS v3 ramps)."""

from palette_bridge.models import SHADE_LABELS, Palette, PaletteConfig

_SENTINELS = {"white": "#ffffff", "black": "#000000"}

_RAMPS: dict[str, list[str]] = {
    # blue
    "primary": [
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ],
    # emerald
    "secondary": [
        "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981",
        "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
    ],
    # violet
    "tertiary": [
        "#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6",
        "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065",
    ],
    # red
    "error": [
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ],
    # gray
    "neutral": [
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ],
}


def sample_palette_config() -> PaletteConfig:
    """A fresh copy of the sample palettes, each with white/black sentinels."""
    return PaletteConfig(
        palettes={
            name: Palette.from_hex_map({**dict(zip(SHADE_LABELS, ramp)), **_SENTINELS})
            for name, ramp in _RAMPS.items()
        }
    )


SAMPLE_PALETTE_CONFIG = sample_palette_config()
