"""Palette models: shade values, palettes and interpolated shades."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SHADE_LABELS: tuple[str, ...] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)
"""Canonical shade labels, light to dark."""

SENTINEL_LABELS: tuple[str, ...] = ("white", "black")

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_hex(value: str) -> str:
    """Return `value` as lowercase `#rrggbb`, raising ValueError if it is not a 6-digit hex."""
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"'{value}' is not a 6-digit hex color")
    return "#" + match.group(1).lower()


class ShadeValue(BaseModel):
    """A single color entry in a palette.

    The model is frozen so shade values can be shared between snapshots.
    """

    model_config = ConfigDict(frozen=True)

    hex: str = Field(description="Canonical lowercase #rrggbb color")
    oklch: str | None = Field(default=None, description="Optional oklch() source notation")

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Normalize to lowercase #rrggbb."""
        return normalize_hex(v)


class Palette(BaseModel):
    """A named color ramp, keyed by shade label."""

    shades: dict[str, ShadeValue] = Field(default_factory=dict, description="Shade label -> value")

    @classmethod
    def from_hex_map(cls, shades: dict[str, str]) -> "Palette":
        """Create a palette from a plain label -> hex mapping."""
        return cls(shades={label: ShadeValue(hex=hex_value) for label, hex_value in shades.items()})

    def numeric_labels(self) -> list[int]:
        """Shade labels that are integers, ascending."""
        return sorted(int(label) for label in self.shades if label.isdigit())


class InterpolationSource(BaseModel):
    """Provenance of an interpolated shade.

    `position` is usually in [0, 1]; targets outside the palette's numeric
    range extrapolate from the outermost pair and fall outside it.
    """

    model_config = ConfigDict(frozen=True)

    between: tuple[str, str] = Field(description="Lower and upper shade labels")
    position: float = Field(description="Relative position between the two shades")


class InterpolatedShade(BaseModel):
    """A shade derived from two real shades by OKLCH interpolation."""

    model_config = ConfigDict(frozen=True)

    hex: str
    oklch: str
    source: InterpolationSource

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Normalize to lowercase #rrggbb."""
        return normalize_hex(v)


class PaletteConfig(BaseModel):
    """All palettes plus their interpolated shades.

    Interpolated shades form a second, lower-priority lookup tier and may
    not reuse a base shade label of the same palette.
    """

    palettes: dict[str, Palette] = Field(default_factory=dict)
    interpolated: dict[str, dict[str, InterpolatedShade]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_interpolated_labels(self) -> "PaletteConfig":
        """Reject interpolated labels that shadow base shades."""
        for name, shades in self.interpolated.items():
            palette = self.palettes.get(name)
            if palette is None:
                continue
            overlap = sorted(set(shades) & set(palette.shades))
            if overlap:
                raise ValueError(
                    f"interpolated shades of '{name}' collide with base shades: {', '.join(overlap)}"
                )
        return self

    @property
    def palette_names(self) -> list[str]:
        return list(self.palettes)
