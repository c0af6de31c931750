"""
Role -> shade correspondence table.

Every shade here comes from a positional correspondence between the M3
tonal palette (tones 0-100) and an 11-step shade ramp (50-950): e.g. M3
tone 40 sits at ~60% of its scale, as does shade 600. Contrast levels shift
the M3 tone, which is then snapped to the nearest shade.

Each spec holds a `[standard, medium, high]` shade triple per mode. Accent
roles are written once as name patterns (`{x}` = family name, `{X}` =
capitalized family name) and expanded for every accent family when this
module is imported, so lookups are plain dict hits.
"""

from dataclasses import dataclass

from palette_bridge.models import AccentFamily, ContrastLevel, RoleName, ShadeRef, ThemeMode

ShadeTriple = tuple[str, str, str]

NEUTRAL_PALETTE = "neutral"


@dataclass(frozen=True)
class ToneSpec:
    """Shade triples for one role (or role pattern)."""
    light: ShadeTriple
    dark: ShadeTriple

    def shade(self, contrast_level: ContrastLevel, mode: ThemeMode) -> str:
        triple = self.light if mode is ThemeMode.LIGHT else self.dark
        return triple[contrast_level.index]


@dataclass(frozen=True)
class RoleTone:
    """A concrete role bound to the palette it reads from."""
    role: RoleName
    palette: str
    spec: ToneSpec

    def shade_ref(self, contrast_level: ContrastLevel, mode: ThemeMode) -> ShadeRef:
        return ShadeRef(palette=self.palette, shade=self.spec.shade(contrast_level, mode))


# Accent pattern, shared by primary/secondary/tertiary/error
ACCENT_ROLE_PATTERNS: dict[str, ToneSpec] = {
    "{x}":            ToneSpec(light=("600", "700", "700"), dark=("200", "100", "100")),
    "on{X}":          ToneSpec(light=("white", "white", "white"), dark=("800", "900", "950")),
    "{x}Container":   ToneSpec(light=("100", "200", "200"), dark=("700", "700", "600")),
    "on{X}Container": ToneSpec(light=("700", "800", "900"), dark=("100", "50", "50")),
}

# Fixed roles: same shades in light and dark, shifting only with contrast.
# M3 defines no error Fixed roles, so these expand for FIXED_FAMILIES only.
FIXED_ROLE_PATTERNS: dict[str, ToneSpec] = {
    "{x}Fixed":          ToneSpec(light=("100", "100", "100"), dark=("100", "100", "100")),
    "on{X}Fixed":        ToneSpec(light=("900", "950", "950"), dark=("900", "950", "950")),
    "{x}FixedDim":       ToneSpec(light=("200", "200", "200"), dark=("200", "200", "200")),
    "on{X}FixedVariant": ToneSpec(light=("700", "800", "900"), dark=("700", "800", "900")),
}

FIXED_FAMILIES: tuple[AccentFamily, ...] = (
    AccentFamily.PRIMARY,
    AccentFamily.SECONDARY,
    AccentFamily.TERTIARY,
)

# Always read from the neutral palette
SURFACE_ROLE_SPECS: dict[RoleName, ToneSpec] = {
    RoleName.SURFACE:                   ToneSpec(light=("50", "50", "50"), dark=("900", "900", "900")),
    RoleName.ON_SURFACE:                ToneSpec(light=("900", "950", "black"), dark=("100", "50", "white")),
    RoleName.SURFACE_VARIANT:           ToneSpec(light=("100", "100", "100"), dark=("700", "700", "700")),
    RoleName.ON_SURFACE_VARIANT:        ToneSpec(light=("700", "800", "900"), dark=("200", "200", "100")),
    RoleName.SURFACE_DIM:               ToneSpec(light=("200", "300", "300"), dark=("900", "900", "900")),
    RoleName.SURFACE_BRIGHT:            ToneSpec(light=("50", "50", "50"), dark=("800", "700", "700")),
    RoleName.SURFACE_CONTAINER_LOWEST:  ToneSpec(light=("white", "white", "white"), dark=("950", "950", "black")),
    RoleName.SURFACE_CONTAINER_LOW:     ToneSpec(light=("50", "50", "50"), dark=("900", "900", "800")),
    RoleName.SURFACE_CONTAINER:         ToneSpec(light=("100", "100", "100"), dark=("800", "800", "800")),
    RoleName.SURFACE_CONTAINER_HIGH:    ToneSpec(light=("100", "200", "200"), dark=("800", "800", "700")),
    RoleName.SURFACE_CONTAINER_HIGHEST: ToneSpec(light=("100", "200", "200"), dark=("700", "700", "700")),
    RoleName.INVERSE_SURFACE:           ToneSpec(light=("800", "800", "800"), dark=("100", "100", "100")),
    RoleName.INVERSE_ON_SURFACE:        ToneSpec(light=("50", "50", "50"), dark=("800", "800", "800")),
    RoleName.BACKGROUND:                ToneSpec(light=("50", "50", "50"), dark=("900", "900", "900")),
    RoleName.ON_BACKGROUND:             ToneSpec(light=("900", "900", "950"), dark=("100", "100", "50")),
}

# (palette, spec) pairs for the remaining roles
OTHER_ROLE_SPECS: dict[RoleName, tuple[str, ToneSpec]] = {
    RoleName.OUTLINE:         (NEUTRAL_PALETTE, ToneSpec(light=("500", "600", "700"), dark=("400", "300", "200"))),
    RoleName.OUTLINE_VARIANT: (NEUTRAL_PALETTE, ToneSpec(light=("200", "300", "400"), dark=("700", "600", "500"))),
    RoleName.SCRIM:           (NEUTRAL_PALETTE, ToneSpec(light=("black", "black", "black"), dark=("black", "black", "black"))),
    RoleName.SHADOW:          (NEUTRAL_PALETTE, ToneSpec(light=("black", "black", "black"), dark=("black", "black", "black"))),
    RoleName.SURFACE_TINT:    ("primary", ACCENT_ROLE_PATTERNS["{x}"]),
    RoleName.INVERSE_PRIMARY: ("primary", ToneSpec(light=("200", "200", "200"), dark=("600", "700", "700"))),
}


def expand_pattern(pattern: str, family: AccentFamily) -> RoleName:
    """
    Substitute a family into a role-name pattern.

    Raises:
        ValueError: If the result is not a known role
    """
    return RoleName(pattern.replace("{X}", family.capitalized).replace("{x}", family.value))


def _build_table() -> dict[RoleName, RoleTone]:
    table: dict[RoleName, RoleTone] = {}

    def add(role: RoleName, palette: str, spec: ToneSpec) -> None:
        if role in table:
            raise ValueError(f"Duplicate tone spec for role '{role.value}'")
        table[role] = RoleTone(role=role, palette=palette, spec=spec)

    for family in AccentFamily:
        for pattern, spec in ACCENT_ROLE_PATTERNS.items():
            add(expand_pattern(pattern, family), family.value, spec)
    for family in FIXED_FAMILIES:
        for pattern, spec in FIXED_ROLE_PATTERNS.items():
            add(expand_pattern(pattern, family), family.value, spec)
    for role, spec in SURFACE_ROLE_SPECS.items():
        add(role, NEUTRAL_PALETTE, spec)
    for role, (palette, spec) in OTHER_ROLE_SPECS.items():
        add(role, palette, spec)

    missing = set(RoleName) - set(table)
    if missing:
        raise ValueError(f"No tone spec for roles: {sorted(r.value for r in missing)}")
    return table


TONE_TABLE: dict[RoleName, RoleTone] = _build_table()
"""Every role's palette and shade triples, fully expanded."""


def lookup_shade_ref(role: RoleName, contrast_level: ContrastLevel, mode: ThemeMode) -> ShadeRef:
    """Default shade reference for one role in one (contrast level, mode) cell."""
    return TONE_TABLE[role].shade_ref(contrast_level, mode)
