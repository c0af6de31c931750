"""Enumerations for Palette Bridge."""

from enum import Enum


class ContrastLevel(str, Enum):
    """Accessibility contrast levels."""

    STANDARD = "standard"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def index(self) -> int:
        """Position in a [standard, medium, high] shade triple."""
        return {
            ContrastLevel.STANDARD: 0,
            ContrastLevel.MEDIUM: 1,
            ContrastLevel.HIGH: 2,
        }[self]


class ThemeMode(str, Enum):
    """Appearance modes."""

    LIGHT = "light"
    DARK = "dark"


class WCAGLevel(str, Enum):
    """WCAG 2 conformance levels for a contrast ratio."""

    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA-large"
    FAIL = "fail"


class RoleFamily(str, Enum):
    """Grouping of color roles."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    ERROR = "error"
    SURFACE = "surface"
    OTHER = "other"


class AccentFamily(str, Enum):
    """Families that share the accent role pattern (and own a palette of the same name)."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    ERROR = "error"

    @property
    def capitalized(self) -> str:
        return self.value[:1].upper() + self.value[1:]


class RoleName(str, Enum):
    """The 49 color roles of a Material 3 color scheme."""

    # Primary
    PRIMARY = "primary"
    ON_PRIMARY = "onPrimary"
    PRIMARY_CONTAINER = "primaryContainer"
    ON_PRIMARY_CONTAINER = "onPrimaryContainer"

    # Secondary
    SECONDARY = "secondary"
    ON_SECONDARY = "onSecondary"
    SECONDARY_CONTAINER = "secondaryContainer"
    ON_SECONDARY_CONTAINER = "onSecondaryContainer"

    # Tertiary
    TERTIARY = "tertiary"
    ON_TERTIARY = "onTertiary"
    TERTIARY_CONTAINER = "tertiaryContainer"
    ON_TERTIARY_CONTAINER = "onTertiaryContainer"

    # Error
    ERROR = "error"
    ON_ERROR = "onError"
    ERROR_CONTAINER = "errorContainer"
    ON_ERROR_CONTAINER = "onErrorContainer"

    # Surface
    SURFACE = "surface"
    ON_SURFACE = "onSurface"
    SURFACE_VARIANT = "surfaceVariant"
    ON_SURFACE_VARIANT = "onSurfaceVariant"
    SURFACE_DIM = "surfaceDim"
    SURFACE_BRIGHT = "surfaceBright"
    SURFACE_CONTAINER_LOWEST = "surfaceContainerLowest"
    SURFACE_CONTAINER_LOW = "surfaceContainerLow"
    SURFACE_CONTAINER = "surfaceContainer"
    SURFACE_CONTAINER_HIGH = "surfaceContainerHigh"
    SURFACE_CONTAINER_HIGHEST = "surfaceContainerHighest"
    INVERSE_SURFACE = "inverseSurface"
    INVERSE_ON_SURFACE = "inverseOnSurface"
    BACKGROUND = "background"
    ON_BACKGROUND = "onBackground"

    # Other
    INVERSE_PRIMARY = "inversePrimary"
    OUTLINE = "outline"
    OUTLINE_VARIANT = "outlineVariant"
    SCRIM = "scrim"
    SHADOW = "shadow"
    SURFACE_TINT = "surfaceTint"

    # Fixed (mode-invariant)
    PRIMARY_FIXED = "primaryFixed"
    ON_PRIMARY_FIXED = "onPrimaryFixed"
    PRIMARY_FIXED_DIM = "primaryFixedDim"
    ON_PRIMARY_FIXED_VARIANT = "onPrimaryFixedVariant"
    SECONDARY_FIXED = "secondaryFixed"
    ON_SECONDARY_FIXED = "onSecondaryFixed"
    SECONDARY_FIXED_DIM = "secondaryFixedDim"
    ON_SECONDARY_FIXED_VARIANT = "onSecondaryFixedVariant"
    TERTIARY_FIXED = "tertiaryFixed"
    ON_TERTIARY_FIXED = "onTertiaryFixed"
    TERTIARY_FIXED_DIM = "tertiaryFixedDim"
    ON_TERTIARY_FIXED_VARIANT = "onTertiaryFixedVariant"
