"""Jetpack Compose export (Color.kt and Theme.kt)."""

from typing import NamedTuple

from palette_bridge.models import ContrastLevel, PaletteConfig, ThemeMapping, ThemeMode
from palette_bridge.palette import resolve_shade_ref
from palette_bridge.roles import KOTLIN_COLOR_SCHEME_ROLES


class Variant(NamedTuple):
    suffix: str
    contrast_level: ContrastLevel
    mode: ThemeMode
    scheme_name: str


VARIANTS: tuple[Variant, ...] = (
    Variant("Light", ContrastLevel.STANDARD, ThemeMode.LIGHT, "lightScheme"),
    Variant("Dark", ContrastLevel.STANDARD, ThemeMode.DARK, "darkScheme"),
    Variant("LightMediumContrast", ContrastLevel.MEDIUM, ThemeMode.LIGHT, "mediumContrastLightColorScheme"),
    Variant("DarkMediumContrast", ContrastLevel.MEDIUM, ThemeMode.DARK, "mediumContrastDarkColorScheme"),
    Variant("LightHighContrast", ContrastLevel.HIGH, ThemeMode.LIGHT, "highContrastLightColorScheme"),
    Variant("DarkHighContrast", ContrastLevel.HIGH, ThemeMode.DARK, "highContrastDarkColorScheme"),
)


def hex_to_argb(hex_value: str) -> str:
    """'#2563eb' -> 'FF2563EB' (fully opaque)."""
    return "FF" + hex_value.lstrip("#").upper()


def generate_color_kt(config: PaletteConfig, mapping: ThemeMapping, package_name: str) -> str:
    """One `val <role><Variant> = Color(0xAARRGGBB)` per resolvable role and variant."""
    lines = [
        f"package {package_name}",
        "",
        "import androidx.compose.ui.graphics.Color",
        "",
    ]

    for variant in VARIANTS:
        assignments = mapping.get(variant.contrast_level, variant.mode)
        for role in KOTLIN_COLOR_SCHEME_ROLES:
            ref = assignments.get(role)
            if ref is None:
                continue
            hex_value = resolve_shade_ref(config, ref)
            if hex_value is None:
                continue
            lines.append(f"val {role.value}{variant.suffix} = Color(0x{hex_to_argb(hex_value)})")

    return "\n".join(lines) + "\n"


def generate_theme_kt(package_name: str) -> str:
    """The six ColorScheme declarations wiring roles to the Color.kt constants."""
    lines = [
        f"package {package_name}",
        "",
        "import androidx.compose.material3.darkColorScheme",
        "import androidx.compose.material3.lightColorScheme",
        "",
    ]

    for variant in VARIANTS:
        constructor = "lightColorScheme" if variant.mode is ThemeMode.LIGHT else "darkColorScheme"
        lines.append(f"private val {variant.scheme_name} = {constructor}(")
        for role in KOTLIN_COLOR_SCHEME_ROLES:
            lines.append(f"    {role.value} = {role.value}{variant.suffix},")
        lines.append(")")
        lines.append("")

    return "\n".join(lines) + "\n"
