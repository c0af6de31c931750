"""
Palette and mapping edits.

Every function takes a snapshot and returns a new one; arguments are never
modified. The host application owns the current snapshot and swaps it for
the returned value.
"""

import logging
from collections.abc import Iterable, Mapping

from palette_bridge.exceptions import InvalidColorError, UnknownPaletteError
from palette_bridge.models import (
    AppState,
    ContrastLevel,
    PaletteConfig,
    RoleName,
    ShadeRef,
    ShadeValue,
    ThemeMapping,
    ThemeMode,
    normalize_hex,
)
from palette_bridge.persistence import PydanticPersistence
from palette_bridge.roles import build_default_mapping, build_mode_assignments

from .interpolation import generate_intermediate_neutrals
from .parser import parse_palette_input
from .sample import sample_palette_config

logger = logging.getLogger(__name__)


def _require_palette(config: PaletteConfig, palette: str) -> None:
    if palette not in config.palettes:
        raise UnknownPaletteError(palette, config.palette_names)


# =================================================================
# Palette edits
# =================================================================

def apply_shades(config: PaletteConfig, palette: str, shades: Mapping[str, str]) -> PaletteConfig:
    """
    Set several shades of one palette.

    An interpolated shade with the same label is dropped so base and
    interpolated labels stay disjoint.

    Raises:
        UnknownPaletteError: If the palette does not exist
        InvalidColorError: If a value is not a 6-digit hex color
    """
    _require_palette(config, palette)

    normalized: dict[str, str] = {}
    for shade, value in shades.items():
        try:
            normalized[shade] = normalize_hex(value)
        except ValueError as e:
            raise InvalidColorError(value) from e

    new_config = config.model_copy(deep=True)
    target = new_config.palettes[palette].shades
    interpolated = new_config.interpolated.get(palette, {})
    for shade, hex_value in normalized.items():
        target[shade] = ShadeValue(hex=hex_value)
        interpolated.pop(shade, None)

    logger.info(f"Updated {len(normalized)} shade(s) of palette '{palette}'")
    return new_config


def update_shade(config: PaletteConfig, palette: str, shade: str, hex_value: str) -> PaletteConfig:
    """Set a single shade (hex with or without '#')."""
    return apply_shades(config, palette, {shade: hex_value})


def apply_paste(config: PaletteConfig, palette: str, text: str) -> PaletteConfig:
    """
    Bulk-import pasted text into a palette.

    When nothing in `text` can be read the config is returned unchanged.
    """
    _require_palette(config, palette)
    shades = parse_palette_input(text)
    if not shades:
        logger.info(f"Paste into '{palette}' contained no usable colors")
        return config
    return apply_shades(config, palette, shades)


def apply_interpolation(config: PaletteConfig, palette: str, targets: Iterable[int]) -> PaletteConfig:
    """
    Generate interpolated shades for a palette and store them.

    Targets that already exist as base shades are skipped. Previously
    interpolated shades of the palette are replaced.
    """
    _require_palette(config, palette)
    base = config.palettes[palette].shades
    wanted = [t for t in targets if str(t) not in base]

    generated = generate_intermediate_neutrals(base, wanted)
    new_config = config.model_copy(deep=True)
    new_config.interpolated[palette] = generated
    logger.info(f"Interpolated {len(generated)} shade(s) for palette '{palette}'")
    return new_config


def clear_interpolation(config: PaletteConfig) -> PaletteConfig:
    """Remove all interpolated shades."""
    return config.model_copy(update={"interpolated": {}}, deep=True)


# =================================================================
# Mapping edits
# =================================================================

def set_role_assignment(
    mapping: ThemeMapping,
    contrast_level: ContrastLevel,
    mode: ThemeMode,
    role: RoleName,
    ref: ShadeRef,
) -> ThemeMapping:
    """Point one role of one (contrast level, mode) cell at a new shade."""
    new_mapping = mapping.model_copy(deep=True)
    if contrast_level is ContrastLevel.STANDARD:
        cell = new_mapping.light if mode is ThemeMode.LIGHT else new_mapping.dark
    else:
        cell = new_mapping.level(contrast_level).for_mode(mode)
    cell[role] = ref
    logger.debug(f"{contrast_level.value}/{mode.value}: {role.value} -> {ref}")
    return new_mapping


def reset_contrast_to_defaults(mapping: ThemeMapping, contrast_level: ContrastLevel) -> ThemeMapping:
    """Rebuild both modes of one contrast level from the default table."""
    defaults = build_mode_assignments(contrast_level)
    if contrast_level is ContrastLevel.STANDARD:
        update = {"light": defaults.light, "dark": defaults.dark}
    elif contrast_level is ContrastLevel.MEDIUM:
        update = {"medium_contrast": defaults}
    else:
        update = {"high_contrast": defaults}
    logger.info(f"Reset {contrast_level.value} contrast assignments to defaults")
    return mapping.model_copy(update=update, deep=True)


# =================================================================
# Whole-state helpers
# =================================================================

def create_initial_state(palette_config: PaletteConfig | None = None) -> AppState:
    """Fresh state: given (or sample) palettes with the default mapping."""
    if palette_config is None:
        palette_config = sample_palette_config()
    return AppState(
        palette_config=palette_config,
        theme_mapping=build_default_mapping(palette_config),
    )


def import_state(text: str, source: str = "<import>") -> AppState:
    """
    Validate an exported state snapshot.

    Raises:
        StateFileInvalidError: If the text is not valid JSON
        StateValidationError: If the snapshot is structurally malformed
    """
    return PydanticPersistence.parse_json(text, AppState, source=source)


def export_state(state: AppState) -> str:
    """Serialize a state snapshot to camelCase JSON."""
    return state.model_dump_json(indent=2, by_alias=True)
