"""Theme commands: resolve, contrast."""

import json
from pathlib import Path
from typing import Optional

import click

from palette_bridge.colors import contrast_ratio, meets_wcag
from palette_bridge.models import ContrastLevel, ThemeMode
from palette_bridge.palette import resolve_all_roles, resolve_color, score_role_pair
from palette_bridge.roles import ALL_ROLES

from ._common import load_state, report_errors, state_option


@click.command()
@click.option(
    '--contrast', '-c', 'contrast_level',
    type=click.Choice([c.value for c in ContrastLevel]),
    default=None,
    help='Contrast level (default: active level in the state)'
)
@click.option(
    '--mode', '-m',
    type=click.Choice([m.value for m in ThemeMode]),
    default=None,
    help='Theme mode (default: active mode in the state)'
)
@click.option('--json', 'as_json', is_flag=True, help='Print a JSON object')
@state_option
@report_errors
def resolve(contrast_level: Optional[str], mode: Optional[str], as_json: bool, state_path: Optional[Path]):
    """Print the resolved color of every role with its WCAG score."""
    state = load_state(state_path)
    level = ContrastLevel(contrast_level) if contrast_level else state.active_contrast_level
    theme_mode = ThemeMode(mode) if mode else state.active_theme_mode

    assignments = state.theme_mapping.get(level, theme_mode)
    resolved = resolve_all_roles(state.palette_config, assignments)

    if as_json:
        click.echo(json.dumps({role.value: hex_value for role, hex_value in resolved.items()}, indent=2))
        return

    for role in ALL_ROLES:
        if role not in resolved:
            continue
        line = f"{role.value:<26} {resolved[role]}  {assignments[role]}"
        score = score_role_pair(resolved, role)
        if score is not None:
            ratio, wcag = score
            line += f"  {ratio:5.2f}:1 {wcag.value}"
        click.echo(line)


def _color_argument(ctx, param, value: str) -> str:
    color = resolve_color(value)
    if color is None:
        raise click.BadParameter(f"'{value}' is not a hex or oklch() color")
    return color


@click.command()
@click.argument('color_a', callback=_color_argument)
@click.argument('color_b', callback=_color_argument)
def contrast(color_a: str, color_b: str):
    """Print the WCAG contrast ratio between two colors."""
    ratio = contrast_ratio(color_a, color_b)
    click.echo(f"{color_a} / {color_b}: {ratio:.2f}:1 {meets_wcag(ratio).value}")
