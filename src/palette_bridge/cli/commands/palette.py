"""Palette commands: parse, paste, interpolate."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from palette_bridge.models import AppConfig
from palette_bridge.palette import apply_interpolation, apply_shades, clear_interpolation, parse_palette_input

from ._common import load_state, read_text_input, report_errors, save_state, state_option


@click.command()
@click.argument('source', default='-')
def parse(source: str):
    """
    Parse pasted palette text and print shade -> hex as JSON.

    SOURCE is a file path, or '-' (default) for stdin.
    """
    shades = parse_palette_input(read_text_input(source))
    click.echo(json.dumps(shades, indent=2))


@click.command()
@click.argument('palette')
@click.argument('source', default='-')
@state_option
@report_errors
def paste(palette: str, source: str, state_path: Optional[Path]):
    """
    Import pasted text into PALETTE and save the state.

    Accepts hex lists, labeled hex, CSS custom properties and oklch() values.
    """
    state = load_state(state_path)
    shades = parse_palette_input(read_text_input(source))
    if not shades:
        click.echo("No colors found in input", err=True)
        sys.exit(1)

    state.palette_config = apply_shades(state.palette_config, palette, shades)
    path = save_state(state, state_path)
    click.echo(f"Updated {len(shades)} shade(s) of '{palette}': {', '.join(shades)}")
    click.echo(f"Saved {path}")


@click.command()
@click.option('--palette', '-p', default=None, help='Palette to interpolate (default: from config)')
@click.option('--target', '-t', 'targets', type=int, multiple=True,
              help='Shade value to create; repeatable (default: from config)')
@click.option('--off', is_flag=True, help='Remove interpolated shades and disable interpolation')
@state_option
@report_errors
def interpolate(palette: Optional[str], targets: tuple[int, ...], off: bool, state_path: Optional[Path]):
    """Create intermediate shades by OKLCH interpolation and save the state."""
    state = load_state(state_path)

    if off:
        state.palette_config = clear_interpolation(state.palette_config)
        state.interpolation_enabled = False
        save_state(state, state_path)
        click.echo("Interpolation disabled")
        return

    config = AppConfig.load_or_default()
    palette = palette or config.interpolation_palette
    wanted = list(targets) or config.interpolation_targets

    state.palette_config = apply_interpolation(state.palette_config, palette, wanted)
    state.interpolation_enabled = True
    save_state(state, state_path)

    for label, shade in state.palette_config.interpolated.get(palette, {}).items():
        lower, upper = shade.source.between
        click.echo(f"{label:>5}  {shade.hex}  {shade.oklch}  ({lower}-{upper} @ {shade.source.position:.2f})")
