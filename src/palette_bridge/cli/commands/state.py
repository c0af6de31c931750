"""State commands: init, export, import."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from palette_bridge.exporters import (
    generate_color_kt,
    generate_css,
    generate_design_tokens,
    generate_material_json,
    generate_theme_kt,
)
from palette_bridge.models import AppConfig, AppState
from palette_bridge.palette import create_initial_state, export_state, import_state as parse_state

from ._common import load_state, read_text_input, report_errors, resolve_state_path, save_state, state_option

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ['css', 'kotlin', 'material', 'tokens', 'state']


@click.command()
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing state file')
@state_option
@report_errors
def init(force: bool, state_path: Optional[Path]):
    """Write a fresh state file: sample palettes with the default mapping."""
    path = resolve_state_path(state_path)
    if path.exists() and not force:
        click.echo(f"{path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    state = create_initial_state()
    save_state(state, path)
    click.echo(f"Created {path}")
    click.echo(f"Palettes: {', '.join(state.palette_config.palette_names)}")


def _render(state: AppState, fmt: str, package_name: str) -> dict[str, str]:
    """File name -> content for one export format."""
    config = state.palette_config
    mapping = state.theme_mapping

    if fmt == 'css':
        return {"theme.css": generate_css(config, mapping)}
    if fmt == 'kotlin':
        return {
            "Color.kt": generate_color_kt(config, mapping, package_name),
            "Theme.kt": generate_theme_kt(package_name),
        }
    if fmt == 'material':
        return {"material-theme.json": generate_material_json(config, mapping)}
    if fmt == 'tokens':
        tokens = generate_design_tokens(config, mapping)
        return {
            "core.tokens.json": tokens.core,
            "light.tokens.json": tokens.light,
            "dark.tokens.json": tokens.dark,
        }
    return {"palette-bridge.json": export_state(state)}


@click.command()
@click.argument('fmt', metavar='FORMAT', type=click.Choice(EXPORT_FORMATS))
@click.option(
    '--out', '-o',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory to write files into (default: print to stdout)'
)
@click.option('--package', 'package_name', default=None,
              help='Kotlin package name (default: from config)')
@state_option
@report_errors
def export(fmt: str, out: Optional[Path], package_name: Optional[str], state_path: Optional[Path]):
    """
    Export the theme as FORMAT.

    \b
    Formats:
      css       theme.css with :root and [data-theme="dark"] blocks
      kotlin    Color.kt and Theme.kt for Jetpack Compose
      material  Material Theme Builder JSON
      tokens    core/light/dark design token files
      state     the full state snapshot (re-importable)
    """
    state = load_state(state_path)
    package_name = package_name or AppConfig.load_or_default().kotlin_package
    files = _render(state, fmt, package_name)

    if out is None:
        for name, content in files.items():
            if len(files) > 1:
                click.echo(f"// {name}")
            click.echo(content, nl=not content.endswith("\n"))
        return

    out.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        target = out / name
        target.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {target}")
        click.echo(f"Wrote {target}")


@click.command(name='import')
@click.argument('source')
@state_option
@report_errors
def import_state(source: str, state_path: Optional[Path]):
    """
    Replace the saved state with an exported snapshot.

    The snapshot is validated first; on any error the saved state is
    left untouched.
    """
    text = read_text_input(source)
    state = parse_state(text, source=source)
    path = save_state(state, state_path)
    click.echo(f"Imported {source} into {path}")
