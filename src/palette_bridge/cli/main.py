"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from palette_bridge import __version__

from .commands import contrast, export, import_state, init, interpolate, parse, paste, resolve

logger = logging.getLogger(__name__)

_log_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable DEBUG level
        log_file: Log to this file (rotating) instead of stderr
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        if not debug:
            level = getattr(logging, log_level.upper())
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        # stdout carries command output, so logs go to stderr
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)

    global _log_handler
    root_logger = logging.getLogger()
    if _log_handler is not None:
        root_logger.removeHandler(_log_handler)
        _log_handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _log_handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="palette-bridge")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    Palette Bridge - map color palettes onto Material 3 color roles.

    Palettes (50-950 shade ramps) are assigned to the 49 Material 3 color
    roles for light/dark mode at standard, medium and high contrast, then
    exported as CSS, Kotlin, Material Theme Builder JSON or design tokens.

    \b
    Examples:
      # Create a state file from the sample palettes
      palette-bridge init

      # Paste a Tailwind ramp into the primary palette
      palette-bridge paste primary colors.txt

      # Show resolved dark-mode colors at high contrast
      palette-bridge resolve --contrast high --mode dark

      # Export CSS variables
      palette-bridge export css --out ./theme

      # Check a color pair
      palette-bridge contrast "#2563eb" "#ffffff"
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(init)
cli.add_command(parse)
cli.add_command(paste)
cli.add_command(interpolate)
cli.add_command(resolve)
cli.add_command(contrast)
cli.add_command(export)
cli.add_command(import_state)

if __name__ == "__main__":
    cli()
