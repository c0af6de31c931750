"""Helpers shared by CLI commands."""

import logging
import sys
from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click

from palette_bridge.exceptions import PaletteBridgeError, format_error_for_display
from palette_bridge.models import AppConfig, AppState
from palette_bridge.palette import create_initial_state
from palette_bridge.persistence import PydanticPersistence

logger = logging.getLogger(__name__)

state_option = click.option(
    '--state',
    'state_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='State file (default: from ~/.palette-bridge/config.json)'
)


def resolve_state_path(state_path: Optional[Path]) -> Path:
    if state_path is not None:
        return state_path
    return AppConfig.load_or_default().state_path


def load_state(state_path: Optional[Path]) -> AppState:
    """Load the saved state, or the sample state if no file exists yet."""
    path = resolve_state_path(state_path)
    return PydanticPersistence.load_json_or_default(path, AppState, create_initial_state)


def save_state(state: AppState, state_path: Optional[Path]) -> Path:
    path = resolve_state_path(state_path)
    PydanticPersistence.save_json(state, path)
    return path


def read_text_input(source: str) -> str:
    """Read a file argument, '-' meaning stdin."""
    with click.open_file(source, "r", encoding="utf-8") as f:
        return f.read()


def report_errors(func: Callable) -> Callable:
    """Print PaletteBridgeError messages and exit 1 instead of a traceback."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PaletteBridgeError as e:
            logger.error(f"{func.__name__} failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            sys.exit(1)
    return wrapper
