"""CLI commands."""

from .palette import interpolate, parse, paste
from .state import export, import_state, init
from .theme import contrast, resolve

__all__ = [
    "contrast",
    "export",
    "import_state",
    "init",
    "interpolate",
    "parse",
    "paste",
    "resolve",
]
