"""Pytest fixtures for tests."""

import pytest

from palette_bridge.models import PaletteConfig, ShadeValue, ThemeMapping
from palette_bridge.palette import create_initial_state, sample_palette_config
from palette_bridge.roles import build_default_mapping


@pytest.fixture
def sample_config() -> PaletteConfig:
    """Fresh copy of the bundled sample palettes."""
    return sample_palette_config()


@pytest.fixture
def default_mapping(sample_config) -> ThemeMapping:
    """Default 6-cell mapping for the sample palettes."""
    return build_default_mapping(sample_config)


@pytest.fixture
def initial_state():
    """State as created by `palette-bridge init`."""
    return create_initial_state()


@pytest.fixture
def three_shades() -> dict[str, ShadeValue]:
    """A short blue ramp: 50, 100, 200."""
    return {
        "50": ShadeValue(hex="#eff6ff"),
        "100": ShadeValue(hex="#dbeafe"),
        "200": ShadeValue(hex="#bfdbfe"),
    }


@pytest.fixture
def state_file(tmp_path):
    """Path for a state file inside a temp directory (not created)."""
    return tmp_path / "state.json"
