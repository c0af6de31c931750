"""Tests for CSS, Kotlin, Material JSON and design token exports."""

import json
import re

import pytest

from palette_bridge.exporters import (
    camel_to_kebab,
    generate_color_kt,
    generate_css,
    generate_design_tokens,
    generate_material_json,
    generate_theme_kt,
    hex_to_argb,
)
from palette_bridge.models import RoleName, ShadeRef
from palette_bridge.palette import apply_interpolation


@pytest.mark.unit
class TestCSS:
    """Test CSS custom property output."""

    @pytest.mark.parametrize("name,expected", [
        ("primary", "primary"),
        ("onPrimaryContainer", "on-primary-container"),
        ("surfaceContainerLowest", "surface-container-lowest"),
    ])
    def test_camel_to_kebab(self, name, expected):
        assert camel_to_kebab(name) == expected

    def test_blocks(self, sample_config, default_mapping):
        css = generate_css(sample_config, default_mapping)
        root, dark = css.split("\n\n")
        assert root.startswith(":root {")
        assert dark.startswith('[data-theme="dark"] {')
        assert "  --md-sys-color-primary: #2563eb;" in root
        assert "  --md-sys-color-primary: #bfdbfe;" in dark
        assert css.endswith("}\n")

    def test_one_line_per_role(self, sample_config, default_mapping):
        css = generate_css(sample_config, default_mapping)
        assert css.count("--md-sys-color-") == 2 * 49

    def test_unresolvable_role_skipped(self, sample_config, default_mapping):
        default_mapping.light[RoleName.PRIMARY] = ShadeRef(palette="missing", shade="600")
        css = generate_css(sample_config, default_mapping)
        root = css.split("\n\n")[0]
        assert "--md-sys-color-primary:" not in root
        assert "--md-sys-color-on-primary:" in root


@pytest.mark.unit
class TestKotlin:
    """Test Jetpack Compose output."""

    def test_argb(self):
        assert hex_to_argb("#2563eb") == "FF2563EB"

    def test_color_kt(self, sample_config, default_mapping):
        kt = generate_color_kt(sample_config, default_mapping, "com.acme.theme")
        assert kt.startswith("package com.acme.theme\n")
        assert "val primaryLight = Color(0xFF2563EB)" in kt
        assert "val primaryDarkHighContrast = Color(0xFFDBEAFE)" in kt
        assert "val onPrimaryLightMediumContrast = Color(0xFFFFFFFF)" in kt

    def test_color_kt_constant_count(self, sample_config, default_mapping):
        kt = generate_color_kt(sample_config, default_mapping, "com.acme.theme")
        assert len(re.findall(r"^val ", kt, re.MULTILINE)) == 6 * 35

    def test_fixed_roles_not_in_color_kt(self, sample_config, default_mapping):
        kt = generate_color_kt(sample_config, default_mapping, "com.acme.theme")
        assert "primaryFixed" not in kt

    def test_theme_kt(self):
        kt = generate_theme_kt("com.acme.theme")
        assert "private val lightScheme = lightColorScheme(" in kt
        assert "private val highContrastDarkColorScheme = darkColorScheme(" in kt
        assert "    primary = primaryLight," in kt
        assert kt.count("ColorScheme(\n") == 6


@pytest.mark.unit
class TestMaterialJSON:
    """Test Material Theme Builder JSON output."""

    def test_schemes(self, sample_config, default_mapping):
        data = json.loads(generate_material_json(sample_config, default_mapping))
        assert set(data["schemes"]) == {
            "light", "dark",
            "light-medium-contrast", "dark-medium-contrast",
            "light-high-contrast", "dark-high-contrast",
        }
        for scheme in data["schemes"].values():
            assert len(scheme) == 49
        assert data["schemes"]["light"]["primary"] == "#2563EB"
        assert data["schemes"]["light-medium-contrast"]["primary"] == "#1D4ED8"

    def test_palettes_include_interpolated(self, sample_config, default_mapping):
        config = apply_interpolation(sample_config, "neutral", [150])
        data = json.loads(generate_material_json(config, default_mapping))
        assert data["palettes"]["primary"]["600"] == "#2563EB"
        assert "150" in data["palettes"]["neutral"]


@pytest.mark.unit
class TestDesignTokens:
    """Test design token output."""

    def test_core_literals(self, sample_config, default_mapping):
        tokens = generate_design_tokens(sample_config, default_mapping)
        core = json.loads(tokens.core)
        assert core["palette"]["primary"]["600"] == {"$type": "color", "$value": "#2563eb"}

    def test_themes_hold_references(self, sample_config, default_mapping):
        tokens = generate_design_tokens(sample_config, default_mapping)
        light = json.loads(tokens.light)
        dark = json.loads(tokens.dark)
        assert light["color"]["primary"]["$value"] == "{palette.primary.600}"
        assert dark["color"]["primary"]["$value"] == "{palette.primary.200}"
        assert len(light["color"]) == 49

    def test_references_point_into_core(self, sample_config, default_mapping):
        tokens = generate_design_tokens(sample_config, default_mapping)
        core = json.loads(tokens.core)["palette"]
        for token in json.loads(tokens.dark)["color"].values():
            _, palette, shade = token["$value"].strip("{}").split(".")
            assert shade in core[palette]
