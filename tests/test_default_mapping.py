"""Tests for the role catalog, tone table and default mapping."""

import pytest

from palette_bridge.models import (
    AccentFamily,
    ContrastLevel,
    RoleFamily,
    RoleName,
    ShadeRef,
    ThemeMode,
)
from palette_bridge.palette import resolve_all_roles
from palette_bridge.roles import (
    ALL_ROLES,
    KOTLIN_COLOR_SCHEME_ROLES,
    M3_ROLES,
    TONE_TABLE,
    build_default_mapping,
    build_role_assignments,
    get_role_info,
    get_roles_by_family,
    lookup_shade_ref,
)
from palette_bridge.roles.tone_table import expand_pattern

CELLS = [(level, mode) for level in ContrastLevel for mode in ThemeMode]


@pytest.mark.unit
class TestCatalog:
    """Test the static role catalog."""

    def test_49_roles(self):
        assert len(M3_ROLES) == 49
        assert len(ALL_ROLES) == 49
        assert set(ALL_ROLES) == set(RoleName)

    def test_pairs_are_mutual_for_accents(self):
        for family in AccentFamily:
            for info in get_roles_by_family(RoleFamily(family.value)):
                if not info.in_kotlin_color_scheme:
                    continue
                assert get_role_info(info.paired_with).paired_with == info.name

    def test_surface_family(self):
        names = {info.name for info in get_roles_by_family(RoleFamily.SURFACE)}
        assert len(names) == 15
        assert RoleName.SURFACE_CONTAINER_HIGHEST in names

    def test_kotlin_scheme_excludes_fixed_roles(self):
        assert RoleName.PRIMARY in KOTLIN_COLOR_SCHEME_ROLES
        assert RoleName.PRIMARY_FIXED not in KOTLIN_COLOR_SCHEME_ROLES
        assert len(KOTLIN_COLOR_SCHEME_ROLES) == 35


@pytest.mark.unit
class TestToneTable:
    """Test the expanded role -> shade table."""

    def test_every_role_has_an_entry(self):
        assert set(TONE_TABLE) == set(RoleName)

    def test_expand_pattern(self):
        assert expand_pattern("on{X}Container", AccentFamily.TERTIARY) is RoleName.ON_TERTIARY_CONTAINER
        assert expand_pattern("{x}FixedDim", AccentFamily.SECONDARY) is RoleName.SECONDARY_FIXED_DIM

    def test_expand_pattern_rejects_unknown_role(self):
        with pytest.raises(ValueError):
            expand_pattern("{x}Fixed", AccentFamily.ERROR)

    @pytest.mark.parametrize("role", [
        RoleName.PRIMARY_FIXED,
        RoleName.ON_SECONDARY_FIXED,
        RoleName.TERTIARY_FIXED_DIM,
        RoleName.ON_PRIMARY_FIXED_VARIANT,
    ])
    def test_fixed_roles_are_mode_invariant(self, role):
        for level in ContrastLevel:
            assert lookup_shade_ref(role, level, ThemeMode.LIGHT) == lookup_shade_ref(role, level, ThemeMode.DARK)


@pytest.mark.unit
class TestDefaultMapping:
    """Test the default 6-cell mapping."""

    def test_every_cell_is_total(self, default_mapping):
        for level, mode in CELLS:
            assert set(default_mapping.get(level, mode)) == set(RoleName)

    def test_reference_points(self, default_mapping):
        assert default_mapping.light[RoleName.PRIMARY] == ShadeRef(palette="primary", shade="600")
        assert default_mapping.light[RoleName.ON_PRIMARY] == ShadeRef(palette="primary", shade="white")
        assert default_mapping.dark[RoleName.PRIMARY] == ShadeRef(palette="primary", shade="200")
        assert default_mapping.medium_contrast.light[RoleName.PRIMARY] == ShadeRef(palette="primary", shade="700")
        assert default_mapping.high_contrast.dark[RoleName.ON_PRIMARY] == ShadeRef(palette="primary", shade="950")

    def test_surface_table_rows(self, default_mapping):
        assert default_mapping.light[RoleName.SURFACE] == ShadeRef(palette="neutral", shade="50")
        assert default_mapping.dark[RoleName.SURFACE] == ShadeRef(palette="neutral", shade="900")
        assert default_mapping.high_contrast.light[RoleName.ON_SURFACE] == ShadeRef(palette="neutral", shade="black")
        assert default_mapping.high_contrast.dark[RoleName.ON_SURFACE] == ShadeRef(palette="neutral", shade="white")

    @pytest.mark.parametrize("level,mode", CELLS)
    def test_surface_roles_use_neutral(self, default_mapping, level, mode):
        assignments = default_mapping.get(level, mode)
        for info in get_roles_by_family(RoleFamily.SURFACE):
            assert assignments[info.name].palette == "neutral"

    @pytest.mark.parametrize("level,mode", CELLS)
    def test_error_roles_use_error(self, default_mapping, level, mode):
        assignments = default_mapping.get(level, mode)
        for info in get_roles_by_family(RoleFamily.ERROR):
            assert assignments[info.name].palette == "error"

    def test_accent_roles_use_own_palette(self, default_mapping):
        assert default_mapping.dark[RoleName.SECONDARY_CONTAINER].palette == "secondary"
        assert default_mapping.light[RoleName.ON_TERTIARY_FIXED].palette == "tertiary"

    def test_surface_tint_follows_primary(self, default_mapping):
        for level, mode in CELLS:
            cell = default_mapping.get(level, mode)
            assert cell[RoleName.SURFACE_TINT] == cell[RoleName.PRIMARY]

    def test_cells_are_independent(self, default_mapping):
        default_mapping.light[RoleName.PRIMARY] = ShadeRef(palette="primary", shade="500")
        assert default_mapping.medium_contrast.light[RoleName.PRIMARY].shade == "700"

    def test_deterministic(self):
        assert build_default_mapping() == build_default_mapping()

    def test_catalog_order(self):
        assert list(build_role_assignments(ContrastLevel.STANDARD, ThemeMode.LIGHT)) == list(ALL_ROLES)

    def test_sample_palettes_resolve_all_cells(self, sample_config, default_mapping):
        for level, mode in CELLS:
            assert len(resolve_all_roles(sample_config, default_mapping.get(level, mode))) == 49

    def test_missing_palette_is_logged(self, sample_config, caplog):
        del sample_config.palettes["tertiary"]
        with caplog.at_level("WARNING"):
            build_default_mapping(sample_config)
        assert "tertiary" in caplog.text
