"""Tests for the colour mode strategies and their registry."""

import pytest
from compare_table import registry
from compare_table.core.errors import UnsupportedMode
from compare_table.core.hsl import lightness, rgb_to_hsl
from compare_table.core.types import ColourMode, Palette, Strategy
from compare_table.modes import binary, linear

HIGH = (204, 119, 119)
LOW = (119, 170, 119)
NULL = (250, 250, 250)


@pytest.fixture
def binary_palette() -> Palette:
    return Palette(high=HIGH, low=LOW, null=NULL, mode=ColourMode.BINARY)


@pytest.fixture
def linear_palette() -> Palette:
    return Palette(high=HIGH, low=LOW, null=NULL, mode=ColourMode.LINEAR)


class TestRegistry:
    def test_discovers_both_modes(self):
        reg = registry.discover()
        assert set(reg) == {ColourMode.BINARY, ColourMode.LINEAR}
        assert all(isinstance(s, Strategy) for s in reg.values())

    def test_resolve_by_enum_and_string(self):
        assert registry.resolve(ColourMode.LINEAR) is registry.resolve('linear')

    def test_resolve_unknown(self):
        with pytest.raises(UnsupportedMode, match='rainbow') as info:
            registry.resolve('rainbow')
        assert info.value.mode == 'rainbow'
        assert 'binary' in str(info.value)

    def test_resolve_is_case_sensitive(self):
        with pytest.raises(UnsupportedMode):
            registry.resolve('Binary')

    def test_resolve_none(self):
        with pytest.raises(UnsupportedMode):
            registry.resolve(None)

    def test_module_docstring(self):
        mod = registry.module_for('linear')
        assert 'spread' in mod.__doc__

    def test_table_keyed_by_own_mode(self):
        for mode, strat in registry.discover().items():
            assert strat.mode is mode
            assert registry.module_for(mode).strategy is strat

    def test_strategy_without_cell_fn(self):
        s = Strategy(mode=ColourMode.BINARY)
        with pytest.raises(RuntimeError):
            s.map_cell(1, 0, Palette())


class TestBinary:
    def test_above_is_high(self, binary_palette: Palette) -> None:
        for value, base in [(5, 3), (0.001, 0), (-1, -2), (1e9, 1e8)]:
            assert binary.map_cell(value, base, binary_palette) == HIGH

    def test_at_or_below_is_low(self, binary_palette: Palette) -> None:
        for value, base in [(3, 3), (1, 3), (-5, 0), (0, 0.0)]:
            assert binary.map_cell(value, base, binary_palette) == LOW

    def test_null_baseline(self, binary_palette: Palette) -> None:
        for value in (-1e9, 0, 3, 1e9):
            assert binary.map_cell(value, None, binary_palette) == NULL

    def test_strategy_dispatch(self, binary_palette: Palette) -> None:
        assert binary.strategy.map_cell(5, 3, binary_palette) == HIGH


class TestLinear:
    def test_on_center_is_white(self, linear_palette: Palette) -> None:
        assert linear.map_cell(10, (10, 5), linear_palette) == (255, 255, 255)

    def test_half_spread_above(self, linear_palette: Palette) -> None:
        # l = 1 - 5/10 = 0.5, hue/saturation from HIGH
        assert linear.map_cell(5, (0, 10), linear_palette) == (185, 70, 70)

    def test_half_spread_below(self, linear_palette: Palette) -> None:
        assert linear.map_cell(-5, (0, 10), linear_palette) == (98, 157, 98)

    def test_far_above_clamps_to_floor(self, linear_palette: Palette) -> None:
        assert linear.map_cell(100, (0, 10), linear_palette) == (93, 35, 35)

    def test_far_below_clamps_to_floor(self, linear_palette: Palette) -> None:
        assert linear.map_cell(-100, (0, 10), linear_palette) == (49, 78, 49)

    def test_lightness_band(self, linear_palette: Palette) -> None:
        for center, spread in [(0, 1), (50, 0.01), (-3, 1000)]:
            for delta in (-1e12, -spread, -spread / 3, 0, spread / 4, spread, 1e12):
                colour = linear.map_cell(center + delta, (center, spread), linear_palette)
                # channel rounding moves lightness by at most half a step
                assert 0.25 - 1 / 255 <= lightness(colour) <= 1.0

    def test_hue_follows_direction(self, linear_palette: Palette) -> None:
        above = linear.map_cell(3, (0, 4), linear_palette)
        below = linear.map_cell(-3, (0, 4), linear_palette)
        assert rgb_to_hsl(*above)[0] == pytest.approx(rgb_to_hsl(*HIGH)[0], abs=0.01)
        assert rgb_to_hsl(*below)[0] == pytest.approx(rgb_to_hsl(*LOW)[0], abs=0.01)

    def test_deeper_with_distance(self, linear_palette: Palette) -> None:
        near = linear.map_cell(1, (0, 10), linear_palette)
        far = linear.map_cell(6, (0, 10), linear_palette)
        assert lightness(far) < lightness(near)

    def test_null_baseline(self, linear_palette: Palette) -> None:
        assert linear.map_cell(42, None, linear_palette) == NULL

    def test_list_pair_accepted(self, linear_palette: Palette) -> None:
        assert linear.map_cell(5, [0, 10], linear_palette) == (185, 70, 70)

    def test_huge_int_above_clamps_to_floor(self, linear_palette: Palette) -> None:
        assert linear.map_cell(10**400, (0, 1), linear_palette) == (93, 35, 35)

    def test_huge_int_below_clamps_to_floor(self, linear_palette: Palette) -> None:
        assert linear.map_cell(-(10**400), (0, 1), linear_palette) == (49, 78, 49)

    def test_huge_int_against_float_spread(self, linear_palette: Palette) -> None:
        assert linear.map_cell(10**400, (1.5, 0.5), linear_palette) == (93, 35, 35)
