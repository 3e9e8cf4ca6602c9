"""Tests for cutting state validation."""

import pytest

from spindlecalc.core.material import Material
from spindlecalc.core.state import CuttingState, RpmPolicy
from spindlecalc.core.validate import validate_state


@pytest.fixture
def state() -> CuttingState:
    return CuttingState()


class TestValidation:
    def test_default_state_passes(self, state):
        result = validate_state(state)
        assert result.is_ok

    def test_diameter_parse_error(self, state):
        s, _ = state.commit_diameter_text("abc")
        result = validate_state(s)
        assert result.has_errors
        assert any("diameter" in m for m in result.messages("error"))

    def test_flute_count_parse_error(self, state):
        s, _ = state.commit_flute_count_text("many")
        assert validate_state(s).has_errors

    def test_inverted_machine_bounds(self, state):
        result = validate_state(state.set_min_rpm(30000.0))
        assert result.has_errors

    def test_non_positive_diameter(self, state):
        result = validate_state(CuttingState(diameter=0.0))
        assert result.has_errors

    def test_zero_flutes_is_warning(self, state):
        result = validate_state(state.set_flute_count(0))
        assert result.has_warnings
        assert not result.has_errors

    def test_unclamped_material_switch_warns(self):
        s = CuttingState(policy=RpmPolicy.UNCLAMPED).set_material(Material.COPPER)
        result = validate_state(s)
        assert result.has_warnings
        assert not result.has_errors
        assert any("recommended range" in m for m in result.messages("warning"))

    def test_rpm_below_machine_minimum(self, state):
        result = validate_state(state.set_selected_rpm(500.0))
        assert any("below machine minimum" in m for m in result.messages("warning"))

    def test_rpm_above_machine_maximum(self, state):
        result = validate_state(state.set_selected_rpm(30000.0))
        assert any("above machine maximum" in m for m in result.messages("warning"))
