"""Tests for register load and immediate add."""

from chipcore import execute
from conftest import set_V


class TestLoadImmediate:
    """Test 6XKK."""

    def test_set_basic(self, fresh_state):
        """6XKK - Set VX = KK."""
        state = execute(fresh_state, 0x600A)  # V0 = 0xA
        assert state.V[0] == 0xA

    def test_set_overwrites(self, fresh_state):
        """6XKK - Previous value is replaced."""
        state = set_V(fresh_state, VE=0x33)
        state = execute(state, 0x6EFF)
        assert state.V[0xE] == 0xFF

    def test_set_only_touches_target(self, fresh_state):
        """6XKK - Other registers are preserved."""
        state = execute(fresh_state, 0x6742)
        assert state.V[7] == 0x42
        assert int(state.V.sum()) == 0x42


class TestAddImmediate:
    """Test 7XKK."""

    def test_add_basic(self, fresh_state):
        """7XKK - Add KK to VX."""
        state = set_V(fresh_state, V1=0x10)
        state = execute(state, 0x7105)  # V1 += 5
        assert state.V[1] == 0x15

    def test_add_wraps(self, fresh_state):
        """7XKK - Overflow wraps modulo 256."""
        state = set_V(fresh_state, V0=0xFF)
        state = execute(state, 0x7002)
        assert state.V[0] == 0x01

    def test_add_does_not_touch_flag(self, fresh_state):
        """7XKK - No carry is reported in VF."""
        state = set_V(fresh_state, V0=0xFF, VF=0x42)
        state = execute(state, 0x7002)
        assert state.V[0xF] == 0x42
