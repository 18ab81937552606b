"""Test configuration and fixtures for chipcore tests."""

import pytest
import jax.numpy as jnp
from chipcore import create_state, load_program, set_registers


@pytest.fixture
def fresh_state():
    """Provide a fresh machine state for each test."""
    return create_state()


def set_V(state, **registers):
    """Helper to set registers by name, e.g. ``set_V(state, V1=0x10, VF=1)``."""
    return set_registers(state, {int(name[1:], 16): value for name, value in registers.items()})


def build_state(program, address=0, registers=None, subroutines=None):
    """Helper to build a state with a program, optional subroutines and registers.

    ``subroutines`` maps load addresses to opcode lists.
    """
    state = load_program(create_state(entry_point=address), program, address)
    for sub_address, sub_program in (subroutines or {}).items():
        state = load_program(state, sub_program, sub_address)
    if registers:
        state = set_registers(state, registers)
    return state


def fill_stack(state, depth):
    """Helper to push ``depth`` return addresses directly."""
    data = state.stack.data.at[:depth].set(jnp.arange(depth, dtype=jnp.uint16) * 2)
    return state.replace(stack=state.stack.replace(data=data, pointer=jnp.asarray(depth, dtype=jnp.int32)))
