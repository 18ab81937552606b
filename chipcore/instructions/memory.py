"""Register load and immediate add."""

import jax.numpy as jnp
from chipcore.state import MachineState
from chipcore.decode import DecodedInstruction


def execute_set(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """6XKK - Set VX = KK."""
    return state.replace(V=state.V.at[instruction.x].set(jnp.astype(instruction.kk, jnp.uint8)))


def execute_add(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """7XKK - Add KK to VX, wrapping. VF is not touched."""
    return state.replace(V=state.V.at[instruction.x].add(jnp.astype(instruction.kk, jnp.uint8)))
