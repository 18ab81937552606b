"""ALU operations (8XYN)."""

import jax
import jax.lax
import jax.numpy as jnp
from chipcore.state import MachineState
from chipcore.decode import DecodedInstruction
from chipcore.constants import FLAG_REGISTER
from chipcore.instructions.system import execute_unsupported


def alu_set(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY0 - Set: VX = VY."""
    return V.at[x].set(V[y])


def alu_or(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY1 - Binary OR: VX |= VY."""
    return V.at[x].set(V[x] | V[y])


def alu_and(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY2 - Binary AND: VX &= VY."""
    return V.at[x].set(V[x] & V[y])


def alu_xor(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY3 - Logical XOR: VX ^= VY."""
    return V.at[x].set(V[x] ^ V[y])


def alu_add(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY4 - Add: VX += VY, then VF = carry."""
    result = jnp.astype(V[x], jnp.uint16) + V[y]
    carry = jnp.astype(result > 0xFF, jnp.uint8)
    new_V = V.at[x].set(jnp.astype(result & 0xFF, jnp.uint8))
    return new_V.at[FLAG_REGISTER].set(carry)


def alu_sub_xy(V: jnp.ndarray, x: int, y: int) -> jnp.ndarray:
    """8XY5 - Subtract: VF = VX > VY, then VX -= VY."""
    vx = V[x]
    vy = V[y]
    not_borrow = jnp.astype(vx > vy, jnp.uint8)
    new_V = V.at[FLAG_REGISTER].set(not_borrow)
    # uint8 subtraction wraps mod 256
    return new_V.at[x].set(vx - vy)


ALU_OPERATIONS = [alu_set, alu_or, alu_and, alu_xor, alu_add, alu_sub_xy]


def execute_alu_operation(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """8XYN - ALU operations dispatcher. N above 5 is unsupported."""
    def _apply(state, instruction):
        new_V = jax.lax.switch(
            instruction.op_minor,
            ALU_OPERATIONS,
            state.V, instruction.x, instruction.y
        )
        return state.replace(V=new_V)

    return jax.lax.cond(
        instruction.op_minor < len(ALU_OPERATIONS),
        _apply,
        execute_unsupported,
        state, instruction
    )
