"""System instructions (0x0xxx) and run status transitions."""

import jax
import jax.lax
import jax.numpy as jnp
from chipcore.state import MachineState
from chipcore.decode import DecodedInstruction
from chipcore.constants import HALTED, STACK_UNDERFLOW, UNSUPPORTED_OPCODE
from chipcore.stack import pop, is_empty


def set_status(state: MachineState, status: int) -> MachineState:
    """Tag the machine with a run status."""
    return state.replace(status=jnp.asarray(status, dtype=jnp.uint8))


def execute_halt(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """0000 - Halt the run loop."""
    return set_status(state, HALTED)


def execute_clear_screen(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """00E0 - Clear display. There is no framebuffer, so nothing changes."""
    return state


def execute_return(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """00EE - Return from subroutine."""
    def _return(state):
        stack, address = pop(state.stack)
        return state.replace(stack=stack, pc=address)

    return jax.lax.cond(
        is_empty(state.stack),
        lambda state: set_status(state, STACK_UNDERFLOW),
        _return,
        state
    )


def execute_unsupported(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """Any opcode outside the instruction table."""
    return set_status(state, UNSUPPORTED_OPCODE)


def execute_system_instruction(state: MachineState, instruction: DecodedInstruction) -> MachineState:
    """Dispatch system instructions on the full opcode."""
    is_halt = instruction.raw == 0x0000
    is_clear = instruction.raw == 0x00E0
    is_return = instruction.raw == 0x00EE

    switch_index = (
        is_halt * 0 +
        is_clear * 1 +
        is_return * 2 +
        (~(is_halt | is_clear | is_return)) * 3
    )

    return jax.lax.switch(
        switch_index,
        [
            execute_halt,
            execute_clear_screen,
            execute_return,
            execute_unsupported,
        ],
        state, instruction
    )
