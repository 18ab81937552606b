"""Fetch-decode-execute engine."""

from typing import Optional

import jax
import jax.lax
import jax.numpy as jnp
from chipcore.state import MachineState
from chipcore.decode import decode
from chipcore.constants import RUNNING, HALTED, MAX_FETCH_ADDRESS, PC_OUT_OF_BOUNDS, STATUS_NAMES
from chipcore.errors import raise_for_status
from chipcore.logging import ConsoleLogger
from chipcore.instructions.system import execute_system_instruction, execute_unsupported, set_status
from chipcore.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register
)
from chipcore.instructions.alu import execute_alu_operation
from chipcore.instructions.memory import execute_set, execute_add


def execute(state: MachineState, instruction: int) -> MachineState:
    """Execute single instruction."""
    decoded_instruction = decode(jnp.asarray(instruction, dtype=jnp.uint16))

    return jax.lax.switch(
        decoded_instruction.family,
        [
            execute_system_instruction,
            execute_jump,
            execute_call,
            execute_skip_if_equal_immediate,
            execute_skip_if_not_equal_immediate,
            execute_skip_if_equal_register,
            execute_set,
            execute_add,
            execute_alu_operation,
        ] + [execute_unsupported] * 7,
        state, decoded_instruction
    )


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def fetch(state: MachineState) -> tuple[MachineState, jnp.uint16]:
    """Fetch next instruction from memory and advance the program counter."""
    instruction = _pack_u16(state.memory[state.pc], state.memory[state.pc + 1])
    return state.replace(pc=state.pc + 2, opcode=instruction), instruction


def _fetch_and_execute(state: MachineState) -> MachineState:
    state, instruction = fetch(state)
    return execute(state, instruction)


def _running_step(state: MachineState) -> MachineState:
    return jax.lax.cond(
        state.pc <= MAX_FETCH_ADDRESS,
        _fetch_and_execute,
        lambda state: set_status(state, PC_OUT_OF_BOUNDS),
        state
    )


def step(state: MachineState) -> MachineState:
    """Run one fetch-execute cycle. Halted or faulted machines are left unchanged."""
    return jax.lax.cond(
        state.status == RUNNING,
        _running_step,
        lambda state: state,
        state
    )


def _is_running(state: MachineState) -> jnp.ndarray:
    return state.status == RUNNING


@jax.jit
def run_until_halt(state: MachineState) -> MachineState:
    """Step until HALT or a fault. Never returns for a program that loops forever."""
    return jax.lax.while_loop(_is_running, step, state)


def run(state: MachineState, check: bool = True, logger: Optional[ConsoleLogger] = None) -> MachineState:
    """Run a loaded program to completion.

    Args:
        state: Machine state with program and initial registers loaded
        check: Raise the matching ``MachineFault`` if the run ends on a fault
        logger: Optional console logger for run start, halt and faults

    Returns:
        Final machine state
    """
    if logger is not None:
        logger.debug(f"Running from pc=0x{int(state.pc):03X}")

    state = run_until_halt(state)

    if logger is not None:
        status = int(state.status)
        if status == HALTED:
            logger.info(f"Halted at pc=0x{int(state.pc) - 2:03X}")
        else:
            logger.error(f"Run aborted: {STATUS_NAMES[status]} (pc=0x{int(state.pc):03X}, opcode 0x{int(state.opcode):04X})")

    if check:
        raise_for_status(state)
    return state

