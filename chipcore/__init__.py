"""Minimal CHIP-8 style instruction execution engine."""

from chipcore.state import MachineState, StackState, create_state, load_program, set_registers
from chipcore.emulator import execute, fetch, step, run, run_until_halt
from chipcore.decode import DecodedInstruction, decode
from chipcore.errors import (
    MachineFault,
    StackUnderflowError,
    StackOverflowError,
    UnsupportedOpcodeError,
    ProgramCounterOutOfBoundsError,
    raise_for_status,
)
from chipcore.constants import *
from chipcore.logging import ConsoleLogger

__all__ = [
    "MachineState",
    "StackState",
    "create_state",
    "load_program",
    "set_registers",
    "fetch",
    "execute",
    "step",
    "run",
    "run_until_halt",
    "DecodedInstruction",
    "decode",
    "MachineFault",
    "StackUnderflowError",
    "StackOverflowError",
    "UnsupportedOpcodeError",
    "ProgramCounterOutOfBoundsError",
    "raise_for_status",
    "ConsoleLogger",
    "MEMORY_SIZE",
    "NUM_REGISTERS",
    "STACK_SIZE",
    "FLAG_REGISTER",
    "RUNNING",
    "HALTED",
    "STACK_UNDERFLOW",
    "STACK_OVERFLOW",
    "UNSUPPORTED_OPCODE",
    "PC_OUT_OF_BOUNDS",
]
