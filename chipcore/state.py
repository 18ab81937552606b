"""Machine state structures."""

from typing import Mapping, Sequence, Union

import jax.numpy as jnp
import numpy as np
from flax.struct import dataclass, PyTreeNode, field

from chipcore.constants import MEMORY_SIZE, NUM_REGISTERS, STACK_SIZE, RUNNING


@dataclass(frozen=True)
class StackState:
    """Return address stack for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.int32))


class MachineState(PyTreeNode):
    """Complete machine state: registers, memory, program counter and stack."""
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    stack: StackState = field(default_factory=StackState)
    status: jnp.ndarray = field(default_factory=lambda: jnp.asarray(RUNNING, dtype=jnp.uint8))
    opcode: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))


def create_state(entry_point: int = 0) -> MachineState:
    """Create a zeroed machine state with the program counter at ``entry_point``."""
    if not 0 <= entry_point < MEMORY_SIZE:
        raise ValueError(f"Entry point 0x{entry_point:X} is outside memory (0x000-0x{MEMORY_SIZE - 1:03X})")
    return MachineState(pc=jnp.asarray(entry_point, dtype=jnp.uint16))


def _program_bytes(program: Union[bytes, bytearray, Sequence[int]]) -> np.ndarray:
    """Raw bytes are copied as-is, integer sequences are encoded as big-endian opcodes."""
    if isinstance(program, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(program), dtype=np.uint8)

    opcodes = np.asarray(program, dtype=np.int64).reshape(-1)
    if np.any((opcodes < 0) | (opcodes > 0xFFFF)):
        raise ValueError("Opcodes must be 16-bit unsigned values")
    return opcodes.astype(">u2").view(np.uint8)


def load_program(
    state: MachineState,
    program: Union[bytes, bytearray, Sequence[int]],
    address: int = 0,
) -> MachineState:
    """Write a program into memory starting at ``address``.

    Args:
        state: State to load the program into
        program: Raw bytes, or a sequence of 16-bit opcodes
        address: First memory address to write

    Returns:
        New state with the program bytes in memory. Bytes are not validated;
        they are opaque until fetched.
    """
    data = _program_bytes(program)
    if address < 0 or address + len(data) > MEMORY_SIZE:
        raise ValueError(
            f"Program of {len(data)} bytes at 0x{max(address, 0):03X} does not fit in {MEMORY_SIZE} bytes of memory"
        )
    new_memory = state.memory.at[address:address + len(data)].set(jnp.asarray(data, dtype=jnp.uint8))
    return state.replace(memory=new_memory)


def set_registers(state: MachineState, values: Union[Mapping[int, int], Sequence[int]]) -> MachineState:
    """Set initial register values, either ``{index: value}`` or a sequence starting at V0."""
    items = values.items() if isinstance(values, Mapping) else enumerate(values)
    new_V = state.V
    for index, value in items:
        if not 0 <= index < NUM_REGISTERS:
            raise ValueError(f"Register index {index} is outside V0-V{NUM_REGISTERS - 1:X}")
        new_V = new_V.at[index].set(int(value) & 0xFF)
    return state.replace(V=new_V)
