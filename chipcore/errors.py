"""Machine faults raised at the host boundary."""

from chipcore.constants import (
    RUNNING, HALTED, STACK_UNDERFLOW, STACK_OVERFLOW, UNSUPPORTED_OPCODE, PC_OUT_OF_BOUNDS, STATUS_NAMES
)


class MachineFault(RuntimeError):
    """A run ended on a fatal condition instead of HALT.

    Attributes:
        state: Machine state at the moment of the fault
        status: Status code the machine was tagged with
        pc: Address of the faulting instruction (or the unfetchable address)
        opcode: Offending opcode, when one was fetched
    """
    status = None
    fetched = True

    def __init__(self, state):
        self.state = state
        self.pc = int(state.pc) - 2 if self.fetched else int(state.pc)
        self.opcode = int(state.opcode) if self.fetched else None
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"{STATUS_NAMES[self.status]} at 0x{self.pc:03X}"
        if self.opcode is not None:
            message += f" (opcode 0x{self.opcode:04X})"
        return message


class StackUnderflowError(MachineFault):
    """RETURN executed with an empty stack."""
    status = STACK_UNDERFLOW


class StackOverflowError(MachineFault):
    """CALL executed with all stack slots in use."""
    status = STACK_OVERFLOW


class UnsupportedOpcodeError(MachineFault):
    """Opcode outside the instruction table."""
    status = UNSUPPORTED_OPCODE


class ProgramCounterOutOfBoundsError(MachineFault):
    """Program counter walked past the last fetchable address."""
    status = PC_OUT_OF_BOUNDS
    fetched = False


FAULTS = {
    fault.status: fault
    for fault in (StackUnderflowError, StackOverflowError, UnsupportedOpcodeError, ProgramCounterOutOfBoundsError)
}


def raise_for_status(state) -> None:
    """Raise the matching ``MachineFault`` if the state carries a fault status."""
    status = int(state.status)
    if status in (RUNNING, HALTED):
        return
    raise FAULTS[status](state)
