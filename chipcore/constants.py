"""Machine constants and run status codes."""

MEMORY_SIZE = 0x1000
NUM_REGISTERS = 16
STACK_SIZE = 16
FLAG_REGISTER = 0xF
INSTRUCTION_SIZE = 2
MAX_FETCH_ADDRESS = MEMORY_SIZE - INSTRUCTION_SIZE

# Run status, stored in MachineState.status
RUNNING = 0
HALTED = 1
STACK_UNDERFLOW = 2
STACK_OVERFLOW = 3
UNSUPPORTED_OPCODE = 4
PC_OUT_OF_BOUNDS = 5

STATUS_NAMES = {
    RUNNING: "running",
    HALTED: "halted",
    STACK_UNDERFLOW: "stack underflow",
    STACK_OVERFLOW: "stack overflow",
    UNSUPPORTED_OPCODE: "unsupported opcode",
    PC_OUT_OF_BOUNDS: "program counter out of bounds",
}
