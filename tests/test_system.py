"""Tests for system instructions (0xxx)."""

from chipcore import execute, HALTED, RUNNING, STACK_UNDERFLOW, UNSUPPORTED_OPCODE
from conftest import fill_stack


def test_execute_halt(fresh_state):
    """Test 0000 - Halt tags the machine as halted."""
    state = execute(fresh_state, 0x0000)

    assert state.status == HALTED
    assert state.pc == fresh_state.pc


def test_execute_clear_screen_is_noop(fresh_state):
    """Test 00E0 - No framebuffer, so nothing changes."""
    state = fresh_state.replace(V=fresh_state.V.at[3].set(0x42))

    new_state = execute(state, 0x00E0)

    assert new_state.status == RUNNING
    assert new_state.pc == state.pc
    assert (new_state.V == state.V).all()
    assert (new_state.memory == state.memory).all()


def test_execute_call_and_return(fresh_state):
    """Test 2NNN (call) and 00EE (return) together."""
    state = fresh_state
    initial_pc = state.pc

    state = execute(state, 0x2300)  # Call 0x300
    assert state.pc == 0x300
    assert state.stack.pointer == 1
    assert state.stack.data[0] == initial_pc

    state = execute(state, 0x00EE)  # Return
    assert state.pc == initial_pc
    assert state.stack.pointer == 0
    assert state.stack.data[0] == 0  # Popped slot is cleared
    assert state.status == RUNNING


def test_return_pops_most_recent_address(fresh_state):
    """Test nested calls unwind in reverse order."""
    state = fresh_state.replace(pc=fresh_state.pc + 0x10)
    state = execute(state, 0x2300)  # Call 0x300, return to 0x010
    state = state.replace(pc=state.pc + 4)
    state = execute(state, 0x2400)  # Call 0x400, return to 0x304

    state = execute(state, 0x00EE)
    assert state.pc == 0x304
    state = execute(state, 0x00EE)
    assert state.pc == 0x010


def test_return_with_empty_stack_underflows(fresh_state):
    """Test 00EE with nothing on the stack."""
    state = execute(fresh_state, 0x00EE)

    assert state.status == STACK_UNDERFLOW
    assert state.stack.pointer == 0
    assert state.pc == fresh_state.pc


def test_return_from_full_stack(fresh_state):
    """Test 00EE pops the top slot of a full stack."""
    state = fill_stack(fresh_state, 16)

    state = execute(state, 0x00EE)

    assert state.status == RUNNING
    assert state.stack.pointer == 15
    assert state.pc == 30


def test_unknown_system_instructions_are_unsupported(fresh_state):
    """Test 0NNN values other than 0000, 00E0 and 00EE."""
    for instruction in [0x0001, 0x00E1, 0x00EF, 0x0123, 0x0FFF]:
        state = execute(fresh_state, instruction)
        assert state.status == UNSUPPORTED_OPCODE, f"0x{instruction:04X} was accepted"
