"""Instruction decoding."""

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded instruction with every operand field extracted."""
    raw: int
    family: int    # First nibble
    x: int         # Second nibble (VX register)
    y: int         # Third nibble (VY register)
    kk: int        # Last byte (8-bit immediate)
    op_minor: int  # Last nibble (8XY_ selector)
    addr: int      # Last 12 bits (address, also known as NNN)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    return DecodedInstruction(
        raw=instruction,
        family=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        kk=instruction & 0x00FF,
        op_minor=instruction & 0x000F,
        addr=instruction & 0x0FFF
    )
