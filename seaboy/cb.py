"""CB-prefixed SM83 instructions: rotates, shifts, SWAP, BIT, RES and SET.

Bits [2:0] of the sub-opcode select the r8 operand, with index 6 meaning
the byte at (HL). Bits [7:3] select the operation. The cycle counts
returned by ``execute`` include the 0xCB prefix fetch.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from seaboy.registers import FLAG_C, FLAG_H, FLAG_Z, HL_INDIRECT, Registers

REGISTER_CYCLES = 8
HL_CYCLES = 16
BIT_HL_CYCLES = 12


class Bus(Protocol):
    def read8(self, addr: int) -> int: ...

    def write8(self, addr: int, value: int) -> None: ...


class CPU(Protocol):
    regs: Registers
    mmu: Bus


def _shift_flags(regs: Registers, out: int, carry: bool) -> int:
    """Z from the result, N and H cleared, C from ``carry``; returns ``out``."""
    regs.f = (FLAG_Z if out == 0 else 0) | (FLAG_C if carry else 0)
    return out


def rlc(regs: Registers, value: int) -> int:
    """Rotate left; old bit 7 goes to carry and bit 0."""
    value &= 0xFF
    cy = (value >> 7) & 1
    return _shift_flags(regs, ((value << 1) | cy) & 0xFF, cy != 0)


def rrc(regs: Registers, value: int) -> int:
    """Rotate right; old bit 0 goes to carry and bit 7."""
    value &= 0xFF
    cy = value & 1
    return _shift_flags(regs, (value >> 1) | (cy << 7), cy != 0)


def rl(regs: Registers, value: int) -> int:
    """Rotate left through carry."""
    value &= 0xFF
    out = ((value << 1) | (1 if regs.flag_c else 0)) & 0xFF
    return _shift_flags(regs, out, (value & 0x80) != 0)


def rr(regs: Registers, value: int) -> int:
    """Rotate right through carry."""
    value &= 0xFF
    out = (value >> 1) | (0x80 if regs.flag_c else 0)
    return _shift_flags(regs, out, (value & 1) != 0)


def sla(regs: Registers, value: int) -> int:
    """Shift left arithmetic; bit 7 goes to carry, bit 0 becomes 0."""
    value &= 0xFF
    return _shift_flags(regs, (value << 1) & 0xFF, (value & 0x80) != 0)


def sra(regs: Registers, value: int) -> int:
    """Shift right arithmetic; bit 0 goes to carry, bit 7 is kept."""
    value &= 0xFF
    return _shift_flags(regs, (value >> 1) | (value & 0x80), (value & 1) != 0)


def swap(regs: Registers, value: int) -> int:
    """Exchange the upper and lower nibbles; carry is cleared."""
    value &= 0xFF
    return _shift_flags(regs, ((value << 4) | (value >> 4)) & 0xFF, False)


def srl(regs: Registers, value: int) -> int:
    """Shift right logical; bit 0 goes to carry, bit 7 becomes 0."""
    value &= 0xFF
    return _shift_flags(regs, value >> 1, (value & 1) != 0)


def bit(regs: Registers, index: int, value: int) -> None:
    """BIT: Z set when the bit is clear, N cleared, H set, C unchanged."""
    clear = ((value >> (index & 7)) & 1) == 0
    regs.f = (FLAG_Z if clear else 0) | FLAG_H | (regs.f & FLAG_C)


_SHIFTS: tuple[Callable[[Registers, int], int], ...] = (
    rlc, rrc, rl, rr, sla, sra, swap, srl,
)


def _read(cpu: CPU, reg: int) -> int:
    if reg == HL_INDIRECT:
        return cpu.mmu.read8(cpu.regs.hl)
    return cpu.regs.get_r8(reg)


def _write(cpu: CPU, reg: int, value: int) -> None:
    if reg == HL_INDIRECT:
        cpu.mmu.write8(cpu.regs.hl, value & 0xFF)
    else:
        cpu.regs.set_r8(reg, value)


def execute(cpu: CPU, opcode: int) -> int:
    """Run one CB sub-opcode on ``cpu``; returns the T-cycles it takes."""
    opcode &= 0xFF
    group = opcode >> 6
    index = (opcode >> 3) & 7
    reg = opcode & 7
    indirect = reg == HL_INDIRECT

    value = _read(cpu, reg)
    if group == 0:
        _write(cpu, reg, _SHIFTS[index](cpu.regs, value))
    elif group == 1:
        bit(cpu.regs, index, value)
        return BIT_HL_CYCLES if indirect else REGISTER_CYCLES
    elif group == 2:
        _write(cpu, reg, value & ~(1 << index))
    else:
        _write(cpu, reg, value | (1 << index))
    return HL_CYCLES if indirect else REGISTER_CYCLES