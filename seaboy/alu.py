"""8- and 16-bit arithmetic and logic operations of the SM83 CPU.

Each operation updates the flag register of the given ``Registers``
exactly as the hardware does. Operations on A write their result back to
A; the others return the result and leave storing it to the caller.
"""

from __future__ import annotations

from seaboy.registers import FLAG_C, FLAG_H, FLAG_N, FLAG_Z, Registers


def _set_flags(
    regs: Registers,
    *,
    z: bool | None = None,
    n: bool | None = None,
    h: bool | None = None,
    c: bool | None = None,
) -> None:
    """Set the given flags; a flag passed as None keeps its value."""
    f = regs.f
    for mask, on in ((FLAG_Z, z), (FLAG_N, n), (FLAG_H, h), (FLAG_C, c)):
        if on is None:
            continue
        f = (f | mask) if on else (f & ~mask)
    regs.f = f & 0xF0


def _carry_in(regs: Registers, with_carry: bool) -> int:
    return 1 if with_carry and regs.flag_c else 0


def add(regs: Registers, value: int, with_carry: bool = False) -> None:
    """ADD/ADC: A <- A + value (+ carry)."""
    value &= 0xFF
    cy = _carry_in(regs, with_carry)
    result = regs.a + value + cy
    _set_flags(
        regs,
        z=(result & 0xFF) == 0,
        n=False,
        h=((regs.a & 0x0F) + (value & 0x0F) + cy) > 0x0F,
        c=result > 0xFF,
    )
    regs.a = result & 0xFF


def sub(regs: Registers, value: int, with_carry: bool = False) -> None:
    """SUB/SBC: A <- A - value (- carry)."""
    value &= 0xFF
    cy = _carry_in(regs, with_carry)
    result = regs.a - value - cy
    _set_flags(
        regs,
        z=(result & 0xFF) == 0,
        n=True,
        h=(regs.a & 0x0F) - (value & 0x0F) - cy < 0,
        c=result < 0,
    )
    regs.a = result & 0xFF


def and_(regs: Registers, value: int) -> None:
    """AND: A <- A & value; H is always set."""
    regs.a &= value & 0xFF
    _set_flags(regs, z=regs.a == 0, n=False, h=True, c=False)


def or_(regs: Registers, value: int) -> None:
    """OR: A <- A | value."""
    regs.a = (regs.a | value) & 0xFF
    _set_flags(regs, z=regs.a == 0, n=False, h=False, c=False)


def xor(regs: Registers, value: int) -> None:
    """XOR: A <- A ^ value."""
    regs.a = (regs.a ^ value) & 0xFF
    _set_flags(regs, z=regs.a == 0, n=False, h=False, c=False)


def cp(regs: Registers, value: int) -> None:
    """CP: flags as for SUB, but A is left unchanged."""
    value &= 0xFF
    result = regs.a - value
    _set_flags(
        regs,
        z=(result & 0xFF) == 0,
        n=True,
        h=(regs.a & 0x0F) < (value & 0x0F),
        c=result < 0,
    )


def inc8(regs: Registers, value: int) -> int:
    """INC of an 8-bit value; returns the result, carry is unaffected."""
    value &= 0xFF
    result = (value + 1) & 0xFF
    _set_flags(regs, z=result == 0, n=False, h=(value & 0x0F) == 0x0F)
    return result


def dec8(regs: Registers, value: int) -> int:
    """DEC of an 8-bit value; returns the result, carry is unaffected."""
    value &= 0xFF
    result = (value - 1) & 0xFF
    _set_flags(regs, z=result == 0, n=True, h=(value & 0x0F) == 0x00)
    return result


def add_hl(regs: Registers, value: int) -> None:
    """ADD HL,rp: 16-bit add into HL; Z is unaffected."""
    value &= 0xFFFF
    hl = regs.hl
    result = hl + value
    _set_flags(
        regs,
        n=False,
        h=((hl & 0x0FFF) + (value & 0x0FFF)) > 0x0FFF,
        c=result > 0xFFFF,
    )
    regs.hl = result & 0xFFFF


def daa(regs: Registers) -> None:
    """DAA: adjust A to packed BCD after an addition or subtraction."""
    adjust = 0
    carry = False
    if not regs.flag_n:
        if regs.flag_h or (regs.a & 0x0F) > 9:
            adjust |= 0x06
        if regs.flag_c or regs.a > 0x99:
            adjust |= 0x60
            carry = True
        regs.a = (regs.a + adjust) & 0xFF
    else:
        if regs.flag_h:
            adjust |= 0x06
        if regs.flag_c:
            adjust |= 0x60
            carry = True
        regs.a = (regs.a - adjust) & 0xFF
    _set_flags(regs, z=regs.a == 0, h=False, c=carry)


def add_sp_offset(regs: Registers, offset: int) -> int:
    """SP plus a signed 8-bit offset, as in ADD SP,e8 and LD HL,SP+e8.

    ``offset`` is the raw operand byte. H and C come from the unsigned
    low-byte addition; Z and N are cleared. Returns the 16-bit sum without
    storing it.
    """
    offset &= 0xFF
    signed = offset - 0x100 if offset & 0x80 else offset
    sp = regs.sp
    _set_flags(
        regs,
        z=False,
        n=False,
        h=((sp & 0x0F) + (offset & 0x0F)) > 0x0F,
        c=((sp & 0xFF) + offset) > 0xFF,
    )
    return (sp + signed) & 0xFFFF