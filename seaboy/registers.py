"""SM83 CPU register file with flag and register-pair views."""

from __future__ import annotations

from dataclasses import dataclass

FLAG_Z = 0x80
FLAG_N = 0x40
FLAG_H = 0x20
FLAG_C = 0x10

# r8 encoding: B=0 C=1 D=2 E=3 H=4 L=5 (HL)=6 A=7
_R8_NAMES = ("b", "c", "d", "e", "h", "l", None, "a")
# rp encoding (16-bit loads/ALU): BC=0 DE=1 HL=2 SP=3
_RP_NAMES = ("bc", "de", "hl", "sp")
# rp2 encoding (PUSH/POP): BC=0 DE=1 HL=2 AF=3
_RP2_NAMES = ("bc", "de", "hl", "af")

HL_INDIRECT = 6


@dataclass(slots=True)
class Registers:
    """Eight 8-bit registers plus SP and PC."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    sp: int = 0
    pc: int = 0

    def _flag(self, mask: int) -> bool:
        return (self.f & mask) != 0

    def _set_flag(self, mask: int, on: bool) -> None:
        self.f = (self.f | mask) if on else (self.f & ~mask & 0xFF)

    @property
    def flag_z(self) -> bool:
        return self._flag(FLAG_Z)

    @flag_z.setter
    def flag_z(self, on: bool) -> None:
        self._set_flag(FLAG_Z, on)

    @property
    def flag_n(self) -> bool:
        return self._flag(FLAG_N)

    @flag_n.setter
    def flag_n(self, on: bool) -> None:
        self._set_flag(FLAG_N, on)

    @property
    def flag_h(self) -> bool:
        return self._flag(FLAG_H)

    @flag_h.setter
    def flag_h(self, on: bool) -> None:
        self._set_flag(FLAG_H, on)

    @property
    def flag_c(self) -> bool:
        return self._flag(FLAG_C)

    @flag_c.setter
    def flag_c(self, on: bool) -> None:
        self._set_flag(FLAG_C, on)

    @property
    def af(self) -> int:
        return (self.a << 8) | self.f

    @af.setter
    def af(self, value: int) -> None:
        self.a = (value >> 8) & 0xFF
        self.f = value & 0xF0  # lower nibble of F always reads as zero

    @property
    def bc(self) -> int:
        return (self.b << 8) | self.c

    @bc.setter
    def bc(self, value: int) -> None:
        self.b = (value >> 8) & 0xFF
        self.c = value & 0xFF

    @property
    def de(self) -> int:
        return (self.d << 8) | self.e

    @de.setter
    def de(self, value: int) -> None:
        self.d = (value >> 8) & 0xFF
        self.e = value & 0xFF

    @property
    def hl(self) -> int:
        return (self.h << 8) | self.l

    @hl.setter
    def hl(self, value: int) -> None:
        self.h = (value >> 8) & 0xFF
        self.l = value & 0xFF

    @staticmethod
    def _r8_name(index: int) -> str:
        name = _R8_NAMES[index & 0x7]
        if name is None:
            raise ValueError("r8 index 6 is (HL) indirect and has no register")
        return name

    def get_r8(self, index: int) -> int:
        """Read the 8-bit register selected by a 3-bit r8 field."""
        return getattr(self, self._r8_name(index))

    def set_r8(self, index: int, value: int) -> None:
        """Write the 8-bit register selected by a 3-bit r8 field."""
        setattr(self, self._r8_name(index), value & 0xFF)

    def get_rp(self, index: int) -> int:
        """Read the pair selected by a 2-bit rp field (BC, DE, HL, SP)."""
        return getattr(self, _RP_NAMES[index & 0x3])

    def set_rp(self, index: int, value: int) -> None:
        """Write the pair selected by a 2-bit rp field (BC, DE, HL, SP)."""
        setattr(self, _RP_NAMES[index & 0x3], value & 0xFFFF)

    def get_rp2(self, index: int) -> int:
        """Read the pair selected by a 2-bit rp2 field (BC, DE, HL, AF)."""
        return getattr(self, _RP2_NAMES[index & 0x3])

    def set_rp2(self, index: int, value: int) -> None:
        """Write the pair selected by a 2-bit rp2 field (BC, DE, HL, AF)."""
        setattr(self, _RP2_NAMES[index & 0x3], value & 0xFFFF)