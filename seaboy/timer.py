"""DIV/TIMA/TMA/TAC timer driven by a 16-bit internal counter."""

from __future__ import annotations

from collections.abc import Callable

from seaboy.binio import BinaryReader, BinaryWriter

DIV = 0xFF04
TIMA = 0xFF05
TMA = 0xFF06
TAC = 0xFF07

TIMER_INTERRUPT = 0x04  # IF bit 2
POWER_ON_COUNTER = 0xABCC  # internal counter after the DMG boot ROM
OVERFLOW_DELAY = 4  # T-cycles TIMA reads 0x00 before the TMA reload

# TAC[1:0] selects which internal counter bit drives TIMA.
_TAP_BITS = (9, 3, 5, 7)


class Timer:
    """Timer unit; TIMA ticks on falling edges of (selected bit AND enable).

    ``request_interrupt`` is called with the IF bit mask (0x04) when the
    delayed TMA reload fires after a TIMA overflow.
    """

    def __init__(self, request_interrupt: Callable[[int], None] | None = None) -> None:
        self._request_interrupt = request_interrupt
        self.counter = POWER_ON_COUNTER
        self.tima = 0
        self.tma = 0
        self.tac = 0
        self.overflow_delay = 0
        self.tima_locked = False
        self.reset()

    def reset(self) -> None:
        """Return to the post-boot state."""
        self.counter = POWER_ON_COUNTER
        self.tima = 0
        self.tma = 0
        self.tac = 0
        self.overflow_delay = 0
        self.tima_locked = False

    @property
    def sys_counter(self) -> int:
        """The full 16-bit internal counter (DIV is its upper byte)."""
        return self.counter

    @property
    def _enabled(self) -> bool:
        return (self.tac & 0x04) != 0

    @property
    def _selected_bit(self) -> int:
        return _TAP_BITS[self.tac & 0x03]

    def _signal(self) -> bool:
        return self._enabled and ((self.counter >> self._selected_bit) & 1) != 0

    def _increment_tima(self) -> None:
        self.tima = (self.tima + 1) & 0xFF
        if self.tima == 0:
            self.overflow_delay = OVERFLOW_DELAY

    def tick(self, t_cycles: int) -> None:
        """Advance the timer by ``t_cycles`` T-cycles."""
        self.tima_locked = False
        enable = self._enabled
        bit = self._selected_bit

        for _ in range(t_cycles):
            # The reload countdown runs even when the timer is disabled.
            if self.overflow_delay > 0:
                self.overflow_delay -= 1
                if self.overflow_delay == 0:
                    self.tima = self.tma
                    self.tima_locked = True
                    if self._request_interrupt is not None:
                        self._request_interrupt(TIMER_INTERRUPT)

            old = self.counter
            self.counter = (self.counter + 1) & 0xFFFF

            old_bit = enable and ((old >> bit) & 1) != 0
            new_bit = enable and ((self.counter >> bit) & 1) != 0
            if old_bit and not new_bit:
                self._increment_tima()

    def read(self, addr: int) -> int:
        """Read one of the timer registers; other addresses read 0xFF."""
        if addr == DIV:
            return (self.counter >> 8) & 0xFF
        if addr == TIMA:
            return self.tima
        if addr == TMA:
            return self.tma
        if addr == TAC:
            return self.tac | 0xF8
        return 0xFF

    def write(self, addr: int, value: int) -> None:
        """Write one of the timer registers; other addresses are ignored."""
        value &= 0xFF
        if addr == DIV:
            self.reset_div()
        elif addr == TIMA:
            if self.tima_locked:
                return
            self.overflow_delay = 0
            self.tima = value
        elif addr == TMA:
            self.tma = value
            if self.tima_locked:
                self.tima = value
        elif addr == TAC:
            old_signal = self._signal()
            self.tac = value & 0x07
            if old_signal and not self._signal():
                self._increment_tima()

    def reset_div(self) -> None:
        """Clear the internal counter, ticking TIMA if that makes a falling edge."""
        was_set = self._signal()
        self.counter = 0
        if was_set:
            self._increment_tima()

    def serialize(self, writer: BinaryWriter) -> None:
        writer.write16(self.counter)
        writer.write8(self.tima)
        writer.write8(self.tma)
        writer.write8(self.tac)
        writer.write_int(self.overflow_delay)
        writer.write_bool(self.tima_locked)

    def deserialize(self, reader: BinaryReader) -> None:
        self.counter = reader.read16()
        self.tima = reader.read8()
        self.tma = reader.read8()
        self.tac = reader.read8()
        self.overflow_delay = reader.read_int()
        self.tima_locked = reader.read_bool()