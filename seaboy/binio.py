"""Little-endian binary writer and reader for save state streams."""

from __future__ import annotations

import struct
from typing import BinaryIO


class StateError(Exception):
    """Raised when a save state cannot be read or does not match."""


_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_F64 = struct.Struct("<d")


class BinaryWriter:
    """Writes fixed-width little-endian values to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write8(self, value: int) -> None:
        self.stream.write(bytes((value & 0xFF,)))

    def write16(self, value: int) -> None:
        self.stream.write(_U16.pack(value & 0xFFFF))

    def write32(self, value: int) -> None:
        self.stream.write(_U32.pack(value & 0xFFFFFFFF))

    def write_bool(self, value: bool) -> None:
        self.write8(1 if value else 0)

    def write_int(self, value: int) -> None:
        self.stream.write(_I32.pack(value))

    def write_double(self, value: float) -> None:
        self.stream.write(_F64.pack(value))

    def write_block(self, data: bytes | bytearray | memoryview) -> None:
        self.stream.write(bytes(data))


class BinaryReader:
    """Reads fixed-width little-endian values; raises StateError when short."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def _take(self, size: int) -> bytes:
        data = self.stream.read(size)
        if len(data) != size:
            raise StateError(f"truncated data: wanted {size} bytes, got {len(data)}")
        return data

    def read8(self) -> int:
        return self._take(1)[0]

    def read16(self) -> int:
        return _U16.unpack(self._take(2))[0]

    def read32(self) -> int:
        return _U32.unpack(self._take(4))[0]

    def read_bool(self) -> bool:
        return self.read8() != 0

    def read_int(self) -> int:
        return _I32.unpack(self._take(4))[0]

    def read_double(self) -> float:
        return _F64.unpack(self._take(8))[0]

    def read_block(self, size: int) -> bytes:
        return self._take(size)