"""Save state files and battery-backed SRAM persistence."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Protocol

from seaboy.binio import BinaryReader, BinaryWriter, StateError

SAVE_STATE_MAGIC = b"SBST"
SAVE_STATE_VERSION = 1

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193

_BATTERY_TYPES = frozenset({
    0x03,  # MBC1+RAM+BATTERY
    0x06,  # MBC2+BATTERY
    0x0F,  # MBC3+TIMER+BATTERY
    0x10,  # MBC3+TIMER+RAM+BATTERY
    0x13,  # MBC3+RAM+BATTERY
    0x1B,  # MBC5+RAM+BATTERY
    0x1E,  # MBC5+RUMBLE+RAM+BATTERY
})


class Serializable(Protocol):
    def serialize(self, writer: BinaryWriter) -> None: ...

    def deserialize(self, reader: BinaryReader) -> None: ...


class SramCartridge(Protocol):
    @property
    def sram(self) -> bytes: ...

    def load_sram(self, data: bytes) -> None: ...


def rom_title_hash(rom: bytes | None) -> int:
    """FNV-1a over header bytes 0x0134-0x0143 (those present in the ROM)."""
    value = _FNV_OFFSET
    if rom:
        for byte in rom[0x0134:0x0144]:
            value = ((value ^ byte) * _FNV_PRIME) & 0xFFFFFFFF
    return value if rom else 0


def save_state(
    path: str | os.PathLike[str],
    rom: bytes | None,
    components: Iterable[Serializable],
    cgb: bool,
) -> None:
    """Write header and each component's state, in order, to ``path``."""
    with open(path, "wb") as stream:
        writer = BinaryWriter(stream)
        writer.write_block(SAVE_STATE_MAGIC)
        writer.write8(SAVE_STATE_VERSION)
        writer.write32(rom_title_hash(rom))
        writer.write_bool(cgb)
        for component in components:
            component.serialize(writer)


def load_state(
    path: str | os.PathLike[str],
    rom: bytes | None,
    components: Iterable[Serializable],
) -> bool:
    """Restore components from ``path``; returns the stored CGB flag.

    Raises StateError on a bad magic, unknown version, ROM mismatch or
    truncated file.
    """
    with open(path, "rb") as stream:
        reader = BinaryReader(stream)
        magic = stream.read(len(SAVE_STATE_MAGIC))
        if magic != SAVE_STATE_MAGIC:
            raise StateError(f"invalid magic in: {os.fspath(path)}")
        version = reader.read8()
        if version != SAVE_STATE_VERSION:
            raise StateError(f"unsupported version {version} in: {os.fspath(path)}")
        saved_hash = reader.read32()
        current_hash = rom_title_hash(rom)
        if saved_hash != current_hash:
            raise StateError(
                f"ROM mismatch (hash 0x{saved_hash:08X} vs 0x{current_hash:08X}) "
                f"in: {os.fspath(path)}"
            )
        cgb = reader.read_bool()
        for component in components:
            component.deserialize(reader)
    return cgb


def save_path_for(rom_path: str | os.PathLike[str]) -> str:
    """Replace the text after the last dot with ``.sav`` (or append it)."""
    text = os.fspath(rom_path)
    head, dot, _ = text.rpartition(".")
    return f"{head}.sav" if dot else f"{text}.sav"


def has_battery(rom: bytes) -> bool:
    """True when the cartridge type byte names a battery-backed cartridge."""
    if len(rom) <= 0x0147:
        return False
    return rom[0x0147] in _BATTERY_TYPES


def save_sram(cartridge: SramCartridge | None, path: str | os.PathLike[str]) -> bool:
    """Write cartridge SRAM to ``path``; False when there is nothing to save."""
    if cartridge is None or len(cartridge.sram) == 0:
        return False
    with open(path, "wb") as stream:
        stream.write(bytes(cartridge.sram))
    return True


def load_sram(cartridge: SramCartridge | None, path: str | os.PathLike[str]) -> bool:
    """Load SRAM from ``path``; False when there is no cartridge or no file."""
    if cartridge is None:
        return False
    try:
        with open(path, "rb") as stream:
            data = stream.read()
    except FileNotFoundError:
        return False
    cartridge.load_sram(data)
    return True