# seaboy

Building blocks of a Game Boy (DMG/CGB) emulator core. It is written in pure
Python and has no dependencies.

- `seaboy.registers.Registers` is the SM83 register file. It holds the
  registers `a`, `f`, `b`, `c`, `d`, `e`, `h`, `l`, `sp` and `pc`.
  - Flags are the properties `flag_z`, `flag_n`, `flag_h` and `flag_c`.
  - Register pairs are the properties `af`, `bc`, `de` and `hl`. Setting `af`
    clears the low nibble of `f`.
  - `get_r8`/`set_r8` use the 3-bit `r8` operand encoding. Index 6 is (HL),
    which has no register behind it, so it raises `ValueError`.
  - `get_rp`/`set_rp` use the `rp` encoding and `get_rp2`/`set_rp2` the `rp2`
    encoding.
- `seaboy.alu` is 8- and 16-bit arithmetic with exact flag behaviour: `add`,
  `sub`, `and_`, `or_`, `xor`, `cp`, `inc8`, `dec8`, `add_hl`, `daa` and
  `add_sp_offset`.
  - The operations on A write their result to A.
  - `inc8`, `dec8` and `add_sp_offset` return their result instead.
- `seaboy.cb` holds the CB-prefixed instructions.
  - The single operations are `rlc`, `rrc`, `rl`, `rr`, `sla`, `sra`, `swap`,
    `srl` and `bit`.
  - `execute(cpu, opcode)` runs any CB sub-opcode. `cpu` is any object with
    `regs` (a `Registers`) and `mmu` (with `read8`/`write8`).
  - `execute` returns the T-cycles taken, including the prefix fetch: 8 on a
    register, 16 on (HL), and 12 for `BIT` on (HL).
- `seaboy.timer.Timer` is the DIV/TIMA/TMA/TAC timer, stepped one T-cycle at a
  time. It models the falling-edge detector, the 4-cycle overflow delay and
  the one-M-cycle reload lock.
  - The `request_interrupt` callback is called with `0x04` when the delayed
    reload fires.
  - `serialize`/`deserialize` save and restore its state.
- `seaboy.binio` provides `BinaryWriter` and `BinaryReader` for little-endian
  state streams. A short read raises `StateError`.
- `seaboy.savestate` handles save states and `.sav` files.
  - `save_state` and `load_state` write and read `SBST` save-state files. Each
    file is checked against `rom_title_hash` of the ROM header.
  - `has_battery` and `save_path_for` help with battery-backed SRAM `.sav`
    files.
  - `save_sram` and `load_sram` write and read those `.sav` files.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Examples

ALU with flags:

```python
from seaboy.registers import Registers
from seaboy import alu

regs = Registers()
regs.a = 0x3A
alu.add(regs, 0xC6)
assert regs.a == 0x00 and regs.flag_z and regs.flag_h and regs.flag_c
```

A CB instruction on a minimal CPU object:

```python
from types import SimpleNamespace
from seaboy import cb
from seaboy.registers import Registers

memory = bytearray(0x10000)
mmu = SimpleNamespace(read8=lambda a: memory[a],
                      write8=lambda a, v: memory.__setitem__(a, v))
cpu = SimpleNamespace(regs=Registers(b=0x81), mmu=mmu)
cycles = cb.execute(cpu, 0x00)      # RLC B
assert cpu.regs.b == 0x03 and cpu.regs.flag_c and cycles == 8
```

Stepping the timer:

```python
from seaboy.timer import Timer

requests = []
timer = Timer(request_interrupt=requests.append)
timer.write(0xFF07, 0x05)   # enable, bit 3 tap
timer.tick(16)
print(timer.read(0xFF05), requests)
```

Save states and SRAM paths:

```python
from seaboy.savestate import save_state, load_state, save_path_for

save_state("slot1.state", rom_bytes, [timer], cgb=False)
cgb = load_state("slot1.state", rom_bytes, [timer])   # raises StateError on mismatch
save_path_for("games/tetris.gb")                       # "games/tetris.sav"
```

`load_state` reads the components in the same order that `save_state` wrote
them.

## What it does not do

This package is a set of parts, not a running emulator. It has none of the
following:

- a table for the unprefixed opcodes
- a CPU step loop or interrupt dispatch
- a memory map or cartridge/MBC handling
- a picture processor or sound unit
- a display, input or audio output
- a command to load and run a ROM

Save states cover only the components you pass in.

## Tests

```
pytest
```