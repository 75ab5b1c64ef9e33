"""Game Boy core parts: SM83 registers, ALU, CB instructions, timer and save states."""

__version__ = "0.1.0"

__all__ = ["registers", "binio", "savestate", "timer", "alu", "cb"]