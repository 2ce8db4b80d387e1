"""Translate between MIPS assembly and 32-bit machine code, one instruction at a time."""

__version__ = "1.0.0"