"""Rendering instructions and machine words as text."""

from __future__ import annotations

from .model import AssemblyInstruction, Param, ParamType

_MEMORY_OPS = frozenset({"LW", "SW"})

_NAMED_REGISTERS = {0: "zero", 28: "gp", 29: "sp", 30: "fp", 31: "ra"}

# (first register, last register, prefix, number of the first register)
_NUMBERED_REGISTERS = (
    (2, 3, "v", 0),
    (4, 7, "a", 0),
    (8, 15, "t", 0),
    (16, 23, "s", 0),
    (24, 25, "t", 8),
)


def _register_name(value: int) -> str:
    if value in _NAMED_REGISTERS:
        return "$" + _NAMED_REGISTERS[value]
    for low, high, prefix, base in _NUMBERED_REGISTERS:
        if low <= value <= high:
            return f"${prefix}{value - low + base}"
    return ""


def format_param(param: Param) -> str:
    """Render one operand.

    Registers without a conventional name render as an empty string; an empty
    operand renders as '<>' followed by its value read as a register.
    """
    if param.kind == ParamType.EMPTY:
        return "<>" + _register_name(param.value)
    if param.kind == ParamType.REGISTER:
        return _register_name(param.value)
    if param.kind == ParamType.IMMEDIATE:
        return f"#0x{param.value:X}"
    return f"<unknown: {int(param.kind)}, {param.value}>"


def format_assembly(instr: AssemblyInstruction) -> str:
    """Render an instruction as one line of assembly, without a newline."""
    parts = [instr.op, " "]
    first, second, third, fourth = instr.params
    if first.kind != ParamType.EMPTY:
        parts.append(format_param(first))
    if second.kind != ParamType.EMPTY:
        parts.append(", " + format_param(second))
    if third.kind != ParamType.EMPTY:
        if third.kind == ParamType.REGISTER and instr.op in _MEMORY_OPS:
            parts.append(f"({format_param(third)})")
        else:
            parts.append(", " + format_param(third))
    if fourth.kind != ParamType.EMPTY:
        parts.append(", " + format_param(fourth))
    return "".join(parts)


def format_machine(word: int) -> str:
    """Render a machine word in hex and in binary nibbles, without a newline."""
    bits = format(word & 0xFFFFFFFF, "032b")
    nibbles = "".join(bits[i:i + 4] + " " for i in range(0, 32, 4))
    return f"Hex: 0x{word & 0xFFFFFFFF:08X}\tBinary:{nibbles}"