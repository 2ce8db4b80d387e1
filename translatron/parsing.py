"""Reading assembly text and machine words typed by the user."""

from __future__ import annotations

from .bits import WORD_MASK
from .model import AssemblyInstruction, Param, ParamType, Status, TranslationError, PARAM_COUNT

UNKNOWN_REGISTER = WORD_MASK

# Longer mnemonics come before their prefixes (ADDI before ADD).
_MNEMONICS = (
    "ADDI", "ADD", "ANDI", "AND", "BEQ", "BNE", "DIV", "LUI", "LW",
    "MFHI", "MFLO", "MULT", "ORI", "OR", "SLTI", "SLT", "SUB", "SW",
)

# Instructions whose operands need not be separated by commas.
_COMMA_OPTIONAL = frozenset({"LW", "SW", "MFLO", "MFHI"})

_REGISTERS = {
    "zero": 0,
    "v0": 2, "v1": 3,
    "a0": 4, "a1": 5, "a2": 6, "a3": 7,
    "t0": 8, "t1": 9, "t2": 10, "t3": 11, "t4": 12, "t5": 13, "t6": 14, "t7": 15,
    "s0": 16, "s1": 17, "s2": 18, "s3": 19, "s4": 20, "s5": 21, "s6": 22, "s7": 23,
    "t8": 24, "t9": 25,
    "gp": 28, "sp": 29, "fp": 30, "ra": 31,
}

_DECIMAL = frozenset("0123456789")
_HEX = frozenset("0123456789abcdefABCDEF")
_ALNUM = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def _ascii_upper(text: str) -> str:
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in text)


def _span(text: str, pos: int, allowed: frozenset[str]) -> int:
    while pos < len(text) and text[pos] in allowed:
        pos += 1
    return pos


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def _char(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def register_number(name: str) -> int:
    """Return the number of register ``name`` (without '$'), or UNKNOWN_REGISTER."""
    return _REGISTERS.get(name, UNKNOWN_REGISTER)


def parse_immediate(text: str) -> tuple[int, int]:
    """Read a decimal or 0x-prefixed hex number at the start of ``text``.

    Returns the value, wrapped to 32 bits, and the number of characters read.
    Text with no digits reads as 0.
    """
    if text[:1] == "0" and text[1:2] in ("x", "X"):
        end = _span(text, 2, _HEX)
        digits = text[2:end]
        value = int(digits, 16) if digits else 0
    else:
        end = _span(text, 0, _DECIMAL)
        value = int(text[:end]) if end else 0
    return value & WORD_MASK, end


def _read_param(line: str, pos: int, comma_optional: bool) -> tuple[Param, int]:
    pos = _skip_spaces(line, pos)
    comma_seen = _char(line, pos) == ","
    if comma_seen:
        pos += 1
    if _char(line, pos) == "(":
        pos += 1
    pos = _skip_spaces(line, pos)

    lead = _char(line, pos)
    if not lead:
        raise TranslationError(Status.MISSING_PARAM)
    if lead == "$":
        end = _span(line, pos + 1, _ALNUM)
        param = Param(ParamType.REGISTER, register_number(line[pos + 1:end]))
        pos = end
    elif lead == "#":
        value, used = parse_immediate(line[pos + 1:])
        param = Param(ParamType.IMMEDIATE, value)
        pos += 1 + used
    else:
        raise TranslationError(Status.INVALID_PARAM)

    if _char(line, pos) == ")":
        pos += 1
    pos = _skip_spaces(line, pos)

    if not (comma_seen or comma_optional) and _char(line, pos) != ",":
        raise TranslationError(Status.MISSING_COMMA)
    return param, pos


def parse_assembly(line: str) -> AssemblyInstruction:
    """Parse one line of assembly into an instruction.

    Raises TranslationError with the matching status when the line is malformed.
    """
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)

    op = next((m for m in _MNEMONICS if _ascii_upper(line[:len(m)]) == m), None)
    if op is None:
        raise TranslationError(Status.UNRECOGNIZED_COMMAND)

    pos = len(op)
    if _char(line, pos) != " ":
        raise TranslationError(Status.MISSING_SPACE)
    pos = _skip_spaces(line, pos)

    comma_optional = op in _COMMA_OPTIONAL
    params: list[Param] = []
    while len(params) < PARAM_COUNT:
        param, pos = _read_param(line, pos, comma_optional)
        params.append(param)
        if pos >= len(line):
            break
    params.extend(Param() for _ in range(PARAM_COUNT - len(params)))
    return AssemblyInstruction(op=op, params=tuple(params))


def parse_hex(line: str) -> int:
    """Read a hex machine word, with or without a 0x prefix, wrapped to 32 bits.

    Reading stops at the first character that is not a hex digit.
    """
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)
    start = 2 if line[:1] == "0" and line[1:2] in ("x", "X") else 0
    end = _span(line, start, _HEX)
    digits = line[start:end]
    return (int(digits, 16) if digits else 0) & WORD_MASK


def parse_binary(line: str) -> int:
    """Read a binary machine word, wrapped to 32 bits.

    Every '0' and '1' in the line is a digit; all other characters are ignored.
    """
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)
    digits = "".join(c for c in line if c in "01")
    return (int(digits, 2) if digits else 0) & WORD_MASK