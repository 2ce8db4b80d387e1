"""Arithmetic instructions: ADD, ADDI, SUB, MULT and DIV."""

from __future__ import annotations

from .bits import check_bits, get_bits, set_bits, set_field
from .model import (
    AssemblyInstruction,
    Param,
    ParamType,
    Status,
    TranslationError,
    WrongCommand,
    PARAM_COUNT,
)

MAX_REGISTER = 31
MAX_IMMEDIATE = 0xFFFF

R_TYPE_OPCODE = "000000"
ADD_FUNCT = "100000"
SUB_FUNCT = "100010"
MULT_FUNCT = "011000"
DIV_FUNCT = "011010"
ADDI_OPCODE = "001000"


def _require_op(instr: AssemblyInstruction, op: str) -> None:
    if instr.op != op:
        raise WrongCommand()


def _require_kind(param: Param, kind: ParamType, status: Status) -> None:
    if param.kind != kind:
        raise TranslationError(status)


def _require_registers(*params: Param) -> None:
    if any(p.value > MAX_REGISTER for p in params):
        raise TranslationError(Status.INVALID_REG)


def _require_immediate(param: Param) -> None:
    if param.value > MAX_IMMEDIATE:
        raise TranslationError(Status.INVALID_IMMED)


def _instruction(op: str, *params: Param) -> AssemblyInstruction:
    padded = params + tuple(Param() for _ in range(PARAM_COUNT - len(params)))
    return AssemblyInstruction(op=op, params=padded)


def _register(value: int) -> Param:
    return Param(ParamType.REGISTER, value)


def _immediate(value: int) -> Param:
    return Param(ParamType.IMMEDIATE, value)


def _is_r_type(word: int, funct: str) -> bool:
    return check_bits(word, 31, R_TYPE_OPCODE) and check_bits(word, 5, funct)


def encode_add(instr: AssemblyInstruction) -> int:
    """Encode ``ADD rd, rs, rt``."""
    _require_op(instr, "ADD")
    rd, rs, rt = instr.param(1), instr.param(2), instr.param(3)
    for p in (rd, rs, rt):
        _require_kind(p, ParamType.REGISTER, Status.MISSING_REG)
    _require_registers(rd, rs, rt)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_bits(word, 5, ADD_FUNCT)
    word = set_field(word, 15, rd.value, 5)
    word = set_field(word, 25, rs.value, 5)
    return set_field(word, 20, rt.value, 5)


def decode_add(word: int) -> AssemblyInstruction:
    """Decode an ADD word into ``ADD rd, rs, rt``."""
    if not _is_r_type(word, ADD_FUNCT):
        raise WrongCommand()
    rd, rs, rt = get_bits(word, 15, 5), get_bits(word, 25, 5), get_bits(word, 20, 5)
    return _instruction("ADD", _register(rd), _register(rs), _register(rt))


def encode_addi(instr: AssemblyInstruction) -> int:
    """Encode ``ADDI rt, rs, #imm``."""
    _require_op(instr, "ADDI")
    rt, rs, imm = instr.param(1), instr.param(2), instr.param(3)
    _require_kind(rt, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(rs, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(imm, ParamType.IMMEDIATE, Status.INVALID_PARAM)
    _require_registers(rt, rs)
    _require_immediate(imm)

    word = set_bits(0, 31, ADDI_OPCODE)
    word = set_field(word, 20, rt.value, 5)
    word = set_field(word, 25, rs.value, 5)
    return set_field(word, 15, imm.value, 16)


def decode_addi(word: int) -> AssemblyInstruction:
    """Decode an ADDI word into ``ADDI rt, rs, #imm``."""
    if not check_bits(word, 31, ADDI_OPCODE):
        raise WrongCommand()
    rs, rt, imm = get_bits(word, 25, 5), get_bits(word, 20, 5), get_bits(word, 15, 16)
    return _instruction("ADDI", _register(rt), _register(rs), _immediate(imm))


def encode_sub(instr: AssemblyInstruction) -> int:
    """Encode ``SUB rd, rs, rt``."""
    _require_op(instr, "SUB")
    rd, rs, rt = instr.param(1), instr.param(2), instr.param(3)
    if any(p.kind != ParamType.REGISTER for p in (rd, rs, rt)):
        raise TranslationError(Status.INVALID_PARAM)
    _require_registers(rd, rs, rt)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_field(word, 25, rs.value, 5)
    word = set_field(word, 20, rt.value, 5)
    word = set_field(word, 15, rd.value, 5)
    word = set_bits(word, 10, "00000")
    return set_bits(word, 5, SUB_FUNCT)


def decode_sub(word: int) -> AssemblyInstruction:
    """Decode a SUB word into ``SUB rd, rs, rt``."""
    if not _is_r_type(word, SUB_FUNCT):
        raise WrongCommand()
    rs, rt, rd = get_bits(word, 25, 5), get_bits(word, 20, 5), get_bits(word, 15, 5)
    return _instruction("SUB", _register(rd), _register(rs), _register(rt))


def encode_mult(instr: AssemblyInstruction) -> int:
    """Encode ``MULT rs, rt``."""
    _require_op(instr, "MULT")
    rs, rt = instr.param(1), instr.param(2)
    _require_kind(rs, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(rt, ParamType.REGISTER, Status.MISSING_REG)
    _require_registers(rs, rt)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_bits(word, 5, MULT_FUNCT)
    word = set_field(word, 25, rs.value, 5)
    return set_field(word, 20, rt.value, 5)


def decode_mult(word: int) -> AssemblyInstruction:
    """Decode a MULT word into ``MULT rs, rt``."""
    if not _is_r_type(word, MULT_FUNCT):
        raise WrongCommand()
    rs, rt = get_bits(word, 25, 5), get_bits(word, 20, 5)
    return _instruction("MULT", _register(rs), _register(rt))


def encode_div(instr: AssemblyInstruction) -> int:
    """Encode ``DIV``; the first operand goes to rt and the second to rs."""
    _require_op(instr, "DIV")
    rt, rs = instr.param(1), instr.param(2)
    if rt.kind != ParamType.REGISTER or rs.kind != ParamType.REGISTER:
        raise TranslationError(Status.MISSING_REG)
    _require_registers(rt, rs)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_field(word, 25, rs.value, 5)
    word = set_field(word, 20, rt.value, 5)
    word = set_field(word, 15, 0, 5)
    word = set_field(word, 10, 0, 5)
    return set_bits(word, 5, DIV_FUNCT)


def decode_div(word: int) -> AssemblyInstruction:
    """Decode a DIV word into ``DIV rs, rt``."""
    if not _is_r_type(word, DIV_FUNCT):
        raise WrongCommand()
    rs, rt = get_bits(word, 25, 5), get_bits(word, 20, 5)
    return _instruction("DIV", _register(rs), _register(rt))