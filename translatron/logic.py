"""Logical and comparison instructions: AND, ANDI, OR, ORI, SLT, SLTI and LUI."""

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
AND_FUNCT = "100100"
OR_FUNCT = "100101"
SLT_FUNCT = "101010"
ANDI_OPCODE = "001100"
ORI_OPCODE = "001101"
SLTI_OPCODE = "001010"
LUI_OPCODE = "001111"


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


def _require_kinds(params: tuple[Param, ...], kinds: tuple[ParamType, ...]) -> None:
    if any(p.kind != k for p, k in zip(params, kinds)):
        raise TranslationError(Status.INVALID_PARAM)


def _instruction(op: str, *params: Param) -> AssemblyInstruction:
    padded = params + tuple(Param() for _ in range(PARAM_COUNT - len(params)))
    return AssemblyInstruction(op=op, params=padded)


def _register(value: int) -> Param:
    return Param(ParamType.REGISTER, value)


def _immediate(value: int) -> Param:
    return Param(ParamType.IMMEDIATE, value)


def _is_r_type(word: int, funct: str) -> bool:
    return check_bits(word, 31, R_TYPE_OPCODE) and check_bits(word, 5, funct)


def _operands(instr: AssemblyInstruction) -> tuple[Param, Param, Param]:
    return instr.param(1), instr.param(2), instr.param(3)


def _encode_i_type(opcode: str, rt: Param, rs: Param, imm: Param) -> int:
    word = set_bits(0, 31, opcode)
    word = set_field(word, 25, rs.value, 5)
    word = set_field(word, 20, rt.value, 5)
    return set_field(word, 15, imm.value, 16)


def _decode_i_type(word: int, opcode: str, op: str) -> AssemblyInstruction:
    if not check_bits(word, 31, opcode):
        raise WrongCommand()
    rs, rt, imm = get_bits(word, 25, 5), get_bits(word, 20, 5), get_bits(word, 15, 16)
    return _instruction(op, _register(rt), _register(rs), _immediate(imm))


def _decode_r_type(word: int, funct: str, op: str) -> AssemblyInstruction:
    if not _is_r_type(word, funct):
        raise WrongCommand()
    rs, rt, rd = get_bits(word, 25, 5), get_bits(word, 20, 5), get_bits(word, 15, 5)
    return _instruction(op, _register(rd), _register(rs), _register(rt))


_REGISTER_TRIPLE = (ParamType.REGISTER, ParamType.REGISTER, ParamType.REGISTER)
_IMMEDIATE_TRIPLE = (ParamType.REGISTER, ParamType.REGISTER, ParamType.IMMEDIATE)


def encode_and(instr: AssemblyInstruction) -> int:
    """Encode ``AND rd, rs, rt``."""
    _require_op(instr, "AND")
    rd, rs, rt = _operands(instr)
    for p in (rd, rs, rt):
        _require_kind(p, ParamType.REGISTER, Status.MISSING_REG)
    _require_registers(rd, rs, rt)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_field(word, 25, rs.value, 5)
    word = set_field(word, 20, rt.value, 5)
    word = set_field(word, 15, rd.value, 5)
    word = set_field(word, 10, 0, 5)
    return set_bits(word, 5, AND_FUNCT)


def decode_and(word: int) -> AssemblyInstruction:
    """Decode an AND word into ``AND rd, rs, rt``."""
    return _decode_r_type(word, AND_FUNCT, "AND")


def encode_andi(instr: AssemblyInstruction) -> int:
    """Encode ``ANDI rt, rs, #imm``."""
    _require_op(instr, "ANDI")
    rt, rs, imm = _operands(instr)
    _require_kind(rt, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(rs, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(imm, ParamType.IMMEDIATE, Status.INVALID_PARAM)
    _require_registers(rt, rs)
    _require_immediate(imm)
    return _encode_i_type(ANDI_OPCODE, rt, rs, imm)


def decode_andi(word: int) -> AssemblyInstruction:
    """Decode an ANDI word into ``ANDI rt, rs, #imm``."""
    return _decode_i_type(word, ANDI_OPCODE, "ANDI")


def encode_or(instr: AssemblyInstruction) -> int:
    """Encode ``OR``; the first operand goes to rt, the second to rs, the third to rd."""
    _require_op(instr, "OR")
    first, second, third = _operands(instr)
    _require_kinds((first, second, third), _REGISTER_TRIPLE)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_field(word, 20, first.value, 5)
    word = set_field(word, 25, second.value, 5)
    word = set_field(word, 15, third.value, 5)
    word = set_bits(word, 10, "00000")
    return set_bits(word, 5, OR_FUNCT)


def decode_or(word: int) -> AssemblyInstruction:
    """Decode an OR word into ``OR rd, rs, rt``."""
    return _decode_r_type(word, OR_FUNCT, "OR")


def encode_ori(instr: AssemblyInstruction) -> int:
    """Encode ``ORI rt, rs, #imm``."""
    _require_op(instr, "ORI")
    rt, rs, imm = _operands(instr)
    _require_kinds((rt, rs, imm), _IMMEDIATE_TRIPLE)
    return _encode_i_type(ORI_OPCODE, rt, rs, imm)


def decode_ori(word: int) -> AssemblyInstruction:
    """Decode an ORI word into ``ORI rt, rs, #imm``."""
    return _decode_i_type(word, ORI_OPCODE, "ORI")


def encode_slt(instr: AssemblyInstruction) -> int:
    """Encode ``SLT``; the first operand goes to rt, the second to rs, the third to rd."""
    _require_op(instr, "SLT")
    first, second, third = _operands(instr)
    _require_kinds((first, second, third), _REGISTER_TRIPLE)
    _require_registers(first, second, third)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_field(word, 25, second.value, 5)
    word = set_field(word, 20, first.value, 5)
    word = set_field(word, 15, third.value, 5)
    word = set_bits(word, 10, "00000")
    return set_bits(word, 5, SLT_FUNCT)


def decode_slt(word: int) -> AssemblyInstruction:
    """Decode an SLT word into ``SLT rd, rs, rt``."""
    return _decode_r_type(word, SLT_FUNCT, "SLT")


def encode_slti(instr: AssemblyInstruction) -> int:
    """Encode ``SLTI rt, rs, #imm``."""
    _require_op(instr, "SLTI")
    rt, rs, imm = _operands(instr)
    _require_kinds((rt, rs, imm), _IMMEDIATE_TRIPLE)
    return _encode_i_type(SLTI_OPCODE, rt, rs, imm)


def decode_slti(word: int) -> AssemblyInstruction:
    """Decode an SLTI word into ``SLTI rt, rs, #imm``."""
    return _decode_i_type(word, SLTI_OPCODE, "SLTI")


def encode_lui(instr: AssemblyInstruction) -> int:
    """Encode ``LUI rt, #imm``."""
    _require_op(instr, "LUI")
    rt, imm = instr.param(1), instr.param(2)
    _require_kind(rt, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(imm, ParamType.IMMEDIATE, Status.INVALID_PARAM)
    _require_registers(rt)
    _require_immediate(imm)

    word = set_bits(0, 31, LUI_OPCODE)
    word = set_field(word, 20, rt.value, 5)
    return set_field(word, 15, imm.value, 16)


def decode_lui(word: int) -> AssemblyInstruction:
    """Decode a LUI word; the immediate lands in the third operand slot."""
    if not check_bits(word, 31, LUI_OPCODE):
        raise WrongCommand()
    rt, imm = get_bits(word, 20, 5), get_bits(word, 15, 16)
    return _instruction("LUI", _register(rt), Param(), _immediate(imm))