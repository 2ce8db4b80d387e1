"""Memory, branch and HI/LO transfer instructions: LW, SW, BEQ, BNE, MFHI and MFLO."""

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
MFHI_FUNCT = "010000"
MFLO_FUNCT = "010010"
LW_OPCODE = "100011"
SW_OPCODE = "101011"
BEQ_OPCODE = "000100"
BNE_OPCODE = "000101"


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


def _encode_i_type(opcode: str, rs: int, rt: int, imm: int) -> int:
    word = set_bits(0, 31, opcode)
    word = set_field(word, 25, rs, 5)
    word = set_field(word, 20, rt, 5)
    return set_field(word, 15, imm, 16)


def _i_fields(word: int, opcode: str) -> tuple[int, int, int]:
    """Return (rs, rt, imm) of an I-type word, or raise WrongCommand."""
    if not check_bits(word, 31, opcode):
        raise WrongCommand()
    return get_bits(word, 25, 5), get_bits(word, 20, 5), get_bits(word, 15, 16)


def _checked_i_operands(instr: AssemblyInstruction, op: str) -> tuple[Param, Param, Param]:
    """Validate ``op reg, reg, #imm`` with register and 16-bit immediate limits."""
    _require_op(instr, op)
    first, second, imm = instr.param(1), instr.param(2), instr.param(3)
    _require_kind(first, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(second, ParamType.REGISTER, Status.MISSING_REG)
    _require_kind(imm, ParamType.IMMEDIATE, Status.INVALID_PARAM)
    _require_registers(first, second)
    _require_immediate(imm)
    return first, second, imm


def encode_lw(instr: AssemblyInstruction) -> int:
    """Encode LW from operands (register rt, register, immediate).

    The first operand goes to rt, the third to rs and the second to the
    16-bit offset. No range checks are made.
    """
    _require_op(instr, "LW")
    first, second, third = instr.param(1), instr.param(2), instr.param(3)
    if (
        first.kind != ParamType.REGISTER
        or second.kind != ParamType.REGISTER
        or third.kind != ParamType.IMMEDIATE
    ):
        raise TranslationError(Status.INVALID_PARAM)

    word = set_bits(0, 31, LW_OPCODE)
    word = set_field(word, 20, first.value, 5)
    word = set_field(word, 25, third.value, 5)
    return set_field(word, 15, second.value, 16)


def decode_lw(word: int) -> AssemblyInstruction:
    """Decode an LW word into ``LW rt, #offset, rs``."""
    rs, rt, offset = _i_fields(word, LW_OPCODE)
    return _instruction("LW", _register(rt), _immediate(offset), _register(rs))


def encode_sw(instr: AssemblyInstruction) -> int:
    """Encode ``SW rt, rs, #offset``."""
    rt, rs, imm = _checked_i_operands(instr, "SW")
    return _encode_i_type(SW_OPCODE, rs.value, rt.value, imm.value)


def decode_sw(word: int) -> AssemblyInstruction:
    """Decode an SW word into ``SW rt, rs, #offset``."""
    rs, rt, offset = _i_fields(word, SW_OPCODE)
    return _instruction("SW", _register(rt), _register(rs), _immediate(offset))


def encode_beq(instr: AssemblyInstruction) -> int:
    """Encode ``BEQ rs, rt, #offset``."""
    rs, rt, imm = _checked_i_operands(instr, "BEQ")
    return _encode_i_type(BEQ_OPCODE, rs.value, rt.value, imm.value)


def decode_beq(word: int) -> AssemblyInstruction:
    """Decode a BEQ word into ``BEQ rs, rt, #offset``."""
    rs, rt, offset = _i_fields(word, BEQ_OPCODE)
    return _instruction("BEQ", _register(rs), _register(rt), _immediate(offset))


def encode_bne(instr: AssemblyInstruction) -> int:
    """Encode ``BNE rt, rs, #offset``."""
    rt, rs, imm = _checked_i_operands(instr, "BNE")
    return _encode_i_type(BNE_OPCODE, rs.value, rt.value, imm.value)


def decode_bne(word: int) -> AssemblyInstruction:
    """Decode a BNE word into ``BNE rt, rs, #offset``."""
    rs, rt, offset = _i_fields(word, BNE_OPCODE)
    return _instruction("BNE", _register(rt), _register(rs), _immediate(offset))


def _encode_move_from(instr: AssemblyInstruction, op: str, funct: str) -> int:
    _require_op(instr, op)
    rd = instr.param(1)
    _require_kind(rd, ParamType.REGISTER, Status.MISSING_REG)
    _require_registers(rd)

    word = set_bits(0, 31, R_TYPE_OPCODE)
    word = set_bits(word, 5, funct)
    return set_field(word, 15, rd.value, 5)


def _decode_move_from(word: int, op: str, funct: str) -> AssemblyInstruction:
    if not (check_bits(word, 31, R_TYPE_OPCODE) and check_bits(word, 5, funct)):
        raise WrongCommand()
    return _instruction(op, _register(get_bits(word, 15, 5)))


def encode_mfhi(instr: AssemblyInstruction) -> int:
    """Encode ``MFHI rd``."""
    return _encode_move_from(instr, "MFHI", MFHI_FUNCT)


def decode_mfhi(word: int) -> AssemblyInstruction:
    """Decode an MFHI word into ``MFHI rd``."""
    return _decode_move_from(word, "MFHI", MFHI_FUNCT)


def encode_mflo(instr: AssemblyInstruction) -> int:
    """Encode ``MFLO rd``."""
    return _encode_move_from(instr, "MFLO", MFLO_FUNCT)


def decode_mflo(word: int) -> AssemblyInstruction:
    """Decode an MFLO word into ``MFLO rd``."""
    return _decode_move_from(word, "MFLO", MFLO_FUNCT)