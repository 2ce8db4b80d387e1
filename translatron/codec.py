"""Dispatching instructions to their encoders and decoders."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from . import arithmetic, logic, transfer
from .model import AssemblyInstruction, Status, TranslationError, WrongCommand

_In = TypeVar("_In")
_Out = TypeVar("_Out")

# Handlers are tried in this order; the first one that claims the input wins.
_ENCODERS: tuple[Callable[[AssemblyInstruction], int], ...] = (
    arithmetic.encode_addi,
    logic.encode_andi,
    logic.encode_ori,
    logic.encode_lui,
    transfer.encode_lw,
    transfer.encode_beq,
    transfer.encode_bne,
    logic.encode_slti,
    transfer.encode_sw,
    arithmetic.encode_add,
    arithmetic.encode_sub,
    arithmetic.encode_mult,
    arithmetic.encode_div,
    transfer.encode_mfhi,
    transfer.encode_mflo,
    logic.encode_and,
    logic.encode_or,
    logic.encode_slt,
)

_DECODERS: tuple[Callable[[int], AssemblyInstruction], ...] = (
    arithmetic.decode_addi,
    logic.decode_andi,
    logic.decode_ori,
    logic.decode_lui,
    transfer.decode_lw,
    transfer.decode_beq,
    transfer.decode_bne,
    logic.decode_slti,
    transfer.decode_sw,
    arithmetic.decode_add,
    arithmetic.decode_sub,
    arithmetic.decode_mult,
    arithmetic.decode_div,
    transfer.decode_mfhi,
    transfer.decode_mflo,
    logic.decode_and,
    logic.decode_or,
    logic.decode_slt,
)


def _first_match(handlers: Iterable[Callable[[_In], _Out]], value: _In) -> _Out:
    for handler in handlers:
        try:
            return handler(value)
        except WrongCommand:
            continue
    raise TranslationError(Status.UNRECOGNIZED_COMMAND)


def encode(instr: AssemblyInstruction) -> int:
    """Encode an instruction into its 32-bit machine word.

    Raises TranslationError when no handler recognises the instruction or the
    handler that does rejects its operands.
    """
    return _first_match(_ENCODERS, instr)


def decode(word: int) -> AssemblyInstruction:
    """Decode a 32-bit machine word into an instruction.

    Raises TranslationError when no handler recognises the word.
    """
    return _first_match(_DECODERS, word)