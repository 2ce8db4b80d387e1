"""Core data types shared by the assembler and disassembler."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum


class Status(IntEnum):
    """Outcome codes of parsing, encoding and decoding."""

    NO_ERROR = 0
    WRONG_COMMAND = 1
    UNRECOGNIZED_COMMAND = 2
    UNRECOGNIZED_COND = 3
    COMPLETE_ENCODE = 4
    COMPLETE_DECODE = 5
    MISSING_REG = 6
    INVALID_REG = 7
    MISSING_PARAM = 8
    INVALID_PARAM = 9
    UNEXPECTED_PARAM = 10
    INVALID_IMMED = 11
    MISSING_SPACE = 12
    MISSING_COMMA = 13
    INVALID_SHIFT = 14
    MISSING_SHIFT = 15
    UNDEF_ERROR = 16


class ParamType(IntEnum):
    """Kind of an instruction operand."""

    EMPTY = 0
    REGISTER = 1
    IMMEDIATE = 2


_MESSAGES = {
    Status.NO_ERROR: "System is Error Free",
    Status.UNRECOGNIZED_COMMAND: "The given instruction was not recognized",
    Status.UNRECOGNIZED_COND: "The given conditional is not recognized",
    Status.MISSING_REG: "Missing register parameter",
    Status.INVALID_REG: "The given register is invalid for the specified command",
    Status.MISSING_PARAM: "Expected a param, none was found",
    Status.INVALID_PARAM: "The given parameter is invalid for the specified command",
    Status.UNEXPECTED_PARAM: "Found a parameter when none was expected",
    Status.INVALID_IMMED: "The given immediate value is invalid for the specified command",
    Status.MISSING_SPACE: "Expected a space, none was found",
    Status.MISSING_COMMA: "Expected a comma, none was found",
    Status.INVALID_SHIFT: "The given shift is invalid",
    Status.MISSING_SHIFT: "Expected a shift value but none was found",
}

_UNKNOWN_MESSAGE = "An unknown error code has occured"

PARAM_COUNT = 4


def error_message(status: Status) -> str:
    """Return the user-facing message for a status code."""
    try:
        return _MESSAGES[Status(status)]
    except (KeyError, ValueError):
        return _UNKNOWN_MESSAGE


@dataclass(frozen=True)
class Param:
    """One operand: a register number or an immediate value."""

    kind: ParamType = ParamType.EMPTY
    value: int = 0


def _empty_params() -> tuple[Param, ...]:
    return tuple(Param() for _ in range(PARAM_COUNT))


@dataclass(frozen=True)
class AssemblyInstruction:
    """A textual instruction: mnemonic plus up to four operands."""

    op: str = ""
    params: tuple[Param, ...] = field(default_factory=_empty_params)

    def __post_init__(self) -> None:
        if len(self.params) != PARAM_COUNT:
            raise ValueError(f"an instruction holds exactly {PARAM_COUNT} parameters")

    def param(self, number: int) -> Param:
        """Return operand ``number`` (counted from 1)."""
        return self.params[_index(number)]

    def with_param(self, number: int, kind: ParamType, value: int) -> AssemblyInstruction:
        """Return a copy with operand ``number`` replaced."""
        params = list(self.params)
        params[_index(number)] = Param(ParamType(kind), value)
        return replace(self, params=tuple(params))


def _index(number: int) -> int:
    if not 1 <= number <= PARAM_COUNT:
        raise ValueError(f"parameter number must be between 1 and {PARAM_COUNT}, got {number}")
    return number - 1


class TranslationError(Exception):
    """Raised when an instruction cannot be parsed, encoded or decoded."""

    def __init__(self, status: Status, message: str | None = None) -> None:
        self.status = Status(status)
        super().__init__(message if message is not None else error_message(self.status))


class WrongCommand(TranslationError):
    """Raised by an instruction handler given an instruction that is not its own."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(Status.WRONG_COMMAND, message)