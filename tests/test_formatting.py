import pytest

from translatron.formatting import format_assembly, format_machine, format_param
from translatron.model import AssemblyInstruction, Param, ParamType
from translatron.parsing import parse_assembly, parse_binary, parse_hex, register_number

REGISTER_NAMES = [
    "zero", "v0", "v1", "a0", "a1", "a2", "a3",
    "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7",
    "s0", "s1", "s2", "s3", "s4", "s5", "s6", "s7",
    "t8", "t9", "gp", "sp", "fp", "ra",
]


@pytest.mark.parametrize("name", REGISTER_NAMES)
def test_register_names_round_trip(name):
    param = Param(ParamType.REGISTER, register_number(name))
    assert format_param(param) == "$" + name


@pytest.mark.parametrize("value", [1, 26, 27, 32])
def test_unnamed_registers_render_empty(value):
    assert format_param(Param(ParamType.REGISTER, value)) == ""


def test_immediate_renders_as_uppercase_hex():
    assert format_param(Param(ParamType.IMMEDIATE, 255)) == "#0xFF"


def test_empty_param_falls_through_to_register_name():
    assert format_param(Param()) == "<>$zero"


@pytest.mark.parametrize(
    "line",
    [
        "ADD $t1, $t2, $t3",
        "ADDI $t0, $t1, #0x5",
        "SW $t0, $t1, #0x4",
        "MULT $s0, $s1",
    ],
)
def test_format_assembly_reproduces_parsed_line(line):
    assert format_assembly(parse_assembly(line)) == line


def test_single_operand_has_no_trailing_comma():
    assert format_assembly(parse_assembly("MFHI $ra")) == "MFHI $ra"


def test_memory_base_register_in_parentheses():
    instr = AssemblyInstruction(
        op="LW",
        params=(
            Param(ParamType.REGISTER, 8),
            Param(ParamType.IMMEDIATE, 4),
            Param(ParamType.REGISTER, 9),
            Param(),
        ),
    )
    assert format_assembly(instr) == "LW $t0, #0x4($t1)"


def test_skipped_second_operand():
    instr = AssemblyInstruction(
        op="LUI",
        params=(Param(ParamType.REGISTER, 8), Param(), Param(ParamType.IMMEDIATE, 0x12), Param()),
    )
    assert format_assembly(instr) == "LUI $t0, #0x12"


@pytest.mark.parametrize("word", [0, 1, 0x014B4820, 0xFFFFFFFF, 0x80000001])
def test_format_machine_round_trips(word):
    text = format_machine(word)
    hex_part, binary_part = text.split("\tBinary:")
    assert parse_hex(hex_part[len("Hex: "):]) == word
    assert parse_binary(binary_part) == word


def test_format_machine_groups_nibbles():
    text = format_machine(0)
    assert text.startswith("Hex: 0x00000000\tBinary:")
    binary_part = text.split("Binary:")[1]
    assert binary_part.split() == ["0000"] * 8
    assert binary_part.endswith(" ")