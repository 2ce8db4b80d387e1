import io

import pytest

from translatron.cli import main, translate_assembly, translate_binary, translate_hex


def _hex_of(report):
    return report.split("\t")[0][len("Hex: "):]


def _binary_of(report):
    return report.split("Binary:")[1]


@pytest.mark.parametrize(
    "line",
    ["ADD $t1, $t2, $t3", "ADDI $t0, $t1, #0x5", "SW $t0, $t1, #0x4", "MFLO $sp"],
)
def test_assembly_to_hex_and_back(line):
    report = translate_assembly(line)
    assert report.startswith("Hex: 0x")
    assert translate_hex(_hex_of(report)) == line


@pytest.mark.parametrize("line", ["SUB $s0, $s1, $s2", "BEQ $s3, $s4, #0x8"])
def test_assembly_to_binary_and_back(line):
    report = translate_assembly(line)
    assert translate_binary(_binary_of(report)) == line


def test_unknown_mnemonic_reports_error():
    assert translate_assembly("FOO $t1") == "ERROR: The given instruction was not recognized"


def test_missing_space_reports_error():
    assert translate_assembly("ADD$t1") == "ERROR: Expected a space, none was found"


def test_missing_comma_reports_error():
    assert translate_assembly("ADD $t1 $t2, $t3") == "ERROR: Expected a comma, none was found"


def test_unrecognized_word_reports_error():
    assert translate_hex("0") == "ERROR: The given instruction was not recognized"
    assert translate_binary("0") == "ERROR: The given instruction was not recognized"


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_assembly_menu(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\nADD $t1, $t2, $t3\n\n3\n")
    assert code == 0
    assert "Welcome to the MIPS-Translatron 3000 Tool" in out
    assert translate_assembly("ADD $t1, $t2, $t3") in out


def test_main_hex_menu(monkeypatch, capsys):
    report = translate_assembly("ADD $t1, $t2, $t3")
    code, out = _run(monkeypatch, capsys, f"2\n1\n{_hex_of(report)}\n\n3\n3\n")
    assert code == 0
    assert "ADD $t1, $t2, $t3" in out
    assert "Enter Hex:" in out


def test_main_test_option(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "test\n3\n")
    assert code == 0
    assert "System is Error Free" in out
    assert out.count("AND $t1, $t2, $t3") == 2


def test_main_ends_at_end_of_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n")
    assert code == 0
    assert "Enter a line of assembly:" in out