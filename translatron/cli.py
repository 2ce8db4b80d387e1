"""Interactive menu for converting between assembly and machine code."""

from __future__ import annotations

import argparse

from .codec import decode, encode
from .formatting import format_assembly, format_machine
from .model import Status, TranslationError, error_message
from .parsing import parse_assembly, parse_binary, parse_hex

_SAMPLE_LINE = "AND $t1, $t2, $t3"


def _error(exc: TranslationError) -> str:
    return f"ERROR: {exc}"


def translate_assembly(line: str) -> str:
    """Turn one line of assembly into the machine-code report or an error line."""
    try:
        return format_machine(encode(parse_assembly(line)))
    except TranslationError as exc:
        return _error(exc)


def translate_hex(line: str) -> str:
    """Turn a hex machine word into assembly or an error line."""
    try:
        return format_assembly(decode(parse_hex(line)))
    except TranslationError as exc:
        return _error(exc)


def translate_binary(line: str) -> str:
    """Turn a binary machine word into assembly or an error line."""
    try:
        return format_assembly(decode(parse_binary(line)))
    except TranslationError as exc:
        return _error(exc)


def _ask(prompt: str) -> str | None:
    print(prompt, end="", flush=True)
    try:
        return input()
    except EOFError:
        return None


def _conversion_loop(title: str, translate) -> None:
    while True:
        print(f"\n{title}")
        line = _ask("> ")
        if not line:
            return
        print(translate(line))


def _machine_menu() -> None:
    while True:
        print("\nPlease select an option:")
        print("\t(1) Hexadecimal to Assembly")
        print("\t(2) Binary to Assembly")
        print("\t[3] Main Menu")
        choice = _ask("\n> ")
        if choice == "1":
            _conversion_loop("Enter Hex:", translate_hex)
        elif choice == "2":
            _conversion_loop("Enter Binary:", translate_binary)
        else:
            return


def _self_test() -> None:
    print(_SAMPLE_LINE)
    try:
        instr = parse_assembly(_SAMPLE_LINE)
    except TranslationError as exc:
        print(_error(exc))
        return
    print(error_message(Status.NO_ERROR))
    print(format_assembly(instr))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user quits or input ends."""
    parser = argparse.ArgumentParser(
        prog="translatron",
        description="Convert MIPS assembly to machine code and back.",
    )
    parser.parse_args(argv)

    print("Welcome to the MIPS-Translatron 3000 Tool")
    while True:
        print("\nPlease enter an option:")
        print("\t(1) Assembly to Machine Code")
        print("\t(2) Machine Code to Assembly")
        print("\t(3) Quit")
        choice = _ask("\n> ")
        if choice is None or choice == "3":
            return 0
        if choice == "1":
            _conversion_loop("Enter a line of assembly:", translate_assembly)
        elif choice == "2":
            _machine_menu()
        elif choice == "test":
            _self_test()


if __name__ == "__main__":
    raise SystemExit(main())