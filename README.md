# translatron

An interactive translator between MIPS assembly and 32-bit machine code.
Type a line of assembly to get its encoding in hexadecimal and in binary.
Type a hexadecimal or binary word to get its assembly back.

## Supported instructions

| Kind | Instructions |
| --- | --- |
| Register | `ADD`, `SUB`, `MULT`, `DIV`, `MFHI`, `MFLO`, `AND`, `OR`, `SLT` |
| Immediate | `ADDI`, `ANDI`, `ORI`, `LUI`, `SLTI`, `BEQ`, `BNE`, `LW`, `SW` |

Registers use their conventional names: `$zero`, `$v0`–`$v1`, `$a0`–`$a3`,
`$t0`–`$t9`, `$s0`–`$s7`, `$gp`, `$sp`, `$fp` and `$ra`. Immediates start with
`#` and are written in decimal (`#42`) or hexadecimal (`#0x2A`). Mnemonics are
case-insensitive, and operands are separated by commas.

## Installing

```
pip install .
```

## Interactive use

```
translatron
```

The main menu offers three options:

1. **Assembly to Machine Code.** Enter a line such as `ADD $t1, $t2, $t3`. The
   tool prints the word in hexadecimal and as binary digits in groups of four.
2. **Machine Code to Assembly.** Choose hexadecimal input (such as
   `0x014B4820`, with or without the `0x`) or binary input. Binary input may
   contain spaces or other separators; only the `0` and `1` characters are read.
   The tool prints the instruction in assembly, with immediates shown in
   hexadecimal (`#0x10`).
3. **Quit.** The tool also quits when its input ends.

An empty line returns you to the previous menu. A line that cannot be parsed,
an instruction that is not recognised, or operands that an instruction rejects
all produce an `ERROR:` line that says what went wrong.

## Library use

The same translations are available as functions that return the text the
interactive tool prints:

```python
from translatron.cli import translate_assembly, translate_hex, translate_binary

print(translate_assembly("ADD $t1, $t2, $t3"))
print(translate_hex("0x014B4820"))
print(translate_binary("00000001010010110100100000100000"))
```

For finer control, parse, encode and format in separate steps:

```python
from translatron.parsing import parse_assembly, parse_hex
from translatron.codec import encode, decode
from translatron.formatting import format_machine, format_assembly

word = encode(parse_assembly("ADDI $t0, $t1, #0x10"))
print(format_machine(word))                              # Hex: 0x21280010 ...
print(format_assembly(decode(parse_hex("0x21280010"))))  # ADDI $t0, $t1, #0x10
```

- `translatron.parsing` reads assembly lines (`parse_assembly`), hexadecimal
  and binary words (`parse_hex`, `parse_binary`), register names
  (`register_number`) and immediates (`parse_immediate`).
- `translatron.codec` has `encode` and `decode`, which try each instruction in
  turn. The per-instruction encoders and decoders live in
  `translatron.arithmetic`, `translatron.logic` and `translatron.transfer`.
- `translatron.formatting` renders operands, instructions and machine words.
- `translatron.bits` holds the bit-field helpers used to build and read words.
- `translatron.model` holds the data types: `AssemblyInstruction`, `Param`,
  `ParamType` and `Status`.

When an instruction fails to parse, encode or decode, a
`translatron.model.TranslationError` is raised. Its `status` attribute, a
`translatron.model.Status`, says what went wrong, and
`translatron.model.error_message` turns a status into the message the
interactive tool prints.

## What it does not do

The tool works one instruction at a time. It does not read or write
assembly source files, and it has no labels, directives or pseudo-instructions.
Immediates are unsigned 16-bit values: negative numbers are not accepted, and
decoded offsets are shown as unsigned hexadecimal. Registers `$at`, `$k0` and
`$k1` have no name, so they cannot be typed and are shown as blank when a word
is decoded.

## Running the tests

```
pip install .[test]
pytest
```