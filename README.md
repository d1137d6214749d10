# rvdasm

`rvdasm` decodes 32-bit RISC-V (RV32I) machine words into readable assembly.
It names the I-type arithmetic instructions (`addi`, `slli`, `slti`, `sltiu`,
`xori`, `srli`, `ori`, `andi`) and recognises I-type loads. For any other
word it writes the raw fields (opcode, rd, func3, rs1, rs2, immediate, func7)
to standard output and returns the marker `"DESCONOCIDA"`.

The package also ships a few small command-line programs: a greatest common
divisor calculator, a GCD web form served over WSGI, a number-guessing game
and an ANSI terminal animation.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the disassembler from Python

```python
from rvdasm.disassembler import disassemble
from rvdasm.decode import get_opcode, get_rd, get_imm12, sign_ext

disassemble(0x00100093)   # 'addi x1, x0, 1'
disassemble(0xfff00193)   # 'addi x3, x0, -1'
disassemble(0x00111093)   # 'slli x1, x2, 1'

get_opcode(0x0aa00093)    # 19 (0x13)
get_rd(0x0aa00093)        # 1
get_imm12(0x80040893)     # -2048
sign_ext(0xFFF)           # -1
```

The modules:

- `rvdasm.decode`: field extractors (`get_opcode`, `get_rd`, `get_func3`,
  `get_rs1`, `get_rs2`, `get_func7`, `get_imm12`), sign extension of 12-bit
  immediates (`sign_ext`), the I-type check (`is_type_i`), and two text
  renderings: `format_fields` lists every field of a word, one per line, and
  `describe_instruction` renders `addi` words as a listing line and loads as
  a memory operation, falling back to the field list. The extractors raise
  `ValueError` for a word outside the 32-bit range.
- `rvdasm.disassembler`: `disassemble`, together with `is_type_i_arith`,
  `is_type_i_load` and `inst_type_i_arith`, which maps a func3 code (0–7) to
  its mnemonic and raises `ValueError` otherwise.
- `rvdasm.listing`: `instr_string` renders one word, naming only `addi` among
  the arithmetic instructions; `format_listing` renders several words, one
  line each, with the machine code in hexadecimal before the text.

Immediates are sign-extended from 12 bits, so `0x7ff` reads as `2047` and
`0x800` as `-2048`. Load instructions are shown as a memory operation
(`x1 = Mem[x2 + 0x4]`) rather than with a mnemonic. The output messages for
unknown instructions are in Spanish.

## Command-line programs

### `rvdasm`

Prints a disassembly listing of the words given as arguments (decimal, or
hexadecimal with a `0x` prefix). With no arguments it lists a built-in sample
of two `addi` instructions.

```
rvdasm 0x00100093 0xfff00193
```

### `rvdasm-gcd`

Prints the greatest common divisor of one or more positive integers:

```
rvdasm-gcd 14 15
```

With no numbers it prints a usage message and exits with status 1; it also
exits with status 1 on an argument that is not an unsigned 64-bit number, or
on a zero. From Python, use `rvdasm.gcd.gcd(n, m)` and
`rvdasm.gcd.gcd_all(numbers)`; both raise `ValueError` on zero.

### `rvdasm-gcd-server`

Serves the GCD calculator, by default on `127.0.0.1:3000` (change with
`--host` and `--port`). `GET /` returns a form with two number fields;
posting it to `/gcd` returns their greatest common divisor. A zero, a missing
field or a field that is not a number gets a 400 answer; any other path gets
404.

```
rvdasm-gcd-server --port 8000
```

The WSGI callable is `rvdasm.webapp.application`, so any WSGI server can host
it. `index_page()` and `gcd_page(form)` return `Response` objects for use
without a server.

### `rvdasm-guess`

A number-guessing game. The program picks a secret number from 1 to 100 (and
prints it), then reads guesses until one is right, saying after each whether
it was too small or too big. Input that is not a number is ignored; if the
input ends first, the program exits with status 1. From Python,
`rvdasm.guessing.play(secret, stdin, stdout)` plays over any text streams and
returns the number of guesses.

```
rvdasm-guess
```

### `rvdasm-screen`

Clears the terminal, draws a frame and moves a smiley face across it with
ANSI escape sequences, then restores the cursor. `--delay` sets the seconds
per step (default 0.05).

```
rvdasm-screen --delay 0.02
```

The escape sequences come from `rvdasm.screen` (`cls`, `locate`, `draw_box`,
`cursor_on`, `cursor_off`), which return strings rather than printing.

## What it does not do

The disassembler covers I-type arithmetic and load instructions only. R-,
S-, B-, U- and J-type instructions are not decoded into mnemonics, and loads
are not named by width (`lb`, `lh`, `lw`, ...). It works on integer words
given in Python or on the command line; it does not read binary or ELF
files.