"""Text rendering of RV32I instruction words and a small listing command."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from rvdasm.decode import (
    FUNC3_I_ADDI,
    OPCODE_I_ARITH,
    OPCODE_I_LOAD,
    format_fields,
    get_func3,
    get_imm12,
    get_opcode,
    get_rd,
    get_rs1,
    is_type_i,
)

UNKNOWN = "DESCONOCIDA"
UNKNOWN_I_ARITH = " * Instrucción: I-ARITH DESCONOCIDA"

DEFAULT_WORDS = (
    0x00100093,  # addi x1, x0, 1
    0x00200113,  # addi x2, x0, 2
)


def _hex32(value: int) -> str:
    return f"0x{value & 0xFFFF_FFFF:X}"


def _report_unknown(inst: int) -> str:
    print("   - Instrucción: DESCONOCIDA")
    print(format_fields(inst))
    return UNKNOWN


def instr_string(inst: int) -> str:
    """Return the text of an instruction word.

    Only ``addi`` is named among the arithmetic instructions; loads are shown
    as a memory operation. Unknown words have their fields written to
    standard output and yield ``"DESCONOCIDA"``.
    """
    opcode = get_opcode(inst)
    if not is_type_i(opcode):
        return _report_unknown(inst)

    rd = get_rd(inst)
    func3 = get_func3(inst)
    rs1 = get_rs1(inst)
    imm = get_imm12(inst)

    if opcode == OPCODE_I_ARITH:
        if func3 == FUNC3_I_ADDI:
            return f"addi x{rd}, x{rs1}, {imm}"
        return UNKNOWN_I_ARITH
    if opcode == OPCODE_I_LOAD:
        return f"     * I-LOAD: x{rd} = Mem[x{rs1} + {_hex32(imm)}]"
    return _report_unknown(inst)


def format_listing(words: Iterable[int]) -> str:
    """Render one line per word: the machine code and its text."""
    return "\n".join(f"🟢 [0x{word:08X}]: {instr_string(word)}" for word in words)


def _word(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the listing of the given words, or of a built-in sample."""
    parser = argparse.ArgumentParser(
        prog="rvdasm-listing",
        description="Disassemble RV32I instruction words.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        type=_word,
        help="instruction words, e.g. 0x00100093",
    )
    args = parser.parse_args(argv)
    words = args.words or DEFAULT_WORDS
    try:
        listing = format_listing(words)
    except ValueError as exc:
        parser.error(str(exc))
    print(listing)
    return 0


if __name__ == "__main__":
    sys.exit(main())