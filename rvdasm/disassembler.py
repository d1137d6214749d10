"""Disassembly of RV32I immediate-arithmetic and load instructions."""

from __future__ import annotations

import sys
from typing import TextIO

from rvdasm.decode import (
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

# Mnemonics of the I-type arithmetic/logic instructions, indexed by func3.
I_ARITH_NAMES = (
    "addi",   # 000
    "slli",   # 001
    "slti",   # 010
    "sltiu",  # 011
    "xori",   # 100
    "srli",   # 101
    "ori",    # 110
    "andi",   # 111
)


def is_type_i_arith(opcode: int) -> bool:
    """True if the opcode is the I-type arithmetic opcode."""
    return opcode == OPCODE_I_ARITH


def is_type_i_load(opcode: int) -> bool:
    """True if the opcode is the I-type load opcode."""
    return opcode == OPCODE_I_LOAD


def inst_type_i_arith(func3: int) -> str:
    """Return the mnemonic of the I-type arithmetic instruction with this func3."""
    if not 0 <= func3 < len(I_ARITH_NAMES):
        raise ValueError(f"func3 out of range: {func3!r}")
    return I_ARITH_NAMES[func3]


def _hex32(value: int) -> str:
    return f"0x{value & 0xFFFF_FFFF:X}"


def _report_unknown(inst: int, out: TextIO) -> str:
    print("   - Instrucción: DESCONOCIDA", file=out)
    print(format_fields(inst), file=out)
    return UNKNOWN


def disassemble(inst: int) -> str:
    """Return the assembly text of a machine-code word.

    Unknown instructions have their fields written to standard output and
    yield the string ``"DESCONOCIDA"``.
    """
    opcode = get_opcode(inst)
    if not is_type_i(opcode):
        return _report_unknown(inst, sys.stdout)

    rd = get_rd(inst)
    rs1 = get_rs1(inst)
    imm = get_imm12(inst)

    if is_type_i_arith(opcode):
        name = inst_type_i_arith(get_func3(inst))
        return f"{name} x{rd}, x{rs1}, {imm}"
    if is_type_i_load(opcode):
        return f"     * I-LOAD: x{rd} = Mem[x{rs1} + {_hex32(imm)}]"
    return _report_unknown(inst, sys.stdout)