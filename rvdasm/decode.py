"""Field extraction and textual description of RV32I instruction words."""

from __future__ import annotations

# Field widths, as right-aligned masks.
FIELD_3B = 0x07
FIELD_5B = 0x1F
FIELD_7B = 0x7F
FIELD_12B = 0xFFF

# Bit positions of the fields inside an instruction word.
OPCODE_POS = 0
RD_POS = 7
FUNC3_POS = 12
RS1_POS = 15
RS2_POS = 20
FUNC7_POS = 25
IMM12_POS = 20

OPCODE_MASK = FIELD_7B << OPCODE_POS
RD_MASK = FIELD_5B << RD_POS
FUNC3_MASK = FIELD_3B << FUNC3_POS
RS1_MASK = FIELD_5B << RS1_POS
RS2_MASK = FIELD_5B << RS2_POS
FUNC7_MASK = FIELD_7B << FUNC7_POS
IMM12_MASK = FIELD_12B << IMM12_POS

# I-type opcodes: immediate arithmetic and loads.
OPCODE_I_ARITH = 0x13
OPCODE_I_LOAD = 0x03
FUNC3_I_ADDI = 0b000

_WORD_MASK = 0xFFFF_FFFF


def _check_word(inst: int) -> int:
    if not 0 <= inst <= _WORD_MASK:
        raise ValueError(f"instruction word out of 32-bit range: {inst!r}")
    return inst


def _to_i32(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << 32) if value & 0x8000_0000 else value


def _hex(value: int) -> str:
    """Hex with a lowercase prefix and uppercase digits; negatives as 32-bit two's complement."""
    return f"0x{value & _WORD_MASK:X}"


def _field(inst: int, mask: int, pos: int) -> int:
    return (_check_word(inst) & mask) >> pos


def get_opcode(inst: int) -> int:
    """Return the 7-bit opcode."""
    return _field(inst, OPCODE_MASK, OPCODE_POS)


def get_rd(inst: int) -> int:
    """Return the destination register number."""
    return _field(inst, RD_MASK, RD_POS)


def get_func3(inst: int) -> int:
    """Return the 3-bit func3 field."""
    return _field(inst, FUNC3_MASK, FUNC3_POS)


def get_rs1(inst: int) -> int:
    """Return the first source register number."""
    return _field(inst, RS1_MASK, RS1_POS)


def get_rs2(inst: int) -> int:
    """Return the second source register number."""
    return _field(inst, RS2_MASK, RS2_POS)


def get_func7(inst: int) -> int:
    """Return the 7-bit func7 field."""
    return _field(inst, FUNC7_MASK, FUNC7_POS)


def get_imm12(inst: int) -> int:
    """Return the sign-extended 12-bit I-type immediate."""
    return sign_ext(_field(inst, IMM12_MASK, IMM12_POS))


def sign_ext(value: int) -> int:
    """Sign-extend a 12-bit value to a signed 32-bit integer."""
    value = _to_i32(value)
    if value & 0x800:
        return _to_i32(value | ~0xFFF)
    return value


def is_type_i(opcode: int) -> bool:
    """True if the opcode is an I-type arithmetic or load instruction."""
    return opcode in (OPCODE_I_ARITH, OPCODE_I_LOAD)


def format_fields(inst: int) -> str:
    """Describe every field of an instruction word, one per line."""
    opcode = get_opcode(inst)
    lines = [
        f"   - Opcode: {_hex(opcode):>4}",
        f"   - rd: x{get_rd(inst)}",
        f"   - func3: {get_func3(inst):#05b}",
        f"   - rs1: x{get_rs1(inst)}",
        f"   - rs2: x{get_rs2(inst)}",
        f"   - Inmediato: {_hex(get_imm12(inst))}",
        f"   - Func7: {get_func7(inst):#07b}",
    ]
    return "\n".join(lines)


def _unknown(inst: int) -> str:
    return "   - Instrucción: DESCONOCIDA\n" + format_fields(inst)


def describe_instruction(inst: int) -> str:
    """Render an instruction in readable form, or its raw fields if unknown."""
    opcode = get_opcode(inst)
    if not is_type_i(opcode):
        return _unknown(inst)

    rd = get_rd(inst)
    func3 = get_func3(inst)
    rs1 = get_rs1(inst)
    imm = get_imm12(inst)

    if opcode == OPCODE_I_ARITH:
        if func3 == FUNC3_I_ADDI:
            return f"🟢 [0x{inst:08X}]: addi x{rd}, x{rs1}, {imm}"
        return "   * Instrucción: I-ARITH DESCONOCIDA"
    return (
        "   - Instrucción: I-LOAD\n"
        f"     - Operación: x{rd} = Mem[x{rs1} + {_hex(imm)}]"
    )