import pytest

from rvdasm.decode import OPCODE_I_ARITH, OPCODE_I_LOAD
from rvdasm.disassembler import (
    disassemble,
    inst_type_i_arith,
    is_type_i_arith,
    is_type_i_load,
)


def test_is_type_i_arith():
    assert is_type_i_arith(OPCODE_I_ARITH)
    assert is_type_i_arith(0x13)
    assert not is_type_i_arith(0x03)
    assert not is_type_i_arith(0x00)
    assert not is_type_i_arith(0xFF)


def test_is_type_i_load():
    assert is_type_i_load(OPCODE_I_LOAD)
    assert is_type_i_load(0x03)
    assert not is_type_i_load(0x13)
    assert not is_type_i_load(0x04)


@pytest.mark.parametrize(
    "func3, name",
    [
        (0b000, "addi"),
        (0b001, "slli"),
        (0b010, "slti"),
        (0b011, "sltiu"),
        (0b100, "xori"),
        (0b101, "srli"),
        (0b110, "ori"),
        (0b111, "andi"),
    ],
)
def test_inst_type_i_arith(func3, name):
    assert inst_type_i_arith(func3) == name


@pytest.mark.parametrize("func3", [8, -1, 100])
def test_inst_type_i_arith_out_of_range(func3):
    with pytest.raises(ValueError):
        inst_type_i_arith(func3)


@pytest.mark.parametrize(
    "inst, text",
    [
        (0x00000013, "addi x0, x0, 0"),
        (0x00100093, "addi x1, x0, 1"),
        (0x00200113, "addi x2, x0, 2"),
        (0xFFF00193, "addi x3, x0, -1"),
        (0x7FF00213, "addi x4, x0, 2047"),
        (0x00308F93, "addi x31, x1, 3"),
        (0x00410413, "addi x8, x2, 4"),
        (0x00820813, "addi x16, x4, 8"),
        (0x01040893, "addi x17, x8, 16"),
        (0xFF040893, "addi x17, x8, -16"),
        (0x80040893, "addi x17, x8, -2048"),
        (0x0AA00093, "addi x1, x0, 170"),
    ],
)
def test_disassemble_addi(inst, text):
    assert disassemble(inst) == text


@pytest.mark.parametrize(
    "inst, text",
    [
        (0x00111093, "slli x1, x2, 1"),
        (0x00001013, "slli x0, x0, 0"),
        (0x00209F93, "slli x31, x1, 2"),
        (0x00411F13, "slli x30, x2, 4"),
        (0x00819E93, "slli x29, x3, 8"),
        (0x01021E13, "slli x28, x4, 16"),
        (0x01129D93, "slli x27, x5, 17"),
        (0x01E31D13, "slli x26, x6, 30"),
        (0x01F39C93, "slli x25, x7, 31"),
    ],
)
def test_disassemble_slli(inst, text):
    assert disassemble(inst) == text


@pytest.mark.parametrize(
    "inst, text",
    [
        (0x00112093, "slti x1, x2, 1"),
        (0x00002013, "slti x0, x0, 0"),
        (0x0020AF93, "slti x31, x1, 2"),
        (0x00412F13, "slti x30, x2, 4"),
        (0x0081AE93, "slti x29, x3, 8"),
        (0x01022E13, "slti x28, x4, 16"),
        (0x0112AD93, "slti x27, x5, 17"),
        (0x01E32D13, "slti x26, x6, 30"),
        (0x01F3AC93, "slti x25, x7, 31"),
    ],
)
def test_disassemble_slti(inst, text):
    assert disassemble(inst) == text


@pytest.mark.parametrize(
    "inst, text",
    [
        (0x00113093, "sltiu x1, x2, 1"),
        (0x00003013, "sltiu x0, x0, 0"),
        (0x0020BF93, "sltiu x31, x1, 2"),
        (0x00413F13, "sltiu x30, x2, 4"),
        (0x0081BE93, "sltiu x29, x3, 8"),
        (0x01023E13, "sltiu x28, x4, 16"),
        (0x0112BD93, "sltiu x27, x5, 17"),
        (0x01E33D13, "sltiu x26, x6, 30"),
        (0x01F3BC93, "sltiu x25, x7, 31"),
    ],
)
def test_disassemble_sltiu(inst, text):
    assert disassemble(inst) == text


def test_disassemble_xori():
    assert disassemble(0x00114093) == "xori x1, x2, 1"


def test_disassemble_load_positive_offset():
    assert disassemble(0x00412083) == "     * I-LOAD: x1 = Mem[x2 + 0x4]"


def test_disassemble_load_negative_offset():
    assert disassemble(0xFFC12083) == "     * I-LOAD: x1 = Mem[x2 + 0xFFFFFFFC]"


def test_disassemble_unknown(capsys):
    result = disassemble(0x00000033)
    assert result == "DESCONOCIDA"
    out = capsys.readouterr().out
    assert "   - Instrucción: DESCONOCIDA" in out
    assert "   - rd: x0" in out


def test_disassemble_known_prints_nothing(capsys):
    assert disassemble(0x00100093) == "addi x1, x0, 1"
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("inst", [-1, 1 << 32])
def test_disassemble_rejects_out_of_range(inst):
    with pytest.raises(ValueError):
        disassemble(inst)