import pytest

from rvdasm.listing import format_listing, instr_string, main


@pytest.mark.parametrize(
    "word, expected",
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
def test_instr_string_addi(word, expected):
    assert instr_string(word) == expected


def test_instr_string_other_arith_is_unknown():
    assert instr_string(0x00111093) == " * Instrucción: I-ARITH DESCONOCIDA"


def test_instr_string_load_positive_offset():
    assert instr_string(0x00412083) == "     * I-LOAD: x1 = Mem[x2 + 0x4]"


def test_instr_string_load_negative_offset():
    assert instr_string(0xFFC12083) == "     * I-LOAD: x1 = Mem[x2 + 0xFFFFFFFC]"


def test_instr_string_unknown_reports_fields(capsys):
    assert instr_string(0x00000033) == "DESCONOCIDA"
    out = capsys.readouterr().out
    assert "   - Instrucción: DESCONOCIDA" in out
    assert "   - rd: x0" in out


def test_instr_string_rejects_out_of_range_word():
    with pytest.raises(ValueError):
        instr_string(1 << 32)


def test_format_listing_lines():
    assert format_listing([0x00100093, 0x00200113]) == (
        "🟢 [0x00100093]: addi x1, x0, 1\n🟢 [0x00200113]: addi x2, x0, 2"
    )


def test_format_listing_empty():
    assert format_listing([]) == ""


def test_main_default_sample(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "🟢 [0x00100093]: addi x1, x0, 1\n🟢 [0x00200113]: addi x2, x0, 2\n"
    )


def test_main_given_words(capsys):
    assert main(["0xfff00193"]) == 0
    assert capsys.readouterr().out == "🟢 [0xFFF00193]: addi x3, x0, -1\n"


def test_main_rejects_bad_word():
    with pytest.raises(SystemExit) as excinfo:
        main(["zzz"])
    assert excinfo.value.code == 2