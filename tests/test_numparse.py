import pytest

from smug.errors import InvalidExpressionError, ParseNumberError
from smug.numparse import IntType, parse, parse_int


def test_default_base_is_hex():
    assert parse_int("ff", IntType.U8) == 0xFF
    assert parse("ff", IntType.U8) == 0xFF


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0x1f", 0x1F),
        ("0X1F", 0x1F),
        ("0d31", 31),
        ("0D31", 31),
        ("0o37", 0o37),
        ("0b11111", 0b11111),
    ],
)
def test_prefixes(text, expected):
    assert parse_int(text, IntType.U32) == expected
    assert parse(text, IntType.U32) == expected


@pytest.mark.parametrize("number", [0, 1, 0x7F, 0xDEAD, 0xFFFFFFFF])
def test_hex_round_trip(number):
    assert parse(f"{number:x}", IntType.U32) == number
    assert parse(f"0d{number}", IntType.U32) == number


def test_signed_negative_prefix():
    assert parse_int("-0d5", IntType.I8) == -5
    assert parse_int("-0x10", IntType.I32) == -0x10


def test_unsigned_rejects_negative_prefix():
    with pytest.raises(ParseNumberError):
        parse_int("-0d5", IntType.U8)


def test_leading_plus_accepted():
    assert parse_int("+5", IntType.U8) == 5


def test_expression_cannot_start_with_operator():
    with pytest.raises(ParseNumberError):
        parse("-0d5", IntType.I8)


@pytest.mark.parametrize("text", ["100", "0b2", "1_0", " 1", "zz", "0x", "-0x"])
def test_invalid_integers(text):
    with pytest.raises(ParseNumberError):
        parse_int(text, IntType.I8 if text.startswith("-") else IntType.U8)


@pytest.mark.parametrize("text", ["", "5+", "0d3*"])
def test_invalid_expressions(text):
    with pytest.raises(InvalidExpressionError):
        parse(text, IntType.U8)


def test_double_operator_is_parse_error():
    with pytest.raises(ParseNumberError):
        parse("5++3", IntType.U8)


def test_precedence():
    assert parse("0d2+0d3*0d4", IntType.U32) == 2 + 3 * 4
    assert parse("0d3*0d4+0d2", IntType.U32) == parse("0d2+0d3*0d4", IntType.U32)


def test_left_associative():
    assert parse("0d20-0d5-0d3", IntType.U32) == 20 - 5 - 3
    assert parse("0d100/0d5/0d2", IntType.U32) == 100 // 5 // 2


def test_division_truncates():
    assert parse("0d7/0d2", IntType.U32) == 7 // 2


def test_division_by_zero():
    with pytest.raises(InvalidExpressionError):
        parse("5/0", IntType.U8)


def test_wrapping_arithmetic():
    assert parse("ff+1", IntType.U8) == 0
    assert parse("0-1", IntType.U8) == 0xFF


def test_signed_wrap_then_divide():
    assert parse("40*2", IntType.I8) == IntType.I8.minimum
    assert parse("40*2/2", IntType.I8) == -0x40


def test_wrap():
    assert IntType.I8.wrap(0x80) == -0x80
    assert IntType.U16.wrap(-1) == 0xFFFF
    assert IntType.U8.wrap(0x1FF) == 0xFF


def test_ranges():
    assert IntType.U64.maximum == 2**64 - 1
    assert IntType.I16.minimum == -(2**15)
    assert parse_int(f"{2**64 - 1:x}", IntType.USIZE) == 2**64 - 1