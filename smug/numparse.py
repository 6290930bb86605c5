"""Integer parsing with base prefixes and simple wrapping arithmetic."""

from __future__ import annotations

import enum
import re

from .errors import InvalidExpressionError, ParseNumberError

_PREFIXES = {"0x": 16, "0d": 10, "0o": 8, "0b": 2}
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_OPERATOR_SPLIT = re.compile(r"([+\-*/])")


class IntType(enum.Enum):
    """Fixed-width integer types, with their width and signedness."""

    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    USIZE = ("usize", 64, False)
    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    ISIZE = ("isize", 64, True)

    def __init__(self, label, bits, signed):
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def minimum(self):
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self):
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, number):
        """Reduce ``number`` to this type's range with two's complement wrapping."""
        masked = number & ((1 << self.bits) - 1)
        if self.signed and masked >= 1 << (self.bits - 1):
            masked -= 1 << self.bits
        return masked


def _from_str_radix(digits, base, int_type, original):
    body = digits
    negative = False
    if body[:1] == "+":
        body = body[1:]
    elif body[:1] == "-" and int_type.signed:
        negative = True
        body = body[1:]
    if not body:
        raise ParseNumberError(original, int_type.label, "no digits")
    allowed = _DIGITS[:base]
    if not all(ch.isascii() and ch.lower() in allowed for ch in body):
        raise ParseNumberError(original, int_type.label, "invalid digit")
    number = int(body, base)
    if negative:
        number = -number
    if not int_type.minimum <= number <= int_type.maximum:
        raise ParseNumberError(original, int_type.label, "out of range")
    return number


def parse_int(text, int_type):
    """Parse a single integer; hexadecimal unless a 0x/0d/0o/0b prefix says otherwise."""
    digits, base, negate = text, 16, False
    if int_type.signed and text[:1] == "-" and text[1:3].lower() in _PREFIXES:
        base = _PREFIXES[text[1:3].lower()]
        digits = text[3:]
        negate = True
    elif text[:2].lower() in _PREFIXES:
        base = _PREFIXES[text[:2].lower()]
        digits = text[2:]
    number = _from_str_radix(digits, base, int_type, text)
    return int_type.wrap(-number) if negate else number


def _divide(left, right, int_type, text):
    if right == 0:
        raise InvalidExpressionError(f"division by zero in {text!r}")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return int_type.wrap(quotient)


def parse(text, int_type):
    """Evaluate an expression of integers joined by + - * / (no spaces).

    Multiplication and division bind tighter than addition and subtraction;
    every intermediate result wraps to ``int_type``.
    """
    parts = _OPERATOR_SPLIT.split(text)
    operands, operators = parts[0::2], parts[1::2]
    *leading, last = operands
    values = [parse_int(part, int_type) for part in leading]
    if last:
        values.append(parse_int(last, int_type))
    if len(values) != len(operators) + 1:
        raise InvalidExpressionError(f"invalid expression {text!r}")

    terms = [values[0]]
    additive = []
    for op, value in zip(operators, values[1:]):
        if op == "*":
            terms[-1] = int_type.wrap(terms[-1] * value)
        elif op == "/":
            terms[-1] = _divide(terms[-1], value, int_type, text)
        else:
            additive.append(op)
            terms.append(value)

    result = terms[0]
    for op, value in zip(additive, terms[1:]):
        result = int_type.wrap(result + value if op == "+" else result - value)
    return result