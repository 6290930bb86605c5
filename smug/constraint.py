"""Comparison constraints applied to scanned values."""

from __future__ import annotations

import enum
import operator as _op
from dataclasses import dataclass, replace

from .errors import InvalidConstraintError
from .value import ValueType


class Operator(enum.Enum):
    """Comparison operators, in the order their prefixes are tried."""

    EQUAL = "="
    NOT_EQUAL = "!"
    GREATER_EQUAL = ">="
    GREATER = ">"
    LESS_EQUAL = "<="
    LESS = "<"

    def compare(self, lhs, rhs):
        return _COMPARISONS[self](lhs, rhs)


_COMPARISONS = {
    Operator.EQUAL: _op.eq,
    Operator.NOT_EQUAL: _op.ne,
    Operator.GREATER_EQUAL: _op.ge,
    Operator.GREATER: _op.gt,
    Operator.LESS_EQUAL: _op.le,
    Operator.LESS: _op.lt,
}


@dataclass(frozen=True)
class Constraint:
    """A condition ``<number> <operator> <value>`` that scanned values must meet."""

    operator: Operator
    value: int | float
    value_type: ValueType = ValueType.U8

    @classmethod
    def parse(cls, text, value_type):
        """Parse text such as ``>=10``; without a value type the value is a zero byte."""
        for op in Operator:
            if text.startswith(op.value):
                if value_type is None:
                    return cls(op, 0, ValueType.U8)
                return cls(op, value_type.parse(text[len(op.value):]), value_type)
        raise InvalidConstraintError(text)

    def check(self, number):
        """Return whether ``number`` satisfies the constraint."""
        return self.operator.compare(number, self.value)

    def with_value(self, value):
        """Return the same constraint comparing against a different value."""
        return replace(self, value=value)