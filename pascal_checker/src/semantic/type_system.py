from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

"""Type system primitives used by semantic analysis."""


class DeclaredType(Enum):
    """Types a variable may be declared with in a VAR block."""

    INTEGER = "INTEGER"
    REAL = "REAL"
    BOOLEAN = "BOOLEAN"
    CHAR = "CHAR"

    @property
    def value_type(self) -> "ValueType":
        return ValueType(self.value)


class ValueType(Enum):
    """Types computed for expressions and statements."""

    INTEGER = "INTEGER"
    REAL = "REAL"
    BOOLEAN = "BOOLEAN"
    CHAR = "CHAR"
    STRING = "STRING"  # string literals only, not declarable
    VOID = "VOID"  # statements


LiteralValue = Union[int, str]


@dataclass(frozen=True)
class TypedValue:
    """Result of checking a node: literal value (if any) and its type."""

    value: Optional[LiteralValue]
    value_type: ValueType

    @classmethod
    def of_type(cls, value_type: ValueType) -> "TypedValue":
        return cls(None, value_type)


VOID = TypedValue.of_type(ValueType.VOID)


def is_assignable(target: ValueType, source: ValueType) -> bool:
    """Whether a value of type ``source`` may be stored in ``target``.

    INTEGER -> REAL widening is the only implicit coercion.
    """
    if target == source:
        return True
    return target == ValueType.REAL and source == ValueType.INTEGER
