"""Semantic analysis package for the Pascal subset."""

from .analyzer import SemanticAnalyzer, check_node
from .exceptions import (
    SemanticError,
    DuplicateDeclarationError,
    UndeclaredVariableError,
    AssignmentTypeMismatchError,
    ArithmeticTypeError,
    ComparisonTypeMismatchError,
    ConditionTypeError,
    UnknownNodeKindError,
)
from .symbol_table import SymbolTable, Symbol
from .type_system import DeclaredType, ValueType, TypedValue, is_assignable

__all__ = [
    "SemanticAnalyzer",
    "check_node",
    "SemanticError",
    "DuplicateDeclarationError",
    "UndeclaredVariableError",
    "AssignmentTypeMismatchError",
    "ArithmeticTypeError",
    "ComparisonTypeMismatchError",
    "ConditionTypeError",
    "UnknownNodeKindError",
    "SymbolTable",
    "Symbol",
    "DeclaredType",
    "ValueType",
    "TypedValue",
    "is_assignable",
]
