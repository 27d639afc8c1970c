"""AST node definitions for the Pascal subset."""

from .base import ASTNode, ASTVisitor, NodeKind, ast_to_dict, print_ast
from .expressions import (
    Expr,
    BinaryOp,
    ComparisonOp,
    ArithmeticOp,
    VariableRef,
)
from .statements import (
    Statement,
    AssignStmt,
    IfStmt,
    ElseStmt,
    WhileStmt,
    WriteStmt,
)
from .literals import (
    Literal,
    IntegerLiteral,
    StringLiteral,
)

__all__ = [
    # Base classes
    "ASTNode",
    "ASTVisitor",
    "NodeKind",
    "ast_to_dict",
    "print_ast",
    # Expressions
    "Expr",
    "BinaryOp",
    "ComparisonOp",
    "ArithmeticOp",
    "VariableRef",
    # Statements
    "Statement",
    "AssignStmt",
    "IfStmt",
    "ElseStmt",
    "WhileStmt",
    "WriteStmt",
    # Literals
    "Literal",
    "IntegerLiteral",
    "StringLiteral",
]
