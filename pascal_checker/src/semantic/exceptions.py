from typing import Optional
from pascal_checker.src.ast import ASTNode
from pascal_checker.src.common.errors import AnalysisError, ErrorKind
from .type_system import ValueType

"""Semantic analysis exceptions."""


class SemanticError(AnalysisError):
    """Base for errors raised while type checking a statement."""


class DuplicateDeclarationError(SemanticError):
    kind = ErrorKind.DUPLICATE_DECLARATION

    def __init__(self, name: str, line: int = 0) -> None:
        self.name = name
        super().__init__(f"Duplicate declaration of variable: {name}", line=line)


class UndeclaredVariableError(SemanticError):
    kind = ErrorKind.UNDECLARED_VARIABLE

    def __init__(self, name: str, node: Optional[ASTNode] = None) -> None:
        self.name = name
        super().__init__(f"Undeclared variable: {name}", node)


class AssignmentTypeMismatchError(SemanticError):
    kind = ErrorKind.ASSIGNMENT_TYPE_MISMATCH

    def __init__(
        self,
        target: str,
        target_type: ValueType,
        value_type: ValueType,
        node: Optional[ASTNode] = None,
    ) -> None:
        self.target = target
        self.target_type = target_type
        self.value_type = value_type
        super().__init__(
            f"Type mismatch: cannot assign {value_type.value} to {target_type.value} "
            f"variable '{target}'",
            node,
        )


class ArithmeticTypeError(SemanticError):
    kind = ErrorKind.ARITHMETIC_TYPE_ERROR

    def __init__(
        self,
        op: str,
        left_type: ValueType,
        right_type: ValueType,
        node: Optional[ASTNode] = None,
    ) -> None:
        self.op = op
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(
            f"Arithmetic operations only support INTEGER types, got "
            f"{left_type.value} {op} {right_type.value}",
            node,
        )


class ComparisonTypeMismatchError(SemanticError):
    kind = ErrorKind.COMPARISON_TYPE_MISMATCH

    def __init__(
        self,
        op: str,
        left_type: ValueType,
        right_type: ValueType,
        node: Optional[ASTNode] = None,
    ) -> None:
        self.op = op
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(
            f"Type mismatch in comparison: {left_type.value} {op} {right_type.value}",
            node,
        )


class ConditionTypeError(SemanticError):
    kind = ErrorKind.CONDITION_TYPE_ERROR

    def __init__(
        self, keyword: str, actual: ValueType, node: Optional[ASTNode] = None
    ) -> None:
        self.keyword = keyword
        self.actual = actual
        super().__init__(
            f"{keyword} condition must evaluate to BOOLEAN, got {actual.value}", node
        )


class UnknownNodeKindError(SemanticError):
    """Raised for node classes the analyzer has no rule for."""

    kind = ErrorKind.UNKNOWN_NODE_KIND

    def __init__(self, node: ASTNode) -> None:
        super().__init__(f"Unknown node type: {type(node).__name__}", node)
