"""Semantic analysis for the Pascal subset."""

from pascal_checker.src.ast.base import ASTNode, ASTVisitor
from pascal_checker.src.ast.expressions import (
    ArithmeticOp,
    BinaryOp,
    ComparisonOp,
    VariableRef,
)
from pascal_checker.src.ast.literals import IntegerLiteral, StringLiteral
from pascal_checker.src.ast.statements import (
    AssignStmt,
    ElseStmt,
    IfStmt,
    WhileStmt,
    WriteStmt,
)
from pascal_checker.src.common.constants import IF_KEYWORD, WHILE_KEYWORD

from .exceptions import (
    ArithmeticTypeError,
    AssignmentTypeMismatchError,
    ComparisonTypeMismatchError,
    ConditionTypeError,
    UndeclaredVariableError,
    UnknownNodeKindError,
)
from .symbol_table import SymbolTable
from .type_system import VOID, TypedValue, ValueType, is_assignable


class SemanticAnalyzer(ASTVisitor):
    """Bottom-up type checker for statements and expressions.

    Every ``visit_*`` method returns a :class:`TypedValue` or raises a
    :class:`~pascal_checker.src.semantic.exceptions.SemanticError`; the first
    error aborts the check of the whole statement.
    """

    def __init__(self, symbol_table: SymbolTable):
        self.symbol_table = symbol_table

    def check(self, node: ASTNode) -> TypedValue:
        """Type check ``node`` and everything below it."""
        return self.visit(node)

    # Expressions -----------------------------------------------------------

    def visit_IntegerLiteral(self, node: IntegerLiteral) -> TypedValue:
        return TypedValue(node.value, ValueType.INTEGER)

    def visit_StringLiteral(self, node: StringLiteral) -> TypedValue:
        return TypedValue(node.value, ValueType.STRING)

    def visit_VariableRef(self, node: VariableRef) -> TypedValue:
        symbol = self.symbol_table.lookup(node.name)
        if symbol is None:
            raise UndeclaredVariableError(node.name, node)
        return TypedValue.of_type(symbol.declared_type.value_type)

    def visit_ArithmeticOp(self, node: ArithmeticOp) -> TypedValue:
        return self._check_chain(node, self._arithmetic_type)

    def visit_ComparisonOp(self, node: ComparisonOp) -> TypedValue:
        return self._check_chain(node, self._comparison_type)

    def _check_chain(self, node: BinaryOp, rule) -> TypedValue:
        """Check a right-nested chain of one operator class without recursing.

        Left operands are checked top-down, then the innermost right operand,
        then ``rule`` is applied from the innermost node outwards.
        """
        chain = [node]
        while type(chain[-1].right) is type(node):
            chain.append(chain[-1].right)

        left_types = [self.check(link.left).value_type for link in chain]
        result_type = self.check(chain[-1].right).value_type
        for link, left_type in zip(reversed(chain), reversed(left_types)):
            result_type = rule(link, left_type, result_type)
        return TypedValue.of_type(result_type)

    @staticmethod
    def _arithmetic_type(
        node: BinaryOp, left_type: ValueType, right_type: ValueType
    ) -> ValueType:
        if left_type != ValueType.INTEGER or right_type != ValueType.INTEGER:
            raise ArithmeticTypeError(node.op, left_type, right_type, node)
        return ValueType.INTEGER

    @staticmethod
    def _comparison_type(
        node: BinaryOp, left_type: ValueType, right_type: ValueType
    ) -> ValueType:
        if left_type != right_type:
            raise ComparisonTypeMismatchError(node.op, left_type, right_type, node)
        return ValueType.BOOLEAN

    # Statements ------------------------------------------------------------

    def visit_AssignStmt(self, node: AssignStmt) -> TypedValue:
        # The value is checked first so errors inside it win over the target.
        value_type = self.check(node.value).value_type
        symbol = self.symbol_table.lookup(node.target)
        if symbol is None:
            raise UndeclaredVariableError(node.target, node)

        target_type = symbol.declared_type.value_type
        if not is_assignable(target_type, value_type):
            raise AssignmentTypeMismatchError(node.target, target_type, value_type, node)
        return TypedValue.of_type(target_type)

    def visit_IfStmt(self, node: IfStmt) -> TypedValue:
        self._check_condition(IF_KEYWORD, node.condition)
        self.check(node.then_branch)
        return VOID

    def visit_ElseStmt(self, node: ElseStmt) -> TypedValue:
        self.check(node.body)
        return VOID

    def visit_WhileStmt(self, node: WhileStmt) -> TypedValue:
        self._check_condition(WHILE_KEYWORD, node.condition)
        self.check(node.body)
        return VOID

    def visit_WriteStmt(self, node: WriteStmt) -> TypedValue:
        for arg in node.args:
            self.check(arg)
        return VOID

    def _check_condition(self, keyword: str, condition: ASTNode) -> None:
        condition_type = self.check(condition).value_type
        if condition_type != ValueType.BOOLEAN:
            raise ConditionTypeError(keyword, condition_type, condition)

    def generic_visit(self, node: ASTNode) -> TypedValue:
        """Nodes without a rule mean the parser and analyzer disagree."""
        raise UnknownNodeKindError(node)


def check_node(node: ASTNode, symbol_table: SymbolTable) -> TypedValue:
    """Type check a single statement tree against ``symbol_table``."""
    return SemanticAnalyzer(symbol_table).check(node)
