"""
Tests for ast/base.py - Base AST node classes.
"""

import json

from pascal_checker.src.ast.base import ASTNode, ASTVisitor, NodeKind, ast_to_dict, print_ast
from pascal_checker.src.ast.expressions import ArithmeticOp, VariableRef
from pascal_checker.src.ast.literals import IntegerLiteral, StringLiteral
from pascal_checker.src.ast.statements import AssignStmt, WriteStmt


class TestASTNode:
    """Tests for the ASTNode base class."""

    def test_integer_literal_inherits_from_ast_node(self):
        """IntegerLiteral should inherit from ASTNode."""
        node = IntegerLiteral(5)
        assert isinstance(node, ASTNode)

    def test_variable_ref_inherits_from_ast_node(self):
        """VariableRef should inherit from ASTNode."""
        node = VariableRef("x")
        assert isinstance(node, ASTNode)

    def test_ast_node_with_location(self):
        """Test ASTNode with line/column."""
        node = IntegerLiteral(value=42, line=10, column=5)
        assert node.line == 10
        assert node.column == 5

    def test_leaf_nodes_have_no_children(self):
        """Literals and variables own no child nodes."""
        assert IntegerLiteral(1).children == ()
        assert StringLiteral("a").children == ()
        assert VariableRef("x").children == ()


class TestNodeKind:
    """Tests for the NodeKind discriminant."""

    def test_every_kind_has_glossary_name(self):
        """Kind values use the names Assignment, If, Else, ..."""
        assert {kind.value for kind in NodeKind} == {
            "Assignment",
            "If",
            "Else",
            "While",
            "Write",
            "Comparison",
            "Arithmetic",
            "Integer",
            "String",
            "Variable",
        }

    def test_kind_is_class_level(self):
        """Kind is fixed by the node class."""
        assert IntegerLiteral(1).kind is NodeKind.INTEGER
        assert VariableRef("x").kind is NodeKind.VARIABLE


class TestASTVisitor:
    """Tests for the ASTVisitor base class."""

    def test_visitor_generic_visit(self):
        """Test generic_visit is called for unhandled nodes."""
        visitor = ASTVisitor()
        node = IntegerLiteral(42)
        result = visitor.visit(node)
        # generic_visit returns None by default
        assert result is None

    def test_visitor_calls_specific_method(self):
        """Test visitor calls specific visit_ClassName method."""

        class TestVisitor(ASTVisitor):
            def visit_IntegerLiteral(self, node):
                return f"visited integer: {node.value}"

        visitor = TestVisitor()
        node = IntegerLiteral(42)
        result = visitor.visit(node)
        assert result == "visited integer: 42"

    def test_visitor_falls_back_to_generic(self):
        """Test visitor falls back to generic_visit for unhandled types."""

        class TestVisitor(ASTVisitor):
            def __init__(self):
                self.generic_called = False

            def generic_visit(self, node):
                self.generic_called = True
                return "generic"

        visitor = TestVisitor()
        node = IntegerLiteral(42)
        result = visitor.visit(node)
        assert visitor.generic_called
        assert result == "generic"


class TestAstToDict:
    """Tests for ast_to_dict debugging helper."""

    def test_nested_assignment(self):
        """Nested nodes are converted recursively with kind names."""
        node = AssignStmt(
            "x", ArithmeticOp("+", IntegerLiteral(1), IntegerLiteral(2)), line=3
        )
        result = ast_to_dict(node)
        assert result == {
            "type": "AssignStmt",
            "kind": "Assignment",
            "target": "x",
            "value": {
                "type": "ArithmeticOp",
                "kind": "Arithmetic",
                "op": "+",
                "left": {"type": "IntegerLiteral", "kind": "Integer", "value": 1},
                "right": {"type": "IntegerLiteral", "kind": "Integer", "value": 2},
            },
        }

    def test_write_args_become_list(self):
        """Tuple fields become JSON-serializable lists."""
        node = WriteStmt([StringLiteral("hi"), VariableRef("x")])
        result = ast_to_dict(node)
        assert [arg["kind"] for arg in result["args"]] == ["String", "Variable"]
        json.dumps(result)

    def test_non_node_passthrough(self):
        """Non-node values are returned unchanged."""
        assert ast_to_dict(5) == 5


class TestPrintAst:
    """Tests for print_ast."""

    def test_print_ast_outputs_structure(self, capsys):
        """print_ast writes class names and fields."""
        print_ast(WriteStmt([IntegerLiteral(7)]))
        out = capsys.readouterr().out
        assert "WriteStmt" in out
        assert "IntegerLiteral" in out
        assert "value: 7" in out
