from __future__ import annotations

import pytest

from sdwlib.core import ExprNode, IntLiteral, PrimitiveType
from sdwlib.diagnostics import PositionInfo
from sdwlib.parser.tokens import INT64_MAX


class TestPrimitiveType:
    def test_from_name(self):
        assert PrimitiveType.from_name("int") is PrimitiveType.INT
        assert PrimitiveType.from_name("void") is PrimitiveType.VOID

    def test_unknown_name(self):
        assert PrimitiveType.from_name("float") is None
        assert PrimitiveType.from_name("Int") is None
        assert PrimitiveType.from_name("") is None

    def test_default_is_void(self):
        assert PrimitiveType.default() is PrimitiveType.VOID

    def test_closed_set(self):
        assert {t.value for t in PrimitiveType} == {"void", "int"}

    def test_str(self):
        assert str(PrimitiveType.INT) == "int"


class TestIntLiteral:
    def test_evaluated_type(self):
        assert IntLiteral(7).evaluated_type() is PrimitiveType.INT

    @pytest.mark.parametrize("value", [0, 1, 42, INT64_MAX, -(2**63)])
    def test_evaluate(self, value):
        assert IntLiteral(value).evaluate() == value

    def test_position_optional(self):
        assert IntLiteral(1).pos is None
        assert IntLiteral(1, PositionInfo(2, 3, 1)).pos == PositionInfo(2, 3, 1)

    def test_frozen(self):
        lit = IntLiteral(5)
        with pytest.raises(Exception):
            lit.value = 6

    def test_is_expression(self):
        assert isinstance(IntLiteral(0), ExprNode)

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            ExprNode()
