"""
Unit tests for query specifications

`matches` is the in-memory evaluator used by the direct-SQL backend.
"""
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from kiosk.core.exceptions import ValidationError
from kiosk.domain import AllOf, AnyOf, Condition, Customer, Op, Product, matches, where


@pytest.fixture
def john():
    return Customer(id=uuid4(), first_name="John", last_name="Doe", email="john@example.com")


@pytest.fixture
def widget():
    return Product(id=uuid4(), name="Widget", price=Decimal("19.99"), stock_quantity=5, sku=None)


class TestSpecConstruction:
    """Test building and combining specs"""

    def test_where_accepts_string_operator(self):
        assert where("email", "eq", "a@b.c") == Condition("email", Op.EQ, "a@b.c")

    def test_unknown_operator_is_rejected(self):
        with pytest.raises(ValueError):
            where("email", "like", "x")

    def test_and_or_build_composites(self):
        a = where("first_name", Op.EQ, "John")
        b = where("last_name", Op.EQ, "Doe")

        assert (a & b) == AllOf(a, b)
        assert (a | b) == AnyOf(a, b)

    def test_invert_flips_equality(self):
        assert ~where("sku", Op.EQ, "X") == where("sku", Op.NE, "X")
        assert ~where("sku", Op.NE, "X") == where("sku", Op.EQ, "X")

    def test_invert_ordering_operator_raises(self):
        with pytest.raises(ValidationError):
            ~where("price", Op.LT, 1)


class TestMatches:
    """Test in-memory evaluation"""

    def test_eq_and_ne(self, john):
        assert matches(where("first_name", Op.EQ, "John"), john)
        assert not matches(where("first_name", Op.EQ, "john"), john)
        assert matches(where("id", Op.NE, uuid4()), john)
        assert not matches(where("id", Op.NE, john.id), john)

    @pytest.mark.parametrize("term", ["JOHN", "john", "oh", "EXAMPLE.COM"])
    def test_icontains_is_case_insensitive(self, john, term):
        spec = where("first_name", Op.ICONTAINS, term) | where("email", Op.ICONTAINS, term)
        assert matches(spec, john)

    def test_icontains_never_matches_null(self, john):
        assert john.phone is None
        assert not matches(where("phone", Op.ICONTAINS, ""), john)

    def test_eq_none_matches_null(self, john, widget):
        assert matches(where("phone", Op.EQ, None), john)
        assert matches(where("sku", Op.EQ, None), widget)
        assert not matches(where("sku", Op.NE, None), widget)

    def test_ordering_operators(self, widget):
        assert matches(where("stock_quantity", Op.LT, 10), widget)
        assert not matches(where("stock_quantity", Op.LT, 5), widget)
        assert matches(where("stock_quantity", Op.LE, 5), widget)
        assert matches(where("price", Op.GE, Decimal("19.99")), widget)
        assert not matches(where("price", Op.GT, Decimal("19.99")), widget)

    def test_ordering_never_matches_null(self, john):
        assert john.updated_at is None
        cutoff = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert not matches(where("updated_at", Op.GT, cutoff), john)
        assert not matches(where("updated_at", Op.LT, cutoff), john)

    def test_empty_composites(self, john):
        assert matches(AllOf(), john)
        assert not matches(AnyOf(), john)

    def test_unknown_field_raises_validation_error(self, john):
        with pytest.raises(ValidationError) as exc_info:
            matches(where("nickname", Op.EQ, "Johnny"), john)

        assert exc_info.value.field == "nickname"
