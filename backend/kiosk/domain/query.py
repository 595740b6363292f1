"""
Query specifications

A backend-neutral way to describe "which rows": a tree of conditions over
entity fields. The ORM backend compiles a spec into a SQL WHERE clause; the
direct-SQL backend evaluates it in memory with `matches`.

Usage:
    spec = where("email", Op.EQ, "jane@x.com") & where("id", Op.NE, some_id)
    spec = where("first_name", Op.ICONTAINS, "john") | where("email", Op.ICONTAINS, "john")
"""
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Tuple, Union

from pydantic import BaseModel

from kiosk.core.exceptions import ValidationError


class Op(str, Enum):
    """Comparison operators"""

    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    ICONTAINS = "icontains"


# Ordering operators never match a NULL field (same as SQL)
_ORDERING: Dict[Op, Callable[[Any, Any], bool]] = {
    Op.LT: operator.lt,
    Op.LE: operator.le,
    Op.GT: operator.gt,
    Op.GE: operator.ge,
}


class _Combinable:
    def __and__(self, other: "Spec") -> "AllOf":
        return AllOf(self, other)

    def __or__(self, other: "Spec") -> "AnyOf":
        return AnyOf(self, other)


@dataclass(frozen=True)
class Condition(_Combinable):
    """A single `field <op> value` test"""

    field: str
    op: Op
    value: Any = None

    def __invert__(self) -> "Condition":
        if self.op is Op.EQ:
            return Condition(self.field, Op.NE, self.value)
        if self.op is Op.NE:
            return Condition(self.field, Op.EQ, self.value)
        raise ValidationError(f"Cannot negate operator '{self.op.value}'", field=self.field)


class AllOf(_Combinable):
    """Logical AND of specs"""

    def __init__(self, *specs: "Spec"):
        self.specs: Tuple["Spec", ...] = specs

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllOf) and self.specs == other.specs

    def __repr__(self) -> str:
        return f"AllOf{self.specs!r}"


class AnyOf(_Combinable):
    """Logical OR of specs"""

    def __init__(self, *specs: "Spec"):
        self.specs: Tuple["Spec", ...] = specs

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyOf) and self.specs == other.specs

    def __repr__(self) -> str:
        return f"AnyOf{self.specs!r}"


Spec = Union[Condition, AllOf, AnyOf]


def where(field: str, op: Union[Op, str], value: Any = None) -> Condition:
    """Build a Condition, accepting the operator as an Op or its string value"""
    return Condition(field, Op(op), value)


def _field_value(entity: BaseModel, field: str) -> Any:
    if field not in type(entity).model_fields:
        raise ValidationError(f"Unknown field '{field}' for {type(entity).__name__}", field=field)
    return getattr(entity, field)


def _matches_condition(condition: Condition, entity: BaseModel) -> bool:
    actual = _field_value(entity, condition.field)
    expected = condition.value

    if condition.op is Op.EQ:
        return actual == expected
    if condition.op is Op.NE:
        # "!= None" means IS NOT NULL; NULL != x is never true
        if expected is None:
            return actual is not None
        if actual is None:
            return False
        return actual != expected
    if condition.op is Op.ICONTAINS:
        if actual is None or expected is None:
            return False
        return str(expected).lower() in str(actual).lower()

    if actual is None or expected is None:
        return False
    return _ORDERING[condition.op](actual, expected)


def matches(spec: Spec, entity: BaseModel) -> bool:
    """Evaluate a spec against one entity in process memory"""
    if isinstance(spec, Condition):
        return _matches_condition(spec, entity)
    if isinstance(spec, AllOf):
        return all(matches(s, entity) for s in spec.specs)
    if isinstance(spec, AnyOf):
        return any(matches(s, entity) for s in spec.specs)
    raise TypeError(f"Unsupported spec type: {type(spec).__name__}")
