"""
Tag expressions.

An activation query is made of expressions in a small boolean language:

* a string is a single tag,
* a list (or tuple) is the AND of its elements,
* a mapping combines operators, ``$all``/``$and`` (AND), ``$any``/``$or`` (OR)
  and ``$not``. Several operators in one mapping must all be satisfied.

Loose input is parsed once into an explicit tree which is then evaluated by
structural recursion. Shapes that cannot be parsed, like an unknown operator,
``None`` or a number, become ``Malformed`` and never evaluate to True.
"""

import typing
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

ALL_OPERATORS = ("$all", "$and")
ANY_OPERATORS = ("$any", "$or")
NOT_OPERATOR = "$not"


@dataclass(frozen=True)
class TagLeaf:
    tag: str


@dataclass(frozen=True)
class AllOf:
    items: tuple["Expression", ...]


@dataclass(frozen=True)
class AnyOf:
    items: tuple["Expression", ...]


@dataclass(frozen=True)
class NotOf:
    item: "Expression"


@dataclass(frozen=True)
class Malformed:
    raw: typing.Any = None


Expression = TagLeaf | AllOf | AnyOf | NotOf | Malformed


def _operands(value: typing.Any) -> tuple[Expression, ...]:
    if isinstance(value, list | tuple):
        return tuple(parse_expression(v) for v in value)
    return (parse_expression(value),)


def _parse_operators(raw: Mapping) -> Expression:
    clauses: list[Expression] = []
    for operator, value in raw.items():
        if operator in ALL_OPERATORS:
            clauses.append(AllOf(_operands(value)))
        elif operator in ANY_OPERATORS:
            clauses.append(AnyOf(_operands(value)))
        elif operator == NOT_OPERATOR:
            clauses.append(NotOf(parse_expression(value)))
        else:
            return Malformed(raw)
    if len(clauses) == 1:
        return clauses[0]
    return AllOf(tuple(clauses))


def parse_expression(raw: typing.Any) -> Expression:
    """Build the expression tree for one argument of an activation query."""
    if isinstance(raw, str):
        return TagLeaf(raw)
    if isinstance(raw, list | tuple):
        return AllOf(tuple(parse_expression(item) for item in raw))
    if isinstance(raw, Mapping):
        return _parse_operators(raw)
    return Malformed(raw)


def evaluate(expression: Expression, check: Callable[[str], bool]) -> bool:
    """Evaluate an expression tree, check decides about single tags."""
    match expression:
        case TagLeaf(tag=tag):
            return check(tag)
        case AllOf(items=items):
            return all(evaluate(item, check) for item in items)
        case AnyOf(items=items):
            return any(evaluate(item, check) for item in items)
        case NotOf(item=item):
            return not evaluate(item, check)
        case _:
            return False


def is_any_satisfied(expressions: Iterable[typing.Any], check: Callable[[str], bool]) -> bool:
    """OR across the arguments of an activation query."""
    return any(evaluate(parse_expression(expression), check) for expression in expressions)
