"""Constraints over CSP variables and generators for common ones."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from centipede.variable import Variables

ConstraintFunction = Callable[[Variables], bool]


@dataclass
class Constraint:
    """A predicate over the named variables."""

    vars: list[str]
    function: ConstraintFunction = field(repr=False)

    def satisfied(self, variables: Variables) -> bool:
        """Check the constraint against ``variables``.

        Raises ``ValueError`` when a variable the constraint refers to is
        missing, or when an assigned value lies outside its domain.
        """
        for name in self.vars:
            if name not in variables:
                raise ValueError(f"Insufficient variables provided. Expected {self.vars!r}")
        for variable in variables:
            if not (variable.empty or variable.value in variable.domain):
                raise ValueError("Variables do not satisfy the domains given.")
        return bool(self.function(variables))


class Constraints(list):
    """A list of constraints checked together."""

    def all_satisfied(self, variables: Variables) -> bool:
        """True when every constraint is satisfied by ``variables``."""
        return all(constraint.satisfied(variables) for constraint in self)

    def filter_by_name(self, name: str) -> Constraints:
        """Constraints that refer to the variable called ``name``."""
        return Constraints(c for c in self if name in c.vars)

    def filter_by_order(self, order: int) -> Constraints:
        """Constraints that refer to exactly ``order`` variables."""
        return Constraints(c for c in self if len(c.vars) == order)


def _binary(var1: str, var2: str, relation: Callable[[Any, Any], bool]) -> Constraint:
    def check(variables: Variables) -> bool:
        first = variables.find(var1)
        second = variables.find(var2)
        if first.empty or second.empty:
            return True
        return relation(first.value, second.value)

    return Constraint([var1, var2], check)


def _unary(var1: str, predicate: Callable[[Any], bool]) -> Constraint:
    def check(variables: Variables) -> bool:
        variable = variables.find(var1)
        if variable.empty:
            return True
        return predicate(variable.value)

    return Constraint([var1], check)


def equals(var1: str, var2: str) -> Constraint:
    """Both variables hold the same value."""
    return _binary(var1, var2, lambda a, b: a == b)


def not_equals(var1: str, var2: str) -> Constraint:
    """The two variables hold different values."""
    return _binary(var1, var2, lambda a, b: a != b)


def unary_equals(var1: str, value: Any) -> Constraint:
    """The variable holds ``value``."""
    return _unary(var1, lambda v: v == value)


def unary_not_equals(var1: str, value: Any) -> Constraint:
    """The variable does not hold ``value``."""
    return _unary(var1, lambda v: v != value)


def less_than(var1: str, var2: str) -> Constraint:
    """The first variable is less than the second."""
    return _binary(var1, var2, lambda a, b: a < b)


def greater_than(var1: str, var2: str) -> Constraint:
    """The first variable is greater than the second."""
    return _binary(var1, var2, lambda a, b: a > b)


def less_than_or_equal_to(var1: str, var2: str) -> Constraint:
    """The first variable is less than or equal to the second."""
    return _binary(var1, var2, lambda a, b: a <= b)


def greater_than_or_equal_to(var1: str, var2: str) -> Constraint:
    """The first variable is greater than or equal to the second."""
    return _binary(var1, var2, lambda a, b: a >= b)


def _pairwise(names: Iterable[str], make: Callable[[str, str], Constraint]) -> Constraints:
    names = list(names)
    if not names:
        raise ValueError("Not enough variable names provided!")
    seen: set[tuple[str, str]] = set()
    constraints = Constraints()
    for first in names:
        for second in names:
            if (first, second) in seen or (second, first) in seen or first == second:
                continue
            seen.add((first, second))
            constraints.append(make(first, second))
    return constraints


def all_equals(*args: str) -> Constraints:
    """Pairwise constraints requiring all named variables to be equal."""
    return _pairwise(args, equals)


def all_unique(*args: str) -> Constraints:
    """Pairwise constraints requiring all named variables to differ."""
    return _pairwise(args, not_equals)