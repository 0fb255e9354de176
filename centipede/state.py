"""Solver state and local-consistency algorithms that shrink variable domains."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from centipede.constraint import Constraint, Constraints
from centipede.domain import without
from centipede.runner import run_with_timeout
from centipede.variable import Propagations, Variable, Variables


@dataclass
class CSPState:
    """Variables, constraints and propagations of one constraint problem."""

    vars: Variables
    constraints: Constraints
    propagations: Propagations = field(default_factory=Propagations)

    def __post_init__(self) -> None:
        if not isinstance(self.vars, Variables):
            self.vars = Variables(self.vars)
        if not isinstance(self.constraints, Constraints):
            self.constraints = Constraints(self.constraints)
        if not isinstance(self.propagations, Propagations):
            self.propagations = Propagations(self.propagations)

    def simplify_pre_assignment(self, timeout: float | None = None) -> None:
        """Prune values of assigned variables from the domains of variables
        they exclude.

        If ``A != B`` and ``B`` holds 2, then 2 is removed from the domain of
        ``A``; a domain left with one value is assigned that value. Arc
        consistency is usually the better choice. Raises
        :class:`~centipede.runner.ExecutionCanceled` if ``timeout`` seconds
        pass first.
        """
        run_with_timeout(self._simplify, timeout)

    def _simplify(self) -> None:
        for variable in self.vars:
            if variable.empty:
                continue
            for constraint in self.constraints.filter_by_name(variable.name):
                for name in constraint.vars:
                    if name == variable.name:
                        continue
                    constrained = self.vars.find(name)
                    if not constrained.empty:
                        continue
                    if variable.value not in constrained.domain:
                        continue
                    before = constraint.function(self.vars)
                    self.vars.set_value(constrained.name, variable.value)
                    after = constraint.function(self.vars)
                    self.vars.unset(constrained.name)
                    if before and not after:
                        restricted = without(constrained.domain, variable.value)
                        self.vars.set_domain(constrained.name, restricted)
                        if len(restricted) == 1:
                            self.vars.set_value(constrained.name, restricted[0])

    def make_arc_consistent(self, timeout: float | None = None) -> None:
        """Make every binary constraint arc consistent (AC-3).

        Raises ``ValueError`` if a domain is reduced to nothing, and
        :class:`~centipede.runner.ExecutionCanceled` if ``timeout`` seconds
        pass first.
        """
        run_with_timeout(self._arc_consistency, timeout)

    def _arc_consistency(self) -> None:
        queue = deque(range(len(self.constraints)))
        while queue:
            constraint = self.constraints[queue.popleft()]
            if len(constraint.vars) != 2:
                continue
            first, second = constraint.vars
            changed_first, domain_first = self._arc_reduce(first, second, constraint)
            changed_second, domain_second = self._arc_reduce(second, first, constraint)
            if changed_first:
                self._narrow(constraint, first, second, domain_first, queue)
            if changed_second:
                self._narrow(constraint, second, first, domain_second, queue)

    def _narrow(
        self,
        constraint: Constraint,
        name: str,
        other: str,
        domain: list,
        queue: deque[int],
    ) -> None:
        if not domain:
            raise ValueError(f"Domain reduced to empty slice for constraint {constraint!r}")
        self.vars.set_domain(name, domain)
        queue.extend(
            index
            for index, neighbour in enumerate(self.constraints)
            if name in neighbour.vars and other not in neighbour.vars
        )

    def _arc_reduce(self, name_x: str, name_y: str, constraint: Constraint) -> tuple[bool, list]:
        x = self.vars.find(name_x)
        y = self.vars.find(name_y)
        x_values = x.domain if x.empty else [x.value]
        y_values = y.domain if y.empty else [y.value]

        reduced = x_values
        changed = False
        for vx in x_values:
            if not _has_support(constraint, x.name, vx, x_values, y.name, y_values):
                reduced = without(reduced, vx)
                changed = True
        return changed, reduced


def _has_support(
    constraint: Constraint,
    name_x: str,
    vx: object,
    x_values: list,
    name_y: str,
    y_values: Iterable,
) -> bool:
    for vy in y_values:
        pair = Variables(
            [
                Variable(name_x, x_values, vx, False),
                Variable(name_y, list(y_values), vy, False),
            ]
        )
        if constraint.function(pair):
            return True
    return False