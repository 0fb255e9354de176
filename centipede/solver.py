"""Backtracking search for constraint satisfaction problems."""

from __future__ import annotations

from collections.abc import Iterable

from centipede.constraint import Constraint
from centipede.runner import run_with_timeout
from centipede.state import CSPState
from centipede.variable import Propagation, Propagations, Variable, VariableAssignment


class BackTrackingCSPSolver:
    """Solves a CSP by depth-first assignment with backtracking."""

    def __init__(
        self,
        vars: Iterable[Variable],
        constraints: Iterable[Constraint],
        propagations: Iterable[Propagation] | None = None,
    ) -> None:
        self.state = CSPState(vars, constraints, Propagations(propagations or ()))

    def solve(self, timeout: float | None = None) -> bool:
        """Search for an assignment satisfying every constraint.

        Returns whether a solution was found; the values are left in
        ``state.vars``. Raises :class:`~centipede.runner.ExecutionCanceled`
        if ``timeout`` seconds pass first.
        """
        return bool(run_with_timeout(lambda: _reduce(self.state), timeout))


def _reduce(state: CSPState) -> bool:
    complete = state.vars.complete()
    satisfied = state.constraints.all_satisfied(state.vars)
    if complete and satisfied:
        return True

    for variable in state.vars:
        if not variable.empty:
            continue
        removals: list = []
        for option in variable.domain:
            state.vars.reset_domain_removal_evaluation(removals)
            variable.set_value(option)
            removals = state.propagations.execute(
                VariableAssignment(variable.name, option), state.vars
            )
            state.vars.evaluate_domain_removals(removals)

            complete = state.vars.complete()
            satisfied = state.constraints.all_satisfied(state.vars)
            if complete and satisfied:
                return True
            if not complete and satisfied and _reduce(state):
                return True
        state.vars.reset_domain_removal_evaluation(removals)
        variable.unset()
    return False