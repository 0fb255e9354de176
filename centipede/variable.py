"""CSP variables, their collection, and domain propagation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from centipede.domain import without


class VariableNotFoundError(LookupError):
    """Raised when a variable is looked up by a name that is not present."""

    def __init__(self, name: str, variables: Any = None) -> None:
        super().__init__(f"Variable not found by name {name!r} in variables {variables!r}")
        self.name = name


@dataclass
class Variable:
    """A named CSP variable with a domain and an optional assigned value."""

    name: str
    domain: list[Any]
    value: Any = None
    empty: bool = True

    def set_value(self, value: Any) -> None:
        """Assign ``value`` to this variable."""
        self.value = value
        self.empty = False

    def unset(self) -> None:
        """Mark this variable as unassigned."""
        self.empty = True


@dataclass(frozen=True)
class DomainRemoval:
    """A value to prune from the domain of the named variable."""

    variable_name: str
    value: Any


@dataclass(frozen=True)
class VariableAssignment:
    """A value assigned to the named variable."""

    variable_name: str
    value: Any


class Variables(list):
    """An ordered collection of variables addressed by name."""

    def __init__(self, variables: Iterable[Variable] = ()) -> None:
        super().__init__(variables)

    def _last_match(self, name: str) -> Variable:
        found = None
        for variable in self:
            if variable.name == name:
                found = variable
        if found is None:
            raise VariableNotFoundError(name, self)
        return found

    def set_value(self, name: str, value: Any) -> None:
        """Assign ``value`` to the variable called ``name``."""
        self._last_match(name).set_value(value)

    def unset(self, name: str) -> None:
        """Mark the variable called ``name`` as unassigned."""
        self._last_match(name).unset()

    def set_domain(self, name: str, domain: list[Any]) -> None:
        """Replace the domain of the variable called ``name``."""
        self._last_match(name).domain = domain

    def find(self, name: str) -> Variable:
        """Return the first variable called ``name``."""
        for variable in self:
            if variable.name == name:
                return variable
        raise VariableNotFoundError(name, self)

    def __contains__(self, name: object) -> bool:
        return any(variable.name == name for variable in self)

    def unassigned(self) -> int:
        """Number of variables without a value."""
        return sum(1 for variable in self if variable.empty)

    def complete(self) -> bool:
        """True when every variable has a value."""
        return self.unassigned() == 0

    def evaluate_domain_removals(self, domain_removals: Iterable[DomainRemoval]) -> None:
        """Prune values from the domains of unassigned variables."""
        for removal in domain_removals:
            variable = self.find(removal.variable_name)
            if variable.empty:
                variable.domain = without(variable.domain, removal.value)

    def reset_domain_removal_evaluation(self, domain_removals: Iterable[DomainRemoval]) -> None:
        """Put pruned values back into their variables' domains."""
        for removal in domain_removals:
            variable = self.find(removal.variable_name)
            if removal.value not in variable.domain:
                variable.domain = [*variable.domain, removal.value]


PropagationFunction = Callable[[VariableAssignment, Variables], Iterable[DomainRemoval]]


@dataclass
class Propagation:
    """A rule that yields domain removals when a related variable is assigned."""

    vars: list[str]
    function: PropagationFunction = field(repr=False)

    def execute(self, assignment: VariableAssignment, variables: Variables) -> list[DomainRemoval]:
        """Run the propagation rule for ``assignment``."""
        return list(self.function(assignment, variables))


class Propagations(list):
    """A list of propagations run together."""

    def execute(self, assignment: VariableAssignment, variables: Variables) -> list[DomainRemoval]:
        """Collect removals from every propagation relevant to ``assignment``."""
        removals: list[DomainRemoval] = []
        for propagation in self:
            if assignment.variable_name in propagation.vars:
                removals.extend(propagation.execute(assignment, variables))
        return removals