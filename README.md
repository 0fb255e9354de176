# centipede

A small, dependency-free library for solving constraint satisfaction
problems (CSPs) by backtracking search. Before or during the search it can
prune domains with AC-3 arc consistency, a simple pre-assignment
simplification, or propagation rules that you write.

## Installation

```
pip install .
```

## Modules

- `centipede.domain`: a domain is a plain list of candidate values. The
  module builds common ones:
  - `int_range(start, end)` and `int_range_step(start, end, step)` give
    integers from `start` up to, but not including, `end`.
  - `float_range(start, end)` and `float_range_step(start, end, step)` do
    the same for floats.
  - `time_range(start, end)` gives `datetime` values one day apart.
    `time_range_step(start, end, step)` takes a `timedelta` step.
  - `generator(input_domain, fx)` applies `fx` to each value.
  - `without(domain, value)` removes a value. It returns the same list
    when the value is not there.

  The range helpers raise `ValueError` for a zero step and for a range of
  negative length.
- `centipede.variable`:
  - `Variable(name, domain)` is a variable. It starts empty. Use
    `set_value(value)` and `unset()` to change it.
  - `Variables` is a list of variables that you address by name. It has
    `find`, `set_value`, `unset`, `set_domain`, `unassigned`, `complete`,
    and `name in variables`. An unknown name raises `VariableNotFoundError`,
    which is a `LookupError`.
  - `Propagation(vars, function)` and `Propagations` hold propagation
    rules. `DomainRemoval` and `VariableAssignment` are the records these
    rules use.
- `centipede.constraint`:
  - `Constraint(vars, function)` is a predicate over the named variables.
  - `Constraints` is a list of constraints. It has `all_satisfied`,
    `filter_by_name` and `filter_by_order`.
  - Ready-made builders: `equals`, `not_equals`, `unary_equals`,
    `unary_not_equals`, `less_than`, `greater_than`,
    `less_than_or_equal_to`, `greater_than_or_equal_to`, and the pairwise
    builders `all_equals(*names)` and `all_unique(*names)`.
  - Every builder treats a constraint as satisfied while one of its
    variables is still empty.
- `centipede.state`: `CSPState(vars, constraints, propagations)` holds one
  problem. It has two methods:
  - `make_arc_consistent(timeout)` runs AC-3 over the binary constraints.
    It raises `ValueError` if a domain becomes empty.
  - `simplify_pre_assignment(timeout)` removes the value of an assigned
    variable from the domain of each empty variable that a constraint
    would forbid from taking it. If that leaves one value, the variable is
    assigned that value.
- `centipede.solver`: `BackTrackingCSPSolver(vars, constraints,
  propagations=None)` keeps its problem in `state`, a `CSPState`.
  `solve(timeout)` returns `True` when it finds a solution and leaves the
  values in `state.vars`.
- `centipede.runner`: `run_with_timeout(func, timeout)` and the
  `ExecutionCanceled` exception.

## Example: map colouring

```python
from centipede.constraint import Constraints, not_equals
from centipede.solver import BackTrackingCSPSolver
from centipede.variable import Variable, Variables

colors = ["red", "green", "blue"]
variables = Variables(
    Variable(name, colors) for name in ["WA", "NT", "Q", "NSW", "V", "SA", "T"]
)
constraints = Constraints([
    not_equals("WA", "NT"),
    not_equals("WA", "SA"),
    not_equals("NT", "SA"),
    not_equals("NT", "Q"),
    not_equals("Q", "SA"),
    not_equals("Q", "NSW"),
    not_equals("NSW", "V"),
    not_equals("NSW", "SA"),
    not_equals("V", "SA"),
])

solver = BackTrackingCSPSolver(variables, constraints)
if solver.solve():
    for variable in solver.state.vars:
        print(variable.name, variable.value)
```

The search tries variables in list order and values in domain order. This
example therefore gives WA red, NT green, Q red, NSW green, V red, SA blue
and T red.

## Custom constraints

A constraint function receives the `Variables` collection and returns a
boolean. It should return `True` while any of its variables is still empty:

```python
from centipede.constraint import Constraint

def double(variables):
    a, e = variables.find("A"), variables.find("E")
    if a.empty or e.empty:
        return True
    return e.value == a.value * 2

constraint = Constraint(["A", "E"], double)
```

`Constraint.satisfied` raises `ValueError` in two cases: a variable the
constraint names is missing, or an assigned value is not in its variable's
domain.

## Propagation

A propagation function is called as `function(assignment, variables)`, where
`assignment` is a `VariableAssignment`. It returns `DomainRemoval` records.
The solver runs every propagation whose `vars` include the variable just
assigned. It prunes the listed values from the domains of empty variables,
and restores them when it tries the next value.

```python
from centipede.variable import DomainRemoval, Propagation

def exclude_same(assignment, variables):
    return [DomainRemoval("B", assignment.value)]

solver = BackTrackingCSPSolver(variables, constraints, [Propagation(["A"], exclude_same)])
```

## Arc consistency and timeouts

For a problem with many binary constraints, such as sudoku, prune the
domains before solving:

```python
solver.state.make_arc_consistent()
solver.solve(timeout=5.0)
```

`solve`, `make_arc_consistent` and `simplify_pre_assignment` each take a
`timeout` in seconds. The default, `None`, means no limit and runs the work
in the calling thread.

With a timeout, the work runs on a background daemon thread. If the timeout
passes before the work finishes, the method raises
`centipede.runner.ExecutionCanceled`. The thread is not stopped, so the state
may still change afterwards.

## What it does not do

This is a library only: it has no command-line tool. The search is plain
backtracking in list order, with no variable- or value-ordering heuristics.
Arc consistency looks only at constraints over exactly two variables.

## Running the tests

```
pip install .[test]
pytest
```