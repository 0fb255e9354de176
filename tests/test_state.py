import time

import pytest

from centipede.constraint import Constraint, equals, not_equals, unary_equals
from centipede.runner import ExecutionCanceled
from centipede.state import CSPState
from centipede.variable import Variable, Variables


def _assigned(name, domain, value):
    variable = Variable(name, domain)
    variable.set_value(value)
    return variable


def test_default_propagations_empty():
    state = CSPState(Variables([Variable("A", [1])]), [])
    assert list(state.propagations) == []
    assert list(state.constraints) == []


def test_arc_consistency_propagates_along_chain():
    state = CSPState(
        Variables(
            [_assigned("A", [1, 2], 1), Variable("B", [1, 2]), Variable("C", [2, 3])]
        ),
        [not_equals("A", "B"), not_equals("B", "C")],
    )
    state.make_arc_consistent()
    assert state.vars.find("B").domain == [2]
    assert state.vars.find("C").domain == [3]


def test_arc_consistency_equals_intersects_domains():
    state = CSPState(
        Variables([Variable("A", [1, 2, 3]), Variable("B", [2, 3, 4])]),
        [equals("A", "B")],
    )
    state.make_arc_consistent()
    assert state.vars.find("A").domain == [2, 3]
    assert state.vars.find("B").domain == [2, 3]


def test_arc_consistency_empty_domain_raises():
    state = CSPState(
        Variables([_assigned("A", [1], 1), Variable("B", [1])]),
        [not_equals("A", "B")],
    )
    with pytest.raises(ValueError):
        state.make_arc_consistent()


def test_arc_consistency_ignores_unary_constraints():
    state = CSPState(
        Variables([Variable("A", [1, 2, 3])]),
        [unary_equals("A", 2)],
    )
    state.make_arc_consistent()
    assert state.vars.find("A").domain == [1, 2, 3]


def test_arc_consistency_timeout():
    def slow(variables):
        time.sleep(0.05)
        return True

    state = CSPState(
        Variables([Variable("A", [1, 2, 3]), Variable("B", [1, 2, 3])]),
        [Constraint(["A", "B"], slow)],
    )
    with pytest.raises(ExecutionCanceled):
        state.make_arc_consistent(timeout=0.01)


def test_simplify_removes_excluded_value():
    state = CSPState(
        Variables([_assigned("A", [1, 2, 3], 1), Variable("B", [1, 2, 3])]),
        [not_equals("A", "B")],
    )
    state.simplify_pre_assignment()
    b = state.vars.find("B")
    assert b.domain == [2, 3]
    assert b.empty


def test_simplify_assigns_singleton_domain():
    state = CSPState(
        Variables([_assigned("A", [1, 2], 1), Variable("B", [1, 2])]),
        [not_equals("A", "B")],
    )
    state.simplify_pre_assignment(timeout=5)
    b = state.vars.find("B")
    assert b.domain == [2]
    assert not b.empty
    assert b.value == 2


def test_simplify_keeps_domain_for_equals():
    state = CSPState(
        Variables([_assigned("A", [1, 2], 1), Variable("B", [1, 2])]),
        [equals("A", "B")],
    )
    state.simplify_pre_assignment()
    assert state.vars.find("B").domain == [1, 2]
    assert state.vars.find("B").empty


def test_simplify_without_assignments_changes_nothing():
    state = CSPState(
        Variables([Variable("A", [1, 2]), Variable("B", [1, 2])]),
        [not_equals("A", "B")],
    )
    state.simplify_pre_assignment()
    assert [v.domain for v in state.vars] == [[1, 2], [1, 2]]
    assert state.vars.unassigned() == 2