"""Constraint satisfaction: domains, variables, constraints, arc consistency and backtracking search."""

__version__ = "0.1.0"

__all__ = ["constraint", "domain", "runner", "solver", "state", "variable"]