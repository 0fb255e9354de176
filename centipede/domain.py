"""Domains: ordered lists of candidate values, and helpers to build them."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from typing import TypeVar

T = TypeVar("T")

ONE_DAY = timedelta(days=1)
_MICROSECOND = timedelta(microseconds=1)


def without(domain: list[T], value: T) -> list[T]:
    """Return the domain with every occurrence of ``value`` removed.

    The original list is returned untouched when it holds no such value.
    """
    reduced = [item for item in domain if item != value]
    if len(reduced) == len(domain):
        return domain
    return reduced


def _range_length(span: int, step: int) -> int:
    """Count steps in ``span``, dividing with truncation toward zero."""
    if step == 0:
        raise ValueError("step must not be zero")
    quotient = abs(span) // abs(step)
    if (span < 0) != (step < 0):
        quotient = -quotient
    remainder = span - quotient * step
    if remainder > 0:
        quotient += 1
    if quotient < 0:
        raise ValueError(f"range of {span} with step {step} has negative length")
    return quotient


def int_range(start: int, end: int) -> list[int]:
    """Integers from ``start`` up to but excluding ``end``."""
    return int_range_step(start, end, 1)


def int_range_step(start: int, end: int, step: int) -> list[int]:
    """Integers from ``start`` towards ``end`` (exclusive) spaced by ``step``."""
    length = _range_length(end - start, step)
    return [i * step + start for i in range(length)]


def time_range(start: datetime, end: datetime) -> list[datetime]:
    """Points in time one day apart from ``start`` up to ``end``."""
    return time_range_step(start, end, ONE_DAY)


def time_range_step(start: datetime, end: datetime, step: timedelta) -> list[datetime]:
    """Points in time from ``start`` up to ``end`` spaced by ``step``."""
    span = (end - start) // _MICROSECOND
    step_units = step // _MICROSECOND
    length = _range_length(span, step_units)
    return [start + i * step for i in range(length)]


def float_range(start: float, end: float) -> list[float]:
    """Floats from ``start`` up to ``end`` with a step of one."""
    return float_range_step(start, end, 1.0)


def float_range_step(start: float, end: float, step: float) -> list[float]:
    """Floats from ``start`` up to ``end`` spaced by ``step``."""
    if step == 0:
        raise ValueError("step must not be zero")
    length = math.ceil((end - start) / step)
    if length < 0:
        raise ValueError(f"range from {start} to {end} with step {step} has negative length")
    return [float(i) * step + start for i in range(length)]


def generator(input_domain: Iterable[T], fx: Callable[[T], T]) -> list[T]:
    """Build a domain by applying ``fx`` to every value of ``input_domain``."""
    return [fx(item) for item in input_domain]