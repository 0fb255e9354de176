from datetime import datetime, timedelta

import pytest

from centipede.domain import (
    float_range,
    float_range_step,
    generator,
    int_range,
    int_range_step,
    time_range,
    time_range_step,
    without,
)


def test_without_removes_every_occurrence():
    domain = [1, 2, 3, 2, 4]
    result = without(domain, 2)
    assert 2 not in result
    assert result == [item for item in domain if item != 2]
    assert domain == [1, 2, 3, 2, 4]


def test_without_missing_value_returns_same_list():
    domain = [1, 2, 3]
    assert without(domain, 7) is domain


def test_int_range_bounds():
    result = int_range(1, 10)
    assert result[0] == 1
    assert 10 not in result
    assert 9 in result
    assert all(b - a == 1 for a, b in zip(result, result[1:]))


def test_int_range_step_evens_below_twenty():
    result = int_range_step(0, 20, 2)
    assert all(value % 2 == 0 for value in result)
    assert max(result) < 20
    assert len(result) == 10


def test_int_range_step_partial_last_step():
    result = int_range_step(0, 10, 3)
    assert result[0] == 0
    assert result[-1] < 10
    assert result[-1] + 3 >= 10


def test_int_range_step_negative_step_truncates():
    assert int_range_step(10, 0, -3) == [10, 7, 4]


def test_int_range_empty_when_equal():
    assert int_range(5, 5) == []


def test_int_range_zero_step_raises():
    with pytest.raises(ValueError):
        int_range_step(0, 10, 0)


def test_int_range_negative_length_raises():
    with pytest.raises(ValueError):
        int_range(10, 1)


def test_time_range_daily():
    start = datetime(2022, 1, 1)
    end = datetime(2022, 1, 8)
    result = time_range(start, end)
    assert result[0] == start
    assert all(b - a == timedelta(days=1) for a, b in zip(result, result[1:]))
    assert all(point < end for point in result)
    assert result[-1] + timedelta(days=1) >= end


def test_time_range_step_partial():
    start = datetime(2022, 1, 1)
    end = datetime(2022, 1, 1, 5)
    step = timedelta(hours=2)
    result = time_range_step(start, end, step)
    assert result[0] == start
    assert result[-1] < end
    assert result[-1] + step >= end


def test_time_range_negative_raises():
    with pytest.raises(ValueError):
        time_range(datetime(2022, 1, 5), datetime(2022, 1, 1))


def test_float_range_bounds():
    result = float_range(0.5, 4.0)
    assert result[0] == 0.5
    assert all(value < 4.0 for value in result)
    assert result[-1] + 1.0 >= 4.0


def test_float_range_step_spacing():
    result = float_range_step(0.0, 1.0, 0.25)
    assert result[0] == 0.0
    assert all(b - a == pytest.approx(0.25) for a, b in zip(result, result[1:]))
    assert all(value < 1.0 for value in result)


def test_float_range_negative_raises():
    with pytest.raises(ValueError):
        float_range_step(5.0, 0.0, 1.0)


def test_generator_applies_function():
    source = int_range(1, 6)
    result = generator(source, lambda x: x * 2)
    assert len(result) == len(source)
    assert all(out == inp * 2 for inp, out in zip(source, result))