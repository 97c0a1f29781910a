"""Tests for comparators and CountingCompare."""

import pytest
from seqfold import Value, less, greater, larger_value, CountingCompare, KindMismatchError


class TestComparators:
    def test_less_values(self):
        assert less(Value(int, 2), Value(int, 3))
        assert not less(Value(int, 3), Value(int, 3))
        assert not less(Value(int, 4), Value(int, 3))

    def test_greater_values(self):
        assert not greater(Value(int, 2), Value(int, 3))
        assert not greater(Value(int, 3), Value(int, 3))
        assert greater(Value(int, 4), Value(int, 3))

    def test_plain_scalars(self):
        assert less(1, 2)
        assert greater(2.5, 1)
        assert less("a", "b")

    def test_value_against_scalar(self):
        with pytest.raises(KindMismatchError):
            less(Value(int, 1), 2)
        with pytest.raises(KindMismatchError):
            greater(2, Value(int, 1))

    def test_different_kinds(self):
        with pytest.raises(KindMismatchError):
            less(Value(int, 1), Value(float, 2.0))

    def test_larger_value(self):
        assert larger_value(Value(int, 1), Value(int, 3)) == Value(int, 3)
        assert larger_value(Value(int, 3), Value(int, 1)) == Value(int, 3)

    def test_larger_value_keeps_first_on_tie(self):
        a = Value(int, 2)
        b = Value(int, 2)
        assert larger_value(a, b) is a


class TestCountingCompare:
    def test_counts_calls(self):
        counted = CountingCompare(less)

        assert counted(1, 2)
        assert counted.calls == 1

        assert not counted(2, 1)
        assert counted.calls == 2

    def test_reset(self):
        counted = CountingCompare(greater)
        counted(1, 2)
        counted.reset()
        assert counted.calls == 0

    def test_passes_through_errors(self):
        counted = CountingCompare(less)
        with pytest.raises(KindMismatchError):
            counted(Value(int, 1), 1)
        assert counted.calls == 1
