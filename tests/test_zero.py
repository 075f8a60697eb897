# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

import copy
import pickle

import pytest

from rung import (
    ZERO, Multivector, NotInvertibleError,
    add, blade, dot, grade, grade_part, grades, hestenes, inverse, is_invertible,
    is_monograde, is_scalar, negate, product, quotient, reverse, vector, wedge,
)
from rung.basis import e0, e01, e012
from rung.zero import Zero

SAMPLES = [
    3.0,
    e0,
    e01 + blade(2, [1, 2]),
    1 + e0 + e012,
    vector([1, 2]),
    ZERO,
]


class TestZeroSentinel:
    def test_singleton(self):
        assert Zero() is ZERO
        assert copy.deepcopy(ZERO) is ZERO
        assert pickle.loads(pickle.dumps(ZERO)) is ZERO

    def test_equals_numeric_zero(self):
        assert ZERO == 0
        assert ZERO == 0.0
        assert 0 == ZERO
        assert ZERO != 1
        assert ZERO != e0

    def test_falsy(self):
        assert not ZERO

    @pytest.mark.parametrize("x", SAMPLES)
    def test_absorbs_products(self, x):
        assert product(ZERO, x) is ZERO
        assert product(x, ZERO) is ZERO
        assert wedge(ZERO, x) is ZERO
        assert dot(x, ZERO) is ZERO

    @pytest.mark.parametrize("x", SAMPLES)
    def test_neutral_for_sums(self, x):
        assert add(ZERO, x) == x
        assert add(x, ZERO) == x

    def test_self_negating(self):
        assert negate(ZERO) is ZERO
        assert reverse(ZERO) is ZERO

    def test_gradeless(self):
        assert grade(ZERO) is None
        assert grades(ZERO) == []
        assert grade_part(ZERO, 0) is ZERO

    def test_conventional_queries(self):
        assert is_scalar(ZERO)
        assert is_monograde(ZERO)
        assert not is_invertible(ZERO)

    def test_inverse_faults(self):
        with pytest.raises(NotInvertibleError):
            inverse(ZERO)
        with pytest.raises(ZeroDivisionError):
            quotient(e0, ZERO)

    def test_rejects_foreign_operands(self):
        with pytest.raises(TypeError):
            product(ZERO, "e0")


class TestNativeScalars:
    def test_arithmetic(self):
        assert product(2, 3) == 6
        assert add(2, 3) == 5
        assert dot(2, 3) == 6
        assert wedge(2, 3) == 6
        assert hestenes(2, 3) is ZERO

    def test_inverse(self):
        assert inverse(4) == 0.25
        with pytest.raises(NotInvertibleError):
            inverse(0)

    def test_queries(self):
        assert grade(2.0) == 0
        assert grades(2.0) == [0]
        assert grade_part(5, 0) == 5
        assert grade_part(5, 1) is ZERO
        assert is_scalar(5) and is_invertible(5) and not is_invertible(0)

    def test_scaling_blades(self):
        assert 2 * e0 == blade(2, [0])
        assert e0 * 2 == blade(2, [0])
        assert 0 * e0 == 0

    def test_sum_with_blade(self):
        s = 1 + e0
        assert isinstance(s, Multivector)
        assert s.grades == [0, 1]

    def test_quotient(self):
        assert e0 / 2 == blade(0.5, [0])
        assert 1 / e0 == e0
