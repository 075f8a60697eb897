# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

import pytest

from rung import (
    ArityMismatchError, GradeBundle, Multivector, NotInvertibleError, Vector,
    add, blade, dot, grade, grade_part, hestenes, inverse, lcontract, negate, product, quotient,
    rcontract, sub, using_metric, vector, wedge,
)
from rung.basis import e01


@pytest.fixture
def u():
    return vector([1, 2, 3])


@pytest.fixture
def v():
    return vector([4, 5, 6])


class TestArithmetic:
    def test_sum(self, u, v):
        s = add(u, v)
        assert isinstance(s, Vector)
        assert s.coefficients == (5.0, 7.0, 9.0)

    def test_arity_mismatch(self, u):
        with pytest.raises(ArityMismatchError):
            add(u, vector([1, 2]))

    def test_scale_and_negate(self, u):
        assert u.scale(2).coefficients == (2.0, 4.0, 6.0)
        assert negate(u).coefficients == (-1.0, -2.0, -3.0)

    def test_dot(self, u, v):
        assert dot(u, v) == 32.0

    def test_dot_uses_metric(self, u, v):
        with using_metric([1, 1, -1]):
            assert dot(u, v) == -4.0

    def test_dot_matches_bundle_path(self, u, v):
        with using_metric([1, -1, 1]):
            assert dot(u, v) == dot(u.to_bundle(), v.to_bundle())

    def test_dot_arity_mismatch(self, u):
        with pytest.raises(ArityMismatchError):
            u.dot(vector([1]))

    @pytest.mark.parametrize("op", [add, sub, product, quotient, dot, wedge, lcontract, rcontract, hestenes])
    def test_every_binary_operator_checks_arity(self, u, op):
        with pytest.raises(ArityMismatchError):
            op(u, vector([4, 5]))
        with pytest.raises(ArityMismatchError):
            op(vector([4, 5]), u)

    def test_operator_syntax_checks_arity(self, u):
        w = vector([4, 5])
        with pytest.raises(ArityMismatchError):
            u * w
        with pytest.raises(ArityMismatchError):
            u ^ w
        with pytest.raises(ArityMismatchError):
            u << w


class TestUnary:
    def test_reverse_is_identity(self, u):
        assert u.reverse() is u

    def test_involute_negates(self, u):
        assert u.involute() == negate(u)

    def test_grade(self, u):
        assert grade(u) == 1
        assert grade_part(u, 1) is u
        assert grade_part(u, 0) == 0


class TestInverse:
    def test_inverse(self):
        assert inverse(vector([2, 0])) == vector([0.5, 0])
        assert product(vector([2, 0]), inverse(vector([2, 0]))) == 1

    def test_zero_vector(self):
        with pytest.raises(NotInvertibleError):
            inverse(vector([0, 0]))

    def test_null_vector(self):
        with using_metric([1, -1]):
            assert not vector([1, 1]).is_invertible
            with pytest.raises(NotInvertibleError):
                inverse(vector([1, 1]))


class TestPromotion:
    def test_to_bundle_drops_zeros(self):
        b = vector([0, 3, 0]).to_bundle()
        assert isinstance(b, GradeBundle)
        assert [x.basis for x in b.blades] == [(1,)]

    def test_product_of_vectors(self):
        assert product(vector([1, 0]), vector([0, 1])) == e01
        assert product(vector([1, 0]), vector([1, 0])) == 1.0

    def test_sum_with_blade(self):
        s = vector([1, 0]) + e01
        assert isinstance(s, Multivector)
        assert s.grades == [1, 2]

    def test_dot_with_bundle(self):
        assert (vector([1, 2]) | GradeBundle.of(blade(3, [0]))) == 3.0

    def test_equals_bundle(self):
        assert vector([1, 2]) == GradeBundle.of(blade(1, [0]), blade(2, [1]))

    def test_equality_ignores_trailing_zeros(self):
        assert vector([1, 0]) == vector([1])
        assert vector([1, 2]) != vector([1])

    def test_wedge_anticommutes(self, u, v):
        assert wedge(u, v) == negate(wedge(v, u))
        assert wedge(u, u) == 0
