# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Algebraic identities that must hold on every rung."""

import random
import unittest
from functools import reduce
from itertools import combinations

import torch

from rung import (
    ZERO, NotInvertibleError, add, blade, canonicalize, dot, dual, grade_part, grades, hestenes,
    inverse, inverse_pseudoscalar, involute, is_invertible, lcontract, product,
    pseudoscalar, rcontract, reverse, scalar_product, to_multivector, to_tensor, using_metric, vector, wedge,
)
from rung.basis import e0, e01, e012, e1, e12, e2


def unit_blades(dim):
    for k in range(dim + 1):
        for basis in combinations(range(dim), k):
            yield blade(1, basis)


class TestGeometricProperties(unittest.TestCase):
    def setUp(self):
        self.rng = random.Random(11)
        self.dim = 3

    def element(self, terms=4):
        blades = []
        for _ in range(terms):
            basis = [i for i in range(self.dim) if self.rng.random() < 0.5]
            blades.append(blade(self.rng.randint(-3, 3), basis))
        return reduce(add, blades, 0)

    def test_associativity(self):
        for _ in range(20):
            a, b, c = self.element(), self.element(), self.element()
            self.assertEqual(product(product(a, b), c), product(a, product(b, c)))

    def test_distributivity(self):
        for _ in range(20):
            a, b, c = self.element(), self.element(), self.element()
            self.assertEqual(product(a, add(b, c)), add(product(a, b), product(a, c)))

    def test_reversion_is_anti_automorphism(self):
        for _ in range(20):
            a, b = self.element(), self.element()
            self.assertEqual(reverse(product(a, b)), product(reverse(b), reverse(a)))

    def test_involution_is_automorphism(self):
        for _ in range(20):
            a, b = self.element(), self.element()
            self.assertEqual(involute(product(a, b)), product(involute(a), involute(b)))

    def test_grade_parts_sum_back(self):
        for _ in range(20):
            a = self.element()
            parts = [grade_part(a, k) for k in grades(a)]
            self.assertEqual(reduce(add, parts, ZERO), a)

    def test_canonical_is_idempotent(self):
        for _ in range(20):
            a = self.element()
            self.assertEqual(canonicalize(canonicalize(a)), canonicalize(a))

    def test_vector_product_splits(self):
        # uv = u.v + u^v for grade-1 operands
        for _ in range(20):
            u = vector([self.rng.randint(-3, 3) for _ in range(self.dim)])
            v = vector([self.rng.randint(-3, 3) for _ in range(self.dim)])
            self.assertEqual(product(u, v), add(dot(u, v), wedge(u, v)))

    def test_wedge_anticommutes_on_vectors(self):
        a, b = add(e0, blade(2, [2])), add(e1, blade(-1, [2]))
        self.assertEqual(wedge(a, b), -wedge(b, a))


class TestInverses(unittest.TestCase):
    def test_invertible_iff_inverse_succeeds(self):
        rng = random.Random(5)
        for weights in ([1, 1, 1], [1, -1, 0]):
            with using_metric(weights):
                for _ in range(40):
                    blades = []
                    for _ in range(rng.randint(1, 4)):
                        basis = [i for i in range(3) if rng.random() < 0.5]
                        blades.append(blade(rng.randint(-2, 2), basis))
                    x = to_multivector(reduce(add, blades, 0))
                    try:
                        inverse(x)
                        inverted = True
                    except NotInvertibleError:
                        inverted = False
                    self.assertEqual(is_invertible(x), inverted, repr(x))

    def test_blade_inverse_under_metrics(self):
        for weights in ([1, 1, 1], [-1, 2, -0.5], [1, -1, -1]):
            with using_metric(weights):
                for b in unit_blades(3):
                    self.assertEqual(product(b, inverse(b)), 1.0)
                    self.assertEqual(product(inverse(b), b), 1.0)

    def test_null_blades(self):
        with using_metric([1, 0]):
            self.assertFalse(is_invertible(e1))
            self.assertFalse(is_invertible(e01))
            self.assertTrue(is_invertible(e0))

    def test_versor_inverse(self):
        r = add(1, e01)
        self.assertEqual(inverse(r), add(0.5, blade(-0.5, [0, 1])))
        self.assertEqual(product(r, inverse(r)), 1.0)

    def test_general_inverse(self):
        x = add(add(2, e0), e12)
        y = inverse(x)
        one = to_tensor(product(x, y), 3)
        expected = torch.zeros(8, dtype=torch.float64)
        expected[0] = 1.0
        self.assertTrue(torch.allclose(one, expected))


class TestProducts(unittest.TestCase):
    def test_blade_product_grade_split(self):
        for a in unit_blades(3):
            for b in unit_blades(3):
                ab = product(a, b)
                j, k = a.grade, b.grade
                self.assertEqual(grade_part(ab, j + k), wedge(a, b))
                self.assertEqual(grade_part(ab, abs(j - k)), dot(a, b))

    def test_contractions(self):
        self.assertEqual(lcontract(e0, e012), e12)
        self.assertEqual(rcontract(e012, e2), e01)
        self.assertIs(lcontract(e012, e0), ZERO)
        self.assertIs(rcontract(e0, e012), ZERO)

    def test_hestenes_ignores_scalars(self):
        self.assertIs(hestenes(2, e0), ZERO)
        self.assertIs(hestenes(2, 3), ZERO)
        self.assertEqual(dot(2, e0), blade(2, [0]))
        self.assertEqual(hestenes(e0, e01), e1)

    def test_scalar_product(self):
        u = add(e0, e1)
        v = add(e0, blade(2, [1]))
        self.assertEqual(scalar_product(u, v), 3.0)
        self.assertEqual(scalar_product(e01, e01), -1.0)

    def test_pseudoscalar(self):
        self.assertEqual(pseudoscalar(3), e012)
        self.assertEqual(inverse_pseudoscalar(3), -e012)
        self.assertEqual(product(pseudoscalar(3), inverse_pseudoscalar(3)), 1.0)
        self.assertEqual(inverse_pseudoscalar(2), -e01)

    def test_dual(self):
        self.assertEqual(dual(e0, 3), -e12)
        self.assertEqual(dual(1, 2), -e01)
        # dualizing twice gives back a sign in 3D
        self.assertEqual(dual(dual(e0, 3), 3), -e0)


if __name__ == '__main__':
    unittest.main()
