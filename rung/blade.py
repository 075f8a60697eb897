# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Basis blades and their combinatorics.

A blade is ``coefficient * e_{i1} e_{i2} ... e_{ik}`` with
``i1 < i2 < ... < ik``. The geometric product of two blades is again a
blade: its basis is the symmetric difference of the operand bases, its
sign is the parity of the transpositions needed to sort the
concatenation, and every index shared by both operands contributes its
metric weight (``e_i * e_i = metric(i)``).
"""

from dataclasses import dataclass
from typing import Tuple

from rung.element import Element
from rung.errors import NotInvertibleError
from rung.metric import current_metric
from rung.zero import ZERO


def reversion_sign(grade: int) -> int:
    """Sign picked up by a grade-``k`` blade under reversion: (-1)^(k(k-1)/2)."""
    return -1 if (grade * (grade - 1) // 2) % 2 else 1


def involution_sign(grade: int) -> int:
    """Sign picked up by a grade-``k`` blade under grade involution: (-1)^k."""
    return -1 if grade % 2 else 1


def merge_sign(left: Tuple[int, ...], right: Tuple[int, ...]) -> int:
    """Parity of the adjacent swaps that merge two ascending index runs.

    Walking ``left`` from its right end, each element has to hop over
    every element of ``right`` strictly smaller than it.

    Args:
        left: Ascending basis of the left blade.
        right: Ascending basis of the right blade.

    Returns:
        int: +1 for an even number of swaps, -1 for odd.
    """
    swaps = 0
    for i in reversed(left):
        swaps += sum(1 for j in right if j < i)
    return -1 if swaps % 2 else 1


def metric_factor(left: Tuple[int, ...], right: Tuple[int, ...], metric=None) -> float:
    """Product of the metric weights of the indices shared by both runs."""
    metric = current_metric() if metric is None else metric
    factor = 1.0
    for i in set(left).intersection(right):
        factor *= metric.weight(i)
    return factor


def symmetric_difference(left: Tuple[int, ...], right: Tuple[int, ...]) -> Tuple[int, ...]:
    """Sorted basis of ``e_left * e_right``: indices in exactly one operand."""
    return tuple(sorted(set(left).symmetric_difference(right)))


@dataclass(frozen=True, eq=False, repr=False)
class Blade(Element):
    """A scaled basis blade.

    Attributes:
        coefficient (float): Real weight.
        basis (Tuple[int, ...]): Ascending basis indices; ``()`` is the scalar blade.
    """

    coefficient: float
    basis: Tuple[int, ...] = ()

    @property
    def grade(self) -> int:
        return len(self.basis)

    @property
    def grades(self):
        return [self.grade]

    @property
    def is_scalar(self) -> bool:
        return self.grade == 0

    @property
    def is_monograde(self) -> bool:
        return True

    def scale(self, s) -> "Blade":
        return Blade(self.coefficient * s, self.basis)

    def negate(self) -> "Blade":
        return self.scale(-1)

    def reverse(self) -> "Blade":
        if reversion_sign(self.grade) < 0:
            return self.negate()
        return self

    def involute(self) -> "Blade":
        if involution_sign(self.grade) < 0:
            return self.negate()
        return self

    def add(self, other: "Blade"):
        """Sum of two blades.

        Equal bases add coefficients. Otherwise the result is a bundle
        (same grade) or a multivector (different grades).
        """
        if self.basis == other.basis:
            return Blade(self.coefficient + other.coefficient, self.basis)
        if self.grade == other.grade:
            from rung.bundle import GradeBundle
            return GradeBundle.of(self, other)
        from rung.multivector import Multivector
        return Multivector.from_blade(self).absorb(Multivector.from_blade(other))

    def product(self, other: "Blade") -> "Blade":
        """Geometric product of two blades (always a single blade)."""
        sign = merge_sign(self.basis, other.basis)
        factor = metric_factor(self.basis, other.basis)
        return Blade(
            sign * factor * self.coefficient * other.coefficient,
            symmetric_difference(self.basis, other.basis),
        )

    def _select(self, other: "Blade", target: int):
        if target < 0:
            return ZERO
        return self.product(other).grade_part(target)

    def dot(self, other: "Blade"):
        return self._select(other, abs(self.grade - other.grade))

    def wedge(self, other: "Blade"):
        return self._select(other, self.grade + other.grade)

    def lcontract(self, other: "Blade"):
        return self._select(other, other.grade - self.grade)

    def rcontract(self, other: "Blade"):
        return self._select(other, self.grade - other.grade)

    def hestenes(self, other: "Blade"):
        if self.is_scalar or other.is_scalar:
            return ZERO
        return self.dot(other)

    def self_inner(self) -> float:
        """``c * prod(metric(basis)) * reversion_sign``; zero means not invertible."""
        metric = current_metric()
        weight = 1.0
        for i in self.basis:
            weight *= metric.weight(i)
        return self.coefficient * weight * reversion_sign(self.grade)

    @property
    def is_invertible(self) -> bool:
        return self.self_inner() != 0

    def inverse(self) -> "Blade":
        """Inverse blade: ``1 / (c * prod(metric) * reversion_sign)`` on the same basis.

        Raises:
            NotInvertibleError: If the coefficient or a null basis weight is zero.
        """
        denom = self.self_inner()
        if denom == 0:
            raise NotInvertibleError(f"{self!r} is not invertible")
        return Blade(1.0 / denom, self.basis)

    def grade_part(self, k: int):
        return self if k == self.grade else ZERO

    def _same(self, other: "Blade") -> bool:
        return self.coefficient == other.coefficient and self.basis == other.basis

    def __repr__(self):
        return f"Blade({self.coefficient!r}, {list(self.basis)!r})"

    def __str__(self):
        if not self.basis:
            return f"{self.coefficient}"
        return f"{self.coefficient}*e" + "".join(str(i) for i in self.basis)
