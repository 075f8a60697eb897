# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Grade bundles: homogeneous-grade sums of blades.

A bundle keeps its blades sorted by basis with at most one blade per
basis. The empty bundle carries grade ``-1`` until its first blade fixes
the grade. Products of bundles are generally not homogeneous, so they
return a :class:`~rung.multivector.Multivector`.
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Tuple

from rung.blade import Blade
from rung.element import Element
from rung.errors import GradeMismatchError, NotInvertibleError
from rung.zero import ZERO

UNGRADED = -1


@dataclass(frozen=True, eq=False, repr=False)
class GradeBundle(Element):
    """Sum of blades sharing one grade.

    Attributes:
        grade (int): Common grade, or ``UNGRADED`` for the empty bundle.
        blades (Tuple[Blade, ...]): Blades sorted by basis, unique bases.
    """

    grade: int = UNGRADED
    blades: Tuple[Blade, ...] = ()

    @classmethod
    def of(cls, *blades: Blade) -> "GradeBundle":
        """Builds a bundle by absorbing *blades* one at a time."""
        bundle = cls()
        for b in blades:
            bundle = bundle.absorb(b)
        return bundle

    @property
    def is_empty(self) -> bool:
        return not self.blades

    @property
    def grades(self):
        return [] if self.is_empty else [self.grade]

    @property
    def is_scalar(self) -> bool:
        return self.grade == 0

    @property
    def is_monograde(self) -> bool:
        return True

    def absorb(self, blade: Blade) -> "GradeBundle":
        """Adds one blade.

        Zero sums are kept; stripping them is the ladder's job.

        Raises:
            GradeMismatchError: If the bundle already has another grade.
        """
        if self.is_empty:
            return GradeBundle(blade.grade, (blade,))
        if blade.grade != self.grade:
            raise GradeMismatchError(self.grade, blade.grade)

        keys = [b.basis for b in self.blades]
        pos = bisect_left(keys, blade.basis)
        if pos < len(keys) and keys[pos] == blade.basis:
            merged = Blade(self.blades[pos].coefficient + blade.coefficient, blade.basis)
            return GradeBundle(self.grade, self.blades[:pos] + (merged,) + self.blades[pos + 1:])
        return GradeBundle(self.grade, self.blades[:pos] + (blade,) + self.blades[pos:])

    def absorb_bundle(self, other: "GradeBundle") -> "GradeBundle":
        bundle = self
        for b in other.blades:
            bundle = bundle.absorb(b)
        return bundle

    def add(self, other: "GradeBundle"):
        if self.is_empty or other.is_empty or self.grade == other.grade:
            return self.absorb_bundle(other)
        from rung.multivector import Multivector
        return Multivector.from_bundle(self).absorb(Multivector.from_bundle(other))

    def _map(self, fn) -> "GradeBundle":
        return GradeBundle(self.grade, tuple(fn(b) for b in self.blades))

    def scale(self, s) -> "GradeBundle":
        return self._map(lambda b: b.scale(s))

    def negate(self) -> "GradeBundle":
        return self.scale(-1)

    def reverse(self) -> "GradeBundle":
        return self._map(Blade.reverse)

    def involute(self) -> "GradeBundle":
        return self._map(Blade.involute)

    def product(self, other: "GradeBundle"):
        """Geometric product as a multivector.

        Every blade pair is multiplied, lifted to a multivector and
        absorbed into the running sum.
        """
        from rung.multivector import Multivector
        acc = Multivector()
        for l in self.blades:
            for r in other.blades:
                acc = acc.absorb(Multivector.from_blade(l.product(r)))
        return acc

    def _select(self, other: "GradeBundle", target: int):
        if self.is_empty or other.is_empty or target < 0:
            return ZERO
        return self.product(other).grade_part(target)

    def dot(self, other: "GradeBundle"):
        """Symmetric inner product: grade ``|gl - gr|`` of the product."""
        return self._select(other, abs(self.grade - other.grade))

    def wedge(self, other: "GradeBundle"):
        """Outer product: grade ``gl + gr`` of the product."""
        return self._select(other, self.grade + other.grade)

    def lcontract(self, other: "GradeBundle"):
        return self._select(other, other.grade - self.grade)

    def rcontract(self, other: "GradeBundle"):
        return self._select(other, self.grade - other.grade)

    def hestenes(self, other: "GradeBundle"):
        if self.is_scalar or other.is_scalar:
            return ZERO
        return self.dot(other)

    def scalar_square(self) -> float:
        """Grade-0 coefficient of ``self * self`` (0.0 when absent)."""
        part = self.product(self).grade_part(0)
        if part is ZERO:
            return 0.0
        return sum(b.coefficient for b in part.blades)

    @property
    def is_invertible(self) -> bool:
        return self.scalar_square() != 0

    def inverse(self) -> "GradeBundle":
        """``self / <self self>_0``.

        Raises:
            NotInvertibleError: If the scalar part of the square vanishes.
        """
        sq = self.scalar_square()
        if sq == 0:
            raise NotInvertibleError(f"{self!r} is not invertible")
        return self.scale(1.0 / sq)

    def grade_part(self, k: int):
        if self.is_empty or k != self.grade:
            return ZERO
        return self

    def _same(self, other: "GradeBundle") -> bool:
        if self.grade != other.grade or len(self.blades) != len(other.blades):
            return False
        return all(a._same(b) for a, b in zip(self.blades, other.blades))

    def __repr__(self):
        return f"GradeBundle({self.grade}, {list(self.blades)!r})"

    def __str__(self):
        if self.is_empty:
            return "0"
        return " + ".join(str(b) for b in self.blades)
