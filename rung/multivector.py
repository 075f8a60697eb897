# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Multivector Container Class.

A multivector is a grade-ordered tuple of non-empty grade bundles, at
most one per grade. Every product on multivectors is the cartesian
accumulation of the matching bundle-level product, so the whole
distributive algebra follows from the blade product.
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Tuple

from log import get_logger
from rung.blade import Blade
from rung.bundle import GradeBundle
from rung.element import Element
from rung.errors import NotInvertibleError
from rung.zero import ZERO

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class Multivector(Element):
    """Sum of grade bundles.

    Attributes:
        bundles (Tuple[GradeBundle, ...]): Ascending by grade, no empties.
    """

    bundles: Tuple[GradeBundle, ...] = ()

    @classmethod
    def from_bundle(cls, bundle: GradeBundle) -> "Multivector":
        return cls().absorb_bundle(bundle)

    @classmethod
    def from_blade(cls, blade: Blade) -> "Multivector":
        return cls.from_bundle(GradeBundle.of(blade))

    @property
    def grades(self):
        return [b.grade for b in self.bundles]

    @property
    def is_scalar(self) -> bool:
        return len(self.bundles) == 1 and self.bundles[0].grade == 0

    @property
    def is_monograde(self) -> bool:
        return len(self.bundles) <= 1

    def absorb_bundle(self, bundle: GradeBundle) -> "Multivector":
        """Merges *bundle* into the bundle of its grade, or inserts it."""
        if bundle.is_empty:
            return self
        keys = self.grades
        pos = bisect_left(keys, bundle.grade)
        if pos < len(keys) and keys[pos] == bundle.grade:
            merged = self.bundles[pos].absorb_bundle(bundle)
            return Multivector(self.bundles[:pos] + (merged,) + self.bundles[pos + 1:])
        return Multivector(self.bundles[:pos] + (bundle,) + self.bundles[pos:])

    def absorb(self, other: "Multivector") -> "Multivector":
        mv = self
        for b in other.bundles:
            mv = mv.absorb_bundle(b)
        return mv

    def add(self, other: "Multivector") -> "Multivector":
        return self.absorb(other)

    def _map(self, fn) -> "Multivector":
        return Multivector(tuple(fn(b) for b in self.bundles))

    def scale(self, s) -> "Multivector":
        return self._map(lambda b: b.scale(s))

    def negate(self) -> "Multivector":
        return self.scale(-1)

    def reverse(self) -> "Multivector":
        return self._map(GradeBundle.reverse)

    def involute(self) -> "Multivector":
        return self._map(GradeBundle.involute)

    def product(self, other) -> "Multivector":
        """Geometric product.

        A real right operand is uniform scaling; otherwise every bundle
        pair is multiplied and the partial multivectors are absorbed.
        """
        if isinstance(other, (int, float)):
            return self.scale(other)
        acc = Multivector()
        for l in self.bundles:
            for r in other.bundles:
                acc = acc.absorb(l.product(r))
        return acc

    def _accumulate(self, other: "Multivector", op: str) -> "Multivector":
        acc = Multivector()
        for l in self.bundles:
            for r in other.bundles:
                part = getattr(l, op)(r)
                if part is not ZERO:
                    acc = acc.absorb_bundle(part)
        return acc

    def dot(self, other: "Multivector") -> "Multivector":
        return self._accumulate(other, "dot")

    def wedge(self, other: "Multivector") -> "Multivector":
        return self._accumulate(other, "wedge")

    def lcontract(self, other: "Multivector") -> "Multivector":
        return self._accumulate(other, "lcontract")

    def rcontract(self, other: "Multivector") -> "Multivector":
        return self._accumulate(other, "rcontract")

    def hestenes(self, other: "Multivector") -> "Multivector":
        return self._accumulate(other, "hestenes")

    def grade_part(self, k: int):
        for b in self.bundles:
            if b.grade == k:
                return b
        return ZERO

    def _inverse_or_none(self):
        """The inverse, or None when the element has none.

        Uses ``~M / (M ~M)`` when ``M ~M`` is a non-zero scalar (blades,
        versors). Any other element is inverted by solving its dense
        left-multiplication matrix.
        """
        from rung.ladder import canonicalize, is_number

        rev = self.reverse()
        norm = canonicalize(self.product(rev))
        if is_number(norm) and norm != 0:
            return rev.scale(1.0 / norm)
        if not self.bundles:
            return None

        from rung.dense import solve_inverse
        logger.debug(f"M~M is not a scalar for {self!r}; solving densely")
        return solve_inverse(self)

    @property
    def is_invertible(self) -> bool:
        """True exactly when :meth:`inverse` succeeds."""
        return self._inverse_or_none() is not None

    def inverse(self):
        """Multiplicative inverse.

        Raises:
            NotInvertibleError: If the element has no inverse.
        """
        inv = self._inverse_or_none()
        if inv is None:
            raise NotInvertibleError(f"{self!r} is not invertible")
        return inv

    def _same(self, other: "Multivector") -> bool:
        if len(self.bundles) != len(other.bundles):
            return False
        return all(a._same(b) for a, b in zip(self.bundles, other.bundles))

    def __repr__(self):
        return f"Multivector({list(self.bundles)!r})"

    def __str__(self):
        if not self.bundles:
            return "0"
        return " + ".join(str(b) for b in self.bundles)
