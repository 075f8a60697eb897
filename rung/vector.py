# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Dense grade-1 vectors.

Vectors generate the algebra, so they get a compact representation:
one coefficient per basis index. Scale, sum, negate and the inner
product work on the coefficient tuple directly; every other operation
goes through :class:`~rung.bundle.GradeBundle` and
:class:`~rung.multivector.Multivector`.
"""

from dataclasses import dataclass
from typing import Tuple

from rung.blade import Blade
from rung.bundle import GradeBundle
from rung.element import Element
from rung.errors import ArityMismatchError, NotInvertibleError
from rung.metric import current_metric
from rung.zero import ZERO


@dataclass(frozen=True, eq=False, repr=False)
class Vector(Element):
    """Grade-1 element stored as ``coefficients[i] * e_i``.

    Attributes:
        coefficients (Tuple[float, ...]): Coefficient per basis index.
    """

    coefficients: Tuple[float, ...] = ()

    @property
    def dim(self) -> int:
        return len(self.coefficients)

    @property
    def grade(self) -> int:
        return 1

    @property
    def grades(self):
        return [1]

    @property
    def is_scalar(self) -> bool:
        return False

    @property
    def is_monograde(self) -> bool:
        return True

    def check_arity(self, other: "Vector") -> None:
        """Raises ArityMismatchError unless both vectors have the same length."""
        if self.dim != other.dim:
            raise ArityMismatchError(self.dim, other.dim)

    def scale(self, s) -> "Vector":
        return Vector(tuple(c * s for c in self.coefficients))

    def negate(self) -> "Vector":
        return self.scale(-1)

    def add(self, other: "Vector") -> "Vector":
        """Coefficient-wise sum.

        Raises:
            ArityMismatchError: If the lengths differ.
        """
        self.check_arity(other)
        return Vector(tuple(a + b for a, b in zip(self.coefficients, other.coefficients)))

    def dot(self, other: "Vector") -> float:
        """``sum_i metric(i) * u_i * v_i``."""
        self.check_arity(other)
        metric = current_metric()
        return sum(
            metric.weight(i) * a * b
            for i, (a, b) in enumerate(zip(self.coefficients, other.coefficients))
        )

    def reverse(self) -> "Vector":
        # grade 1: reversion is the identity
        return self

    def involute(self) -> "Vector":
        return self.negate()

    @property
    def is_invertible(self) -> bool:
        return self.dot(self) != 0

    def inverse(self) -> "Vector":
        """``v / (v . v)``.

        Raises:
            NotInvertibleError: If ``v . v`` is zero (zero or null vectors).
        """
        sq = self.dot(self)
        if sq == 0:
            raise NotInvertibleError(f"{self!r} is not invertible")
        return self.scale(1.0 / sq)

    def grade_part(self, k: int):
        return self if k == 1 else ZERO

    def to_bundle(self) -> GradeBundle:
        """One grade-1 blade per non-zero coefficient."""
        return GradeBundle.of(*(
            Blade(c, (i,)) for i, c in enumerate(self.coefficients) if c != 0
        ))

    def _same(self, other: "Vector") -> bool:
        return self.to_bundle()._same(other.to_bundle())

    def __repr__(self):
        return f"Vector({list(self.coefficients)!r})"

    def __str__(self):
        return str(self.to_bundle())
