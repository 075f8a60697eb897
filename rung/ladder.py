# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Promotion, demotion and canonicalization across rungs.

The rungs, from simplest to most general::

    scalar / ZERO  ->  Blade  ->  GradeBundle  ->  Multivector
                       Vector ->  GradeBundle

Binary operations lift mismatched operands with :func:`unify` and hand
their raw result to :func:`canonicalize`, which strips zero terms and
demotes to the simplest exact kind.
"""

from typing import Iterator, Tuple

from rung.blade import Blade
from rung.bundle import GradeBundle
from rung.multivector import Multivector
from rung.vector import Vector
from rung.zero import ZERO, Zero

RUNG_KINDS = (Blade, GradeBundle, Multivector, Vector, Zero)


def is_number(x) -> bool:
    """True for native reals (``bool`` excluded)."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def strip_zeros(x):
    """Removes zero terms; anything left with no terms becomes ``0``.

    Args:
        x: Any rung value.

    Returns:
        The value without zero-coefficient blades or empty bundles.
    """
    if isinstance(x, Blade):
        return 0 if x.coefficient == 0 else x
    if isinstance(x, GradeBundle):
        blades = tuple(b for b in x.blades if b.coefficient != 0)
        if not blades:
            return 0
        if len(blades) == len(x.blades):
            return x
        return GradeBundle(x.grade, blades)
    if isinstance(x, Multivector):
        bundles = []
        for b in x.bundles:
            stripped = strip_zeros(b)
            if isinstance(stripped, GradeBundle):
                bundles.append(stripped)
        if not bundles:
            return 0
        return Multivector(tuple(bundles))
    if isinstance(x, Vector):
        return 0 if all(c == 0 for c in x.coefficients) else x
    return x


def promote(x):
    """Lifts *x* one rung toward :class:`Multivector`."""
    if is_number(x):
        return Blade(float(x), ())
    if x is ZERO:
        return Blade(0.0, ())
    if isinstance(x, Blade):
        return GradeBundle.of(x)
    if isinstance(x, Vector):
        return x.to_bundle()
    if isinstance(x, GradeBundle):
        return Multivector.from_bundle(x)
    if isinstance(x, Multivector):
        return x
    raise TypeError(f"not a rung value: {type(x).__name__}")


def to_multivector(x) -> Multivector:
    """Lifts *x* all the way to :class:`Multivector`."""
    while not isinstance(x, Multivector):
        x = promote(x)
    return x


def unify(a, b) -> Tuple[object, object]:
    """Brings two operands onto a common rung.

    Same kinds pass through untouched; any other pairing meets at
    :class:`Multivector`.
    """
    if type(a) is type(b):
        return a, b
    return to_multivector(a), to_multivector(b)


def demote(x):
    """Lowers *x* one rung when that loses nothing."""
    if isinstance(x, Multivector):
        if not x.bundles:
            return 0
        if len(x.bundles) == 1:
            return x.bundles[0]
        return x
    if isinstance(x, GradeBundle):
        if x.is_empty:
            return 0
        if len(x.blades) == 1:
            return x.blades[0]
        return x
    if isinstance(x, Blade) and not x.basis:
        return x.coefficient
    return x


def canonicalize(x):
    """Strips zeros, then demotes until nothing changes.

    Idempotent: ``canonicalize(canonicalize(x)) == canonicalize(x)``.
    """
    x = strip_zeros(x)
    while True:
        lower = demote(x)
        if lower is x:
            return x
        x = lower


def iter_blades(x) -> Iterator[Blade]:
    """Yields the blades making up *x* (nothing for ZERO or ``0``)."""
    if is_number(x):
        if x != 0:
            yield Blade(float(x), ())
    elif isinstance(x, Blade):
        yield x
    elif isinstance(x, GradeBundle):
        yield from x.blades
    elif isinstance(x, Vector):
        yield from x.to_bundle().blades
    elif isinstance(x, Multivector):
        for b in x.bundles:
            yield from b.blades
    elif x is not ZERO:
        raise TypeError(f"not a rung value: {type(x).__name__}")
