# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Polymorphic operator entry points.

Every function accepts any rung value: native reals, :data:`ZERO`,
:class:`Blade`, :class:`GradeBundle`, :class:`Multivector` and
:class:`Vector`. Dispatch follows one pattern:

1. ZERO and plain-number cases are settled up front.
2. Mismatched kinds are unified (ultimately at Multivector).
3. The kind's own method computes the raw result.
4. Sums, differences, products, quotients and grade-selective products
   are canonicalized before returning.
"""

import operator
from typing import Iterable

from rung.blade import Blade, reversion_sign
from rung.errors import NotInvertibleError
from rung.multivector import Multivector
from rung.ladder import RUNG_KINDS, canonicalize, is_number, to_multivector, unify
from rung.validation import check_basis, check_coefficient
from rung.vector import Vector
from rung.zero import ZERO


def is_algebraic(x) -> bool:
    """True for anything the operators accept."""
    return is_number(x) or isinstance(x, RUNG_KINDS)


def _lift(x):
    if is_number(x):
        return Blade(float(x), ())
    if not isinstance(x, RUNG_KINDS):
        raise TypeError(f"not a rung value: {type(x).__name__}")
    return x


def _require(*xs) -> None:
    for x in xs:
        _lift(x)


def _dispatch(a, b, method: str):
    a, b = unify(_lift(a), _lift(b))
    return getattr(a, method)(b)


# ── Constructors ──────────────────────────────────────────────────────

def blade(coefficient, indices: Iterable[int] = ()) -> Blade:
    """Weighted basis blade; *indices* are sorted, not deduplicated.

    Args:
        coefficient: Real weight.
        indices: Basis indices, duplicate-free.

    Returns:
        Blade: ``coefficient * e_{indices}``.
    """
    check_coefficient(coefficient)
    basis = tuple(sorted(indices))
    check_basis(basis)
    return Blade(float(coefficient), basis)


def vector(coefficients: Iterable[float]) -> Vector:
    """Grade-1 vector with ``coefficients[i]`` on ``e_i``."""
    coeffs = tuple(coefficients)
    for c in coeffs:
        check_coefficient(c)
    return Vector(tuple(float(c) for c in coeffs))


# ── Unary operators ───────────────────────────────────────────────────

def scale(x, s):
    """Multiplies every coefficient of *x* by the real *s* (not canonicalized)."""
    if is_number(x):
        return x * s
    return _lift(x).scale(s)


def negate(x):
    return scale(x, -1)


def reverse(x):
    """Reversion: grade-``k`` parts pick up ``(-1)^(k(k-1)/2)``."""
    if is_number(x):
        return x
    return _lift(x).reverse()


def involute(x):
    """Grade involution: grade-``k`` parts pick up ``(-1)^k``."""
    if is_number(x):
        return x
    return _lift(x).involute()


def inverse(x):
    """Multiplicative inverse.

    Raises:
        NotInvertibleError: For ZERO, numeric zero, or any element whose
            self inner product vanishes.
    """
    if is_number(x):
        if x == 0:
            raise NotInvertibleError("0 has no inverse")
        return 1.0 / x
    return _lift(x).inverse()


# ── Binary operators ──────────────────────────────────────────────────

def add(a, b):
    """Sum. ZERO is neutral."""
    if a is ZERO:
        return canonicalize(_checked(b))
    if b is ZERO:
        return canonicalize(_checked(a))
    if is_number(a) and is_number(b):
        return a + b
    return canonicalize(_dispatch(a, b, "add"))


def sub(a, b):
    """Difference ``a - b``."""
    return add(a, negate(b))


def product(a, b):
    """Geometric product. ZERO absorbs; reals scale."""
    if a is ZERO or b is ZERO:
        _require(a, b)
        return ZERO
    if is_number(a) and is_number(b):
        return a * b
    if is_number(a):
        return canonicalize(_lift(b).scale(a))
    if is_number(b):
        return canonicalize(_lift(a).scale(b))
    a, b = unify(_lift(a), _lift(b))
    if isinstance(a, Vector):
        a.check_arity(b)
        a, b = to_multivector(a), to_multivector(b)
    return canonicalize(a.product(b))


def quotient(a, b):
    """``a * inverse(b)``."""
    return canonicalize(product(a, inverse(b)))


def _graded(a, b, method: str, number_op):
    if a is ZERO or b is ZERO:
        _require(a, b)
        return ZERO
    if is_number(a) and is_number(b):
        return number_op(a, b)
    a, b = unify(_lift(a), _lift(b))
    if isinstance(a, Vector):
        a.check_arity(b)
        if method != "dot":
            a, b = to_multivector(a), to_multivector(b)
    result = getattr(a, method)(b)
    if result is ZERO:
        return ZERO
    return canonicalize(result)


def dot(a, b):
    """Symmetric inner product: grade ``|ga - gb|`` of each partial product."""
    return _graded(a, b, "dot", operator.mul)


def wedge(a, b):
    """Outer product: grade ``ga + gb`` of each partial product."""
    return _graded(a, b, "wedge", operator.mul)


def lcontract(a, b):
    """Left contraction: grade ``gb - ga``, ZERO where negative."""
    return _graded(a, b, "lcontract", operator.mul)


def rcontract(a, b):
    """Right contraction: grade ``ga - gb``, ZERO where negative."""
    return _graded(a, b, "rcontract", operator.mul)


def hestenes(a, b):
    """Hestenes inner product: the dot product, but ZERO against scalars."""
    return _graded(a, b, "hestenes", lambda x, y: ZERO)


# ── Queries ───────────────────────────────────────────────────────────

def grade(x):
    """Single grade; a list of grades for a Multivector; None for ZERO."""
    if is_number(x):
        return 0
    x = _lift(x)
    if x is ZERO:
        return None
    if isinstance(x, Multivector):
        return x.grades
    grades_ = x.grades
    return grades_[0] if grades_ else None


def grades(x):
    """All grades present in *x*, always as a list."""
    if is_number(x):
        return [0]
    return list(_lift(x).grades)


def grade_part(x, k: int):
    """The grade-*k* part of *x*, or ZERO when there is none."""
    if is_number(x):
        return x if k == 0 else ZERO
    return _lift(x).grade_part(k)


def is_scalar(x) -> bool:
    if is_number(x):
        return True
    return _lift(x).is_scalar


def is_monograde(x) -> bool:
    if is_number(x):
        return True
    return _lift(x).is_monograde


def is_invertible(x) -> bool:
    if is_number(x):
        return x != 0
    return _lift(x).is_invertible


def equals(a, b) -> bool:
    """Exact equality of canonical forms across rungs.

    ZERO equals numeric zero and anything that canonicalizes to it.
    Vectors compare by the element they denote, so lengths may differ
    when the extra coefficients are zero: ``vector([1, 0]) == vector([1]) == e0``.
    """
    ca, cb = canonicalize(_checked(a)), canonicalize(_checked(b))
    if ca is ZERO or cb is ZERO:
        other = cb if ca is ZERO else ca
        return other is ZERO or (is_number(other) and other == 0)
    if is_number(ca) or is_number(cb):
        return is_number(ca) and is_number(cb) and ca == cb
    if type(ca) is not type(cb):
        ca, cb = to_multivector(ca), to_multivector(cb)
    return ca._same(cb)


def _checked(x):
    if is_number(x):
        return x
    return _lift(x)


# ── Derived ───────────────────────────────────────────────────────────

def scalar_product(a, b):
    """``<a b>_0``, canonicalized."""
    return canonicalize(grade_part(product(a, b), 0))


def pseudoscalar(dim: int) -> Blade:
    """Unit blade spanning ``e_0 ... e_{dim-1}``."""
    return Blade(1.0, tuple(range(dim)))


def inverse_pseudoscalar(dim: int) -> Blade:
    """Pseudoscalar scaled by the reversion sign of grade *dim*."""
    return pseudoscalar(dim).scale(reversion_sign(dim))


def dual(a, dim: int):
    """``a * inverse_pseudoscalar(dim)``."""
    return product(a, inverse_pseudoscalar(dim))
