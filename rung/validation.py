# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Lightweight precondition checks for rung values.

All checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable even without the -O flag.
"""

VALIDATE = True


def check_basis(basis, name: str = "basis") -> None:
    """Assert *basis* is a sorted, duplicate-free run of non-negative ints.

    Repeated indices are not repaired: a blade built from ``[0, 0]`` is a
    caller error, not ``e0 * e0``.
    """
    if not VALIDATE:
        return
    for i in basis:
        assert isinstance(i, int) and i >= 0, (
            f"{name}: indices must be non-negative ints, got {basis!r}"
        )
    assert all(a < b for a, b in zip(basis, basis[1:])), (
        f"{name}: indices must be duplicate-free, got {basis!r}"
    )


def check_coefficient(c, name: str = "coefficient") -> None:
    """Assert *c* is a real number (``bool`` excluded)."""
    if not VALIDATE:
        return
    assert isinstance(c, (int, float)) and not isinstance(c, bool), (
        f"{name}: expected a real number, got {type(c).__name__}"
    )
