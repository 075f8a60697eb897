# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Exception hierarchy for the rung engine.

Algebraic preconditions (grade compatibility, invertibility, matching
vector arity) are the caller's responsibility. Violations surface as one
of the errors below at the operation that detects them.
"""


class RungError(Exception):
    """Base class for all engine errors."""


class GradeMismatchError(RungError, ValueError):
    """A blade or bundle was absorbed into a bundle of another grade."""

    def __init__(self, expected: int, got: int):
        super().__init__(f"cannot absorb grade {got} into a grade-{expected} bundle")
        self.expected = expected
        self.got = got


class NotInvertibleError(RungError, ZeroDivisionError):
    """Inverse or quotient of an element whose self inner product is zero."""


class ArityMismatchError(RungError, ValueError):
    """Two vectors with different coefficient counts were combined."""

    def __init__(self, left: int, right: int):
        super().__init__(f"vector length mismatch: {left} vs {right}")
        self.left = left
        self.right = right
