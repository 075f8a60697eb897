# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""The zero sentinel.

``ZERO`` is the additive identity at every grade at once. It has no
grade, absorbs every product and is neutral for every sum. It is not the
same thing as a grade-0 scalar zero, but compares equal to ``0``.
"""

from rung.element import Element
from rung.errors import NotInvertibleError


class Zero(Element):
    """Singleton type of :data:`ZERO`.

    ``is_scalar`` and ``is_monograde`` both report True by convention even
    though a gradeless zero is neither one grade nor another.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def grade(self):
        return None

    @property
    def grades(self):
        return []

    @property
    def is_scalar(self) -> bool:
        return True

    @property
    def is_monograde(self) -> bool:
        return True

    @property
    def is_invertible(self) -> bool:
        return False

    def scale(self, s):
        return self

    def negate(self):
        return self

    def reverse(self):
        return self

    def involute(self):
        return self

    def grade_part(self, k: int):
        return self

    def inverse(self):
        raise NotInvertibleError("ZERO has no inverse")

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Zero, ())

    def __repr__(self):
        return "ZERO"


ZERO = Zero()
