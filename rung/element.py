# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Operator overloading shared by every rung kind.

Each dunder defers to :mod:`rung.ops`, which owns dispatch, promotion
and canonicalization. ``ops`` is imported lazily because it depends on
every rung module.
"""


class Element:
    """Mixin giving rung values natural syntax.

    ``A * B`` geometric product, ``A ^ B`` wedge, ``A | B`` dot,
    ``A << B`` left contraction, ``A >> B`` right contraction,
    ``~A`` reversion, ``A / B`` quotient.
    """

    __slots__ = ()

    def __add__(self, other):
        from rung import ops
        return ops.add(self, other)

    def __radd__(self, other):
        from rung import ops
        return ops.add(other, self)

    def __sub__(self, other):
        from rung import ops
        return ops.sub(self, other)

    def __rsub__(self, other):
        from rung import ops
        return ops.sub(other, self)

    def __mul__(self, other):
        from rung import ops
        return ops.product(self, other)

    def __rmul__(self, other):
        from rung import ops
        return ops.product(other, self)

    def __truediv__(self, other):
        from rung import ops
        return ops.quotient(self, other)

    def __rtruediv__(self, other):
        from rung import ops
        return ops.quotient(other, self)

    def __xor__(self, other):
        from rung import ops
        return ops.wedge(self, other)

    def __rxor__(self, other):
        from rung import ops
        return ops.wedge(other, self)

    def __or__(self, other):
        from rung import ops
        return ops.dot(self, other)

    def __ror__(self, other):
        from rung import ops
        return ops.dot(other, self)

    def __lshift__(self, other):
        from rung import ops
        return ops.lcontract(self, other)

    def __rshift__(self, other):
        from rung import ops
        return ops.rcontract(self, other)

    def __neg__(self):
        from rung import ops
        return ops.negate(self)

    def __pos__(self):
        return self

    def __invert__(self):
        from rung import ops
        return ops.reverse(self)

    def __eq__(self, other):
        from rung import ops
        if not ops.is_algebraic(other):
            return NotImplemented
        return ops.equals(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None
