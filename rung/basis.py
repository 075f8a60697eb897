# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Named unit basis blades for low-dimensional work."""

from rung.blade import Blade

e0 = Blade(1.0, (0,))
e1 = Blade(1.0, (1,))
e2 = Blade(1.0, (2,))
e01 = Blade(1.0, (0, 1))
e02 = Blade(1.0, (0, 2))
e12 = Blade(1.0, (1, 2))
e012 = Blade(1.0, (0, 1, 2))

__all__ = ["e0", "e1", "e2", "e01", "e02", "e12", "e012"]
