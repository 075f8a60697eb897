# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Rung: a geometric algebra engine built on a ladder of representations.

Provides blades, grade bundles, multivectors, vectors and the zero
sentinel, the promotion/canonicalization ladder that joins them, the
scoped metric configuration, and a dense ``torch`` bridge.
"""

__version__ = "0.1.0"

from .blade import Blade, reversion_sign, involution_sign
from .bundle import GradeBundle
from .multivector import Multivector
from .vector import Vector
from .zero import ZERO
from .errors import RungError, GradeMismatchError, NotInvertibleError, ArityMismatchError

from .metric import (
    Metric,
    current_metric,
    metric_weight,
    set_metric,
    reset_metric,
    using_metric,
    metric_from_config,
)

from .dense import to_tensor, from_tensor, cayley_table

from .ladder import canonicalize, strip_zeros, promote, demote, unify, to_multivector

from .ops import (
    blade,
    vector,
    scale,
    add,
    negate,
    reverse,
    involute,
    sub,
    product,
    inverse,
    quotient,
    dot,
    wedge,
    lcontract,
    rcontract,
    hestenes,
    equals,
    is_scalar,
    is_invertible,
    is_monograde,
    grade,
    grades,
    grade_part,
    scalar_product,
    pseudoscalar,
    inverse_pseudoscalar,
    dual,
)

__all__ = [
    "__version__",
    # rungs
    "Blade",
    "GradeBundle",
    "Multivector",
    "Vector",
    "ZERO",
    "reversion_sign",
    "involution_sign",
    # errors
    "RungError",
    "GradeMismatchError",
    "NotInvertibleError",
    "ArityMismatchError",
    # metric
    "Metric",
    "current_metric",
    "metric_weight",
    "set_metric",
    "reset_metric",
    "using_metric",
    "metric_from_config",
    # dense
    "to_tensor",
    "from_tensor",
    "cayley_table",
    # ladder
    "canonicalize",
    "strip_zeros",
    "promote",
    "demote",
    "unify",
    "to_multivector",
    # operators
    "blade",
    "vector",
    "scale",
    "add",
    "negate",
    "reverse",
    "involute",
    "sub",
    "product",
    "inverse",
    "quotient",
    "dot",
    "wedge",
    "lcontract",
    "rcontract",
    "hestenes",
    # queries
    "equals",
    "is_scalar",
    "is_invertible",
    "is_monograde",
    "grade",
    "grades",
    "grade_part",
    # derived
    "scalar_product",
    "pseudoscalar",
    "inverse_pseudoscalar",
    "dual",
]
