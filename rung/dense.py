# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Dense coefficient tensors for rung values.

Bridges the sparse rungs to ``torch`` tensors in the bitmask layout:
the basis blade ``e_{i1...ik}`` lives at index ``sum(1 << i)``, so
``e_i`` sits at ``1 << i`` and the scalar at index 0.

The Cayley table built here uses the same merge-sign and metric-weight
rules as :meth:`rung.blade.Blade.product`, which makes it a cross-check
for the sparse engine and the solver behind general multivector inverses.
"""

from typing import Optional, Tuple

import torch

from rung.blade import Blade
from rung.errors import NotInvertibleError
from rung.ladder import canonicalize, iter_blades
from rung.metric import MetricLike, as_metric, current_metric
from rung.multivector import Multivector

_CACHED_TABLES = {}


def blade_index(basis) -> int:
    """Bitmask index of a basis tuple."""
    index = 0
    for i in basis:
        index |= 1 << i
    return index


def basis_of(index: int) -> Tuple[int, ...]:
    """Basis tuple of a bitmask index."""
    basis = []
    bit = 0
    while index:
        if index & 1:
            basis.append(bit)
        index >>= 1
        bit += 1
    return tuple(basis)


def dimension_of(x) -> int:
    """Smallest ``n`` whose algebra holds every blade of *x*."""
    n = 0
    for b in iter_blades(x):
        if b.basis:
            n = max(n, b.basis[-1] + 1)
    return n


def to_tensor(x, n: Optional[int] = None, dtype=torch.float64) -> torch.Tensor:
    """Dense coefficients of *x*.

    Args:
        x: Any rung value.
        n (int, optional): Number of basis vectors. Defaults to the
            smallest dimension holding *x*.
        dtype: Tensor dtype.

    Returns:
        torch.Tensor: Coefficients ``[2^n]``.
    """
    n = dimension_of(x) if n is None else n
    t = torch.zeros(1 << n, dtype=dtype)
    for b in iter_blades(x):
        idx = blade_index(b.basis)
        if idx >= t.shape[-1]:
            raise ValueError(f"blade {b!r} does not fit in {n} dimensions")
        t[idx] += b.coefficient
    return t


def from_tensor(t: torch.Tensor, atol: float = 0.0):
    """Canonical rung value from a dense coefficient vector.

    Args:
        t (torch.Tensor): Coefficients ``[2^n]``.
        atol (float): Entries with ``|c| <= atol`` are dropped.

    Returns:
        The canonical value (a real, a Blade, a GradeBundle or a Multivector).
    """
    assert t.ndim == 1, f"expected a 1-D coefficient tensor, got shape {tuple(t.shape)}"
    mv = Multivector()
    for idx, c in enumerate(t.tolist()):
        if abs(c) > atol:
            mv = mv.absorb(Multivector.from_blade(Blade(c, basis_of(idx))))
    return canonicalize(mv)


def _swap_table(n: int) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """Metric-free part of the Cayley table, cached per dimension.

    Returns:
        ``indices [D, D]``, ``commutator_sign [D, D]`` and the shared-bit
        mask ``A & B``.
    """
    if n in _CACHED_TABLES:
        return _CACHED_TABLES[n]

    dim = 1 << n
    indices = torch.arange(dim)
    A = indices.unsqueeze(1)  # Row
    B = indices.unsqueeze(0)  # Col

    # Commutation sign: each set bit i of A hops over the bits of B below i
    swap_counts = torch.zeros((dim, dim), dtype=torch.long)
    for i in range(n):
        a_i = (A >> i) & 1
        b_lower = B & ((1 << i) - 1)
        b_lower_cnt = torch.zeros_like(B)
        temp_b = b_lower
        for _ in range(n):
            b_lower_cnt += temp_b & 1
            temp_b = temp_b >> 1
        swap_counts += a_i * b_lower_cnt
    commutator_sign = 1.0 - 2.0 * (swap_counts % 2).to(torch.float64)

    table = (A ^ B, commutator_sign, A & B)
    _CACHED_TABLES[n] = table
    return table


def cayley_table(n: int, metric: Optional[MetricLike] = None) -> Tuple[torch.Tensor, torch.Tensor]:
    """Precompute result indices and signs of every basis-blade product.

    ``e_A * e_B = signs[A, B] * e_{indices[A, B]}`` with
    ``indices = A XOR B``. Only the metric-free swap signs are cached;
    metric weights are applied per call.

    Args:
        n (int): Number of basis vectors.
        metric (optional): Defaults to the active metric.

    Returns:
        Tuple[torch.Tensor, torch.Tensor]: ``indices [D, D]`` (long) and
        ``signs [D, D]`` (float64), ``D = 2^n``.
    """
    metric = current_metric() if metric is None else as_metric(metric)
    indices, commutator_sign, intersection = _swap_table(n)

    # Metric weight: every shared basis vector contributes e_i * e_i
    metric_sign = torch.ones_like(commutator_sign)
    for i in range(n):
        shared = ((intersection >> i) & 1).bool()
        metric_sign = torch.where(shared, metric_sign * metric.weight(i), metric_sign)

    return indices, commutator_sign * metric_sign


def geometric_product(A: torch.Tensor, B: torch.Tensor, n: int,
                      metric: Optional[MetricLike] = None) -> torch.Tensor:
    """Geometric product of dense coefficient tensors.

    Args:
        A (torch.Tensor): Left operand [..., 2^n].
        B (torch.Tensor): Right operand [..., 2^n].
        n (int): Number of basis vectors.
        metric (optional): Defaults to the active metric.

    Returns:
        torch.Tensor: The product AB [..., 2^n].
    """
    idx, signs = cayley_table(n, metric)
    assert A.shape[-1] == B.shape[-1] == idx.shape[0], (
        f"last dim should be {idx.shape[0]}, got {A.shape[-1]} and {B.shape[-1]}"
    )
    # gp_signs[i, k] = signs[i, i ^ k]
    gp_signs = torch.gather(signs, 1, idx).to(dtype=A.dtype)

    # B_gathered[..., i, k] = B[..., i ^ k]
    B_gathered = B[..., idx]

    # result[..., k] = sum_i A[..., i] * B[..., i ^ k] * signs[i, i ^ k]
    return (A.unsqueeze(-1) * B_gathered * gp_signs).sum(dim=-2)


def left_matrix(x, n: Optional[int] = None, metric: Optional[MetricLike] = None) -> torch.Tensor:
    """Matrix ``L`` with ``L @ to_tensor(y) == to_tensor(x * y)``."""
    n = dimension_of(x) if n is None else n
    coeffs = to_tensor(x, n)
    idx, signs = cayley_table(n, metric)
    dim = 1 << n
    L = torch.zeros(dim, dim, dtype=torch.float64)
    # column j holds x * e_j: x_i contributes to row i ^ j
    for i in range(dim):
        if coeffs[i] != 0:
            L[idx[i], torch.arange(dim)] += coeffs[i] * signs[i]
    return L


def solve_inverse(x, n: Optional[int] = None, atol: float = 1e-12):
    """Inverse of *x* from its left-multiplication matrix.

    Returns:
        The canonical inverse, or None when the matrix is singular.
    """
    n = dimension_of(x) if n is None else n
    L = left_matrix(x, n)
    rhs = torch.zeros(1 << n, dtype=torch.float64)
    rhs[0] = 1.0
    try:
        y = torch.linalg.solve(L, rhs)
    except torch.linalg.LinAlgError:
        return None
    if not torch.isfinite(y).all():
        return None
    return from_tensor(y, atol=atol)


def dense_inverse(x, n: Optional[int] = None, atol: float = 1e-12):
    """Like :func:`solve_inverse`, but faults on singular input.

    Raises:
        NotInvertibleError: If the matrix is singular.
    """
    inv = solve_inverse(x, n, atol)
    if inv is None:
        raise NotInvertibleError(f"{x!r} is not invertible")
    return inv
