# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Metric configuration for the geometric product.

A metric maps a basis index to the signed weight ``e_i * e_i``. Indices
past the end of the weight sequence default to ``+1``, so the empty
metric is Euclidean in every dimension.

Two override levels exist:

- a durable process-wide default (:func:`set_metric` / :func:`reset_metric`);
- a scoped override (:func:`using_metric`) held in a
  :class:`contextvars.ContextVar`. Each thread and each asyncio task sees
  only its own scoped stack, and the previous metric is restored on
  every exit path of the ``with`` block.
"""

import math
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

from omegaconf import DictConfig, ListConfig, OmegaConf

from log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Metric:
    """Immutable sequence of signed basis weights.

    Attributes:
        weights (Tuple[float, ...]): ``weights[i]`` is the square of ``e_i``.
    """

    weights: Tuple[float, ...] = ()

    def __post_init__(self):
        weights = tuple(float(w) for w in self.weights)
        for w in weights:
            if not math.isfinite(w):
                raise ValueError(f"metric weights must be finite, got {self.weights!r}")
        object.__setattr__(self, "weights", weights)

    @classmethod
    def signature(cls, p: int, q: int = 0, r: int = 0) -> "Metric":
        """Builds the ``Cl(p, q, r)`` metric.

        ``p`` positive, then ``q`` negative, then ``r`` null basis vectors.
        """
        if p < 0 or q < 0 or r < 0:
            raise ValueError(f"signature counts must be non-negative, got ({p}, {q}, {r})")
        return cls((1.0,) * p + (-1.0,) * q + (0.0,) * r)

    def weight(self, index: int) -> float:
        """Signed weight of basis vector *index* (``+1`` when out of range)."""
        if 0 <= index < len(self.weights):
            return self.weights[index]
        return 1.0

    def __len__(self) -> int:
        return len(self.weights)


EUCLIDEAN = Metric()

MetricLike = Union[Metric, Iterable[float]]

_default: Metric = EUCLIDEAN
_scoped: ContextVar[Optional[Metric]] = ContextVar("rung_metric", default=None)


def as_metric(metric: MetricLike) -> Metric:
    """Coerces a weight sequence (or a Metric) into a :class:`Metric`."""
    if isinstance(metric, Metric):
        return metric
    if isinstance(metric, (DictConfig, ListConfig)):
        return metric_from_config(metric)
    return Metric(tuple(metric))


def current_metric() -> Metric:
    """The metric visible to the calling context."""
    scoped = _scoped.get()
    return _default if scoped is None else scoped


def metric_weight(index: int) -> float:
    """Signed weight of basis vector *index* under the active metric."""
    return current_metric().weight(index)


def set_metric(metric: MetricLike) -> Metric:
    """Replaces the process-wide default metric.

    Scoped overrides active in other contexts keep precedence there.

    Returns:
        Metric: The previous default.
    """
    global _default
    previous = _default
    _default = as_metric(metric)
    logger.debug(f"default metric set to {_default.weights}")
    return previous


def reset_metric() -> None:
    """Restores the Euclidean default metric."""
    global _default
    _default = EUCLIDEAN
    logger.debug("default metric reset")


@contextmanager
def using_metric(metric: MetricLike) -> Iterator[Metric]:
    """Overrides the metric for the dynamic extent of a ``with`` block.

    Example::

        with using_metric([-1, -1, -1, 1]):
            product(e0, e012)

    Args:
        metric: A :class:`Metric` or a sequence of weights.

    Yields:
        Metric: The metric in force inside the block.
    """
    active = as_metric(metric)
    token = _scoped.set(active)
    logger.debug(f"scoped metric {active.weights}")
    try:
        yield active
    finally:
        _scoped.reset(token)


def metric_from_config(cfg) -> Metric:
    """Builds a metric from an OmegaConf node.

    Accepted shapes::

        metric: {weights: [1, 1, -1]}
        metric: {signature: {p: 3, q: 1, r: 0}}
        metric: [1, 1, -1]

    ``weights`` takes precedence when both keys are set.

    Args:
        cfg: ``DictConfig``, ``ListConfig`` or a plain dict/list.

    Returns:
        Metric: The configured metric (Euclidean when empty).
    """
    if cfg is None:
        return EUCLIDEAN
    if isinstance(cfg, (DictConfig, ListConfig)):
        cfg = OmegaConf.to_container(cfg, resolve=True)
    if isinstance(cfg, (list, tuple)):
        return Metric(tuple(cfg))
    if not isinstance(cfg, dict):
        raise ValueError(f"unsupported metric config: {cfg!r}")

    weights = cfg.get("weights")
    sig = cfg.get("signature")
    if weights is not None:
        return Metric(tuple(weights))
    if sig is not None:
        return Metric.signature(int(sig.get("p", 0)), int(sig.get("q", 0)), int(sig.get("r", 0)))
    return EUCLIDEAN
