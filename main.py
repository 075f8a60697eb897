# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Rung CLI Entry Point.

Loads a metric from the Hydra config and runs one of the small
inspection tasks against it.
"""

from itertools import combinations

import hydra
from omegaconf import DictConfig

from log import get_logger
from rung import (
    Blade,
    inverse,
    is_invertible,
    metric_from_config,
    metric_weight,
    product,
    using_metric,
)

logger = get_logger(__name__)


def basis_blades(dim: int):
    """Every unit basis blade of a ``dim``-dimensional algebra, grade by grade."""
    for k in range(dim + 1):
        for basis in combinations(range(dim), k):
            yield Blade(1.0, basis)


def run_cayley(cfg: DictConfig) -> dict:
    """Logs the basis-blade multiplication table.

    Returns:
        dict: ``{(left_basis, right_basis): product}``.
    """
    blades = list(basis_blades(cfg.dim))
    table = {}
    for l in blades:
        row = []
        for r in blades:
            p = product(l, r)
            table[(l.basis, r.basis)] = p
            row.append(str(p))
        logger.info(f"{str(l):>12} | " + "  ".join(f"{c:>12}" for c in row))
    return table


def run_sanity(cfg: DictConfig) -> int:
    """Checks ``e_i e_i = metric(i)`` and ``B B^-1 = 1`` for every blade.

    Returns:
        int: Number of failed checks.
    """
    failures = 0
    for i in range(cfg.dim):
        e = Blade(1.0, (i,))
        sq = product(e, e)
        if sq != metric_weight(i):
            logger.warning(f"e{i}*e{i} = {sq!r}, expected {metric_weight(i)}")
            failures += 1
    for b in basis_blades(cfg.dim):
        if not is_invertible(b):
            logger.info(f"{b!r} is not invertible under this metric")
            continue
        if product(b, inverse(b)) != 1:
            logger.warning(f"{b!r} * inverse != 1")
            failures += 1
    logger.info(f"sanity: {failures} failure(s)")
    return failures


TASKS = {
    'cayley': run_cayley,
    'sanity': run_sanity,
}


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Runs ``cfg.task`` under the configured metric.

    Args:
        cfg (DictConfig): The plan.
    """
    task_name = cfg.task
    if task_name not in TASKS:
        raise ValueError(f"Unknown task: {task_name}. Available: {list(TASKS.keys())}")

    metric = metric_from_config(cfg.get('metric'))
    logger.info(f"task={task_name} dim={cfg.dim} metric={metric.weights}")
    with using_metric(metric):
        return TASKS[task_name](cfg)


if __name__ == "__main__":
    main()
