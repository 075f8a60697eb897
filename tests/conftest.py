# Rung: Geometric Algebra Rung Ladder (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

import pytest

from rung.metric import reset_metric


@pytest.fixture(autouse=True)
def euclidean_default():
    """Every test starts and ends on the Euclidean default metric."""
    reset_metric()
    yield
    reset_metric()
