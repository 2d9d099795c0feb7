"""Shared test fixtures for evo-ops tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- real_parents: Real-valued population of mating pairs
- binary_parents: Pairs of all-zero and all-one genomes
- FixedDrawRng: Generator stand-in returning predetermined index draws
"""

import numpy as np
import pytest


class FixedDrawRng:
    """Stand-in for np.random.Generator whose integer draws are scripted.

    Each call to ``integers`` returns the next queued array, which makes
    the outcome of tournaments fully predictable.
    """

    def __init__(self, *draws: list[int]) -> None:
        self._draws = [np.asarray(d, dtype=np.int64) for d in draws]
        self.calls: list[tuple[int, int, int]] = []

    def integers(self, low: int, high: int, size: int) -> np.ndarray:
        self.calls.append((low, high, size))
        return self._draws.pop(0)


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def real_parents() -> np.ndarray:
    """Six real-valued parents (three mating pairs) with five genes in [0, 1)."""
    return np.random.default_rng(7).uniform(0.0, 1.0, size=(6, 5))


@pytest.fixture
def binary_parents() -> np.ndarray:
    """Four mating pairs, each an all-zero genome followed by an all-one genome.

    With these parents every offspring gene tells where it came from.
    """
    n_pairs, length = 4, 10
    zeros = np.zeros((n_pairs, length), dtype=np.int64)
    ones = np.ones((n_pairs, length), dtype=np.int64)
    return np.stack([zeros, ones], axis=1).reshape(2 * n_pairs, length)


@pytest.fixture
def fixed_draw_rng() -> type[FixedDrawRng]:
    """Provide the FixedDrawRng class for scripted tournaments."""
    return FixedDrawRng
