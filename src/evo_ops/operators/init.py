"""Random population initializers."""

import numpy as np

from evo_ops.errors import InvalidArgument


def _check_size(n: int, length: int) -> None:
    for name, value in (("n", n), ("length", length)):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise InvalidArgument(f"{name} must be non-negative, got {value}")


def real_random_uniform(n: int, length: int, rng: np.random.Generator, *, min: float, max: float) -> np.ndarray:
    """Create n real-valued genomes with genes drawn uniformly from [min, max).

    Example:
        >>> genomes = real_random_uniform(100, 3, np.random.default_rng(0), min=-5.12, max=5.12)
        >>> genomes.shape
        (100, 3)
    """
    _check_size(n, length)
    if min > max:
        raise InvalidArgument(f"min ({min}) must not exceed max ({max})")
    return rng.uniform(min, max, size=(n, length))


def binary_random_uniform(n: int, length: int, rng: np.random.Generator) -> np.ndarray:
    """Create n binary genomes, each gene 0 or 1 with equal chance."""
    _check_size(n, length)
    return rng.integers(0, 2, size=(n, length))
