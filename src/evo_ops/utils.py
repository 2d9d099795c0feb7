"""Shared numeric helpers for the evo-ops operators.

- check_n / resolve_n: validate a selection size and turn it into a row count
- cumulative_sum: running total used to build the fitness "ruler"
- swap_adjacent_rows / duplicate_rows: the mating-pair layout helpers
- random_idx_without_replacement: distinct random integers per group
- cumulative_points_to_indices: map points on the ruler to individuals

Crossover operators treat rows 2k and 2k+1 as mates. Rather than looping over
pairs, they work on two aligned arrays, the parents and the parents with
adjacent rows swapped, and combine them through a per-pair random decision
that duplicate_rows spreads over both siblings.
"""

import math

import numpy as np

from evo_ops.errors import InvalidArgument


def check_n(n: int | float) -> None:
    """Raise InvalidArgument unless n is a valid absolute or relative selection size."""
    if isinstance(n, (bool, np.bool_)):
        raise InvalidArgument(f"n must be an int or a float, got {type(n).__name__}")
    if isinstance(n, (int, np.integer)):
        if n < 0:
            raise InvalidArgument(f"n must be non-negative, got {n}")
    elif isinstance(n, (float, np.floating)):
        if not 0.0 < n <= 1.0:
            raise InvalidArgument(f"relative n must be in (0, 1], got {n}")
    else:
        raise InvalidArgument(f"n must be an int or a float, got {type(n).__name__}")


def resolve_n(n: int | float, population: np.ndarray, limit_to_base: bool = False) -> int:
    """Resolve a selection size into an absolute number of individuals.

    Args:
        n: Absolute count (non-negative int) or fraction of the population
            size (float in (0, 1]). Fractions are rounded half-up.
        population: Population the size refers to, shape (N, L).
        limit_to_base: Clamp the result to N.

    Returns:
        The number of individuals to select.

    Raises:
        InvalidArgument: If n is negative, a fraction outside (0, 1], or not a number.

    Examples:
        >>> pop = np.zeros((10, 3))
        >>> resolve_n(4, pop)
        4
        >>> resolve_n(0.25, pop)
        3
        >>> resolve_n(20, pop, limit_to_base=True)
        10
    """
    check_n(n)
    base_n = np.shape(population)[0]

    if isinstance(n, (int, np.integer)):
        resolved = int(n)
    else:
        resolved = int(math.floor(n * base_n + 0.5))

    if limit_to_base:
        resolved = min(resolved, base_n)
    return resolved


def cumulative_sum(values: np.ndarray) -> np.ndarray:
    """Return the running total of a 1D array, ``result[i] = sum(values[:i + 1])``."""
    return np.cumsum(values, axis=0)


def swap_adjacent_rows(matrix: np.ndarray) -> np.ndarray:
    """Return a copy of matrix with rows 2k and 2k+1 exchanged.

    Examples:
        >>> swap_adjacent_rows(np.array([[1], [2], [3], [4]])).ravel()
        array([2, 1, 4, 3])
    """
    # k ^ 1 maps 2k <-> 2k+1
    idx = np.arange(matrix.shape[0]) ^ 1
    return matrix[idx]


def duplicate_rows(matrix: np.ndarray) -> np.ndarray:
    """Repeat every row twice, so row k becomes rows 2k and 2k+1.

    Examples:
        >>> duplicate_rows(np.array([[5], [2]])).ravel()
        array([5, 5, 2, 2])
    """
    return np.repeat(matrix, 2, axis=0)


def random_idx_without_replacement(
    rng: np.random.Generator,
    shape: tuple[int, ...],
    min: int,
    max: int,
    axis: int = -1,
) -> np.ndarray:
    """Draw distinct random integers from ``[min, max)`` within every group along axis.

    Each slice along ``axis`` holds ``shape[axis]`` different values, while
    separate slices are drawn independently.

    Args:
        rng: Random number generator.
        shape: Shape of the result.
        min: Inclusive lower end of the range.
        max: Exclusive upper end of the range.
        axis: Axis along which values must not repeat.

    Returns:
        Integer array of the requested shape.

    Raises:
        InvalidArgument: If a group is larger than the range.
    """
    shape = tuple(shape)
    axis = axis % len(shape)
    k = shape[axis]
    span = max - min
    if k > span:
        raise InvalidArgument(f"cannot draw {k} distinct values from range [{min}, {max})")

    # argsort of iid uniform keys is a uniformly random permutation of the range
    draw_shape = shape[:axis] + (span,) + shape[axis + 1 :]
    order = np.argsort(rng.random(draw_shape), axis=axis)
    return np.take(order, np.arange(k), axis=axis) + min


def cumulative_points_to_indices(cumulative: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Map points on a cumulative ruler to the bins they fall into.

    For each point returns the index of the first cumulative entry strictly
    greater than it. Bins of zero width can never be hit. A point at or past
    the total is mapped to the last bin of non-zero width.

    Args:
        cumulative: Non-decreasing running total, shape (N,).
        points: Points on the ruler, any shape.

    Returns:
        Integer array with the shape of points.

    Examples:
        >>> cumulative_points_to_indices(np.array([1.0, 1.0, 4.0]), np.array([0.5, 1.0, 3.9]))
        array([0, 2, 2])
    """
    cumulative = np.asarray(cumulative)
    idx = np.searchsorted(cumulative, points, side="right")
    last = np.searchsorted(cumulative, cumulative[-1], side="left")
    return np.minimum(idx, last)
