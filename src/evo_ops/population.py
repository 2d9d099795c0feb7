"""Population data model shared by all evo-ops operators.

Populations are plain 2D numpy arrays (individuals x genes). This module
provides the validation helpers every operator runs before touching the
random number generator, and the DominanceRank type that keeps Pareto front
indices apart from ordinary fitness values:

- Fitness: 1D array, larger is better
- DominanceRank: 1D integer front indices, smaller is better

Both are accepted by the ordering-based selection operators, which read the
direction from the type instead of guessing it.
"""

from dataclasses import dataclass

import numpy as np

from evo_ops.errors import InvalidArgument, ShapeMismatch


@dataclass(frozen=True)
class DominanceRank:
    """Pareto front index of every individual in a population.

    Produced by fast non-dominated sorting. Front 0 is the non-dominated set,
    so ascending order is best-first, the opposite of a fitness array. The
    array is copied to int64 on construction, so the value stays immutable
    and negating it in preference() cannot wrap around.

    Attributes:
        values: Front indices, shape (n,), stored as int64.

    Example:
        >>> rank = DominanceRank(np.array([0, 1, 0]))
        >>> rank.n_fronts
        2
        >>> rank.front(0)
        array([0, 2])
    """

    values: np.ndarray

    def __post_init__(self) -> None:
        """Validate the rank array and store it as an int64 copy.

        Raises:
            TypeError: If values is not a numpy array.
            ShapeMismatch: If values is not 1D.
            InvalidArgument: If values has a non-integer dtype or negative entries.
        """
        if not isinstance(self.values, np.ndarray):
            raise TypeError(f"values must be a numpy array, got {type(self.values).__name__}")
        if self.values.ndim != 1:
            raise ShapeMismatch(f"rank values must be 1D, got shape {self.values.shape}")
        if not np.issubdtype(self.values.dtype, np.integer):
            raise InvalidArgument(f"rank values must have integer dtype, got {self.values.dtype}")
        if self.values.size and self.values.min() < 0:
            raise InvalidArgument(f"rank values must be non-negative, got minimum {self.values.min()}")
        object.__setattr__(self, "values", self.values.astype(np.int64))

    def __len__(self) -> int:
        return self.values.shape[0]

    @property
    def n_fronts(self) -> int:
        """Number of distinct fronts (0 for an empty rank)."""
        if self.values.size == 0:
            return 0
        return int(self.values.max()) + 1

    def front(self, index: int) -> np.ndarray:
        """Return the indices of individuals belonging to front ``index``."""
        return np.flatnonzero(self.values == index)


Fitness = np.ndarray | DominanceRank


def as_population(genomes: np.ndarray, name: str = "genomes") -> np.ndarray:
    """Return genomes as a 2D array, raising ShapeMismatch otherwise."""
    arr = np.asarray(genomes)
    if arr.ndim != 2:
        raise ShapeMismatch(f"{name} must be 2D (individuals x genes), got shape {arr.shape}")
    return arr


def as_fitness(fitness: Fitness, n: int) -> Fitness:
    """Validate a single-objective fitness (or DominanceRank) against n individuals.

    Args:
        fitness: Fitness array of shape (n,) or a DominanceRank.
        n: Number of individuals in the matching population.

    Returns:
        The fitness as an ndarray, or the DominanceRank unchanged.

    Raises:
        ShapeMismatch: If fitness is not 1D or its length differs from n.
    """
    if isinstance(fitness, DominanceRank):
        if len(fitness) != n:
            raise ShapeMismatch(f"rank has {len(fitness)} elements, expected {n} to match genomes")
        return fitness

    arr = np.asarray(fitness)
    if arr.ndim != 1:
        raise ShapeMismatch(f"fitness must be 1D for this operator, got shape {arr.shape}")
    if arr.shape[0] != n:
        raise ShapeMismatch(f"fitness has {arr.shape[0]} elements, expected {n} to match genomes")
    return arr


def as_objectives(objectives: np.ndarray, n: int) -> np.ndarray:
    """Validate a multi-objective fitness matrix of shape (n, n_obj)."""
    arr = np.asarray(objectives)
    if arr.ndim != 2:
        raise ShapeMismatch(f"objectives must be 2D (individuals x objectives), got shape {arr.shape}")
    if arr.shape[0] != n:
        raise ShapeMismatch(f"objectives has {arr.shape[0]} individuals, expected {n} to match genomes")
    return arr


def as_pairs(parents: np.ndarray) -> np.ndarray:
    """Validate a population laid out as adjacent mating pairs.

    Raises:
        ShapeMismatch: If parents is not 2D.
        InvalidArgument: If the number of rows is odd.
    """
    arr = as_population(parents, name="parents")
    if arr.shape[0] % 2 != 0:
        raise InvalidArgument(f"crossover requires an even number of parents, got {arr.shape[0]}")
    return arr


def broadcast_bounds(
    lower: float | np.ndarray, upper: float | np.ndarray, length: int
) -> tuple[np.ndarray, np.ndarray]:
    """Expand scalar or per-gene bounds to arrays of shape (length,).

    Raises:
        ShapeMismatch: If a per-gene bound does not have exactly ``length`` entries.
    """
    result = []
    for name, bound in (("lower_bound", lower), ("upper_bound", upper)):
        arr = np.asarray(bound, dtype=np.float64)
        if arr.ndim == 0:
            arr = np.full(length, float(arr))
        elif arr.shape != (length,):
            raise ShapeMismatch(f"{name} has shape {arr.shape}, expected ({length},) to match genome length")
        result.append(arr)
    return result[0], result[1]


def preference(fitness: Fitness) -> np.ndarray:
    """Return scores where larger always means better.

    Plain fitness is returned as is; a DominanceRank is negated.
    """
    if isinstance(fitness, DominanceRank):
        return -fitness.values
    return fitness


def take_fitness(fitness: Fitness, idx: np.ndarray) -> Fitness:
    """Gather fitness entries by index, keeping the DominanceRank type."""
    if isinstance(fitness, DominanceRank):
        return DominanceRank(fitness.values[idx])
    return fitness[idx]
