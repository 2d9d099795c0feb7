"""Binary tournament selection."""

import numpy as np

from evo_ops.errors import InvalidArgument
from evo_ops.options import SelectionOptions
from evo_ops.population import Fitness, as_fitness, as_population, preference, take_fitness
from evo_ops.utils import resolve_n


def tournament(
    genomes: np.ndarray,
    fitness: Fitness,
    rng: np.random.Generator,
    *,
    n: int | float,
) -> tuple[np.ndarray, Fitness]:
    """Select individuals with tournaments of size 2.

    Draws two independent index vectors of length n and keeps the better
    contestant of every pair. The first contestant wins only when strictly
    better, so ties go to the second one. Individuals may be picked several
    times or not at all.

    Accepts a plain fitness array (larger is better) or a DominanceRank
    (smaller is better).

    Args:
        genomes: Population, shape (N, L).
        fitness: Fitness of shape (N,) or a DominanceRank.
        rng: Random number generator.
        n: Number of individuals to select, absolute or relative to N.

    Returns:
        Tuple of (selected genomes, selected fitness) with n rows.

    Raises:
        InvalidArgument: If n is invalid or the population is empty.
        ShapeMismatch: If genomes and fitness do not agree.

    Example:
        >>> rng = np.random.default_rng(0)
        >>> genomes = np.array([[0.0], [1.0], [2.0]])
        >>> selected, fit = tournament(genomes, np.array([0.0, 1.0, 2.0]), rng, n=4)
        >>> selected.shape
        (4, 1)
    """
    opts = SelectionOptions(n=n)
    genomes = as_population(genomes)
    fitness = as_fitness(fitness, genomes.shape[0])
    n = resolve_n(opts.n, genomes)

    base_n = genomes.shape[0]
    if base_n == 0:
        raise InvalidArgument("cannot select from an empty population")

    idx1 = rng.integers(0, base_n, size=n)
    idx2 = rng.integers(0, base_n, size=n)

    scores = preference(fitness)
    wins = scores[idx1] > scores[idx2]
    idx = np.where(wins, idx1, idx2)

    return genomes[idx], take_fitness(fitness, idx)
