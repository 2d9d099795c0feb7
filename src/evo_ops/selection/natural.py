"""Natural (truncation) selection."""

import numpy as np

from evo_ops.options import SelectionOptions
from evo_ops.population import Fitness, as_fitness, as_population, preference, take_fitness
from evo_ops.utils import resolve_n


def natural(
    genomes: np.ndarray,
    fitness: Fitness,
    rng: np.random.Generator | None = None,
    *,
    n: int | float,
) -> tuple[np.ndarray, Fitness]:
    """Keep the n best individuals, best first.

    n is clamped to the population size. The result is deterministic; rng is
    accepted only so all selection operators share one call signature.
    The relative order of individuals with exactly equal fitness is not part
    of the contract.

    Args:
        genomes: Population, shape (N, L).
        fitness: Fitness of shape (N,) or a DominanceRank.
        rng: Unused.
        n: Number of individuals to keep, absolute or relative to N.

    Returns:
        Tuple of (selected genomes, selected fitness) with min(n, N) rows.

    Example:
        >>> genomes = np.arange(4).reshape(4, 1)
        >>> _, fit = natural(genomes, np.array([5, 1, 9, 2]), n=3)
        >>> fit
        array([9, 5, 2])
    """
    opts = SelectionOptions(n=n)
    genomes = as_population(genomes)
    fitness = as_fitness(fitness, genomes.shape[0])
    n = resolve_n(opts.n, genomes, limit_to_base=True)

    # Stable sort on negated scores gives descending order
    order = np.argsort(-preference(fitness), kind="stable")
    top_idx = order[:n]

    return genomes[top_idx], take_fitness(fitness, top_idx)
