"""Fitness-proportionate selection: roulette wheel and stochastic universal sampling.

Both operators lay the individuals out on a "cumulative ruler" where each
one owns a segment as long as its fitness, then pick the individuals whose
segments contain random points. Individuals with fitness <= 0 own no segment
and are never selected.
"""

import numpy as np

from evo_ops.errors import InvalidArgument
from evo_ops.options import SelectionOptions
from evo_ops.population import DominanceRank, Fitness, as_fitness, as_population
from evo_ops.utils import cumulative_points_to_indices, cumulative_sum, resolve_n


def _prepare(genomes: np.ndarray, fitness: Fitness, n: int | float, name: str) -> tuple[np.ndarray, np.ndarray, int]:
    opts = SelectionOptions(n=n)
    genomes = as_population(genomes)
    if isinstance(fitness, DominanceRank):
        raise InvalidArgument(f"{name} selection needs fitness weights, front ranks cannot be used as weights")
    fitness = as_fitness(fitness, genomes.shape[0])
    n = resolve_n(opts.n, genomes)

    if genomes.shape[0] == 0:
        raise InvalidArgument("cannot select from an empty population")

    weights = np.maximum(fitness, 0)
    cumulative = cumulative_sum(weights)
    if not cumulative[-1] > 0:
        raise InvalidArgument(f"{name} selection requires at least one individual with positive fitness")

    return genomes, cumulative, n


def roulette(
    genomes: np.ndarray,
    fitness: np.ndarray,
    rng: np.random.Generator,
    *,
    n: int | float,
) -> tuple[np.ndarray, np.ndarray]:
    """Draw n individuals with probability proportional to their fitness.

    Every draw is independent and with replacement.

    Args:
        genomes: Population, shape (N, L).
        fitness: Fitness, shape (N,). Larger is better.
        rng: Random number generator.
        n: Number of individuals to select, absolute or relative to N.

    Returns:
        Tuple of (selected genomes, selected fitness) with n rows.

    Raises:
        InvalidArgument: If n is invalid, fitness is a DominanceRank, or no
            individual has positive fitness.
        ShapeMismatch: If genomes and fitness do not agree.

    References:
        https://en.wikipedia.org/wiki/Fitness_proportionate_selection
    """
    genomes, cumulative, n = _prepare(genomes, fitness, n, "roulette")

    points = rng.uniform(0.0, cumulative[-1], size=n)
    idx = cumulative_points_to_indices(cumulative, points)

    return genomes[idx], np.asarray(fitness)[idx]


def stochastic_universal_sampling(
    genomes: np.ndarray,
    fitness: np.ndarray,
    rng: np.random.Generator,
    *,
    n: int | float,
) -> tuple[np.ndarray, np.ndarray]:
    """Select n individuals with evenly spaced pointers on the fitness ruler.

    An unbiased, low-variance variant of roulette selection: the ruler is cut
    into n intervals of equal length and a single random offset places one
    pointer in each interval. An individual owning a share f of the total
    fitness is selected floor(f * n) or ceil(f * n) times.

    Args:
        genomes: Population, shape (N, L).
        fitness: Fitness, shape (N,). Larger is better.
        rng: Random number generator.
        n: Number of individuals to select, absolute or relative to N.

    Returns:
        Tuple of (selected genomes, selected fitness) with n rows.

    Raises:
        InvalidArgument: If n is invalid, fitness is a DominanceRank, or no
            individual has positive fitness.
        ShapeMismatch: If genomes and fitness do not agree.

    References:
        https://en.wikipedia.org/wiki/Stochastic_universal_sampling
    """
    genomes, cumulative, n = _prepare(genomes, fitness, n, "stochastic universal sampling")
    fitness = np.asarray(fitness)

    if n == 0:
        return genomes[:0], fitness[:0]

    step = cumulative[-1] / n
    start = rng.uniform(0.0, step)
    points = start + step * np.arange(n)
    idx = cumulative_points_to_indices(cumulative, points)

    return genomes[idx], fitness[idx]
