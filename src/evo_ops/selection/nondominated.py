"""Fast non-dominated sorting as a fitness re-labelling step."""

import logging

import numpy as np

from evo_ops.population import DominanceRank, as_objectives, as_population
from evo_ops.primitives import dominates_matrix, front_ranks

_logger = logging.getLogger(__name__)


def fast_non_dominated_sort(
    genomes: np.ndarray,
    fitness: np.ndarray,
    rng: np.random.Generator | None = None,
) -> tuple[np.ndarray, DominanceRank]:
    """Replace multi-objective fitness with Pareto front indices.

    This is not selection in the strict sense: the population is returned
    unchanged and only the fitness is re-labelled. Chained with natural
    selection it yields NSGA-II style elitism. Objectives are minimized.

    Time complexity: O(M * N^2) where M = number of objectives, N = population size.

    Args:
        genomes: Population, shape (N, L).
        fitness: Objective values, shape (N, M).
        rng: Unused, accepted for a uniform selection signature.

    Returns:
        Tuple of (copy of genomes, DominanceRank with the front of each individual).

    Raises:
        ShapeMismatch: If fitness is not 2D or its row count differs from genomes.

    Example:
        >>> genomes = np.zeros((3, 1))
        >>> _, rank = fast_non_dominated_sort(genomes, np.array([[1, 2], [2, 3], [2, 1]]))
        >>> rank.values
        array([0, 1, 0])

    References:
        Deb, K., Pratap, A., Agarwal, S., & Meyarivan, T. (2002). A fast and
        elitist multiobjective genetic algorithm: NSGA-II. IEEE Transactions on
        Evolutionary Computation, 6(2), 182-197.
    """
    genomes = as_population(genomes)
    objectives = as_objectives(fitness, genomes.shape[0])

    ranks = front_ranks(dominates_matrix(objectives))
    rank = DominanceRank(ranks)
    _logger.debug("Sorted %d individuals into %d fronts", len(rank), rank.n_fronts)

    return genomes.copy(), rank
