"""Population metrics for monitoring a run.

- best_individual: the genome with the highest fitness
- fitness_summary: max, min, mean and standard deviation of fitness
- best_pareto_front: the non-dominated individuals of a multi-objective population

These are plain computations; collecting them across generations and
formatting reports is left to the caller.
"""

from dataclasses import dataclass

import numpy as np

from evo_ops.errors import InvalidArgument
from evo_ops.population import DominanceRank, as_fitness, as_objectives, as_population
from evo_ops.primitives import dominates_matrix, front_ranks


@dataclass(frozen=True)
class FitnessSummary:
    """Summary statistics of a single-objective fitness array.

    Attributes:
        max: Highest fitness.
        min: Lowest fitness.
        mean: Mean fitness.
        sd: Population standard deviation of fitness.

    Example:
        >>> fitness_summary(np.array([1.0, 2.0, 3.0]))
        FitnessSummary(max=3.0, min=1.0, mean=2.0, sd=0.816496580927726)
    """

    max: float
    min: float
    mean: float
    sd: float


def _check_plain_fitness(fitness) -> None:
    if isinstance(fitness, DominanceRank):
        raise InvalidArgument("fitness metrics need fitness values, use best_pareto_front for front ranks")


def _check_not_empty(fitness: np.ndarray) -> None:
    if fitness.shape[0] == 0:
        raise InvalidArgument("metrics are undefined for an empty population")


def best_individual(genomes: np.ndarray, fitness: np.ndarray) -> tuple[np.ndarray, float]:
    """Return the genome with the highest fitness and that fitness.

    The first such individual wins ties.

    Raises:
        InvalidArgument: If the population is empty or fitness is a DominanceRank.
        ShapeMismatch: If genomes and fitness do not agree.
    """
    _check_plain_fitness(fitness)
    genomes = as_population(genomes)
    fitness = np.asarray(as_fitness(fitness, genomes.shape[0]))
    _check_not_empty(fitness)

    best_idx = int(np.argmax(fitness))
    return genomes[best_idx].copy(), float(fitness[best_idx])


def fitness_summary(fitness: np.ndarray) -> FitnessSummary:
    """Compute max, min, mean and standard deviation of a fitness array.

    Raises:
        InvalidArgument: If fitness is empty or a DominanceRank.
        ShapeMismatch: If fitness is not 1D.
    """
    _check_plain_fitness(fitness)
    fitness = np.asarray(fitness)
    fitness = np.asarray(as_fitness(fitness, fitness.shape[0] if fitness.ndim else 0))
    _check_not_empty(fitness)

    return FitnessSummary(
        max=float(fitness.max()),
        min=float(fitness.min()),
        mean=float(fitness.mean()),
        sd=float(fitness.std()),
    )


def best_pareto_front(genomes: np.ndarray, objectives: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Extract the non-dominated individuals (front 0) of a population.

    Args:
        genomes: Population, shape (N, L).
        objectives: Objective values to minimize, shape (N, M).

    Returns:
        Tuple of (front genomes, front objectives), in population order.

    Example:
        >>> genomes = np.array([[0.0], [1.0], [2.0]])
        >>> front_x, front_obj = best_pareto_front(genomes, np.array([[1, 1], [2, 2], [1, 2]]))
        >>> front_x.ravel()
        array([0.])
    """
    genomes = as_population(genomes)
    objectives = as_objectives(objectives, genomes.shape[0])

    front_idx = np.flatnonzero(front_ranks(dominates_matrix(objectives)) == 0)
    return genomes[front_idx], objectives[front_idx]
