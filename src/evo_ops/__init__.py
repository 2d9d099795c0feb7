"""evo-ops: vectorized operators for evolutionary algorithms.

A pure numpy library of selection, crossover and mutation operators that
work on whole populations at once, plus NSGA-II fast non-dominated sorting.
Every operator is a pure function of arrays and an explicit random number
generator.

Example (single objective):
    >>> import numpy as np
    >>> from evo_ops import real_random_uniform, tournament, blend_alpha, shift_gaussian
    >>> rng = np.random.default_rng(42)
    >>> genomes = real_random_uniform(10, 3, rng, min=-1.0, max=1.0)
    >>> fitness = -np.sum(genomes**2, axis=1)
    >>> parents, _ = tournament(genomes, fitness, rng, n=1.0)
    >>> offspring = shift_gaussian(blend_alpha(parents, rng), rng, probability=0.1, sigma=0.05)
    >>> offspring.shape
    (10, 3)

Example (multi-objective, NSGA-II style elitism):
    >>> from evo_ops import fast_non_dominated_sort, natural
    >>> objectives = np.stack([genomes[:, 0] ** 2, (genomes[:, 0] - 2) ** 2], axis=1)
    >>> genomes, rank = fast_non_dominated_sort(genomes, objectives)
    >>> survivors, survivor_rank = natural(genomes, rank, n=5)
    >>> len(survivor_rank)
    5
"""

from evo_ops.errors import InvalidArgument, ShapeMismatch
from evo_ops.metrics import FitnessSummary, best_individual, best_pareto_front, fitness_summary
from evo_ops.operators import (
    binary_random_uniform,
    bit_flip,
    blend_alpha,
    bounded_polynomial,
    multi_point,
    real_random_uniform,
    replace_uniform,
    shift_gaussian,
    simulated_binary,
    simulated_binary_bounded,
    single_point,
    uniform,
)
from evo_ops.population import DominanceRank
from evo_ops.primitives import dominates, dominates_matrix
from evo_ops.protocols import Crossover, Mutation, Selector
from evo_ops.registry import (
    CrossoverRegistry,
    MutationRegistry,
    SelectionRegistry,
    list_crossovers,
    list_mutations,
    list_selections,
)
from evo_ops.selection import (
    fast_non_dominated_sort,
    natural,
    roulette,
    stochastic_universal_sampling,
    tournament,
)

__all__ = [
    # Selection
    "tournament",
    "natural",
    "roulette",
    "stochastic_universal_sampling",
    "fast_non_dominated_sort",
    # Crossover
    "uniform",
    "single_point",
    "multi_point",
    "blend_alpha",
    "simulated_binary",
    "simulated_binary_bounded",
    # Mutation
    "replace_uniform",
    "bit_flip",
    "shift_gaussian",
    "bounded_polynomial",
    # Initialization
    "real_random_uniform",
    "binary_random_uniform",
    # Metrics
    "best_individual",
    "fitness_summary",
    "best_pareto_front",
    "FitnessSummary",
    # Primitives
    "dominates",
    "dominates_matrix",
    # Registry system
    "SelectionRegistry",
    "CrossoverRegistry",
    "MutationRegistry",
    "list_selections",
    "list_crossovers",
    "list_mutations",
    # Protocols
    "Selector",
    "Crossover",
    "Mutation",
    # Data model and errors
    "DominanceRank",
    "InvalidArgument",
    "ShapeMismatch",
]
