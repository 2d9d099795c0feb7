"""Crossover operators working on whole populations of mating pairs.

Crossover combines the genetic information of two parents into offspring.
All operators here read the population as adjacent pairs, rows 2k and 2k+1,
and return one offspring row per parent row, in the same order:

- uniform: per-gene exchange with a fixed probability
- single_point: exchange every gene after one random split
- multi_point: exchange every second segment between k random splits
- blend_alpha: BLX-alpha, uniform blend around the parents
- simulated_binary: SBX for real-coded genomes
- simulated_binary_bounded: Deb's bounded SBX as used in NSGA-II

Options are plain keyword arguments. Calling an operator directly with an
unknown or missing option raises Python's own TypeError; operators bound
through the registries report the same mistakes as InvalidArgument.

Implementation note: instead of looping over pairs, every operator works on
x, the parents, and y, the parents with adjacent rows swapped. Rows (a, b) of
x line up with rows (b, a) of y, so each pair is processed twice, once per
offspring. The random decision for a pair is drawn once and repeated for both
rows with duplicate_rows, which keeps siblings consistent with each other.
"""

import numpy as np

from evo_ops.errors import InvalidArgument
from evo_ops.options import (
    BlendAlphaOptions,
    BoundedSimulatedBinaryOptions,
    MultiPointCrossoverOptions,
    SimulatedBinaryOptions,
    UniformCrossoverOptions,
)
from evo_ops.population import as_pairs, broadcast_bounds
from evo_ops.utils import duplicate_rows, random_idx_without_replacement, swap_adjacent_rows

_EPS = 1.0e-14


def uniform(parents: np.ndarray, rng: np.random.Generator, probability: float = 0.5) -> np.ndarray:
    """Perform uniform crossover.

    For parents x and y, genes x_i and y_i are exchanged with the given
    probability. Both offspring of a pair use the same decision, so every
    gene is either kept by both or swapped between them.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.
        probability: Chance of exchanging a gene (default 0.5).

    Returns:
        Offspring, shape (N, L).

    Raises:
        InvalidArgument: If N is odd or probability is outside [0, 1].
        ShapeMismatch: If parents is not 2D.

    References:
        Spears, W. M., & De Jong, K. A. (1991). On the virtues of
        parameterized uniform crossover.
    """
    opts = UniformCrossoverOptions(probability=probability)
    parents = as_pairs(parents)
    n, length = parents.shape

    swapped_parents = swap_adjacent_rows(parents)
    swap = duplicate_rows(rng.random((n // 2, length)) < opts.probability)

    return np.where(swap, swapped_parents, parents)


def single_point(parents: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """Perform single-point crossover.

    Draws one split locus in [1, L) per pair and exchanges all genes at or
    after it.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.

    Returns:
        Offspring, shape (N, L).

    Raises:
        InvalidArgument: If N is odd or L < 2.
        ShapeMismatch: If parents is not 2D.

    Example:
        >>> rng = np.random.default_rng(0)
        >>> parents = np.array([[0, 0, 0, 0], [1, 1, 1, 1]])
        >>> offspring = single_point(parents, rng)
        >>> bool((offspring.sum(axis=0) == 1).all())
        True
    """
    parents = as_pairs(parents)
    n, length = parents.shape
    if length < 2:
        raise InvalidArgument(f"single-point crossover requires genomes of length at least 2, got {length}")

    swapped_parents = swap_adjacent_rows(parents)

    # Generate n / 2 split points (like [5, 2, 3]), and replicate
    # them for adjacent parents (like [5, 5, 2, 2, 3, 3])
    split_idx = duplicate_rows(rng.integers(1, length, size=(n // 2, 1)))
    swap = split_idx <= np.arange(length)

    return np.where(swap, swapped_parents, parents)


def multi_point(parents: np.ndarray, rng: np.random.Generator, points: int) -> np.ndarray:
    """Perform multi-point crossover.

    A generalization of single_point: every pair is cut at ``points`` distinct
    random loci and every second segment is exchanged.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.
        points: Number of crossover points, 1 <= points < L.

    Returns:
        Offspring, shape (N, L).

    Raises:
        InvalidArgument: If N is odd or points is not in [1, L).
        TypeError: If points is not given.
        ShapeMismatch: If parents is not 2D.
    """
    opts = MultiPointCrossoverOptions(points=points)
    parents = as_pairs(parents)
    n, length = parents.shape
    if opts.points >= length:
        raise InvalidArgument(f"{opts.points}-point crossover is not valid for genome of length {length}")

    swapped_parents = swap_adjacent_rows(parents)

    # Each of the k unique points gives a single-point mask; the masks are
    # combined gene-wise with XOR (sum modulo 2). Repeated points would cancel
    # each other out, hence sampling without replacement.
    split_idx = random_idx_without_replacement(rng, (n // 2, opts.points, 1), min=1, max=length, axis=1)
    swap = (split_idx <= np.arange(length)).sum(axis=1) % 2 == 1
    swap = duplicate_rows(swap)

    return np.where(swap, swapped_parents, parents)


def blend_alpha(parents: np.ndarray, rng: np.random.Generator, alpha: float = 0.5) -> np.ndarray:
    """Perform blend-alpha crossover, also referred to as BLX-alpha.

    For parent genes x_i < y_i, offspring genes are drawn uniformly from
    [x_i - alpha * (y_i - x_i), y_i + alpha * (y_i - x_i)]. The two offspring
    of a pair are symmetric: their mean equals the mean of the parents.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.
        alpha: How far offspring may fall outside the parents' range. Low
            values emphasise exploitation, high values exploration. 0 is flat
            crossover; 0.5 (default) balances both.

    Returns:
        Offspring, shape (N, L).

    Raises:
        InvalidArgument: If N is odd or alpha is negative.
        ShapeMismatch: If parents is not 2D.

    References:
        Herrera, F., Lozano, M., & Verdegay, J. L. (1998). Tackling real-coded
        genetic algorithms: operators and tools for behavioural analysis.
        Artificial Intelligence Review, 12(4), 265-319. Section 4.3.
    """
    opts = BlendAlphaOptions(alpha=alpha)
    parents = as_pairs(parents)
    n, length = parents.shape

    x, y = parents, swap_adjacent_rows(parents)

    # Equivalent to the interval above; y - x may be negative, in which
    # case the shift from x simply goes the other way.
    gamma = (1.0 + 2.0 * opts.alpha) * rng.random((n // 2, length)) - opts.alpha
    gamma = duplicate_rows(gamma)

    return x + gamma * (y - x)


def simulated_binary(parents: np.ndarray, rng: np.random.Generator, eta: float) -> np.ndarray:
    """Perform simulated binary crossover (SBX), without bounds.

    The real-coded counterpart of single-point crossover on binary strings.
    Offspring are spread symmetrically around the parents' mean by a factor
    beta drawn from a polynomial distribution.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.
        eta: Distribution index. Higher values keep offspring closer to
            their parents, lower values allow larger jumps.

    Returns:
        Offspring, shape (N, L).

    Raises:
        InvalidArgument: If N is odd or eta is negative.
        TypeError: If eta is not given.
        ShapeMismatch: If parents is not 2D.

    References:
        Deb, K., & Agrawal, R. B. (1995). Simulated binary crossover for
        continuous search space. Complex Systems, 9(2), 115-148.
    """
    opts = SimulatedBinaryOptions(eta=eta)
    parents = as_pairs(parents)
    n, length = parents.shape

    x, y = parents, swap_adjacent_rows(parents)

    u = rng.random((n // 2, length))
    beta_base = np.where(u < 0.5, 2.0 * u, 1.0 / (2.0 * (1.0 - u)))
    beta = duplicate_rows(beta_base ** (1.0 / (opts.eta + 1.0)))

    return 0.5 * ((1.0 + beta) * x + (1.0 - beta) * y)


def _spread_factor(beta: np.ndarray, r: np.ndarray, eta: float) -> np.ndarray:
    """Bound-aware SBX spread factor beta_q for one side of the parents."""
    exponent = 1.0 / (eta + 1.0)
    with np.errstate(over="ignore", divide="ignore"):
        # Only parents outside the bounds push beta below 1
        beta = np.maximum(beta, _EPS)
        alpha = np.maximum(2.0 - beta ** -(eta + 1.0), _EPS)
    return np.where(r < 1.0 / alpha, (r * alpha) ** exponent, (1.0 / (2.0 - r * alpha)) ** exponent)


def simulated_binary_bounded(
    parents: np.ndarray,
    rng: np.random.Generator,
    probability: float,
    lower_bound: float | np.ndarray,
    upper_bound: float | np.ndarray,
    eta: float,
) -> np.ndarray:
    """Perform bounded simulated binary crossover.

    SBX as implemented by Deb in NSGA-II. The spread of each offspring is
    scaled by its distance to the nearer bound so children stay inside
    [lower_bound, upper_bound]; they are clipped as well. The two children
    of every gene are assigned to the offspring rows at random, and only a
    ``probability`` fraction of pairs is crossed at all. The remaining pairs,
    and genes where both parents are equal, are copied unchanged.

    Args:
        parents: Population of mating pairs, shape (N, L) with N even.
        rng: Random number generator.
        probability: Chance that a pair takes part in crossover.
        lower_bound: Search space lower bound, scalar or shape (L,).
        upper_bound: Search space upper bound, scalar or shape (L,).
        eta: Distribution index.

    Returns:
        Offspring, shape (N, L), float dtype.

    Raises:
        InvalidArgument: If N is odd or an option is invalid.
        TypeError: If a required option is not given.
        ShapeMismatch: If parents is not 2D or per-gene bounds do not have L entries.

    References:
        Deb, K., Pratap, A., Agarwal, S., & Meyarivan, T. (2002). A fast and
        elitist multiobjective genetic algorithm: NSGA-II. IEEE Transactions on
        Evolutionary Computation, 6(2), 182-197.
    """
    opts = BoundedSimulatedBinaryOptions(
        probability=probability, lower_bound=lower_bound, upper_bound=upper_bound, eta=eta
    )
    parents = as_pairs(parents)
    n, length = parents.shape
    half_n = n // 2
    lower, upper = broadcast_bounds(opts.lower_bound, opts.upper_bound, length)

    couples = parents.reshape(half_n, 2, length).astype(np.float64)
    per_couple_min = couples.min(axis=1)
    per_couple_max = couples.max(axis=1)
    per_couple_diff = per_couple_max - per_couple_min
    per_couple_sum = per_couple_max + per_couple_min

    # The spread parameters divide by the parents' distance
    valid = per_couple_diff > _EPS
    safe_diff = np.where(valid, per_couple_diff, 1.0)

    r = rng.random((half_n, length))

    beta_l = 1.0 + 2.0 * (per_couple_min - lower) / safe_diff
    beta_q_l = _spread_factor(beta_l, r, opts.eta)
    c_l = np.clip(0.5 * (per_couple_sum - beta_q_l * per_couple_diff), lower, upper)

    beta_u = 1.0 + 2.0 * (upper - per_couple_max) / safe_diff
    beta_q_u = _spread_factor(beta_u, r, opts.eta)
    c_u = np.clip(0.5 * (per_couple_sum + beta_q_u * per_couple_diff), lower, upper)

    swap = rng.random((half_n, length)) < 0.5
    crossed_first = np.where(valid, np.where(swap, c_u, c_l), couples[:, 0])
    crossed_second = np.where(valid, np.where(swap, c_l, c_u), couples[:, 1])
    crossed_couples = np.stack([crossed_first, crossed_second], axis=1)

    cross = rng.random(half_n) < opts.probability
    offspring = np.where(cross[:, np.newaxis, np.newaxis], crossed_couples, couples)

    return offspring.reshape(n, length)
