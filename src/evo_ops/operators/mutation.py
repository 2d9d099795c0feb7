"""Mutation operators working on whole populations.

Mutation randomly alters genes of some individuals, usually with a fixed
per-gene probability. It keeps the population diverse from one generation
to the next and guards against premature convergence to a local optimum.

Every operator draws an independent per-gene mask first (gene mutated iff
a uniform draw is below ``probability``), so ``probability=0`` returns the
input unchanged and ``probability=1`` mutates every gene.

Options are plain keyword arguments. Calling an operator directly with an
unknown or missing option raises Python's own TypeError; operators bound
through the registries report the same mistakes as InvalidArgument.
"""

import numpy as np

from evo_ops.options import BitFlipOptions, BoundedPolynomialOptions, ReplaceUniformOptions, ShiftGaussianOptions
from evo_ops.population import as_population, broadcast_bounds


def _mutation_mask(rng: np.random.Generator, shape: tuple[int, ...], probability: float) -> np.ndarray:
    return rng.random(shape) < probability


def replace_uniform(
    genomes: np.ndarray,
    rng: np.random.Generator,
    probability: float,
    min: float,
    max: float,
) -> np.ndarray:
    """Replace mutated genes with values drawn uniformly from [min, max).

    Args:
        genomes: Population, shape (N, L).
        rng: Random number generator.
        probability: Chance that a gene is mutated.
        min: Lower end of the replacement range.
        max: Upper end of the replacement range.

    Returns:
        Mutated population, shape (N, L).

    Example:
        >>> rng = np.random.default_rng(0)
        >>> mutated = replace_uniform(np.zeros((2, 3)), rng, probability=1.0, min=5.0, max=6.0)
        >>> bool(((mutated >= 5.0) & (mutated < 6.0)).all())
        True
    """
    opts = ReplaceUniformOptions(probability=probability, min=min, max=max)
    genomes = as_population(genomes)

    mutate = _mutation_mask(rng, genomes.shape, opts.probability)
    mutated = rng.uniform(opts.min, opts.max, size=genomes.shape)
    return np.where(mutate, mutated, genomes)


def bit_flip(genomes: np.ndarray, rng: np.random.Generator, probability: float) -> np.ndarray:
    """Flip mutated genes of a binary (0/1) population.

    Args:
        genomes: Binary population, shape (N, L).
        rng: Random number generator.
        probability: Chance that a gene is flipped.

    Returns:
        Mutated population, shape (N, L), same dtype as genomes.
    """
    opts = BitFlipOptions(probability=probability)
    genomes = as_population(genomes)

    mutate = _mutation_mask(rng, genomes.shape, opts.probability)
    return np.where(mutate, 1 - genomes, genomes)


def shift_gaussian(
    genomes: np.ndarray,
    rng: np.random.Generator,
    probability: float,
    sigma: float = 1.0,
) -> np.ndarray:
    """Add Gaussian noise to mutated genes.

    Args:
        genomes: Population, shape (N, L).
        rng: Random number generator.
        probability: Chance that a gene is shifted.
        sigma: Standard deviation of the normal distribution (mean 0). Default 1.

    Returns:
        Mutated population, shape (N, L).

    References:
        Hinterding, R. (1995). Gaussian mutation and self-adaption for numeric
        genetic algorithms. Section 3.1.
    """
    opts = ShiftGaussianOptions(probability=probability, sigma=sigma)
    genomes = as_population(genomes)

    mutate = _mutation_mask(rng, genomes.shape, opts.probability)
    mutated = genomes + rng.normal(0.0, opts.sigma, size=genomes.shape)
    return np.where(mutate, mutated, genomes)


def bounded_polynomial(
    genomes: np.ndarray,
    rng: np.random.Generator,
    probability: float,
    lower_bound: float | np.ndarray,
    upper_bound: float | np.ndarray,
    eta: float,
) -> np.ndarray:
    """Apply polynomial mutation within [lower_bound, upper_bound].

    The mutation operator of NSGA and NSGA-II. Each mutated gene moves
    towards the lower or the upper bound (chosen by a uniform draw) by an
    amount following a polynomial distribution scaled to the distance to
    that bound, so mutated genes never leave the search space.

    Args:
        genomes: Population, shape (N, L), within the bounds.
        rng: Random number generator.
        probability: Chance that a gene is mutated.
        lower_bound: Search space lower bound, scalar or shape (L,).
        upper_bound: Search space upper bound, scalar or shape (L,).
        eta: Distribution index. Higher values produce smaller perturbations
            (more local search); lower values allow larger jumps.

    Returns:
        Mutated population, shape (N, L), float dtype.

    Raises:
        InvalidArgument: If an option is invalid.
        TypeError: If a required option is not given.
        ShapeMismatch: If genomes is not 2D or per-gene bounds do not have L entries.

    References:
        Deb, K., & Goyal, M. (1996). A combined genetic adaptive search (GeneAS)
        for engineering design. Computer Science and Informatics, 26(4), 30-45.
    """
    opts = BoundedPolynomialOptions(
        probability=probability, lower_bound=lower_bound, upper_bound=upper_bound, eta=eta
    )
    genomes = as_population(genomes)
    lower, upper = broadcast_bounds(opts.lower_bound, opts.upper_bound, genomes.shape[1])
    delta_max = upper - lower
    safe_delta_max = np.where(delta_max > 0, delta_max, 1.0)

    mutate = _mutation_mask(rng, genomes.shape, opts.probability)

    # Normalized distances to bounds
    x = np.clip(genomes, lower, upper)
    delta_l = (x - lower) / safe_delta_max
    delta_r = (upper - x) / safe_delta_max

    # Random values for mutation direction
    u = rng.random(genomes.shape)
    exponent = 1.0 / (opts.eta + 1.0)

    # Mutation towards lower bound
    xy_left = 1.0 - delta_l
    val_left = 2.0 * u + (1.0 - 2.0 * u) * (xy_left ** (opts.eta + 1.0))
    delta_q_left = val_left**exponent - 1.0

    # Mutation towards upper bound
    xy_right = 1.0 - delta_r
    val_right = 2.0 * (1.0 - u) + 2.0 * (u - 0.5) * (xy_right ** (opts.eta + 1.0))
    delta_q_right = 1.0 - val_right**exponent

    delta_q = np.where(u < 0.5, delta_q_left, delta_q_right)

    # Unmutated genes are returned exactly as given
    mutated = np.clip(x + delta_q * delta_max, lower, upper)
    return np.where(mutate, mutated, genomes)
