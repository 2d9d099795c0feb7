"""Protocol definitions for the three operator families.

These protocols describe operators once their options are bound, as
returned by the registries. They let a generation loop accept any operator
of the right kind without knowing which one it is:

    ```python
    def step(genomes, fitness, rng, select: Selector, crossover: Crossover, mutate: Mutation):
        parents, _ = select(genomes, fitness, rng)
        return mutate(crossover(parents, rng), rng)
    ```

All operators are pure: they never modify their inputs and keep no state
between calls. Randomness comes only from the rng argument.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from evo_ops.population import Fitness


@runtime_checkable
class Selector(Protocol):
    """Protocol for selection operators.

    Parameters:
        genomes: Population, shape (N, L).
        fitness: Fitness of shape (N,), objectives of shape (N, M), or a
            DominanceRank, depending on the operator.
        rng: NumPy random number generator.

    Returns:
        Tuple of (selected genomes, selected fitness). Size-based selectors
        return n rows; fast non-dominated sorting returns all N rows and a
        DominanceRank.
    """

    def __call__(
        self,
        genomes: np.ndarray,
        fitness: Fitness,
        rng: np.random.Generator,
    ) -> tuple[np.ndarray, Fitness]: ...


@runtime_checkable
class Crossover(Protocol):
    """Protocol for crossover operators.

    Parameters:
        parents: Mating pairs in adjacent rows, shape (N, L) with N even.
        rng: NumPy random number generator.

    Returns:
        Offspring of shape (N, L); rows 2k and 2k+1 are the children of the
        parents in the same rows.
    """

    def __call__(self, parents: np.ndarray, rng: np.random.Generator) -> np.ndarray: ...


@runtime_checkable
class Mutation(Protocol):
    """Protocol for mutation operators.

    Parameters:
        genomes: Population, shape (N, L).
        rng: NumPy random number generator.

    Returns:
        Mutated population of shape (N, L).
    """

    def __call__(self, genomes: np.ndarray, rng: np.random.Generator) -> np.ndarray: ...
