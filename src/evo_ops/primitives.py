"""Pareto dominance primitives (minimization).

- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- front_ranks: Deb's fast non-dominated sorting over a dominance matrix
"""

import numpy as np


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    A solution a dominates b if and only if:
      - a[i] <= b[i] for ALL objectives (a is at least as good everywhere)
      - a[i] < b[i] for AT LEAST ONE objective (a is strictly better somewhere)

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all individuals.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        individual i dominates individual j.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]])
        >>> dom = dominates_matrix(objs)
        >>> bool(dom[0, 1]), bool(dom[2, 0])
        (True, False)
    """
    a = objectives[:, np.newaxis, :]  # (n, 1, n_obj)
    b = objectives[np.newaxis, :, :]  # (1, n, n_obj)

    all_leq = np.all(a <= b, axis=2)
    any_lt = np.any(a < b, axis=2)

    return all_leq & any_lt


def front_ranks(dom_matrix: np.ndarray) -> np.ndarray:
    """Assign every individual to a Pareto front by peeling fronts off.

    Individuals nobody dominates form front 0. Removing them lowers the
    domination count of everything they dominated; the individuals whose
    count drops to zero form front 1, and so on. Every pass assigns at least
    one individual, so there are at most n passes.

    Args:
        dom_matrix: Output of dominates_matrix, shape (n, n).

    Returns:
        Integer array of shape (n,) with the front index of each individual.

    Examples:
        >>> front_ranks(dominates_matrix(np.array([[1.0, 2.0], [2.0, 3.0], [2.0, 1.0]])))
        array([0, 1, 0])
    """
    n = dom_matrix.shape[0]
    ranks = np.zeros(n, dtype=np.int64)
    assigned = np.zeros(n, dtype=bool)

    # domination_count[j] = number of individuals that dominate j
    domination_count = dom_matrix.sum(axis=0)

    for current_rank in range(n):
        if assigned.all():
            break
        front = (domination_count == 0) & ~assigned
        ranks[front] = current_rank
        assigned |= front
        domination_count = domination_count - dom_matrix[front].sum(axis=0)

    return ranks
