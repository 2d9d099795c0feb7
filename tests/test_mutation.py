"""Tests for mutation operators."""

import numpy as np
import pytest

from evo_ops import InvalidArgument, ShapeMismatch
from evo_ops.operators import bit_flip, bounded_polynomial, replace_uniform, shift_gaussian

ALL_MUTATIONS = [
    pytest.param(lambda g, rng, p: replace_uniform(g, rng, probability=p, min=-1.0, max=1.0), id="replace_uniform"),
    pytest.param(lambda g, rng, p: bit_flip(g, rng, probability=p), id="bit_flip"),
    pytest.param(lambda g, rng, p: shift_gaussian(g, rng, probability=p, sigma=0.1), id="shift_gaussian"),
    pytest.param(
        lambda g, rng, p: bounded_polynomial(g, rng, probability=p, lower_bound=0.0, upper_bound=1.0, eta=20.0),
        id="bounded_polynomial",
    ),
]


@pytest.fixture
def binary_genomes(rng) -> np.ndarray:
    """Random 0/1 population of 8 individuals with 12 genes."""
    return rng.integers(0, 2, size=(8, 12))


class TestCommonBehaviour:
    """Contracts every mutation operator honours."""

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_zero_probability_returns_input(self, mutate, binary_genomes, rng):
        """No gene changes when the mutation probability is 0."""
        np.testing.assert_array_equal(mutate(binary_genomes, rng, 0.0), binary_genomes)

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_shape_preserved(self, mutate, binary_genomes, rng):
        """Mutation never changes the population shape."""
        assert mutate(binary_genomes, rng, 0.5).shape == binary_genomes.shape

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_does_not_modify_input(self, mutate, binary_genomes, rng):
        """The input population is left untouched."""
        before = binary_genomes.copy()
        mutate(binary_genomes, rng, 1.0)
        np.testing.assert_array_equal(binary_genomes, before)

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_invalid_probability_raises(self, mutate, binary_genomes, rng):
        """Probabilities outside [0, 1] are rejected."""
        with pytest.raises(InvalidArgument, match="probability must be in"):
            mutate(binary_genomes, rng, -0.1)

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_one_dimensional_input_raises(self, mutate, rng):
        """A single genome is not a population."""
        with pytest.raises(ShapeMismatch, match="must be 2D"):
            mutate(np.zeros(5), rng, 0.5)

    @pytest.mark.parametrize("mutate", ALL_MUTATIONS)
    def test_same_seed_same_result(self, mutate, binary_genomes):
        """Results depend only on the input and the generator state."""
        first = mutate(binary_genomes, np.random.default_rng(5), 0.5)
        second = mutate(binary_genomes, np.random.default_rng(5), 0.5)
        np.testing.assert_array_equal(first, second)


class TestReplaceUniform:
    """Tests for uniform replacement mutation."""

    def test_full_probability_replaces_every_gene(self, rng):
        """Every gene is redrawn from [min, max)."""
        mutated = replace_uniform(np.full((10, 4), 100.0), rng, probability=1.0, min=-1.0, max=1.0)

        assert np.all(mutated >= -1.0)
        assert np.all(mutated < 1.0)

    def test_mutation_rate_close_to_probability(self, rng):
        """About probability * N * L genes are replaced."""
        genomes = np.full((100, 100), 100.0)
        mutated = replace_uniform(genomes, rng, probability=0.2, min=0.0, max=1.0)

        assert np.mean(mutated != genomes) == pytest.approx(0.2, abs=0.02)

    def test_inverted_range_raises(self, rng):
        """min must not exceed max."""
        with pytest.raises(InvalidArgument, match="must not exceed max"):
            replace_uniform(np.zeros((2, 2)), rng, probability=0.5, min=1.0, max=0.0)


class TestBitFlip:
    """Tests for bit-flip mutation."""

    def test_full_probability_flips_every_bit(self, binary_genomes, rng):
        """With probability 1 every bit is inverted."""
        np.testing.assert_array_equal(bit_flip(binary_genomes, rng, probability=1.0), 1 - binary_genomes)

    def test_preserves_dtype_and_alphabet(self, binary_genomes, rng):
        """Flipped genomes stay binary with the same dtype."""
        mutated = bit_flip(binary_genomes, rng, probability=0.5)

        assert mutated.dtype == binary_genomes.dtype
        assert set(np.unique(mutated)) <= {0, 1}


class TestShiftGaussian:
    """Tests for Gaussian shift mutation."""

    def test_full_probability_shifts_every_gene(self, rng):
        """Every gene receives noise."""
        genomes = np.zeros((50, 10))
        mutated = shift_gaussian(genomes, rng, probability=1.0, sigma=1.0)

        assert np.all(mutated != 0.0)

    def test_shift_scale_follows_sigma(self, rng):
        """The standard deviation of the shifts matches sigma."""
        genomes = np.zeros((200, 50))
        mutated = shift_gaussian(genomes, rng, probability=1.0, sigma=0.5)

        assert np.std(mutated) == pytest.approx(0.5, rel=0.05)
        assert np.mean(mutated) == pytest.approx(0.0, abs=0.02)

    def test_default_sigma_is_one(self, rng):
        """Sigma defaults to 1."""
        mutated = shift_gaussian(np.zeros((200, 50)), rng, probability=1.0)

        assert np.std(mutated) == pytest.approx(1.0, rel=0.05)

    def test_negative_sigma_raises(self, rng):
        """The standard deviation must be non-negative."""
        with pytest.raises(InvalidArgument, match="sigma must be non-negative"):
            shift_gaussian(np.zeros((2, 2)), rng, probability=0.5, sigma=-1.0)


class TestBoundedPolynomial:
    """Tests for bounded polynomial mutation."""

    @pytest.mark.parametrize("eta", [0.0, 1.0, 20.0, 100.0])
    def test_stays_within_bounds(self, eta):
        """Mutated genes never leave the search space."""
        for seed in range(10):
            gen = np.random.default_rng(seed)
            genomes = gen.uniform(-5.0, 5.0, size=(30, 4))
            mutated = bounded_polynomial(genomes, gen, probability=1.0, lower_bound=-5.0, upper_bound=5.0, eta=eta)

            assert np.all(mutated >= -5.0)
            assert np.all(mutated <= 5.0)

    def test_genes_on_bounds_stay_finite(self, rng):
        """Genes sitting on a bound do not produce NaN."""
        genomes = np.array([[0.0, 1.0], [1.0, 0.0]])
        mutated = bounded_polynomial(genomes, rng, probability=1.0, lower_bound=0.0, upper_bound=1.0, eta=5.0)

        assert np.all(np.isfinite(mutated))

    def test_per_gene_bounds(self, rng):
        """Each gene respects its own bounds."""
        lower = np.array([0.0, 10.0])
        upper = np.array([1.0, 20.0])
        genomes = rng.uniform(lower, upper, size=(50, 2))

        mutated = bounded_polynomial(genomes, rng, probability=1.0, lower_bound=lower, upper_bound=upper, eta=1.0)

        assert np.all(mutated >= lower)
        assert np.all(mutated <= upper)

    def test_higher_eta_gives_smaller_moves(self):
        """A large distribution index perturbs genes less."""
        genomes = np.full((100, 5), 0.5)
        loose = bounded_polynomial(
            genomes, np.random.default_rng(0), probability=1.0, lower_bound=0.0, upper_bound=1.0, eta=1.0
        )
        tight = bounded_polynomial(
            genomes, np.random.default_rng(0), probability=1.0, lower_bound=0.0, upper_bound=1.0, eta=100.0
        )

        assert np.abs(tight - genomes).mean() < np.abs(loose - genomes).mean()

    def test_degenerate_bounds_pin_genes(self, rng):
        """When lower equals upper the gene can only take that value."""
        genomes = np.full((4, 2), 2.0)
        mutated = bounded_polynomial(genomes, rng, probability=1.0, lower_bound=2.0, upper_bound=2.0, eta=1.0)

        np.testing.assert_array_equal(mutated, genomes)

    def test_bounds_of_wrong_length_raise(self, rng):
        """Per-gene bounds need one entry per gene."""
        with pytest.raises(ShapeMismatch, match="upper_bound has shape"):
            bounded_polynomial(np.zeros((2, 3)), rng, probability=1.0, lower_bound=0.0, upper_bound=np.ones(2), eta=1.0)
