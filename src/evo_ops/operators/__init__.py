"""Variation operators and population initializers.

This package provides:
- crossover: uniform, single-point, multi-point, blend-alpha and SBX variants
- mutation: uniform replacement, bit-flip, Gaussian shift and polynomial mutation
- init: random real and binary populations
"""

from evo_ops.operators.crossover import (
    blend_alpha,
    multi_point,
    simulated_binary,
    simulated_binary_bounded,
    single_point,
    uniform,
)
from evo_ops.operators.init import binary_random_uniform, real_random_uniform
from evo_ops.operators.mutation import bit_flip, bounded_polynomial, replace_uniform, shift_gaussian
from evo_ops.options import (
    BitFlipOptions,
    BlendAlphaOptions,
    BoundedPolynomialOptions,
    BoundedSimulatedBinaryOptions,
    MultiPointCrossoverOptions,
    NoOptions,
    ReplaceUniformOptions,
    ShiftGaussianOptions,
    SimulatedBinaryOptions,
    UniformCrossoverOptions,
)
from evo_ops.registry import CrossoverRegistry, MutationRegistry

# Register built-in crossover operators
CrossoverRegistry.register("uniform", uniform, UniformCrossoverOptions)
CrossoverRegistry.register("single_point", single_point, NoOptions)
CrossoverRegistry.register("multi_point", multi_point, MultiPointCrossoverOptions)
CrossoverRegistry.register("blend_alpha", blend_alpha, BlendAlphaOptions)
CrossoverRegistry.register("simulated_binary", simulated_binary, SimulatedBinaryOptions)
CrossoverRegistry.register("simulated_binary_bounded", simulated_binary_bounded, BoundedSimulatedBinaryOptions)

# Register built-in mutation operators
MutationRegistry.register("replace_uniform", replace_uniform, ReplaceUniformOptions)
MutationRegistry.register("bit_flip", bit_flip, BitFlipOptions)
MutationRegistry.register("shift_gaussian", shift_gaussian, ShiftGaussianOptions)
MutationRegistry.register("bounded_polynomial", bounded_polynomial, BoundedPolynomialOptions)

__all__ = [
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
]
