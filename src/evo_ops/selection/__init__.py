"""Selection operators for evolutionary algorithms."""

from evo_ops.options import NoOptions, SelectionOptions
from evo_ops.registry import SelectionRegistry
from evo_ops.selection.natural import natural
from evo_ops.selection.nondominated import fast_non_dominated_sort
from evo_ops.selection.roulette import roulette, stochastic_universal_sampling
from evo_ops.selection.tournament import tournament

# Register built-in selection operators
SelectionRegistry.register("tournament", tournament, SelectionOptions)
SelectionRegistry.register("natural", natural, SelectionOptions)
SelectionRegistry.register("roulette", roulette, SelectionOptions)
SelectionRegistry.register("stochastic_universal_sampling", stochastic_universal_sampling, SelectionOptions)
SelectionRegistry.register("fast_non_dominated_sort", fast_non_dominated_sort, NoOptions)

__all__ = [
    "tournament",
    "natural",
    "roulette",
    "stochastic_universal_sampling",
    "fast_non_dominated_sort",
]
