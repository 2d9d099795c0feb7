"""Registries for selection, crossover and mutation operators.

Operators are registered under a name together with the option set they
accept, and retrieved with their options bound. Options are validated at
retrieval time, so a misconfigured experiment fails before the first
generation runs instead of in the middle of it.

There are three independent registries:
1. **SelectionRegistry**: bound selectors ``(genomes, fitness, rng) -> (genomes, fitness)``
2. **CrossoverRegistry**: bound crossovers ``(parents, rng) -> offspring``
3. **MutationRegistry**: bound mutations ``(genomes, rng) -> genomes``

Basic usage:
    ```python
    from evo_ops.registry import CrossoverRegistry, list_crossovers

    crossover = CrossoverRegistry.get("blend_alpha", alpha=0.3)
    offspring = crossover(parents, rng)

    available = list_crossovers()  # ["blend_alpha", "multi_point", ...]
    ```

Registering a custom operator:
    ```python
    from evo_ops.options import BitFlipOptions
    from evo_ops.registry import MutationRegistry

    def flip_all(genomes, rng, probability):
        ...

    MutationRegistry.register("flip_all", flip_all, BitFlipOptions)
    ```
"""

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from evo_ops.options import OperatorOptions

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredOperator:
    """An operator function paired with the option set it accepts."""

    operator: Callable[..., Any]
    options_cls: type[OperatorOptions]

    def bind(self, **options: Any) -> Callable[..., Any]:
        """Validate options and return the operator with them bound."""
        opts = self.options_cls.from_mapping(options)
        return functools.partial(self.operator, **opts.as_kwargs())


class OperatorRegistry:
    """Class-level registry of operators of one kind.

    Subclasses provide their own ``_registry`` dictionary and ``_kind`` label.

    Class Attributes:
        _registry: Dictionary mapping operator names to RegisteredOperator entries.
        _kind: Human readable operator kind used in error messages.
    """

    _registry: dict[str, RegisteredOperator] = {}
    _kind: str = "operator"

    @classmethod
    def register(cls, name: str, operator: Callable[..., Any], options_cls: type[OperatorOptions]) -> None:
        """Register an operator under ``name``, overwriting any previous entry.

        Args:
            name: Unique name for the operator.
            operator: The operator function. Options are passed as keyword arguments.
            options_cls: Option set used to validate options on retrieval.
        """
        cls._registry[name] = RegisteredOperator(operator, options_cls)
        _logger.debug("Registered %s %r", cls._kind, name)

    @classmethod
    def get(cls, name: str, **options: Any) -> Callable[..., Any]:
        """Get an operator by name with its options bound.

        Args:
            name: Name of the registered operator.
            **options: Operator options.

        Returns:
            The operator as a callable taking only arrays and an rng.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available names.
            InvalidArgument: If options are unknown, missing or invalid.

        Example:
            ```python
            select = SelectionRegistry.get("tournament", n=0.5)
            parents, parent_fitness = select(genomes, fitness, rng)
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"{cls._kind.capitalize()} '{name}' not found. Available: {available}")
        _logger.debug("Binding %s %r with options %s", cls._kind, name, sorted(options))
        return cls._registry[name].bind(**options)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered names."""
        return sorted(cls._registry.keys())


class SelectionRegistry(OperatorRegistry):
    """Registry for selection operators."""

    _registry: dict[str, RegisteredOperator] = {}
    _kind = "selection"


class CrossoverRegistry(OperatorRegistry):
    """Registry for crossover operators."""

    _registry: dict[str, RegisteredOperator] = {}
    _kind = "crossover"


class MutationRegistry(OperatorRegistry):
    """Registry for mutation operators."""

    _registry: dict[str, RegisteredOperator] = {}
    _kind = "mutation"


def list_selections() -> list[str]:
    """List all registered selection operators."""
    return SelectionRegistry.list()


def list_crossovers() -> list[str]:
    """List all registered crossover operators."""
    return CrossoverRegistry.list()


def list_mutations() -> list[str]:
    """List all registered mutation operators."""
    return MutationRegistry.list()
