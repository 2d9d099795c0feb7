"""Option sets for evo-ops operators.

Every operator has one frozen dataclass describing the options it accepts.
Options are validated on construction, before any array work, so a malformed
call fails without consuming random draws:

    >>> UniformCrossoverOptions(probability=1.5)
    Traceback (most recent call last):
        ...
    evo_ops.errors.InvalidArgument: probability must be in [0, 1], got 1.5

``from_mapping`` builds an option set from loose keyword data (as used by
the registries) and reports unknown or missing keys as InvalidArgument.
"""

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, fields
from typing import Any

import numpy as np

from evo_ops.errors import InvalidArgument, ShapeMismatch
from evo_ops.utils import check_n

Bound = float | np.ndarray
"""A scalar bound shared by all genes, or a 1D array with one bound per gene."""


def _check_real(name: str, value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidArgument(f"{name} must be a real number, got {type(value).__name__}")
    if not np.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value}")
    return float(value)


def _check_probability(name: str, value: Any) -> float:
    value = _check_real(name, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidArgument(f"{name} must be in [0, 1], got {value}")
    return value


def _check_non_negative(name: str, value: Any) -> float:
    value = _check_real(name, value)
    if value < 0.0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return value


def _as_bound(name: str, value: Any) -> Bound:
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a number or a 1D array of numbers") from exc
    if arr.ndim > 1:
        raise ShapeMismatch(f"{name} must be a scalar or 1D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument(f"{name} must be finite")
    if arr.ndim == 0:
        return float(arr)
    return arr.copy()


def _check_bounds(lower: Bound, upper: Bound) -> None:
    lower_arr, upper_arr = np.asarray(lower), np.asarray(upper)
    if lower_arr.ndim == 1 and upper_arr.ndim == 1 and lower_arr.shape != upper_arr.shape:
        raise ShapeMismatch(f"lower_bound has shape {lower_arr.shape} but upper_bound has shape {upper_arr.shape}")
    if np.any(lower_arr > upper_arr):
        raise InvalidArgument("lower_bound must not exceed upper_bound")


@dataclass(frozen=True)
class OperatorOptions:
    """Base class for operator option sets."""

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]):
        """Build an option set from a mapping of option names to values.

        Raises:
            InvalidArgument: If the mapping has unknown keys, lacks a required
                key, or holds an invalid value.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidArgument(f"unknown options for {cls.__name__}: {', '.join(unknown)}")
        missing = sorted(
            f.name
            for f in fields(cls)
            if f.default is MISSING and f.default_factory is MISSING and f.name not in options
        )
        if missing:
            raise InvalidArgument(f"missing required options for {cls.__name__}: {', '.join(missing)}")
        return cls(**options)

    def as_kwargs(self) -> dict[str, Any]:
        """Return the options as keyword arguments for the operator function."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class NoOptions(OperatorOptions):
    """Option set of operators that take no options."""


@dataclass(frozen=True)
class SelectionOptions(OperatorOptions):
    """Options shared by all size-based selection operators.

    Attributes:
        n: Absolute number of individuals (int) or fraction of the
            population size (float in (0, 1]).
    """

    n: int | float

    def __post_init__(self) -> None:
        check_n(self.n)


@dataclass(frozen=True)
class UniformCrossoverOptions(OperatorOptions):
    """Options for uniform crossover.

    Attributes:
        probability: Chance that a pair exchanges a given gene.
    """

    probability: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))


@dataclass(frozen=True)
class MultiPointCrossoverOptions(OperatorOptions):
    """Options for multi-point crossover.

    Attributes:
        points: Number of distinct crossover points per pair.
    """

    points: int

    def __post_init__(self) -> None:
        if isinstance(self.points, (bool, np.bool_)) or not isinstance(self.points, (int, np.integer)):
            raise InvalidArgument(f"points must be an integer, got {type(self.points).__name__}")
        if self.points < 1:
            raise InvalidArgument(f"points must be positive, got {self.points}")


@dataclass(frozen=True)
class BlendAlphaOptions(OperatorOptions):
    """Options for blend-alpha crossover.

    Attributes:
        alpha: How far offspring may fall outside the parents' range, as a
            fraction of the parents' distance. 0 is flat crossover.
    """

    alpha: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", _check_non_negative("alpha", self.alpha))


@dataclass(frozen=True)
class SimulatedBinaryOptions(OperatorOptions):
    """Options for unbounded simulated binary crossover.

    Attributes:
        eta: Distribution index. Higher values keep offspring closer to parents.
    """

    eta: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "eta", _check_non_negative("eta", self.eta))


@dataclass(frozen=True)
class BoundedSimulatedBinaryOptions(OperatorOptions):
    """Options for bounded simulated binary crossover.

    Attributes:
        probability: Chance that a pair is crossed at all.
        lower_bound: Lower bound of the search space (scalar or per gene).
        upper_bound: Upper bound of the search space (scalar or per gene).
        eta: Distribution index.
    """

    probability: float
    lower_bound: Bound
    upper_bound: Bound
    eta: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))
        object.__setattr__(self, "lower_bound", _as_bound("lower_bound", self.lower_bound))
        object.__setattr__(self, "upper_bound", _as_bound("upper_bound", self.upper_bound))
        object.__setattr__(self, "eta", _check_non_negative("eta", self.eta))
        _check_bounds(self.lower_bound, self.upper_bound)


@dataclass(frozen=True)
class ReplaceUniformOptions(OperatorOptions):
    """Options for uniform replacement mutation.

    Attributes:
        probability: Chance that a gene is mutated.
        min: Lower end of the replacement range.
        max: Upper end of the replacement range.
    """

    probability: float
    min: float
    max: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))
        object.__setattr__(self, "min", _check_real("min", self.min))
        object.__setattr__(self, "max", _check_real("max", self.max))
        if self.min > self.max:
            raise InvalidArgument(f"min ({self.min}) must not exceed max ({self.max})")


@dataclass(frozen=True)
class BitFlipOptions(OperatorOptions):
    """Options for bit-flip mutation.

    Attributes:
        probability: Chance that a gene is flipped.
    """

    probability: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))


@dataclass(frozen=True)
class ShiftGaussianOptions(OperatorOptions):
    """Options for Gaussian shift mutation.

    Attributes:
        probability: Chance that a gene is shifted.
        sigma: Standard deviation of the shift.
    """

    probability: float
    sigma: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))
        object.__setattr__(self, "sigma", _check_non_negative("sigma", self.sigma))


@dataclass(frozen=True)
class BoundedPolynomialOptions(OperatorOptions):
    """Options for bounded polynomial mutation.

    Attributes:
        probability: Chance that a gene is mutated.
        lower_bound: Lower bound of the search space (scalar or per gene).
        upper_bound: Upper bound of the search space (scalar or per gene).
        eta: Distribution index. Higher values give smaller perturbations.
    """

    probability: float
    lower_bound: Bound
    upper_bound: Bound
    eta: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "probability", _check_probability("probability", self.probability))
        object.__setattr__(self, "lower_bound", _as_bound("lower_bound", self.lower_bound))
        object.__setattr__(self, "upper_bound", _as_bound("upper_bound", self.upper_bound))
        object.__setattr__(self, "eta", _check_non_negative("eta", self.eta))
        _check_bounds(self.lower_bound, self.upper_bound)
