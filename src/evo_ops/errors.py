"""Error types raised by evo-ops operators.

Both errors subclass ValueError, so callers that already guard operator
calls with ``except ValueError`` keep working.

- InvalidArgument: a missing, unknown or contradictory option, or a value
  outside the range an operator accepts
- ShapeMismatch: arrays whose shapes do not agree with each other or with
  what the operator expects
"""


class InvalidArgument(ValueError):
    """Raised when an operator option or argument is invalid."""


class ShapeMismatch(ValueError):
    """Raised when population, fitness or bounds shapes are inconsistent."""
