"""Exception and warning types raised by scatter.

Every failure of construction or evaluation is reported with one of the
classes below. Construction failures derive from :class:`ConstructError`,
evaluation failures from :class:`EvaluateError`; both are also ``ValueError``
subclasses so that callers treating bad input generically keep working.

>>> from scatter import construct, Gaussian
>>> from scatter.errors import ConstructError
>>> try:
...     construct([[0.0], [0.0]], [[1.0], [2.0]], Gaussian(1.0))
... except ConstructError as exc:
...     print(type(exc).__name__)
SingularSystem
"""

from __future__ import annotations


class ScatterError(Exception):
    """Base class for every error raised by scatter."""


class ConstructError(ScatterError, ValueError):
    """Raised when an interpolant cannot be constructed from the given data."""


class EvaluateError(ScatterError, ValueError):
    """Raised when an interpolant cannot be evaluated at the given point."""


class DimensionMismatch(ConstructError, EvaluateError):
    """Inconsistent center/value shapes, or a point of the wrong dimension."""


class NonFiniteValue(ConstructError, EvaluateError):
    """A coordinate or sample value is NaN or infinite."""


class UnsupportedOrder(ConstructError):
    """Polynomial order outside {0, 1, 2}."""


class InvalidBasisParameter(ConstructError):
    """Unknown basis kind or an out-of-range basis parameter."""


class SingularSystem(ConstructError):
    """The augmented interpolation matrix is not invertible."""


class NotInitialized(EvaluateError):
    """The shared current interpolant was read before it was ever set."""


class ConfigurationError(ScatterError, ValueError):
    """Raised when a setting or environment override is malformed."""


class IllConditionedWarning(RuntimeWarning):
    """The interpolation matrix is invertible but close to singular."""
