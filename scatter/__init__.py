"""
scatter: radial basis function interpolation of scattered data.

>>> from scatter import construct, PolyHarmonic
>>> f = construct([[0.0], [1.0], [2.0]], [[0.0], [1.0], [4.0]], PolyHarmonic(1), order=1)
>>> round(float(f.eval([0.5])[0]), 9)
0.5
"""
__version__ = "0.1.0"

from .core.basis import PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric
from .core.polynomial import PolynomialOrder
from .interpolant import Interpolant, construct, evaluate
from .errors import (ScatterError, ConstructError, EvaluateError, DimensionMismatch, NonFiniteValue,
                     UnsupportedOrder, InvalidBasisParameter, SingularSystem, NotInitialized,
                     ConfigurationError, IllConditionedWarning)

__all__ = [
    "PolyHarmonic",
    "Gaussian",
    "MultiQuadric",
    "InverseMultiQuadric",
    "PolynomialOrder",
    "Interpolant",
    "construct",
    "evaluate",
    "ScatterError",
    "ConstructError",
    "EvaluateError",
    "DimensionMismatch",
    "NonFiniteValue",
    "UnsupportedOrder",
    "InvalidBasisParameter",
    "SingularSystem",
    "NotInitialized",
    "ConfigurationError",
    "IllConditionedWarning",
]
