r"""
Radial basis function families.

A basis is one of four immutable kinds, each a pure function of a
non-negative distance :math:`r`:

=========================  ==========================================
Kind                       :math:`\phi(r)`
=========================  ==========================================
``PolyHarmonic(k)``        :math:`r^k \ln r` (k even), :math:`r^k` (k odd)
``Gaussian(c)``            :math:`\exp(-(r/c)^2)`
``MultiQuadric(c)``        :math:`\sqrt{r^2 + c^2}`
``InverseMultiQuadric(c)`` :math:`(r^2 + c^2)^{-1/2}`
=========================  ==========================================

Parameters are validated when the basis is created, so an invalid shape
parameter never reaches the interpolation matrix.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

import numpy as np

from ..errors import InvalidBasisParameter

# Below this distance the even polyharmonic kernel is taken as its limit, 0.
ORIGIN_TOLERANCE = 1e-12


def _check_scale(kind, scale):
    if isinstance(scale, bool) or not isinstance(scale, numbers.Real):
        raise InvalidBasisParameter(f"{kind} scale must be a real number, got {scale!r}.")
    if not np.isfinite(scale) or scale <= 0:
        raise InvalidBasisParameter(f"{kind} scale must be finite and positive, got {scale!r}.")


@dataclass(frozen=True)
class PolyHarmonic:
    """Polyharmonic spline :math:`r^k` (odd k) or :math:`r^k \\ln r` (even k)."""

    order: int

    def __post_init__(self):
        if isinstance(self.order, bool) or not isinstance(self.order, numbers.Integral):
            raise InvalidBasisParameter(f"PolyHarmonic order must be an integer, got {self.order!r}.")
        if self.order < 1:
            raise InvalidBasisParameter(f"PolyHarmonic order must be at least 1, got {self.order}.")
        object.__setattr__(self, "order", int(self.order))

    def eval(self, r):
        return evaluate_basis(self, r)


@dataclass(frozen=True)
class Gaussian:
    """Gaussian kernel :math:`\\exp(-(r/c)^2)`."""

    scale: float

    def __post_init__(self):
        _check_scale("Gaussian", self.scale)
        object.__setattr__(self, "scale", float(self.scale))

    def eval(self, r):
        return evaluate_basis(self, r)


@dataclass(frozen=True)
class MultiQuadric:
    """Multiquadric kernel :math:`\\sqrt{r^2 + c^2}`."""

    scale: float

    def __post_init__(self):
        _check_scale("MultiQuadric", self.scale)
        object.__setattr__(self, "scale", float(self.scale))

    def eval(self, r):
        return evaluate_basis(self, r)


@dataclass(frozen=True)
class InverseMultiQuadric:
    """Inverse multiquadric kernel :math:`(r^2 + c^2)^{-1/2}`."""

    scale: float

    def __post_init__(self):
        _check_scale("InverseMultiQuadric", self.scale)
        object.__setattr__(self, "scale", float(self.scale))

    def eval(self, r):
        return evaluate_basis(self, r)


Basis = Union[PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric]

BASIS_KINDS = (PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric)


def is_basis(obj):
    return isinstance(obj, BASIS_KINDS)


def evaluate_basis(basis, r):
    """
    Evaluate a radial basis function at one or more distances.

    Parameters
    ----------
    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric
        The basis kind and its parameter.

    r : float or ndarray
        Non-negative distance(s).

    Returns
    -------
    phi : float or ndarray
        :math:`\\phi(r)`, with the same shape as ``r``. A scalar input yields a
        Python float.

    Notes
    -----
    For even polyharmonic orders :math:`r^k \\ln r` is indeterminate at the
    origin; distances below ``ORIGIN_TOLERANCE`` evaluate to exactly 0.
    """
    scalar = np.ndim(r) == 0
    r = np.asarray(r, dtype=np.float64)
    if isinstance(basis, PolyHarmonic):
        k = basis.order
        if k % 2 == 0:
            mask = r >= ORIGIN_TOLERANCE
            log_r = np.log(r, out=np.zeros_like(r), where=mask)
            phi = np.where(mask, np.power(r, k) * log_r, 0.0)
        elif k == 1:
            phi = r.copy()
        else:
            phi = np.power(r, k)
    elif isinstance(basis, Gaussian):
        phi = np.exp(-np.square(r / basis.scale))
    elif isinstance(basis, MultiQuadric):
        phi = np.hypot(r, basis.scale)
    elif isinstance(basis, InverseMultiQuadric):
        phi = np.power(np.square(r) + basis.scale ** 2, -0.5)
    else:
        raise InvalidBasisParameter(f"Unknown basis kind: {basis!r}.")
    if scalar:
        return float(phi)
    return phi
