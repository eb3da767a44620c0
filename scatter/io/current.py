"""
Process-wide "current interpolant" slot for hosts that need a single shared instance.

Library code should pass :class:`~scatter.interpolant.Interpolant` objects
around explicitly. Some hosts (for example a browser binding that calls
``get_interpolant`` once and ``get_values`` many times) instead want one
shared instance. The slot below holds a reference that is replaced as a
whole under a lock; readers take a single reference read and so always see
either the old or the new interpolant, never a mix.
"""
from __future__ import annotations

import threading
from typing import List, Optional, Sequence

import numpy as np

from ..core.basis import PolyHarmonic
from ..errors import NotInitialized
from ..interpolant import Interpolant
from .. import telemetry
from .marshal import basis_from_spec, from_vector, to_points, to_vector


class CurrentInterpolant:
    """A versioned, atomically swapped reference to one Interpolant."""

    def __init__(self):
        self._lock = threading.Lock()
        self._interpolant: Optional[Interpolant] = None
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def set(self, interpolant: Interpolant) -> int:
        """Publish ``interpolant`` and return the new version number."""
        if not isinstance(interpolant, Interpolant):
            raise TypeError("Expected an Interpolant, got {}.".format(type(interpolant).__name__))
        with self._lock:
            self._interpolant = interpolant
            self._version += 1
            return self._version

    def clear(self) -> None:
        with self._lock:
            self._interpolant = None
            self._version += 1

    def get(self) -> Interpolant:
        interpolant = self._interpolant
        if interpolant is None:
            raise NotInitialized("No interpolant has been set; construct one first.")
        return interpolant

    def evaluate(self, point) -> np.ndarray:
        return self.get().eval(point)


_CURRENT = CurrentInterpolant()


def set_current(interpolant: Interpolant) -> int:
    return _CURRENT.set(interpolant)


def clear_current() -> None:
    _CURRENT.clear()


def current_version() -> int:
    return _CURRENT.version


def get_current() -> Interpolant:
    return _CURRENT.get()


def evaluate_current(point) -> np.ndarray:
    """
    Evaluate the shared interpolant at ``point``.

    Raises
    ------
    NotInitialized
        If no interpolant has been published yet.
    """
    return _CURRENT.evaluate(point)


def get_interpolant(xs: Sequence[Sequence[float]], ys: Sequence[Sequence[float]],
                    basis=PolyHarmonic(1), order: int = 0) -> int:
    """
    Fit an interpolant from host data and publish it as the current one.

    Parameters
    ----------
    xs : sequence of sequences of float
        Centers, one coordinate vector per sample.
    ys : sequence of sequences of float
        Values, one vector per sample.
    basis : basis or basis specification, optional
        Anything accepted by :func:`~scatter.io.marshal.basis_from_spec`.
        Default is ``PolyHarmonic(1)``.
    order : int, optional
        Polynomial order, default 0.

    Returns
    -------
    version : int
        Version number of the newly published interpolant.

    Notes
    -----
    Construction happens entirely before the swap, so a failure leaves any
    previously published interpolant in place. The failure is reported to
    telemetry (when enabled) and re-raised.
    """
    try:
        interpolant = Interpolant.create(to_points(xs, name="centers"), to_points(ys, name="values"),
                                         basis=basis_from_spec(basis), order=order)
    except Exception as exc:
        telemetry.capture_exception(exc)
        raise
    return set_current(interpolant)


def get_values(point: Sequence[float]) -> List[float]:
    """Evaluate the current interpolant at a host point and return a list of floats."""
    return from_vector(evaluate_current(to_vector(point)))
