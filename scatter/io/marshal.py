"""
Conversion between host-native nested sequences and scatter's arrays.

Hosts exchange data with scatter as plain nested sequences of 64-bit floats:
an array of arrays for centers and values, a flat array for a single point or
value vector. These helpers are the only place that conversion happens.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import List, Sequence

import numpy as np

from ..core.basis import PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric, is_basis
from ..core.vectors import as_points, as_vector
from ..errors import InvalidBasisParameter

_SCALED_KINDS = {
    "gaussian": Gaussian,
    "multiquadric": MultiQuadric,
    "inverse_multiquadric": InverseMultiQuadric,
}


def to_points(rows: Sequence[Sequence[float]], name: str = "points") -> np.ndarray:
    """Convert an array of arrays to a float64 matrix, one row per entry."""
    return as_points(rows, name=name)


def to_vector(values: Sequence[float], size=None, name: str = "point") -> np.ndarray:
    """Convert a flat sequence to a float64 vector, optionally of a fixed length."""
    return as_vector(values, size=size, name=name)


def from_vector(vector) -> List[float]:
    return [float(v) for v in np.asarray(vector, dtype=np.float64).ravel()]


def from_points(matrix) -> List[List[float]]:
    return np.asarray(matrix, dtype=np.float64).tolist()


def _normalize_kind(kind):
    return str(kind).strip().lower().replace("-", "_").replace(" ", "_")


def basis_from_spec(spec):
    """
    Build a basis from a host-side description.

    Parameters
    ----------
    spec : basis, tuple or mapping
        Either an existing basis object, a ``(kind, parameter)`` pair such as
        ``("gaussian", 0.5)``, or a mapping such as
        ``{"kind": "polyharmonic", "order": 3}`` or
        ``{"kind": "multiquadric", "scale": 2.0}``. Kind names are
        case-insensitive; ``inverse_multiquadric`` may also be written
        ``inverse-multiquadric``.

    Returns
    -------
    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric

    Raises
    ------
    InvalidBasisParameter
        For unknown kinds, missing parameters or out-of-range parameters.
    """
    if is_basis(spec):
        return spec
    if isinstance(spec, Mapping):
        if "kind" not in spec:
            raise InvalidBasisParameter("Basis specification is missing 'kind'.")
        kind = _normalize_kind(spec["kind"])
        key = "order" if kind == "polyharmonic" else "scale"
        if key not in spec:
            raise InvalidBasisParameter("Basis '{}' requires '{}'.".format(kind, key))
        parameter = spec[key]
    elif isinstance(spec, (tuple, list)) and len(spec) == 2:
        kind, parameter = _normalize_kind(spec[0]), spec[1]
    else:
        raise InvalidBasisParameter("Cannot interpret basis specification {!r}.".format(spec))
    if kind == "polyharmonic":
        return PolyHarmonic(parameter)
    if kind in _SCALED_KINDS:
        return _SCALED_KINDS[kind](parameter)
    raise InvalidBasisParameter("Unknown basis kind '{}'.".format(kind))
