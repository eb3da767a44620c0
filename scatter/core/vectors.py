import numpy as np
from ..errors import DimensionMismatch, NonFiniteValue


def as_points(data, name="points"):
    """
    Coerce ``data`` to a finite float64 array of shape (n, d) with n, d >= 1.

    Parameters
    ----------
    data : array_like
        Nested sequence or array of coordinates, one row per point.

    name : str, optional
        Label used in error messages.

    Returns
    -------
    points : ndarray of shape (n, d)
        A contiguous float64 copy of the input.

    Raises
    ------
    DimensionMismatch
        If the rows are ragged, the array is not two-dimensional, or either
        axis is empty.

    NonFiniteValue
        If any entry is NaN or infinite.
    """
    try:
        points = np.array(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DimensionMismatch("{} must be a rectangular array of numbers.".format(name)) from exc
    if points.ndim != 2:
        raise DimensionMismatch("{} must be two-dimensional (n, d), got {} dimension(s).".format(
            name, points.ndim))
    if points.shape[0] < 1:
        raise DimensionMismatch("{} must contain at least one row.".format(name))
    if points.shape[1] < 1:
        raise DimensionMismatch("{} must have at least one column.".format(name))
    if not np.all(np.isfinite(points)):
        raise NonFiniteValue("{} contains NaN or infinite entries.".format(name))
    return np.ascontiguousarray(points)


def as_vector(data, size=None, name="point"):
    """
    Coerce ``data`` to a finite one-dimensional float64 array.

    When ``size`` is given the vector must have exactly that many entries.
    """
    try:
        vector = np.array(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DimensionMismatch("{} must be a flat sequence of numbers.".format(name)) from exc
    if vector.ndim != 1:
        raise DimensionMismatch("{} must be one-dimensional, got {} dimension(s).".format(name, vector.ndim))
    if size is not None and vector.shape[0] != size:
        raise DimensionMismatch("{} has dimension {}, expected {}.".format(name, vector.shape[0], size))
    if not np.all(np.isfinite(vector)):
        raise NonFiniteValue("{} contains NaN or infinite entries.".format(name))
    return vector


def centroid(points):
    """Per-dimension mean of the rows of ``points``."""
    return np.mean(points, axis=0)
