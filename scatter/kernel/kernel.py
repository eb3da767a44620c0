import numpy as np
from ..core.a_matrix import a_matrix
from ..core.v_matrix import v_matrix
from ..core.basis import is_basis
from ..core.polynomial import PolynomialOrder, augmented_size
from ..core.vectors import as_points, centroid
from ..errors import DimensionMismatch, InvalidBasisParameter


class Kernel:
    r"""
    Kernel class for radial basis function interpolation.

    This class holds one validated interpolation problem: the centers, the
    sample values, the basis function, the polynomial order and the augmented
    system :math:`A \Delta^T = V'` assembled from them. It performs no solve;
    see :class:`~scatter.solver.solver.Solver`.

    Parameters
    ----------
    centers : array_like of shape (N, D)
        Interpolation centers, one per row.

    values : array_like of shape (N, M)
        Sample values, one row of M output channels per center.

    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric
        The radial basis function family.

    order : int or PolynomialOrder, optional
        Polynomial augmentation: 0 (none), 1 (constant) or 2 (affine).
        Default is 0.

    Attributes
    ----------
    n : int
        Number of centers (N).

    d : int
        Dimension of the coordinate space (D).

    m : int
        Number of output channels (M).

    n_aug : int
        Size of the augmented system (n').

    means : ndarray of shape (D,) or None
        Centroid of the centers when ``order`` is affine, otherwise None.

    a_ : ndarray of shape (n', n')
        The augmented interpolation matrix :math:`A`.

    v_ : ndarray of shape (n', M)
        The augmented right-hand side :math:`V'`.

    Raises
    ------
    DimensionMismatch
        If centers or values are not rectangular two-dimensional arrays or
        their row counts differ.

    NonFiniteValue
        If any coordinate or value is NaN or infinite.

    UnsupportedOrder
        If ``order`` is not 0, 1 or 2.

    InvalidBasisParameter
        If ``basis`` is not one of the supported kinds.
    """

    def __init__(self, centers, values, basis, order=0):
        self.order = PolynomialOrder.coerce(order)
        if not is_basis(basis):
            raise InvalidBasisParameter("Unknown basis kind: {!r}.".format(basis))
        self.basis = basis
        self.centers = as_points(centers, name="centers")
        self.values = as_points(values, name="values")
        if self.values.shape[0] != self.centers.shape[0]:
            raise DimensionMismatch("Got {} centers but {} values.".format(
                self.centers.shape[0], self.values.shape[0]))
        self.n = self.centers.shape[0]
        self.d = self.centers.shape[1]
        self.m = self.values.shape[1]
        self.n_aug = augmented_size(self.n, self.d, self.order)
        if self.order == PolynomialOrder.AFFINE:
            self.means = centroid(self.centers)
        else:
            self.means = None
        self.a_ = a_matrix(self.centers, self.basis, self.order, means=self.means)
        self.v_ = v_matrix(self.values, self.n_aug)

    def reciprocal_condition(self):
        """
        Reciprocal 2-norm condition number of :math:`A`.

        Returns 0.0 for an exactly singular matrix and values close to 1 for a
        well conditioned one.
        """
        s = np.linalg.svd(self.a_, compute_uv=False)
        if s[0] == 0 or not np.all(np.isfinite(s)):
            return 0.0
        return float(s[-1] / s[0])

    def __repr__(self):
        return "Kernel(n={}, d={}, m={}, basis={!r}, order={})".format(
            self.n, self.d, self.m, self.basis, int(self.order))
