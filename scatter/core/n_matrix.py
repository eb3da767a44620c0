import numpy as np
from .polynomial import PolynomialOrder, polynomial_terms


def n_matrix(centers, order, means=None):
    r"""
    Construct the polynomial block N of the interpolation matrix.

    This function computes the N matrix which appends constant and affine terms
    to the radial interpolant so that constant (order 1) or affine (order 2)
    functions are reproduced exactly.

    Parameters
    ----------
    centers : ndarray of shape (N, D)
        Coordinates of the interpolation centers.

    order : int or PolynomialOrder
        0 for no polynomial terms, 1 for a constant term, 2 for constant and
        affine terms.

    means : ndarray of shape (D,), optional
        Centroid subtracted from the coordinates in the affine columns. Only
        used when ``order`` is 2; defaults to the origin.

    Returns
    -------
    n_ : ndarray of shape (N, T)
        The polynomial block, where T is 0, 1 or D + 1 depending on ``order``.

    Notes
    -----
    The N matrix is constructed as follows:

    .. math::

        N_{i, 0} = 1

        N_{i, 1 + j} = x_i^{(j)} - \bar{x}^{(j)}, \quad j = 0, \dots, D-1

    where :math:`\bar{x}` is the centroid of the centers. Translating the affine
    columns to the centroid does not change the fitted function; it keeps the
    entries of N small relative to M and improves the conditioning of
    :math:`A`. The translation is undone on the solved coefficients by
    :class:`scatter.solver.solver.Solver`.

    Examples
    --------
    .. code-block:: python

        import numpy as np
        from scatter.core.n_matrix import n_matrix

        centers = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 2.0]])
        n_matrix(centers, 2, means=centers.mean(axis=0))
        # array([[ 1.        , -0.66666667, -0.66666667],
        #        [ 1.        ,  1.33333333, -0.66666667],
        #        [ 1.        , -0.66666667,  1.33333333]])

    """
    n = centers.shape[0]
    d = centers.shape[1]
    order = PolynomialOrder.coerce(order)
    n_ = np.zeros((n, polynomial_terms(order, d)))
    if order >= PolynomialOrder.CONSTANT:
        n_[:, 0] = 1
    if order == PolynomialOrder.AFFINE:
        if means is None:
            means = np.zeros(d)
        n_[:, 1:] = centers - means
    return n_
