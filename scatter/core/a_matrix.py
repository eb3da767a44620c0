import numpy as np
from .m_matrix import m_matrix
from .n_matrix import n_matrix


def a_matrix(centers, basis, order=0, means=None):
    """
    Construct the augmented interpolation matrix for RBF interpolation.

    This function builds the square matrix `A` whose solution against the
    augmented sample values gives the interpolation coefficients. `A` is
    assembled from the radial block `M` and the polynomial block `N`.

    Parameters
    ----------
    centers : ndarray of shape (n_centers, dim)
        Coordinates of the interpolation centers. Each row corresponds to a
        point in D-dimensional space.

    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric
        The radial basis function family.

    order : int or PolynomialOrder, optional
        Polynomial augmentation: 0 (none), 1 (constant) or 2 (affine).
        Default is 0.

    means : ndarray of shape (dim,), optional
        Centroid used to translate the affine columns (order 2 only).

    Returns
    -------
    A : ndarray of shape (n', n')
        The symmetric augmented matrix, where n' is n_centers, n_centers + 1 or
        n_centers + 1 + dim for order 0, 1 and 2 respectively.

    Notes
    -----
    The full matrix `A` is assembled as:

    .. math::

        A = \\begin{bmatrix}
                M & N \\\\
                N^T & 0
            \\end{bmatrix}

    where the zero block is of appropriate size to complete the matrix. With
    order 0 `N` is empty and `A` reduces to `M`.

    Examples
    --------
    .. code-block:: python

        import numpy as np
        from scatter.core.basis import PolyHarmonic
        from scatter.core.a_matrix import a_matrix

        centers = np.array([[0.0], [1.0], [2.0]])
        A = a_matrix(centers, PolyHarmonic(1), order=1)
        print(A)
        # [[0. 1. 2. 1.]
        #  [1. 0. 1. 1.]
        #  [2. 1. 0. 1.]
        #  [1. 1. 1. 0.]]

    See Also
    --------
    :func:`scatter.core.m_matrix.m_matrix` : The radial block.
    :func:`scatter.core.n_matrix.n_matrix` : The polynomial block.

    """
    n = centers.shape[0]
    m_ = m_matrix(centers, basis)
    n_ = n_matrix(centers, order, means=means)
    t = n_.shape[1]
    a_ = np.zeros((n + t, n + t))
    a_[:n, :n] = m_
    a_[:n, n:] = n_
    a_[n:, :n] = n_.T
    return a_
