from scipy.spatial.distance import cdist
from .basis import evaluate_basis


def m_matrix(centers, basis):
    r"""
    Compute the radial block M of the interpolation matrix.

    The M matrix is an :math:`N \times N` matrix holding the basis function
    evaluated at every pairwise distance between the centers. It is the
    upper-left block of the augmented matrix :math:`A`.

    Parameters
    ----------
    centers : ndarray of shape (N, D)
        Coordinates of the interpolation centers. Each row is one center.

    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric
        The radial basis function family.

    Returns
    -------
    m_ : ndarray of shape (N, N)
        The symmetric radial block.

    Notes
    -----
    The M matrix is computed as:

    .. math::

        M[i, j] = \phi(\| \mathbf{x}_i - \mathbf{x}_j \|)

    where :math:`\phi` is the basis function and the norm is Euclidean. The
    diagonal holds :math:`\phi(0)`, which is 0 for the polyharmonic family,
    1 for the Gaussian, :math:`c` for the multiquadric and :math:`1/c` for the
    inverse multiquadric.

    Examples
    --------
    .. code-block:: python

        import numpy as np
        from scatter.core.basis import PolyHarmonic
        from scatter.core.m_matrix import m_matrix

        centers = np.array([[0.0], [1.0], [2.0]])
        print(m_matrix(centers, PolyHarmonic(1)))
        # [[0. 1. 2.]
        #  [1. 0. 1.]
        #  [2. 1. 0.]]

    """
    return evaluate_basis(basis, cdist(centers, centers))


def radial_vectors(points, centers, basis):
    """
    Basis function values between each of ``points`` and every center.

    Returns an ndarray of shape (K, N) for K points and N centers.
    """
    return evaluate_basis(basis, cdist(points, centers))
