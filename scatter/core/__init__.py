"""
The `core` module provides the building blocks of radial basis function (RBF) scattered-data interpolation: the basis
function family and the assembly of the augmented linear system whose solution gives the interpolation coefficients.

- **basis**: The closed family of radial kernels (polyharmonic, Gaussian, multiquadric, inverse multiquadric).
- **m_matrix**: Constructs the radial block :math:`M` from pairwise center distances.
- **n_matrix**: Constructs the polynomial block :math:`N` (constant and affine terms).
- **a_matrix**: Assembles the full augmented matrix :math:`A`.
- **v_matrix**: Pads the sample values into the augmented right-hand side :math:`V'`.
- **polynomial**: The polynomial order enumeration and the augmented system size.
- **vectors**: Coercion and validation of coordinate and value arrays.

Overview
--------

Given :math:`N` centers :math:`\\mathbf{x}_i \\in \\mathbb{R}^D` and sample values :math:`\\mathbf{y}_i \\in
\\mathbb{R}^M`, the interpolant has the form

.. math::

    s(\\mathbf{x}) = \\sum_{i=0}^{N-1} \\lambda_i \\phi(\\| \\mathbf{x} - \\mathbf{x}_i \\|) + p(\\mathbf{x})

where :math:`p` is empty, a constant, or an affine function depending on the polynomial order. The coefficients
solve

.. math::

    \\begin{bmatrix}
        M & N \\\\
        N^T & 0
    \\end{bmatrix}
    \\begin{bmatrix} \\lambda \\\\ c \\end{bmatrix}
    =
    \\begin{bmatrix} Y \\\\ 0 \\end{bmatrix}

The zero rows of the right-hand side are the moment conditions :math:`N^T \\lambda = 0` which make the polynomial
part unique and guarantee exact reproduction of polynomials up to the chosen order.

Examples
--------

.. code-block:: python

    import numpy as np
    from scipy.linalg import solve
    from scatter.core import a_matrix, v_matrix, augmented_size, PolyHarmonic

    centers = np.random.rand(20, 2)
    values = np.sin(centers[:, :1])

    A = a_matrix(centers, PolyHarmonic(2), order=2, means=centers.mean(axis=0))
    V = v_matrix(values, augmented_size(20, 2, 2))
    coefficients = solve(A, V)

See Also
--------

  :class:`~scatter.kernel.kernel.Kernel` : Validated construction problem built from these blocks.
  :class:`~scatter.solver.solver.Solver` : Solves the system and undoes the centroid translation.

"""
from .basis import (PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric, BASIS_KINDS,
                    evaluate_basis, is_basis, ORIGIN_TOLERANCE)
from .polynomial import PolynomialOrder, augmented_size, polynomial_terms, order_from_size
from .m_matrix import m_matrix, radial_vectors
from .n_matrix import n_matrix
from .a_matrix import a_matrix
from .v_matrix import v_matrix
from .vectors import as_points, as_vector, centroid
