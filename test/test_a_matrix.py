import numpy as np
from scatter.core.basis import PolyHarmonic, Gaussian
from scatter.core.a_matrix import a_matrix
from scatter.core.v_matrix import v_matrix
from scatter.core.polynomial import PolynomialOrder, augmented_size, order_from_size


def test_a_matrix_constant_1d():
    """
    Test the augmented matrix for three 1D centers with a constant term.
    """
    centers = np.array([[0.0], [1.0], [2.0]])
    result = a_matrix(centers, PolyHarmonic(1), order=1)
    expected = np.array([[0.0, 1.0, 2.0, 1.0],
                         [1.0, 0.0, 1.0, 1.0],
                         [2.0, 1.0, 0.0, 1.0],
                         [1.0, 1.0, 1.0, 0.0]])
    assert np.allclose(result, expected)


def test_a_matrix_shapes():
    """
    Test the augmented size for each polynomial order.
    """
    np.random.seed(1)
    n, d = 7, 3
    centers = np.random.rand(n, d)
    for order, size in ((0, n), (1, n + 1), (2, n + 1 + d)):
        result = a_matrix(centers, Gaussian(1.0), order=order, means=centers.mean(axis=0))
        assert result.shape == (size, size), f"Expected shape {(size, size)}, got {result.shape}"
        assert size == augmented_size(n, d, order)


def test_a_matrix_affine_structure():
    """
    Test symmetry and the zero polynomial-polynomial block of the affine system.
    """
    np.random.seed(2)
    n, d = 5, 2
    centers = np.random.rand(n, d)
    means = centers.mean(axis=0)
    result = a_matrix(centers, PolyHarmonic(2), order=2, means=means)
    assert np.allclose(result, result.T), "Augmented matrix should be symmetric."
    assert np.all(result[n:, n:] == 0.0), "Polynomial block should be zero."
    assert np.allclose(result[:n, n], 1.0)
    assert np.allclose(result[:n, n + 1:], centers - means)


def test_v_matrix_padding():
    """
    Test that the values are padded with zero rows to the augmented size.
    """
    values = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    result = v_matrix(values, 6)
    assert result.shape == (6, 2)
    assert np.allclose(result[:3], values)
    assert np.all(result[3:] == 0.0)


def test_order_from_size():
    """
    Test that the polynomial order can be recovered from the augmented size.
    """
    assert order_from_size(4, 4, 2) == PolynomialOrder.NONE
    assert order_from_size(5, 4, 2) == PolynomialOrder.CONSTANT
    assert order_from_size(7, 4, 2) == PolynomialOrder.AFFINE
    assert order_from_size(6, 4, 2) is None
