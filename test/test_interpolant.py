import pytest
import numpy as np
from scatter import (construct, evaluate, Interpolant, PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric,
                     PolynomialOrder)
from scatter.errors import DimensionMismatch, NonFiniteValue, InvalidBasisParameter


def _samples(seed=0, n=10, d=2):
    rng = np.random.default_rng(seed)
    centers = rng.uniform(0.0, 3.0, size=(n, d))
    values = np.column_stack([np.sin(centers[:, 0]) + centers[:, 1], np.cos(centers.sum(axis=1))])
    return centers, values


@pytest.mark.parametrize("basis, order", [
    (PolyHarmonic(1), 0),
    (PolyHarmonic(1), 1),
    (PolyHarmonic(1), 2),
    (PolyHarmonic(2), 2),
    (PolyHarmonic(3), 2),
    (Gaussian(1.0), 0),
    (Gaussian(1.0), 1),
    (Gaussian(1.0), 2),
    (MultiQuadric(1.0), 0),
    (MultiQuadric(1.0), 2),
    (InverseMultiQuadric(1.0), 0),
    (InverseMultiQuadric(1.0), 2),
])
def test_interpolant_reproduces_samples(basis, order):
    """
    Test that the interpolant passes through every sample.
    """
    centers, values = _samples()
    f = construct(centers, values, basis, order=order)
    for center, value in zip(centers, values):
        assert np.allclose(f.eval(center), value, atol=1e-8), f"Sample not reproduced for {basis}, order {order}"


def test_interpolant_constant_1d():
    """
    Test a hand-checked 1D interpolant between its centers.
    """
    f = construct([[0.0], [1.0], [2.0]], [[0.0], [1.0], [4.0]], PolyHarmonic(1), order=1)
    assert np.allclose(f.deltas, [[0.5, 1.0, -1.5, 2.0]])
    assert f.eval([0.5]) == pytest.approx([0.5])
    assert evaluate(f, [1.5]) == pytest.approx([2.5])


def test_interpolant_reproduces_affine_functions():
    """
    Test that an affine polynomial term reproduces affine data everywhere.
    """
    rng = np.random.default_rng(4)
    centers = rng.uniform(-1.0, 1.0, size=(12, 3))

    def affine(x):
        return 2.0 - x[..., 0] + 0.5 * x[..., 1] + 3.0 * x[..., 2]

    f = construct(centers, affine(centers)[:, np.newaxis], PolyHarmonic(1), order=2)
    probes = rng.uniform(-1.0, 1.0, size=(20, 3))
    assert np.allclose(f(probes)[:, 0], affine(probes), atol=1e-8)


def test_interpolant_reproduces_constants():
    """
    Test that a constant term reproduces constant data everywhere.
    """
    centers, _ = _samples(seed=5)
    values = np.full((centers.shape[0], 1), 7.25)
    f = construct(centers, values, Gaussian(1.0), order=1)
    probes = np.random.default_rng(6).uniform(0.0, 3.0, size=(15, 2))
    assert np.allclose(f(probes), 7.25, atol=1e-8)


def test_interpolant_properties():
    """
    Test the inspection properties of a constructed interpolant.
    """
    centers, values = _samples()
    f = construct(centers, values, Gaussian(1.0), order=2)
    assert f.basis == Gaussian(1.0)
    assert f.order == PolynomialOrder.AFFINE
    assert (f.n_centers, f.dimension, f.n_outputs, f.n_terms) == (10, 2, 2, 13)
    assert f.deltas.shape == (2, 13)
    assert np.allclose(f.centers, centers)
    assert "Gaussian" in repr(f)


def test_interpolant_is_immutable():
    """
    Test that neither the interpolant nor its arrays can be modified.
    """
    centers, values = _samples()
    f = construct(centers, values, MultiQuadric(1.0))
    with pytest.raises(AttributeError):
        f.basis = Gaussian(1.0)
    with pytest.raises(AttributeError):
        f._deltas = None
    with pytest.raises(ValueError):
        f.deltas[0, 0] = 1.0
    with pytest.raises(ValueError):
        f.centers[0, 0] = 1.0


def test_interpolant_copies_input():
    """
    Test that later changes to the input arrays do not affect the interpolant.
    """
    centers, values = _samples()
    f = construct(centers, values, Gaussian(1.0))
    before = f.eval([1.0, 1.0])
    centers[:] = 0.0
    values[:] = 0.0
    assert np.array_equal(f.eval([1.0, 1.0]), before)


def test_interpolant_deterministic():
    """
    Test that construction and evaluation are deterministic.
    """
    centers, values = _samples()
    f = construct(centers, values, InverseMultiQuadric(1.0), order=1)
    g = construct(centers, values, InverseMultiQuadric(1.0), order=1)
    assert np.array_equal(f.deltas, g.deltas)
    assert np.array_equal(f.eval([0.3, 2.1]), g.eval([0.3, 2.1]))


def test_interpolant_batched_evaluation():
    """
    Test that batched evaluation matches point-wise evaluation for any chunking.
    """
    centers, values = _samples()
    f = construct(centers, values, PolyHarmonic(1), order=2)
    points = np.random.default_rng(7).uniform(0.0, 3.0, size=(4, 5, 2))
    expected = np.array([[f.eval(p) for p in row] for row in points])
    for chunk_size in (1, 3, 7, 100):
        result = f(points, chunk_size=chunk_size)
        assert result.shape == (4, 5, 2), f"Expected shape (4, 5, 2), got {result.shape}"
        assert np.allclose(result, expected)
    assert np.allclose(f(points[0, 0]), expected[0, 0])


def test_interpolant_dimension_guard():
    """
    Test that points of the wrong dimension are rejected.
    """
    f = construct([[0.0], [1.0], [2.0]], [[0.0], [1.0], [4.0]], PolyHarmonic(1), order=1)
    with pytest.raises(DimensionMismatch):
        f.eval([0.5, 0.5])
    with pytest.raises(DimensionMismatch):
        f.eval([])
    with pytest.raises(DimensionMismatch):
        f(np.zeros((3, 2)))
    with pytest.raises(DimensionMismatch):
        f(0.5)


def test_interpolant_non_finite_point():
    """
    Test that NaN and infinite evaluation points are rejected.
    """
    f = construct([[0.0], [1.0], [2.0]], [[0.0], [1.0], [4.0]], PolyHarmonic(1), order=1)
    with pytest.raises(NonFiniteValue):
        f.eval([np.nan])
    with pytest.raises(NonFiniteValue):
        f(np.array([[0.0], [np.inf]]))


def test_interpolant_invalid_basis_parameter():
    """
    Test that an invalid basis parameter fails before any system is built.
    """
    with pytest.raises(InvalidBasisParameter):
        construct([[0.0], [1.0]], [[0.0], [1.0]], Gaussian(0.0))


def test_interpolant_from_coefficients():
    """
    Test building an interpolant directly from a coefficient matrix.
    """
    centers = [[0.0], [1.0], [2.0]]
    f = Interpolant(PolyHarmonic(1), centers, [[0.5, 1.0, -1.5, 2.0]])
    assert f.order == PolynomialOrder.CONSTANT
    assert f.eval([0.5]) == pytest.approx([0.5])
    with pytest.raises(DimensionMismatch):
        Interpolant(PolyHarmonic(1), centers, [[0.5, 1.0, -1.5, 2.0, 1.0, 1.0]])
