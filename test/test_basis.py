import dataclasses
import pytest
import numpy as np
from scatter.core.basis import (PolyHarmonic, Gaussian, MultiQuadric, InverseMultiQuadric, evaluate_basis,
                                ORIGIN_TOLERANCE)
from scatter.errors import InvalidBasisParameter


def test_polyharmonic_even_origin_is_zero():
    """
    Test that even polyharmonic kernels evaluate to exactly 0 at the origin.
    """
    for k in (2, 4, 6):
        value = PolyHarmonic(k).eval(0.0)
        assert value == 0.0, f"PolyHarmonic({k}) at r=0 should be 0, got {value}"
        assert not np.isnan(value)


def test_polyharmonic_even_below_tolerance():
    """
    Test that distances below the origin tolerance are treated as the origin.
    """
    r = np.array([0.0, ORIGIN_TOLERANCE / 10, 1.0, 2.0])
    result = PolyHarmonic(2).eval(r)
    expected = np.array([0.0, 0.0, 0.0, 4.0 * np.log(2.0)])
    assert np.allclose(result, expected)
    assert np.all(np.isfinite(result))


def test_polyharmonic_odd():
    """
    Test the linear and odd polyharmonic kernels.
    """
    assert PolyHarmonic(1).eval(2.5) == 2.5
    assert PolyHarmonic(3).eval(2.0) == pytest.approx(8.0)
    assert PolyHarmonic(5).eval(0.0) == 0.0


def test_gaussian():
    """
    Test the Gaussian kernel exp(-(r/c)^2).
    """
    basis = Gaussian(2.0)
    assert basis.eval(0.0) == 1.0
    assert basis.eval(2.0) == pytest.approx(np.exp(-1.0))


def test_multiquadric():
    """
    Test the multiquadric kernel sqrt(r^2 + c^2).
    """
    basis = MultiQuadric(3.0)
    assert basis.eval(4.0) == pytest.approx(5.0)
    assert basis.eval(0.0) == pytest.approx(3.0)


def test_inverse_multiquadric():
    """
    Test the inverse multiquadric kernel (r^2 + c^2)^(-1/2).
    """
    basis = InverseMultiQuadric(3.0)
    assert basis.eval(4.0) == pytest.approx(0.2)
    assert basis.eval(0.0) == pytest.approx(1.0 / 3.0)


def test_scalar_returns_float():
    """
    Test that a scalar distance produces a Python float.
    """
    assert isinstance(Gaussian(1.0).eval(0.5), float)
    assert isinstance(PolyHarmonic(2).eval(0.5), float)


def test_array_shape_preserved():
    """
    Test that array input keeps its shape.
    """
    r = np.linspace(0.0, 2.0, 6).reshape(2, 3)
    for basis in (PolyHarmonic(1), PolyHarmonic(2), PolyHarmonic(3), Gaussian(1.0), MultiQuadric(1.0),
                  InverseMultiQuadric(1.0)):
        result = basis.eval(r)
        assert result.shape == (2, 3), f"Expected shape (2, 3) for {basis}, got {result.shape}"


@pytest.mark.parametrize("kind", [Gaussian, MultiQuadric, InverseMultiQuadric])
@pytest.mark.parametrize("scale", [0.0, -1.0, np.nan, np.inf, "1.0", None, True])
def test_invalid_scale(kind, scale):
    """
    Test that non-positive, non-finite or non-numeric scales are rejected.
    """
    with pytest.raises(InvalidBasisParameter):
        kind(scale)


@pytest.mark.parametrize("order", [0, -2, 1.5, True, "2"])
def test_invalid_polyharmonic_order(order):
    """
    Test that non-integer or non-positive polyharmonic orders are rejected.
    """
    with pytest.raises(InvalidBasisParameter):
        PolyHarmonic(order)


def test_integer_scale_is_converted():
    """
    Test that integer scales are accepted and stored as floats.
    """
    basis = Gaussian(2)
    assert isinstance(basis.scale, float)
    assert basis == Gaussian(2.0)


def test_basis_is_frozen():
    """
    Test that basis objects cannot be modified after creation.
    """
    basis = MultiQuadric(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        basis.scale = 2.0


def test_unknown_basis():
    """
    Test that evaluate_basis rejects objects outside the basis family.
    """
    with pytest.raises(InvalidBasisParameter):
        evaluate_basis("gaussian", 1.0)
