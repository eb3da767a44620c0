import numbers
from enum import IntEnum
from ..errors import UnsupportedOrder


class PolynomialOrder(IntEnum):
    """
    Polynomial augmentation of the interpolant.

    The order counts polynomial degrees up to ``order - 1``: ``NONE`` adds no
    terms, ``CONSTANT`` adds one constant term and ``AFFINE`` adds a constant
    plus one linear term per coordinate.
    """

    NONE = 0
    CONSTANT = 1
    AFFINE = 2

    @classmethod
    def coerce(cls, order):
        """Return ``order`` as a PolynomialOrder, raising UnsupportedOrder otherwise."""
        if isinstance(order, cls):
            return order
        if isinstance(order, bool) or not isinstance(order, numbers.Integral):
            raise UnsupportedOrder("Polynomial order must be 0, 1 or 2, got {!r}.".format(order))
        try:
            return cls(int(order))
        except ValueError as exc:
            raise UnsupportedOrder("Polynomial order must be 0, 1 or 2, got {}; higher order "
                                   "polynomials are not supported.".format(order)) from exc


def polynomial_terms(order, d):
    """Number of polynomial columns appended for ``order`` in ``d`` dimensions."""
    order = PolynomialOrder.coerce(order)
    if order == PolynomialOrder.NONE:
        return 0
    if order == PolynomialOrder.CONSTANT:
        return 1
    return 1 + d


def augmented_size(n, d, order):
    """Size n' of the augmented system for n centers in d dimensions."""
    return n + polynomial_terms(order, d)


def order_from_size(n_aug, n, d):
    """Recover the polynomial order from an augmented size, or None if inconsistent."""
    for order in PolynomialOrder:
        if augmented_size(n, d, order) == n_aug:
            return order
    return None
