import numpy as np
from tqdm import trange
from .config import get_settings
from .core.basis import PolyHarmonic, is_basis
from .core.m_matrix import radial_vectors
from .core.polynomial import PolynomialOrder, order_from_size
from .core.vectors import as_points, as_vector
from .errors import DimensionMismatch, InvalidBasisParameter, NonFiniteValue
from .kernel.kernel import Kernel
from .solver.solver import Solver


def _frozen(array):
    array = np.array(array, dtype=np.float64)
    array.flags.writeable = False
    return array


class Interpolant:
    """
    Immutable radial basis function interpolant.

    An Interpolant bundles a basis function, the interpolation centers and the
    solved coefficient matrix. It is created in one step by :meth:`create`
    (or :func:`scatter.construct`) and never changes afterwards; its arrays
    are private read-only copies, so it may be evaluated from any number of
    threads at once.

    Parameters
    ----------
    basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric
        The radial basis function family.

    centers : array_like of shape (N, D)
        Interpolation centers.

    deltas : array_like of shape (M, n')
        Coefficient matrix, one row per output channel. The number of
        columns n' determines the polynomial order: N (none), N + 1
        (constant) or N + 1 + D (affine).
    """

    __slots__ = ("_basis", "_centers", "_deltas", "_order")

    def __init__(self, basis, centers, deltas):
        if not is_basis(basis):
            raise InvalidBasisParameter("Unknown basis kind: {!r}.".format(basis))
        centers = as_points(centers, name="centers")
        deltas = as_points(deltas, name="deltas")
        order = order_from_size(deltas.shape[1], centers.shape[0], centers.shape[1])
        if order is None:
            raise DimensionMismatch("Coefficient matrix has {} columns, which matches no polynomial order "
                                    "for {} centers in {} dimension(s).".format(deltas.shape[1], centers.shape[0],
                                                                               centers.shape[1]))
        object.__setattr__(self, "_basis", basis)
        object.__setattr__(self, "_centers", _frozen(centers))
        object.__setattr__(self, "_deltas", _frozen(deltas))
        object.__setattr__(self, "_order", order)

    def __setattr__(self, name, value):
        raise AttributeError("Interpolant is immutable; construct a new one instead.")

    def __delattr__(self, name):
        raise AttributeError("Interpolant is immutable; construct a new one instead.")

    @classmethod
    def create(cls, centers, values, basis=PolyHarmonic(1), order=0, **kwargs):
        """
        Fit an interpolant through scattered samples.

        Parameters
        ----------
        centers : array_like of shape (N, D)
            Sample locations.

        values : array_like of shape (N, M)
            Sample values, one row per center.

        basis : PolyHarmonic, Gaussian, MultiQuadric or InverseMultiQuadric, optional
            The radial basis function family. Default is ``PolyHarmonic(1)``.

        order : int or PolynomialOrder, optional
            Polynomial augmentation: 0 (none), 1 (constant) or 2 (affine).
            Default is 0.

        kwargs : dict
            ``singular_rcond`` and ``warn_rcond`` overrides passed to the
            :class:`~scatter.solver.solver.Solver`.

        Returns
        -------
        interpolant : Interpolant

        Raises
        ------
        ConstructError
            One of DimensionMismatch, NonFiniteValue, UnsupportedOrder,
            InvalidBasisParameter or SingularSystem.
        """
        kernel = Kernel(centers, values, basis, order)
        solver = Solver(kernel, **kwargs)
        deltas = solver.solve()
        return cls(kernel.basis, kernel.centers, deltas)

    @property
    def basis(self):
        return self._basis

    @property
    def centers(self):
        return self._centers

    @property
    def deltas(self):
        return self._deltas

    @property
    def order(self):
        return self._order

    @property
    def n_centers(self):
        return self._centers.shape[0]

    @property
    def dimension(self):
        return self._centers.shape[1]

    @property
    def n_outputs(self):
        return self._deltas.shape[0]

    @property
    def n_terms(self):
        return self._deltas.shape[1]

    def basis_vectors(self, points):
        """
        Build the basis vector of every row of ``points``.

        Parameters
        ----------
        points : ndarray of shape (K, D)

        Returns
        -------
        b : ndarray of shape (K, n')
            Radial values against each center, then 1 for the constant term
            and the raw coordinates for the affine terms when present.
        """
        n = self.n_centers
        b = np.empty((points.shape[0], self.n_terms))
        b[:, :n] = radial_vectors(points, self._centers, self._basis)
        if self._order >= PolynomialOrder.CONSTANT:
            b[:, n] = 1.0
        if self._order == PolynomialOrder.AFFINE:
            b[:, n + 1:] = points
        return b

    def eval(self, point):
        """
        Evaluate the interpolant at a single point.

        Parameters
        ----------
        point : array_like of shape (D,)

        Returns
        -------
        value : ndarray of shape (M,)

        Raises
        ------
        DimensionMismatch
            If ``point`` is not a flat vector of the interpolant's dimension.

        NonFiniteValue
            If ``point`` contains NaN or infinite entries.
        """
        point = as_vector(point, size=self.dimension, name="point")
        return self.basis_vectors(point[np.newaxis, :])[0] @ self._deltas.T

    def __call__(self, points, chunk_size=None, progress=None):
        """
        Evaluate the interpolant at a point or set of points.

        Parameters
        ----------
        points : array_like of shape (..., D)
            A single point or any stack of points.

        chunk_size : int, optional
            Points evaluated per block. Defaults to the active settings.

        progress : bool, optional
            Show a progress bar over blocks. Defaults to the active settings.

        Returns
        -------
        values : ndarray of shape (..., M)
        """
        try:
            points = np.asarray(points, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise DimensionMismatch("points must be a rectangular array of numbers.") from exc
        if points.ndim == 1:
            return self.eval(points)
        if points.ndim == 0 or points.shape[-1] != self.dimension:
            raise DimensionMismatch("Points must have shape (..., {}), got {}.".format(self.dimension,
                                                                                      points.shape))
        if not np.all(np.isfinite(points)):
            raise NonFiniteValue("points contains NaN or infinite entries.")
        settings = get_settings()
        chunk_size = settings.chunk_size if chunk_size is None else int(chunk_size)
        progress = settings.progress if progress is None else progress
        if chunk_size < 1:
            raise ValueError("chunk_size must be a positive integer.")
        batch_shape = points.shape[:-1]
        flat = points.reshape(-1, self.dimension)
        values = np.empty((flat.shape[0], self.n_outputs))
        for start in trange(0, flat.shape[0], chunk_size, desc='Evaluating interpolant', unit='chunk',
                            leave=False, disable=not progress):
            stop = start + chunk_size
            values[start:stop] = self.basis_vectors(flat[start:stop]) @ self._deltas.T
        return values.reshape(batch_shape + (self.n_outputs,))

    def __repr__(self):
        return "Interpolant(basis={!r}, n_centers={}, dimension={}, n_outputs={}, order={})".format(
            self._basis, self.n_centers, self.dimension, self.n_outputs, self._order.name)


def construct(centers, values, basis=PolyHarmonic(1), order=0):
    """Fit an :class:`Interpolant`; see :meth:`Interpolant.create`."""
    return Interpolant.create(centers, values, basis=basis, order=order)


def evaluate(interpolant, point):
    """Evaluate ``interpolant`` at one point; see :meth:`Interpolant.eval`."""
    return interpolant.eval(point)
