import warnings
import numpy as np
from scipy import linalg
from ..config import get_settings
from ..core.polynomial import PolynomialOrder
from ..errors import SingularSystem, IllConditionedWarning


class Solver:
    """
    This class solves the augmented interpolation system held by a kernel.

    Parameters
    ----------
    kernel : Kernel
        The assembled interpolation problem.

    singular_rcond : float, optional
        Reciprocal condition number at or below which the system is
        singular. Defaults to the active settings, and when those leave it
        unset, to n' times machine epsilon.

    warn_rcond : float, optional
        Reciprocal condition number below which an IllConditionedWarning is
        emitted. Defaults to the active settings.
    """

    def __init__(self, kernel, singular_rcond=None, warn_rcond=None):
        settings = get_settings()
        self.kernel = kernel
        self.singular_rcond = settings.singular_rcond if singular_rcond is None else singular_rcond
        self.warn_rcond = settings.warn_rcond if warn_rcond is None else warn_rcond
        self.rcond = None
        self.deltas = None

    def solve(self):
        """
        Solve for the coefficient matrix.

        Returns
        -------
        deltas : ndarray of shape (M, n')
            One row of coefficients per output channel: the radial weights
            followed by the constant and affine coefficients, expressed for
            untranslated coordinates.

        Raises
        ------
        SingularSystem
            If the augmented matrix is numerically singular.
        """
        kernel = self.kernel
        self.rcond = kernel.reciprocal_condition()
        threshold = self.singular_rcond
        if threshold is None:
            threshold = kernel.n_aug * np.finfo(kernel.a_.dtype).eps
        if not self.rcond > threshold:
            raise SingularSystem("Interpolation matrix is singular (reciprocal condition {:.3e}); check for "
                                 "duplicate or degenerate centers.".format(self.rcond))
        if self.rcond < self.warn_rcond:
            warnings.warn("Interpolation matrix is ill-conditioned (reciprocal condition {:.3e}); "
                          "results may be inaccurate.".format(self.rcond), IllConditionedWarning, stacklevel=2)
        with warnings.catch_warnings():
            warnings.simplefilter("error", linalg.LinAlgWarning)
            try:
                solution = linalg.solve(kernel.a_, kernel.v_, assume_a="sym")
            except (linalg.LinAlgError, linalg.LinAlgWarning) as exc:
                raise SingularSystem("Interpolation matrix could not be factorised: {}".format(exc)) from exc
        deltas = solution.T.copy()
        if kernel.order == PolynomialOrder.AFFINE:
            n = kernel.n
            deltas[:, n] -= deltas[:, n + 1:] @ kernel.means
        self.deltas = deltas
        return deltas

    def get_constants(self):
        """Return the solved coefficients, solving first if necessary."""
        if self.deltas is None:
            return self.solve()
        return self.deltas
