import numpy as np


def v_matrix(values, n_aug):
    """
    Augment the sample values to the right-hand side of the interpolation system.

    Parameters
    ----------
    values : ndarray of shape (N, M)
        One row of M output channels per center.

    n_aug : int
        Size of the augmented system, at least N.

    Returns
    -------
    v_ : ndarray of shape (n_aug, M)
        ``values`` followed by ``n_aug - N`` rows of zeros, one per polynomial
        term. The zero rows enforce the moment conditions that tie the
        polynomial part to the radial part.
    """
    n = values.shape[0]
    if n_aug < n:
        raise ValueError("Augmented size {} is smaller than the number of values {}.".format(n_aug, n))
    v_ = np.zeros((n_aug, values.shape[1]))
    v_[:n, :] = values
    return v_
